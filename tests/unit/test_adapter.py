"""Unit tests for the spell engine adapter."""

from pathlib import Path

from conftest import FakeDictionary, FakeEngine
from multispell.adapter import SpellEngineAdapter

DIRECTORY = Path("/dicts")


class TestIsMisspelled:
    """Test combining misspelling judgments across dictionaries."""

    def test_empty_active_set_flags_nothing(self, english_engine) -> None:
        """No active dictionaries means no word is misspelled."""
        adapter = SpellEngineAdapter(english_engine)
        assert adapter.is_misspelled("qwzx", [], DIRECTORY) is False

    def test_word_correct_in_one_dictionary_is_not_misspelled(self, english_engine) -> None:
        """A word accepted by any active dictionary is spelled correctly."""
        adapter = SpellEngineAdapter(english_engine)
        assert adapter.is_misspelled("colour", ["en_US", "en_GB"], DIRECTORY) is False

    def test_word_wrong_everywhere_is_misspelled(self, english_engine) -> None:
        """A word rejected by every active dictionary is misspelled."""
        adapter = SpellEngineAdapter(english_engine)
        assert adapter.is_misspelled("colr", ["en_US", "en_GB"], DIRECTORY) is True

    def test_single_dictionary_judgment(self, english_engine) -> None:
        """With one dictionary its judgment is final."""
        adapter = SpellEngineAdapter(english_engine)
        assert adapter.is_misspelled("colour", ["en_US"], DIRECTORY) is True

    def test_unloadable_dictionary_fails_open(self, english_engine) -> None:
        """A dictionary that cannot load never causes a misspelling."""
        adapter = SpellEngineAdapter(english_engine)
        assert adapter.is_misspelled("colr", ["en_US", "broken"], DIRECTORY) is False


class TestCorrections:
    """Test gathering corrections across dictionaries."""

    def test_unions_and_deduplicates_suggestions(self, english_engine) -> None:
        """Suggestions from all dictionaries appear once each."""
        adapter = SpellEngineAdapter(english_engine)
        assert adapter.corrections("colr", ["en_US", "en_GB"], DIRECTORY) == {"color", "colour"}

    def test_includes_suggestions_unique_to_one_dictionary(self, english_engine) -> None:
        """A suggestion offered by only one dictionary is kept."""
        adapter = SpellEngineAdapter(english_engine)
        assert "word" in adapter.corrections("wrld", ["en_US", "en_GB"], DIRECTORY)

    def test_unloadable_dictionary_contributes_nothing(self, english_engine) -> None:
        """A broken dictionary is skipped when collecting suggestions."""
        adapter = SpellEngineAdapter(english_engine)
        assert adapter.corrections("wrld", ["broken", "en_US"], DIRECTORY) == {"world"}

    def test_empty_active_set_has_no_corrections(self, english_engine) -> None:
        """No active dictionaries means no suggestions."""
        adapter = SpellEngineAdapter(english_engine)
        assert adapter.corrections("colr", [], DIRECTORY) == set()


class TestLoadCache:
    """Test dictionary load caching and invalidation."""

    def test_loads_each_dictionary_once(self, english_engine) -> None:
        """Repeated checks reuse the loaded dictionary."""
        adapter = SpellEngineAdapter(english_engine)
        adapter.is_misspelled("colr", ["en_US"], DIRECTORY)
        adapter.is_misspelled("wrld", ["en_US"], DIRECTORY)
        assert english_engine.opened == [("en_US", DIRECTORY)]

    def test_cache_is_keyed_by_directory(self, english_engine) -> None:
        """The same identifier in another directory is loaded separately."""
        adapter = SpellEngineAdapter(english_engine)
        adapter.load("en_US", DIRECTORY)
        adapter.load("en_US", Path("/other"))
        assert len(english_engine.opened) == 2

    def test_invalidate_forces_reload(self, english_engine) -> None:
        """After invalidation the dictionary is loaded again."""
        adapter = SpellEngineAdapter(english_engine)
        adapter.load("en_US", DIRECTORY)
        adapter.invalidate(DIRECTORY)
        adapter.load("en_US", DIRECTORY)
        assert len(english_engine.opened) == 2

    def test_invalidate_other_directory_keeps_cache(self, english_engine) -> None:
        """Invalidating an unrelated directory keeps loaded dictionaries."""
        adapter = SpellEngineAdapter(english_engine)
        adapter.load("en_US", DIRECTORY)
        adapter.invalidate(Path("/other"))
        adapter.load("en_US", DIRECTORY)
        assert len(english_engine.opened) == 1

    def test_failed_load_is_retried(self) -> None:
        """A dictionary that failed to load is tried again next time."""
        engine = FakeEngine()
        adapter = SpellEngineAdapter(engine)
        adapter.is_misspelled("word", ["de_DE"], DIRECTORY)
        engine.dictionaries["de_DE"] = FakeDictionary({"Haus"})
        assert adapter.is_misspelled("Hause", ["de_DE"], DIRECTORY) is True

    def test_invalidate_reaches_engine(self, english_engine) -> None:
        """Invalidation is forwarded so the engine can drop its own caches."""
        adapter = SpellEngineAdapter(english_engine)
        adapter.invalidate(str(DIRECTORY))
        assert english_engine.invalidated == [DIRECTORY]

    def test_invalidate_all_reaches_engine(self, english_engine) -> None:
        """A full invalidation is forwarded as None."""
        adapter = SpellEngineAdapter(english_engine)
        adapter.invalidate()
        assert english_engine.invalidated == [None]
