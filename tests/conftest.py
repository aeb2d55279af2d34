"""Shared fixtures: an in-memory spell engine and catalog helpers."""

from pathlib import Path

import pytest

from multispell.core.errors import DictionaryLoadFailed
from multispell.core.types import Catalog
from multispell.engines.base import SpellEngine


class FakeDictionary:
    """Dictionary with a fixed vocabulary and canned suggestions."""

    def __init__(self, words: set[str], suggestions: dict[str, list[str]] | None = None) -> None:
        self.words = words
        self.suggestions = suggestions or {}
        self.checked: list[str] = []

    def check(self, word: str) -> bool:
        self.checked.append(word)
        return word in self.words

    def suggest(self, word: str) -> list[str]:
        return list(self.suggestions.get(word, []))


class FakeEngine(SpellEngine):
    """Engine serving FakeDictionary objects; unknown identifiers fail to load."""

    def __init__(
        self,
        dictionaries: dict[str, FakeDictionary] | None = None,
        built_in: set[str] | None = None,
    ) -> None:
        self.dictionaries = dictionaries or {}
        self.built_in = set(built_in or ())
        self.opened: list[tuple[str, Path]] = []
        self.invalidated: list[Path | None] = []

    def list_built_in_dictionaries(self) -> set[str]:
        return set(self.built_in)

    def invalidate(self, directory: Path | None = None) -> None:
        self.invalidated.append(directory)

    def open_dictionary(self, dictionary_id: str, directory: Path) -> FakeDictionary:
        self.opened.append((dictionary_id, directory))
        if dictionary_id not in self.dictionaries:
            raise DictionaryLoadFailed(dictionary_id, directory)
        return self.dictionaries[dictionary_id]


def make_catalog(
    available, supports_multiple: bool = True, install_directory: Path = Path("/dicts")
) -> Catalog:
    return Catalog(
        available_dictionaries=tuple(sorted(available)),
        supports_multiple=supports_multiple,
        install_directory=install_directory,
    )


def write_dictionary_pair(directory: Path, dictionary_id: str, words: list[str]) -> None:
    """Write a minimal Hunspell ``.aff``/``.dic`` pair."""
    directory.mkdir(parents=True, exist_ok=True)
    (directory / f"{dictionary_id}.aff").write_text("SET UTF-8\n", encoding="utf-8")
    body = "\n".join([str(len(words)), *words]) + "\n"
    (directory / f"{dictionary_id}.dic").write_text(body, encoding="utf-8")


@pytest.fixture
def english_engine() -> FakeEngine:
    """Engine with US and UK English that disagree on "colour"/"color"."""
    return FakeEngine(
        {
            "en_US": FakeDictionary(
                {"hello", "color", "world"}, {"colr": ["color", "colour"], "wrld": ["world"]}
            ),
            "en_GB": FakeDictionary(
                {"hello", "colour", "world"}, {"colr": ["colour", "color"], "wrld": ["world", "word"]}
            ),
        },
        built_in={"en_US", "en_GB"},
    )
