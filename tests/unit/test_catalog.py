"""Unit tests for dictionary catalog building."""

from unittest.mock import patch

import pytest
from loguru import logger

from conftest import FakeEngine, write_dictionary_pair
from multispell.catalog import build_catalog, scan_installed_dictionaries
from multispell.core.errors import CatalogUnavailable


class TestScanInstalledDictionaries:
    """Test scan_installed_dictionaries behavior."""

    def test_finds_complete_pairs(self, tmp_path) -> None:
        """A basename with both .aff and .dic is listed."""
        write_dictionary_pair(tmp_path, "de_DE", ["Haus"])
        installed, _ = scan_installed_dictionaries(tmp_path)
        assert installed == {"de_DE"}

    def test_skips_incomplete_pair(self, tmp_path) -> None:
        """A basename with only the .dic file is not listed."""
        (tmp_path / "fr_FR.dic").write_text("1\nmaison\n")
        installed, _ = scan_installed_dictionaries(tmp_path)
        assert installed == set()

    def test_ignores_unrelated_files(self, tmp_path) -> None:
        """Files with other extensions are ignored."""
        (tmp_path / "README.txt").write_text("notes")
        installed, _ = scan_installed_dictionaries(tmp_path)
        assert installed == set()

    def test_fingerprint_changes_when_files_change(self, tmp_path) -> None:
        """Adding a dictionary changes the fingerprint."""
        write_dictionary_pair(tmp_path, "de_DE", ["Haus"])
        _, before = scan_installed_dictionaries(tmp_path)
        write_dictionary_pair(tmp_path, "fr_FR", ["maison"])
        _, after = scan_installed_dictionaries(tmp_path)
        assert before != after

    def test_missing_directory_has_no_installed_dictionaries(self, tmp_path) -> None:
        """A directory that does not exist yet means nothing is installed."""
        installed, _ = scan_installed_dictionaries(tmp_path / "missing")
        assert installed == set()

    def test_missing_directory_is_not_a_warning(self, tmp_path) -> None:
        """First run without an installation directory logs no warning."""
        messages = []
        handler_id = logger.add(messages.append, level="WARNING")
        try:
            scan_installed_dictionaries(tmp_path / "missing")
        finally:
            logger.remove(handler_id)
        assert messages == []

    def test_raises_catalog_unavailable_for_unreadable_directory(self, tmp_path) -> None:
        """A path that cannot be listed raises CatalogUnavailable."""
        not_a_directory = tmp_path / "file.txt"
        not_a_directory.write_text("x")
        with pytest.raises(CatalogUnavailable):
            scan_installed_dictionaries(not_a_directory)


class TestBuildCatalog:
    """Test build_catalog behavior."""

    def test_merges_embedded_and_installed_sorted(self, tmp_path) -> None:
        """Available dictionaries are the sorted union of both sources."""
        write_dictionary_pair(tmp_path, "de_DE", ["Haus"])
        engine = FakeEngine(built_in={"en_US", "de_DE"})
        catalog = build_catalog(tmp_path, engine)
        assert catalog.available_dictionaries == ("de_DE", "en_US")

    def test_keeps_separator_variants_distinct(self, tmp_path) -> None:
        """en_US and en-US are separate catalog entries."""
        write_dictionary_pair(tmp_path, "en-US", ["hello"])
        engine = FakeEngine(built_in={"en_US"})
        catalog = build_catalog(tmp_path, engine)
        assert catalog.available_dictionaries == ("en-US", "en_US")

    def test_unreadable_directory_yields_embedded_only(self, tmp_path) -> None:
        """An unreadable directory degrades to the embedded dictionaries."""
        not_a_directory = tmp_path / "file.txt"
        not_a_directory.write_text("x")
        engine = FakeEngine(built_in={"en_US"})
        catalog = build_catalog(not_a_directory, engine)
        assert catalog.available_dictionaries == ("en_US",)

    def test_records_install_directory(self, tmp_path) -> None:
        """The catalog remembers where dictionaries are installed."""
        catalog = build_catalog(str(tmp_path), FakeEngine())
        assert catalog.install_directory == tmp_path

    @patch("multispell.catalog.platform_supports_multiple", return_value=True)
    def test_supports_multiple_with_embedded_dictionaries(self, _mock, tmp_path) -> None:
        """Embedded dictionaries on a capable platform allow multiple active ones."""
        catalog = build_catalog(tmp_path, FakeEngine(built_in={"en_US"}))
        assert catalog.supports_multiple is True

    @patch("multispell.catalog.platform_supports_multiple", return_value=True)
    def test_single_dictionary_without_embedded(self, _mock, tmp_path) -> None:
        """Without embedded dictionaries only one may be active."""
        write_dictionary_pair(tmp_path, "de_DE", ["Haus"])
        catalog = build_catalog(tmp_path, FakeEngine())
        assert catalog.supports_multiple is False

    @patch("multispell.catalog.platform_supports_multiple", return_value=False)
    def test_single_dictionary_on_restricted_platform(self, _mock, tmp_path) -> None:
        """The single-dictionary platform never allows multiple active ones."""
        catalog = build_catalog(tmp_path, FakeEngine(built_in={"en_US"}))
        assert catalog.supports_multiple is False
