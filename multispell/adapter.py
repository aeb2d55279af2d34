"""Spell Engine Adapter: checks words and gathers corrections across the active set."""

from pathlib import Path
import threading
from typing import Iterable

from loguru import logger

from multispell.core.errors import DictionaryLoadFailed
from multispell.core.types import DictionaryId
from multispell.engines.base import DictionaryHandle, SpellEngine


class SpellEngineAdapter:
    """Loads dictionaries on demand and combines their judgments.

    Loaded dictionaries are cached by ``(identifier, directory)``. Failed
    loads are not cached, so a later repaired install is picked up. Call
    ``invalidate`` when the installation directory changes.
    """

    def __init__(self, engine: SpellEngine) -> None:
        self.engine = engine
        self._loaded: dict[tuple[DictionaryId, Path], DictionaryHandle] = {}
        self._lock = threading.Lock()

    def load(self, dictionary_id: DictionaryId, install_directory: str | Path) -> DictionaryHandle:
        """Return the loaded dictionary, loading it into the engine if needed.

        Raises:
            DictionaryLoadFailed: If the engine cannot load the dictionary
        """
        key = (dictionary_id, Path(install_directory))
        with self._lock:
            handle = self._loaded.get(key)
            if handle is None:
                handle = self.engine.open_dictionary(dictionary_id, key[1])
                self._loaded[key] = handle
        return handle

    def invalidate(self, install_directory: str | Path | None = None) -> None:
        """Drop cached dictionaries, for one directory or all of them."""
        directory = Path(install_directory) if install_directory is not None else None
        with self._lock:
            if directory is None:
                self._loaded.clear()
            else:
                self._loaded = {key: h for key, h in self._loaded.items() if key[1] != directory}
            self.engine.invalidate(directory)

    def _loaded_dictionaries(
        self, active_set: Iterable[DictionaryId], install_directory: str | Path
    ) -> Iterable[tuple[DictionaryId, DictionaryHandle]]:
        """Yield each active dictionary that loads; broken ones are skipped."""
        for dictionary_id in active_set:
            try:
                yield dictionary_id, self.load(dictionary_id, install_directory)
            except DictionaryLoadFailed as e:
                logger.debug(f"Skipping dictionary: {e}")

    def is_misspelled(
        self, word: str, active_set: Iterable[DictionaryId], install_directory: str | Path
    ) -> bool:
        """Return True only if every active dictionary rejects the word.

        An empty active set never flags anything, and a dictionary that fails
        to load counts as accepting the word.
        """
        misspelled = False
        for dictionary_id in active_set:
            try:
                handle = self.load(dictionary_id, install_directory)
            except DictionaryLoadFailed as e:
                logger.debug(f"Treating '{word}' as correct: {e}")
                return False
            if handle.check(word):
                return False
            misspelled = True
        return misspelled

    def corrections(
        self, word: str, active_set: Iterable[DictionaryId], install_directory: str | Path
    ) -> set[str]:
        """Return the union of suggestions from every active dictionary."""
        suggestions: set[str] = set()
        for _, handle in self._loaded_dictionaries(active_set, install_directory):
            suggestions.update(handle.suggest(word))
        return suggestions
