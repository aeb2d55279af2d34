"""Base classes for spell engine abstraction."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Protocol


class DictionaryHandle(Protocol):
    """A dictionary loaded into an engine."""

    def check(self, word: str) -> bool:
        """Return True if the word is correctly spelled."""

    def suggest(self, word: str) -> Iterable[str]:
        """Return suggested corrections for the word."""


class SpellEngine(ABC):
    """Abstract base class for the underlying per-word spellchecking engine."""

    @abstractmethod
    def list_built_in_dictionaries(self) -> set[str]:
        """Return identifiers of dictionaries that ship with the engine."""

    @abstractmethod
    def open_dictionary(self, dictionary_id: str, directory: Path) -> DictionaryHandle:
        """Load a dictionary, looking in ``directory`` for installed ones.

        Raises:
            DictionaryLoadFailed: If the identifier cannot be resolved or parsed
        """

    def invalidate(self, directory: Path | None = None) -> None:
        """Forget anything the engine cached for a directory, or for all directories."""

    def get_name(self) -> str:
        """Return engine name for display."""
        return self.__class__.__name__.replace("Engine", "").lower()
