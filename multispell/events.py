"""Commands accepted by the spellchecking service and the events it publishes."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from multispell.core.types import Catalog, CorrectionResult, DictionaryId


# Inbound commands


@dataclass(frozen=True)
class ConfigLoad:
    """Rebuild the catalog from the engine and the installation directory."""


@dataclass(frozen=True)
class InstallDictionaries:
    """Copy dictionary files into the installation directory."""

    file_paths: tuple[Path, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "file_paths", tuple(Path(p) for p in self.file_paths))


@dataclass(frozen=True)
class ToggleDictionary:
    """Enable or disable one dictionary."""

    dictionary_id: DictionaryId
    enabled: bool


@dataclass(frozen=True)
class UpdateCorrections:
    """Check a word and compute its corrections."""

    word: str


Command = Union[ConfigLoad, InstallDictionaries, ToggleDictionary, UpdateCorrections]


# Outbound events


@dataclass(frozen=True)
class CatalogLoaded:
    catalog: Catalog


@dataclass(frozen=True)
class DictionaryInstalled:
    dictionary_id: DictionaryId
    source: Path


@dataclass(frozen=True)
class DictionaryInstallFailed:
    dictionary_id: DictionaryId
    source: Path
    cause: Exception | None = field(default=None, compare=False)


@dataclass(frozen=True)
class ActiveSetChanged:
    active_set: tuple[DictionaryId, ...]


@dataclass(frozen=True)
class CorrectionsUpdated:
    # None clears any previously shown suggestions
    result: CorrectionResult | None


Event = Union[
    CatalogLoaded,
    DictionaryInstalled,
    DictionaryInstallFailed,
    ActiveSetChanged,
    CorrectionsUpdated,
]
