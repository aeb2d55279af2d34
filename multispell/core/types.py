"""Type definitions for MultiSpell."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

# Locale-like tag naming a dictionary, e.g. "en_US" or "en-US"
DictionaryId = str

# Ordered, first entry is the primary dictionary
ActiveSet = list[DictionaryId]


class InstallStatus(Enum):
    """Result of installing a single candidate file."""

    INSTALLED = "installed"
    FAILED = "failed"


@dataclass(frozen=True)
class Catalog:
    """Dictionaries available to the engine, rebuilt wholesale on each load."""

    available_dictionaries: tuple[DictionaryId, ...]
    supports_multiple: bool
    install_directory: Path
    # Snapshot of the installation directory, used to invalidate loaded dictionaries
    fingerprint: frozenset[tuple[str, int, int]] = field(default_factory=frozenset)

    def __contains__(self, dictionary_id: object) -> bool:
        return dictionary_id in self.available_dictionaries


@dataclass(frozen=True)
class InstallOutcome:
    """Outcome of installing one candidate file."""

    dictionary_id: DictionaryId
    status: InstallStatus
    source: Path
    cause: Exception | None = None

    @property
    def installed(self) -> bool:
        return self.status is InstallStatus.INSTALLED


@dataclass(frozen=True)
class CorrectionResult:
    """A misspelled word and the union of suggestions from every active dictionary."""

    word: str
    misspelled: bool
    suggestions: frozenset[str]
