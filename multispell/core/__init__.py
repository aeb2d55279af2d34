"""Core domain types for MultiSpell."""

from .config import Config, load_config
from .errors import (
    CatalogUnavailable,
    DictionaryLoadFailed,
    InstallFailed,
    MultiSpellError,
    UnknownCommand,
)
from .locales import expand_locale_forms, split_locale
from .types import (
    ActiveSet,
    Catalog,
    CorrectionResult,
    DictionaryId,
    InstallOutcome,
    InstallStatus,
)

__all__ = [
    "ActiveSet",
    "Catalog",
    "CatalogUnavailable",
    "Config",
    "CorrectionResult",
    "DictionaryId",
    "DictionaryLoadFailed",
    "InstallFailed",
    "InstallOutcome",
    "InstallStatus",
    "MultiSpellError",
    "UnknownCommand",
    "expand_locale_forms",
    "load_config",
    "split_locale",
]
