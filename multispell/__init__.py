"""MultiSpell - spellchecking dictionary orchestration.

Discover bundled and installed dictionaries, keep a consistent set of active
ones, install new dictionary files and check words across every active
dictionary.
"""

from multispell.adapter import SpellEngineAdapter
from multispell.catalog import build_catalog
from multispell.coordinator import query_corrections
from multispell.core import (
    Catalog,
    Config,
    CorrectionResult,
    InstallOutcome,
    InstallStatus,
    load_config,
)
from multispell.installer import install_dictionaries
from multispell.resolver import resolve_active_set
from multispell.service import SpellcheckService
from multispell.state import SpellcheckState
from multispell.utils.logging import setup_logger

__version__ = "0.1.0"
__all__ = [
    "Catalog",
    "Config",
    "CorrectionResult",
    "InstallOutcome",
    "InstallStatus",
    "SpellEngineAdapter",
    "SpellcheckService",
    "SpellcheckState",
    "build_catalog",
    "install_dictionaries",
    "load_config",
    "query_corrections",
    "resolve_active_set",
    "setup_logger",
]
