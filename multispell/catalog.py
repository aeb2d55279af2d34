"""Dictionary Catalog: discovery of bundled and installed dictionaries."""

from pathlib import Path

from loguru import logger

from multispell.core.errors import CatalogUnavailable
from multispell.core.types import Catalog, DictionaryId
from multispell.engines.base import SpellEngine
from multispell.utils.constants import Constants, platform_supports_multiple


def scan_installed_dictionaries(
    install_directory: Path,
) -> tuple[set[DictionaryId], frozenset[tuple[str, int, int]]]:
    """Find complete ``<id>.aff`` + ``<id>.dic`` pairs in the installation directory.

    A basename with only one half of the pair is left out, so a dictionary
    whose install partially failed never shows up as available.

    Returns:
        Installed identifiers and a fingerprint of the dictionary files
        (name, size, mtime) for cache invalidation

    Raises:
        CatalogUnavailable: If the directory exists but cannot be listed
    """
    extensions: dict[str, set[str]] = {}
    fingerprint = set()
    try:
        for entry in install_directory.iterdir():
            if entry.suffix not in Constants.DICTIONARY_EXTENSIONS or not entry.is_file():
                continue
            extensions.setdefault(entry.stem, set()).add(entry.suffix)
            stat = entry.stat()
            fingerprint.add((entry.name, stat.st_size, stat.st_mtime_ns))
    except FileNotFoundError:
        # Nothing installed yet; the installer creates the directory on first use
        logger.debug(f"No dictionary directory at {install_directory} yet")
        return set(), frozenset()
    except OSError as e:
        raise CatalogUnavailable(install_directory, e) from e

    required = set(Constants.DICTIONARY_EXTENSIONS)
    complete = {stem for stem, found in extensions.items() if found >= required}
    incomplete = sorted(set(extensions) - complete)
    if incomplete:
        logger.warning(f"Ignoring incomplete dictionaries in {install_directory}: {', '.join(incomplete)}")

    return complete, frozenset(fingerprint)


def build_catalog(install_directory: str | Path, engine: SpellEngine) -> Catalog:
    """Build the catalog of available dictionaries.

    Embedded dictionaries come from the engine, installed ones from the
    directory scan. An unreadable directory degrades to an embedded-only
    catalog.
    """
    install_directory = Path(install_directory)
    embedded = engine.list_built_in_dictionaries()

    try:
        installed, fingerprint = scan_installed_dictionaries(install_directory)
    except CatalogUnavailable as e:
        logger.warning(f"⚠️  {e}")
        logger.warning("   Continuing with built-in dictionaries only")
        installed, fingerprint = set(), frozenset()

    available = tuple(sorted(embedded | installed))
    supports_multiple = bool(embedded) and platform_supports_multiple()

    logger.info(
        f"Found {len(available)} dictionaries "
        f"({len(embedded)} built-in, {len(installed)} installed)"
    )
    logger.debug(f"Multiple active dictionaries supported: {supports_multiple}")

    return Catalog(
        available_dictionaries=available,
        supports_multiple=supports_multiple,
        install_directory=install_directory,
        fingerprint=fingerprint,
    )
