"""Active-Set Resolver: computes the normalized set of enabled dictionaries."""

from typing import Iterable

from loguru import logger

from multispell.core.locales import expand_locale_forms
from multispell.core.types import ActiveSet, Catalog, DictionaryId


def match_catalog_entry(catalog: Catalog, requested: DictionaryId) -> DictionaryId | None:
    """Return the catalog entry a requested identifier refers to.

    An exact match wins. Otherwise the locale forms are tried in order:
    underscore, hyphen, bare language. None if nothing matches.
    """
    if requested in catalog:
        return requested
    for form in expand_locale_forms(requested):
        if form in catalog:
            return form
    return None


def normalize_active_set(catalog: Catalog, candidates: Iterable[DictionaryId]) -> ActiveSet:
    """Map requested identifiers onto catalog entries.

    Unknown identifiers are dropped, duplicates are removed keeping
    first-seen order, and the result is cut to one entry when the catalog
    does not support multiple dictionaries.
    """
    normalized: ActiveSet = []
    for candidate in candidates:
        entry = match_catalog_entry(catalog, candidate)
        if entry is not None and entry not in normalized:
            normalized.append(entry)

    if not catalog.supports_multiple:
        normalized = normalized[:1]
    return normalized


def resolve_active_set(
    catalog: Catalog,
    current: Iterable[DictionaryId],
    requested: DictionaryId,
    enable: bool,
) -> ActiveSet:
    """Return the new active set after enabling or disabling ``requested``.

    Enabling puts the requested dictionary first so it becomes primary.
    The input is never mutated; callers replace their active set with the result.
    """
    current = list(current)
    if enable:
        candidates = [requested, *current]
    else:
        candidates = [dictionary for dictionary in current if dictionary != requested]

    resolved = normalize_active_set(catalog, candidates)
    logger.debug(f"{'Enable' if enable else 'Disable'} '{requested}': {current} -> {resolved}")
    return resolved
