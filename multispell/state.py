"""Spellchecking state shared by the service handlers."""

import threading

from multispell.core.types import ActiveSet, Catalog


class SpellcheckState:
    """Holds the current catalog and active set.

    Both are replaced wholesale; readers get a consistent snapshot and never
    see a half-computed value.
    """

    def __init__(self, catalog: Catalog | None = None, active_set: ActiveSet | None = None) -> None:
        self._lock = threading.Lock()
        self._catalog = catalog
        self._active_set: tuple[str, ...] = tuple(active_set or ())

    @property
    def catalog(self) -> Catalog | None:
        with self._lock:
            return self._catalog

    @property
    def active_set(self) -> ActiveSet:
        with self._lock:
            return list(self._active_set)

    def snapshot(self) -> tuple[Catalog | None, ActiveSet]:
        """Return catalog and active set read together."""
        with self._lock:
            return self._catalog, list(self._active_set)

    def publish_catalog(self, catalog: Catalog) -> None:
        with self._lock:
            self._catalog = catalog

    def publish_active_set(self, active_set: ActiveSet) -> None:
        with self._lock:
            self._active_set = tuple(active_set)
