"""Spellchecking service: dispatches commands and publishes events."""

from __future__ import annotations

import threading
from typing import Callable, Iterator, Sequence

from loguru import logger

from multispell.adapter import SpellEngineAdapter
from multispell.catalog import build_catalog
from multispell.coordinator import query_corrections
from multispell.core.config import Config
from multispell.core.errors import UnknownCommand
from multispell.core.types import ActiveSet, Catalog, CorrectionResult
from multispell.engines import SpellEngine, get_engine_backend
from multispell.events import (
    ActiveSetChanged,
    CatalogLoaded,
    Command,
    ConfigLoad,
    CorrectionsUpdated,
    DictionaryInstalled,
    DictionaryInstallFailed,
    Event,
    InstallDictionaries,
    ToggleDictionary,
    UpdateCorrections,
)
from multispell.installer import install_dictionaries
from multispell.preferences import load_enabled_dictionaries, save_enabled_dictionaries
from multispell.resolver import normalize_active_set, resolve_active_set
from multispell.state import SpellcheckState

Listener = Callable[[Event], None]


class SpellcheckService:
    """Owns the spellchecking state and handles the four command kinds.

    Commands of the same kind run one at a time; different kinds may run
    concurrently. Every handler computes its result before publishing it to
    the state, then yields the events it produced.
    """

    def __init__(
        self,
        config: Config,
        engine: SpellEngine | None = None,
        state: SpellcheckState | None = None,
    ) -> None:
        self.config = config
        self.engine = engine or get_engine_backend(config.engine)
        self.adapter = SpellEngineAdapter(self.engine)
        self.state = state or SpellcheckState()
        self._listeners: list[Listener] = []
        self._handlers: dict[type, Callable[..., Iterator[Event]]] = {
            ConfigLoad: self._load_configuration,
            InstallDictionaries: self._install_dictionaries,
            ToggleDictionary: self._toggle_dictionary,
            UpdateCorrections: self._update_corrections,
        }
        self._locks = {kind: threading.Lock() for kind in self._handlers}

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener for published events; returns an unsubscribe callable."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def dispatch(self, command: Command) -> list[Event]:
        """Handle a command to completion, then notify listeners of the events it produced.

        Listeners run after the handler has released its lock, so they may
        dispatch further commands of any kind.
        """
        events = list(self._run(command))
        for event in events:
            for listener in list(self._listeners):
                listener(event)
        return events

    def _run(self, command: Command) -> Iterator[Event]:
        kind = type(command)
        handler = self._handlers.get(kind)
        if handler is None:
            raise UnknownCommand(f"No handler registered for {kind.__name__}")
        with self._locks[kind]:
            yield from handler(command)

    # Typed entry points

    def load_configuration(self) -> Catalog:
        self.dispatch(ConfigLoad())
        return self.state.catalog

    def install(
        self, file_paths: Sequence[str]
    ) -> list[DictionaryInstalled | DictionaryInstallFailed]:
        events = self.dispatch(InstallDictionaries(file_paths))
        return [e for e in events if isinstance(e, (DictionaryInstalled, DictionaryInstallFailed))]

    def toggle(self, dictionary_id: str, enabled: bool) -> ActiveSet:
        self.dispatch(ToggleDictionary(dictionary_id, enabled))
        return self.state.active_set

    def update_corrections(self, word: str) -> CorrectionResult | None:
        events = self.dispatch(UpdateCorrections(word))
        return events[-1].result

    # Handlers

    def _ensure_catalog(self) -> Iterator[Event]:
        if self.state.catalog is None:
            yield from self._run(ConfigLoad())

    def _load_configuration(self, _command: ConfigLoad) -> Iterator[Event]:
        previous, current_active = self.state.snapshot()
        catalog = build_catalog(self.config.install_directory, self.engine)

        if previous is None or previous.fingerprint != catalog.fingerprint:
            self.adapter.invalidate(catalog.install_directory)
        self.state.publish_catalog(catalog)
        yield CatalogLoaded(catalog)

        if previous is None:
            stored = load_enabled_dictionaries(self.config.preferences_file)
            requested = stored if stored is not None else self.config.enabled_dictionaries
        else:
            requested = current_active

        active_set = normalize_active_set(catalog, requested)
        if active_set != current_active:
            if active_set != requested:
                logger.info(f"Active dictionaries adjusted to catalog: {requested} -> {active_set}")
            yield from self._publish_active_set(active_set)

    def _install_dictionaries(self, command: InstallDictionaries) -> Iterator[Event]:
        yield from self._ensure_catalog()
        outcomes = install_dictionaries(command.file_paths, self.state.catalog, self.config.jobs)

        for outcome in outcomes:
            if outcome.installed:
                yield DictionaryInstalled(outcome.dictionary_id, outcome.source)
            else:
                yield DictionaryInstallFailed(outcome.dictionary_id, outcome.source, outcome.cause)

        if any(outcome.installed for outcome in outcomes):
            self.adapter.invalidate(self.state.catalog.install_directory)
            yield from self._run(ConfigLoad())

    def _toggle_dictionary(self, command: ToggleDictionary) -> Iterator[Event]:
        yield from self._ensure_catalog()
        catalog, active_set = self.state.snapshot()
        resolved = resolve_active_set(catalog, active_set, command.dictionary_id, command.enabled)
        yield from self._publish_active_set(resolved)

    def _update_corrections(self, command: UpdateCorrections) -> Iterator[Event]:
        yield from self._ensure_catalog()
        catalog, active_set = self.state.snapshot()
        result = query_corrections(self.adapter, command.word, active_set, catalog.install_directory)
        yield CorrectionsUpdated(result)

    def _publish_active_set(self, active_set: ActiveSet) -> Iterator[Event]:
        self.state.publish_active_set(active_set)
        try:
            save_enabled_dictionaries(self.config.preferences_file, active_set)
        except OSError as e:
            logger.warning(f"⚠️  Could not save enabled dictionaries: {e}")
            logger.warning("   The change applies to this session only")
        yield ActiveSetChanged(tuple(active_set))
