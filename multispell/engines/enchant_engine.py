"""Spell engine backed by Enchant (pyenchant)."""

from __future__ import annotations

import os
from pathlib import Path
import threading

import enchant
from loguru import logger

from multispell.core.errors import DictionaryLoadFailed
from multispell.engines.base import DictionaryHandle, SpellEngine

ENCHANT_CONFIG_ENV = "ENCHANT_CONFIG_DIR"


class EnchantEngine(SpellEngine):
    """Enchant broker wrapper.

    Installed dictionaries are Hunspell pairs living in a ``hunspell``
    directory; Enchant finds them when its user config directory is set to
    that directory's parent. One broker is kept per installation directory.
    """

    def __init__(self) -> None:
        self._default_broker = enchant.Broker()
        self._brokers: dict[Path, enchant.Broker] = {}
        # ENCHANT_CONFIG_DIR is process-wide
        self._env_lock = threading.Lock()

    def list_built_in_dictionaries(self) -> set[str]:
        return set(self._default_broker.list_languages())

    def invalidate(self, directory: Path | None = None) -> None:
        # A broker keeps every dict it handed out; dropping it forces a re-read
        with self._env_lock:
            if directory is None:
                self._brokers.clear()
            else:
                self._brokers.pop(Path(directory), None)

    def open_dictionary(self, dictionary_id: str, directory: Path) -> DictionaryHandle:
        directory = Path(directory)
        with self._env_lock:
            previous = os.environ.get(ENCHANT_CONFIG_ENV)
            os.environ[ENCHANT_CONFIG_ENV] = str(directory.parent)
            try:
                broker = self._brokers.get(directory)
                if broker is None:
                    broker = enchant.Broker()
                    self._brokers[directory] = broker
                handle = broker.request_dict(dictionary_id)
            except (enchant.errors.Error, ValueError) as e:
                raise DictionaryLoadFailed(dictionary_id, directory, e) from e
            finally:
                if previous is None:
                    os.environ.pop(ENCHANT_CONFIG_ENV, None)
                else:
                    os.environ[ENCHANT_CONFIG_ENV] = previous

        logger.debug(f"Loaded Enchant dictionary '{dictionary_id}' ({handle.provider.name})")
        return handle
