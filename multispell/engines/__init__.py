"""Spell engine backends for MultiSpell."""

from .base import DictionaryHandle, SpellEngine
from .wordlist import WordListEngine


def _enchant_engine() -> SpellEngine:
    # pyenchant loads the native Enchant library on import
    from .enchant_engine import EnchantEngine

    return EnchantEngine()


# Engine registry
_ENGINES = {
    "enchant": _enchant_engine,
    "wordlist": WordListEngine,
}


def get_engine_backend(engine_name: str) -> SpellEngine:
    """Factory function to get spell engine instance.

    Args:
        engine_name: Name of engine ('enchant', 'wordlist')

    Returns:
        Spell engine instance

    Raises:
        ValueError: If engine name is unknown
    """
    engine_name = engine_name.lower()

    if engine_name not in _ENGINES:
        available = ", ".join(_ENGINES.keys())
        raise ValueError(f"Unknown engine '{engine_name}'. Available engines: {available}")

    return _ENGINES[engine_name]()


def list_engines() -> list[str]:
    """Return list of supported engine names."""
    return list(_ENGINES.keys())


__all__ = [
    "DictionaryHandle",
    "SpellEngine",
    "WordListEngine",
    "get_engine_backend",
    "list_engines",
]
