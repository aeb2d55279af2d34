"""Correction Coordinator: answers "is this word wrong, and what could it be"."""

from pathlib import Path
from typing import Sequence

from multispell.adapter import SpellEngineAdapter
from multispell.core.types import CorrectionResult, DictionaryId


def query_corrections(
    adapter: SpellEngineAdapter,
    word: str,
    active_set: Sequence[DictionaryId],
    install_directory: str | Path,
) -> CorrectionResult | None:
    """Check a single word against the active set.

    Returns None when there is nothing to report (blank input or a correctly
    spelled word), which tells the UI to clear any previous suggestions.
    """
    word = word.strip()
    if not word or not adapter.is_misspelled(word, active_set, install_directory):
        return None

    return CorrectionResult(
        word=word,
        misspelled=True,
        suggestions=frozenset(adapter.corrections(word, active_set, install_directory)),
    )
