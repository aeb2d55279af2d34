"""Dependency-free spell engine reading Hunspell word lists.

Only the ``.dic`` stems are used; affix rules from the ``.aff`` file are not
applied, so inflected forms are only known if they are listed explicitly.
"""

from __future__ import annotations

import difflib
from pathlib import Path
import re

from loguru import logger

from multispell.core.errors import DictionaryLoadFailed
from multispell.engines.base import SpellEngine
from multispell.utils.constants import Constants


def detect_encoding(aff_text: bytes) -> str:
    """Return the encoding named by the affix file's SET directive, or UTF-8."""
    for line in aff_text.decode("ascii", "ignore").splitlines():
        line = line.strip()
        if line.upper().startswith("SET "):
            encoding = line.split(None, 1)[1].strip()
            if encoding:
                return encoding
    return "utf-8"


def parse_dic_words(dic_text: str) -> set[str]:
    """Extract stems from ``.dic`` content.

    The optional first line is an entry count. Entries look like
    ``word/FLAGS`` optionally followed by morphological fields.
    """
    lines = [line.strip() for line in dic_text.splitlines() if line.strip()]
    if lines and re.fullmatch(r"\d+", lines[0]):
        lines = lines[1:]

    words = set()
    for line in lines:
        word = line.split()[0].split("/", 1)[0]
        if word:
            words.add(word)
    return words


class WordListDictionary:
    """A set of known words with difflib-based suggestions."""

    def __init__(self, words: set[str]) -> None:
        self._words = words
        self._lowered = {w.lower() for w in words}

    def check(self, word: str) -> bool:
        if word in self._words:
            return True
        # "Hello" and "HELLO" are fine when "hello" is listed
        if word[:1].isupper() and word.lower() in self._lowered:
            return word == word.capitalize() or word.isupper()
        return False

    def suggest(self, word: str) -> list[str]:
        return difflib.get_close_matches(
            word,
            self._words,
            n=Constants.MAX_SUGGESTIONS,
            cutoff=Constants.MAX_SUGGESTION_DISTANCE,
        )


class WordListEngine(SpellEngine):
    """Engine for installed ``<id>.aff``/``<id>.dic`` pairs; it has no built-in dictionaries."""

    def list_built_in_dictionaries(self) -> set[str]:
        return set()

    def open_dictionary(self, dictionary_id: str, directory: Path) -> WordListDictionary:
        directory = Path(directory)
        aff_path = directory / f"{dictionary_id}{Constants.AFFIX_EXTENSION}"
        dic_path = directory / f"{dictionary_id}{Constants.DATA_EXTENSION}"
        try:
            encoding = detect_encoding(aff_path.read_bytes())
            words = parse_dic_words(dic_path.read_bytes().decode(encoding, "ignore"))
        except (OSError, LookupError) as e:
            raise DictionaryLoadFailed(dictionary_id, directory, e) from e

        logger.debug(f"Loaded {len(words)} words for '{dictionary_id}' from {dic_path}")
        return WordListDictionary(words)
