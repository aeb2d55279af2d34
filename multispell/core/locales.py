"""Locale-form expansion for dictionary identifiers."""

from multispell.core.types import DictionaryId

SEPARATORS = ("_", "-")


def split_locale(dictionary_id: DictionaryId) -> tuple[str, str] | None:
    """Split ``<lang>[-_]<region>`` into its language and region parts.

    The language is the shortest non-empty prefix of ASCII word characters that is
    followed by a separator; the region is the rest and must be non-empty word
    characters (underscores allowed). Identifiers without this shape return None.

    >>> split_locale("en_US")
    ('en', 'US')
    >>> split_locale("pt-BR")
    ('pt', 'BR')
    >>> split_locale("en") is None
    True
    """
    for index in range(1, len(dictionary_id) - 1):
        lang = dictionary_id[:index]
        if not _is_word(lang):
            return None
        if dictionary_id[index] not in SEPARATORS:
            continue
        region = dictionary_id[index + 1 :]
        if _is_word(region):
            return lang, region
    return None


def expand_locale_forms(dictionary_id: DictionaryId) -> list[DictionaryId]:
    """Return the candidate spellings of a dictionary identifier, most specific first.

    A regional identifier expands to underscore form, hyphen form, then the bare
    language. Anything else is returned unchanged.
    """
    parts = split_locale(dictionary_id)
    if parts is None:
        return [dictionary_id]
    lang, region = parts
    return [f"{lang}_{region}", f"{lang}-{region}", lang]


def _is_word(text: str) -> bool:
    return bool(text) and all(c.isascii() and (c.isalnum() or c == "_") for c in text)
