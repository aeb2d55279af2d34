"""Shared constants for MultiSpell."""

import sys


class Constants:
    """Project-wide constants."""

    # Hunspell-style file pair: <identifier>.aff + <identifier>.dic
    AFFIX_EXTENSION = ".aff"
    DATA_EXTENSION = ".dic"
    DICTIONARY_EXTENSIONS = (AFFIX_EXTENSION, DATA_EXTENSION)

    # Enchant's hunspell provider scans <ENCHANT_CONFIG_DIR>/hunspell
    DEFAULT_INSTALL_DIRECTORY = "~/.config/multispell/enchant/hunspell"
    DEFAULT_PREFERENCES_FILE = "~/.config/multispell/preferences.json"

    # Enchant on this platform can only keep one dictionary active at a time
    SINGLE_DICTIONARY_PLATFORM = "win32"

    MAX_SUGGESTION_DISTANCE = 0.6
    MAX_SUGGESTIONS = 10


def platform_supports_multiple() -> bool:
    """Return True unless running on the single-dictionary-only platform."""
    return sys.platform != Constants.SINGLE_DICTIONARY_PLATFORM
