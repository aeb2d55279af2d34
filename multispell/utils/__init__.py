"""Utility functions for MultiSpell."""

from multispell.utils.constants import Constants, platform_supports_multiple
from multispell.utils.helpers import (
    dictionary_id_from_path,
    ensure_directory_exists,
    expand_file_path,
    write_file_safely,
)
from multispell.utils.logging import add_log_file_handler, setup_logger

__all__ = [
    "Constants",
    "add_log_file_handler",
    "dictionary_id_from_path",
    "ensure_directory_exists",
    "expand_file_path",
    "platform_supports_multiple",
    "setup_logger",
    "write_file_safely",
]
