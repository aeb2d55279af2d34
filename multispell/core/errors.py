"""Exception hierarchy for MultiSpell."""

from pathlib import Path


class MultiSpellError(Exception):
    """Base class for all MultiSpell errors."""


class CatalogUnavailable(MultiSpellError):
    """The dictionary installation directory could not be read."""

    def __init__(self, directory: Path, cause: Exception) -> None:
        super().__init__(f"Cannot read dictionary directory {directory}: {cause}")
        self.directory = directory
        self.cause = cause


class InstallFailed(MultiSpellError):
    """A single candidate file could not be copied into the installation directory."""

    def __init__(self, dictionary_id: str, cause: Exception) -> None:
        super().__init__(f"Failed to install dictionary '{dictionary_id}': {cause}")
        self.dictionary_id = dictionary_id
        self.cause = cause


class DictionaryLoadFailed(MultiSpellError):
    """The engine could not load a dictionary."""

    def __init__(self, dictionary_id: str, directory: Path | None, cause: Exception | None = None) -> None:
        message = f"Failed to load dictionary '{dictionary_id}'"
        if directory is not None:
            message += f" from {directory}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)
        self.dictionary_id = dictionary_id
        self.directory = directory
        self.cause = cause


class UnknownCommand(MultiSpellError):
    """A command was dispatched that has no registered handler."""
