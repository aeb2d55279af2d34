"""Configuration management for MultiSpell."""

from __future__ import annotations

import json
from argparse import ArgumentParser
from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator

from multispell.utils.constants import Constants
from multispell.utils.helpers import expand_file_path


class Config(BaseModel):
    """Configuration for dictionary discovery, installation and checking."""

    install_directory: str = Field(
        Constants.DEFAULT_INSTALL_DIRECTORY,
        validate_default=True,
        description="Directory for installed dictionaries",
    )
    preferences_file: str | None = Field(
        Constants.DEFAULT_PREFERENCES_FILE,
        validate_default=True,
        description="Where the enabled dictionaries are stored",
    )
    engine: Literal["enchant", "wordlist"] = Field("enchant", description="Spell engine backend")
    enabled_dictionaries: list[str] = Field(
        default_factory=list, description="Initial active set when no preferences are stored"
    )
    jobs: int = Field(1, ge=1, description="Parallel workers for dictionary installation")
    verbose: bool = False
    debug: bool = False

    @field_validator("enabled_dictionaries", mode="before")
    @classmethod
    def parse_dictionary_list(cls, v):
        """Parse comma-separated string or array into an ordered list."""
        if v is None or v == "":
            return []
        if isinstance(v, str):
            v = v.split(",")
        if isinstance(v, (list, tuple)):
            return [s.strip() for s in v if s.strip()]
        return []

    @field_validator("install_directory", "preferences_file")
    @classmethod
    def expand_paths(cls, v):
        """Expand ~ in configured paths."""
        return expand_file_path(v) or v


def load_config(json_path: str | None, cli_args, parser: ArgumentParser) -> Config:
    """Load JSON config, override with CLI args, return Config object."""

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > JSON > Fallback."""
        cli_value = getattr(cli_args, key, None)
        default_value = parser.get_default(key)
        # Use CLI value only if it was explicitly set by the user
        if cli_value is not None and cli_value != default_value:
            return cli_value
        return json_config.get(key, fallback)

    json_config = {}
    if json_path:
        json_path = expand_file_path(json_path) or json_path
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                json_config = json.load(f)
        except FileNotFoundError:
            logger.error(f"✗ Config file not found: {json_path}")
            logger.error("  Please check the file path and try again")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"✗ Invalid JSON in config file {json_path}: {e}")
            logger.error("  Please validate your JSON syntax")
            raise ValueError(f"Invalid JSON configuration: {e}") from e
        except PermissionError:
            logger.error(f"✗ Permission denied reading config file: {json_path}")
            logger.error("  Please check file permissions and try again")
            raise
        except UnicodeDecodeError as e:
            logger.error(f"✗ Encoding error reading config file {json_path}: {e}")
            logger.error("  Please ensure the file is UTF-8 encoded")
            raise

    config_dict = {
        "install_directory": get_value("install_directory", Constants.DEFAULT_INSTALL_DIRECTORY),
        "preferences_file": get_value("preferences_file", Constants.DEFAULT_PREFERENCES_FILE),
        "engine": get_value("engine", "enchant"),
        "enabled_dictionaries": get_value("enabled_dictionaries", None),
        "jobs": get_value("jobs", 1),
        "verbose": getattr(cli_args, "verbose", False) or json_config.get("verbose", False),
        "debug": getattr(cli_args, "debug", False) or json_config.get("debug", False),
    }

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ValueError(f"Invalid configuration: {e}") from e
