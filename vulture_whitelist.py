"""Vulture whitelist for false positives.

This file contains code that vulture incorrectly flags as unused
but is actually used by frameworks (Pydantic) or through dispatch tables.
"""
# pylint: disable=all
# Pydantic field validators - used by framework via @field_validator decorator
_.parse_dictionary_list  # noqa: F821  # unused method (multispell/core/config.py)
_.expand_paths  # noqa: F821  # unused method (multispell/core/config.py)

# Handlers reached through SpellcheckService._handlers
_._load_configuration  # noqa: F821  # unused method (multispell/service.py)
_._install_dictionaries  # noqa: F821  # unused method (multispell/service.py)
_._toggle_dictionary  # noqa: F821  # unused method (multispell/service.py)
_._update_corrections  # noqa: F821  # unused method (multispell/service.py)

# Protocol members implemented by engine dictionaries
check  # noqa: F821  # unused method (multispell/engines/base.py)
suggest  # noqa: F821  # unused method (multispell/engines/base.py)
