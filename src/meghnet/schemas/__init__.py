"""Pydantic configuration schemas for Megh-Net.

This module provides strictly typed configuration models. All configuration
validation, coercion, and normalization happens at schema validation time
via Pydantic.

Exports
-------
resolve_config : function
    Single entrypoint for configuration resolution
init_runtime_config : function
    Resolve config from a user file and set up logging
InternalConfig : class
    Fully validated, authoritative runtime configuration
ParamConfig : class
    Expert defaults (complete)
UserConfig : class
    User-facing configuration (forgiving, minimal)
"""

from meghnet.schemas.resolve import resolve_config
from meghnet.schemas.internal import InternalConfig
from meghnet.schemas.param import ParamConfig
from meghnet.schemas.user import UserConfig
from meghnet.schemas.initialization import init_runtime_config, configure_logging

__all__ = [
    'resolve_config',
    'init_runtime_config',
    'configure_logging',
    'InternalConfig',
    'ParamConfig',
    'UserConfig',
]
