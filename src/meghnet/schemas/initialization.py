"""Runtime initialization for Megh-Net.

This module handles initialization responsibilities:
- Loading a user config dict from a Python file
- Configuration resolution (User > Param)
- Logging setup from the resolved level
"""

import importlib.util
import logging
from pathlib import Path
from typing import Optional

from meghnet.schemas.resolve import resolve_config
from meghnet.schemas.param import ParamConfig
from meghnet.schemas.user import UserConfig
from meghnet.schemas.internal import InternalConfig

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'


def load_user_config_dict(config_path: str) -> dict:
    """Execute a Python config file and return its ``CONFIG`` dict.

    The dict is returned raw; UserConfig validates it later.

    Raises
    ------
    FileNotFoundError
        If ``config_path`` does not exist.
    ValueError
        If the file defines no ``CONFIG`` dict.
    """
    path = Path(config_path)
    if not path.is_file():
        raise FileNotFoundError(f"User config file not found: {path}")

    module_spec = importlib.util.spec_from_file_location("meghnet_user_config", path)
    if module_spec is None or module_spec.loader is None:
        raise ImportError(f"Cannot import user config from {path}")

    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)

    config = getattr(module, "CONFIG", None)
    if not isinstance(config, dict):
        raise ValueError(f"No CONFIG dict found in {path}")
    return config


def configure_logging(level: str = "INFO") -> None:
    """Install a console handler on the root logger.

    Existing root handlers are replaced so repeated initialization does
    not duplicate output.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    root = logging.getLogger()
    root.setLevel(log_level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    ch = logging.StreamHandler()
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    root.addHandler(ch)

    logger.debug("Logging: level=%s", level)


def init_runtime_config(config_path: Optional[str] = None, **overrides) -> InternalConfig:
    """Resolve configuration and set up logging.

    Parameters
    ----------
    config_path : str, optional
        Python file containing a ``CONFIG`` dict of user overrides.
    **overrides
        Extra UserConfig keys (e.g. ``THRESHOLD=200``). They take
        precedence over the file.

    Returns
    -------
    InternalConfig
        Fully validated runtime configuration.

    Examples
    --------
    >>> config = init_runtime_config("my_config.py", LOG_LEVEL="DEBUG")
    >>> segmenter = CloudSegmenter(config)
    """
    user_dict = load_user_config_dict(config_path) if config_path else {}

    config = resolve_config(
        ParamConfig(),
        UserConfig.model_validate(user_dict),
        UserConfig.model_validate(overrides),
    )

    configure_logging(config.logging.level)
    logger.info("Runtime configuration resolved (config file: %s)", config_path or "none")

    return config


__all__ = ['init_runtime_config', 'configure_logging', 'load_user_config_dict']
