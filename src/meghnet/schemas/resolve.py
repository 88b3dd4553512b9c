"""Turn expert defaults and user overrides into one runtime config.

``resolve_config`` is the only place the layers meet:

    ParamConfig (complete defaults)  <  UserConfig (file)  <  UserConfig (keyword overrides)

Each user layer is validated and normalized on its own before merging, so
an alias in one layer never competes with a field name in another. The
merged result is checked against the ParamConfig ranges again before it is
frozen into an InternalConfig, so an override cannot slip past a bound.
"""

from typing import Optional, Union

from meghnet.schemas.internal import InternalConfig
from meghnet.schemas.param import ParamConfig
from meghnet.schemas.user import UserConfig


def deep_merge(base: dict, *overrides: dict) -> dict:
    """Recursively overlay ``overrides`` onto a copy of ``base``.

    Nested dicts merge key by key; any other value replaces what was there.
    ``base`` is left untouched.

    Examples
    --------
    >>> deep_merge({"segmenter": {"threshold": 180, "recolor": True}},
    ...            {"segmenter": {"threshold": 200}})
    {'segmenter': {'threshold': 200, 'recolor': True}}
    """
    merged = dict(base)
    for layer in overrides:
        for key, value in layer.items():
            current = merged.get(key)
            if isinstance(current, dict) and isinstance(value, dict):
                merged[key] = deep_merge(current, value)
            else:
                merged[key] = value
    return merged


def _as_param(cfg: Union[dict, ParamConfig]) -> ParamConfig:
    return cfg if isinstance(cfg, ParamConfig) else ParamConfig.model_validate(cfg)


def _as_user(cfg: Optional[Union[dict, UserConfig]]) -> UserConfig:
    if isinstance(cfg, UserConfig):
        return cfg
    return UserConfig.model_validate(cfg or {})


def resolve_config(
    param_cfg: Union[dict, ParamConfig],
    user_cfg: Optional[Union[dict, UserConfig]] = None,
    override_cfg: Optional[Union[dict, UserConfig]] = None,
) -> InternalConfig:
    """Build the frozen runtime configuration.

    Parameters
    ----------
    param_cfg : dict or ParamConfig
        Expert defaults. A dict is validated as ParamConfig first.
    user_cfg : dict or UserConfig, optional
        User overrides, typically from a config file (flat aliases such as
        ``THRESHOLD`` or nested sections). None means defaults only.
    override_cfg : dict or UserConfig, optional
        Highest-priority overrides in the same format as ``user_cfg``
        (e.g. keyword arguments to ``init_runtime_config``).

    Returns
    -------
    InternalConfig

    Raises
    ------
    pydantic.ValidationError
        If an input or the merged values violate a field range or
        cross-field rule.

    Examples
    --------
    >>> config = resolve_config(ParamConfig(), UserConfig(THRESHOLD=200))
    >>> config.segmenter.threshold
    200.0
    """
    param = _as_param(param_cfg)
    user = _as_user(user_cfg)
    override = _as_user(override_cfg)

    merged = deep_merge(
        param.model_dump(),
        user.to_internal_overrides(),
        override.to_internal_overrides(),
    )
    checked = ParamConfig.model_validate(merged)

    return InternalConfig.model_validate(checked.model_dump())
