"""Shared pydantic settings for every Megh-Net config model."""

from pydantic import BaseModel, ConfigDict


class MeghnetBaseModel(BaseModel):
    """Strict base: unknown keys are errors and assignments are re-validated.

    UserConfig relaxes ``extra`` to ignore legacy keys; InternalConfig adds
    ``frozen``.
    """

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        use_enum_values=True,
        str_strip_whitespace=True,
    )
