import pytest

from meghnet.schemas.user import UserConfig

pytestmark = pytest.mark.unit


def test_uppercase_keys_are_handled():
    raw = {
        "THRESHOLD": 200,
        "DARKEN_FACTOR": 0.25,
        "MAX_WORKERS": 2,
        "LOG_LEVEL": "warning",
    }

    user = UserConfig.model_validate(raw)

    assert isinstance(user.threshold, float) and user.threshold == 200.0
    assert user.darken_factor == 0.25
    assert user.max_workers == 2
    assert user.log_level == "WARNING"


def test_field_names_are_accepted():
    user = UserConfig(threshold=190, draw_overlay=True)

    assert user.threshold == 190.0
    assert user.draw_overlay is True


def test_unknown_keys_are_ignored():
    raw = {"THRESHOLD": 185, "UNKNOWN_LEGACY": 12345}
    user = UserConfig.model_validate(raw)

    assert user.threshold == 185.0
    # Unknown key should not become an attribute nor raise
    assert not hasattr(user, "UNKNOWN_LEGACY")


def test_overrides_only_contain_set_values():
    overrides = UserConfig(SPEED_CALIBRATION=0.75, MAX_WORKERS=1).to_internal_overrides()

    assert overrides == {
        "predictor": {"speed_calibration": 0.75},
        "pipeline": {"max_workers": 1},
    }


def test_empty_user_config_has_no_overrides():
    assert UserConfig().to_internal_overrides() == {}
