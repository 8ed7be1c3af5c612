import math

import pytest

from checkpoint_nav.config import DEFAULT_CHECKPOINTS, NavigationConfig, parse_bool, parse_points
from checkpoint_nav.errors import ConfigError
from checkpoint_nav.geometry import Point


def test_reference_defaults():
    config = NavigationConfig()
    assert config.checkpoints == DEFAULT_CHECKPOINTS
    assert len(config.checkpoints) == 5
    assert config.bin_location == Point(0.0, 0.0)
    assert config.goal_tolerance == 0.1
    assert config.turn_speed == 0.6
    assert config.cancel_timeout == 2.0
    assert config.goal_frame == "map"
    assert config.goal_publish_repeats == 2


def test_config_is_frozen():
    config = NavigationConfig()
    with pytest.raises(AttributeError):
        config.goal_tolerance = 1.0


def test_checkpoints_list_is_stored_as_tuple():
    config = NavigationConfig(checkpoints=[Point(1, 2)])
    assert config.checkpoints == (Point(1, 2),)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"goal_tolerance": 0.0},
        {"turn_speed": -0.6},
        {"turn_complete_band": math.pi},
        {"cancel_timeout": 0},
        {"goal_publish_repeats": 0},
        {"goal_frame": ""},
        {"loop_hz": 0.0},
    ],
)
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ConfigError):
        NavigationConfig(**kwargs)


def test_with_overrides():
    config = NavigationConfig().with_overrides(goal_tolerance=0.25)
    assert config.goal_tolerance == 0.25
    with pytest.raises(ConfigError):
        NavigationConfig().with_overrides(no_such_field=1)


def test_parse_points():
    assert parse_points("0,0; 1,-1;4.5,-6") == (Point(0, 0), Point(1, -1), Point(4.5, -6))
    assert parse_points("1,2,3") == (Point(1, 2, 3),)
    assert parse_points("") == ()


@pytest.mark.parametrize("text", ["1", "a,b", "1,2,3,4"])
def test_parse_points_rejects_malformed(text):
    with pytest.raises(ConfigError):
        parse_points(text)


def test_parse_bool():
    assert parse_bool("Yes") is True
    assert parse_bool("0") is False
    with pytest.raises(ConfigError):
        parse_bool("maybe")


def test_from_env():
    config = NavigationConfig.from_env(
        {
            "NAV_CHECKPOINTS": "0,0;2,2",
            "NAV_BIN_LOCATION": "-1,3",
            "NAV_GOAL_TOLERANCE": "0.2",
            "NAV_TURN_SPEED": "0.5",
            "NAV_CANCEL_TIMEOUT": "3",
            "NAV_GOAL_FRAME": "odom",
            "NAV_GOAL_PUBLISH_REPEATS": "1",
            "NAV_STOP_ON_TURN_COMPLETE": "false",
            "NAV_LOOP_HZ": "5",
        }
    )
    assert config.checkpoints == (Point(0, 0), Point(2, 2))
    assert config.bin_location == Point(-1, 3)
    assert config.goal_tolerance == 0.2
    assert config.turn_speed == 0.5
    assert config.cancel_timeout == 3.0
    assert config.goal_frame == "odom"
    assert config.goal_publish_repeats == 1
    assert config.stop_on_turn_complete is False
    assert config.loop_hz == 5.0


def test_from_env_defaults_when_unset():
    assert NavigationConfig.from_env({}) == NavigationConfig()


def test_from_env_bad_number():
    with pytest.raises(ConfigError):
        NavigationConfig.from_env({"NAV_GOAL_TOLERANCE": "close"})


def test_from_env_bin_needs_one_point():
    with pytest.raises(ConfigError):
        NavigationConfig.from_env({"NAV_BIN_LOCATION": "1,1;2,2"})


def test_from_env_rejects_non_positive_loop_rate():
    with pytest.raises(ConfigError):
        NavigationConfig.from_env({"NAV_LOOP_HZ": "-1"})


def test_with_params_accepts_lists_and_strings():
    config = NavigationConfig().with_params(
        {
            "checkpoints": [[0, 0], [2.5, -1]],
            "bin_location": [4, 4],
            "goal_tolerance": 0.2,
            "loop_hz": 20.0,
        }
    )
    assert config.checkpoints == (Point(0, 0), Point(2.5, -1))
    assert config.bin_location == Point(4, 4)
    assert config.goal_tolerance == 0.2
    assert config.loop_hz == 20.0

    config = NavigationConfig().with_params({"checkpoints": "1,1;2,2", "bin_location": "3,-3"})
    assert config.checkpoints == (Point(1, 1), Point(2, 2))
    assert config.bin_location == Point(3, -3)


def test_with_params_empty_is_unchanged():
    base = NavigationConfig()
    assert base.with_params({}) is base


@pytest.mark.parametrize(
    "params",
    [
        {"bin_location": ""},
        {"bin_location": "1,1;2,2"},
        {"checkpoints": [["a", 1]]},
        {"loop_hz": 0},
        {"unknown": 1},
    ],
)
def test_with_params_rejects_bad_values(params):
    with pytest.raises(ConfigError):
        NavigationConfig().with_params(params)
