"""
Navigation configuration.

One immutable NavigationConfig is built at startup and injected into every
component. Values come from defaults, then environment variables (a `.env`
file is loaded by the entrypoint), then ROS private params on the robot.

Env vars:
- NAV_CHECKPOINTS: "x,y;x,y;..." ordered checkpoint positions
- NAV_BIN_LOCATION: "x,y"
- NAV_GOAL_TOLERANCE: arrival radius in meters (default 0.1)
- NAV_TURN_SPEED: scan rotation speed in rad/s (default 0.6)
- NAV_CANCEL_TIMEOUT: seconds to wait for move_base status after cancel (default 2.0)
- NAV_GOAL_FRAME: frame id stamped on goals (default "map")
- NAV_GOAL_PUBLISH_REPEATS: sends per goal (default 2)
- NAV_STOP_ON_TURN_COMPLETE: "true"/"false" (default true)
- NAV_LOOP_HZ: mission loop rate in Hz (default 10)
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, fields, replace
from typing import Mapping, Optional, Tuple

from .errors import ConfigError
from .geometry import Point

DEFAULT_CHECKPOINTS: Tuple[Point, ...] = (
    Point(0.0, 0.0),
    Point(1.0, -1.0),
    Point(4.0, -6.0),
    Point(-1.0, -6.0),
    Point(-4.0, -3.0),
)

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class NavigationConfig:
    checkpoints: Tuple[Point, ...] = DEFAULT_CHECKPOINTS
    bin_location: Point = Point(0.0, 0.0)

    goal_tolerance: float = 0.1
    turn_speed: float = 0.6
    turn_complete_band: float = 0.1
    cancel_timeout: float = 2.0
    goal_frame: str = "map"
    goal_publish_repeats: int = 2
    stop_on_turn_complete: bool = True
    loop_hz: float = 10.0

    goal_topic: str = "/move_base_simple/goal"
    cmd_vel_topic: str = "/mobile_base_controller/cmd_vel"
    cancel_topic: str = "/move_base/cancel"
    status_topic: str = "/move_base/status"
    pose_topic: str = "/robot_pose"
    clear_costmaps_service: str = "/move_base/clear_costmaps"
    object_pose_topic: str = "/object_pose"

    def __post_init__(self):
        object.__setattr__(self, "checkpoints", tuple(self.checkpoints))
        if self.goal_tolerance <= 0:
            raise ConfigError(f"goal_tolerance must be > 0, got {self.goal_tolerance}")
        if self.turn_speed <= 0:
            raise ConfigError(f"turn_speed must be > 0, got {self.turn_speed}")
        if not (0 < self.turn_complete_band < math.pi):
            raise ConfigError(
                f"turn_complete_band must be in (0, pi), got {self.turn_complete_band}"
            )
        if self.cancel_timeout <= 0:
            raise ConfigError(f"cancel_timeout must be > 0, got {self.cancel_timeout}")
        if self.goal_publish_repeats < 1:
            raise ConfigError(
                f"goal_publish_repeats must be >= 1, got {self.goal_publish_repeats}"
            )
        if not self.goal_frame:
            raise ConfigError("goal_frame must not be empty")
        if self.loop_hz <= 0:
            raise ConfigError(f"loop_hz must be > 0, got {self.loop_hz}")

    def with_overrides(self, **overrides) -> "NavigationConfig":
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise ConfigError(f"Unknown config fields: {sorted(unknown)}")
        return replace(self, **overrides)

    def with_params(self, params: Mapping[str, object]) -> "NavigationConfig":
        """
        Apply ROS private params (already read into a dict, keys without "~")
        on top of this config. Point lists accept "x,y;x,y" strings or
        [[x, y], ...] lists.
        """
        overrides = {}
        for key, value in params.items():
            if key == "checkpoints":
                overrides[key] = _points_param(key, value)
            elif key == "bin_location":
                if isinstance(value, str):
                    points = _points_param(key, value)
                else:
                    points = _points_param(key, [value])
                if len(points) != 1:
                    raise ConfigError(f"bin_location must hold exactly one point, got {len(points)}")
                overrides[key] = points[0]
            else:
                overrides[key] = value
        return self.with_overrides(**overrides) if overrides else self

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "NavigationConfig":
        """Build a config from NAV_* environment variables on top of the defaults."""
        env = os.environ if environ is None else environ
        overrides = {}

        if env.get("NAV_CHECKPOINTS", "").strip():
            overrides["checkpoints"] = parse_points(env["NAV_CHECKPOINTS"])
        if env.get("NAV_BIN_LOCATION", "").strip():
            points = parse_points(env["NAV_BIN_LOCATION"])
            if len(points) != 1:
                raise ConfigError(f"NAV_BIN_LOCATION must hold exactly one point, got {len(points)}")
            overrides["bin_location"] = points[0]

        for key, name, cast in (
            ("NAV_GOAL_TOLERANCE", "goal_tolerance", float),
            ("NAV_TURN_SPEED", "turn_speed", float),
            ("NAV_CANCEL_TIMEOUT", "cancel_timeout", float),
            ("NAV_LOOP_HZ", "loop_hz", float),
            ("NAV_GOAL_PUBLISH_REPEATS", "goal_publish_repeats", int),
        ):
            raw = env.get(key, "").strip()
            if raw:
                try:
                    overrides[name] = cast(raw)
                except ValueError:
                    raise ConfigError(f"Invalid {key}: {raw!r}") from None

        frame = env.get("NAV_GOAL_FRAME", "").strip()
        if frame:
            overrides["goal_frame"] = frame

        raw = env.get("NAV_STOP_ON_TURN_COMPLETE", "").strip()
        if raw:
            overrides["stop_on_turn_complete"] = parse_bool(raw)

        return cls(**overrides)


def parse_points(text: str) -> Tuple[Point, ...]:
    """
    Parse "x,y;x,y" into Points. Empty segments are skipped, so "" is an
    empty checkpoint list.
    """
    points = []
    for chunk in text.split(";"):
        chunk = chunk.strip()
        if not chunk:
            continue
        parts = [p.strip() for p in chunk.split(",")]
        if len(parts) not in (2, 3):
            raise ConfigError(f"Expected 'x,y' or 'x,y,z', got {chunk!r}")
        try:
            coords = [float(p) for p in parts]
        except ValueError:
            raise ConfigError(f"Non-numeric coordinate in {chunk!r}") from None
        points.append(Point(*coords))
    return tuple(points)


def parse_bool(text: str) -> bool:
    value = text.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigError(f"Expected a boolean, got {text!r}")


def _points_param(name: str, value) -> Tuple[Point, ...]:
    if isinstance(value, str):
        return parse_points(value)
    try:
        return tuple(Point(*(float(c) for c in p)) for p in value)
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid {name}: {value!r}") from None
