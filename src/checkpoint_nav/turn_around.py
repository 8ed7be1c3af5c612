"""
In-place scan rotation tracked by relative orientation.

At the start of a turn the inverse of the current orientation is stored.
Composing each later orientation with it (current * reference) gives a
quaternion whose yaw is the rotation since the start: it climbs from 0 to pi,
wraps to -pi and climbs back toward 0. Arriving in the small negative band
just below 0 means a full revolution, independent of timing or speed.
"""

from __future__ import annotations

import enum
import logging
import math
from typing import Optional

import numpy as np

from .config import NavigationConfig
from .errors import PoseNotInitializedError
from .geometry import quaternion_inverse, quaternion_multiply, yaw_from_quaternion
from .interfaces import VelocitySink
from .pose_feed import PoseFeed

logger = logging.getLogger(__name__)


class TurnState(enum.Enum):
    NOT_STARTED = "not_started"
    TURNING = "turning"
    COMPLETE = "complete"


class TurnAroundMachine:
    def __init__(
        self,
        pose_feed: PoseFeed,
        velocity_sink: VelocitySink,
        config: Optional[NavigationConfig] = None,
    ):
        config = config or NavigationConfig()
        self._pose_feed = pose_feed
        self._velocity_sink = velocity_sink
        self.turn_speed = config.turn_speed
        self.complete_band = config.turn_complete_band
        self.stop_on_complete = config.stop_on_turn_complete

        self._state = TurnState.NOT_STARTED
        self._reference: Optional[np.ndarray] = None
        self._armed = False
        self._last_yaw: Optional[float] = None

    @property
    def state(self) -> TurnState:
        return self._state

    @property
    def is_complete(self) -> bool:
        return self._state is TurnState.COMPLETE

    @property
    def reference_orientation(self) -> Optional[np.ndarray]:
        return None if self._reference is None else self._reference.copy()

    @property
    def last_yaw(self) -> Optional[float]:
        return self._last_yaw

    @property
    def rotation_progress(self) -> float:
        """Rotation since the start of the current turn, in [0, 2*pi)."""
        if self._state is TurnState.COMPLETE:
            return 2.0 * math.pi
        if self._last_yaw is None:
            return 0.0
        return self._last_yaw % (2.0 * math.pi)

    def reset(self) -> None:
        """Return to NOT_STARTED so the next tick begins a new turn."""
        self._state = TurnState.NOT_STARTED
        self._reference = None
        self._armed = False
        self._last_yaw = None

    request_turn = reset

    def abort(self) -> None:
        """Stop an in-progress rotation and return to NOT_STARTED."""
        if self._state is TurnState.TURNING:
            self._velocity_sink.send_angular_velocity(0.0)
            logger.info("[Navigation] Turn aborted")
        self.reset()

    def tick(self) -> TurnState:
        """
        Advance the turn by one control cycle and return the resulting state.

        Raises PoseNotInitializedError (without changing state or commanding
        the base) when no pose has been received yet.
        """
        if self._state is TurnState.COMPLETE:
            return self._state

        pose = self._pose_feed.latest()
        if pose is None:
            logger.info("[Navigation] Waiting for initial pose")
            raise PoseNotInitializedError("turn around")

        current = pose.orientation.as_array()

        if self._state is TurnState.NOT_STARTED:
            self._reference = quaternion_inverse(current)
            self._armed = False
            self._last_yaw = 0.0
            self._state = TurnState.TURNING
            logger.info("[Navigation] Turn started")
            return self._state

        relative = quaternion_multiply(current, self._reference)
        yaw = yaw_from_quaternion(relative)
        self._last_yaw = yaw
        # Completion only counts once the yaw has been at least one band width
        # away from the start, so jitter around zero cannot end the turn.
        if abs(yaw) >= self.complete_band:
            self._armed = True

        if self._armed and -self.complete_band < yaw < 0.0:
            self._state = TurnState.COMPLETE
            if self.stop_on_complete:
                self._velocity_sink.send_angular_velocity(0.0)
            logger.info("[Navigation] Turning complete")
            return self._state

        self._velocity_sink.send_angular_velocity(self.turn_speed)
        logger.debug("[Navigation] Turning around: %.3f", yaw)
        return self._state
