"""
Boundary contracts between the navigation core and the transport layer.

The rospy implementations live in ros_clients.move_base; tests use in-memory fakes.
"""

from __future__ import annotations

from typing import Optional, Protocol

from .geometry import Pose


class GoalSink(Protocol):
    def publish_goal(self, pose: Pose, frame_id: str) -> None:
        ...


class CostmapClearer(Protocol):
    def clear_costmaps(self) -> bool:
        """Return True if the planner acknowledged the reset."""
        ...


class CancelSink(Protocol):
    def cancel_all_goals(self) -> None:
        ...


class StatusWaiter(Protocol):
    def wait_for_status(self, timeout: float) -> Optional[object]:
        """Block up to `timeout` seconds; None when nothing arrived."""
        ...


class VelocitySink(Protocol):
    def send_angular_velocity(self, rad_per_s: float) -> None:
        ...
