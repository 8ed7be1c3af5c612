"""
checkpoint_nav: waypoint tour, arrival detection and in-place scan rotation
for a move_base robot.

The core modules here are ROS-free; ros_clients holds the rospy adapters.
"""

from .arrival import ArrivalDetector
from .canceller import CancelResult, CancelStatus, MotionCanceller
from .config import NavigationConfig
from .errors import ConfigError, NavigationError, PoseNotInitializedError
from .geometry import Point, Pose, Quaternion
from .goal_arbiter import GoalArbiter, GoalSelection, GoalStatus
from .mission import MissionController, MissionPhase
from .navigator import Navigator
from .pose_feed import PoseFeed
from .turn_around import TurnAroundMachine, TurnState

__all__ = [
    "ArrivalDetector",
    "CancelResult",
    "CancelStatus",
    "ConfigError",
    "GoalArbiter",
    "GoalSelection",
    "GoalStatus",
    "MissionController",
    "MissionPhase",
    "MotionCanceller",
    "NavigationConfig",
    "NavigationError",
    "Navigator",
    "Point",
    "Pose",
    "PoseFeed",
    "PoseNotInitializedError",
    "Quaternion",
    "TurnAroundMachine",
    "TurnState",
]
