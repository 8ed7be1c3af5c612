"""
Navigator: one object wiring pose feed, goal arbiter, arrival check, turn
machine and canceller around a single NavigationConfig.

Transport-agnostic; main.py hands it the rospy adapters.
"""

from __future__ import annotations

import logging
from typing import Optional

from .arrival import ArrivalDetector
from .canceller import CancelResult, MotionCanceller
from .config import NavigationConfig
from .geometry import Pose, planar_distance
from .goal_arbiter import GoalArbiter, GoalSelection
from .interfaces import CancelSink, CostmapClearer, GoalSink, StatusWaiter, VelocitySink
from .pose_feed import PoseFeed
from .turn_around import TurnAroundMachine, TurnState

logger = logging.getLogger(__name__)


class Navigator:
    def __init__(
        self,
        config: NavigationConfig,
        goal_sink: GoalSink,
        costmap_clearer: CostmapClearer,
        cancel_sink: CancelSink,
        status_waiter: StatusWaiter,
        velocity_sink: VelocitySink,
        pose_feed: Optional[PoseFeed] = None,
    ):
        self.config = config
        self.pose_feed = pose_feed or PoseFeed()
        self.arbiter = GoalArbiter(config, goal_sink, costmap_clearer)
        self.arrival = ArrivalDetector(self.pose_feed, self.arbiter, config.goal_tolerance)
        self.turn = TurnAroundMachine(self.pose_feed, velocity_sink, config)
        self.canceller = MotionCanceller(cancel_sink, status_waiter, config.cancel_timeout)
        logger.info(
            "[Navigation] Navigation object initialized (%d checkpoints)", len(config.checkpoints)
        )

    def on_pose(self, pose: Pose) -> None:
        self.pose_feed.update(pose)

    def move_to_next_checkpoint(self) -> GoalSelection:
        return self.arbiter.advance_to_next_checkpoint()

    def move_to_bin(self) -> GoalSelection:
        return self.arbiter.set_bin_as_goal()

    def move_near_object(self, object_pose: Pose) -> GoalSelection:
        return self.arbiter.set_object_as_goal(object_pose)

    def is_goal_reached(self) -> bool:
        return self.arrival.is_goal_reached()

    def turn_around(self) -> TurnState:
        return self.turn.tick()

    def stop_moving(self) -> CancelResult:
        return self.canceller.stop_moving()

    def status(self) -> dict:
        """Snapshot of navigation state, suitable for logging or JSON."""
        pose = self.pose_feed.latest()
        goal = self.arbiter.goal_pose
        distance = None
        if pose is not None and goal is not None:
            # one pose snapshot for every field
            distance = planar_distance(pose.position, goal.position)
        return {
            "pose": None if pose is None else [pose.position.x, pose.position.y],
            "goal": None if goal is None else [goal.position.x, goal.position.y],
            "distance_to_goal": distance,
            "checkpoint_cursor": self.arbiter.checkpoint_cursor,
            "remaining_checkpoints": self.arbiter.remaining_checkpoints,
            "turn_state": self.turn.state.value,
        }
