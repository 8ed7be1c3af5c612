"""Arrival check: is the robot within `goal_tolerance` of the current goal (x/y only)?"""

from __future__ import annotations

import logging
from typing import Optional

from .goal_arbiter import GoalArbiter
from .geometry import planar_distance
from .pose_feed import PoseFeed

logger = logging.getLogger(__name__)


class ArrivalDetector:
    def __init__(self, pose_feed: PoseFeed, arbiter: GoalArbiter, tolerance: float = 0.1):
        self._pose_feed = pose_feed
        self._arbiter = arbiter
        self.tolerance = tolerance

    def distance_to_goal(self) -> Optional[float]:
        """
        Planar distance from the latest pose to the goal.

        Raises PoseNotInitializedError before the first pose sample.
        Returns None when no goal has been selected yet.
        """
        pose = self._pose_feed.require("arrival check")
        goal = self._arbiter.goal_pose
        if goal is None:
            return None
        return planar_distance(pose.position, goal.position)

    def is_goal_reached(self) -> bool:
        distance = self.distance_to_goal()
        if distance is None:
            logger.debug("[Navigation] No goal selected yet; not arrived")
            return False
        return distance <= self.tolerance
