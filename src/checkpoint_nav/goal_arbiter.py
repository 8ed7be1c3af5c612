"""
Goal selection: checkpoints in order, the bin, or an ad-hoc object pose.

Every selection replaces the previous goal; there is no queue. Goals are sent
`goal_publish_repeats` times because /move_base_simple/goal is a plain topic
and a single message is occasionally dropped.
"""

from __future__ import annotations

import enum
import logging
import threading
from dataclasses import dataclass
from typing import Optional

from .config import NavigationConfig
from .geometry import Point, Pose, goal_from_position
from .interfaces import CostmapClearer, GoalSink

logger = logging.getLogger(__name__)

SOURCE_CHECKPOINT = "checkpoint"
SOURCE_BIN = "bin"
SOURCE_OBJECT = "object"


class GoalStatus(enum.Enum):
    PUBLISHED = "published"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class GoalSelection:
    status: GoalStatus
    goal: Optional[Pose] = None
    source: Optional[str] = None
    checkpoint_index: Optional[int] = None
    costmaps_cleared: Optional[bool] = None

    @property
    def published(self) -> bool:
        return self.status is GoalStatus.PUBLISHED

    @property
    def exhausted(self) -> bool:
        return self.status is GoalStatus.EXHAUSTED


class GoalArbiter:
    def __init__(
        self,
        config: NavigationConfig,
        goal_sink: GoalSink,
        costmap_clearer: CostmapClearer,
    ):
        self._config = config
        self._goal_sink = goal_sink
        self._costmap_clearer = costmap_clearer
        self._lock = threading.Lock()
        self._cursor = -1
        self._goal_pose: Optional[Pose] = None

    @property
    def goal_pose(self) -> Optional[Pose]:
        with self._lock:
            return self._goal_pose

    @property
    def checkpoint_cursor(self) -> int:
        return self._cursor

    @property
    def checkpoints(self):
        return self._config.checkpoints

    @property
    def bin_location(self) -> Point:
        return self._config.bin_location

    @property
    def remaining_checkpoints(self) -> int:
        return max(0, len(self._config.checkpoints) - (self._cursor + 1))

    @property
    def is_exhausted(self) -> bool:
        return self.remaining_checkpoints == 0

    def peek_next_checkpoint(self) -> Optional[Point]:
        """Checkpoint the next advance would select, or None if none are left."""
        nxt = self._cursor + 1
        if nxt < len(self._config.checkpoints):
            return self._config.checkpoints[nxt]
        return None

    def advance_to_next_checkpoint(self) -> GoalSelection:
        checkpoints = self._config.checkpoints
        # Saturate at len() so repeated calls after the end stay exhausted.
        self._cursor = min(self._cursor + 1, len(checkpoints))
        if self._cursor >= len(checkpoints):
            logger.info("[Navigation] No more checkpoints available")
            return GoalSelection(GoalStatus.EXHAUSTED)

        goal = goal_from_position(checkpoints[self._cursor])
        self._emit(goal)
        logger.info(
            "[Navigation] Published checkpoint %d/%d as goal (x=%.2f, y=%.2f)",
            self._cursor + 1,
            len(checkpoints),
            goal.position.x,
            goal.position.y,
        )
        return GoalSelection(
            GoalStatus.PUBLISHED,
            goal=goal,
            source=SOURCE_CHECKPOINT,
            checkpoint_index=self._cursor,
        )

    def set_bin_as_goal(self) -> GoalSelection:
        cleared = self._costmap_clearer.clear_costmaps()
        if not cleared:
            logger.warning("[Navigation] Costmap reset failed; publishing bin goal anyway")

        goal = goal_from_position(self._config.bin_location)
        self._emit(goal)
        logger.info(
            "[Navigation] Published bin pose as goal (x=%.2f, y=%.2f)",
            goal.position.x,
            goal.position.y,
        )
        return GoalSelection(
            GoalStatus.PUBLISHED,
            goal=goal,
            source=SOURCE_BIN,
            costmaps_cleared=cleared,
        )

    def set_object_as_goal(self, object_pose: Pose) -> GoalSelection:
        goal = goal_from_position(object_pose.position)
        self._emit(goal)
        logger.info(
            "[Navigation] Published object pose as goal (x=%.2f, y=%.2f)",
            goal.position.x,
            goal.position.y,
        )
        return GoalSelection(GoalStatus.PUBLISHED, goal=goal, source=SOURCE_OBJECT)

    def _emit(self, goal: Pose) -> None:
        for _ in range(self._config.goal_publish_repeats):
            self._goal_sink.publish_goal(goal, self._config.goal_frame)
        with self._lock:
            self._goal_pose = goal
