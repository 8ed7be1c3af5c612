"""
Latest-pose slot fed by the localization stream.

rospy delivers subscriber callbacks on their own threads, so the slot is
guarded by a lock. Only the most recent sample is kept.
"""

from __future__ import annotations

import threading
from typing import Optional

from .errors import PoseNotInitializedError
from .geometry import Pose


class PoseFeed:
    def __init__(self):
        self._lock = threading.Lock()
        self._pose: Optional[Pose] = None

    def update(self, pose: Pose) -> None:
        with self._lock:
            self._pose = pose

    def latest(self) -> Optional[Pose]:
        with self._lock:
            return self._pose

    @property
    def has_pose(self) -> bool:
        return self.latest() is not None

    def require(self, operation: str = "operation") -> Pose:
        """Return the latest pose or raise PoseNotInitializedError."""
        pose = self.latest()
        if pose is None:
            raise PoseNotInitializedError(operation)
        return pose
