"""
Mission controller: decides when to chase checkpoints and when to stop and scan.

Loop per checkpoint: drive there, rotate in place once while the detector
watches, and either head for a detected object (then the bin) or move on.
Call step() at a fixed rate; it never blocks except inside stop_moving().
"""

from __future__ import annotations

import enum
import logging
import threading
from typing import Optional

from .errors import PoseNotInitializedError
from .geometry import Pose
from .navigator import Navigator
from .turn_around import TurnState

logger = logging.getLogger(__name__)


class MissionPhase(enum.Enum):
    IDLE = "idle"
    TO_CHECKPOINT = "to_checkpoint"
    SCANNING = "scanning"
    TO_OBJECT = "to_object"
    TO_BIN = "to_bin"
    DONE = "done"


class MissionController:
    def __init__(self, navigator: Navigator):
        self.navigator = navigator
        self.phase = MissionPhase.IDLE
        self._object_lock = threading.Lock()
        self._object_pose: Optional[Pose] = None

    def report_object(self, pose: Pose) -> None:
        """Record the latest detected object pose (called from the detector callback)."""
        with self._object_lock:
            self._object_pose = pose

    def _take_object(self) -> Optional[Pose]:
        with self._object_lock:
            pose, self._object_pose = self._object_pose, None
            return pose

    @property
    def done(self) -> bool:
        return self.phase is MissionPhase.DONE

    def step(self) -> MissionPhase:
        try:
            self._step()
        except PoseNotInitializedError:
            logger.info("[Mission] Waiting for initial pose")
        return self.phase

    def _step(self) -> None:
        nav = self.navigator

        if self.phase is MissionPhase.IDLE:
            self._next_checkpoint()

        elif self.phase is MissionPhase.TO_CHECKPOINT:
            if nav.is_goal_reached():
                logger.info("[Mission] Checkpoint reached; scanning")
                nav.turn.request_turn()
                self._take_object()
                self._set_phase(MissionPhase.SCANNING)

        elif self.phase is MissionPhase.SCANNING:
            target = self._take_object()
            if target is not None:
                nav.turn.abort()
                result = nav.stop_moving()
                if not result.confirmed:
                    logger.warning("[Mission] Proceeding without cancellation confirmation")
                nav.move_near_object(target)
                self._set_phase(MissionPhase.TO_OBJECT)
                return
            if nav.turn_around() is TurnState.COMPLETE:
                logger.info("[Mission] Scan finished without detection")
                self._next_checkpoint()

        elif self.phase is MissionPhase.TO_OBJECT:
            if nav.is_goal_reached():
                nav.move_to_bin()
                self._set_phase(MissionPhase.TO_BIN)

        elif self.phase is MissionPhase.TO_BIN:
            if nav.is_goal_reached():
                logger.info("[Mission] Object delivered to bin")
                self._set_phase(MissionPhase.DONE)

    def _next_checkpoint(self) -> None:
        selection = self.navigator.move_to_next_checkpoint()
        if selection.exhausted:
            logger.info("[Mission] All checkpoints visited")
            self._set_phase(MissionPhase.DONE)
        else:
            self._set_phase(MissionPhase.TO_CHECKPOINT)

    def _set_phase(self, phase: MissionPhase) -> None:
        if phase is not self.phase:
            logger.info("[Mission] %s -> %s", self.phase.value, phase.value)
            self.phase = phase
