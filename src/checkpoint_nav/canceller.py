"""Cancel the active move_base goal and wait, bounded, for a status reply."""

from __future__ import annotations

import enum
import logging
import time
from dataclasses import dataclass

from .interfaces import CancelSink, StatusWaiter

logger = logging.getLogger(__name__)


class CancelStatus(enum.Enum):
    CONFIRMED = "confirmed"
    TIMED_OUT = "timed_out"


@dataclass(frozen=True)
class CancelResult:
    status: CancelStatus
    waited: float

    @property
    def confirmed(self) -> bool:
        return self.status is CancelStatus.CONFIRMED


class MotionCanceller:
    def __init__(self, cancel_sink: CancelSink, status_waiter: StatusWaiter, timeout: float = 2.0):
        self._cancel_sink = cancel_sink
        self._status_waiter = status_waiter
        self.timeout = timeout

    def stop_moving(self) -> CancelResult:
        """
        Cancel all active goals, then wait up to `timeout` seconds for a status
        message. A missing reply is a warning: the caller may retry or carry on.
        """
        self._cancel_sink.cancel_all_goals()
        logger.info("[Navigation] Waiting for goal cancellation response.")

        start = time.monotonic()
        reply = self._status_waiter.wait_for_status(self.timeout)
        waited = time.monotonic() - start

        if reply is None:
            logger.warning(
                "[Navigation] Cancellation request not received within %.1fs", self.timeout
            )
            return CancelResult(CancelStatus.TIMED_OUT, waited)

        logger.info("[Navigation] Robot stopped moving")
        return CancelResult(CancelStatus.CONFIRMED, waited)
