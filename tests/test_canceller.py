import time

from checkpoint_nav.canceller import CancelStatus, MotionCanceller

from conftest import FakeCanceller


def test_confirmed_cancellation():
    fake = FakeCanceller(reply=["status"])
    result = MotionCanceller(fake, fake, timeout=2.0).stop_moving()
    assert fake.cancels == 1
    assert fake.timeouts == [2.0]
    assert result.status is CancelStatus.CONFIRMED
    assert result.confirmed


def test_timeout_is_degraded_not_fatal():
    fake = FakeCanceller(reply=None, delay=0.05)
    canceller = MotionCanceller(fake, fake, timeout=0.05)
    start = time.monotonic()
    result = canceller.stop_moving()
    assert time.monotonic() - start < 1.0
    assert result.status is CancelStatus.TIMED_OUT
    assert not result.confirmed
    assert fake.cancels == 1


def test_cancel_is_sent_before_waiting():
    order = []

    class Recorder:
        def cancel_all_goals(self):
            order.append("cancel")

        def wait_for_status(self, timeout):
            order.append("wait")
            return None

    rec = Recorder()
    MotionCanceller(rec, rec).stop_moving()
    assert order == ["cancel", "wait"]
