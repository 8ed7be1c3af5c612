import pytest

from checkpoint_nav.errors import PoseNotInitializedError
from checkpoint_nav.geometry import Point

from conftest import pose_at


def test_status_before_anything(navigator):
    status = navigator.status()
    assert status["pose"] is None
    assert status["goal"] is None
    assert status["distance_to_goal"] is None
    assert status["checkpoint_cursor"] == -1
    assert status["remaining_checkpoints"] == 2
    assert status["turn_state"] == "not_started"


def test_status_uses_latest_pose(navigator):
    navigator.move_to_next_checkpoint()
    navigator.on_pose(pose_at(3.0, 4.0))
    status = navigator.status()
    assert status["pose"] == [3.0, 4.0]
    assert status["goal"] == [0.0, 0.0]
    assert status["distance_to_goal"] == pytest.approx(5.0)
    assert status["remaining_checkpoints"] == 1


def test_facade_routes_to_components(navigator, canceller, costmap_clearer):
    with pytest.raises(PoseNotInitializedError):
        navigator.is_goal_reached()
    navigator.on_pose(pose_at(3.0, 2.0))
    assert navigator.move_to_bin().goal.position == Point(3.0, 2.0)
    assert costmap_clearer.calls == 1
    assert navigator.is_goal_reached()
    assert navigator.stop_moving().confirmed
    assert canceller.cancels == 1
