import pytest

from checkpoint_nav.arrival import ArrivalDetector
from checkpoint_nav.config import NavigationConfig
from checkpoint_nav.errors import PoseNotInitializedError
from checkpoint_nav.geometry import Point, Pose
from checkpoint_nav.goal_arbiter import GoalArbiter
from checkpoint_nav.pose_feed import PoseFeed

from conftest import FakeCostmapClearer, FakeGoalSink, pose_at


@pytest.fixture
def setup():
    feed = PoseFeed()
    arbiter = GoalArbiter(NavigationConfig(checkpoints=()), FakeGoalSink(), FakeCostmapClearer())
    return feed, arbiter, ArrivalDetector(feed, arbiter, tolerance=0.1)


def test_arrival_within_threshold(setup):
    feed, arbiter, detector = setup
    feed.update(pose_at(0.0, 0.0))
    arbiter.set_object_as_goal(Pose(Point(0.05, 0.05)))
    assert detector.distance_to_goal() == pytest.approx(0.0707, abs=1e-4)
    assert detector.is_goal_reached()


def test_not_arrived_outside_threshold(setup):
    feed, arbiter, detector = setup
    feed.update(pose_at(0.0, 0.0))
    arbiter.set_object_as_goal(Pose(Point(0.2, 0.0)))
    assert not detector.is_goal_reached()


def test_boundary_is_inclusive(setup):
    feed, arbiter, detector = setup
    feed.update(pose_at(0.0, 0.0))
    arbiter.set_object_as_goal(Pose(Point(0.1, 0.0)))
    assert detector.is_goal_reached()
    arbiter.set_object_as_goal(Pose(Point(0.10001, 0.0)))
    assert not detector.is_goal_reached()


def test_height_and_heading_are_ignored(setup):
    feed, arbiter, detector = setup
    feed.update(Pose(Point(1.0, 1.0, 3.0), pose_at(0, 0, 2.0).orientation))
    arbiter.set_object_as_goal(Pose(Point(1.0, 1.05, -1.0)))
    assert detector.is_goal_reached()


def test_missing_pose_is_reported(setup):
    _, arbiter, detector = setup
    arbiter.set_object_as_goal(Pose(Point(0.0, 0.0)))
    with pytest.raises(PoseNotInitializedError):
        detector.is_goal_reached()


def test_no_goal_is_not_arrival(setup):
    feed, _, detector = setup
    feed.update(pose_at(0.0, 0.0))
    assert detector.distance_to_goal() is None
    assert detector.is_goal_reached() is False


def test_latest_pose_wins(setup):
    feed, arbiter, detector = setup
    arbiter.set_object_as_goal(Pose(Point(5.0, 5.0)))
    feed.update(pose_at(5.0, 5.0))
    feed.update(pose_at(0.0, 0.0))
    assert not detector.is_goal_reached()
