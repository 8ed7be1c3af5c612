import math
import time

import pytest

from checkpoint_nav.config import NavigationConfig
from checkpoint_nav.geometry import Point, Pose
from checkpoint_nav.navigator import Navigator


class FakeGoalSink:
    def __init__(self, events=None):
        self.sent = []
        self.events = events if events is not None else []

    def publish_goal(self, pose, frame_id):
        self.sent.append((pose, frame_id))
        self.events.append(("goal", pose.position.x, pose.position.y))


class FakeCostmapClearer:
    def __init__(self, events=None, result=True):
        self.calls = 0
        self.result = result
        self.events = events if events is not None else []

    def clear_costmaps(self):
        self.calls += 1
        self.events.append(("clear_costmaps",))
        return self.result


class FakeCanceller:
    def __init__(self, reply=object(), delay=0.0):
        self.cancels = 0
        self.timeouts = []
        self.reply = reply
        self.delay = delay

    def cancel_all_goals(self):
        self.cancels += 1

    def wait_for_status(self, timeout):
        self.timeouts.append(timeout)
        if self.delay:
            time.sleep(min(self.delay, timeout))
        return self.reply


class FakeVelocitySink:
    def __init__(self):
        self.commands = []

    def send_angular_velocity(self, rad_per_s):
        self.commands.append(rad_per_s)


def pose_at(x, y, yaw=0.0):
    return Pose.at(x, y, yaw)


def wrap(angle):
    return math.atan2(math.sin(angle), math.cos(angle))


@pytest.fixture
def events():
    return []


@pytest.fixture
def goal_sink(events):
    return FakeGoalSink(events)


@pytest.fixture
def costmap_clearer(events):
    return FakeCostmapClearer(events)


@pytest.fixture
def canceller():
    return FakeCanceller()


@pytest.fixture
def velocity_sink():
    return FakeVelocitySink()


@pytest.fixture
def two_checkpoint_config():
    return NavigationConfig(
        checkpoints=(Point(0.0, 0.0), Point(1.0, -1.0)),
        bin_location=Point(3.0, 2.0),
    )


@pytest.fixture
def navigator(two_checkpoint_config, goal_sink, costmap_clearer, canceller, velocity_sink):
    return Navigator(
        two_checkpoint_config,
        goal_sink=goal_sink,
        costmap_clearer=costmap_clearer,
        cancel_sink=canceller,
        status_waiter=canceller,
        velocity_sink=velocity_sink,
    )
