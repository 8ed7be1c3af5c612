"""
rospy adapters for move_base, the base controller and the localization topic.

Each class implements one interface from checkpoint_nav.interfaces. ROS
transport errors are caught here and turned into pass/fail results; nothing
rospy-specific leaks into the core.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

import rospy
from actionlib_msgs.msg import GoalID, GoalStatusArray
from geometry_msgs.msg import PoseStamped, PoseWithCovarianceStamped, Twist
from std_srvs.srv import Empty

from ..config import NavigationConfig
from ..geometry import Point, Pose, Quaternion

logger = logging.getLogger(__name__)


def pose_from_msg(msg) -> Pose:
    """Convert a geometry_msgs/Pose into a core Pose."""
    p, q = msg.position, msg.orientation
    return Pose(Point(p.x, p.y, p.z), Quaternion(q.x, q.y, q.z, q.w))


def pose_stamped_from_pose(pose: Pose, frame_id: str) -> PoseStamped:
    msg = PoseStamped()
    msg.header.frame_id = frame_id
    msg.header.stamp = rospy.Time.now()
    msg.pose.position.x = pose.position.x
    msg.pose.position.y = pose.position.y
    msg.pose.position.z = pose.position.z
    msg.pose.orientation.x = pose.orientation.x
    msg.pose.orientation.y = pose.orientation.y
    msg.pose.orientation.z = pose.orientation.z
    msg.pose.orientation.w = pose.orientation.w
    return msg


class RosGoalPublisher:
    def __init__(self, topic: str = "/move_base_simple/goal"):
        self._pub = rospy.Publisher(topic, PoseStamped, queue_size=10)

    def publish_goal(self, pose: Pose, frame_id: str) -> None:
        self._pub.publish(pose_stamped_from_pose(pose, frame_id))


class RosCostmapClearer:
    def __init__(self, service: str = "/move_base/clear_costmaps", wait_timeout: float = 2.0):
        self._service = service
        self._wait_timeout = wait_timeout
        self._proxy = rospy.ServiceProxy(service, Empty)

    def clear_costmaps(self) -> bool:
        try:
            rospy.wait_for_service(self._service, timeout=self._wait_timeout)
            self._proxy()
        except (rospy.ROSException, rospy.ServiceException) as exc:
            logger.warning("[Navigation] %s call failed: %s", self._service, exc)
            return False
        return True


class RosGoalCanceller:
    """Publishes an empty GoalID (cancels every goal) and waits on the status topic."""

    def __init__(self, cancel_topic: str = "/move_base/cancel", status_topic: str = "/move_base/status"):
        self._pub = rospy.Publisher(cancel_topic, GoalID, queue_size=5)
        self._status_topic = status_topic

    def cancel_all_goals(self) -> None:
        self._pub.publish(GoalID())

    def wait_for_status(self, timeout: float) -> Optional[GoalStatusArray]:
        try:
            return rospy.wait_for_message(self._status_topic, GoalStatusArray, timeout=timeout)
        except rospy.ROSException:
            return None


class RosVelocityPublisher:
    def __init__(self, topic: str = "/mobile_base_controller/cmd_vel"):
        self._pub = rospy.Publisher(topic, Twist, queue_size=10)

    def send_angular_velocity(self, rad_per_s: float) -> None:
        cmd = Twist()
        cmd.angular.z = float(rad_per_s)
        self._pub.publish(cmd)


def subscribe_pose(topic: str, callback: Callable[[Pose], None]) -> rospy.Subscriber:
    """Feed PoseWithCovarianceStamped samples (e.g. /robot_pose, /amcl_pose) to `callback`."""

    def _cb(msg: PoseWithCovarianceStamped) -> None:
        callback(pose_from_msg(msg.pose.pose))

    return rospy.Subscriber(topic, PoseWithCovarianceStamped, _cb, queue_size=10)


def subscribe_object_pose(topic: str, callback: Callable[[Pose], None]) -> rospy.Subscriber:
    """Feed detector output (PoseStamped, e.g. /object_pose) to `callback`."""

    def _cb(msg: PoseStamped) -> None:
        callback(pose_from_msg(msg.pose))

    return rospy.Subscriber(topic, PoseStamped, _cb, queue_size=1)


PARAM_NAMES = (
    "checkpoints",
    "bin_location",
    "goal_tolerance",
    "turn_speed",
    "turn_complete_band",
    "cancel_timeout",
    "goal_frame",
    "goal_publish_repeats",
    "stop_on_turn_complete",
    "loop_hz",
    "goal_topic",
    "cmd_vel_topic",
    "cancel_topic",
    "status_topic",
    "pose_topic",
    "clear_costmaps_service",
    "object_pose_topic",
)


def load_config_from_params(base: Optional[NavigationConfig] = None) -> NavigationConfig:
    """Apply ROS private params (~checkpoints, ~goal_tolerance, ...) over `base`."""
    base = base or NavigationConfig()
    params = {name: rospy.get_param("~" + name) for name in PARAM_NAMES if rospy.has_param("~" + name)}
    return base.with_params(params)
