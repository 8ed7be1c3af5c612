"""
Native ROS1 client helpers (rospy).

Configure ROS_MASTER_URI and ROS_IP/ROS_HOSTNAME so this process connects to
the robot's roscore.
"""

from __future__ import annotations

import rospy


def ensure_rospy(node_name: str = "checkpoint_navigation", anonymous: bool = False) -> None:
    """
    Initialize the ROS node context.
    Safe to call multiple times; only initializes once.
    """
    if not rospy.core.is_initialized():
        rospy.init_node(node_name, anonymous=anonymous)
