# ROS transport layer: native ROS1 (rospy) implementations of the navigation
# interfaces. Imported only by the entrypoint so the core stays ROS-free.

from .ros1_client import ensure_rospy

__all__ = ["ensure_rospy"]
