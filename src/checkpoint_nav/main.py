"""
Entrypoint for the checkpoint navigation node.

Loads .env, sets up logging, connects to the ROS master, wires the rospy
adapters into a Navigator and runs the mission loop until every checkpoint
has been visited (or an object has been delivered to the bin).
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)


def main() -> None:
    from dotenv import load_dotenv

    load_dotenv()

    from .logging_config import configure_logging

    log_path = configure_logging()
    logger.info("Log file for this run: %s", log_path)

    from .config import NavigationConfig
    from .errors import ConfigError

    try:
        config = NavigationConfig.from_env()
    except ConfigError as e:
        logger.error("Invalid configuration: %s", e)
        raise SystemExit(f"Invalid configuration: {e}")

    import rospy

    from .mission import MissionController
    from .navigator import Navigator
    from .ros_clients import ensure_rospy
    from .ros_clients.move_base import (
        RosCostmapClearer,
        RosGoalCanceller,
        RosGoalPublisher,
        RosVelocityPublisher,
        load_config_from_params,
        subscribe_object_pose,
        subscribe_pose,
    )

    ros_master = os.environ.get("ROS_MASTER_URI", "")
    logger.info("ROS_MASTER_URI=%s", ros_master or "(not set)")
    ensure_rospy()
    try:
        config = load_config_from_params(config)
    except ConfigError as e:
        logger.error("Invalid ROS parameters: %s", e)
        raise SystemExit(f"Invalid ROS parameters: {e}")

    canceller = RosGoalCanceller(config.cancel_topic, config.status_topic)
    navigator = Navigator(
        config,
        goal_sink=RosGoalPublisher(config.goal_topic),
        costmap_clearer=RosCostmapClearer(config.clear_costmaps_service),
        cancel_sink=canceller,
        status_waiter=canceller,
        velocity_sink=RosVelocityPublisher(config.cmd_vel_topic),
    )
    mission = MissionController(navigator)

    subscribe_pose(config.pose_topic, navigator.on_pose)
    subscribe_object_pose(config.object_pose_topic, mission.report_object)

    # Give publishers a moment to connect before the first goal goes out.
    rospy.sleep(1.0)

    rate = rospy.Rate(config.loop_hz)
    logger.info("Mission started with %d checkpoints", len(config.checkpoints))
    try:
        while not rospy.is_shutdown() and not mission.done:
            mission.step()
            rate.sleep()
    except rospy.ROSInterruptException:
        logger.info("Interrupted by ROS shutdown.")
    finally:
        navigator.turn.abort()
    logger.info("Mission finished in phase %s", mission.phase.value)


if __name__ == "__main__":
    main()
