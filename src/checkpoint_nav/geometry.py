"""
Pose and quaternion helpers for planar navigation.

Quaternions are numpy arrays ordered [x, y, z, w] (tf.transformations and
scipy Rotation share this order). Poses are immutable snapshots; the latest
one simply replaces the previous one.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np
from scipy.spatial.transform import Rotation as R


@dataclass(frozen=True)
class Point:
    x: float
    y: float
    z: float = 0.0


@dataclass(frozen=True)
class Quaternion:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z, self.w], dtype=float)

    @classmethod
    def from_array(cls, q) -> "Quaternion":
        return cls(float(q[0]), float(q[1]), float(q[2]), float(q[3]))


NEUTRAL_ORIENTATION = Quaternion()


@dataclass(frozen=True)
class Pose:
    position: Point
    orientation: Quaternion = field(default_factory=Quaternion)

    @classmethod
    def at(cls, x: float, y: float, yaw: float = 0.0) -> "Pose":
        return cls(Point(float(x), float(y)), quaternion_from_yaw(yaw))


def goal_from_position(position: Point) -> Pose:
    """Build a goal pose at `position` with neutral orientation."""
    return Pose(position=position, orientation=NEUTRAL_ORIENTATION)


def planar_distance(a: Point, b: Point) -> float:
    """Euclidean distance in the horizontal plane (z ignored)."""
    return math.hypot(a.x - b.x, a.y - b.y)


def quaternion_inverse(q) -> np.ndarray:
    return R.from_quat(q).inv().as_quat()


def quaternion_multiply(q1, q0) -> np.ndarray:
    """Composition q1 * q0 (apply q0, then q1) for [x, y, z, w] arrays."""
    return (R.from_quat(q1) * R.from_quat(q0)).as_quat()


def yaw_from_quaternion(q) -> float:
    """
    Extract yaw (rotation about +Z) in radians, range [-pi, pi].

    Accepts a Quaternion or an [x, y, z, w] array. Static-axis xyz order,
    the same roll/pitch/yaw split as tf euler_from_quaternion.
    """
    if isinstance(q, Quaternion):
        q = q.as_array()
    return float(R.from_quat(q).as_euler("xyz")[2])


def quaternion_from_yaw(yaw: float) -> Quaternion:
    return Quaternion.from_array(R.from_euler("z", float(yaw)).as_quat())
