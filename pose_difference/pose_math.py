"""
Pose bookkeeping for the GNSS vs. NDT difference node.
Nothing in here touches ROS, so it can be exercised without a running graph.
"""
import math
import threading
from dataclasses import dataclass

from pose_difference.tft_shim import euler_from_quaternion


@dataclass
class Pose:
    """Position (m) plus static-axis roll/pitch/yaw (rad)."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    roll: float = 0.0
    pitch: float = 0.0
    yaw: float = 0.0


def calc_diff_for_radian(lhs_rad, rhs_rad):
    """lhs - rhs folded once into [-pi, pi).

    Only a single 2*pi correction is applied, so both inputs are expected to
    already be Euler angles in [-pi, pi].
    """
    diff_rad = lhs_rad - rhs_rad
    if diff_rad >= math.pi:
        diff_rad = diff_rad - 2 * math.pi
    elif diff_rad < -math.pi:
        diff_rad = diff_rad + 2 * math.pi
    return diff_rad


def diff_pose(lhs: Pose, rhs: Pose) -> Pose:
    # NOTE: angles are differenced per axis, not composed as rotations.
    # Only meaningful for small corrections.
    return Pose(
        x=lhs.x - rhs.x,
        y=lhs.y - rhs.y,
        z=lhs.z - rhs.z,
        roll=calc_diff_for_radian(lhs.roll, rhs.roll),
        pitch=calc_diff_for_radian(lhs.pitch, rhs.pitch),
        yaw=calc_diff_for_radian(lhs.yaw, rhs.yaw),
    )


def pose_from_msg(pose_msg) -> Pose:
    """geometry_msgs/Pose (or anything shaped like it) -> Pose"""
    p = pose_msg.position
    o = pose_msg.orientation
    roll, pitch, yaw = euler_from_quaternion(o.x, o.y, o.z, o.w)
    return Pose(x=float(p.x), y=float(p.y), z=float(p.z),
                roll=roll, pitch=pitch, yaw=yaw)


class PoseDifference:
    """Last GNSS pose, last NDT pose and their difference (gnss - ndt).

    Both stored poses start at zero, so until each stream has been seen the
    difference is taken against the origin for the missing one.
    """

    def __init__(self):
        self.gnss_pose = Pose()
        self.ndt_pose = Pose()
        self.diff_pose = Pose()
        self.has_gnss = False
        self.has_ndt = False
        self._lock = threading.Lock()

    @property
    def complete(self):
        return self.has_gnss and self.has_ndt

    def update_gnss(self, pose: Pose) -> Pose:
        with self._lock:
            self.gnss_pose = pose
            self.has_gnss = True
            return self._recompute()

    def update_ndt(self, pose: Pose) -> Pose:
        with self._lock:
            self.ndt_pose = pose
            self.has_ndt = True
            return self._recompute()

    def _recompute(self):
        self.diff_pose = diff_pose(self.gnss_pose, self.ndt_pose)
        return self.diff_pose
