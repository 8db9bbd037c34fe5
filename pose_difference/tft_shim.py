from scipy.spatial.transform import Rotation

# Static-axis X-Y-Z, same as tf's getRPY / setRPY ("sxyz")
EULER_SEQ = 'xyz'


def quaternion_from_euler(roll, pitch, yaw):
    """roll, pitch, yaw (rad) -> (x, y, z, w)"""
    qx, qy, qz, qw = Rotation.from_euler(EULER_SEQ, [roll, pitch, yaw]).as_quat()
    return (float(qx), float(qy), float(qz), float(qw))


def euler_from_quaternion(qx, qy, qz, qw):
    """(x, y, z, w) -> (roll, pitch, yaw) in rad.
    Non-unit quaternions are normalized; a zero quaternion raises ValueError."""
    roll, pitch, yaw = Rotation.from_quat([qx, qy, qz, qw]).as_euler(EULER_SEQ)
    return (float(roll), float(pitch), float(yaw))
