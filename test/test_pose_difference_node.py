import math
from unittest.mock import MagicMock

import pytest

rclpy = pytest.importorskip('rclpy')
geometry_msgs = pytest.importorskip('geometry_msgs.msg')

from builtin_interfaces.msg import Time  # noqa: E402

from pose_difference.pose_difference_node import PoseDifferenceNode  # noqa: E402
from pose_difference.tft_shim import euler_from_quaternion, quaternion_from_euler  # noqa: E402


def make_msg(x=0.0, y=0.0, z=0.0, yaw=0.0, frame_id='gnss', sec=0, nanosec=0):
    msg = geometry_msgs.PoseStamped()
    msg.header.frame_id = frame_id
    msg.header.stamp = Time(sec=sec, nanosec=nanosec)
    msg.pose.position.x = x
    msg.pose.position.y = y
    msg.pose.position.z = z
    q = quaternion_from_euler(0.0, 0.0, yaw)
    msg.pose.orientation.x = q[0]
    msg.pose.orientation.y = q[1]
    msg.pose.orientation.z = q[2]
    msg.pose.orientation.w = q[3]
    return msg


@pytest.fixture
def node():
    rclpy.init()
    n = PoseDifferenceNode()
    n.diff_pub = MagicMock()
    yield n
    n.destroy_node()
    rclpy.shutdown()


def published(node):
    return node.diff_pub.publish.call_args[0][0]


def test_default_topics(node):
    assert node.gnss_topic == 'gnss_pose'
    assert node.ndt_topic == 'ndt_pose'
    assert node.output_topic == '/pose_output'


def test_publishes_on_every_message(node):
    node.gnss_callback(make_msg(x=1.0))
    node.ndt_callback(make_msg(yaw=math.pi / 2, frame_id='ndt'))
    assert node.diff_pub.publish.call_count == 2


def test_gnss_minus_ndt(node):
    node.gnss_callback(make_msg(x=1.0, yaw=0.0, sec=5))
    node.ndt_callback(make_msg(x=0.0, yaw=math.pi / 2, sec=7, nanosec=42))
    out = published(node)
    assert out.pose.position.x == pytest.approx(1.0)
    assert out.pose.position.y == pytest.approx(0.0)
    assert out.pose.position.z == pytest.approx(0.0)
    o = out.pose.orientation
    _, _, yaw = euler_from_quaternion(o.x, o.y, o.z, o.w)
    assert yaw == pytest.approx(-math.pi / 2)
    # stamp comes from the triggering message
    assert (out.header.stamp.sec, out.header.stamp.nanosec) == (7, 42)


def test_yaw_wraps(node):
    node.gnss_callback(make_msg(yaw=3.0))
    node.ndt_callback(make_msg(yaw=-3.0))
    o = published(node).pose.orientation
    _, _, yaw = euler_from_quaternion(o.x, o.y, o.z, o.w)
    assert yaw == pytest.approx(6.0 - 2 * math.pi)


def test_frame_is_always_map(node):
    node.gnss_callback(make_msg(frame_id='/gps'))
    assert published(node).header.frame_id == 'map'
    node.ndt_callback(make_msg(frame_id='velodyne'))
    assert published(node).header.frame_id == 'map'


def test_redelivery_gives_same_output(node):
    node.ndt_callback(make_msg(x=0.2, yaw=0.1))
    msg = make_msg(x=1.0, y=2.0, yaw=0.3)
    node.gnss_callback(msg)
    first = published(node)
    node.gnss_callback(msg)
    assert published(node) == first


def test_missing_stream_reported_once(node):
    node.gnss_callback(make_msg(x=1.0))
    node.gnss_callback(make_msg(x=2.0))
    assert node._warned_missing == {'ndt_pose'}
    assert not node._announced_complete
    node.ndt_callback(make_msg())
    assert node._announced_complete
