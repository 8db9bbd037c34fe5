#!/usr/bin/env python3
import math
import rclpy
from rclpy.node import Node
from geometry_msgs.msg import PoseStamped

from pose_difference.pose_math import pose_from_msg


def format_diff(msg, degrees=True):
    d = pose_from_msg(msg.pose)
    conv = math.degrees if degrees else float
    unit = 'deg' if degrees else 'rad'
    return (f"[{msg.header.stamp.sec}.{msg.header.stamp.nanosec:09d}] "
            f"gnss-ndt: pos=({d.x:.3f}, {d.y:.3f}, {d.z:.3f}) "
            f"rpy=({conv(d.roll):.3f}, {conv(d.pitch):.3f}, {conv(d.yaw):.3f}) {unit}")


class DiffPrint(Node):
    def __init__(self):
        super().__init__('diff_print')
        self.declare_parameter('pose_topic', '/pose_output')
        self.declare_parameter('degrees', True)
        self.degrees = bool(self.get_parameter('degrees').value)
        self.create_subscription(PoseStamped, self.get_parameter('pose_topic').value, self.cb, 10)

    def cb(self, msg):
        print(format_diff(msg, self.degrees))


def main():
    rclpy.init()
    node = DiffPrint()
    try:
        rclpy.spin(node)
    except KeyboardInterrupt:
        pass
    node.destroy_node()
    rclpy.shutdown()


if __name__ == '__main__':
    main()
