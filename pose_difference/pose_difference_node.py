#!/usr/bin/env python3
import rclpy
from rclpy.node import Node
from geometry_msgs.msg import PoseStamped

from pose_difference.pose_math import PoseDifference, pose_from_msg
from pose_difference.tft_shim import quaternion_from_euler

OUTPUT_FRAME = 'map'


class PoseDifferenceNode(Node):
    def __init__(self):
        super().__init__('pose_difference')

        # ---------- params ----------
        self.declare_parameter('gnss_topic', 'gnss_pose')
        self.declare_parameter('ndt_topic', 'ndt_pose')
        self.declare_parameter('output_topic', '/pose_output')
        self.declare_parameter('queue_size', 10)

        self.gnss_topic = self.get_parameter('gnss_topic').value
        self.ndt_topic = self.get_parameter('ndt_topic').value
        self.output_topic = self.get_parameter('output_topic').value
        queue_size = int(self.get_parameter('queue_size').value)

        self.tracker = PoseDifference()
        self._warned_missing = set()
        self._announced_complete = False

        # pubs / subs
        self.diff_pub = self.create_publisher(PoseStamped, self.output_topic, queue_size)
        self.create_subscription(PoseStamped, self.gnss_topic, self.gnss_callback, queue_size)
        self.create_subscription(PoseStamped, self.ndt_topic, self.ndt_callback, queue_size)

        self.get_logger().info(
            f"pose_difference: READY ({self.gnss_topic} - {self.ndt_topic} -> {self.output_topic})"
        )

    def gnss_callback(self, msg: PoseStamped):
        diff = self.tracker.update_gnss(pose_from_msg(msg.pose))
        self.publish_diff(diff, msg.header.stamp)

    def ndt_callback(self, msg: PoseStamped):
        diff = self.tracker.update_ndt(pose_from_msg(msg.pose))
        self.publish_diff(diff, msg.header.stamp)

    def publish_diff(self, diff, stamp):
        self.check_streams()

        out = PoseStamped()
        out.header.frame_id = OUTPUT_FRAME
        out.header.stamp = stamp
        out.pose.position.x = diff.x
        out.pose.position.y = diff.y
        out.pose.position.z = diff.z
        q = quaternion_from_euler(diff.roll, diff.pitch, diff.yaw)
        out.pose.orientation.x = q[0]
        out.pose.orientation.y = q[1]
        out.pose.orientation.z = q[2]
        out.pose.orientation.w = q[3]
        self.diff_pub.publish(out)

        self.get_logger().debug(
            f"diff xyz=({diff.x:.3f}, {diff.y:.3f}, {diff.z:.3f}) "
            f"rpy=({diff.roll:.4f}, {diff.pitch:.4f}, {diff.yaw:.4f})"
        )
        return out

    def check_streams(self):
        # published values are unaffected, this only reports them
        if self.tracker.complete:
            if not self._announced_complete:
                self.get_logger().info("both gnss and ndt poses received")
                self._announced_complete = True
            return
        for topic, seen in ((self.gnss_topic, self.tracker.has_gnss),
                            (self.ndt_topic, self.tracker.has_ndt)):
            if not seen and topic not in self._warned_missing:
                self.get_logger().warn(
                    f"no pose on {topic} yet, difference is taken against the origin"
                )
                self._warned_missing.add(topic)


def main(args=None):
    rclpy.init(args=args)
    node = PoseDifferenceNode()
    try:
        rclpy.spin(node)
    except KeyboardInterrupt:
        pass
    node.destroy_node()
    rclpy.shutdown()


if __name__ == '__main__':
    main()
