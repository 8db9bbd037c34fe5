import os

from ament_index_python.packages import get_package_share_directory
from launch import LaunchDescription
from launch_ros.actions import Node
from launch.substitutions import LaunchConfiguration
from launch.actions import DeclareLaunchArgument


def generate_launch_description():
    pkg_share = get_package_share_directory('pose_difference')
    default_params = os.path.join(pkg_share, 'params', 'pose_difference.yaml')

    return LaunchDescription([
        DeclareLaunchArgument('params', default_value=default_params,
                              description='Path to a YAML with node parameters'),

        Node(
            package='pose_difference',
            executable='pose_difference',
            name='pose_difference',
            output='screen',
            parameters=[LaunchConfiguration('params')]
        )
    ])
