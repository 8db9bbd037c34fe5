from setuptools import setup

package_name = 'pose_difference'

setup(
    name=package_name,
    version='0.1.0',
    packages=[package_name],
    data_files=[
        ('share/ament_index/resource_index/packages',
         ['resource/' + package_name]),
        ('share/' + package_name, ['package.xml']),
        ('share/' + package_name + '/launch', ['launch/pose_difference.launch.py']),
        ('share/' + package_name + '/params', ['params/pose_difference.yaml']),
    ],
    install_requires=['setuptools', 'numpy', 'scipy'],
    extras_require={'test': ['pytest']},
    zip_safe=True,
    maintainer='Moon Tracks',
    maintainer_email='you@example.com',
    description='Difference between the GNSS pose and the NDT pose.',
    license='MIT',
    tests_require=['pytest'],
    entry_points={
        'console_scripts': [
            'pose_difference = pose_difference.pose_difference_node:main',
            'diff_print = pose_difference.diff_print:main',
        ],
    },
)
