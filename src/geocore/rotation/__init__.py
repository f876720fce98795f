"""Rotation representations and conversions.

Quaternion Convention: (w, x, y, z) - scalar first.
"""

from geocore.rotation.angle_axis import AngleAxis
from geocore.rotation.conversions import (
    angle_axis_to_quaternion,
    angle_axis_to_rotation_matrix,
    euler_to_quaternion,
    quaternion_multiply,
    quaternion_to_angle_axis,
    quaternion_to_rotation_matrix,
    rotation_matrix_to_euler,
    rotation_matrix_to_quaternion,
)
from geocore.rotation.quaternion import Quaternion

__all__ = [
    "AngleAxis",
    "Quaternion",
    "angle_axis_to_quaternion",
    "angle_axis_to_rotation_matrix",
    "euler_to_quaternion",
    "quaternion_multiply",
    "quaternion_to_angle_axis",
    "quaternion_to_rotation_matrix",
    "rotation_matrix_to_euler",
    "rotation_matrix_to_quaternion",
]
