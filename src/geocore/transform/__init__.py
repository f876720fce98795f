"""Composite 3D transforms.

- ``Isometry3``: rotation + translation (rigid)
- ``Affine3``: general linear part + translation
"""

from geocore.transform.affine import Affine3, polar_rotation
from geocore.transform.base import HomogeneousTransform
from geocore.transform.isometry import Isometry3

# Aliases matching the domain vocabulary
RigidTransform = Isometry3
AffineTransform = Affine3

__all__ = [
    "Affine3",
    "AffineTransform",
    "HomogeneousTransform",
    "Isometry3",
    "RigidTransform",
    "polar_rotation",
]
