"""
geocore - Geometric algebra core

Vectors, matrices, rotations and rigid/affine transforms on float64 NumPy
storage, with Numba-compiled quaternion kernels and a stable binary format.

Features:
- Vector3/VectorX and Matrix4/MatrixX value types
- Quaternion and AngleAxis rotations with Euler-angle and matrix conversions
- Isometry3 (rigid) and Affine3 transforms with pre/post composition
- Packed big-endian binary encoding, pickle support through the same codec

Example:
    >>> import math
    >>> from geocore import Isometry3, Quaternion, Vector3
    >>>
    >>> q = Quaternion.from_angle_axis(math.pi, Vector3(1, 0, 0))
    >>> t = Isometry3.from_position_orientation(Vector3(1, 2, 3), q)
    >>> t.inverse() * t == Isometry3.identity()
    True
"""

__version__ = "0.1.0"

from geocore.codec import decode, encode
from geocore.config import CONFIG, CodecConfig, GeomConfig, ToleranceConfig, ToleranceSpec
from geocore.errors import DeserializationError, GeometryError, SizeMismatchError
from geocore.linalg import Matrix4, MatrixX, Vector3, VectorX
from geocore.protocols import BinarySerializable, Rotation3, SupportsApprox, Transform3
from geocore.rotation import AngleAxis, Quaternion
from geocore.transform import Affine3, AffineTransform, Isometry3, RigidTransform
from geocore.verification import ApproxVerifier

__all__ = [
    # Linear algebra
    "Vector3",
    "VectorX",
    "Matrix4",
    "MatrixX",
    # Rotations
    "Quaternion",
    "AngleAxis",
    # Transforms
    "Isometry3",
    "Affine3",
    "RigidTransform",
    "AffineTransform",
    # Serialization
    "encode",
    "decode",
    # Config
    "CONFIG",
    "GeomConfig",
    "ToleranceConfig",
    "ToleranceSpec",
    "CodecConfig",
    # Errors
    "GeometryError",
    "SizeMismatchError",
    "DeserializationError",
    # Protocols
    "SupportsApprox",
    "Rotation3",
    "Transform3",
    "BinarySerializable",
    # Verification
    "ApproxVerifier",
    "__version__",
]
