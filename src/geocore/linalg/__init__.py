"""Dense vectors and matrices."""

from geocore.linalg.matrix import Matrix4, MatrixX
from geocore.linalg.vector import Vector3, VectorX

__all__ = ["Vector3", "VectorX", "Matrix4", "MatrixX"]
