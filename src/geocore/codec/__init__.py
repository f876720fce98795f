"""Binary serialization of geometry values.

- Vector3, VectorX, Quaternion, AngleAxis, Matrix4: packed big-endian doubles
- MatrixX: keyed structure (JSON), Matrix4 legacy payloads are also keyed
"""

from geocore.codec.api import decode, encode
from geocore.codec.keyed import decode_keyed_matrix, decode_legacy_matrix4, encode_keyed_matrix
from geocore.codec.packed import pack_doubles, unpack_doubles

__all__ = [
    "decode",
    "decode_keyed_matrix",
    "decode_legacy_matrix4",
    "encode",
    "encode_keyed_matrix",
    "pack_doubles",
    "unpack_doubles",
]
