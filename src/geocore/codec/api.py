"""Encode and decode entry points for every serializable type."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

import numpy as np

from geocore.codec.keyed import decode_keyed_matrix, decode_legacy_matrix4, encode_keyed_matrix
from geocore.codec.packed import pack_doubles, unpack_doubles
from geocore.config import CODEC_CONFIG
from geocore.linalg import Matrix4, MatrixX, Vector3, VectorX
from geocore.rotation import AngleAxis, Quaternion

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _encode_angle_axis(a: AngleAxis) -> bytes:
    return pack_doubles(np.array(a.to_list(), dtype=np.float64))


def _decode_angle_axis(payload: bytes) -> AngleAxis:
    values = unpack_doubles(payload, 4)
    return AngleAxis(float(values[0]), Vector3._wrap(values[1:].copy()))


def _decode_matrix4(payload: bytes) -> Matrix4:
    if len(payload) == CODEC_CONFIG.matrix4_payload_size:
        data = unpack_doubles(payload, 16).reshape((4, 4), order="F")
    else:
        data = decode_legacy_matrix4(payload)
    return Matrix4._wrap(np.ascontiguousarray(data))


_ENCODERS: dict[type, Callable[[object], bytes]] = {
    Vector3: lambda v: pack_doubles(v.to_numpy()),
    VectorX: lambda v: pack_doubles(v.to_numpy()),
    Quaternion: lambda q: pack_doubles(q.to_numpy()),
    AngleAxis: _encode_angle_axis,
    Matrix4: lambda m: pack_doubles(m.to_numpy().ravel(order="F")),
    MatrixX: lambda m: encode_keyed_matrix(m.to_numpy()),
}

_DECODERS: dict[type, Callable[[bytes], object]] = {
    Vector3: lambda p: Vector3._wrap(unpack_doubles(p, 3)),
    VectorX: lambda p: VectorX._wrap(unpack_doubles(p)),
    Quaternion: lambda p: Quaternion._wrap(unpack_doubles(p, 4)),
    AngleAxis: _decode_angle_axis,
    Matrix4: _decode_matrix4,
    MatrixX: lambda p: MatrixX._wrap(np.ascontiguousarray(decode_keyed_matrix(p))),
}


def _lookup(table: dict[type, T], cls: type) -> T:
    for base in cls.__mro__:
        if base in table:
            return table[base]
    raise TypeError(f"{cls.__name__} is not serializable")


def encode(value) -> bytes:
    """Serialize a geometry value.

    :param value: Vector3, VectorX, Quaternion, AngleAxis, Matrix4 or MatrixX
    :returns: Payload bytes
    :raises TypeError: If the type is not serializable

    Example:
        >>> encode(Vector3(1, 2, 3)).hex()[:16]
        '3ff0000000000000'
    """
    return _lookup(_ENCODERS, type(value))(value)


def decode(cls: type[T], payload: bytes) -> T:
    """Deserialize a payload produced by :func:`encode` for ``cls``.

    :param cls: Target type
    :param payload: Payload bytes
    :returns: New instance of cls
    :raises DeserializationError: If the payload does not fit any layout of cls
    :raises TypeError: If cls is not serializable
    """
    decoder = _lookup(_DECODERS, cls)
    logger.debug("[decode] %s from %d bytes", cls.__name__, len(payload))
    return decoder(bytes(payload))
