"""Packed layout: a flat run of fixed-width big-endian doubles, no prefix."""

from __future__ import annotations

import logging

import numpy as np

from geocore.config import CODEC_CONFIG
from geocore.errors import DeserializationError

logger = logging.getLogger(__name__)


def pack_doubles(values: np.ndarray) -> bytes:
    """Pack values in order as big-endian float64."""
    flat = np.asarray(values, dtype=np.float64).reshape(-1)
    return flat.astype(CODEC_CONFIG.dtype).tobytes()


def unpack_doubles(payload: bytes, count: int | None = None) -> np.ndarray:
    """Unpack a packed payload into a native float64 array.

    :param payload: Packed bytes
    :param count: Expected number of values, or None to accept any whole number
    :returns: float64 array [count]
    :raises DeserializationError: If the byte length does not fit
    """
    width = CODEC_CONFIG.float_width
    if count is not None and len(payload) != CODEC_CONFIG.packed_size(count):
        expected = CODEC_CONFIG.packed_size(count)
        logger.debug("[unpack_doubles] Expected %d bytes, got %d", expected, len(payload))
        raise DeserializationError(f"expected {expected} bytes, got {len(payload)}")
    if len(payload) % width != 0:
        logger.debug("[unpack_doubles] Length %d is not a multiple of %d", len(payload), width)
        raise DeserializationError(f"payload length {len(payload)} is not a multiple of {width}")
    return np.frombuffer(payload, dtype=CODEC_CONFIG.dtype).astype(np.float64)
