"""Keyed-structure layout for matrices.

A matrix is written as a UTF-8 JSON object ``{"rows": r, "cols": c,
"data": [...]}`` with ``data`` in column-major order. MatrixX always uses
this layout; Matrix4 used it before the packed 128-byte layout and
:func:`decode_legacy_matrix4` still reads it.
"""

from __future__ import annotations

import json
import logging

import numpy as np

from geocore.config import CODEC_CONFIG
from geocore.errors import DeserializationError

logger = logging.getLogger(__name__)


def _is_count(value) -> bool:
    """Non-negative int, bools excluded."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def encode_keyed_matrix(data: np.ndarray) -> bytes:
    """Encode a 2D array as a keyed structure.

    :param data: 2D array [rows, cols]
    :returns: UTF-8 JSON bytes
    """
    rows_key, cols_key, data_key = CODEC_CONFIG.keyed_fields
    rows, cols = data.shape
    d = {
        rows_key: int(rows),
        cols_key: int(cols),
        data_key: np.asarray(data, dtype=np.float64).ravel(order="F").tolist(),
    }
    return json.dumps(d).encode("utf-8")


def decode_keyed_matrix(payload: bytes) -> np.ndarray:
    """Decode a keyed structure into a float64 array [rows, cols].

    :raises DeserializationError: If the payload is not a well-formed keyed structure
    """
    rows_key, cols_key, data_key = CODEC_CONFIG.keyed_fields
    try:
        d = json.loads(payload.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.debug("[decode_keyed_matrix] Malformed payload: %s", e)
        raise DeserializationError(f"malformed keyed payload: {e}") from e

    if not isinstance(d, dict):
        raise DeserializationError("keyed payload must be an object")
    missing = [key for key in (rows_key, cols_key, data_key) if key not in d]
    if missing:
        logger.debug("[decode_keyed_matrix] Missing keys %s", missing)
        raise DeserializationError(f"keyed payload is missing keys: {', '.join(missing)}")

    rows, cols, values = d[rows_key], d[cols_key], d[data_key]
    if not _is_count(rows) or not _is_count(cols):
        logger.debug("[decode_keyed_matrix] Invalid shape (%r, %r)", rows, cols)
        raise DeserializationError(f"invalid matrix shape ({rows!r}, {cols!r})")
    if not isinstance(values, list) or len(values) != rows * cols:
        logger.debug("[decode_keyed_matrix] Shape (%s, %s) does not match data", rows, cols)
        raise DeserializationError(f"data does not hold {rows}x{cols} values")

    bad = [v for v in values if isinstance(v, bool) or not isinstance(v, int | float)]
    if bad:
        logger.debug("[decode_keyed_matrix] Non-numeric entry %r", bad[0])
        raise DeserializationError(f"non-numeric matrix data: {bad[0]!r}")
    flat = np.array(values, dtype=np.float64)
    return flat.reshape((rows, cols), order="F")


def decode_legacy_matrix4(payload: bytes) -> np.ndarray:
    """Read a Matrix4 written in the keyed layout.

    :returns: float64 array [4, 4]
    :raises DeserializationError: If the payload is not a 4x4 keyed structure
    """
    logger.debug("[decode_legacy_matrix4] Legacy keyed Matrix4 payload (%d bytes)", len(payload))
    data = decode_keyed_matrix(payload)
    if data.shape != (4, 4):
        raise DeserializationError(f"legacy Matrix4 payload has shape {data.shape}, not (4, 4)")
    return data
