"""Binary layout configuration for the codec."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class CodecConfig:
    """Constants of the serialized layouts.

    Attributes:
        byte_order: numpy byte-order character of packed doubles (">" = big-endian)
        float_width: Width in bytes of one packed value
        keyed_fields: Keys of the keyed-structure matrix layout (rows, cols, data)
    """

    byte_order: str = ">"
    float_width: int = 8
    keyed_fields: tuple[str, str, str] = ("rows", "cols", "data")

    @property
    def dtype(self) -> np.dtype:
        """numpy dtype of one packed value."""
        return np.dtype(f"{self.byte_order}f{self.float_width}")

    @property
    def matrix4_payload_size(self) -> int:
        """Byte length of the current Matrix4 layout (16 packed doubles)."""
        return 16 * self.float_width

    def packed_size(self, count: int) -> int:
        """Byte length of ``count`` packed values."""
        return count * self.float_width
