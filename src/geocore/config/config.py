"""Unified geocore configuration.

This module provides a top-level configuration dataclass that contains
the tolerance and codec configurations as sub-attributes.
"""

from __future__ import annotations

from dataclasses import dataclass

from geocore.config.codec import CodecConfig
from geocore.config.tolerances import ToleranceConfig


@dataclass(frozen=True)
class GeomConfig:
    """Top-level configuration.

    Provides hierarchical access:
        CONFIG.tolerance.approx.default
        CONFIG.codec.matrix4_payload_size

    Attributes:
        tolerance: Comparison and degenerate-case tolerances
        codec: Serialized layout constants
    """

    tolerance: ToleranceConfig = ToleranceConfig()
    codec: CodecConfig = CodecConfig()


# Main singleton instance
CONFIG = GeomConfig()

TOLERANCE_CONFIG = CONFIG.tolerance
CODEC_CONFIG = CONFIG.codec
