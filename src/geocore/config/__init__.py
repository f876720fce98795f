"""Configuration module for geocore.

Usage:
    from geocore.config import CONFIG
    CONFIG.tolerance.approx.default  # 1e-12
    CONFIG.codec.matrix4_payload_size  # 128
"""

from geocore.config.codec import CodecConfig
from geocore.config.config import CODEC_CONFIG, CONFIG, TOLERANCE_CONFIG, GeomConfig
from geocore.config.tolerances import ToleranceConfig, ToleranceSpec

__all__ = [
    "CONFIG",
    "CODEC_CONFIG",
    "TOLERANCE_CONFIG",
    "GeomConfig",
    "CodecConfig",
    "ToleranceConfig",
    "ToleranceSpec",
]
