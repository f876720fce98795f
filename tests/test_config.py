"""Tests for configuration values."""

from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from geocore import CONFIG, Vector3
from geocore.config import CODEC_CONFIG, TOLERANCE_CONFIG, ToleranceSpec


class TestToleranceSpec:
    """Test ToleranceSpec validation."""

    def test_resolve_default(self):
        """Test None resolves to the default."""
        spec = ToleranceSpec(name="t", default=1e-6)
        assert spec.resolve(None) == 1e-6
        assert spec.resolve(0.5) == 0.5

    def test_accepts_int(self):
        """Test integers are accepted and converted."""
        assert ToleranceSpec(name="t", default=1.0).validate(2) == 2.0

    def test_rejects_below_minimum(self):
        """Test values below min_value are rejected."""
        spec = ToleranceSpec(name="t", default=1.0, min_value=0.0)
        with pytest.raises(ValueError, match="below minimum"):
            spec.validate(-1e-9)

    @pytest.mark.parametrize("value", ["0.1", True, None, [0.1]])
    def test_rejects_non_numbers(self, value):
        """Test non-numeric values are rejected."""
        with pytest.raises(ValueError, match="expected number"):
            ToleranceSpec(name="t", default=1.0).validate(value)

    def test_frozen(self):
        """Test specs are immutable."""
        spec = ToleranceSpec(name="t", default=1.0)
        with pytest.raises(FrozenInstanceError):
            spec.default = 2.0


class TestGeomConfig:
    """Test the CONFIG singleton."""

    def test_defaults(self):
        """Test default tolerances."""
        assert CONFIG.tolerance.approx.default == 1e-12
        assert CONFIG.tolerance.angle_axis.default == 1e-12
        assert CONFIG.tolerance.euler_singularity.default == 1e-12

    def test_aliases(self):
        """Test module-level aliases point into CONFIG."""
        assert TOLERANCE_CONFIG is CONFIG.tolerance
        assert CODEC_CONFIG is CONFIG.codec

    def test_get_spec(self):
        """Test lookup by name."""
        assert TOLERANCE_CONFIG.get_spec("approx") is TOLERANCE_CONFIG.approx
        assert set(TOLERANCE_CONFIG.get_all_specs()) == {
            "approx",
            "angle_axis",
            "euler_singularity",
        }
        with pytest.raises(AttributeError):
            TOLERANCE_CONFIG.get_spec("missing")

    def test_codec_layout(self):
        """Test codec constants."""
        assert CODEC_CONFIG.dtype == np.dtype(">f8")
        assert CODEC_CONFIG.matrix4_payload_size == 128
        assert CODEC_CONFIG.packed_size(3) == 24
        assert CODEC_CONFIG.keyed_fields == ("rows", "cols", "data")

    def test_default_tolerance_is_used(self):
        """Test approx without a tolerance uses the configured default."""
        assert Vector3(1, 0, 0).approx(Vector3(1 + 1e-13, 0, 0))
        assert not Vector3(1, 0, 0).approx(Vector3(1 + 1e-11, 0, 0))
