"""Numeric tolerance configuration.

This module defines the tolerance specifications used by approximate
comparisons and by the degenerate-case checks of the rotation conversions.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceSpec:
    """Specification for a tolerance parameter.

    Attributes:
        name: Tolerance name (e.g., "approx", "angle_axis")
        default: Value used when the caller passes None
        min_value: Smallest accepted value
        description: Human-readable description
    """

    name: str
    default: float
    min_value: float = 0.0
    description: str = ""

    def validate(self, value: float) -> float:
        """Validate a tolerance value.

        :param value: Value to validate
        :returns: Value as float
        :raises ValueError: If value is not a number or is below min_value
        """
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise ValueError(f"{self.name}: expected number, got {type(value).__name__}")
        if value < self.min_value:
            raise ValueError(f"{self.name}={value} is below minimum {self.min_value}")
        return float(value)

    def resolve(self, value: float | None) -> float:
        """Return the default for None, the validated value otherwise."""
        if value is None:
            return self.default
        return self.validate(value)

    def __repr__(self) -> str:
        return f"ToleranceSpec({self.name}, default={self.default}, min={self.min_value})"


@dataclass(frozen=True)
class ToleranceConfig:
    """Tolerances for comparisons and degenerate-case detection."""

    approx: ToleranceSpec = ToleranceSpec(
        name="approx",
        default=1e-12,
        description="Per-field absolute tolerance used by approx()",
    )

    angle_axis: ToleranceSpec = ToleranceSpec(
        name="angle_axis",
        default=1e-12,
        description="Vector-part norm under which a quaternion has no defined axis",
    )

    euler_singularity: ToleranceSpec = ToleranceSpec(
        name="euler_singularity",
        default=1e-12,
        description="Threshold under which an Euler decomposition is in gimbal lock",
    )

    def get_spec(self, name: str) -> ToleranceSpec:
        """Get tolerance spec by name.

        :param name: Tolerance name
        :return: ToleranceSpec
        :raises AttributeError: If tolerance not found
        """
        return getattr(self, name)

    def get_all_specs(self) -> dict[str, ToleranceSpec]:
        """Get all tolerance specs as a dictionary."""
        return {
            "approx": self.approx,
            "angle_axis": self.angle_axis,
            "euler_singularity": self.euler_singularity,
        }
