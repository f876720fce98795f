"""Approximate-equality and round-trip verification utilities.

Assertion helpers for geometry values, usable from tests or from callers
that want a descriptive failure instead of a bare boolean.

Example:
    >>> from geocore.verification import ApproxVerifier
    >>>
    >>> ApproxVerifier.assert_approx_equal(q.inverse() * q, Quaternion.identity())
    >>> ApproxVerifier.assert_round_trip(Vector3(1, 2, 3))
"""

from __future__ import annotations

import logging

from geocore.codec import decode, encode
from geocore.protocols import SupportsApprox

logger = logging.getLogger(__name__)


class ApproxVerifier:
    """Assertions built on ``approx`` and on the binary codec."""

    @staticmethod
    def assert_approx_equal(
        expected: SupportsApprox, actual: SupportsApprox, tolerance: float | None = None
    ) -> None:
        """Assert actual is approximately equal to expected.

        :param expected: Reference value
        :param actual: Value under test
        :param tolerance: Absolute tolerance, None for the configured default
        :raises AssertionError: If the values differ by more than tolerance

        Example:
            >>> ApproxVerifier.assert_approx_equal(Vector3(0, -1, 0), q * Vector3(0, 1, 0), 1e-4)
        """
        if type(expected) is not type(actual):
            raise AssertionError(
                f"Type mismatch: expected {type(expected).__name__}, "
                f"got {type(actual).__name__}"
            )
        if not expected.approx(actual, tolerance):
            raise AssertionError(f"Expected {actual!r} to be approximately {expected!r}")

    @staticmethod
    def refute_approx_equal(
        expected: SupportsApprox, actual: SupportsApprox, tolerance: float | None = None
    ) -> None:
        """Assert actual is not approximately equal to expected.

        :raises AssertionError: If the values are within tolerance
        """
        if type(expected) is type(actual) and expected.approx(actual, tolerance):
            raise AssertionError(f"Expected {actual!r} not to be approximately {expected!r}")

    @staticmethod
    def assert_round_trip(value) -> None:
        """Assert decode(type(value), encode(value)) == value exactly.

        :param value: Any serializable geometry value
        :raises AssertionError: If the decoded value differs
        """
        payload = encode(value)
        logger.debug("[ApproxVerifier] %s encoded to %d bytes", type(value).__name__, len(payload))
        decoded = decode(type(value), payload)
        if decoded != value:
            raise AssertionError(f"Round trip changed {value!r} into {decoded!r}")
