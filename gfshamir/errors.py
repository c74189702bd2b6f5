"""Errors raised by the sharing engine.

Only two conditions are reported.  Everything else (too few shares,
corrupted ``y`` values, duplicate ``x`` coordinates) produces a wrong
secret rather than an error: reconstruction is not verifiable.
"""

from __future__ import annotations


class SecretSharingError(ValueError):
    """Base class for secret sharing failures."""


class ThresholdOrCountZero(SecretSharingError):
    """Raised when the threshold ``t`` or the share count ``n`` is zero."""

    def __init__(self, t: int, n: int) -> None:
        super().__init__(f"Threshold and share count must be non-zero: t={t}, n={n}")
        self.t = t
        self.n = n


class MissingShareForByte(SecretSharingError):
    """Raised when share sets disagree on how many secret bytes they cover."""
