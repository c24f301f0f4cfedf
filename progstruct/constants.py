"""Finite-field curves and the constants derived from them."""

from __future__ import annotations

from enum import Enum


class Curve(Enum):
    """A curve whose scalar field defines the prime used by the analysis."""

    BN128 = "BN128"
    BLS12_381 = "BLS12_381"
    GOLDILOCKS = "Goldilocks"

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "Curve":
        """Parse a curve name, ignoring case."""
        wanted = text.upper()
        for curve in cls:
            if curve.value.upper() == wanted:
                return curve
        raise ValueError(f"failed to parse curve `{text}`")

    def prime(self) -> int:
        """Return the prime of the curve's scalar field."""
        return _PRIMES[self.name]


DEFAULT_CURVE = Curve.BN128

_PRIMES = {
    "BN128": int(
        "21888242871839275222246405745257275088548364400416034343698204186575808495617"
    ),
    "BLS12_381": int(
        "52435875175126190479447740508185965837690552500527637822603658699938581184513"
    ),
    "GOLDILOCKS": int("18446744069414584321"),
}


class UsefulConstants:
    """The curve in use together with its prime."""

    def __init__(self, curve: Curve = DEFAULT_CURVE) -> None:
        self._curve = curve
        self._prime = curve.prime()

    def curve(self) -> Curve:
        """Return the curve in use."""
        return self._curve

    def prime(self) -> int:
        """Return the prime in use."""
        return self._prime

    def prime_size(self) -> int:
        """Return the size of the prime in bits."""
        return self._prime.bit_length()

    def __repr__(self) -> str:
        return f"UsefulConstants(curve={self._curve})"