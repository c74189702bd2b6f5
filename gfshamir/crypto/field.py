"""Binary-field arithmetic GF(2^8).

All values are Python ints in [0, 256) interpreted as polynomials over
GF(2) reduced modulo REDUCTION_POLYNOMIAL (x^8 + x^4 + x^3 + x + 1).

Every operation is written in constant-time style: the sequence of
operations never depends on the value of an operand.  Selection is done
with all-ones / all-zeros masks instead of branches, and there are no
log/antilog tables indexed by secret data.
"""

from __future__ import annotations

from gfshamir.config import (
    ELEMENT_BITS,
    ELEMENT_MASK,
    EXP_CANDIDATES,
    REDUCTION_POLYNOMIAL,
)

# mul() works on 16-bit words so the multiplicand can overflow into bit 8
_WORD_MASK = 0xFFFF

ZERO = 0
ONE = 1


def add(a: int, b: int) -> int:
    """Field addition (XOR)."""
    return a ^ b


def sub(a: int, b: int) -> int:
    """Field subtraction.  Identical to addition in characteristic 2."""
    return a ^ b


def mul(a: int, b: int) -> int:
    """Field multiplication.

    Carry-less multiply of the two bytes interleaved with reduction, run
    for exactly ELEMENT_BITS rounds.  In each round the accumulator takes
    the multiplicand under a mask built from the low bit of *b*, then the
    multiplicand is shifted and, if it overflowed into bit 8, reduced
    under a mask built from that bit.
    """
    multiplicand = a & ELEMENT_MASK
    multiplier = b & ELEMENT_MASK
    acc = 0
    for _ in range(ELEMENT_BITS):
        acc ^= (-(multiplier & 1) & _WORD_MASK) & multiplicand
        multiplier >>= 1
        multiplicand <<= 1
        multiplicand ^= (-(multiplicand >> ELEMENT_BITS) & _WORD_MASK) & REDUCTION_POLYNOMIAL
    return acc & ELEMENT_MASK


def inv(a: int) -> int:
    """Multiplicative inverse, computed as a^254.

    The nonzero elements form a cyclic group of order 255, so
    a^254 = a^-1.  The exponent is fixed, so the chain is too: one
    squaring, then six rounds of multiply-by-a and square
    (2 -> 6 -> 14 -> 30 -> 62 -> 126 -> 254).

    ``inv(0)`` is a precondition violation.  It is not special-cased and
    evaluates to 0.
    """
    result = mul(a, a)
    for _ in range(6):
        result = mul(result, a)
        result = mul(result, result)
    return result


def div(a: int, b: int) -> int:
    """Field division ``a / b``.  *b* must be nonzero."""
    return mul(a, inv(b))


def exp(base: int, x: int) -> int:
    """Raise *base* to the power *x* for x in [0, EXP_CANDIDATES).

    Every candidate exponent is visited.  For each one a mask is built
    that is 0xFF when the candidate equals *x* and 0x00 otherwise: the
    XOR of the two is OR-smeared over all eight bit positions, upwards
    then downwards, and complemented.  The running power is masked into
    the result and advanced by one multiplication on every iteration,
    matched or not, so the work done is the same for every *x*.

    ``exp(b, 0) == 1`` for every b, including 0.

    *x* is a byte and is reduced with ELEMENT_MASK like every other field
    argument, so exponents above 255 are a caller error.  255 itself is
    outside the scanned range and yields 0.
    """
    x &= ELEMENT_MASK
    result = 0
    power = ONE
    for candidate in range(EXP_CANDIDATES):
        mask = candidate ^ x
        mask |= (
            mask << 1 | mask << 2 | mask << 3 | mask << 4 | mask << 5 | mask << 6 | mask << 7
        ) & ELEMENT_MASK
        mask |= mask >> 1 | mask >> 2 | mask >> 3 | mask >> 4 | mask >> 5 | mask >> 6 | mask >> 7
        result |= power & (~mask & ELEMENT_MASK)
        power = mul(power, base)
    return result
