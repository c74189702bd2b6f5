"""Shamir (t-of-n) secret sharing of byte strings over GF(2^8).

Every byte of the secret is shared independently with its own random
polynomial whose constant term is that byte.  Participant ``i`` (for
``i = 1 .. n``) receives the point ``(i, f_b(i))`` for every byte ``b``,
in byte order, as one ``ShareSet``.

API
---
construct_shares(t, n, secret)  -> list of n ShareSet
reconstruct(share_sets)         -> secret   (needs >= t share sets)

Reconstruction is not verifiable: too few or tampered share sets give a
wrong secret, not an error.
"""

from __future__ import annotations

import hmac
import logging
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from gfshamir.crypto import field
from gfshamir.crypto.memory import wipe, wiped
from gfshamir.crypto.rng import RandomSource, SystemRandomSource
from gfshamir.errors import MissingShareForByte, ThresholdOrCountZero
from gfshamir.params import SharingParameters

logger = logging.getLogger(__name__)

Point = Tuple[int, int]


class SharePoint:
    """One ``(x, y)`` sample of a byte's sharing polynomial.

    ``y`` is secret-equivalent, so both coordinates live in a two-byte
    buffer that is zero-filled by ``wipe()``, on leaving a ``with`` block
    and when the point is collected.
    """

    __slots__ = ("_data",)

    def __init__(self, x: int, y: int) -> None:
        self._data = bytearray((x, y))

    @property
    def x(self) -> int:
        return self._data[0]

    @property
    def y(self) -> int:
        return self._data[1]

    def __iter__(self) -> Iterator[int]:
        yield self._data[0]
        yield self._data[1]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SharePoint):
            return NotImplemented
        return hmac.compare_digest(self._data, other._data)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SharePoint(x={self.x}, y=<redacted>)"

    def wipe(self) -> None:
        wipe(self._data)

    def __enter__(self) -> "SharePoint":
        return self

    def __exit__(self, *exc) -> None:
        self.wipe()

    def __del__(self) -> None:
        data = getattr(self, "_data", None)
        if data is not None:
            wipe(data)


class ShareSet(list):
    """All share points held by one participant, one per secret byte."""

    def __init__(self, participant: Optional[int], points: Iterable[SharePoint] = ()) -> None:
        super().__init__(points)
        self.participant = participant

    def __repr__(self) -> str:
        return f"ShareSet(participant={self.participant}, points={len(self)})"

    def wipe(self) -> None:
        for point in self:
            point.wipe()

    def __enter__(self) -> "ShareSet":
        return self

    def __exit__(self, *exc) -> None:
        self.wipe()


# -----------------------------------------------------------------------
# Splitting
# -----------------------------------------------------------------------

def _power_table(degrees: List[int], participants: List[int]) -> List[List[int]]:
    """``x^d`` for every participant x and every coefficient degree d.

    Both x and the degrees are public, so the table is built once per
    call and shared by every byte of the secret.
    """
    table: List[List[int]] = []
    for x in participants:
        by_degree: Dict[int, int] = {d: field.exp(x, d) for d in set(degrees)}
        table.append([by_degree[d] for d in degrees])
    return table


def _share_byte(
    secret_byte: int,
    powers: List[List[int]],
    rng: RandomSource,
    out: bytearray,
) -> None:
    """Write ``f(x)`` for every participant of one byte's polynomial into *out*.

    f(x) = secret_byte + sum_k coeff_k * x^deg_k, with fresh random
    coefficients that are wiped before returning.
    """
    coefficients = bytearray(len(powers[0]))
    with wiped(coefficients):
        for k in range(len(coefficients)):
            coefficients[k] = rng.random_element()
        for index, x_powers in enumerate(powers):
            y = secret_byte
            for coeff, power in zip(coefficients, x_powers):
                y = field.add(y, field.mul(coeff, power))
            out[index] = y


def construct_shares(
    t: int,
    n: int,
    secret: bytes | bytearray | memoryview,
    rng: Optional[RandomSource] = None,
) -> List[ShareSet]:
    """Split *secret* into *n* share sets with threshold *t*.

    Any *t* of the returned sets reconstruct the secret.  ``t`` and ``n``
    must both be nonzero (``ThresholdOrCountZero`` otherwise) and at most
    255.  *rng* defaults to the system CSPRNG; an exception from it
    propagates after all partial share material has been wiped.
    """
    params = SharingParameters(threshold=t, share_count=n)
    if params.is_zero:
        raise ThresholdOrCountZero(t, n)
    if rng is None:
        rng = SystemRandomSource()

    participants = params.participant_indices()
    powers = _power_table(params.coefficient_degrees(), participants)
    shares = [ShareSet(x) for x in participants]
    ys = bytearray(n)

    try:
        with wiped(ys), memoryview(secret) as view, view.cast("B") as octets:
            for secret_byte in octets:
                _share_byte(secret_byte, powers, rng, ys)
                for share_set, y in zip(shares, ys):
                    share_set.append(SharePoint(share_set.participant, y))
    except BaseException:
        for share_set in shares:
            share_set.wipe()
        raise

    logger.debug("constructed %d share sets (t=%d) for a %d-byte secret", n, t, len(shares[0]))
    return shares


# -----------------------------------------------------------------------
# Reconstruction
# -----------------------------------------------------------------------

def lagrange_interpolate(points: Sequence[SharePoint] | Sequence[Point], x: int) -> int:
    """Evaluate the polynomial through *points* at *x*.

    Each point's ``y`` is weighted by prod over the other points m of
    ``(x - m.x) / (x_j - m.x)``.  The points must have distinct x
    coordinates; this is not checked.
    """
    result = field.ZERO
    for xj, yj in points:
        basis = field.ONE
        for xm, _ in points:
            if xm == xj:
                continue
            basis = field.mul(basis, field.div(field.sub(x, xm), field.sub(xj, xm)))
        result = field.add(result, field.mul(yj, basis))
    return result


def reconstruct(
    shares: Sequence[Sequence[SharePoint]] | Sequence[Sequence[Point]],
) -> bytearray:
    """Reconstruct the secret from *shares* by interpolating every byte at x=0.

    All share sets must cover the same number of bytes, otherwise
    ``MissingShareForByte`` is raised.  No threshold check is made.  The
    result is a ``bytearray`` so the caller can ``wipe`` it.
    """
    if not shares:
        return bytearray()

    size = len(shares[0])
    if any(len(share_set) != size for share_set in shares):
        raise MissingShareForByte(
            f"Share sets cover different byte counts: {sorted({len(s) for s in shares})}"
        )

    secret = bytearray(size)
    try:
        for i in range(size):
            secret[i] = lagrange_interpolate([share_set[i] for share_set in shares], field.ZERO)
    except BaseException:
        wipe(secret)
        raise

    logger.debug("reconstructed %d-byte secret from %d share sets", size, len(shares))
    return secret


# -----------------------------------------------------------------------
# Raw encoding: two bytes (x, y) per point, no framing
# -----------------------------------------------------------------------

def encode_share_set(share_set: Sequence[SharePoint]) -> bytearray:
    """Serialize a share set as consecutive ``x, y`` byte pairs."""
    encoded = bytearray(2 * len(share_set))
    for i, point in enumerate(share_set):
        encoded[2 * i] = point.x
        encoded[2 * i + 1] = point.y
    return encoded


def decode_share_set(data: bytes | bytearray | memoryview) -> ShareSet:
    """Parse the output of ``encode_share_set``.

    ``participant`` is the x coordinate shared by every point.  Points are
    not rejected when their x coordinates disagree; the set is then
    returned with ``participant=None``.
    """
    with memoryview(data) as view, view.cast("B") as raw:
        if len(raw) % 2:
            raise MissingShareForByte(f"Encoded share set has odd length {len(raw)}")
        points = [SharePoint(raw[i], raw[i + 1]) for i in range(0, len(raw), 2)]
    xs = {point.x for point in points}
    participant = xs.pop() if len(xs) == 1 else None
    return ShareSet(participant, points)
