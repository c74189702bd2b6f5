"""Sharing parameters.

``(t, n)`` are the only knobs of the scheme.  Both are byte-sized: a
threshold above 255 can never be met because there are only 255 nonzero
participant indices.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from gfshamir.config import MAX_PARTICIPANTS, MAX_THRESHOLD


class SharingParameters(BaseModel):
    """Validated ``(t, n)`` pair for one call to ``construct_shares``.

    Zero is accepted here so the engine can report it as
    ``ThresholdOrCountZero``; out-of-range or non-integer values fail
    with pydantic's ``ValidationError``.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    threshold: int = Field(ge=0, le=MAX_THRESHOLD)
    share_count: int = Field(ge=0, le=MAX_PARTICIPANTS)

    @property
    def is_zero(self) -> bool:
        return self.threshold == 0 or self.share_count == 0

    def coefficient_degrees(self) -> List[int]:
        """Degree of the term each random coefficient multiplies.

        One coefficient is drawn per participant.  Coefficient ``i`` gets
        degree ``max(t-1-i, 1)``: the first ``t-1`` cover degrees
        ``t-1 .. 1`` and the rest fold into the linear term, so none can
        land on the constant term.  With ``t == 1`` the polynomial is the
        constant secret byte and no coefficient is drawn.
        """
        top = self.threshold - 1
        if top < 1:
            return []
        return [max(top - i, 1) for i in range(self.share_count)]

    def participant_indices(self) -> List[int]:
        """x coordinates handed out, ``1 .. n``."""
        return list(range(1, self.share_count + 1))
