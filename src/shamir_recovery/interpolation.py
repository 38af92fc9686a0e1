"""Exact-rational Lagrange interpolation at x = 0.

Recovers the constant term of the polynomial through the given shares. All
arithmetic runs on BigRational; a valid (k, n) scheme yields an integer.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from shamir_recovery.models import ReconstructionResult, Share, ShareSet
from shamir_recovery.rational import ZERO, BigRational

logger = logging.getLogger(__name__)


def interpolate_at_zero(shares: Sequence[Share]) -> ReconstructionResult:
    """Lagrange interpolation evaluated at x = 0.

    For points (x_i, y_i), the basis term at x=0 is:
        L_i = y_i * prod_{j != i} (-x_j) / (x_i - x_j)

    The interpolated value at 0 is sum_i L_i. The number of shares is not
    checked against any threshold.

    Raises:
        ValueError: If ``shares`` is empty.
        DivisionByZero: If two shares have the same x.
    """
    if not shares:
        raise ValueError("Need at least one share to interpolate")

    total = ZERO
    for i, share_i in enumerate(shares):
        term = BigRational.from_int(share_i.y)
        for j, share_j in enumerate(shares):
            if i == j:
                continue
            term = term.multiply(
                BigRational(-share_j.x, share_i.x - share_j.x)
            )
        total = total.add(term)

    xs = tuple(s.x for s in shares)
    if not total.is_integer:
        logger.warning(
            "Interpolation over shares %s is not a whole number: %s",
            list(xs),
            total,
        )
    return ReconstructionResult(
        secret=total.floor(),
        exact=total.is_integer,
        value=total,
        xs=xs,
    )


class Interpolator:
    """Reconstructs the secret of a share set from its k lowest-x shares."""

    def interpolate(self, shares: Sequence[Share]) -> ReconstructionResult:
        return interpolate_at_zero(shares)

    def reconstruct(self, share_set: ShareSet, k: int) -> ReconstructionResult:
        """Interpolate over ``share_set.first(k)``."""
        selected = share_set.first(k)
        logger.debug("Reconstructing from shares %s", [s.x for s in selected])
        return self.interpolate(selected)


def reconstruct_secret(
    shares: Sequence[Share] | ShareSet,
    k: int | None = None,
) -> ReconstructionResult:
    """Convenience: reconstruct from the k lowest-x shares (all if k is None)."""
    share_set = shares if isinstance(shares, ShareSet) else ShareSet(shares)
    if k is None:
        k = len(share_set)
    return Interpolator().reconstruct(share_set, k)
