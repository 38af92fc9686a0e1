"""Cross-checking a reconstruction against other k-subsets of the shares.

Verification is sampled, not exhaustive: only the first ``sample_limit``
subsets after the primary one are re-interpolated. A mismatch is reported
as data (e.g. to flag a corrupted share), never raised. It detects
accidental inconsistency only; it is no defence against crafted shares.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from itertools import islice

from shamir_recovery.combinations import count_combinations, iter_combinations
from shamir_recovery.interpolation import Interpolator
from shamir_recovery.models import (
    CombinationCheck,
    Share,
    ShareSet,
    VerificationReport,
)
from shamir_recovery.rational import DivisionByZero, format_int

logger = logging.getLogger(__name__)

# Subsets re-interpolated after the primary one unless the caller overrides it.
DEFAULT_SAMPLE_LIMIT = 4


class SubsetVerifier:
    """Re-runs interpolation on alternative k-subsets of a share set.

    Args:
        interpolator: Interpolator used for every subset.
    """

    def __init__(self, interpolator: Interpolator | None = None) -> None:
        self.interpolator = interpolator or Interpolator()

    def iter_checks(
        self,
        all_shares: ShareSet,
        k: int,
        expected_secret: int,
        skip_first: bool = True,
    ) -> Iterator[CombinationCheck]:
        """Lazily check every k-subset in enumeration order.

        Args:
            all_shares: The full share set.
            k: Subset size (reconstruction threshold).
            expected_secret: The primary reconstruction.
            skip_first: Skip the lowest-x subset, which is the primary one.

        Returns:
            Generator of one CombinationCheck per subset; stop iterating
            to cap the work.
        """
        if k < 1:
            raise ValueError(f"Need k >= 1, got k={k}")

        combos = iter_combinations(all_shares.shares, k)
        if skip_first:
            combos = islice(combos, 1, None)
        return self._check_all(combos, expected_secret)

    def _check_all(
        self,
        combos: Iterator[tuple[Share, ...]],
        expected_secret: int,
    ) -> Iterator[CombinationCheck]:
        for combo in combos:
            xs = tuple(s.x for s in combo)
            try:
                result = self.interpolator.interpolate(combo)
            except DivisionByZero as exc:
                logger.warning("Combination %s failed: %s", list(xs), exc)
                yield CombinationCheck(
                    xs=xs, secret=None, exact=False, matched=False, error=str(exc)
                )
                continue

            matched = result.secret == expected_secret
            if not matched and logger.isEnabledFor(logging.INFO):
                logger.info(
                    "Combination %s gave %s, expected %s",
                    list(xs),
                    format_int(result.secret),
                    format_int(expected_secret),
                )
            yield CombinationCheck(
                xs=xs, secret=result.secret, exact=result.exact, matched=matched
            )

    def verify(
        self,
        all_shares: ShareSet,
        k: int,
        expected_secret: int,
        sample_limit: int = DEFAULT_SAMPLE_LIMIT,
    ) -> VerificationReport:
        """Sample up to ``sample_limit`` subsets after the primary one.

        Every sampled subset is recomputed and compared; the primary subset
        is not counted as an implicit match.

        Returns:
            VerificationReport with C(n, k) and one check per sampled subset.
        """
        if sample_limit < 0:
            raise ValueError(f"sample_limit must be >= 0, got {sample_limit}")

        checks = tuple(
            islice(self.iter_checks(all_shares, k, expected_secret), sample_limit)
        )
        report = VerificationReport(
            total_combinations=count_combinations(len(all_shares), k),
            expected_secret=expected_secret,
            checks=checks,
        )
        logger.debug(
            "Verified %d of %d combinations: %d matched",
            report.checked,
            report.total_combinations,
            report.matches,
        )
        return report
