"""Value types for shares, reconstruction results and verification reports."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from shamir_recovery.rational import BigRational, format_int


@dataclass(frozen=True)
class Share:
    """A single decoded share (x, y) where y = P(x) for the hidden polynomial."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 1:
            raise ValueError(f"Share x must be a positive integer, got {self.x}")

    def __str__(self) -> str:
        return f"({self.x}, {format_int(self.y)})"


class ShareSet:
    """Shares sorted ascending by x; no two shares may carry the same x.

    The ordering makes subset enumeration deterministic: the first k shares
    are the primary reconstruction subset.
    """

    __slots__ = ("_shares",)

    def __init__(self, shares: Iterable[Share]) -> None:
        ordered = tuple(sorted(shares, key=lambda s: s.x))
        for prev, cur in zip(ordered, ordered[1:]):
            if prev.x == cur.x:
                raise ValueError(f"Duplicate share x={cur.x} in share set")
        self._shares = ordered

    def __len__(self) -> int:
        return len(self._shares)

    def __iter__(self) -> Iterator[Share]:
        return iter(self._shares)

    def __getitem__(self, index: int) -> Share:
        return self._shares[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ShareSet):
            return NotImplemented
        return self._shares == other._shares

    def __hash__(self) -> int:
        return hash(self._shares)

    def __repr__(self) -> str:
        return f"ShareSet({list(self._shares)!r})"

    @property
    def shares(self) -> tuple[Share, ...]:
        return self._shares

    @property
    def xs(self) -> tuple[int, ...]:
        return tuple(s.x for s in self._shares)

    def first(self, k: int) -> tuple[Share, ...]:
        """The k lowest-x shares (primary reconstruction policy)."""
        if not 1 <= k <= len(self._shares):
            raise ValueError(
                f"Need 1 <= k <= {len(self._shares)} shares, got k={k}"
            )
        return self._shares[:k]


@dataclass(frozen=True)
class ReconstructionResult:
    """Outcome of one interpolation at x = 0.

    Attributes:
        secret: The constant term; the floor of ``value`` when not exact.
        exact: False when the interpolated value is not an integer. Such a
            result is a warning and must not be trusted as the secret.
        value: The exact interpolated rational.
        xs: The x-identifiers of the shares used.
    """

    secret: int
    exact: bool
    value: BigRational
    xs: tuple[int, ...] = ()

    @property
    def is_warning(self) -> bool:
        return not self.exact


@dataclass(frozen=True)
class CombinationCheck:
    """Re-interpolation of one sampled k-subset against the expected secret."""

    xs: tuple[int, ...]
    secret: int | None
    exact: bool
    matched: bool
    error: str | None = None


@dataclass(frozen=True)
class VerificationReport:
    """Aggregated results of sampled subset verification.

    Attributes:
        total_combinations: C(n, k), the number of k-subsets available.
        expected_secret: The primary reconstruction being cross-checked.
        checks: One entry per sampled subset, in enumeration order.
    """

    total_combinations: int
    expected_secret: int
    checks: tuple[CombinationCheck, ...] = ()

    @property
    def checked(self) -> int:
        return len(self.checks)

    @property
    def matches(self) -> int:
        return sum(1 for c in self.checks if c.matched)

    @property
    def mismatches(self) -> list[CombinationCheck]:
        return [c for c in self.checks if not c.matched]

    @property
    def all_matched(self) -> bool:
        return self.matches == self.checked
