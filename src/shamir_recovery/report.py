"""Running a decoded scheme end to end and rendering a plain-text report."""

from __future__ import annotations

from dataclasses import dataclass

from shamir_recovery.ingest import SchemeInput
from shamir_recovery.interpolation import Interpolator
from shamir_recovery.models import ReconstructionResult, Share, VerificationReport
from shamir_recovery.rational import format_int
from shamir_recovery.verification import DEFAULT_SAMPLE_LIMIT, SubsetVerifier

RULE = "=" * 50


@dataclass(frozen=True)
class RunSummary:
    """Everything a report shows for one scheme.

    Attributes:
        name: Label for the scheme (usually the file name).
        scheme: The decoded input.
        selected: The k shares used for the primary reconstruction.
        primary: The primary reconstruction.
        verification: Sampled subset checks; None when n <= k.
    """

    name: str
    scheme: SchemeInput
    selected: tuple[Share, ...]
    primary: ReconstructionResult
    verification: VerificationReport | None = None

    @property
    def ok(self) -> bool:
        """Exact secret and every sampled subset agreeing with it."""
        if not self.primary.exact:
            return False
        return self.verification is None or self.verification.all_matched


def run_scheme(
    scheme: SchemeInput,
    sample_limit: int = DEFAULT_SAMPLE_LIMIT,
    name: str = "",
) -> RunSummary:
    """Reconstruct from the k lowest-x shares, then sample other subsets.

    Raises:
        DivisionByZero: From the primary reconstruction.
    """
    interpolator = Interpolator()
    selected = scheme.shares.first(scheme.k)
    primary = interpolator.interpolate(selected)

    verification = None
    if len(scheme.shares) > scheme.k:
        verifier = SubsetVerifier(interpolator)
        verification = verifier.verify(
            scheme.shares, scheme.k, primary.secret, sample_limit=sample_limit
        )

    return RunSummary(
        name=name,
        scheme=scheme,
        selected=selected,
        primary=primary,
        verification=verification,
    )


def _ids(xs: tuple[int, ...], sep: str = ", ") -> str:
    return sep.join(str(x) for x in xs)


def format_summary(summary: RunSummary) -> str:
    scheme = summary.scheme
    primary = summary.primary
    lines: list[str] = []

    if summary.name:
        lines.append(f"Processing {summary.name}:")
        lines.append("")
    lines.append(f"Total shares (n): {scheme.n}")
    lines.append(f"Minimum required (k): {scheme.k}")
    lines.append(f"Polynomial degree: {scheme.k - 1}")
    lines.append("")

    lines.append("Decoded shares:")
    for share in scheme.shares:
        lines.append(f"  x={share.x} | y={format_int(share.y)}")
    for entry in scheme.skipped:
        lines.append(f"  skipped {entry.key}: {entry.reason}")
    lines.append("")

    lines.append(f"Using shares: [{_ids(primary.xs)}]")
    lines.append(
        f"Reconstructed secret (constant term): {format_int(primary.secret)}"
    )
    if not primary.exact:
        lines.append(
            f"WARNING: result is not a whole number ({primary.value}); "
            f"{format_int(primary.secret)} is its floor"
        )

    report = summary.verification
    if report is not None:
        lines.append("")
        lines.append(
            f"Verifying with other combinations "
            f"(sampled {report.checked} of {report.total_combinations}):"
        )
        for check in report.checks:
            ids = _ids(check.xs, ",")
            if check.error is not None:
                lines.append(f"  Shares [{ids}] -> error: {check.error}  MISMATCH")
                continue
            status = "match" if check.matched else "MISMATCH"
            note = "" if check.exact else " (not exact)"
            value = format_int(check.secret)
            lines.append(f"  Shares [{ids}] -> {value}{note}  {status}")
        lines.append(
            f"Verification: {report.matches}/{report.checked} matched the secret"
        )

    lines.append("")
    lines.append(RULE)
    return "\n".join(lines)
