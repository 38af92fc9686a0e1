#!/usr/bin/env python3
"""Quick start example: recovering a Shamir secret in a few lines.

Demonstrates the core workflow:
  1. Load a JSON share document (values in mixed bases)
  2. Reconstruct the secret from the k lowest-x shares
  3. Cross-check it against other k-subsets
  4. Spot a corrupted share
"""

from itertools import islice
from pathlib import Path

from shamir_recovery.ingest import load_document
from shamir_recovery.interpolation import Interpolator
from shamir_recovery.models import Share, ShareSet
from shamir_recovery.report import format_summary, run_scheme
from shamir_recovery.verification import SubsetVerifier

# --- 1. Load the document ---
scheme = load_document(Path(__file__).parent / "data" / "testcase1.json")
print(f"n={scheme.n}, k={scheme.k}, shares={[str(s) for s in scheme.shares]}")

# --- 2. Primary reconstruction ---
result = Interpolator().reconstruct(scheme.shares, scheme.k)
print(f"Secret: {result.secret} (exact={result.exact}, from x={list(result.xs)})")

# --- 3. Cross-check: sampled, then lazily over every subset ---
verifier = SubsetVerifier()
report = verifier.verify(scheme.shares, scheme.k, result.secret, sample_limit=2)
print(f"Sampled {report.checked}/{report.total_combinations}: {report.matches} matched")

for check in islice(verifier.iter_checks(scheme.shares, scheme.k, result.secret), 10):
    print(f"  {check.xs} -> {check.secret} {'ok' if check.matched else 'MISMATCH'}")

# --- 4. P(x) = 3 + 2x with share x=3 corrupted ---
shares = ShareSet([Share(1, 5), Share(2, 7), Share(3, 10), Share(4, 11)])
report = verifier.verify(shares, k=2, expected_secret=3, sample_limit=10)
suspects = set.intersection(*(set(c.xs) for c in report.mismatches))
print(f"\nMismatched subsets: {[c.xs for c in report.mismatches]}, common x: {suspects}")

print()
print(format_summary(run_scheme(scheme, name="testcase1.json")))
