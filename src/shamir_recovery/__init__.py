"""Shamir secret reconstruction.

Recovers the secret of a (k, n) threshold scheme from decoded shares by
exact-rational Lagrange interpolation at x = 0, and cross-checks it against
other k-subsets of the shares.
"""

__version__ = "0.1.0"
