"""Tests for shamir_recovery.interpolation module."""

from __future__ import annotations

import logging
import random

import pytest

from shamir_recovery.interpolation import (
    Interpolator,
    interpolate_at_zero,
    reconstruct_secret,
)
from shamir_recovery.models import Share, ShareSet
from shamir_recovery.rational import BigRational, DivisionByZero


class TestInterpolateAtZero:
    def test_line_first_two(self):
        result = interpolate_at_zero([Share(1, 5), Share(2, 7)])
        assert result.secret == 3
        assert result.exact
        assert result.value == BigRational(3)
        assert result.xs == (1, 2)

    def test_line_other_pair(self):
        result = interpolate_at_zero([Share(2, 7), Share(3, 9)])
        assert result.secret == 3
        assert result.exact

    def test_integer_line_through_two_points(self):
        result = interpolate_at_zero([Share(1, 5), Share(2, 8)])
        assert result.secret == 2
        assert result.exact

    def test_non_exact_result(self):
        # L_1 = 1 * (-3)/(1-3) = 3/2, L_3 = 2 * (-1)/(3-1) = -1
        result = interpolate_at_zero([Share(1, 1), Share(3, 2)])
        assert not result.exact
        assert result.is_warning
        assert result.value == BigRational(1, 2)
        assert result.secret == 0

    def test_non_exact_negative_floor(self):
        result = interpolate_at_zero([Share(1, 0), Share(3, 1)])
        assert result.value == BigRational(-1, 2)
        assert result.secret == -1
        assert not result.exact

    def test_non_exact_logs_warning(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.WARNING, logger="shamir_recovery.interpolation"):
            interpolate_at_zero([Share(1, 1), Share(3, 2)])
        assert "not a whole number" in caplog.text

    def test_duplicate_x_raises(self):
        with pytest.raises(DivisionByZero):
            interpolate_at_zero([Share(1, 5), Share(2, 7), Share(1, 6)])

    def test_empty(self):
        with pytest.raises(ValueError, match="at least one"):
            interpolate_at_zero([])

    def test_single_share_is_constant(self):
        result = interpolate_at_zero([Share(4, 99)])
        assert result.secret == 99
        assert result.exact

    def test_order_does_not_matter(self, make_shares):
        shares = make_shares([11, -4, 7], [5, 1, 9])
        assert interpolate_at_zero(shares).secret == 11
        assert interpolate_at_zero(list(reversed(shares))).secret == 11

    def test_under_threshold_gives_other_value(self, make_shares):
        # P(x) = 3 + 2x + x^2; two points only fix the line 1 + 5x
        shares = make_shares([3, 2, 1], [1, 2])
        result = interpolate_at_zero(shares)
        assert result.exact
        assert result.secret == 1

    def test_over_threshold_still_exact(self, make_shares):
        shares = make_shares([3, 2, 1], [1, 2, 3, 4, 5, 6])
        result = interpolate_at_zero(shares)
        assert result.secret == 3
        assert result.exact


class TestReconstructionCorrectness:
    @pytest.mark.parametrize("k", [1, 2, 3, 5, 8, 12])
    def test_random_polynomials(self, make_shares, k: int):
        rng = random.Random(1000 + k)
        for _ in range(5):
            coeffs = [rng.randrange(-(2**256), 2**256) for _ in range(k)]
            xs = rng.sample(range(1, 60), k)
            result = interpolate_at_zero(make_shares(coeffs, xs))
            assert result.exact
            assert result.secret == coeffs[0]

    def test_huge_secret(self, make_shares):
        secret = 2**1024 + 12345
        shares = make_shares([secret, 3**300, 17, 2**700], [2, 3, 5, 7])
        result = interpolate_at_zero(shares)
        assert result.secret == secret
        assert result.exact


class TestInterpolator:
    def test_reconstruct_uses_lowest_x(self, line_shares: ShareSet):
        result = Interpolator().reconstruct(line_shares, 2)
        assert result.xs == (1, 2)
        assert result.secret == 3

    def test_reconstruct_k_too_large(self, line_shares: ShareSet):
        with pytest.raises(ValueError):
            Interpolator().reconstruct(line_shares, 4)


class TestConvenienceFunctions:
    def test_reconstruct_secret_all_shares(self, make_shares):
        shares = make_shares([42, 1, 1], [3, 1, 2])
        result = reconstruct_secret(shares)
        assert result.secret == 42
        assert result.xs == (1, 2, 3)

    def test_reconstruct_secret_with_k(self, line_shares: ShareSet):
        result = reconstruct_secret(line_shares, k=2)
        assert result.xs == (1, 2)
        assert result.secret == 3

    def test_reconstruct_secret_duplicate_x(self):
        with pytest.raises(ValueError, match="Duplicate"):
            reconstruct_secret([Share(1, 5), Share(1, 6)])
