"""Shared test fixtures for the shamir_recovery test suite."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from shamir_recovery.models import Share, ShareSet


def eval_poly(coeffs: list[int], x: int) -> int:
    """Horner evaluation over the integers; coeffs[0] is the constant term."""
    result = 0
    for c in reversed(coeffs):
        result = result * x + c
    return result


@pytest.fixture
def make_shares() -> Callable[[list[int], list[int]], list[Share]]:
    """Shares of the integer polynomial ``coeffs`` at the given x values."""

    def _make(coeffs: list[int], xs: list[int]) -> list[Share]:
        return [Share(x=x, y=eval_poly(coeffs, x)) for x in xs]

    return _make


@pytest.fixture
def line_shares() -> ShareSet:
    """P(x) = 3 + 2x at x = 1, 2, 3."""
    return ShareSet([Share(1, 5), Share(2, 7), Share(3, 9)])


@pytest.fixture
def sample_document() -> dict:
    """4 shares of P(x) = 3 + 2x + x^2 (secret 3), values in mixed bases.

    P(1)=6, P(2)=11, P(3)=18, P(6)=51.
    """
    return {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "6"},
        "2": {"base": "2", "value": "1011"},
        "3": {"base": "16", "value": "12"},
        "6": {"base": "4", "value": "303"},
    }


@pytest.fixture
def document_file(tmp_path: Path, sample_document: dict) -> Path:
    path = tmp_path / "testcase1.json"
    path.write_text(json.dumps(sample_document), encoding="utf-8")
    return path
