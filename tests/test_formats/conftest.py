"""Shared fixtures for round format tests."""

import pytest


@pytest.fixture
def full_round():
    """Five valid attempts: best 10.00, trimmed average 11.50."""
    return [12000, 10000, 11000, 11500, 15000], [False] * 5


@pytest.fixture
def partial_round():
    """Two DNFs leave three valid attempts."""
    return [12000, 10000, 11000, 9000, 15000], [False, False, False, True, True]


@pytest.fixture
def three_attempts():
    return [5210, 4980, None], [False, False, True]
