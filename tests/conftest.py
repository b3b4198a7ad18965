"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def session():
    """Provide a fresh KeypadSession."""
    from infixcalc import KeypadSession

    return KeypadSession()


@pytest.fixture
def committed_session():
    """Provide a KeypadSession that has just evaluated 12+30."""
    from infixcalc import KeypadSession

    session = KeypadSession()
    for digit in "12":
        session.press_digit(digit)
    session.press_operator("+")
    for digit in "30":
        session.press_digit(digit)
    return session.equals()


@pytest.fixture
def sample_results():
    """Plain-decimal results that must survive re-evaluation unchanged."""
    return [
        "0",
        "4",
        "-3",
        "0.5",
        "-0.25",
        "0.333333333333333",
        "123456.789",
        "9999999999",
        "0.000001",
    ]
