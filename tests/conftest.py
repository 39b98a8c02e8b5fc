"""Shared fixtures for rollmetrics tests."""

import json
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture(scope="session")
def reference_cases() -> dict:
    """Golden values for the ten-period reference scenario."""
    with open(FIXTURES_DIR / "reference_cases.json") as f:
        return json.load(f)


@pytest.fixture
def reference_returns(reference_cases) -> list[float]:
    """Ten periodic returns used throughout the reference scenario."""
    return list(reference_cases["returns"])


@pytest.fixture
def benchmark_returns(reference_cases) -> list[float]:
    """Benchmark returns aligned with reference_returns."""
    return list(reference_cases["benchmark"])
