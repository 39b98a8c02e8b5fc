"""Risk indicators.

Streaming dispersion and threshold measures over a trailing window of
period returns: standard deviation, annualized risk, downside risk, and
downside/upside potential relative to a minimum acceptable return (MAR).

The downside and upside measures divide by the total number of returns fed
so far, not by the window length. Once the history outgrows the window the
denominator keeps increasing.
"""
from __future__ import annotations

import numpy as np

from .base import WindowedIndicator, check_finite, sample_std


class StdDev(WindowedIndicator):
    """Sample standard deviation (ddof=1) of the trailing window."""

    name = "std_dev"

    def compute(self, window: np.ndarray) -> float:
        return sample_std(window)


class AnnualizedRisk(WindowedIndicator):
    """
    Annualized volatility of the trailing window.

    Notes
    -----
    AnnualizedRisk = std(r) * sqrt(freq), sample std (ddof=1).
    """

    name = "annualized_risk"

    def compute(self, window: np.ndarray) -> float:
        return sample_std(window) * np.sqrt(self.freq)


class _ThresholdIndicator(WindowedIndicator):
    """Window indicator parameterised by a minimum acceptable return."""

    def __init__(self, freq: int, mar: float = 0.0) -> None:
        super().__init__(freq)
        self.mar = check_finite("mar", mar)


class DownsideRisk(_ThresholdIndicator):
    """
    Downside deviation below the MAR.

    Parameters
    ----------
    freq : int
        Window length.
    mar : float, default 0.0
        Minimum acceptable return.

    Notes
    -----
    DownsideRisk = sqrt(sum(min(r - mar, 0) ** 2 / N)), N = returns fed so far.
    """

    name = "downside_risk"

    def compute(self, window: np.ndarray) -> float:
        n = len(self._history)
        return np.sqrt(np.sum(np.minimum(window - self.mar, 0.0) ** 2 / n))


class DownsidePotential(_ThresholdIndicator):
    """
    Average shortfall below the MAR.

    Notes
    -----
    DownsidePotential = sum(max(mar - r, 0) / N), N = returns fed so far.
    """

    name = "downside_potential"

    def compute(self, window: np.ndarray) -> float:
        n = len(self._history)
        return np.sum(np.maximum(self.mar - window, 0.0) / n)


class UpsidePotential(_ThresholdIndicator):
    """
    Average excess above the MAR.

    Notes
    -----
    UpsidePotential = sum(max(r - mar, 0) / N), N = returns fed so far.
    """

    name = "upside_potential"

    def compute(self, window: np.ndarray) -> float:
        n = len(self._history)
        return np.sum(np.maximum(window - self.mar, 0.0) / n)
