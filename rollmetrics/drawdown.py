"""Drawdown indicators.

Two families live here:

- Loss-episode decomposition: ContinuousDrawdown splits the trailing
  window into maximal runs of consecutive negative returns and reports the
  compounded loss of each run. AverageDrawdown and MaximumDrawdown
  summarise that list.
- Peak-to-trough measures: Drawdown (compounded level against its running
  peak) and RollingEconomicDrawdown (last price against the window's
  highest price).

An episode is strictly a run of negative-return periods. A recovery that
has not regained the prior peak still ends the episode, so the episode
magnitudes are generally smaller than the textbook peak-to-trough drawdown.
"""
from __future__ import annotations

from abc import abstractmethod
from typing import Iterable

import numpy as np

from .base import Indicator, WindowedIndicator


def loss_episodes(returns: Iterable[float]) -> list[float]:
    """
    Decompose a return sequence into loss episodes.

    Parameters
    ----------
    returns : Iterable[float]
        Period returns in chronological order.

    Returns
    -------
    list[float]
        Magnitude ``1 - prod(1 + r)`` of every maximal run of negative
        returns, in order of occurrence. Empty when no return is negative.

    Examples
    --------
    >>> loss_episodes([0.01, -0.5, -0.5, 0.02, -0.25])
    [0.75, 0.25]

    Notes
    -----
    Only a gain closes an episode. A zero return leaves the running loss
    untouched: it neither starts, extends nor ends an episode, so
    ``[-0.1, 0.0, -0.1]`` is a single episode of 0.19.
    """
    episodes: list[float] = []
    s = 1.0
    for r in returns:
        if r < 0.0:
            s *= 1.0 + r
        elif r > 0.0:
            dd = 1.0 - s
            if dd != 0.0:
                episodes.append(dd)
                s = 1.0
    # window ended inside a losing run
    if s < 1.0:
        dd = 1.0 - s
        if dd != 0.0:
            episodes.append(dd)
    return episodes


def drawdown_path(returns: np.ndarray) -> np.ndarray:
    """
    Running peak-to-trough drawdown of a compounded return window.

    Parameters
    ----------
    returns : np.ndarray
        Period returns.

    Returns
    -------
    np.ndarray
        ``(peak_t - level_t) / peak_t`` where ``level_t`` is the compounded
        level starting from 1.0 and ``peak_t`` its running maximum (never
        below the starting level).
    """
    level = np.cumprod(1.0 + returns)
    peak = np.maximum(np.maximum.accumulate(level), 1.0)
    return (peak - level) / peak


class ContinuousDrawdown(WindowedIndicator):
    """Loss episodes of the trailing window.

    Each slot is a tuple of episode magnitudes (possibly empty), or None
    while fewer than ``freq`` returns have been fed. Recomputed from the
    window on every feed; nothing is carried between windows.
    """

    name = "continuous_drawdown"

    def compute(self, window: np.ndarray) -> tuple[float, ...]:
        return tuple(float(dd) for dd in loss_episodes(window))


class _EpisodeSummary(Indicator):
    """Reduces the episode list of a private ContinuousDrawdown to a scalar."""

    def __init__(self, freq: int) -> None:
        super().__init__()
        self._episodes = ContinuousDrawdown(freq)
        self.freq = self._episodes.freq

    def feed(self, x: float) -> None:
        self._episodes.feed(x)
        episodes = self._episodes.last()
        if episodes is None:
            self._values.append(None)
        elif not episodes:
            # no losing period in the window
            self._values.append(0.0)
        else:
            self._record(self.summarise(np.asarray(episodes)))

    @abstractmethod
    def summarise(self, episodes: np.ndarray) -> float:
        """Reduce a non-empty array of episode magnitudes to one value."""
        ...


class AverageDrawdown(_EpisodeSummary):
    """Mean loss-episode magnitude over the trailing window (0.0 if none)."""

    name = "average_drawdown"

    def summarise(self, episodes: np.ndarray) -> float:
        return float(np.mean(episodes))


class MaximumDrawdown(_EpisodeSummary):
    """Largest loss-episode magnitude over the trailing window (0.0 if none)."""

    name = "maximum_drawdown"

    def summarise(self, episodes: np.ndarray) -> float:
        return float(np.max(episodes))


class Drawdown(WindowedIndicator):
    """Current drawdown from the running peak of the compounded window.

    The level starts at 1.0 at the beginning of each window, so the value is
    the decline of the last period's level from the highest level reached
    inside the window.
    """

    name = "drawdown"

    def compute(self, window: np.ndarray) -> float:
        return float(drawdown_path(window)[-1])


class RollingEconomicDrawdown(WindowedIndicator):
    """``1 - price / max(window)`` over a trailing window of prices.

    A zero window maximum yields a non-finite value; a NaN price in the
    window yields NaN.
    """

    name = "rolling_economic_drawdown"
    input_kind = "price"

    def compute(self, window: np.ndarray) -> float:
        peak = np.max(window)
        return 1.0 - window[-1] / peak
