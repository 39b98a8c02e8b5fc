"""Return and risk-adjusted performance indicators.

Streaming versions of annualized return, rate of return, CAGR, Sharpe and
Sortino ratios, and active return against a benchmark. All consume period
returns; annualization treats ``freq`` as the number of periods per year.
"""
from __future__ import annotations

import logging
from typing import Any

import numpy as np

from .base import Indicator, WindowedIndicator, check_finite, check_window, sample_std
from .risk import DownsideRisk
from .types import Mode

logger = logging.getLogger(__name__)


class AnnualizedReturn(WindowedIndicator):
    """
    Annualized return over the trailing window.

    Parameters
    ----------
    freq : int
        Window length, also the number of periods per year.
    mode : Mode or {"geometric", "simple"}, default "geometric"
        GEOMETRIC compounds the window, SIMPLE scales the mean.

    Notes
    -----
    Geometric: ``prod(1 + r) ** (freq / n) - 1`` with ``n = min(len(window), freq)``.
    Simple: ``mean(r) * freq``.
    """

    name = "annualized_return"

    def __init__(self, freq: int, mode: Mode | str = Mode.GEOMETRIC) -> None:
        super().__init__(freq)
        self.mode = Mode.parse(mode)

    def compute(self, window: np.ndarray) -> float:
        if self.mode is Mode.SIMPLE:
            return np.mean(window) * self.freq
        n = min(len(window), self.freq)
        return np.prod(1.0 + window) ** (self.freq / n) - 1.0


class RoR(WindowedIndicator):
    """
    Rate of return across the trailing window.

    Compounds the window and compares the last cumulative level with the
    first one, so the first period's own return does not contribute.

    Notes
    -----
    RoR = cumprod(1 + r)[-1] / cumprod(1 + r)[0] - 1
    """

    name = "ror"

    def compute(self, window: np.ndarray) -> float:
        levels = np.cumprod(1.0 + window)
        return levels[-1] / levels[0] - 1.0


class CAGR(Indicator):
    """
    Compound annual growth rate from a private RoR indicator.

    Parameters
    ----------
    freq : int
        Window length of the underlying RoR.
    p : float
        Annualization exponent, typically periods per year / window length.

    Notes
    -----
    CAGR = (1 + RoR) ** p - 1
    """

    name = "cagr"

    def __init__(self, freq: int, p: float) -> None:
        super().__init__()
        self._ror = RoR(freq)
        self.freq = self._ror.freq
        self.p = check_finite("p", p)

    def feed(self, x: float) -> None:
        self._ror.feed(x)
        ror = self._ror.last()
        if ror is None:
            self._values.append(None)
            return
        with np.errstate(invalid="ignore", over="ignore"):
            self._record(np.power(1.0 + ror, self.p) - 1.0)


class SharpeRatio(WindowedIndicator):
    """
    Per-period Sharpe ratio over the trailing window.

    Parameters
    ----------
    freq : int
        Window length, also the number of periods per year.
    risk_free : float, default 0.0
        Annual risk-free rate, de-annualized with ``freq``.

    Notes
    -----
    Sharpe = (mean(r) - rf_p) / std(r) with rf_p = (1 + risk_free) ** (1 / freq) - 1
    and sample std (ddof=1). A zero std gives a non-finite value.
    """

    name = "sharpe_ratio"

    def __init__(self, freq: int, risk_free: float = 0.0) -> None:
        super().__init__(freq)
        self.risk_free = check_finite("risk_free", risk_free)
        if self.risk_free <= -1.0:
            raise ValueError(f"risk_free must be > -1, got {self.risk_free}")
        self.risk_free_per_period = (1.0 + self.risk_free) ** (1.0 / self.freq) - 1.0

    def compute(self, window: np.ndarray) -> float:
        return (np.mean(window) - self.risk_free_per_period) / sample_std(window)


class SortinoRatio(WindowedIndicator):
    """
    Sortino ratio over the trailing window.

    Parameters
    ----------
    freq : int
        Window length.
    risk_free : float, default 0.0
        Per-period risk-free rate subtracted from the mean.
    mar : float, default 0.0
        Minimum acceptable return for the downside risk.

    Notes
    -----
    Sortino = (mean(r) - risk_free) / downside_risk, where downside_risk
    comes from a private DownsideRisk(freq, mar) fed in lockstep.
    """

    name = "sortino_ratio"

    def __init__(self, freq: int, risk_free: float = 0.0, mar: float = 0.0) -> None:
        super().__init__(freq)
        self.risk_free = check_finite("risk_free", risk_free)
        self._downside_risk = DownsideRisk(freq, mar)
        self.mar = self._downside_risk.mar

    def feed(self, x: float) -> None:
        self._downside_risk.feed(x)
        super().feed(x)

    def compute(self, window: np.ndarray) -> float:
        downside_risk = np.float64(self._downside_risk.last())
        if downside_risk == 0.0:
            logger.warning(
                "sortino_ratio: zero downside risk below mar=%.4f at slot %d",
                self.mar, len(self),
            )
        return (np.mean(window) - self.risk_free) / downside_risk


class ActiveReturn(Indicator):
    """
    Annualized return of a portfolio minus that of its benchmark.

    Fed with ``(portfolio_return, benchmark_return)`` pairs; each side drives
    its own AnnualizedReturn with the same window and mode.

    Parameters
    ----------
    freq : int
        Window length.
    mode : Mode or {"geometric", "simple"}, default "geometric"
        Compounding mode of both annualized returns.
    """

    name = "active_return"

    def __init__(self, freq: int, mode: Mode | str = Mode.GEOMETRIC) -> None:
        super().__init__()
        self.freq = check_window(freq)
        self.mode = Mode.parse(mode)
        self._portfolio = AnnualizedReturn(self.freq, self.mode)
        self._benchmark = AnnualizedReturn(self.freq, self.mode)

    def feed(self, x: Any) -> None:
        try:
            portfolio, benchmark = x
        except (TypeError, ValueError):
            raise ValueError(
                f"active_return expects a (portfolio, benchmark) pair, got {x!r}"
            ) from None
        self._portfolio.feed(portfolio)
        self._benchmark.feed(benchmark)
        first, second = self._portfolio.last(), self._benchmark.last()
        if first is None or second is None:
            self._values.append(None)
        else:
            self._record(first - second)
