"""rollmetrics - Streaming windowed performance and risk indicators.

Each indicator consumes one observation per ``feed`` call and keeps one
output slot per call: a value once ``freq`` observations exist, None before.

Public API:
- Indicator, WindowedIndicator: streaming contract
- AnnualizedReturn, RoR, CAGR, SharpeRatio, SortinoRatio, ActiveReturn
- StdDev, AnnualizedRisk, DownsideRisk, DownsidePotential, UpsidePotential
- ContinuousDrawdown, AverageDrawdown, MaximumDrawdown, Drawdown,
  RollingEconomicDrawdown
- RSI
- price_to_returns, from_returns, from_prices: series adapter
- load_config, build_indicators: YAML configuration
- snapshot: latest values of a named indicator set
"""

from .types import Mode, IndicatorResult
from .base import Indicator, WindowedIndicator
from .performance import AnnualizedReturn, RoR, CAGR, SharpeRatio, SortinoRatio, ActiveReturn
from .risk import StdDev, AnnualizedRisk, DownsideRisk, DownsidePotential, UpsidePotential
from .drawdown import (
    ContinuousDrawdown,
    AverageDrawdown,
    MaximumDrawdown,
    Drawdown,
    RollingEconomicDrawdown,
    loss_episodes,
)
from .technical import RSI
from .returns import price_to_returns, from_returns, from_prices
from .config import load_config, build_indicator, build_indicators
from .report import snapshot

__all__ = [
    # Contract
    "Mode",
    "IndicatorResult",
    "Indicator",
    "WindowedIndicator",
    # Performance
    "AnnualizedReturn",
    "RoR",
    "CAGR",
    "SharpeRatio",
    "SortinoRatio",
    "ActiveReturn",
    # Risk
    "StdDev",
    "AnnualizedRisk",
    "DownsideRisk",
    "DownsidePotential",
    "UpsidePotential",
    # Drawdown
    "ContinuousDrawdown",
    "AverageDrawdown",
    "MaximumDrawdown",
    "Drawdown",
    "RollingEconomicDrawdown",
    "loss_episodes",
    # Technical
    "RSI",
    # Adapters
    "price_to_returns",
    "from_returns",
    "from_prices",
    "load_config",
    "build_indicator",
    "build_indicators",
    "snapshot",
]
