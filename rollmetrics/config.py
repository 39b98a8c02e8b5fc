"""Configuration loading utilities.

Indicator sets are described in YAML and built through a name registry:

.. code-block:: yaml

    indicators:
      sharpe_12:
        indicator: sharpe_ratio
        freq: 12
        risk_free: 0.02
      ann_ret_12:
        indicator: annualized_return
        freq: 12
        mode: simple
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .base import Indicator
from .drawdown import (
    AverageDrawdown,
    ContinuousDrawdown,
    Drawdown,
    MaximumDrawdown,
    RollingEconomicDrawdown,
)
from .performance import CAGR, ActiveReturn, AnnualizedReturn, RoR, SharpeRatio, SortinoRatio
from .risk import AnnualizedRisk, DownsidePotential, DownsideRisk, StdDev, UpsidePotential
from .technical import RSI

logger = logging.getLogger(__name__)

INDICATORS: dict[str, type[Indicator]] = {
    cls.name: cls
    for cls in (
        AnnualizedReturn,
        AnnualizedRisk,
        ActiveReturn,
        AverageDrawdown,
        CAGR,
        ContinuousDrawdown,
        DownsidePotential,
        DownsideRisk,
        Drawdown,
        MaximumDrawdown,
        RoR,
        RollingEconomicDrawdown,
        RSI,
        SharpeRatio,
        SortinoRatio,
        StdDev,
        UpsidePotential,
    )
}


def load_config(path: str | Path) -> dict[str, Any]:
    """
    Load a YAML configuration file.

    Parameters
    ----------
    path : str | Path
        Path to the YAML configuration file.

    Returns
    -------
    dict[str, Any]
        Configuration dictionary.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist.
    yaml.YAMLError
        If the YAML is malformed.
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, "r") as f:
        config = yaml.safe_load(f)

    return config if config is not None else {}


def get_nested(config: dict[str, Any], *keys: str, default: Any = None) -> Any:
    """
    Get a nested value from a configuration dictionary.

    Examples
    --------
    >>> cfg = {"indicators": {"sharpe": {"freq": 12}}}
    >>> get_nested(cfg, "indicators", "sharpe", "freq")
    12
    >>> get_nested(cfg, "indicators", "missing", default=10)
    10
    """
    result = config
    for key in keys:
        if isinstance(result, dict) and key in result:
            result = result[key]
        else:
            return default
    return result


def build_indicator(spec: dict[str, Any]) -> Indicator:
    """
    Construct one indicator from its configuration entry.

    Parameters
    ----------
    spec : dict[str, Any]
        ``indicator`` names the registered class; every other key is passed
        to its constructor (``freq``, ``mar``, ``risk_free``, ``p``, ``mode``).

    Returns
    -------
    Indicator
        A fresh, unfed indicator.

    Raises
    ------
    ValueError
        If the indicator name is missing or unknown, or a parameter is
        rejected by the constructor.
    """
    params = dict(spec)
    name = params.pop("indicator", None)
    if name is None:
        raise ValueError(f"Indicator spec has no 'indicator' key: {spec}")
    cls = INDICATORS.get(name)
    if cls is None:
        raise ValueError(
            f"Unknown indicator '{name}'. Known: {sorted(INDICATORS)}"
        )
    try:
        indicator = cls(**params)
    except TypeError as e:
        raise ValueError(f"Bad parameters for '{name}': {e}") from e
    logger.debug("Built %s with %s", name, params)
    return indicator


def build_indicators(config: dict[str, Any]) -> dict[str, Indicator]:
    """
    Build every indicator under the ``indicators`` key.

    Returns
    -------
    dict[str, Indicator]
        Label to indicator, in configuration order. Empty if the key is absent.
    """
    specs = get_nested(config, "indicators", default={}) or {}
    if not isinstance(specs, dict):
        raise ValueError(f"'indicators' must be a mapping, got {type(specs).__name__}")
    built = {label: build_indicator(spec) for label, spec in specs.items()}
    logger.info("Built %d indicators from config", len(built))
    return built
