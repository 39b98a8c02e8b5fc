"""Series adapter.

Converts price series into the return series the indicators consume and
builds fully fed indicators from a whole series.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence, TypeVar

import numpy as np
import pandas as pd

from .base import Indicator

logger = logging.getLogger(__name__)

IndicatorT = TypeVar("IndicatorT", bound=Indicator)


def price_to_returns(prices: Sequence[float] | pd.Series) -> list[float] | None:
    """
    Convert a price series to simple returns.

    Parameters
    ----------
    prices : Sequence[float] | pd.Series
        Closing prices in chronological order.

    Returns
    -------
    list[float] | None
        ``[0.0, p_1 / p_0 - 1, p_2 / p_1 - 1, ...]``, same length as the input.
        None if prices is empty.

    Examples
    --------
    >>> price_to_returns([100.0, 110.0, 99.0])
    [0.0, 0.10000000000000009, -0.09999999999999998]
    """
    values = pd.Series(prices, dtype=float).reset_index(drop=True)
    if values.empty:
        return None
    if (values == 0).any():
        logger.warning("price_to_returns: input contains zero prices; returns may be inf")
    with np.errstate(divide="ignore", invalid="ignore"):
        returns = values / values.shift(1) - 1.0
    returns.iloc[0] = 0.0
    return returns.tolist()


def feed_series(indicator: IndicatorT, values: Iterable[Any]) -> IndicatorT:
    """Feed values into indicator in order and return it."""
    indicator.extend(values)
    return indicator


def from_returns(
    cls: type[IndicatorT],
    returns: Iterable[Any] | None,
    **params: Any,
) -> IndicatorT | None:
    """
    Build ``cls(**params)`` and feed it a whole return series.

    Returns None if returns is None (no source data).
    """
    if returns is None:
        return None
    return feed_series(cls(**params), returns)


def from_prices(
    cls: type[IndicatorT],
    prices: Sequence[float] | pd.Series,
    **params: Any,
) -> IndicatorT | None:
    """
    Build ``cls(**params)`` and feed it a price series.

    Price-based indicators (``input_kind == "price"``) receive the prices
    directly; all others receive the simple returns of the prices.

    Returns
    -------
    Indicator | None
        The fed indicator, or None if prices is empty.
    """
    if cls.input_kind == "price":
        closes = pd.Series(prices, dtype=float)
        if closes.empty:
            return None
        return feed_series(cls(**params), closes.tolist())
    return from_returns(cls, price_to_returns(prices), **params)
