"""Core types for rollmetrics.

Compounding mode selector and the result record used by reporting.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, NamedTuple


class Mode(str, Enum):
    """Return-compounding mode.

    GEOMETRIC compounds the window, SIMPLE scales the arithmetic mean.
    """

    GEOMETRIC = "geometric"
    SIMPLE = "simple"

    @classmethod
    def parse(cls, value: Mode | str) -> Mode:
        """Coerce a string such as ``"geometric"`` into a Mode.

        Raises
        ------
        ValueError
            If value is not a known mode.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(
                f"mode must be 'geometric' or 'simple', got '{value}'"
            ) from None


class IndicatorResult(NamedTuple):
    """Latest output of one indicator.

    Parameters
    ----------
    name : str
        Label of the indicator (e.g. "sharpe_10").
    value : float | tuple[float, ...] | None
        Latest slot. None if not yet available.
    meta : dict[str, Any] | None
        Extra info (e.g. {"slots": 12, "indicator": "sharpe_ratio"}).
    """

    name: str
    value: float | tuple[float, ...] | None
    meta: dict[str, Any] | None = None
