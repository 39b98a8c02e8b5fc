"""Streaming indicator contract.

Every indicator consumes one observation per ``feed`` call and appends
exactly one slot to its derived value sequence: a value once enough
history exists, ``None`` before that. ``last()`` and ``iter()`` read the
sequence back without side effects.

Window-based indicators derive from WindowedIndicator, which keeps the
observation history and applies ``compute`` to the trailing ``freq``
observations.
"""
from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator

import numpy as np

logger = logging.getLogger(__name__)


def check_window(freq: int) -> int:
    """
    Validate a window length.

    Parameters
    ----------
    freq : int
        Number of trailing observations per computation.

    Returns
    -------
    int
        The validated window length.

    Raises
    ------
    ValueError
        If freq is not an integer or is smaller than 1.
    """
    if isinstance(freq, bool) or not isinstance(freq, (int, np.integer)):
        raise ValueError(f"freq must be an integer, got {freq!r}")
    if freq < 1:
        raise ValueError(f"freq must be >= 1, got {freq}")
    return int(freq)


def check_finite(name: str, value: float) -> float:
    """Validate a scalar parameter is a finite number."""
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")
    return value


def sample_std(window: np.ndarray) -> np.float64:
    """Sample standard deviation (ddof=1); NaN for fewer than 2 points."""
    if len(window) < 2:
        return np.float64(np.nan)
    return np.std(window, ddof=1)


class Indicator(ABC):
    """Base class for streaming indicators.

    Subclasses implement ``feed`` and record one slot per call through
    ``_record``.
    """

    name = "indicator"
    # "return" indicators consume period returns, "price" ones raw prices
    input_kind = "return"

    def __init__(self) -> None:
        self._values: list[Any] = []

    @abstractmethod
    def feed(self, x: Any) -> None:
        """Consume the next observation in chronological order."""
        ...

    def last(self) -> Any:
        """Most recent slot, or None if nothing has been computed yet."""
        if not self._values:
            return None
        return self._values[-1]

    def __iter__(self) -> Iterator[Any]:
        for value in self._values:
            yield value

    def __len__(self) -> int:
        return len(self._values)

    @property
    def values(self) -> tuple[Any, ...]:
        """Read-only view of the derived value sequence."""
        return tuple(self._values)

    def extend(self, xs: Iterable[Any]) -> Indicator:
        """Feed every element of xs in order and return self."""
        for x in xs:
            self.feed(x)
        return self

    def _record(self, value: Any) -> None:
        if isinstance(value, (float, np.floating)):
            value = float(value)
            if not math.isfinite(value):
                logger.warning(
                    "%s: non-finite value %s at slot %d",
                    self.name, value, len(self._values),
                )
        self._values.append(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(slots={len(self)}, last={self.last()!r})"


class WindowedIndicator(Indicator):
    """Indicator computed from the trailing ``freq`` observations.

    Parameters
    ----------
    freq : int
        Window length. Fixed for the lifetime of the instance.
    """

    def __init__(self, freq: int) -> None:
        super().__init__()
        self.freq = check_window(freq)
        self._history: list[float] = []

    @property
    def history(self) -> tuple[float, ...]:
        """All observations fed so far, oldest first."""
        return tuple(self._history)

    @property
    def is_ready(self) -> bool:
        return len(self._history) >= self.freq

    def window(self) -> np.ndarray | None:
        """Trailing ``freq`` observations, or None before the window fills."""
        if not self.is_ready:
            return None
        return np.asarray(self._history[-self.freq:], dtype=float)

    def feed(self, x: float) -> None:
        self._history.append(float(x))
        window = self.window()
        if window is None:
            self._values.append(None)
            return
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            value = self.compute(window)
        self._record(value)

    @abstractmethod
    def compute(self, window: np.ndarray) -> Any:
        """Aggregate a full window into one derived value."""
        ...
