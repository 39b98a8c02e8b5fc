"""Technical indicators computed from raw prices."""
from __future__ import annotations

import numpy as np

from .base import WindowedIndicator


class RSI(WindowedIndicator):
    """
    Relative Strength Index over the trailing window of price changes.

    Each price after the first contributes its positive change to the gain
    sequence and its negative change (as a positive number) to the loss
    sequence; the first price contributes 0 to both. The window covers the
    last ``freq`` entries of each sequence.

    Parameters
    ----------
    freq : int
        Window length.

    Notes
    -----
    RSI = 100 - 100 / (1 + avg_gain / avg_loss). A window without losses
    gives 100; a window without any change gives NaN.
    """

    name = "rsi"
    input_kind = "price"

    def __init__(self, freq: int) -> None:
        super().__init__(freq)
        self._gains: list[float] = []
        self._losses: list[float] = []

    def feed(self, x: float) -> None:
        price = float(x)
        if self._history:
            change = price - self._history[-1]
            self._gains.append(max(change, 0.0))
            self._losses.append(max(-change, 0.0))
        else:
            self._gains.append(0.0)
            self._losses.append(0.0)
        super().feed(price)

    def compute(self, window: np.ndarray) -> float:
        avg_gain = np.sum(self._gains[-self.freq:]) / self.freq
        avg_loss = np.sum(self._losses[-self.freq:]) / self.freq
        rs = avg_gain / avg_loss
        return 100.0 - 100.0 / (1.0 + rs)
