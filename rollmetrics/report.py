"""Latest-value snapshots of a named indicator set."""
from __future__ import annotations

from typing import Mapping

from .base import Indicator
from .types import IndicatorResult


def snapshot(indicators: Mapping[str, Indicator]) -> list[IndicatorResult]:
    """
    Collect the latest slot of each indicator.

    Parameters
    ----------
    indicators : Mapping[str, Indicator]
        Label to indicator, e.g. the output of ``build_indicators``.

    Returns
    -------
    list[IndicatorResult]
        One result per label, in mapping order. ``value`` is None for
        indicators that are not ready yet.
    """
    return [
        IndicatorResult(
            name=label,
            value=indicator.last(),
            meta={"slots": len(indicator), "indicator": indicator.name},
        )
        for label, indicator in indicators.items()
    ]
