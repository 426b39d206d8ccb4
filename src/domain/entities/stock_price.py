"""
Domain entities for historical stock price data.
Zero external dependencies: pure Python dataclasses only.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PricePoint:
    date: str
    close: float


# An ordered series of closing prices. The state core treats it as one value.
TimeSeries = tuple[PricePoint, ...]
