"""
Domain entity for a single position in the user's portfolio.
Zero external dependencies: pure Python dataclass only.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Holding:
    """A position identified by its ticker *symbol*.

    Raises:
        ValueError: if *symbol* is blank, *shares* is negative or not finite,
                    or *price* is not finite.
    """

    symbol: str
    shares: float
    price: float

    def __post_init__(self) -> None:
        if not self.symbol or not self.symbol.strip():
            raise ValueError("symbol must be a non-empty string")
        if not math.isfinite(self.shares) or self.shares < 0:
            raise ValueError(f"shares must be a finite number >= 0, got {self.shares!r}")
        if not math.isfinite(self.price):
            raise ValueError(f"price must be a finite number, got {self.price!r}")
