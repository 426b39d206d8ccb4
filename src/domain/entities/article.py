"""
Domain entity for a news article headline linked to a ticker.
Zero external dependencies: pure Python dataclass only.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Article:
    title: str
    url: str
