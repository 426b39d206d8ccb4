"""
Domain entity for an authenticated dashboard user.
Zero external dependencies: pure Python dataclass only.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class User:
    uid: str
    email: Optional[str] = None
    display_name: Optional[str] = None
