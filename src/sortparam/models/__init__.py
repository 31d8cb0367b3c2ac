"""
Sort models for sortparam.

Exposes the value objects shared by the parser, the folder and the default
resolver.
"""

from __future__ import annotations

from .enums import Direction
from .sort import Order, Sort
from .sort_default import SortDefault, SortDefaults

__all__ = [
    "Direction",
    "Order",
    "Sort",
    "SortDefault",
    "SortDefaults",
]
