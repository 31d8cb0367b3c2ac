"""
Parsers for raw sort parameter values.
"""

from __future__ import annotations

from .sort_parser import parse_sort, tokenize

__all__ = ["parse_sort", "tokenize"]
