"""
Services for sort expression folding and sort resolution.
"""

from __future__ import annotations

from .default_resolver import resolve_declarations, resolve_default_sort
from .expression_folder import fold_into_expressions, legacy_fold_expressions
from .sort_resolver import SortResolver

__all__ = [
    "SortResolver",
    "fold_into_expressions",
    "legacy_fold_expressions",
    "resolve_declarations",
    "resolve_default_sort",
]
