"""FastAPI integration for sort parameters."""

from __future__ import annotations

from .deps import get_sort_resolver, sort_dependency
from .exception_handlers import register_exception_handlers

__all__ = ["get_sort_resolver", "register_exception_handlers", "sort_dependency"]
