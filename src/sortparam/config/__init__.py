"""
Configuration management module for sortparam.

Handles the sort parameter name, delimiters and fallback sort, read from
environment variables or given explicitly.
"""

from __future__ import annotations

from .settings import SortSettings, get_settings, load_settings

__all__: list[str] = ["SortSettings", "get_settings", "load_settings"]
