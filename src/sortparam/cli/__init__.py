"""
CLI interface module for sortparam.

Provides a Typer-based command-line interface for parsing and folding sort
expressions.
"""

from __future__ import annotations

__all__: list[str] = []
