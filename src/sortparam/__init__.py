"""
sortparam - Sort parameter codec for request handling.

Parses compact sort expressions such as ``firstname,lastname,asc`` into an
immutable, ordered sort model, folds that model back into expressions, and
resolves declared default sorts when a request carries no sort input.
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "sortparam"
__license__ = "Apache-2.0"

__all__ = ["__version__", "__author__", "__license__"]
