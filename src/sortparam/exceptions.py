"""
Custom exceptions for the sortparam package.

This module defines the error taxonomy of the sort codec. Soft conditions
such as an unrecognized trailing direction token or a dot-only property are
absorbed by the parser and never surface as exceptions.
"""

from __future__ import annotations

from collections.abc import Sequence


class SortParamError(Exception):
    """Base exception for all sortparam errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize SortParamError.

        Parameters
        ----------
        message : str
            Human-readable error message.
        """
        self.message = message
        super().__init__(message)


class SortConfigurationError(SortParamError):
    """
    Exception raised for invalid sort configuration.

    Raised at configuration time when the sort parameter name or the
    property delimiter is empty or blank.

    Attributes
    ----------
    message : str
        Human-readable error message.
    field_name : str | None
        The configuration field that failed validation.
    invalid_value : object
        The rejected value.

    Examples
    --------
    >>> try:
    ...     settings = load_settings(property_delimiter="")
    ... except SortConfigurationError as e:
    ...     print(f"Invalid {e.field_name}: {e.invalid_value!r}")
    """

    def __init__(
        self,
        message: str = "Invalid sort configuration",
        field_name: str | None = None,
        invalid_value: object = None,
    ) -> None:
        """
        Initialize SortConfigurationError.

        Parameters
        ----------
        message : str, optional
            Human-readable error message (default: "Invalid sort configuration").
        field_name : str | None, optional
            The configuration field that failed validation (default: None).
        invalid_value : object, optional
            The rejected value (default: None).
        """
        self.field_name: str | None = field_name
        self.invalid_value: object = invalid_value
        super().__init__(message)


class AmbiguousSortDefaultError(SortParamError):
    """
    Exception raised when both default sort forms are declared for one site.

    A single ``SortDefault`` and a ``SortDefaults`` collection cannot be
    combined because their relative ordering is undefined.

    Attributes
    ----------
    message : str
        Human-readable error message.
    site : str | None
        Description of the call site carrying both declarations.
    """

    def __init__(
        self,
        message: str = "Cannot use both SortDefault and SortDefaults",
        site: str | None = None,
    ) -> None:
        """
        Initialize AmbiguousSortDefaultError.

        Parameters
        ----------
        message : str, optional
            Human-readable error message.
        site : str | None, optional
            Description of the offending call site (default: None).
        """
        self.site: str | None = site
        super().__init__(message)


class MixedSortDirectionError(SortParamError):
    """
    Exception raised when a legacy fold encounters more than one direction.

    Attributes
    ----------
    message : str
        Human-readable error message.
    directions : list[str]
        The direction words seen before the fold gave up.
    """

    def __init__(
        self,
        message: str = "Only a single direction to sort by is supported",
        directions: Sequence[str] | None = None,
    ) -> None:
        """
        Initialize MixedSortDirectionError.

        Parameters
        ----------
        message : str, optional
            Human-readable error message.
        directions : Sequence[str] | None, optional
            The direction words encountered (default: None).
        """
        self.directions: list[str] = list(directions or [])
        super().__init__(message)


class InvalidDirectionError(SortParamError):
    """
    Exception raised when a token cannot be read as a sort direction.

    Only the strict ``Direction.from_string`` raises this; the parser uses
    the optional form and keeps unknown tokens as properties.

    Attributes
    ----------
    message : str
        Human-readable error message.
    value : str | None
        The token that was rejected.
    """

    def __init__(
        self,
        message: str = "Invalid sort direction",
        value: str | None = None,
    ) -> None:
        """
        Initialize InvalidDirectionError.

        Parameters
        ----------
        message : str, optional
            Human-readable error message (default: "Invalid sort direction").
        value : str | None, optional
            The rejected token (default: None).
        """
        self.value: str | None = value
        super().__init__(message)


# Exit codes for CLI operations
EXIT_CODE_SUCCESS = 0
EXIT_CODE_GENERAL_ERROR = 1
EXIT_CODE_INVALID_ARGS = 2
