"""
Enums for sortparam models.

Defines the sort direction used by orders, sort expressions and default
declarations.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from sortparam.exceptions import InvalidDirectionError


class Direction(str, Enum):
    """Sort order direction.

    The textual form is case-insensitive: ``asc``, ``ASC`` and ``Asc`` all
    denote ascending order.
    """

    ASC = "asc"
    DESC = "desc"

    @property
    def is_ascending(self) -> bool:
        """Whether this direction sorts ascending."""
        return self is Direction.ASC

    @property
    def is_descending(self) -> bool:
        """Whether this direction sorts descending."""
        return self is Direction.DESC

    @classmethod
    def from_optional_string(cls, value: Optional[str]) -> Optional[Direction]:
        """
        Interpret a token as a direction if possible.

        Parameters
        ----------
        value : Optional[str]
            Candidate token, e.g. ``"desc"`` or ``"lastname"``.

        Returns
        -------
        Optional[Direction]
            The matching direction, or None when the token is not a
            direction word.

        Examples
        --------
        >>> Direction.from_optional_string("DESC")
        <Direction.DESC: 'desc'>
        >>> Direction.from_optional_string("lastname") is None
        True
        """
        if value is None:
            return None
        try:
            return cls(value.lower())
        except ValueError:
            return None

    @classmethod
    def from_string(cls, value: str) -> Direction:
        """Interpret a token as a direction, raising InvalidDirectionError otherwise."""
        direction = cls.from_optional_string(value)
        if direction is None:
            raise InvalidDirectionError(
                f"Invalid value '{value}' for orders given! "
                "Has to be either 'desc' or 'asc' (case insensitive).",
                value=value,
            )
        return direction
