"""
Default sort declarations.

A call site may declare the sort to use when a request carries none, either
as a single ``SortDefault`` or as an ordered ``SortDefaults`` collection.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import Direction
from .sort import is_sortable_property


class SortDefault(BaseModel):
    """One default declaration: properties sorted in a single direction."""

    properties: Tuple[str, ...] = Field(
        default=(), description="Properties to sort by, in priority order"
    )
    direction: Direction = Field(
        default=Direction.ASC, description="Direction applied to every property"
    )

    @field_validator("properties", mode="before")
    @classmethod
    def parse_properties(cls, v: object) -> object:
        """Accept a single property name as well as a sequence."""
        if isinstance(v, str):
            return (v,)
        return v

    @field_validator("properties")
    @classmethod
    def validate_properties(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Reject blank and dot-only property names."""
        for prop in v:
            if not is_sortable_property(prop):
                raise ValueError(f"Default sort property must not be empty: {prop!r}")
        return v

    model_config = ConfigDict(frozen=True)


class SortDefaults(BaseModel):
    """An ordered collection of default declarations."""

    defaults: Tuple[SortDefault, ...] = Field(
        default=(), description="Declarations applied in order"
    )

    @classmethod
    def of(cls, *defaults: SortDefault) -> SortDefaults:
        """Create a collection from the given declarations."""
        return cls(defaults=defaults)

    def __iter__(self) -> Iterator[SortDefault]:  # type: ignore[override]
        return iter(self.defaults)

    def __len__(self) -> int:
        return len(self.defaults)

    model_config = ConfigDict(frozen=True)
