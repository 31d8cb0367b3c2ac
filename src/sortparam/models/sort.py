"""
Sort models.

Defines the immutable ``Order`` and ``Sort`` value objects produced by the
parser and the default resolver and consumed by the expression folder.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator

from .enums import Direction


def is_sortable_property(value: Optional[str]) -> bool:
    """Return True if the property keeps some text once all dots are removed."""
    return value is not None and bool(value.replace(".", "").strip())


class Order(BaseModel):
    """A single sort key: a property name plus a direction."""

    property: str = Field(..., description="Property to sort by")
    direction: Direction = Field(
        default=Direction.ASC, description="Sort direction for the property"
    )

    @field_validator("property")
    @classmethod
    def validate_property(cls, v: str) -> str:
        """Reject blank and dot-only properties."""
        if not is_sortable_property(v):
            raise ValueError("Property must not be empty or only dots")
        return v

    @classmethod
    def by(cls, prop: str) -> Order:
        """Create an order for the given property using the default direction."""
        return cls(property=prop)

    @classmethod
    def asc(cls, prop: str) -> Order:
        """Create an ascending order for the given property."""
        return cls(property=prop, direction=Direction.ASC)

    @classmethod
    def desc(cls, prop: str) -> Order:
        """Create a descending order for the given property."""
        return cls(property=prop, direction=Direction.DESC)

    def with_direction(self, direction: Direction) -> Order:
        """Return a copy of this order sorting in the given direction."""
        return Order(property=self.property, direction=direction)

    def __str__(self) -> str:
        return f"{self.property}: {self.direction.name}"

    model_config = ConfigDict(frozen=True)


class Sort(RootModel[Tuple[Order, ...]]):
    """
    An ordered sequence of sort keys.

    Entry order is significant: the first order is the primary sort key,
    the second the secondary one and so on. Repeated properties are kept
    as given. The empty sequence is the "unsorted" value, see
    :meth:`Sort.unsorted`.

    Sort values are never mutated; :meth:`and_` returns a new instance.
    """

    root: Tuple[Order, ...] = ()

    model_config = ConfigDict(frozen=True)

    @classmethod
    def unsorted(cls) -> Sort:
        """Return the shared empty sort."""
        return _UNSORTED

    @classmethod
    def by(
        cls, properties: Iterable[str] | str, direction: Direction = Direction.ASC
    ) -> Sort:
        """
        Create a sort for the given properties, all in one direction.

        Parameters
        ----------
        properties : Iterable[str] | str
            Property names in priority order. A plain string is treated as a
            single property.
        direction : Direction, optional
            Direction applied to every property (default: ascending).

        Returns
        -------
        Sort
            The new sort, or the unsorted value when no properties are given.
        """
        if isinstance(properties, str):
            properties = [properties]
        return cls.of(Order(property=p, direction=direction) for p in properties)

    @classmethod
    def of(cls, orders: Iterable[Order]) -> Sort:
        """Create a sort from existing orders."""
        collected = tuple(orders)
        if not collected:
            return _UNSORTED
        return cls(collected)

    def and_(self, other: Sort) -> Sort:
        """Return a new sort with the orders of ``other`` appended to this one."""
        if other.is_unsorted:
            return self
        if self.is_unsorted:
            return other
        return Sort(self.root + other.root)

    @property
    def is_sorted(self) -> bool:
        """Whether the sort holds at least one order."""
        return len(self.root) > 0

    @property
    def is_unsorted(self) -> bool:
        """Whether the sort holds no orders."""
        return not self.root

    def get_order_for(self, prop: str) -> Optional[Order]:
        """Return the first order for the given property, if any."""
        for order in self.root:
            if order.property == prop:
                return order
        return None

    def __iter__(self) -> Iterator[Order]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> Order:
        return self.root[index]

    def __str__(self) -> str:
        if self.is_unsorted:
            return "UNSORTED"
        return ",".join(str(order) for order in self.root)


_UNSORTED = Sort(())
