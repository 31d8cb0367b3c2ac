"""
Sort expression parser.

Turns raw sort parameter values into a ``Sort``. Each raw value is a list of
properties separated by a delimiter, optionally ending in a direction word:

    firstname,lastname,asc   ->  firstname ASC, lastname ASC
    firstname,asc            ->  firstname ASC
    lastname,desc            ->  lastname DESC
    firstname                ->  firstname ASC

Several raw values (a repeated query parameter) are concatenated in order,
so ``["firstname,asc", "lastname,desc"]`` sorts by firstname ascending, then
lastname descending.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import List, Optional

from sortparam.exceptions import SortConfigurationError
from sortparam.models.enums import Direction
from sortparam.models.sort import Order, Sort

logger = logging.getLogger(__name__)

DEFAULT_PROPERTY_DELIMITER = ","


def has_text(value: Optional[str]) -> bool:
    """Whether the value contains at least one non-whitespace character."""
    return value is not None and bool(value.strip())


def not_only_dots(token: str) -> bool:
    """Whether the token keeps some text once all dots are removed."""
    return has_text(token.replace(".", ""))


def tokenize(source: str, delimiter: str = DEFAULT_PROPERTY_DELIMITER) -> List[str]:
    """
    Split a raw sort value into tokens.

    Tokens that are empty, blank or made only of dots are dropped. The
    remaining tokens keep their order and are not trimmed.

    Parameters
    ----------
    source : str
        Raw parameter value, e.g. ``"firstname,lastname,asc"``.
    delimiter : str, optional
        Literal token separator (default: ",").

    Returns
    -------
    List[str]
        The surviving tokens.

    Examples
    --------
    >>> tokenize("firstname,,lastname,desc")
    ['firstname', 'lastname', 'desc']
    >>> tokenize("...,name")
    ['name']
    """
    if not has_text(delimiter):
        raise SortConfigurationError(
            "Property delimiter must not be null or empty!",
            field_name="property_delimiter",
            invalid_value=delimiter,
        )

    tokens = source.split(delimiter)
    kept = [token for token in tokens if not_only_dots(token)]
    if len(kept) != len(tokens):
        logger.debug(
            "Dropped %d empty or dot-only token(s) from %r",
            len(tokens) - len(kept),
            source,
        )
    return kept


def _to_order(prop: str, direction: Optional[Direction]) -> Optional[Order]:
    if not has_text(prop):
        return None
    if direction is None:
        return Order.by(prop)
    return Order(property=prop, direction=direction)


def parse_sort(
    sources: Optional[Iterable[Optional[str]]],
    delimiter: str = DEFAULT_PROPERTY_DELIMITER,
) -> Sort:
    """
    Parse raw sort parameter values into a Sort.

    The last token of each value is read as a direction when it is one
    (``asc``/``desc``, any case) and applies to every property of that
    value. Otherwise all tokens are properties sorted ascending. A value
    holding nothing but a direction word yields no orders.

    Parameters
    ----------
    sources : Optional[Iterable[Optional[str]]]
        Raw values in request order. None entries are skipped.
    delimiter : str, optional
        Separator between tokens of one value (default: ",").

    Returns
    -------
    Sort
        The concatenated orders, or ``Sort.unsorted()`` if there are none.
    """
    orders: List[Order] = []

    for source in sources or ():
        if source is None:
            continue

        tokens = tokenize(source, delimiter)
        direction = Direction.from_optional_string(tokens[-1]) if tokens else None
        properties = tokens[:-1] if direction is not None else tokens

        for prop in properties:
            order = _to_order(prop, direction)
            if order is not None:
                orders.append(order)

    if not orders:
        return Sort.unsorted()
    return Sort.of(orders)
