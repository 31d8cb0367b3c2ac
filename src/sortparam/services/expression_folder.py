"""
Sort expression folder.

Serializes a ``Sort`` back into compact sort expressions, the inverse of
``parse_sort``. Consecutive orders sharing a direction are folded into one
expression, so ``a ASC, b ASC, c DESC`` becomes ``["a,b,asc", "c,desc"]``.

Two policies are provided:

- ``fold_into_expressions`` starts a new expression whenever the direction
  changes and accepts any sort.
- ``legacy_fold_expressions`` is for targets that can carry a single
  direction only and raises ``MixedSortDirectionError`` on a change.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from sortparam.exceptions import MixedSortDirectionError
from sortparam.models.enums import Direction
from sortparam.models.sort import Sort
from sortparam.parsers.sort_parser import DEFAULT_PROPERTY_DELIMITER

logger = logging.getLogger(__name__)


def _to_expression(
    properties: List[str], direction: Direction, delimiter: str
) -> str:
    return delimiter.join([*properties, direction.value])


def fold_into_expressions(
    sort: Sort, delimiter: str = DEFAULT_PROPERTY_DELIMITER
) -> List[str]:
    """
    Fold a sort into one expression per run of same-direction orders.

    Parameters
    ----------
    sort : Sort
        The sort to serialize.
    delimiter : str, optional
        Separator placed between properties and the direction word
        (default: ",").

    Returns
    -------
    List[str]
        Expressions in sort order; empty for an unsorted sort.

    Examples
    --------
    >>> fold_into_expressions(Sort.of([Order.asc("a"), Order.asc("b"), Order.desc("c")]))
    ['a,b,asc', 'c,desc']
    """
    expressions: List[str] = []
    batch: List[str] = []
    current: Optional[Direction] = None

    for order in sort:
        if current is not None and order.direction is not current:
            expressions.append(_to_expression(batch, current, delimiter))
            batch = []
        current = order.direction
        batch.append(order.property)

    if batch and current is not None:
        expressions.append(_to_expression(batch, current, delimiter))

    return expressions


def legacy_fold_expressions(
    sort: Sort,
    delimiter: str = DEFAULT_PROPERTY_DELIMITER,
    owner: str = "SortResolver",
) -> List[str]:
    """
    Fold a single-direction sort into one expression.

    Parameters
    ----------
    sort : Sort
        The sort to serialize. All orders must share one direction.
    delimiter : str, optional
        Separator placed between properties and the direction word
        (default: ",").
    owner : str, optional
        Name of the component doing the fold, used in the error message.

    Returns
    -------
    List[str]
        A single expression, or an empty list for an unsorted sort.

    Raises
    ------
    MixedSortDirectionError
        If the sort contains more than one direction.
    """
    batch: List[str] = []
    current: Optional[Direction] = None

    for order in sort:
        if current is not None and order.direction is not current:
            logger.warning(
                "Cannot fold %s into a single expression: found both %s and %s",
                sort,
                current.value,
                order.direction.value,
            )
            raise MixedSortDirectionError(
                f"{owner} in legacy configuration only supports a single "
                "direction to sort by!",
                directions=[current.value, order.direction.value],
            )
        current = order.direction
        batch.append(order.property)

    if not batch or current is None:
        return []
    return [_to_expression(batch, current, delimiter)]
