"""
Default sort resolution.

Builds the sort to use when a request carries no sort input, from the
default declarations attached to the call site, or falls back to the
configured sort when there are none.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Optional

from sortparam.exceptions import AmbiguousSortDefaultError
from sortparam.models.sort import Sort
from sortparam.models.sort_default import SortDefault, SortDefaults

logger = logging.getLogger(__name__)

SORT_DEFAULT_NAME = SortDefault.__name__
SORT_DEFAULTS_NAME = SortDefaults.__name__


def sort_for_default(sort_default: SortDefault) -> Sort:
    """Build the sort described by one declaration."""
    return Sort.by(sort_default.properties, sort_default.direction)


def _fold_defaults(defaults: Iterable[SortDefault]) -> Sort:
    sort = Sort.unsorted()
    for sort_default in defaults:
        sort = sort.and_(sort_for_default(sort_default))
    return sort


def check_sort_defaults(
    sort_default: Optional[SortDefault],
    sort_defaults: Optional[SortDefaults],
    site: Optional[str] = None,
) -> None:
    """
    Reject a call site declaring both default forms.

    Raises
    ------
    AmbiguousSortDefaultError
        If both ``sort_default`` and ``sort_defaults`` are given.
    """
    if sort_default is None or sort_defaults is None:
        return

    site_name = site or "parameter"
    logger.warning(
        "Both %s and %s declared on %s", SORT_DEFAULT_NAME, SORT_DEFAULTS_NAME, site_name
    )
    raise AmbiguousSortDefaultError(
        f"Cannot use both {SORT_DEFAULTS_NAME} and {SORT_DEFAULT_NAME} on {site_name}! "
        f"Move {SORT_DEFAULT_NAME} into {SORT_DEFAULTS_NAME} to define sorting order!",
        site=site,
    )


def resolve_default_sort(
    sort_default: Optional[SortDefault] = None,
    sort_defaults: Optional[SortDefaults] = None,
    *,
    fallback: Optional[Sort] = Sort.unsorted(),
    site: Optional[str] = None,
) -> Optional[Sort]:
    """
    Resolve the default sort for a call site.

    Parameters
    ----------
    sort_default : Optional[SortDefault]
        Single default declaration, if the site has one.
    sort_defaults : Optional[SortDefaults]
        Ordered collection of declarations, if the site has one.
    fallback : Optional[Sort]
        Returned unchanged when the site declares no default. May be None,
        in which case the caller receives None.
    site : Optional[str]
        Description of the call site, used in error messages.

    Returns
    -------
    Optional[Sort]
        The declared default sort, or ``fallback``.

    Raises
    ------
    AmbiguousSortDefaultError
        If both forms are declared.

    Examples
    --------
    >>> sort = resolve_default_sort(
    ...     sort_defaults=SortDefaults.of(
    ...         SortDefault(properties=("a", "b"), direction=Direction.DESC),
    ...         SortDefault(properties=("c",)),
    ...     )
    ... )
    >>> print(sort)
    a: DESC,b: DESC,c: ASC
    """
    check_sort_defaults(sort_default, sort_defaults, site)

    if sort_default is not None:
        logger.debug("Using %s declared on %s", SORT_DEFAULT_NAME, site or "parameter")
        return sort_for_default(sort_default)

    if sort_defaults is not None:
        logger.debug(
            "Using %d %s declaration(s) on %s",
            len(sort_defaults),
            SORT_DEFAULTS_NAME,
            site or "parameter",
        )
        return _fold_defaults(sort_defaults)

    logger.debug("No default sort declared on %s, using fallback", site or "parameter")
    return fallback


def resolve_declarations(
    declarations: Iterable[SortDefault],
    *,
    fallback: Optional[Sort] = Sort.unsorted(),
) -> Optional[Sort]:
    """
    Resolve an ordered list of declarations, folding them left to right.

    An empty list yields ``fallback`` unchanged.
    """
    collected = list(declarations)
    if not collected:
        return fallback
    return _fold_defaults(collected)
