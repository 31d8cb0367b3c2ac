"""FastAPI dependencies for sort parameters."""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import lru_cache
from typing import Optional

from fastapi import Request

from sortparam.models.sort import Sort
from sortparam.models.sort_default import SortDefault, SortDefaults
from sortparam.services.default_resolver import check_sort_defaults
from sortparam.services.sort_resolver import SortResolver

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_sort_resolver() -> SortResolver:
    """Return the process-wide resolver configured from the environment."""
    return SortResolver()


def sort_dependency(
    qualifier: Optional[str] = None,
    sort_default: Optional[SortDefault] = None,
    sort_defaults: Optional[SortDefaults] = None,
    resolver: Optional[SortResolver] = None,
    site: Optional[str] = None,
) -> Callable[[Request], Optional[Sort]]:
    """
    Build a dependency resolving the sort of the current request.

    The sort is read from the query parameter named by the resolver
    (``sort`` by default, ``<qualifier>_sort`` with a qualifier). The
    parameter may repeat; each value is one sort expression.

    Parameters
    ----------
    qualifier : Optional[str]
        Qualifier for endpoints taking more than one sort.
    sort_default : Optional[SortDefault]
        Default used when the request gives no sort.
    sort_defaults : Optional[SortDefaults]
        Ordered defaults used when the request gives no sort.
    resolver : Optional[SortResolver]
        Resolver to use instead of the environment-configured one.
    site : Optional[str]
        Description of the endpoint, used in error messages.

    Returns
    -------
    Callable[[Request], Optional[Sort]]
        A dependency for ``fastapi.Depends``.

    Raises
    ------
    AmbiguousSortDefaultError
        If both ``sort_default`` and ``sort_defaults`` are given.

    Examples
    --------
    >>> @app.get("/users")
    ... async def list_users(
    ...     sort: Sort = Depends(
    ...         sort_dependency(sort_default=SortDefault(properties=("lastname",)))
    ...     ),
    ... ) -> list[User]:
    ...     ...
    """
    check_sort_defaults(sort_default, sort_defaults, site)

    def get_sort(request: Request) -> Optional[Sort]:
        active = resolver or get_sort_resolver()
        name = active.get_sort_parameter(qualifier)
        values = request.query_params.getlist(name)
        logger.debug("Resolving sort from %s=%r", name, values)
        return active.resolve(
            values or None,
            sort_default=sort_default,
            sort_defaults=sort_defaults,
            site=site or f"sort parameter '{name}'",
        )

    return get_sort
