"""
Sort resolution service.

``SortResolver`` applies the configured parameter name, delimiters and
fallback to the parser, the default resolver and the expression folder. It
is what request-handling code talks to: given the raw values of the sort
parameter (or nothing), it returns the sort to use.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, List, Optional, Tuple

from sortparam.config.settings import SortSettings, get_settings, load_settings
from sortparam.models.sort import Sort
from sortparam.models.sort_default import SortDefault, SortDefaults
from sortparam.parsers.sort_parser import has_text, parse_sort
from sortparam.services.default_resolver import resolve_default_sort
from sortparam.services.expression_folder import (
    fold_into_expressions,
    legacy_fold_expressions,
)

logger = logging.getLogger(__name__)


class SortResolver:
    """
    Resolve sort parameters using one configuration.

    The resolver holds no per-request state and can be shared freely.

    Parameters
    ----------
    settings : Optional[SortSettings]
        Configuration to use. Read from the environment when omitted.

    Examples
    --------
    >>> resolver = SortResolver.from_config(sort_parameter="order")
    >>> resolver.get_sort_parameter("user")
    'user_order'
    >>> [str(o) for o in resolver.resolve(["firstname,lastname,desc"])]
    ['firstname: DESC', 'lastname: DESC']
    """

    def __init__(self, settings: Optional[SortSettings] = None) -> None:
        self.settings = settings or get_settings()

    @classmethod
    def from_config(cls, **overrides: Any) -> SortResolver:
        """Create a resolver from explicit configuration values."""
        return cls(load_settings(**overrides))

    @property
    def sort_parameter(self) -> str:
        return self.settings.sort_parameter

    @property
    def property_delimiter(self) -> str:
        return self.settings.property_delimiter

    @property
    def qualifier_delimiter(self) -> str:
        return self.settings.qualifier_delimiter

    @property
    def fallback_sort(self) -> Optional[Sort]:
        return self.settings.fallback_sort

    def get_sort_parameter(self, qualifier: Optional[str] = None) -> str:
        """
        Return the request parameter name to read the sort from.

        A qualifier, used to tell apart several sorts in one request, is
        prepended with the qualifier delimiter: ``user`` gives ``user_sort``.
        """
        if qualifier:
            return f"{qualifier}{self.qualifier_delimiter}{self.sort_parameter}"
        return self.sort_parameter

    def resolve(
        self,
        raw_values: Optional[Sequence[Optional[str]]],
        *,
        sort_default: Optional[SortDefault] = None,
        sort_defaults: Optional[SortDefaults] = None,
        site: Optional[str] = None,
    ) -> Optional[Sort]:
        """
        Resolve the sort for one request parameter.

        Parameters
        ----------
        raw_values : Optional[Sequence[Optional[str]]]
            Values of the sort parameter, None when the parameter is absent.
        sort_default : Optional[SortDefault]
            Single default declared for the call site.
        sort_defaults : Optional[SortDefaults]
            Collection of defaults declared for the call site.
        site : Optional[str]
            Description of the call site, used in error messages.

        Returns
        -------
        Optional[Sort]
            The parsed sort, the declared default, or the configured
            fallback (which may be None).

        Raises
        ------
        AmbiguousSortDefaultError
            If the request gives no sort and both default forms are declared.
        """
        if raw_values is None:
            logger.debug("No sort parameter given, resolving default")
            return self._resolve_default(sort_default, sort_defaults, site)

        # A single empty value, e.g. "sort="
        if len(raw_values) == 1 and not has_text(raw_values[0]):
            logger.debug("Empty sort parameter given, resolving default")
            return self._resolve_default(sort_default, sort_defaults, site)

        sort = parse_sort(raw_values, self.property_delimiter)
        logger.debug("Parsed sort %s from %r", sort, list(raw_values))
        return sort

    def _resolve_default(
        self,
        sort_default: Optional[SortDefault],
        sort_defaults: Optional[SortDefaults],
        site: Optional[str],
    ) -> Optional[Sort]:
        return resolve_default_sort(
            sort_default,
            sort_defaults,
            fallback=self.fallback_sort,
            site=site,
        )

    def fold_into_expressions(self, sort: Sort) -> List[str]:
        """Fold a sort into expressions, one per run of a direction."""
        return fold_into_expressions(sort, self.property_delimiter)

    def legacy_fold_expressions(self, sort: Sort) -> List[str]:
        """Fold a single-direction sort into one expression."""
        return legacy_fold_expressions(
            sort, self.property_delimiter, owner=type(self).__name__
        )

    def to_query_params(
        self,
        sort: Optional[Sort],
        qualifier: Optional[str] = None,
        legacy: bool = False,
    ) -> List[Tuple[str, str]]:
        """
        Render a sort as query parameters for building links.

        Parameters
        ----------
        sort : Optional[Sort]
            The sort to render. None and unsorted give no parameters.
        qualifier : Optional[str]
            Qualifier applied to the parameter name.
        legacy : bool
            Use the single-direction fold.

        Returns
        -------
        List[Tuple[str, str]]
            ``(name, expression)`` pairs, one per folded expression.
        """
        if sort is None:
            return []

        name = self.get_sort_parameter(qualifier)
        if legacy:
            expressions = self.legacy_fold_expressions(sort)
        else:
            expressions = self.fold_into_expressions(sort)
        return [(name, expression) for expression in expressions]
