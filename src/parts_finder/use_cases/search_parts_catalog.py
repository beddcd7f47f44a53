from __future__ import annotations

import logging
from dataclasses import dataclass

from parts_finder.domain.errors import TransportError
from parts_finder.domain.facets import Product, Selection
from parts_finder.domain.pagination import ResultPaginator
from parts_finder.domain.results import Failure
from parts_finder.ports.facet_catalog import FacetCatalog
from parts_finder.use_cases.query_encoder import encode

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SearchPartsCatalogRequest:
    selection: Selection
    paginator: ResultPaginator[Product]


@dataclass(frozen=True, slots=True)
class SearchPartsCatalogResponse:
    total_count: int
    error: TransportError | None = None  # Set when the search failed and results were kept

    @property
    def ok(self) -> bool:
        return self.error is None


class SearchPartsCatalog:
    """
    Parts search triggered explicitly by the user.

    Encodes the selection into search parameters, delegates the search to the
    catalog and hands the full result list to the paginator, which restarts at
    page 1. No filtering or paging logic is applied here.
    """

    def __init__(self, facet_catalog: FacetCatalog) -> None:
        self._catalog = facet_catalog

    async def execute(self, request: SearchPartsCatalogRequest) -> SearchPartsCatalogResponse:
        """
        Execute parts search.

        Args:
            request: Current selection and the session's paginator

        Returns:
            Response with the number of results now held by the paginator.
            On transport failure the paginator keeps its previous results and
            the response carries the error.
        """
        params = encode(request.selection)
        result = await self._catalog.search_products(params)

        if isinstance(result, Failure):
            logger.warning(
                "Parts search failed, keeping previous results",
                extra={"params": params, "error_code": result.error.error_code},
            )
            return SearchPartsCatalogResponse(
                total_count=request.paginator.total_count,
                error=result.error,
            )

        request.paginator.set_results(result.value)
        return SearchPartsCatalogResponse(total_count=len(result.value))
