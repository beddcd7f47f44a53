from __future__ import annotations

import uuid
from dataclasses import dataclass, field

from parts_finder.domain.facets import Product
from parts_finder.domain.pagination import ResultPaginator
from parts_finder.ports.facet_catalog import FacetCatalog
from parts_finder.use_cases.facet_filter import FacetFilter, FetchOutcome


@dataclass
class FilterSession:
    """Per-user state: the facet filter and the paginated search results."""

    facet_filter: FacetFilter
    paginator: ResultPaginator[Product] = field(default_factory=ResultPaginator)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))


class StartFilterSession:
    """Create a session with an empty selection and load the root facet options."""

    def __init__(self, facet_catalog: FacetCatalog) -> None:
        self._catalog = facet_catalog

    async def execute(self) -> tuple[FilterSession, list[FetchOutcome]]:
        session = FilterSession(facet_filter=FacetFilter(self._catalog))
        outcomes = await session.facet_filter.load()
        return session, outcomes
