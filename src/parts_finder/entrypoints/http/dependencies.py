"""
Dependency injection for FastAPI routes.

Key principle: filter sessions are per-user state kept in the session store on
app.state. Only stateless singletons (the catalog client) use lru_cache.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends, Request

from parts_finder.adapters.http_facet_catalog import HttpFacetCatalog
from parts_finder.domain.errors import NotFoundError
from parts_finder.infra.config import catalog_api_timeout, catalog_api_url
from parts_finder.ports.facet_catalog import FacetCatalog
from parts_finder.ports.filter_session_store import FilterSessionStore
from parts_finder.use_cases.filter_session import FilterSession, StartFilterSession
from parts_finder.use_cases.search_parts_catalog import SearchPartsCatalog
from parts_finder.use_cases.upload_catalog_csv import UploadCatalogCsv


@lru_cache
def get_facet_catalog() -> FacetCatalog:
    """
    Provides the catalog service client.

    The client holds only configuration and opens a connection per call,
    so one instance is shared by all requests.

    Raises:
        RuntimeError: If CATALOG_API_URL is not set
    """
    return HttpFacetCatalog(base_url=catalog_api_url(), timeout=catalog_api_timeout())


def get_session_store(request: Request) -> FilterSessionStore:
    """Returns the session store created by build_app()."""
    return request.app.state.session_store


def get_filter_session(
    session_id: str,
    store: FilterSessionStore = Depends(get_session_store),
) -> FilterSession:
    """
    Resolves the session named in the request path.

    Raises:
        NotFoundError: If the session does not exist (expired or never created)
    """
    session = store.get(session_id)
    if session is None:
        raise NotFoundError(resource="Session", identifier=session_id)
    return session


def get_start_session_use_case(
    catalog: FacetCatalog = Depends(get_facet_catalog),
) -> StartFilterSession:
    return StartFilterSession(facet_catalog=catalog)


def get_search_use_case(catalog: FacetCatalog = Depends(get_facet_catalog)) -> SearchPartsCatalog:
    return SearchPartsCatalog(facet_catalog=catalog)


def get_upload_use_case(catalog: FacetCatalog = Depends(get_facet_catalog)) -> UploadCatalogCsv:
    return UploadCatalogCsv(facet_catalog=catalog)
