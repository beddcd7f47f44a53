from fastapi import APIRouter, Depends, status

from parts_finder.domain.facets import FacetLevel
from parts_finder.entrypoints.http.dependencies import (
    get_filter_session,
    get_search_use_case,
    get_session_store,
    get_start_session_use_case,
)
from parts_finder.entrypoints.http.dtos.facet_filter import (
    FilterStateResponseDTO,
    FilterUpdateResponseDTO,
    SelectFacetRequestDTO,
)
from parts_finder.entrypoints.http.dtos.search import ResultsQueryDTO, SearchResultsResponseDTO
from parts_finder.entrypoints.http.error_responses import ErrorResponse
from parts_finder.entrypoints.http.mappers.facet_filter_mapper import FacetFilterMapper
from parts_finder.entrypoints.http.mappers.search_results_mapper import SearchResultsMapper
from parts_finder.ports.filter_session_store import FilterSessionStore
from parts_finder.use_cases.filter_session import FilterSession, StartFilterSession
from parts_finder.use_cases.search_parts_catalog import (
    SearchPartsCatalog,
    SearchPartsCatalogRequest,
)


router = APIRouter(tags=["Sessions"])


@router.post(
    "/sessions",
    response_model=FilterUpdateResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Start a filter session",
    description="""
    Create a filter session with an empty selection and load the brand and
    category options.

    A failed option load does not fail the request: the affected facet has
    no options and the failure is listed under `fetches`.
    """,
)
async def create_session(
    use_case: StartFilterSession = Depends(get_start_session_use_case),
    store: FilterSessionStore = Depends(get_session_store),
) -> FilterUpdateResponseDTO:
    session, outcomes = await use_case.execute()
    store.add(session)
    return FacetFilterMapper.to_update(session.id, session.facet_filter.snapshot(), outcomes)


@router.get(
    "/sessions/{session_id}",
    response_model=FilterStateResponseDTO,
    summary="Get filter state",
)
def get_session(session: FilterSession = Depends(get_filter_session)) -> FilterStateResponseDTO:
    return FacetFilterMapper.to_state(session.id, session.facet_filter.snapshot())


@router.delete(
    "/sessions/{session_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="End a filter session",
)
def delete_session(
    session: FilterSession = Depends(get_filter_session),
    store: FilterSessionStore = Depends(get_session_store),
) -> None:
    store.remove(session.id)


@router.put(
    "/sessions/{session_id}/facets/{level}",
    response_model=FilterUpdateResponseDTO,
    summary="Select a facet option",
    description="""
    Select one of the options currently offered for a facet level.

    ## Cascade
    - Changing the brand clears model and year range
    - Changing the model clears year range
    - Category is independent

    ## Dependent options
    Model options are re-fetched when the brand changes, year ranges when the
    model changes. If that fetch fails the selection is left as it was and
    the failure is reported under `fetches` (status `failed`).

    ## Example
    ```
    PUT /v1/sessions/{id}/facets/brand
    {"key": "KTM"}
    ```
    """,
    responses={
        404: {"model": ErrorResponse, "description": "Session or option key not found"},
        422: {
            "model": ErrorResponse,
            "description": "Facet level is disabled for the current selection",
        },
    },
)
async def select_facet(
    level: FacetLevel,
    payload: SelectFacetRequestDTO,
    session: FilterSession = Depends(get_filter_session),
) -> FilterUpdateResponseDTO:
    """Select endpoint following parse → execute → map → return pattern."""
    outcome = await session.facet_filter.select_key(level, payload.key)
    return FacetFilterMapper.to_update(session.id, session.facet_filter.snapshot(), [outcome])


@router.delete(
    "/sessions/{session_id}/facets/{level}",
    response_model=FilterUpdateResponseDTO,
    summary="Clear one facet",
    description="Unset a facet level; downstream levels are cleared as with a new selection.",
)
async def clear_facet(
    level: FacetLevel,
    session: FilterSession = Depends(get_filter_session),
) -> FilterUpdateResponseDTO:
    outcome = await session.facet_filter.clear(level)
    return FacetFilterMapper.to_update(session.id, session.facet_filter.snapshot(), [outcome])


@router.delete(
    "/sessions/{session_id}/facets",
    response_model=FilterStateResponseDTO,
    summary="Clear all facets",
)
def clear_all_facets(session: FilterSession = Depends(get_filter_session)) -> FilterStateResponseDTO:
    session.facet_filter.clear_all()
    return FacetFilterMapper.to_state(session.id, session.facet_filter.snapshot())


@router.post(
    "/sessions/{session_id}/search",
    response_model=SearchResultsResponseDTO,
    summary="Search parts",
    description="""
    Search parts matching the current selection and return the first page.

    Unset facets are not sent. Results are paged client-side, 30 per page;
    `navigation` is omitted when everything fits on one page.
    """,
    responses={
        502: {
            "model": ErrorResponse,
            "description": "Catalog service unavailable; previous results are kept",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Failed to fetch products from catalog service",
                        "code": "TRANSPORT_ERROR",
                    }
                }
            },
        },
    },
)
async def search(
    session: FilterSession = Depends(get_filter_session),
    use_case: SearchPartsCatalog = Depends(get_search_use_case),
) -> SearchResultsResponseDTO:
    result = await use_case.execute(
        SearchPartsCatalogRequest(
            selection=session.facet_filter.selection,
            paginator=session.paginator,
        )
    )

    if result.error is not None:
        raise result.error

    return SearchResultsMapper.to_response(session.paginator)


@router.get(
    "/sessions/{session_id}/results",
    response_model=SearchResultsResponseDTO,
    summary="Page through results",
    description="Show a page of the last search results; out-of-range pages are clamped.",
)
def get_results(
    query: ResultsQueryDTO = Depends(),
    session: FilterSession = Depends(get_filter_session),
) -> SearchResultsResponseDTO:
    if query.page is not None:
        session.paginator.go_to(query.page)
    return SearchResultsMapper.to_response(session.paginator)
