from fastapi import FastAPI

from parts_finder.adapters.in_memory_filter_session_store import InMemoryFilterSessionStore
from parts_finder.entrypoints.http.exception_handlers import register_exception_handlers
from parts_finder.entrypoints.http.routes.health import router as health_router
from parts_finder.entrypoints.http.routes.sessions import router as sessions_router
from parts_finder.entrypoints.http.routes.uploads import router as uploads_router
from parts_finder.infra.config import max_filter_sessions
from parts_finder.infra.logging_config import configure_logging
from parts_finder.ports.filter_session_store import FilterSessionStore


def build_app(session_store: FilterSessionStore | None = None) -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Parts Finder API",
        description="""
        Faceted parts search over the motorcycle parts catalog.

        ## Features
        - Filter sessions: narrow by brand → model → year range, plus category
        - Search and page through matching parts (30 per page)
        - Upload catalog CSV files filed under a root category

        ## Authentication
        Currently no authentication required (development phase).

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
    )

    if session_store is None:
        session_store = InMemoryFilterSessionStore(max_sessions=max_filter_sessions())
    app.state.session_store = session_store

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(sessions_router, prefix="/v1")
    app.include_router(uploads_router, prefix="/v1")

    return app


app = build_app()
