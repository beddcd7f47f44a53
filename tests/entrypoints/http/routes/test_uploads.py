"""Test suite for POST /v1/uploads."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from parts_finder.adapters.in_memory_facet_catalog import InMemoryFacetCatalog, UploadedCsv
from parts_finder.entrypoints.http.dependencies import get_facet_catalog
from parts_finder.entrypoints.http.exception_handlers import register_exception_handlers
from parts_finder.entrypoints.http.routes.uploads import router

CSV = b"name,brand,model\nFork spring,KTM,250SX\n"


@pytest.fixture
def catalog() -> InMemoryFacetCatalog:
    return InMemoryFacetCatalog()


@pytest.fixture
def app(catalog: InMemoryFacetCatalog) -> FastAPI:
    """Create a test FastAPI app with the uploads router and exception handlers."""
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/v1")
    test_app.dependency_overrides[get_facet_catalog] = lambda: catalog
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client."""
    return TestClient(app, raise_server_exceptions=False)


# ==============================================================================
# Accepted uploads
# ==============================================================================


def test_upload_is_accepted_and_forwarded(
    client: TestClient, catalog: InMemoryFacetCatalog
) -> None:
    """A valid CSV is accepted with 202 and forwarded in the background."""
    response = client.post(
        "/v1/uploads",
        files={"file": ("parts.csv", CSV, "text/csv")},
        data={"category": " Suspension "},
    )

    assert response.status_code == 202
    assert response.json() == {
        "filename": "parts.csv",
        "category": "Suspension",
        "status": "accepted",
    }
    assert catalog.uploads == [
        UploadedCsv(filename="parts.csv", content=CSV, category="Suspension")
    ]


# ==============================================================================
# Rejected uploads
# ==============================================================================


def test_non_csv_file_returns_422(client: TestClient, catalog: InMemoryFacetCatalog) -> None:
    response = client.post(
        "/v1/uploads",
        files={"file": ("parts.xlsx", CSV, "application/octet-stream")},
        data={"category": "Suspension"},
    )

    assert response.status_code == 422
    data = response.json()
    assert data["code"] == "VALIDATION_ERROR"
    assert data["errors"][0]["code"] == "INVALID_FILE_TYPE"
    assert catalog.uploads == []


def test_empty_file_returns_422(client: TestClient) -> None:
    response = client.post(
        "/v1/uploads",
        files={"file": ("parts.csv", b"", "text/csv")},
        data={"category": "Suspension"},
    )

    assert response.status_code == 422
    assert response.json()["errors"][0]["code"] == "MISSING_FILE"


def test_blank_category_returns_422(client: TestClient) -> None:
    response = client.post(
        "/v1/uploads",
        files={"file": ("parts.csv", CSV, "text/csv")},
        data={"category": "   "},
    )

    assert response.status_code == 422
    assert response.json()["errors"][0]["code"] == "MISSING_CATEGORY"


def test_missing_form_fields_return_422(client: TestClient) -> None:
    response = client.post("/v1/uploads", data={})

    assert response.status_code == 422
    fields = {e["field"] for e in response.json()["errors"]}
    assert {"file", "category"} <= fields
