"""HTTP implementation of the FacetCatalog port."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter

from parts_finder.adapters.catalog_payloads import (
    BrandPayload,
    CategoryPayload,
    ModelPayload,
    ProductPayload,
    YearRangePayload,
)
from parts_finder.domain.errors import TransportError
from parts_finder.domain.facets import (
    Brand,
    Category,
    Model,
    Product,
    QueryParams,
    YearRange,
)
from parts_finder.domain.results import Failure, FetchResult, Success
from parts_finder.ports.facet_catalog import FacetCatalog

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class HttpFacetCatalog(FacetCatalog):
    """
    FacetCatalog backed by the catalog service REST API.

    - Opens a short-lived httpx.AsyncClient per call
    - Escapes brand/model keys used as path segments
    - Treats a JSON ``null`` list as empty (the service emits it for no rows)
    - Converts transport, HTTP status and payload errors into Failure results
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the adapter.

        Args:
            base_url: Catalog service root, e.g. "http://localhost:8000"
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (tests inject httpx.MockTransport)
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def list_brands(self) -> FetchResult[list[Brand]]:
        return await self._get_list("/brands", BrandPayload, resource="brands")

    async def list_models(self, brand: Brand) -> FetchResult[list[Model]]:
        path = f"/brands/{_segment(brand.key)}/models"
        return await self._get_list(path, ModelPayload, resource="models")

    async def list_year_ranges(self, brand: Brand, model: Model) -> FetchResult[list[YearRange]]:
        path = f"/brands/{_segment(brand.key)}/models/{_segment(model.key)}/years"
        return await self._get_list(path, YearRangePayload, resource="year_ranges")

    async def list_categories(self) -> FetchResult[list[Category]]:
        return await self._get_list("/categories", CategoryPayload, resource="categories")

    async def search_products(self, params: QueryParams) -> FetchResult[list[Product]]:
        return await self._get_list("/products", ProductPayload, resource="products", params=params)

    async def upload_csv(self, filename: str, content: bytes, category: str) -> FetchResult[None]:
        try:
            async with self._client() as client:
                response = await client.post(
                    "/upload",
                    files={"file": (filename, content, "text/csv")},
                    data={"category": category},
                )
                response.raise_for_status()
        except httpx.HTTPError as exc:
            return self._failure("upload", exc)

        return Success(None)

    async def _get_list(
        self,
        path: str,
        payload_type: type[Any],
        resource: str,
        params: QueryParams | None = None,
    ) -> FetchResult[list[Any]]:
        try:
            async with self._client() as client:
                response = await client.get(path, params=params)
                response.raise_for_status()
                data: Any = response.json()

            items = TypeAdapter(list[payload_type]).validate_python([] if data is None else data)
        except (httpx.HTTPError, ValueError) as exc:
            return self._failure(resource, exc)

        return Success([item.to_domain() for item in items])

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        )

    def _failure(self, resource: str, exc: Exception) -> Failure:
        status_code = exc.response.status_code if isinstance(exc, httpx.HTTPStatusError) else None

        logger.warning(
            "Catalog request failed",
            extra={
                "resource": resource,
                "error_type": type(exc).__name__,
                "status_code": status_code,
            },
        )

        return Failure(
            TransportError(
                f"Failed to fetch {resource} from catalog service",
                resource=resource,
                reason=str(exc),
                status_code=status_code,
            )
        )


def _segment(value: str) -> str:
    return quote(value, safe="")
