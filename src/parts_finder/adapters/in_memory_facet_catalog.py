from __future__ import annotations

from dataclasses import dataclass

from parts_finder.domain.facets import (
    OPEN_END_YEAR,
    Brand,
    Category,
    Model,
    Product,
    QueryParams,
    YearRange,
)
from parts_finder.domain.results import FetchResult, Success
from parts_finder.ports.facet_catalog import FacetCatalog


@dataclass(frozen=True, slots=True)
class UploadedCsv:
    filename: str
    content: bytes
    category: str


class InMemoryFacetCatalog(FacetCatalog):
    """
    Canonical contract implementation for tests and local runs.

    - Returns option lists in insertion order
    - Scopes models by brand key and year ranges by (brand key, model key)
    - Matches products with AND semantics over the encoded parameters
    - Records uploads instead of ingesting them
    """

    def __init__(
        self,
        brands: list[Brand] | None = None,
        models: dict[str, list[Model]] | None = None,
        year_ranges: dict[tuple[str, str], list[YearRange]] | None = None,
        categories: list[Category] | None = None,
        products: list[Product] | None = None,
    ) -> None:
        self._brands = brands or []
        self._models = models or {}
        self._year_ranges = year_ranges or {}
        self._categories = categories or []
        self._products = products or []
        self.uploads: list[UploadedCsv] = []

    async def list_brands(self) -> FetchResult[list[Brand]]:
        return Success(list(self._brands))

    async def list_models(self, brand: Brand) -> FetchResult[list[Model]]:
        return Success(list(self._models.get(brand.key, [])))

    async def list_year_ranges(self, brand: Brand, model: Model) -> FetchResult[list[YearRange]]:
        return Success(list(self._year_ranges.get((brand.key, model.key), [])))

    async def list_categories(self) -> FetchResult[list[Category]]:
        return Success(list(self._categories))

    async def search_products(self, params: QueryParams) -> FetchResult[list[Product]]:
        criteria = dict(params)
        return Success([p for p in self._products if self._matches(p, criteria)])

    async def upload_csv(self, filename: str, content: bytes, category: str) -> FetchResult[None]:
        self.uploads.append(UploadedCsv(filename=filename, content=content, category=category))
        return Success(None)

    def _matches(self, product: Product, criteria: dict[str, str]) -> bool:
        category_id = criteria.get("category_id")
        if category_id is not None and str(product.category_id) != category_id:
            return False

        brand = criteria.get("brand")
        model = criteria.get("model")
        year = criteria.get("year")
        if brand is None and model is None and year is None:
            return True
        if product.is_universal:
            return True

        start, end = _parse_year(year) if year is not None else (None, None)
        for fitment in product.fitments:
            if brand is not None and fitment.brand != brand:
                continue
            if model is not None and fitment.model != model:
                continue
            if start is not None and fitment.end_year < start:
                continue
            if end is not None and fitment.start_year > end:
                continue
            return True
        return False


def _parse_year(value: str) -> tuple[int, int]:
    start, _, end = value.partition("-")
    return int(start), int(end) if end else OPEN_END_YEAR
