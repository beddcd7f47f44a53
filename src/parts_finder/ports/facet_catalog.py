from __future__ import annotations

from abc import ABC, abstractmethod

from parts_finder.domain.facets import (
    Brand,
    Category,
    Model,
    Product,
    QueryParams,
    YearRange,
)
from parts_finder.domain.results import FetchResult


class FacetCatalog(ABC):
    """
    Port for the catalog service that resolves facet options and products.

    Contract:
        - Every method is a coroutine and never raises for transport or
          payload failures; it returns ``Failure(TransportError)`` instead.
        - Preconditions are guaranteed by the caller (FacetFilter):
          list_models gets a selected brand, list_year_ranges gets a selected
          brand and model. Implementations do not re-validate them.
    """

    @abstractmethod
    async def list_brands(self) -> FetchResult[list[Brand]]: ...

    @abstractmethod
    async def list_models(self, brand: Brand) -> FetchResult[list[Model]]: ...

    @abstractmethod
    async def list_year_ranges(self, brand: Brand, model: Model) -> FetchResult[list[YearRange]]: ...

    @abstractmethod
    async def list_categories(self) -> FetchResult[list[Category]]: ...

    @abstractmethod
    async def search_products(self, params: QueryParams) -> FetchResult[list[Product]]:
        """
        Search products matching encoded facet parameters.

        Args:
            params: Ordered (name, value) pairs produced by the query encoder;
                    an empty list means no filtering

        Returns:
            Success with the full, unpaged product list, or Failure
        """
        ...

    @abstractmethod
    async def upload_csv(self, filename: str, content: bytes, category: str) -> FetchResult[None]:
        """
        Forward a catalog CSV tagged with a root category for ingestion.

        Parsing and validation of the rows belong to the catalog service.
        """
        ...
