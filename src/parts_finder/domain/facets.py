from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

# Backend sentinel for a year range that is still in production.
OPEN_END_YEAR = 9999


class FacetLevel(str, Enum):
    BRAND = "brand"
    MODEL = "model"
    YEAR_RANGE = "year_range"
    CATEGORY = "category"

    def downstream(self) -> tuple[FacetLevel, ...]:
        """Levels invalidated when this level changes (category is outside the cascade)."""
        if self not in CASCADE_ORDER:
            return ()
        return CASCADE_ORDER[CASCADE_ORDER.index(self) + 1 :]


CASCADE_ORDER: tuple[FacetLevel, ...] = (
    FacetLevel.BRAND,
    FacetLevel.MODEL,
    FacetLevel.YEAR_RANGE,
)


# ==============================================================================
# Facet Options
# ==============================================================================


@dataclass(frozen=True, slots=True)
class Brand:
    id: int
    name: str

    @property
    def key(self) -> str:
        return self.name

    @property
    def label(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Model:
    id: int
    name: str

    @property
    def key(self) -> str:
        return self.name

    @property
    def label(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class YearRange:
    start_year: int
    end_year: int

    @property
    def is_open_ended(self) -> bool:
        return self.end_year == OPEN_END_YEAR

    @property
    def key(self) -> str:
        end = "" if self.is_open_ended else str(self.end_year)
        return f"{self.start_year}-{end}"

    @property
    def label(self) -> str:
        end = "" if self.is_open_ended else str(self.end_year)
        return f"{self.start_year} - {end}"


@dataclass(frozen=True, slots=True)
class Category:
    id: int
    name: str
    parent: str | None = None
    path: str | None = None

    @property
    def key(self) -> str:
        return str(self.id)

    @property
    def label(self) -> str:
        return self.name


FacetOption = Union[Brand, Model, YearRange, Category]

# Ordered (name, value) search parameters as sent to the products endpoint.
QueryParams = list[tuple[str, str]]


# ==============================================================================
# Selection
# ==============================================================================


@dataclass(frozen=True, slots=True)
class Selection:
    """
    The chosen option per facet level; ``None`` means unset.

    Immutable: every transition produces a new Selection, so a value captured
    before an await can be compared against the current one afterwards.
    """

    brand: Brand | None = None
    model: Model | None = None
    year_range: YearRange | None = None
    category: Category | None = None

    def get(self, level: FacetLevel) -> FacetOption | None:
        return getattr(self, level.value)

    def replace(self, level: FacetLevel, option: FacetOption | None) -> Selection:
        return dataclasses.replace(self, **{level.value: option})

    @property
    def is_empty(self) -> bool:
        return all(self.get(level) is None for level in FacetLevel)


# ==============================================================================
# Search Results
# ==============================================================================


@dataclass(frozen=True, slots=True)
class Fitment:
    """A motorcycle a product is compatible with."""

    brand: str
    model: str
    start_year: int
    end_year: int


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    category_id: int
    description: str | None = None
    brand: str | None = None
    is_universal: bool = False
    fitments: list[Fitment] = field(default_factory=list)
