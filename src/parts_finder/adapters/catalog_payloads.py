"""Wire payloads returned by the catalog service.

Parsed with pydantic at the adapter boundary and converted to domain
entities, so field naming quirks of the service stay out of the domain.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, Field

from parts_finder.domain.facets import Brand, Category, Fitment, Model, Product, YearRange


class BrandPayload(BaseModel):
    id: int
    name: str

    def to_domain(self) -> Brand:
        return Brand(id=self.id, name=self.name)


class ModelPayload(BaseModel):
    id: int
    name: str
    brand_id: int | None = None

    def to_domain(self) -> Model:
        return Model(id=self.id, name=self.name)


class YearRangePayload(BaseModel):
    # The service has emitted all three spellings across releases
    start_year: int = Field(validation_alias=AliasChoices("startyear", "startYear", "start_year"))
    end_year: int = Field(validation_alias=AliasChoices("endyear", "endYear", "end_year"))

    def to_domain(self) -> YearRange:
        return YearRange(start_year=self.start_year, end_year=self.end_year)


class CategoryPayload(BaseModel):
    id: int
    name: str
    parent: str | None = None
    path: str | None = None

    def to_domain(self) -> Category:
        return Category(id=self.id, name=self.name, parent=self.parent, path=self.path)


class FitmentPayload(BaseModel):
    brand: str
    model: str
    start_year: int
    end_year: int

    def to_domain(self) -> Fitment:
        return Fitment(
            brand=self.brand,
            model=self.model,
            start_year=self.start_year,
            end_year=self.end_year,
        )


class ProductPayload(BaseModel):
    id: int | str
    name: str
    category_id: int
    description: str | None = None
    brand: str | None = None
    is_universal: bool = False
    motorcycles: list[FitmentPayload] | None = None

    def to_domain(self) -> Product:
        return Product(
            id=str(self.id),
            name=self.name,
            category_id=self.category_id,
            description=self.description,
            brand=self.brand,
            is_universal=self.is_universal,
            fitments=[m.to_domain() for m in self.motorcycles or []],
        )
