from pydantic import BaseModel, Field


class FitmentDTO(BaseModel):
    brand: str
    model: str
    start_year: int
    end_year: int


class ProductResponseDTO(BaseModel):
    id: str
    name: str
    category_id: int
    description: str | None = None
    brand: str | None = None
    is_universal: bool
    fitments: list[FitmentDTO]


class PageWindowDTO(BaseModel):
    pages: list[int]
    show_first: bool
    leading_ellipsis: bool
    show_last: bool
    trailing_ellipsis: bool
    has_previous: bool
    has_next: bool


class ResultsQueryDTO(BaseModel):
    """Query parameters for navigating search results."""

    page: int | None = Field(
        default=None,
        description="Page to show (1-indexed); out-of-range values are clamped",
        examples=[2],
    )


class SearchResultsResponseDTO(BaseModel):
    products: list[ProductResponseDTO]
    total: int = Field(description="Number of products found")
    page: int
    total_pages: int
    page_size: int
    navigation: PageWindowDTO | None = Field(
        default=None,
        description="Absent when all results fit on one page",
    )
