from pydantic import BaseModel, ConfigDict, Field


class FacetOptionDTO(BaseModel):
    key: str = Field(description="Stable option key, used when selecting", examples=["KTM"])
    label: str = Field(description="Human-readable label", examples=["KTM"])


class SelectionDTO(BaseModel):
    brand: FacetOptionDTO | None = None
    model: FacetOptionDTO | None = None
    year_range: FacetOptionDTO | None = None
    category: FacetOptionDTO | None = None


class FacetDTO(BaseModel):
    """One facet picker: whether it can be used and what it offers."""

    enabled: bool
    options: list[FacetOptionDTO]


class FilterStateResponseDTO(BaseModel):
    session_id: str
    selection: SelectionDTO
    facets: dict[str, FacetDTO] = Field(
        description="Picker state per facet level (brand, model, year_range, category)",
    )


class FetchOutcomeDTO(BaseModel):
    status: str = Field(
        description="applied, skipped, stale or failed",
        examples=["applied"],
    )
    level: str | None = Field(default=None, description="Facet level whose options were fetched")
    error: str | None = Field(default=None, description="Transport error message when failed")


class SelectFacetRequestDTO(BaseModel):
    """Payload for selecting a facet option by key."""

    key: str = Field(
        min_length=1,
        description="Key of an option currently offered for the level",
        examples=["KTM"],
    )

    model_config = ConfigDict(json_schema_extra={"example": {"key": "KTM"}})


class FilterUpdateResponseDTO(BaseModel):
    """Filter state after a transition plus the dependent fetches it triggered."""

    state: FilterStateResponseDTO
    fetches: list[FetchOutcomeDTO]
