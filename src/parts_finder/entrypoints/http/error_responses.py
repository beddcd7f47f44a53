"""Error body documented on every route that can fail.

Produced by the handlers in ``exception_handlers``; declared here so the
OpenAPI schema shows what a client gets back.
"""

from pydantic import BaseModel, ConfigDict, Field

INVALID_FILE_TYPE = {
    "field": "file",
    "message": "Must be a .csv file: parts.xlsx",
    "code": "INVALID_FILE_TYPE",
}
MISSING_CATEGORY = {
    "field": "category",
    "message": "Root category must not be blank",
    "code": "MISSING_CATEGORY",
}

ERROR_EXAMPLES = [
    {"detail": "Session with identifier '42' not found", "code": "NOT_FOUND"},
    {"detail": "model cannot be selected before its parent facet", "code": "VALIDATION_ERROR"},
    {
        "detail": "Validation failed",
        "code": "VALIDATION_ERROR",
        "errors": [INVALID_FILE_TYPE, MISSING_CATEGORY],
    },
    {"detail": "Failed to fetch products from catalog service", "code": "TRANSPORT_ERROR"},
]


class ErrorDetail(BaseModel):
    """One rejected input, e.g. the uploaded file or a query parameter."""

    field: str = Field(description="Input name without its location prefix")
    message: str
    code: str | None = Field(default=None, description="Machine-readable reason")

    model_config = ConfigDict(json_schema_extra={"example": INVALID_FILE_TYPE})


class ErrorResponse(BaseModel):
    detail: str = Field(description="Human-readable summary")
    code: str | None = Field(
        default=None,
        description="VALIDATION_ERROR, NOT_FOUND, TRANSPORT_ERROR or INTERNAL_ERROR",
    )
    errors: list[ErrorDetail] | None = Field(
        default=None, description="Per-input problems, when several checks failed"
    )

    model_config = ConfigDict(json_schema_extra={"examples": ERROR_EXAMPLES})
