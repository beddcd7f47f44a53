"""Errors raised by the parts finder core.

Every error carries a stable ``error_code`` and free-form keyword context.
Nothing here knows about HTTP; the entrypoint layer picks status codes
from the error code.
"""

from typing import Any

# One problem with one input, e.g. {"field": "file", "message": "...", "code": "..."}
FieldError = dict[str, str]


class DomainError(Exception):
    """Base error. ``message`` is user-facing, ``context`` is for logs and clients."""

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "code": self.error_code, **self.context}


class ValidationError(DomainError):
    """
    A request that breaks a catalog or filter rule.

    Carries either a single message or a list of field errors, as produced
    when a CSV upload fails several checks at once (wrong extension and a
    blank root category, say).
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[FieldError] | None = None,
        **context: Any,
    ) -> None:
        self.errors: list[FieldError] | None = list(errors) if errors else None
        if message is None:
            message = "Validation failed" if self.errors else "Validation error"
        super().__init__(message, **context)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.errors:
            data["errors"] = self.errors
        return data


class FacetSelectionError(ValidationError):
    """A facet selection the filter cannot reach from its current state."""

    @classmethod
    def parent_unset(cls, level: str) -> "FacetSelectionError":
        return cls(f"{level} cannot be selected before its parent facet", level=level)

    @classmethod
    def unavailable(cls, level: str, key: str) -> "FacetSelectionError":
        return cls(
            f"{level} option '{key}' is not available for the current selection",
            level=level,
            key=key,
        )


class NotFoundError(DomainError):
    """
    A filter session or facet option that does not exist.

    ``resource`` names what was looked up ("Session", "brand", ...) and
    ``identifier`` the id or option key, when there is one.
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        message = (
            f"{resource} with identifier '{identifier}' not found"
            if identifier
            else f"{resource} not found"
        )
        super().__init__(message, resource=resource, identifier=identifier, **context)


class TransportError(DomainError):
    """
    The catalog service could not be reached or answered badly.

    Adapters never raise it across the facet catalog port; they return it
    inside a ``Failure``. The HTTP shell raises it when a failed search has
    to be reported to the caller.
    """

    error_code: str = "TRANSPORT_ERROR"

    @property
    def resource(self) -> str | None:
        """Catalog resource that failed (brands, models, products, ...)."""
        return self.context.get("resource")

    @property
    def status_code(self) -> int | None:
        """Upstream HTTP status, None when no response arrived."""
        return self.context.get("status_code")
