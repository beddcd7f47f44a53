"""Upload catalog CSV use case."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from parts_finder.domain.errors import TransportError, ValidationError
from parts_finder.domain.results import Failure
from parts_finder.ports.facet_catalog import FacetCatalog

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UploadCatalogCsvRequest:
    """A catalog CSV and the root category its rows are filed under."""

    filename: str
    content: bytes
    category: str


@dataclass(frozen=True, slots=True)
class UploadCatalogCsvResponse:
    error: TransportError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class UploadCatalogCsv:
    """
    Use case for forwarding a catalog CSV to the catalog service.

    Responsibilities:
    - Check the request carries a .csv file and a root category
    - Delegate ingestion to the catalog service
    - Log upload failures; they are never raised to the caller
    """

    def __init__(self, facet_catalog: FacetCatalog) -> None:
        """
        Initialize use case with dependencies.

        Args:
            facet_catalog: Catalog service port
        """
        self._catalog = facet_catalog

    async def execute(self, request: UploadCatalogCsvRequest) -> UploadCatalogCsvResponse:
        """
        Execute the upload.

        Args:
            request: File name, raw content and root category

        Returns:
            UploadCatalogCsvResponse, with the transport error on failure

        Raises:
            ValidationError: If the file is missing, not a .csv, or the
                category is blank
        """
        self.validate(request)

        result = await self._catalog.upload_csv(
            filename=request.filename,
            content=request.content,
            category=request.category.strip(),
        )

        if isinstance(result, Failure):
            logger.error(
                "Catalog upload failed",
                extra={
                    "filename": request.filename,
                    "category": request.category,
                    "error_code": result.error.error_code,
                },
            )
            return UploadCatalogCsvResponse(error=result.error)

        logger.info(
            "Catalog upload forwarded",
            extra={"filename": request.filename, "category": request.category},
        )
        return UploadCatalogCsvResponse()

    @staticmethod
    def validate(request: UploadCatalogCsvRequest) -> None:
        errors = []

        if not request.filename or not request.content:
            errors.append(
                {
                    "field": "file",
                    "message": "A non-empty file is required",
                    "code": "MISSING_FILE",
                }
            )
        elif not request.filename.lower().endswith(".csv"):
            errors.append(
                {
                    "field": "file",
                    "message": f"Must be a .csv file: {request.filename}",
                    "code": "INVALID_FILE_TYPE",
                }
            )

        if not request.category.strip():
            errors.append(
                {
                    "field": "category",
                    "message": "Root category must not be blank",
                    "code": "MISSING_CATEGORY",
                }
            )

        if errors:
            raise ValidationError(errors=errors)
