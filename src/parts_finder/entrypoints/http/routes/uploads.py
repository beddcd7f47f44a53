from fastapi import APIRouter, BackgroundTasks, Depends, File, Form, UploadFile, status

from parts_finder.entrypoints.http.dependencies import get_upload_use_case
from parts_finder.entrypoints.http.dtos.uploads import UploadAcceptedResponseDTO
from parts_finder.entrypoints.http.error_responses import ErrorResponse
from parts_finder.use_cases.upload_catalog_csv import UploadCatalogCsv, UploadCatalogCsvRequest


router = APIRouter(tags=["Uploads"])


@router.post(
    "/uploads",
    response_model=UploadAcceptedResponseDTO,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Upload a catalog CSV",
    responses={
        422: {"model": ErrorResponse, "description": "Missing or non-CSV file, or blank category"},
    },
    description="""
    Forward a catalog CSV to the catalog service, filed under a root category.

    The file is checked (must be a non-empty `.csv`) and then forwarded in the
    background. Forwarding failures are logged only.
    """,
)
async def upload_catalog(
    background_tasks: BackgroundTasks,
    file: UploadFile = File(description="Catalog rows as CSV"),
    category: str = Form(description="Root category label, e.g. 'Suspension'"),
    use_case: UploadCatalogCsv = Depends(get_upload_use_case),
) -> UploadAcceptedResponseDTO:
    request = UploadCatalogCsvRequest(
        filename=file.filename or "",
        content=await file.read(),
        category=category,
    )

    # Reject bad input now; only the forwarding is deferred
    use_case.validate(request)
    background_tasks.add_task(use_case.execute, request)

    return UploadAcceptedResponseDTO(filename=request.filename, category=request.category.strip())
