from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette import status

from app.models.bucket import BucketProvisionResponse, ErrorKind
from app.services.dependencies import get_request_handler_service
from app.services.request_handler_service import RequestHandlerService

router = APIRouter(prefix="/buckets", tags=["buckets"])

_ERROR_STATUS = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.PARSE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.REMOTE: status.HTTP_502_BAD_GATEWAY,
}


@router.post("", response_model=BucketProvisionResponse)
async def provision_bucket(
    request: Request,
    svc: RequestHandlerService = Depends(get_request_handler_service),
) -> JSONResponse:
    """Ensure the bucket named in `{"bucketName": "..."}` exists.

    The body is read raw so malformed JSON goes through the same parsing path
    as a Lambda invocation; it must be UTF-8.
    """

    result = await svc.handle_bytes(await request.body())

    status_code = status.HTTP_200_OK if result.ok else _ERROR_STATUS[result.error_kind]
    return JSONResponse(
        status_code=status_code,
        content=BucketProvisionResponse.from_result(result).model_dump(mode="json"),
    )
