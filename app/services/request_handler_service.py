from __future__ import annotations

import base64
import binascii
import json
import logging
from typing import Any, Optional

from pydantic import ValidationError

from app.models.bucket import ErrorKind, ProvisionInput, ProvisionResult, ProxyRequest
from app.services.bucket_provisioner_service import BucketProvisioner


logger = logging.getLogger(__name__)


class BucketRequestError(RuntimeError):
    pass


class BucketRequestParseError(BucketRequestError):
    pass


class BucketNameValidationError(BucketRequestError):
    pass


def error_kind_for(exc: BaseException) -> ErrorKind:
    if isinstance(exc, BucketNameValidationError):
        return ErrorKind.VALIDATION
    if isinstance(exc, BucketRequestParseError):
        return ErrorKind.PARSE
    # Anything else came out of the provisioning path.
    return ErrorKind.REMOTE


def format_error(exc: BaseException) -> str:
    return f"General error: {exc}"


class RequestHandlerService:
    """Turns one proxy request into a bucket provisioning attempt.

    Every failure is caught here and rendered as a `General error: ...` string;
    `handle_request` additionally reports which kind of error it was.
    """

    def __init__(self, *, provisioner: BucketProvisioner) -> None:
        self._provisioner = provisioner

    @staticmethod
    def _decode_body(request: ProxyRequest) -> str:
        if request.body is None:
            raise BucketRequestParseError("Request body is missing.")
        if not request.is_base64_encoded:
            return request.body

        try:
            return base64.b64decode(request.body, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as exc:
            raise BucketRequestParseError(f"Request body is not valid base64 UTF-8 text: {exc}") from exc

    @staticmethod
    def parse_bucket_name(request: ProxyRequest) -> str:
        raw = RequestHandlerService._decode_body(request)

        try:
            payload: Any = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise BucketRequestParseError(str(exc)) from exc

        if not isinstance(payload, dict):
            raise BucketRequestParseError("Request body must be a JSON object.")

        try:
            provision_input = ProvisionInput.model_validate(payload)
        except ValidationError as exc:
            raise BucketNameValidationError("Bucket name must be a string.") from exc

        if not provision_input.bucket_name:
            raise BucketNameValidationError("Bucket name is required.")

        return provision_input.bucket_name

    @staticmethod
    def _failure(exc: Exception, *, bucket_name: Optional[str] = None) -> ProvisionResult:
        message = format_error(exc)
        logger.error("%s", message)
        return ProvisionResult.failure(message=message, error_kind=error_kind_for(exc), bucket_name=bucket_name)

    async def handle_request(self, request: ProxyRequest) -> ProvisionResult:
        logger.info("Raw input: %s", request.body)

        bucket_name = None
        try:
            bucket_name = self.parse_bucket_name(request)
            outcome = await self._provisioner.ensure_bucket(bucket_name)
        except Exception as exc:
            return self._failure(exc, bucket_name=bucket_name)

        result = ProvisionResult.success(bucket_name=bucket_name, outcome=outcome)
        logger.info("%s", result.message)
        return result

    async def handle_bytes(self, raw: bytes) -> ProvisionResult:
        """Same as `handle_request` for a raw HTTP body; it must be UTF-8."""

        try:
            body = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            return self._failure(BucketRequestParseError(f"Request body is not valid UTF-8 text: {exc}"))

        return await self.handle_request(ProxyRequest(body=body))

    async def handle(self, request: ProxyRequest) -> str:
        result = await self.handle_request(request)
        return result.message

