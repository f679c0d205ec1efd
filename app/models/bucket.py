from __future__ import annotations

import json
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProvisionOutcome(str, Enum):
    CREATED = "created"
    ALREADY_EXISTS = "already_exists"


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    PARSE = "parse"
    REMOTE = "remote"


class ProxyRequest(BaseModel):
    """The subset of an API Gateway proxy event this function reads."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    body: Optional[str] = None
    is_base64_encoded: bool = Field(default=False, alias="isBase64Encoded")

    @field_validator("body", mode="before")
    @classmethod
    def _serialize_object_body(cls, value: Any) -> Any:
        # Direct (non API Gateway) invocations may pass the payload as an object.
        if isinstance(value, (dict, list)):
            return json.dumps(value)
        return value


class ProvisionInput(BaseModel):
    # Only the `bucketName` key is read from the body.
    model_config = ConfigDict(extra="ignore")

    bucket_name: Optional[str] = Field(default=None, alias="bucketName")


class ProvisionResult(BaseModel):
    """Outcome of one invocation.

    Exactly one of `outcome` (success) or `error_kind` (failure) is set.
    `message` is the plain response string returned to the caller.
    """

    ok: bool
    message: str
    bucket_name: Optional[str] = None
    outcome: Optional[ProvisionOutcome] = None
    error_kind: Optional[ErrorKind] = None

    @staticmethod
    def success(*, bucket_name: str, outcome: ProvisionOutcome) -> "ProvisionResult":
        return ProvisionResult(
            ok=True,
            message=f"Bucket '{bucket_name}' created successfully!",
            bucket_name=bucket_name,
            outcome=outcome,
        )

    @staticmethod
    def failure(*, message: str, error_kind: ErrorKind, bucket_name: Optional[str] = None) -> "ProvisionResult":
        return ProvisionResult(ok=False, message=message, bucket_name=bucket_name, error_kind=error_kind)


class BucketProvisionResponse(BaseModel):
    message: str
    bucket_name: Optional[str] = None
    outcome: Optional[ProvisionOutcome] = None
    error_kind: Optional[ErrorKind] = None

    @staticmethod
    def from_result(result: ProvisionResult) -> "BucketProvisionResponse":
        return BucketProvisionResponse(
            message=result.message,
            bucket_name=result.bucket_name,
            outcome=result.outcome,
            error_kind=result.error_kind,
        )
