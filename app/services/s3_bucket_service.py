from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

import aioboto3
from botocore.exceptions import ClientError

from app.services.config import BucketProvisionerConfig


logger = logging.getLogger(__name__)


class BucketStore(Protocol):
    """Remote storage operations the provisioner depends on."""

    async def bucket_exists(self, bucket_name: str) -> bool: ...

    async def create_bucket(self, bucket_name: str, region_name: str) -> Optional[str]: ...


class S3BucketService:
    """`BucketStore` backed by S3 through aioboto3."""

    _NOT_FOUND_CODES = frozenset({"404", "NoSuchBucket", "NotFound"})
    # HeadBucket on a bucket owned by another account is denied, but the name is taken.
    _TAKEN_CODES = frozenset({"403", "AccessDenied", "Forbidden"})
    _US_EAST_1 = "us-east-1"

    def __init__(self, config: BucketProvisionerConfig, *, session: Optional[Any] = None) -> None:
        self._config = config
        self._session = session if session is not None else aioboto3.Session()

    def _client(self) -> Any:
        return self._session.client(
            "s3",
            region_name=self._config.effective_client_region_name,
            endpoint_url=self._config.endpoint_url,
        )

    @staticmethod
    def _error_code(exc: ClientError) -> str:
        return str(exc.response.get("Error", {}).get("Code") or "")

    @staticmethod
    def _request_id(response: dict[str, Any]) -> Optional[str]:
        return (response.get("ResponseMetadata") or {}).get("RequestId")

    async def bucket_exists(self, bucket_name: str) -> bool:
        s3_client: Any = self._client()
        try:
            async with s3_client as s3:
                await s3.head_bucket(Bucket=bucket_name)
        except ClientError as exc:
            code = self._error_code(exc)
            if code in self._NOT_FOUND_CODES:
                return False
            if code in self._TAKEN_CODES:
                logger.warning("HeadBucket denied for %r; treating the name as taken", bucket_name)
                return True
            raise

        return True

    async def create_bucket(self, bucket_name: str, region_name: str) -> Optional[str]:
        """Create `bucket_name` in `region_name` and return the S3 request id.

        A bucket that this account already owns (another invocation won the race
        between the existence check and this call) counts as created.
        """

        kwargs: dict[str, Any] = {"Bucket": bucket_name}
        if region_name and region_name != self._US_EAST_1:
            kwargs["CreateBucketConfiguration"] = {"LocationConstraint": region_name}

        s3_client: Any = self._client()
        try:
            async with s3_client as s3:
                response = await s3.create_bucket(**kwargs)
        except ClientError as exc:
            if self._error_code(exc) != "BucketAlreadyOwnedByYou":
                raise
            logger.info("Bucket %r is already owned by this account", bucket_name)
            return self._request_id(exc.response)

        return self._request_id(response)
