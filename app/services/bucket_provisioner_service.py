from __future__ import annotations

import logging

from app.models.bucket import ProvisionOutcome
from app.services.config import BucketProvisionerConfig
from app.services.s3_bucket_service import BucketStore


logger = logging.getLogger(__name__)


class BucketProvisioningError(RuntimeError):
    """A remote existence check or creation failed.

    The message is the underlying failure message, unchanged; the original
    exception is kept as `__cause__`.
    """


class BucketProvisioner:
    """Ensures a named bucket exists, creating it only when absent.

    Single attempt per call: a remote failure is terminal and retrying is left to
    whoever invoked the function. Two concurrent calls for the same name may both
    see the bucket as absent; the store decides how a second create resolves.
    """

    def __init__(self, *, store: BucketStore, config: BucketProvisionerConfig) -> None:
        self._store = store
        self._config = config

    @property
    def region_name(self) -> str:
        return self._config.region_name

    async def ensure_bucket(self, bucket_name: str) -> ProvisionOutcome:
        try:
            if await self._store.bucket_exists(bucket_name):
                logger.info("Bucket '%s' already exists.", bucket_name)
                return ProvisionOutcome.ALREADY_EXISTS

            request_id = await self._store.create_bucket(bucket_name, self._config.region_name)
        except Exception as exc:
            logger.error("Failed to create bucket: %s", exc)
            raise BucketProvisioningError(str(exc)) from exc

        logger.info("Bucket '%s' created. Request ID: %s", bucket_name, request_id)
        return ProvisionOutcome.CREATED
