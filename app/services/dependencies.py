from __future__ import annotations

from functools import lru_cache

from app.services.bucket_provisioner_service import BucketProvisioner
from app.services.config import BucketProvisionerConfig
from app.services.request_handler_service import RequestHandlerService
from app.services.s3_bucket_service import S3BucketService


def get_bucket_provisioner() -> BucketProvisioner:
    config = BucketProvisionerConfig.from_env()
    return BucketProvisioner(store=S3BucketService(config), config=config)


@lru_cache(maxsize=1)
def get_request_handler_service() -> RequestHandlerService:
    """Provider for the request handler, built once per process and reused.

    Also used as a FastAPI dependency.
    """

    return RequestHandlerService(provisioner=get_bucket_provisioner())
