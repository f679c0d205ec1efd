from __future__ import annotations

from typing import Optional

import pytest

from app.services.bucket_provisioner_service import BucketProvisioner
from app.services.config import BucketProvisionerConfig
from app.services.request_handler_service import RequestHandlerService


class FakeBucketStore:
    """In-memory `BucketStore` that records every remote call."""

    def __init__(self) -> None:
        self.existing: set[str] = set()
        self.exists_calls: list[str] = []
        self.create_calls: list[tuple[str, str]] = []
        self.exists_error: Optional[Exception] = None
        self.create_error: Optional[Exception] = None

    @property
    def remote_calls(self) -> int:
        return len(self.exists_calls) + len(self.create_calls)

    async def bucket_exists(self, bucket_name: str) -> bool:
        self.exists_calls.append(bucket_name)
        if self.exists_error is not None:
            raise self.exists_error
        return bucket_name in self.existing

    async def create_bucket(self, bucket_name: str, region_name: str) -> Optional[str]:
        self.create_calls.append((bucket_name, region_name))
        if self.create_error is not None:
            raise self.create_error
        self.existing.add(bucket_name)
        return f"req-{len(self.create_calls)}"


@pytest.fixture
def store() -> FakeBucketStore:
    return FakeBucketStore()


@pytest.fixture
def config() -> BucketProvisionerConfig:
    return BucketProvisionerConfig()


@pytest.fixture
def provisioner(store: FakeBucketStore, config: BucketProvisionerConfig) -> BucketProvisioner:
    return BucketProvisioner(store=store, config=config)


@pytest.fixture
def handler_service(provisioner: BucketProvisioner) -> RequestHandlerService:
    return RequestHandlerService(provisioner=provisioner)
