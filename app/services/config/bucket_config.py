from __future__ import annotations

import os
from dataclasses import dataclass
from typing import ClassVar, Optional


@dataclass(frozen=True)
class BucketProvisionerConfig:
    """Runtime configuration for bucket provisioning.

    `region_name` is the region new buckets are created in. `client_region_name`
    is the region the S3 client talks to; it falls back to `region_name`.
    """

    _DEFAULT_REGION_NAME: ClassVar[str] = "eu-west-3"
    region_name: str = _DEFAULT_REGION_NAME
    endpoint_url: Optional[str] = None
    client_region_name: Optional[str] = None

    @property
    def effective_client_region_name(self) -> str:
        return self.client_region_name or self.region_name

    @staticmethod
    def _env(name: str) -> Optional[str]:
        value = os.getenv(name)
        if value is None or not value.strip():
            return None
        return value.strip()

    @staticmethod
    def from_env(
        *,
        region_env: str = "BUCKET_REGION",
        endpoint_env: str = "S3_ENDPOINT_URL",
    ) -> "BucketProvisionerConfig":
        env = BucketProvisionerConfig._env

        region_name = env(region_env) or BucketProvisionerConfig._DEFAULT_REGION_NAME
        endpoint_url = env(endpoint_env)
        client_region_name = env("AWS_REGION") or env("AWS_DEFAULT_REGION")

        return BucketProvisionerConfig(
            region_name=region_name,
            endpoint_url=endpoint_url,
            client_region_name=client_region_name,
        )
