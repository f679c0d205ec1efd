"""Configuration package (Facade).

Re-exports the public config types so callers import from a single, stable path:

	from app.services.config import BucketProvisionerConfig
"""

from app.services.config.bucket_config import BucketProvisionerConfig

__all__ = ["BucketProvisionerConfig"]
