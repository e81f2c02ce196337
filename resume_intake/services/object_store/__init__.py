"""
Object storage package.

Wraps Google Cloud Storage for writing uploaded resume files.
"""

from .gcs_client import (
    ObjectStoreClient,
    ObjectStoreError,
    ObjectStoreInitError,
    ObjectStoreUploadError,
    ObjectStoreTimeoutError,
    public_url,
)

__all__ = [
    "ObjectStoreClient",
    "ObjectStoreError",
    "ObjectStoreInitError",
    "ObjectStoreUploadError",
    "ObjectStoreTimeoutError",
    "public_url",
]
