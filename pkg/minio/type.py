from dataclasses import dataclass
from typing import Optional

from .constant import *


@dataclass
class MinIOConfig:
    """MinIO client configuration.

    Attributes:
        endpoint: MinIO server endpoint (e.g., 'localhost:9000')
        access_key: Access key for authentication
        secret_key: Secret key for authentication
        bucket: Bucket holding post images
        secure: Whether to use HTTPS
        region: Optional region name
    """

    endpoint: str
    access_key: str
    secret_key: str
    bucket: str = DEFAULT_BUCKET
    secure: bool = False
    region: Optional[str] = None

    def __post_init__(self):
        if not self.endpoint or not self.endpoint.strip():
            raise ValueError(ERROR_ENDPOINT_EMPTY)

        if not self.access_key or not self.access_key.strip():
            raise ValueError(ERROR_ACCESS_KEY_EMPTY)

        if not self.secret_key or not self.secret_key.strip():
            raise ValueError(ERROR_SECRET_KEY_EMPTY)

        if not self.bucket or not self.bucket.strip():
            raise ValueError(ERROR_BUCKET_EMPTY)

        self.endpoint = (
            self.endpoint.replace("http://", "").replace("https://", "").strip()
        )


@dataclass
class StoredObject:
    """An object read back from the blob store."""

    path: str
    data: bytes
    content_type: str


__all__ = [
    "MinIOConfig",
    "StoredObject",
]
