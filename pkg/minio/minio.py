from __future__ import annotations

import asyncio
import io
import re
import uuid
from datetime import datetime, timezone

from minio import Minio  # type: ignore
from minio.error import S3Error  # type: ignore

from loguru import logger
from .interface import IBlobStore
from .type import MinIOConfig, StoredObject
from .constant import *

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


class MinioAdapterError(Exception):
    """Base exception for MinIO adapter operations."""

    pass


class MinioObjectNotFoundError(MinioAdapterError):
    """Raised when requested object does not exist."""

    pass


class ErrUnsupportedMediaType(MinioAdapterError):
    """Raised when an upload is not a png/jpg/jpeg image."""

    pass


def object_name_from_path(path: str) -> str:
    """Strip the public prefix from a stored path.

    Raises:
        MinioObjectNotFoundError: If the path does not point into the image space.
    """
    name = path.replace("\\", "/")
    if name.startswith("/"):
        name = name[1:]
    if name.startswith(PUBLIC_PATH_PREFIX):
        name = name[len(PUBLIC_PATH_PREFIX):]
    if not name or "/" in name or name in (".", ".."):
        raise MinioObjectNotFoundError(ERROR_INVALID_PATH.format(path=path))
    return name


def build_object_name(filename: str) -> str:
    """Unique object name that keeps the uploaded file name readable."""
    safe = _UNSAFE_CHARS.sub("-", filename or "").strip("-.")[:MAX_FILENAME_LENGTH]
    stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S")
    prefix = f"{stamp}-{uuid.uuid4().hex[:12]}"
    return f"{prefix}_{safe}" if safe else prefix


class MinioAdapter(IBlobStore):
    """Image blob store on top of the MinIO client.

    The MinIO client is blocking, so every call runs in a worker thread.
    """

    def __init__(self, config: MinIOConfig, client: Minio | None = None):
        self.config = config
        self._client = client or Minio(
            self.config.endpoint,
            access_key=self.config.access_key,
            secret_key=self.config.secret_key,
            secure=self.config.secure,
            region=self.config.region,
        )

    async def setup(self) -> None:
        """Create the image bucket if it does not exist yet."""
        await asyncio.to_thread(self._ensure_bucket)

    def _ensure_bucket(self) -> None:
        if not self._client.bucket_exists(self.config.bucket):
            self._client.make_bucket(self.config.bucket)
            logger.info(f"Created bucket '{self.config.bucket}'")

    async def store(self, data: bytes, content_type: str, filename: str) -> str:
        if content_type not in ALLOWED_MIME_TYPES:
            raise ErrUnsupportedMediaType(
                ERROR_UNSUPPORTED_MEDIA_TYPE.format(content_type=content_type)
            )

        name = build_object_name(filename)
        try:
            await asyncio.to_thread(
                self._client.put_object,
                self.config.bucket,
                name,
                io.BytesIO(data),
                len(data),
                content_type=content_type,
            )
        except S3Error as exc:
            logger.error(f"pkg.minio.store: failed to upload {name}: {exc}")
            raise MinioAdapterError(f"Failed to store image: {exc}") from exc
        except Exception as exc:
            logger.error(f"pkg.minio.store: failed to upload {name}: {exc}")
            raise MinioAdapterError(f"Upload failed: {exc}") from exc

        logger.debug(f"pkg.minio.store: stored {name} ({len(data)} bytes)")
        return PUBLIC_PATH_PREFIX + name

    async def remove(self, path: str) -> None:
        try:
            name = object_name_from_path(path)
            await asyncio.to_thread(self._client.remove_object, self.config.bucket, name)
            logger.debug(f"pkg.minio.remove: removed {name}")
        except (MinioAdapterError, S3Error) as exc:
            logger.error(f"pkg.minio.remove: could not remove {path}: {exc}")
        except Exception as exc:
            # Transport errors (connection refused, retries exhausted) are not S3Errors
            logger.error(f"pkg.minio.remove: could not reach storage to remove {path}: {exc}")

    async def open(self, path: str) -> StoredObject:
        name = object_name_from_path(path)
        try:
            return await asyncio.to_thread(self._read, name)
        except S3Error as exc:
            if exc.code in ("NoSuchKey", "NoSuchObject"):
                raise MinioObjectNotFoundError(f"Object not found: {name}") from exc
            raise MinioAdapterError(f"Failed to read image: {exc}") from exc
        except Exception as exc:
            logger.error(f"pkg.minio.open: failed to read {name}: {exc}")
            raise MinioAdapterError(f"Read failed: {exc}") from exc

    def _read(self, name: str) -> StoredObject:
        response = self._client.get_object(self.config.bucket, name)
        try:
            data = response.read()
            content_type = response.headers.get("Content-Type", DEFAULT_CONTENT_TYPE)
        finally:
            response.close()
            response.release_conn()
        return StoredObject(path=PUBLIC_PATH_PREFIX + name, data=data, content_type=content_type)


__all__ = [
    "MinioAdapter",
    "MinioAdapterError",
    "MinioObjectNotFoundError",
    "ErrUnsupportedMediaType",
    "object_name_from_path",
    "build_object_name",
]
