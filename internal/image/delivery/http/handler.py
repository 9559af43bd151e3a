from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile  # type: ignore
from fastapi.responses import JSONResponse, Response  # type: ignore

from core.errors import ErrInternal, ErrNotFound
from pkg.minio.constant import ALLOWED_MIME_TYPES, PUBLIC_PATH_PREFIX
from pkg.minio.minio import ErrUnsupportedMediaType, MinioAdapterError, MinioObjectNotFoundError
from internal.auth.helpers import require_authenticated
from internal.auth.type import AuthContext
from internal.httpserver.dependencies import get_auth_context, get_deps
from internal.httpserver.type import Dependencies
from ...constant import MSG_FILE_STORED, MSG_IMAGE_NOT_FOUND, MSG_NO_FILE

router = APIRouter()


@router.put("/post-image")
async def upload_image(
    image: Optional[UploadFile] = File(default=None),
    auth: AuthContext = Depends(get_auth_context),
    deps: Dependencies = Depends(get_deps),
):
    """Store one png/jpg/jpeg image and return its path for use in a post.

    Anything else is filtered out, the same as no file at all. Nothing is
    removed here: the image a post stops using is removed by the post
    update once the new state is saved.
    """
    require_authenticated(auth)

    if image is None or image.content_type not in ALLOWED_MIME_TYPES:
        return JSONResponse(status_code=200, content={"message": MSG_NO_FILE})

    data = await image.read()
    try:
        path = await deps.blob_store.store(data, image.content_type, image.filename or "")
    except ErrUnsupportedMediaType:
        return JSONResponse(status_code=200, content={"message": MSG_NO_FILE})
    except MinioAdapterError as e:
        deps.logger.error(f"internal.image.delivery.http.upload_image: {e}")
        raise ErrInternal() from e

    return JSONResponse(status_code=201, content={"message": MSG_FILE_STORED, "filePath": path})


@router.get("/images/{name}")
async def get_image(name: str, deps: Dependencies = Depends(get_deps)):
    try:
        stored = await deps.blob_store.open(PUBLIC_PATH_PREFIX + name)
    except MinioObjectNotFoundError as e:
        raise ErrNotFound(MSG_IMAGE_NOT_FOUND) from e
    except MinioAdapterError as e:
        deps.logger.error(f"internal.image.delivery.http.get_image: {e}")
        raise ErrInternal() from e

    return Response(content=stored.data, media_type=stored.content_type)


__all__ = ["router"]
