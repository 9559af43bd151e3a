"""Feed routes. Thin: every rule lives in the post use case."""

from typing import Optional

from fastapi import APIRouter, Depends, Query  # type: ignore
from fastapi.responses import JSONResponse  # type: ignore

from internal.auth.type import AuthContext
from internal.httpserver.dependencies import get_auth_context, get_deps
from internal.httpserver.type import Dependencies
from ...type import ListPostsInput
from .presenters import CreatePostRequest, UpdatePostRequest

router = APIRouter(prefix="/feed")


@router.get("/posts")
async def list_posts(
    page: Optional[int] = Query(default=None),
    auth: AuthContext = Depends(get_auth_context),
    deps: Dependencies = Depends(get_deps),
):
    result = await deps.post.list(auth, ListPostsInput(page=page))
    return {"message": "Fetched posts successfully.", **result.to_dict()}


@router.get("/post/{post_id}")
async def get_post(
    post_id: str,
    auth: AuthContext = Depends(get_auth_context),
    deps: Dependencies = Depends(get_deps),
):
    post = await deps.post.get(auth, post_id)
    return {"message": "Post fetched.", "post": post.to_dict()}


@router.post("/post")
async def create_post(
    body: CreatePostRequest,
    auth: AuthContext = Depends(get_auth_context),
    deps: Dependencies = Depends(get_deps),
):
    post = await deps.post.create(auth, body.to_input())
    return JSONResponse(
        status_code=201,
        content={
            "message": "Post created successfully!",
            "post": post.to_dict(),
            "creator": post.creator.to_dict(),
        },
    )


@router.put("/post/{post_id}")
async def update_post(
    post_id: str,
    body: UpdatePostRequest,
    auth: AuthContext = Depends(get_auth_context),
    deps: Dependencies = Depends(get_deps),
):
    post = await deps.post.update(auth, post_id, body.to_input())
    return {"message": "Post updated!", "post": post.to_dict()}


@router.delete("/post/{post_id}")
async def delete_post(
    post_id: str,
    auth: AuthContext = Depends(get_auth_context),
    deps: Dependencies = Depends(get_deps),
):
    await deps.post.delete(auth, post_id)
    return {"message": "Deleted post."}


__all__ = ["router"]
