"""Auth routes: signup, login and the caller's status."""

from fastapi import APIRouter, Depends  # type: ignore
from fastapi.responses import JSONResponse  # type: ignore

from internal.auth.type import AuthContext
from internal.httpserver.dependencies import get_auth_context, get_deps
from internal.httpserver.type import Dependencies
from .presenters import LoginRequest, SignupRequest, UpdateStatusRequest

router = APIRouter(prefix="/auth")


@router.put("/signup")
async def signup(body: SignupRequest, deps: Dependencies = Depends(get_deps)):
    user_id = await deps.user.signup(body.to_input())
    return JSONResponse(status_code=201, content={"message": "User created!", "userId": user_id})


@router.post("/login")
async def login(body: LoginRequest, deps: Dependencies = Depends(get_deps)):
    result = await deps.user.login(body.to_input())
    return {"message": "Logged in.", **result.to_dict()}


@router.get("/status")
async def get_status(
    auth: AuthContext = Depends(get_auth_context),
    deps: Dependencies = Depends(get_deps),
):
    status = await deps.user.get_status(auth)
    return {"status": status}


@router.patch("/status")
async def update_status(
    body: UpdateStatusRequest,
    auth: AuthContext = Depends(get_auth_context),
    deps: Dependencies = Depends(get_deps),
):
    status = await deps.user.update_status(auth, body.to_input())
    return {"message": "User updated.", "status": status}


__all__ = ["router"]
