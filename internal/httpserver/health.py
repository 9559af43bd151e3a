"""Health check route."""

from typing import Any, Dict

from fastapi import APIRouter, Depends  # type: ignore
from fastapi.responses import JSONResponse  # type: ignore

from .dependencies import get_deps
from .type import Dependencies

router = APIRouter()


@router.get("/health")
async def health_check(deps: Dependencies = Depends(get_deps)):
    """Overall status plus one entry per registered probe."""
    results: Dict[str, Any] = {}
    for name, probe in deps.health_checks.items():
        results[name] = "healthy" if await probe() else "unhealthy"

    healthy = all(v == "healthy" for v in results.values())
    body = {
        "status": "healthy" if healthy else "unhealthy",
        "service": deps.service_name,
        "dependencies": results,
    }
    return JSONResponse(status_code=200 if healthy else 503, content=body)


__all__ = ["router"]
