"""
Health Check Endpoints.

- GET /healthz: Liveness probe (process running, settings loaded)
"""

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/healthz")
async def healthz(request: Request):
    """
    Liveness probe - is the process running?

    Returns 200 OK with the app root of the loaded settings.
    """
    settings = request.app.state.settings
    return {"status": "healthy", "service": "pursuit", "approot": settings.app_root}
