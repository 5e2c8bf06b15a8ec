"""Versioned liveness endpoint; /health and /ready live on the app root."""
from fastapi import APIRouter

router = APIRouter()


@router.get("/ping")
async def ping() -> dict[str, str]:
    """Cheap round-trip check through the versioned API prefix."""
    return {"ping": "pong"}
