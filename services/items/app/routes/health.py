"""Health check routes."""

from fastapi import APIRouter, Depends
from pymongo.collection import Collection

from ..db import get_collection

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    """Liveness check.

    Does not touch the document store, so orchestrators can tell a stuck
    process apart from an unreachable database.

    Returns:
        dict: `{"status": "ok", "service": "items"}`.
    """
    return {"status": "ok", "service": "items"}


@router.get("/health/db")
def health_db(collection: Collection = Depends(get_collection)):
    """Readiness check: ping the bound document store.

    Returns:
        dict: `{"status": "ok", "db": "ok"}`. A failed ping propagates as a
        `PyMongoError` and is answered with 500.
    """
    collection.database.command("ping")
    return {"status": "ok", "db": "ok"}
