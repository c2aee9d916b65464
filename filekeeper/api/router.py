"""Top-level API router: files and health."""

from fastapi import APIRouter

from filekeeper.api.endpoints import files, health

api_router = APIRouter()

api_router.include_router(files.router, prefix="/files", tags=["files"])
api_router.include_router(health.router, prefix="/health", tags=["health"])
