"""HTTP API: routers, endpoints, and dependency wiring."""

from filekeeper.api.router import api_router

__all__ = ["api_router"]
