"""API v1: callable functions, event triggers and health checks."""

from app.api.v1.router import api_router

__all__ = ["api_router"]
