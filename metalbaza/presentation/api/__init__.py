"""
HTTP API

FastAPI routers, schemas and the application factory.
"""

from .app import create_app

__all__ = ["create_app"]
