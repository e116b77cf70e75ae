"""
Controllers Package - Presentation Layer

This package contains FastAPI controllers (routers) that handle
HTTP requests and responses. Controllers are thin: they hand every
method call to the dispatcher and map its envelope to a response.
"""

from .methods_controller import router as methods_router
from .system_controller import router as system_router

__all__ = ["methods_router", "system_router"]
