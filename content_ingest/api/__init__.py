"""API Package - FastAPI routes, middleware, dependencies and error handlers.

Components:
- routes: API endpoint routers
- middleware: request logging with correlation IDs
- deps: FastAPI dependency injection functions
- errors: exception handlers producing the {success, message} envelope

Note: Import routers directly from content_ingest.api.routes to avoid circular imports.
"""

__all__ = ["routes", "middleware", "deps", "errors"]
