"""Routes Package - API endpoint definitions.

Category routers (jobs, scholarships, blogs, news, technical, others,
admissions) share their item routes through ``crud``. The remaining routers
cover page content, users, files, AI features and health.

Note: Import routers directly from individual modules to avoid circular imports.
Example: from content_ingest.api.routes.health import router as health_router
"""

__all__ = [
    "admissions",
    "blogs",
    "crud",
    "features",
    "files",
    "health",
    "jobs",
    "news",
    "others",
    "page_content",
    "scholarships",
    "technical",
    "users",
]
