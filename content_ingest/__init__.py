"""Content Ingest - Source Package.

Classifies raw web-page text with an LLM and stores the structured result
in a per-category MongoDB collection.

Note: Import `app` directly from `content_ingest.main` to avoid circular imports.
"""

__version__ = "1.0.0"

__all__ = ["main", "api", "core", "db", "models", "services", "__version__"]
