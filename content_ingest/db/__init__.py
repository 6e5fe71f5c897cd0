"""
Persistence Package - MongoDB access for every content collection.

Components:
- mongo: client lifecycle, collection names, index setup
- repository: generic async repository over one collection
"""

from content_ingest.db.mongo import Collections, MongoConnection, ensure_indexes
from content_ingest.db.repository import MongoRepository, to_object_id

__all__ = [
    "Collections",
    "MongoConnection",
    "MongoRepository",
    "ensure_indexes",
    "to_object_id",
]
