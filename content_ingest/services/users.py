"""
User Service

Accounts with bcrypt-hashed passwords. The hash never leaves this module:
every returned record has the password removed.
"""

import asyncio
from typing import Any

from content_ingest.core.exceptions import (
    ConflictError,
    InvalidCredentialsError,
    NotFoundError,
)
from content_ingest.db.repository import MongoRepository
from content_ingest.models.users import UserCreate, UserUpdate
from content_ingest.observability.logging import get_logger
from content_ingest.services.security import hash_password, verify_password

logger = get_logger(__name__)

EMAIL_EXISTS_MESSAGE = "Email already exists"
NOT_FOUND_MESSAGE = "User not found"


def public_user(record: dict[str, Any]) -> dict[str, Any]:
    """Copy of a user record without the password hash."""
    return {key: value for key, value in record.items() if key != "password"}


class UserService:
    def __init__(self, repository: MongoRepository) -> None:
        self.repository = repository

    async def register(self, data: UserCreate) -> dict[str, Any]:
        """
        Create an account.

        Raises:
            ConflictError: If the email is already registered.
        """
        if await self.repository.find_one({"email": data.email}) is not None:
            raise ConflictError(EMAIL_EXISTS_MESSAGE, field="email")

        document = data.model_dump()
        document["password"] = await asyncio.to_thread(hash_password, data.password)
        record = await self.repository.insert(document)
        logger.info("user registered", user_id=record["id"])
        return public_user(record)

    async def authenticate(self, email: str, password: str) -> dict[str, Any]:
        """
        Check credentials.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password; the
                message does not say which.
        """
        record = await self.repository.find_one({"email": email.strip().lower()})
        if record is None:
            raise InvalidCredentialsError()

        matches = await asyncio.to_thread(
            verify_password, password, record.get("password", "")
        )
        if not matches:
            logger.info("login rejected", user_id=record["id"])
            raise InvalidCredentialsError()
        return public_user(record)

    async def get(self, user_id: str) -> dict[str, Any]:
        record = await self.repository.find_by_id(user_id)
        if record is None:
            raise NotFoundError(NOT_FOUND_MESSAGE, resource="User", identifier=user_id)
        return public_user(record)

    async def list(self, page: int = 1, limit: int = 10) -> dict[str, Any]:
        skip = (page - 1) * limit
        users = await self.repository.find(
            {}, sort=[("created_at", -1)], skip=skip, limit=limit
        )
        total = await self.repository.count({})
        return {"users": [public_user(user) for user in users], "total": total}

    async def update(self, user_id: str, changes: UserUpdate) -> dict[str, Any]:
        to_set = changes.model_dump(exclude_unset=True, exclude_none=True)
        if "password" in to_set:
            to_set["password"] = await asyncio.to_thread(hash_password, to_set["password"])
        if not to_set:
            return await self.get(user_id)

        record = await self.repository.update_by_id(user_id, to_set)
        if record is None:
            raise NotFoundError(NOT_FOUND_MESSAGE, resource="User", identifier=user_id)
        return public_user(record)

    async def delete(self, user_id: str) -> None:
        if not await self.repository.delete_by_id(user_id):
            raise NotFoundError(NOT_FOUND_MESSAGE, resource="User", identifier=user_id)
