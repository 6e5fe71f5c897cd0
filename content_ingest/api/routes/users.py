"""
Users Router - /api/users

Registration, login and account management. Password hashes never appear
in a response.
"""

from typing import Any

from fastapi import APIRouter, Depends, Query, Response, status

from content_ingest.api.deps import get_user_service
from content_ingest.models.users import LoginRequest, UserCreate, UserUpdate
from content_ingest.services.users import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("/register", status_code=status.HTTP_201_CREATED, summary="Register a user")
async def register_user(
    data: UserCreate,
    service: UserService = Depends(get_user_service),
) -> dict[str, Any]:
    return {"success": True, "data": await service.register(data)}


@router.post("/login", summary="Check credentials")
async def login(
    credentials: LoginRequest,
    service: UserService = Depends(get_user_service),
) -> dict[str, Any]:
    user = await service.authenticate(credentials.email, credentials.password)
    return {"success": True, "data": user}


@router.get("", summary="List users")
async def list_users(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    service: UserService = Depends(get_user_service),
) -> dict[str, Any]:
    return {"success": True, "data": await service.list(page, limit)}


@router.get("/{user_id}", summary="Get a user")
async def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> dict[str, Any]:
    return {"success": True, "data": await service.get(user_id)}


@router.patch("/{user_id}", summary="Update a user")
async def update_user(
    user_id: str,
    changes: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> dict[str, Any]:
    return {"success": True, "data": await service.update(user_id, changes)}


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a user",
)
async def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> Response:
    await service.delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
