"""
Item routes shared by every category router.

``register_item_routes`` adds POST /, GET /{id}, PATCH /{id} and DELETE /{id}.
Routers declare their list route and any static paths (``/active``,
``/breaking``, ...) first, so those are matched before ``/{id}``.
"""

from typing import Any, Callable

from fastapi import APIRouter, Body, Depends, Response, status

from content_ingest.services.content import EntityService


def register_item_routes(
    router: APIRouter,
    get_service: Callable[..., EntityService],
    label: str,
) -> None:
    """
    Add the create/read/update/delete routes for one entity.

    Args:
        router: Router for the entity prefix.
        get_service: Dependency returning the entity service.
        label: Human name used in the OpenAPI summaries.
    """

    @router.post("", status_code=status.HTTP_201_CREATED, summary=f"Create {label}")
    async def create_record(
        payload: dict[str, Any] = Body(...),
        service: EntityService = Depends(get_service),
    ) -> dict[str, Any]:
        return await service.create(payload)

    @router.get("/{record_id}", summary=f"Get {label}")
    async def get_record(
        record_id: str,
        service: EntityService = Depends(get_service),
    ) -> dict[str, Any]:
        return await service.get(record_id)

    @router.patch("/{record_id}", summary=f"Update {label}")
    async def update_record(
        record_id: str,
        changes: dict[str, Any] = Body(...),
        service: EntityService = Depends(get_service),
    ) -> dict[str, Any]:
        return await service.update(record_id, changes)

    @router.delete(
        "/{record_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        summary=f"Delete {label}",
    )
    async def delete_record(
        record_id: str,
        service: EntityService = Depends(get_service),
    ) -> Response:
        await service.delete(record_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
