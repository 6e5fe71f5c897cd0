"""
Files Router - /api/files

PDF and DOCX uploads (multipart), inline downloads, and per-user listings.
"""

from typing import Any, Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile, status

from content_ingest.api.deps import get_file_service
from content_ingest.services.files import FileService

router = APIRouter(prefix="/files", tags=["Files"])

UPLOADED_MESSAGE = "File uploaded successfully"


@router.post("/upload", status_code=status.HTTP_201_CREATED, summary="Upload a file")
async def upload_file(
    file: UploadFile = File(...),
    user_id: Optional[str] = Form(default=None),
    service: FileService = Depends(get_file_service),
) -> dict[str, Any]:
    """
    Store a PDF or DOCX upload.

    At most ``max_bytes + 1`` bytes are read, enough to tell an oversized
    upload apart without buffering all of it.
    """
    data = await file.read(service.max_bytes + 1)
    record = await service.upload(
        original_name=file.filename or "upload",
        mimetype=file.content_type,
        data=data,
        user_id=user_id,
    )
    return {
        "message": UPLOADED_MESSAGE,
        "file_id": record["id"],
        "filename": record["original_name"],
    }


@router.get("/user/{user_id}", summary="List a user's files")
async def list_user_files(
    user_id: str,
    service: FileService = Depends(get_file_service),
) -> dict[str, Any]:
    return {"success": True, "data": await service.list_for_user(user_id)}


@router.get("/{file_id}", summary="Download a file", response_class=Response)
async def download_file(
    file_id: str,
    service: FileService = Depends(get_file_service),
) -> Response:
    record, data = await service.read(file_id)
    filename = quote(record.get("original_name") or record["filename"])
    return Response(
        content=data,
        media_type=record.get("mimetype") or "application/octet-stream",
        headers={"Content-Disposition": f'inline; filename="{filename}"'},
    )


@router.delete(
    "/{file_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a file",
)
async def delete_file(
    file_id: str,
    service: FileService = Depends(get_file_service),
) -> Response:
    await service.delete(file_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
