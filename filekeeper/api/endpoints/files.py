"""File API: thin routes delegating to FileService."""

import re
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, HTTPException, Response, UploadFile

from filekeeper.api.dependencies import get_file_service
from filekeeper.application.use_cases.files import FileService
from filekeeper.schemas.file import FileRecordResponse

router = APIRouter()

_TOKEN = re.compile(r"[A-Za-z0-9!#$%&'*+.^_`|~-]+")


def _content_disposition(filename: str) -> str:
    """attachment header; non-ASCII names also get an RFC 5987 filename*."""
    if not filename.isascii():
        fallback = filename.encode("ascii", "replace").decode()
        fallback = fallback.replace("?", "_").replace('"', "_").replace("\\", "_")
        return (
            f"attachment; filename=\"{fallback}\"; "
            f"filename*=UTF-8''{quote(filename, safe='')}"
        )
    if _TOKEN.fullmatch(filename):
        return f"attachment; filename={filename}"
    escaped = filename.replace("\\", "\\\\").replace('"', '\\"')
    return f'attachment; filename="{escaped}"'


@router.post("", response_model=FileRecordResponse, status_code=201)
async def upload_file(
    response: Response,
    file: UploadFile = File(...),
    file_svc: FileService = Depends(get_file_service),
):
    """Store an uploaded file; responds with its record and a Location header."""
    if not file.filename:
        raise HTTPException(status_code=400, detail="Filename required")
    content = await file.read()
    record = await file_svc.save(
        original_name=file.filename,
        content_type=file.content_type or "application/octet-stream",
        size=file.size if file.size is not None else len(content),
        content=content,
    )
    response.headers["Location"] = f"/files/{record.id}"
    return FileRecordResponse.model_validate(record)


@router.get(
    "/download/{file_id}",
    response_class=Response,
    responses={200: {"content": {"application/octet-stream": {}}}},
)
async def download_file(
    file_id: int,
    file_svc: FileService = Depends(get_file_service),
) -> Response:
    """Return the stored bytes as an attachment with the original name."""
    view = await file_svc.load(file_id)
    return Response(
        content=view.content,
        media_type=view.content_type,
        headers={"Content-Disposition": _content_disposition(view.name)},
    )


@router.get("/{file_id}", response_model=FileRecordResponse)
async def get_file(
    file_id: int,
    file_svc: FileService = Depends(get_file_service),
):
    """Get file metadata by id."""
    record = await file_svc.get_record(file_id)
    return FileRecordResponse.model_validate(record)


@router.delete("/{file_id}", status_code=204)
async def delete_file(
    file_id: int,
    file_svc: FileService = Depends(get_file_service),
) -> Response:
    """Delete the blob, then the record."""
    await file_svc.delete(file_id)
    return Response(status_code=204)
