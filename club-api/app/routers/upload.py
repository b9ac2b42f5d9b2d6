from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse

from app.core.errors import ValidationError
from app.deps import get_current_user, get_upload_service
from app.schemas.upload import MessageOut, UploadOut
from app.services.upload_service import UploadService

router = APIRouter(prefix="/api/upload", tags=["upload"])


@router.post("", response_model=UploadOut)
async def upload_file(
    file: UploadFile | None = File(None),
    folder: str | None = Form(None),
    uploads: UploadService = Depends(get_upload_service),
    user=Depends(get_current_user),
):
    if file is None or not file.filename:
        raise ValidationError("No file uploaded")
    content = await file.read()
    return uploads.upload(content, file.content_type, file.filename, folder)


@router.delete("/{public_id:path}", response_model=MessageOut)
def delete_file(
    public_id: str,
    uploads: UploadService = Depends(get_upload_service),
    user=Depends(get_current_user),
):
    if not uploads.delete(public_id):
        return JSONResponse(
            status_code=404,
            content={"success": False, "message": "File not found or already deleted"},
        )
    return MessageOut(message="File deleted successfully")
