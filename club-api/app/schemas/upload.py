from pydantic import BaseModel


class UploadMetadataOut(BaseModel):
    format: str | None = None
    size: int


class UploadOut(BaseModel):
    url: str
    publicId: str
    success: bool = True
    metadata: UploadMetadataOut


class MessageOut(BaseModel):
    message: str
    success: bool = True
