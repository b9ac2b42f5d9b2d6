"""
Image / document uploads to an S3-compatible bucket.

Objects are keyed ``<folder>/<images|documents>/<timestamp><ext>``; the key
doubles as the public id handed back to the client.
"""
import logging
import mimetypes
import time

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from app.core.config import settings
from app.core.errors import DependencyError, ValidationError

logger = logging.getLogger(__name__)

PDF_MIME = "application/pdf"


def is_allowed_type(content_type: str | None) -> bool:
    return bool(content_type) and (content_type.startswith("image/") or content_type == PDF_MIME)


class UploadService:
    def __init__(self, client=None, bucket: str | None = None, public_base_url: str | None = None):
        self._client = client
        self.bucket = bucket if bucket is not None else settings.S3_BUCKET
        self.public_base_url = public_base_url if public_base_url is not None else settings.S3_PUBLIC_BASE_URL

    @property
    def client(self):
        if self._client is None:
            self._client = boto3.client(
                "s3",
                endpoint_url=settings.S3_ENDPOINT_URL,
                region_name=settings.S3_REGION,
            )
        return self._client

    def public_url(self, key: str) -> str:
        if self.public_base_url:
            return f"{self.public_base_url.rstrip('/')}/{key}"
        return f"https://{self.bucket}.s3.amazonaws.com/{key}"

    def upload(self, content: bytes, content_type: str | None, filename: str | None, folder: str | None = None) -> dict:
        if not is_allowed_type(content_type):
            raise ValidationError("Only images and PDFs are allowed!")
        if not content:
            raise ValidationError("No file uploaded")
        if len(content) > settings.UPLOAD_MAX_BYTES:
            raise ValidationError(f"File is larger than {settings.UPLOAD_MAX_BYTES // (1024 * 1024)}MB")
        if not self.bucket:
            raise DependencyError("Upload storage is not configured", "S3_BUCKET is empty")

        resource_type = "image" if content_type.startswith("image/") else "document"
        ext = mimetypes.guess_extension(content_type) or ""
        if filename and "." in filename:
            ext = "." + filename.rsplit(".", 1)[1].lower()
        folder = (folder or settings.UPLOAD_DEFAULT_FOLDER).strip("/")
        key = f"{folder}/{resource_type}s/{int(time.time() * 1000)}{ext}"

        try:
            self.client.put_object(Bucket=self.bucket, Key=key, Body=content, ContentType=content_type)
        except (BotoCoreError, ClientError) as e:
            logger.error(f"[Upload] put_object {key} failed: {e}")
            raise DependencyError("Upload failed", str(e)) from e

        logger.info(f"[Upload] Stored {key} ({len(content)} bytes)")
        return {
            "url": self.public_url(key),
            "publicId": key,
            "success": True,
            "metadata": {
                "format": ext.lstrip(".") or None,
                "size": len(content),
            },
        }

    def delete(self, public_id: str) -> bool:
        """False when there was nothing to delete."""
        try:
            self.client.head_object(Bucket=self.bucket, Key=public_id)
        except ClientError as e:
            code = str(e.response.get("Error", {}).get("Code", ""))
            if code in ("404", "NoSuchKey", "NotFound"):
                return False
            raise DependencyError("Delete failed", str(e)) from e
        except BotoCoreError as e:
            raise DependencyError("Delete failed", str(e)) from e

        try:
            self.client.delete_object(Bucket=self.bucket, Key=public_id)
        except (BotoCoreError, ClientError) as e:
            logger.error(f"[Upload] delete_object {public_id} failed: {e}")
            raise DependencyError("Delete failed", str(e)) from e

        logger.info(f"[Upload] Deleted {public_id}")
        return True
