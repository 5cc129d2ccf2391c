import uuid
from typing import Optional
import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from fastapi import UploadFile, status

from .config import settings
from .error_handling import APIError, APIValidationError

logger = logging.getLogger(__name__)


def format_file_size(size_bytes: int) -> str:
    """Format file size in human readable format."""
    size = float(size_bytes)
    for unit in ["B", "KB", "MB", "GB"]:
        if size < 1024:
            return f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} TB"


class StorageUnavailable(APIError):
    error_code = "STORAGE_UNAVAILABLE"

    def __init__(self, message: str = "File storage is temporarily unavailable"):
        super().__init__(message=message, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)


class FileService:
    """Object storage for receipts and balance photos (S3 compatible)"""

    def __init__(self, s3_client=None):
        self.s3_client = s3_client or boto3.client(
            "s3",
            endpoint_url=settings.storage_endpoint_url,
            aws_access_key_id=settings.aws_access_key_id,
            aws_secret_access_key=settings.aws_secret_access_key,
            region_name=settings.aws_region,
        )
        self.max_file_size = settings.max_upload_size_bytes
        self.allowed_extensions = {ext.lower() for ext in settings.allowed_upload_extensions}

    def validate(self, filename: Optional[str], size: int) -> str:
        """Check size and extension, returning the normalised extension."""
        if size > self.max_file_size:
            raise APIError(
                message=f"File size {format_file_size(size)} exceeds maximum allowed size of "
                f"{format_file_size(self.max_file_size)}",
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                error_code="FILE_TOO_LARGE",
            )
        if not filename or "." not in filename:
            raise APIValidationError("Uploaded file must have an extension")

        extension = filename.rsplit(".", 1)[-1].lower()
        if extension not in self.allowed_extensions:
            raise APIValidationError(
                f"File type '{extension}' not allowed. "
                f"Allowed: {', '.join(sorted(self.allowed_extensions))}"
            )
        return extension

    def upload(
        self, bucket: str, filename: str, data: bytes, content_type: Optional[str] = None
    ) -> str:
        """Store bytes under ``filename`` and return the object key."""
        extra = {"ContentType": content_type} if content_type else {}
        try:
            self.s3_client.put_object(Bucket=bucket, Key=filename, Body=data, **extra)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Upload of {filename} to {bucket} failed: {e}", exc_info=True)
            raise StorageUnavailable() from e

        logger.info(f"Uploaded {filename} ({format_file_size(len(data))}) to {bucket}")
        return filename

    def get_public_url(self, bucket: str, key: str) -> str:
        if settings.storage_public_base_url:
            return f"{settings.storage_public_base_url.rstrip('/')}/{bucket}/{key}"
        return f"https://{bucket}.s3.{settings.aws_region}.amazonaws.com/{key}"

    async def upload_file(self, bucket: str, file: UploadFile, prefix: str = "") -> str:
        """Validate an upload, store it under a random name and return its public URL."""
        content = await file.read()
        extension = self.validate(file.filename, len(content))
        key = f"{prefix}{uuid.uuid4().hex}.{extension}"
        self.upload(bucket, key, content, file.content_type)
        return self.get_public_url(bucket, key)


def get_file_service() -> FileService:
    return FileService()
