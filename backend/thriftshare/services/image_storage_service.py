"""
Сервис хранения изображений постов

Файлы сохраняются в локальную папку UPLOAD_DIR и раздаются по /uploads.
"""
import aiofiles
import logging
from pathlib import Path
from typing import Optional
from uuid import uuid4
from fastapi import UploadFile, HTTPException, status

from thriftshare.config import settings

logger = logging.getLogger(__name__)

UPLOAD_URL_PREFIX = "/uploads"


class ImageStorageService:
    """Сохранение загруженных изображений"""

    def __init__(self, upload_dir: Optional[str] = None, max_size_mb: Optional[int] = None):
        self.upload_dir = Path(upload_dir or settings.UPLOAD_DIR)
        self.max_size_mb = max_size_mb or settings.MAX_IMAGE_SIZE_MB

    async def save_image(self, file: UploadFile) -> str:
        """
        Сохранить изображение и вернуть его URL

        Raises:
            HTTPException 400: не изображение или файл слишком большой
        """
        if not file.content_type or not file.content_type.startswith("image/"):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Only image files are allowed"
            )

        content = await file.read()
        if len(content) > self.max_size_mb * 1024 * 1024:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Image is too large. Maximum: {self.max_size_mb} MB"
            )

        suffix = Path(file.filename or "").suffix.lower()
        filename = f"{uuid4().hex}{suffix}"

        self.upload_dir.mkdir(parents=True, exist_ok=True)
        async with aiofiles.open(self.upload_dir / filename, "wb") as f:
            await f.write(content)

        logger.debug(f"Image saved: {filename} ({len(content)} bytes)")
        return f"{UPLOAD_URL_PREFIX}/{filename}"
