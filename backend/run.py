"""
Запуск API сервера ThriftShare
"""
import uvicorn
import logging

from thriftshare.config import settings

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

if __name__ == "__main__":
    import os

    port = int(os.getenv("PORT", 8000))
    host = os.getenv("HOST", "0.0.0.0")
    is_dev = settings.ENVIRONMENT == "development"

    logger.info(f"🚀 ThriftShare API on {host}:{port} ({settings.ENVIRONMENT})")
    logger.info(f"📁 Uploads directory: {settings.UPLOAD_DIR}")
    if is_dev:
        logger.info(f"🔗 Docs: http://{host}:{port}/docs")

    uvicorn.run(
        "thriftshare.main:app",
        host=host,
        port=port,
        reload=is_dev,
        log_level=settings.LOG_LEVEL.lower()
    )
