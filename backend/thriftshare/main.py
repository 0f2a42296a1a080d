"""
FastAPI приложение
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from pathlib import Path
import logging

from thriftshare.config import settings
from thriftshare.api import auth, posts, rentals, badges, users
from thriftshare.services.image_storage_service import UPLOAD_URL_PREFIX

# Настройка логирования
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="ThriftShare API",
    description="API для обмена находками из секонд-хенда, аренды одежды и эко-геймификации",
    version="0.1.0"
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Подключение роутеров
app.include_router(auth.router, prefix=settings.API_V1_PREFIX)
app.include_router(posts.router, prefix=settings.API_V1_PREFIX)
app.include_router(rentals.router, prefix=settings.API_V1_PREFIX)
app.include_router(badges.router, prefix=settings.API_V1_PREFIX)
app.include_router(users.router, prefix=settings.API_V1_PREFIX)

# Загруженные изображения постов
app.mount(UPLOAD_URL_PREFIX, StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False), name="uploads")


@app.get("/")
async def root():
    """Корневой endpoint"""
    return {
        "message": "ThriftShare API",
        "version": "0.1.0",
        "docs": "/docs",
        "api_prefix": settings.API_V1_PREFIX
    }


@app.get("/health")
async def health():
    """Health check"""
    return {"status": "ok"}


@app.on_event("startup")
async def startup_event():
    """Выполняется при запуске приложения"""
    logger.info("ThriftShare API starting up...")
    logger.info(f"🌐 CORS allowed origins: {settings.CORS_ORIGINS}")
    logger.info(f"Environment: {settings.ENVIRONMENT}")

    Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)

    # Каталог бейджей должен существовать до первой проверки наград
    try:
        from thriftshare.database import get_db
        from thriftshare.services.badge_service import BadgeService

        async for db in get_db():
            try:
                created = await BadgeService.initialize_badges(db)
                if created:
                    logger.info(f"✅ Создано бейджей: {created}")
            finally:
                break
    except Exception as e:
        logger.warning(f"⚠️ Ошибка инициализации каталога бейджей: {e}")


@app.on_event("shutdown")
async def shutdown_event():
    """Выполняется при остановке приложения"""
    logger.info("ThriftShare API shutting down...")
