"""
Конфигурация приложения
"""
from pydantic_settings import BaseSettings
from pydantic import model_validator
from typing import List, Union, Any
import os


DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
]


class Settings(BaseSettings):
    """Настройки приложения"""

    # Database
    DATABASE_URL: str = os.getenv(
        "DATABASE_URL",
        "sqlite:///./thriftshare.db"
    )

    # API
    API_V1_PREFIX: str = "/api/v1"
    SECRET_KEY: str = os.getenv("SECRET_KEY", "change-me-in-production")
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 1440

    # Загрузка изображений постов
    UPLOAD_DIR: str = os.getenv("UPLOAD_DIR", "uploads")
    MAX_IMAGE_SIZE_MB: int = 5

    # CORS - используем model_validator для перехвата до парсинга
    CORS_ORIGINS: Union[str, List[str]] = []

    @model_validator(mode='before')
    @classmethod
    def parse_cors_origins_before(cls, data: Any) -> Any:
        """Парсинг CORS_ORIGINS из строки с запятыми до парсинга Pydantic"""
        if isinstance(data, dict):
            if 'CORS_ORIGINS' in data and isinstance(data['CORS_ORIGINS'], str):
                cors_str = data['CORS_ORIGINS'].strip()
                if cors_str:
                    data['CORS_ORIGINS'] = [origin.strip() for origin in cors_str.split(",") if origin.strip()]
                else:
                    data['CORS_ORIGINS'] = list(DEFAULT_CORS_ORIGINS)
            elif 'CORS_ORIGINS' not in data:
                data['CORS_ORIGINS'] = list(DEFAULT_CORS_ORIGINS)
        return data

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
