"""
Утилиты для проверки прав доступа
"""
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import Optional

from thriftshare.database import get_db
from thriftshare.models.user import User
from thriftshare.utils.auth import verify_token

security = HTTPBearer()


async def _load_user(user_id: str, db: AsyncSession) -> Optional[User]:
    result = await db.execute(select(User).where(User.id == str(user_id)))
    return result.scalar_one_or_none()


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: AsyncSession = Depends(get_db)
) -> User:
    """Получить текущего пользователя из JWT токена"""
    payload = verify_token(credentials.credentials)

    if payload is None or payload.get("sub") is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = await _load_user(payload["sub"], db)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )

    return user


async def OptionalUser(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(HTTPBearer(auto_error=False)),
    db: AsyncSession = Depends(get_db)
) -> Optional[User]:
    """
    Опциональная авторизация - возвращает пользователя если токен есть, иначе None

    Используется для endpoints, которые работают и без авторизации
    """
    if credentials is None:
        return None

    payload = verify_token(credentials.credentials)
    if payload is None or payload.get("sub") is None:
        return None
    return await _load_user(payload["sub"], db)
