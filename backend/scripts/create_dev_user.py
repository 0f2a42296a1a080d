"""
Скрипт для создания тестового пользователя и выпуска JWT токена
Запуск: python scripts/create_dev_user.py <user_id> [username]

Сессии в проде выдаёт внешний провайдер; скрипт нужен для локальной разработки.
"""
import asyncio
import sys
from pathlib import Path

# Добавляем путь к модулям
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from thriftshare.database import AsyncSessionLocal, engine
from thriftshare.schemas.user import UserUpsert
from thriftshare.services.badge_service import BadgeService
from thriftshare.services.user_service import UserService
from thriftshare.utils.auth import create_access_token


async def create_dev_user(user_id: str, username: str):
    """Создать (или обновить) пользователя и напечатать токен"""
    async with AsyncSessionLocal() as db:
        created = await BadgeService.initialize_badges(db)
        if created:
            print(f"✅ Каталог бейджей создан: {created}")

        user = await UserService.upsert_user(db, UserUpsert(id=user_id, username=username))
        print(f"✅ Пользователь: {user.display_name} ({user.id})")
        print(f"   Эко-баллы: {user.eco_points}, вещей: {user.items_reused}")

    await engine.dispose()

    token = create_access_token({"sub": user_id})
    print(f"\n🔑 Authorization: Bearer {token}")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Использование: python scripts/create_dev_user.py <user_id> [username]")
        sys.exit(1)

    user_id = sys.argv[1]
    username = sys.argv[2] if len(sys.argv) > 2 else user_id
    print("🚀 Создание пользователя для разработки...\n")
    asyncio.run(create_dev_user(user_id, username))
