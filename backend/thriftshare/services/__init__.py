"""
Сервисы для бизнес-логики
"""
from thriftshare.services.ledger_service import LedgerService
from thriftshare.services.badge_service import BadgeService
from thriftshare.services.post_service import PostService
from thriftshare.services.rental_service import RentalService
from thriftshare.services.user_service import UserService
from thriftshare.services.image_storage_service import ImageStorageService

__all__ = ["LedgerService", "BadgeService", "PostService", "RentalService", "UserService", "ImageStorageService"]
