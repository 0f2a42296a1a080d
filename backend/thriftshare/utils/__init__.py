"""
Утилиты
"""
from thriftshare.utils.auth import create_access_token, verify_token
from thriftshare.utils.permissions import get_current_user, OptionalUser

__all__ = [
    "create_access_token",
    "verify_token",
    "get_current_user",
    "OptionalUser",
]
