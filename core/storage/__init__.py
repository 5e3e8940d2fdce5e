"""
스토리지 모듈

User Store, Account Store 등 데이터 저장소 인터페이스 제공
"""

from core.storage.account_store import AccountStore, check_ownership
from core.storage.user_store import UserStore

__all__ = [
    "AccountStore",
    "UserStore",
    "check_ownership",
]
