"""HTTP API 模块"""

from .notify import router as notify_router
from .notify import get_notification_service, set_notification_service

__all__ = [
    "notify_router",
    "get_notification_service",
    "set_notification_service",
]
