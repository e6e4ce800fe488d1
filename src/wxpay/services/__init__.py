"""服务模块"""

from .invocation_signer import ClientInvocationSigner
from .notification_service import NotificationService, NotifyResult

__all__ = [
    "ClientInvocationSigner",
    "NotificationService",
    "NotifyResult",
]
