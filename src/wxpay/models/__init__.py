"""数据模型模块"""

from .base import WxPayModel
from .credential import Credential
from .authorization import AuthorizationToken
from .invocation import ClientInvocationParams
from .notification import (
    NotificationResource,
    NotificationRequest,
    NotificationEnvelope,
    TransactionNotification,
    NotifyResponse,
)

__all__ = [
    # 基类
    "WxPayModel",
    # 凭证与签名
    "Credential",
    "AuthorizationToken",
    "ClientInvocationParams",
    # 回调通知
    "NotificationResource",
    "NotificationRequest",
    "NotificationEnvelope",
    "TransactionNotification",
    "NotifyResponse",
]
