"""
微信支付 API v3 客户端签名与回调解密

- 请求签名: RequestAuthorizer / RSASigner
- 调起支付签名: ClientInvocationSigner
- 回调解密: AesGcmDecryptor / NotificationService
"""

from .exceptions import (
    WxPayError,
    KeyLoadError,
    AlgorithmUnavailableError,
    DecodeError,
    AuthenticationFailure,
    TransportError,
)
from .models import Credential, ClientInvocationParams, TransactionNotification
from .utils import (
    RSASigner,
    RequestAuthorizer,
    AesGcmDecryptor,
    FileKeyProvider,
    PemKeyProvider,
)
from .services import ClientInvocationSigner, NotificationService

__version__ = "1.0.0"

__all__ = [
    "WxPayError",
    "KeyLoadError",
    "AlgorithmUnavailableError",
    "DecodeError",
    "AuthenticationFailure",
    "TransportError",
    "Credential",
    "ClientInvocationParams",
    "TransactionNotification",
    "RSASigner",
    "RequestAuthorizer",
    "AesGcmDecryptor",
    "FileKeyProvider",
    "PemKeyProvider",
    "ClientInvocationSigner",
    "NotificationService",
]
