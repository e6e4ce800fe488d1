"""微信支付常量定义"""

from .wxpay import (
    WxPayAuthScheme,
    WxPayTransactionPath,
    WxPayNotifyCode,
    APP_PAY_PACKAGE,
    DEFAULT_BASE_URL,
    AES_KEY_LENGTH,
    GCM_TAG_LENGTH,
    MIN_RSA_KEY_SIZE,
)

__all__ = [
    "WxPayAuthScheme",
    "WxPayTransactionPath",
    "WxPayNotifyCode",
    "APP_PAY_PACKAGE",
    "DEFAULT_BASE_URL",
    "AES_KEY_LENGTH",
    "GCM_TAG_LENGTH",
    "MIN_RSA_KEY_SIZE",
]
