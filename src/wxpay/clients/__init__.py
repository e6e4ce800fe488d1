"""微信支付客户端模块"""

from .base_http_client import WxPayHTTPClient
from .transaction_http_client import WxPayTransactionClient

__all__ = [
    "WxPayHTTPClient",
    "WxPayTransactionClient",
]
