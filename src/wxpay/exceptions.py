"""
微信支付异常定义

所有异常均继承自 WxPayError，调用方可以按类型区分处理：
- KeyLoadError: 私钥无法读取或解析
- AlgorithmUnavailableError: 运行环境缺少签名/解密算法（致命，不重试）
- DecodeError: 回调报文或密文格式错误
- AuthenticationFailure: AEAD 认证标签校验失败（报文被篡改或密钥错误）
- TransportError: HTTP 传输层错误
"""

from typing import Optional


class WxPayError(Exception):
    """微信支付异常基类"""


class KeyLoadError(WxPayError):
    """私钥读取或解析失败"""


class AlgorithmUnavailableError(WxPayError):
    """加密库不支持所需算法"""


class DecodeError(WxPayError):
    """回调报文格式错误（base64、JSON 或 resource 字段缺失）"""


class AuthenticationFailure(WxPayError):
    """AEAD 认证失败，报文不可信"""


class TransportError(WxPayError):
    """HTTP 请求失败

    Args:
        message: 错误描述
        status_code: HTTP 状态码（网络错误时为 None）
        body: 响应体文本
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
