"""
Authorization 请求头构造

请求头格式：
    Authorization: WECHATPAY2-SHA256-RSA2048 mchid="...",nonce_str="...",timestamp="...",serial_no="...",signature="..."

签名流程：
1. 生成随机串和秒级时间戳
2. 构造请求签名串（方法、URL、时间戳、随机串、请求体）
3. 使用商户私钥签名
4. 将签名与商户号、证书序列号拼接为认证信息
"""

from typing import Optional

from ..models import AuthorizationToken, Credential
from .canonical import build_request_message
from .nonce import Clock, NonceSource, current_timestamp, generate_nonce
from .rsa_signer import RSASigner, Signer


def build_authorization_token(
    merchant_id: str,
    nonce: str,
    timestamp: str,
    serial_no: str,
    signature: str,
) -> str:
    """拼接认证信息

    Returns:
        mchid="...",nonce_str="...",timestamp="...",serial_no="...",signature="..."

    Raises:
        ValueError: 如果任一字段包含双引号
    """
    token = AuthorizationToken(
        mchid=merchant_id,
        nonce_str=nonce,
        timestamp=str(timestamp),
        serial_no=serial_no,
        signature=signature,
    )
    return token.render()


def build_authorization_header(scheme: str, token: str) -> str:
    """拼接 Authorization 请求头的值"""
    return f"{scheme} {token}"


class RequestAuthorizer:
    """请求签名器

    为单个 API 请求生成 Authorization 请求头。

    Args:
        credential: 商户凭证
        signer: 签名器，默认使用凭证中的私钥创建 RSASigner
        nonce_source: 随机串生成函数
        clock: 时间戳生成函数
    """

    def __init__(
        self,
        credential: Credential,
        signer: Optional[Signer] = None,
        nonce_source: NonceSource = generate_nonce,
        clock: Clock = current_timestamp,
    ) -> None:
        self.credential = credential
        self._signer = signer or RSASigner(credential.private_key)
        self._nonce_source = nonce_source
        self._clock = clock

    @property
    def scheme(self) -> str:
        return self._signer.scheme

    def authorize(self, method: str, url: str, body: str = "") -> str:
        """生成 Authorization 请求头

        Args:
            method: HTTP方法
            url: 请求URL（完整地址或路径）
            body: 请求体原文，必须与实际发送的字节一致

        Returns:
            Authorization 请求头的值
        """
        nonce = self._nonce_source()
        timestamp = self._clock()
        message = build_request_message(method, url, timestamp, nonce, body)
        signature = self._signer.sign(message)

        token = build_authorization_token(
            merchant_id=self.credential.merchant_id,
            nonce=nonce,
            timestamp=timestamp,
            serial_no=self.credential.serial_no,
            signature=signature,
        )
        return build_authorization_header(self.scheme, token)
