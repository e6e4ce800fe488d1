"""
RSA签名器

用于微信支付 API v3 请求签名和调起支付签名。
签名算法：RSASSA-PKCS1-v1_5 + SHA-256，对应认证类型 WECHATPAY2-SHA256-RSA2048。
"""

import base64
from typing import Optional, Union

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from ..constants import MIN_RSA_KEY_SIZE, WxPayAuthScheme
from ..exceptions import AlgorithmUnavailableError, KeyLoadError
from .key_provider import load_private_key


class Signer:
    """签名器基类

    scheme 为 Authorization 头中的认证类型，子类实现具体签名算法。
    """

    scheme: str = ""

    def sign(self, message: str) -> str:
        """对签名串签名

        Args:
            message: 签名串

        Returns:
            Base64编码的签名
        """
        raise NotImplementedError


class RSASigner(Signer):
    """RSA签名器

    使用商户RSA私钥对签名串进行签名（PKCS#1 v1.5 + SHA-256）。
    签名器本身不保存状态，可在多个线程/协程间共享。

    Args:
        private_key: RSA私钥对象（由 KeyProvider 加载）

    Raises:
        KeyLoadError: 如果不是RSA私钥或密钥长度不足2048位
    """

    scheme = WxPayAuthScheme.RSA2048

    def __init__(self, private_key: rsa.RSAPrivateKey) -> None:
        if not isinstance(private_key, rsa.RSAPrivateKey):
            raise KeyLoadError("Signing key is not an RSA private key")
        if private_key.key_size < MIN_RSA_KEY_SIZE:
            raise KeyLoadError(
                f"RSA key size {private_key.key_size} is below {MIN_RSA_KEY_SIZE} bits"
            )
        self._private_key = private_key

    @classmethod
    def from_pem(cls, private_key_pem: Union[bytes, str]) -> "RSASigner":
        """从PEM内容创建签名器"""
        return cls(load_private_key(private_key_pem))

    @property
    def public_key(self) -> rsa.RSAPublicKey:
        return self._private_key.public_key()

    def sign(self, message: str) -> str:
        """对签名串进行RSA签名

        Args:
            message: 签名串（按UTF-8编码后签名）

        Returns:
            Base64编码的签名

        Raises:
            AlgorithmUnavailableError: 如果加密库不支持 SHA-256/PKCS1v15
        """
        try:
            signature = self._private_key.sign(
                message.encode("utf-8"),
                padding.PKCS1v15(),
                hashes.SHA256(),
            )
        except UnsupportedAlgorithm as e:
            raise AlgorithmUnavailableError(f"SHA256withRSA is not available: {e}") from e

        return base64.b64encode(signature).decode("ascii")

    def verify(
        self,
        message: str,
        signature: str,
        public_key: Optional[rsa.RSAPublicKey] = None,
    ) -> bool:
        """验证签名

        Args:
            message: 原始签名串
            signature: Base64编码的签名
            public_key: 验签公钥，默认使用本签名器私钥对应的公钥

        Returns:
            签名是否有效
        """
        key = public_key or self.public_key
        try:
            signature_bytes = base64.b64decode(signature, validate=True)
            key.verify(
                signature_bytes,
                message.encode("utf-8"),
                padding.PKCS1v15(),
                hashes.SHA256(),
            )
            return True
        except InvalidSignature:
            return False
        except (ValueError, TypeError):
            return False
