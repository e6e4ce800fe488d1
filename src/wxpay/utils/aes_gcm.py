"""
回调报文解密

微信支付回调的 resource 使用 AEAD_AES_256_GCM 加密：
- 密钥：商户 APIv3 密钥（32字节）
- 密文：Base64编码，末尾16字节为认证标签
- nonce、associated_data：取回调报文中的原值，不做任何推导

认证失败时不返回任何明文。
"""

import base64
import binascii
import logging

from cryptography.exceptions import InvalidTag, UnsupportedAlgorithm
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from ..constants import AES_KEY_LENGTH, GCM_TAG_LENGTH
from ..exceptions import AlgorithmUnavailableError, AuthenticationFailure, DecodeError
from ..models import NotificationEnvelope

logger = logging.getLogger(__name__)


class AesGcmDecryptor:
    """AES-256-GCM 解密器

    Args:
        key: APIv3 密钥，32字节

    Raises:
        ValueError: 如果密钥长度不是32字节
        AlgorithmUnavailableError: 如果加密库不支持 AES-GCM
    """

    def __init__(self, key: bytes) -> None:
        if len(key) != AES_KEY_LENGTH:
            raise ValueError(f"AES-256-GCM key must be {AES_KEY_LENGTH} bytes")
        try:
            self._aesgcm = AESGCM(key)
        except UnsupportedAlgorithm as e:
            raise AlgorithmUnavailableError(f"AES-GCM is not available: {e}") from e

    def decrypt(self, envelope: NotificationEnvelope) -> str:
        """解密回调资源

        Args:
            envelope: 密文、nonce 与附加数据

        Returns:
            UTF-8 明文

        Raises:
            DecodeError: 密文不是合法Base64、长度不足或 nonce 为空
            AuthenticationFailure: 认证标签校验失败
        """
        return self.decrypt_to_string(
            envelope.associated_data,
            envelope.nonce,
            envelope.ciphertext,
        )

    def decrypt_to_string(
        self,
        associated_data: bytes,
        nonce: bytes,
        ciphertext: str,
    ) -> str:
        """解密Base64密文并返回字符串"""
        if not nonce:
            raise DecodeError("nonce is empty")

        try:
            data = base64.b64decode(ciphertext, validate=True)
        except (binascii.Error, ValueError) as e:
            raise DecodeError(f"ciphertext is not valid base64: {e}") from e

        if len(data) < GCM_TAG_LENGTH:
            raise DecodeError("ciphertext is shorter than the authentication tag")

        try:
            plaintext = self._aesgcm.decrypt(nonce, data, associated_data)
        except InvalidTag as e:
            logger.warning("Notification authentication tag mismatch")
            raise AuthenticationFailure("authentication tag mismatch") from e
        except ValueError as e:
            # nonce 长度超出 AES-GCM 允许范围
            raise DecodeError(f"invalid nonce: {e}") from e

        try:
            return plaintext.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError("plaintext is not valid UTF-8") from e
