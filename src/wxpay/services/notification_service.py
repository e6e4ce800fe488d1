"""
支付回调通知处理

处理流程：
1. 解析回调报文，取出 resource.ciphertext / nonce / associated_data
2. 使用 APIv3 密钥进行 AES-256-GCM 解密并校验
3. 解析明文，取出商户订单号 out_trade_no
4. 交给业务回调处理

应答：
- 成功：HTTP 200，{"code": "SUCCESS", "message": "SUCCESS"}
- 失败：HTTP 500，{"code": "ERROR", "message": "..."}，不返回内部错误细节
"""

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Union

from pydantic import ValidationError

from ..constants import WxPayNotifyCode
from ..exceptions import DecodeError, WxPayError
from ..models import (
    NotificationEnvelope,
    NotificationRequest,
    NotifyResponse,
    TransactionNotification,
)
from ..utils.aes_gcm import AesGcmDecryptor

logger = logging.getLogger(__name__)

PaidCallback = Callable[[TransactionNotification], Awaitable[None]]

# 失败应答统一使用的提示
NOTIFY_ERROR_MESSAGE = "签名错误"


@dataclass
class NotifyResult:
    """回调处理结果"""

    status_code: int
    response: NotifyResponse
    out_trade_no: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.status_code == 200


class NotificationService:
    """支付回调通知服务

    Args:
        decryptor: AES-256-GCM 解密器（持有 APIv3 密钥）
        on_paid: 可选的业务回调，解密成功后调用
    """

    def __init__(
        self,
        decryptor: AesGcmDecryptor,
        on_paid: Optional[PaidCallback] = None,
    ) -> None:
        self._decryptor = decryptor
        self._on_paid = on_paid

    def parse(self, body: Union[bytes, str]) -> NotificationRequest:
        """解析回调报文

        Raises:
            DecodeError: 报文不是合法JSON或缺少 resource 字段
        """
        try:
            return NotificationRequest.model_validate_json(body)
        except ValidationError as e:
            raise DecodeError(f"malformed notification: {e.error_count()} errors") from e

    def decrypt(self, body: Union[bytes, str]) -> str:
        """解析并解密回调报文

        Returns:
            解密后的明文（JSON字符串）

        Raises:
            DecodeError: 报文格式错误
            AuthenticationFailure: 认证失败
        """
        request = self.parse(body)
        envelope = NotificationEnvelope.from_resource(request.resource)
        return self._decryptor.decrypt(envelope)

    def process(self, body: Union[bytes, str]) -> TransactionNotification:
        """解密回调并解析支付结果

        Raises:
            DecodeError: 报文格式错误或明文缺少 out_trade_no
            AuthenticationFailure: 认证失败
        """
        plaintext = self.decrypt(body)
        try:
            return TransactionNotification.model_validate_json(plaintext)
        except ValidationError as e:
            raise DecodeError("decrypted notification has no out_trade_no") from e

    async def handle(self, body: Union[bytes, str]) -> NotifyResult:
        """处理回调并生成应答

        Args:
            body: 回调请求体原文

        Returns:
            回调处理结果（状态码、应答体、商户订单号）
        """
        try:
            notification = self.process(body)
        except WxPayError as e:
            logger.error(f"Notification rejected: {type(e).__name__}: {e}")
            return self._error()

        if self._on_paid is not None:
            try:
                await self._on_paid(notification)
            except Exception as e:
                logger.error(
                    f"Paid callback failed for out_trade_no={notification.out_trade_no}: {e}",
                    exc_info=True,
                )
                return self._error()

        logger.info(f"Notification accepted: out_trade_no={notification.out_trade_no}")
        return NotifyResult(
            status_code=200,
            response=NotifyResponse(
                code=WxPayNotifyCode.SUCCESS,
                message=WxPayNotifyCode.SUCCESS,
            ),
            out_trade_no=notification.out_trade_no,
        )

    @staticmethod
    def _error() -> NotifyResult:
        return NotifyResult(
            status_code=500,
            response=NotifyResponse(
                code=WxPayNotifyCode.ERROR,
                message=NOTIFY_ERROR_MESSAGE,
            ),
        )
