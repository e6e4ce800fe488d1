"""
支付回调通知模型

回调报文结构（微信支付 API v3）：
{
    "id": "EV-2018022511223320873",
    "create_time": "2015-05-20T13:29:35+08:00",
    "resource_type": "encrypt-resource",
    "event_type": "TRANSACTION.SUCCESS",
    "summary": "支付成功",
    "resource": {
        "original_type": "transaction",
        "algorithm": "AEAD_AES_256_GCM",
        "ciphertext": "...",
        "associated_data": "transaction",
        "nonce": "..."
    }
}
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import ConfigDict

from .base import WxPayModel


class NotificationResource(WxPayModel):
    """回调加密资源"""

    algorithm: str = "AEAD_AES_256_GCM"
    ciphertext: str
    nonce: str
    associated_data: Optional[str] = None
    original_type: Optional[str] = None


class NotificationRequest(WxPayModel):
    """回调通知报文"""

    id: Optional[str] = None
    create_time: Optional[str] = None
    event_type: Optional[str] = None
    resource_type: Optional[str] = None
    summary: Optional[str] = None
    resource: NotificationResource


@dataclass(frozen=True)
class NotificationEnvelope:
    """AEAD 解密输入

    Attributes:
        ciphertext: Base64编码的密文（末尾16字节为认证标签）
        nonce: 加密随机串
        associated_data: 附加数据
    """

    ciphertext: str
    nonce: bytes
    associated_data: bytes = b""

    @classmethod
    def from_resource(cls, resource: NotificationResource) -> "NotificationEnvelope":
        """从回调资源构建，nonce 与 associated_data 按 UTF-8 原样取字节"""
        return cls(
            ciphertext=resource.ciphertext,
            nonce=resource.nonce.encode("utf-8"),
            associated_data=(resource.associated_data or "").encode("utf-8"),
        )


class TransactionNotification(WxPayModel):
    """解密后的支付结果

    仅声明业务方常用字段，其余字段原样保留。
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    out_trade_no: str
    transaction_id: Optional[str] = None
    trade_state: Optional[str] = None
    appid: Optional[str] = None
    mchid: Optional[str] = None


class NotifyResponse(WxPayModel):
    """回调应答"""

    code: str
    message: str
