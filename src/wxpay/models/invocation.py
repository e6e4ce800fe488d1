"""
调起支付参数模型
"""

from pydantic import Field

from ..constants import APP_PAY_PACKAGE
from .base import WxPayModel


class ClientInvocationParams(WxPayModel):
    """APP 调起支付所需参数

    由服务端签名后下发给客户端，客户端原样传给微信 SDK，不发送给支付网关。

    序列化字段：appid, timeStamp, nonceStr, prepayid, package, sign
    """

    app_id: str = Field(alias="appid")
    timestamp: str = Field(alias="timeStamp")
    nonce_str: str = Field(alias="nonceStr")
    prepay_id: str = Field(alias="prepayid")
    package: str = APP_PAY_PACKAGE
    sign: str
