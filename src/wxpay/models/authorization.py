"""
Authorization 认证信息模型
"""

from pydantic import Field, field_validator

from .base import WxPayModel


class AuthorizationToken(WxPayModel):
    """请求认证信息

    单次请求有效。渲染格式由微信支付协议固定：
    mchid="...",nonce_str="...",timestamp="...",serial_no="...",signature="..."

    协议不支持转义，任何字段包含双引号都会被拒绝。
    """

    mchid: str
    nonce_str: str
    timestamp: str
    serial_no: str
    signature: str = Field(repr=False)

    @field_validator("mchid", "nonce_str", "timestamp", "serial_no", "signature")
    @classmethod
    def reject_quote(cls, value: str) -> str:
        if '"' in value:
            raise ValueError("field must not contain a double quote")
        return value

    def render(self) -> str:
        """按协议顺序渲染认证信息"""
        return ",".join(
            f'{name}="{getattr(self, name)}"'
            for name in ("mchid", "nonce_str", "timestamp", "serial_no", "signature")
        )
