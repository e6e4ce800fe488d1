"""
服务配置

通过环境变量配置：
- WXPAY_BASE_URL: 网关地址（默认 https://api.mch.weixin.qq.com/）
- WXPAY_MCH_ID: 商户号
- WXPAY_SERIAL_NO: 商户API证书序列号
- WXPAY_PRIVATE_KEY_PATH: 商户API私钥文件路径
- WXPAY_PRIVATE_KEY: 商户API私钥PEM内容（与文件路径二选一）
- WXPAY_API_V3_KEY: APIv3密钥（32字节）
- WXPAY_APP_ID: 应用ID（可选，调起支付时使用）
- WXPAY_TIMEOUT: 请求超时时间（秒，默认10）
- WXPAY_PROXY_URL: HTTP代理地址（可选）
"""

import os
from typing import Optional

from pydantic import BaseModel, field_validator, model_validator

from .constants import AES_KEY_LENGTH, DEFAULT_BASE_URL
from .models import Credential
from .utils.key_provider import FileKeyProvider, KeyProvider, PemKeyProvider


def _read_pem_env(name: str) -> Optional[str]:
    """读取PEM环境变量，单行写法中的 \\n 还原为换行"""
    value = os.getenv(name)
    if value:
        return value.replace("\\n", "\n")
    return value


class WxPaySettings(BaseModel):
    """微信支付配置"""

    base_url: str = DEFAULT_BASE_URL
    mch_id: str
    serial_no: str
    api_v3_key: str
    private_key_path: Optional[str] = None
    private_key_pem: Optional[str] = None
    app_id: Optional[str] = None
    timeout: float = 10.0
    proxy_url: Optional[str] = None

    @field_validator("api_v3_key")
    @classmethod
    def check_api_v3_key(cls, value: str) -> str:
        if len(value.encode("utf-8")) != AES_KEY_LENGTH:
            raise ValueError(f"api_v3_key must be {AES_KEY_LENGTH} bytes")
        return value

    @model_validator(mode="after")
    def check_private_key_source(self) -> "WxPaySettings":
        if not self.private_key_path and not self.private_key_pem:
            raise ValueError("private_key_path or private_key_pem is required")
        return self

    @classmethod
    def from_env(cls) -> "WxPaySettings":
        """从环境变量读取配置

        Raises:
            pydantic.ValidationError: 缺少必填项或取值无效
        """
        values = {
            "base_url": os.getenv("WXPAY_BASE_URL", DEFAULT_BASE_URL),
            "mch_id": os.getenv("WXPAY_MCH_ID"),
            "serial_no": os.getenv("WXPAY_SERIAL_NO"),
            "api_v3_key": os.getenv("WXPAY_API_V3_KEY"),
            "private_key_path": os.getenv("WXPAY_PRIVATE_KEY_PATH"),
            "private_key_pem": _read_pem_env("WXPAY_PRIVATE_KEY"),
            "app_id": os.getenv("WXPAY_APP_ID"),
            "timeout": os.getenv("WXPAY_TIMEOUT", "10"),
            "proxy_url": os.getenv("WXPAY_PROXY_URL"),
        }
        return cls.model_validate(values)

    @property
    def api_v3_key_bytes(self) -> bytes:
        return self.api_v3_key.encode("utf-8")

    def key_provider(self) -> KeyProvider:
        """根据配置选择私钥来源，PEM内容优先"""
        if self.private_key_pem:
            return PemKeyProvider(self.private_key_pem)
        return FileKeyProvider(self.private_key_path)

    def load_credential(self) -> Credential:
        """加载商户凭证

        读取并解析私钥，应在启动时调用一次。

        Raises:
            KeyLoadError: 私钥无法读取或解析
        """
        return Credential(
            merchant_id=self.mch_id,
            serial_no=self.serial_no,
            private_key=self.key_provider().load_private_key(),
        )
