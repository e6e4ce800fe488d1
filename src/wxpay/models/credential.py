"""
商户凭证
"""

from dataclasses import dataclass, field

from cryptography.hazmat.primitives.asymmetric import rsa


@dataclass(frozen=True)
class Credential:
    """商户签名凭证

    加载后不可修改，由调用方持有并显式传入签名操作。
    私钥不参与 repr，避免被日志输出。

    Attributes:
        merchant_id: 商户号 mchid
        serial_no: 商户API证书序列号
        private_key: 商户API私钥
    """

    merchant_id: str
    serial_no: str
    private_key: rsa.RSAPrivateKey = field(repr=False, compare=False)
