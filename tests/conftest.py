"""
测试配置

提供测试用的RSA密钥、商户凭证和加密回调报文。
"""

import base64
import json
from typing import Callable

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from wxpay.models import Credential

API_V3_KEY = b"0123456789abcdefghijklmnopqrstuv"
MCH_ID = "1900000001"
SERIAL_NO = "5157F09EFDC096DE15EBE81A47057A7232F1B8E1"


def generate_rsa_key(key_size: int = 2048) -> rsa.RSAPrivateKey:
    """生成测试用RSA私钥"""
    return rsa.generate_private_key(public_exponent=65537, key_size=key_size)


def to_pkcs8_pem(private_key: rsa.RSAPrivateKey) -> bytes:
    return private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )


def encrypt_resource(
    plaintext: str,
    key: bytes = API_V3_KEY,
    nonce: str = "fdasflkja484",
    associated_data: str = "transaction",
) -> dict:
    """按微信支付回调格式加密，返回 resource 对象"""
    ciphertext = AESGCM(key).encrypt(
        nonce.encode("utf-8"),
        plaintext.encode("utf-8"),
        associated_data.encode("utf-8"),
    )
    return {
        "original_type": "transaction",
        "algorithm": "AEAD_AES_256_GCM",
        "ciphertext": base64.b64encode(ciphertext).decode("ascii"),
        "associated_data": associated_data,
        "nonce": nonce,
    }


@pytest.fixture(scope="session")
def rsa_private_key() -> rsa.RSAPrivateKey:
    return generate_rsa_key()


@pytest.fixture(scope="session")
def rsa_private_pem(rsa_private_key) -> bytes:
    return to_pkcs8_pem(rsa_private_key)


@pytest.fixture
def credential(rsa_private_key) -> Credential:
    return Credential(
        merchant_id=MCH_ID,
        serial_no=SERIAL_NO,
        private_key=rsa_private_key,
    )


@pytest.fixture
def transaction_plaintext() -> str:
    return json.dumps(
        {
            "mchid": MCH_ID,
            "appid": "wxd678efh567hg6787",
            "out_trade_no": "1217752501201407033233368018",
            "transaction_id": "1217752501201407033233368018",
            "trade_type": "APP",
            "trade_state": "SUCCESS",
            "amount": {"total": 100, "currency": "CNY"},
        },
        ensure_ascii=False,
    )


@pytest.fixture
def make_notification() -> Callable[..., str]:
    """构造加密后的回调报文"""

    def _make(plaintext: str, **kwargs) -> str:
        return json.dumps(
            {
                "id": "EV-2018022511223320873",
                "create_time": "2015-05-20T13:29:35+08:00",
                "resource_type": "encrypt-resource",
                "event_type": "TRANSACTION.SUCCESS",
                "summary": "支付成功",
                "resource": encrypt_resource(plaintext, **kwargs),
            },
            ensure_ascii=False,
        )

    return _make
