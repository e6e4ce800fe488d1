"""
测试 Authorization 请求头构造
"""

import re

import pytest

from wxpay.constants import WxPayTransactionPath
from wxpay.utils.authorization import (
    RequestAuthorizer,
    build_authorization_header,
    build_authorization_token,
)
from wxpay.utils.canonical import build_request_message
from wxpay.utils.rsa_signer import RSASigner

from .conftest import MCH_ID, SERIAL_NO


class TestAuthorizationToken:
    """认证信息拼接测试"""

    def test_exact_format(self):
        """测试字段顺序和引号格式"""
        token = build_authorization_token(
            merchant_id="10000",
            nonce="n1",
            timestamp="1690000000",
            serial_no="SER1",
            signature="SIGB64",
        )

        assert token == (
            'mchid="10000",nonce_str="n1",timestamp="1690000000",'
            'serial_no="SER1",signature="SIGB64"'
        )

    @pytest.mark.parametrize(
        "field", ["merchant_id", "nonce", "timestamp", "serial_no", "signature"]
    )
    def test_quote_in_any_field_rejected(self, field):
        """测试任一字段包含双引号时被拒绝"""
        values = {
            "merchant_id": "10000",
            "nonce": "n1",
            "timestamp": "1690000000",
            "serial_no": "SER1",
            "signature": "SIGB64",
        }
        values[field] = 'bad"value'

        with pytest.raises(ValueError):
            build_authorization_token(**values)

    def test_header_prefix(self):
        header = build_authorization_header("WECHATPAY2-SHA256-RSA2048", 'mchid="1"')
        assert header == 'WECHATPAY2-SHA256-RSA2048 mchid="1"'


class TestRequestAuthorizer:
    """请求签名器测试"""

    def test_authorize_with_fixed_nonce_and_clock(self, credential):
        """测试固定随机串和时间戳时生成的请求头"""
        authorizer = RequestAuthorizer(
            credential,
            nonce_source=lambda: "abc123",
            clock=lambda: "1690000000",
        )
        url = "https://api.mch.weixin.qq.com/v3/pay/transactions/native"
        body = '{"a":1}'

        header = authorizer.authorize("POST", url, body)

        scheme, token = header.split(" ", 1)
        assert scheme == "WECHATPAY2-SHA256-RSA2048"
        fields = dict(re.findall(r'(\w+)="([^"]*)"', token))
        assert fields["mchid"] == MCH_ID
        assert fields["nonce_str"] == "abc123"
        assert fields["timestamp"] == "1690000000"
        assert fields["serial_no"] == SERIAL_NO
        assert list(fields) == ["mchid", "nonce_str", "timestamp", "serial_no", "signature"]

        signer = RSASigner(credential.private_key)
        expected_message = 'POST\n/v3/pay/transactions/native\n1690000000\nabc123\n{"a":1}\n'
        assert build_request_message("POST", url, "1690000000", "abc123", body) == expected_message
        assert signer.verify(expected_message, fields["signature"]) is True

    def test_signature_bound_to_body(self, credential):
        """测试签名与请求体绑定"""
        authorizer = RequestAuthorizer(
            credential,
            nonce_source=lambda: "n",
            clock=lambda: "1",
        )
        url = "https://api.mch.weixin.qq.com/v3/pay/transactions/app"

        header = authorizer.authorize("POST", url, '{"a":1}')
        signature = dict(re.findall(r'(\w+)="([^"]*)"', header))["signature"]

        signer = RSASigner(credential.private_key)
        tampered = build_request_message("POST", url, "1", "n", '{"a":2}')
        assert signer.verify(tampered, signature) is False

    def test_relative_path_signed_with_leading_slash(self, credential):
        """测试按接口路径签名时与网关验签串一致"""
        authorizer = RequestAuthorizer(
            credential,
            nonce_source=lambda: "n",
            clock=lambda: "1",
        )

        header = authorizer.authorize("POST", WxPayTransactionPath.NATIVE, "{}")
        signature = dict(re.findall(r'(\w+)="([^"]*)"', header))["signature"]

        signer = RSASigner(credential.private_key)
        assert signer.verify("POST\n/v3/pay/transactions/native\n1\nn\n{}\n", signature) is True

    def test_fresh_nonce_per_request(self, credential):
        """测试每次请求生成新的随机串"""
        authorizer = RequestAuthorizer(credential)

        first = authorizer.authorize("POST", "/v3/pay/transactions/h5", "{}")
        second = authorizer.authorize("POST", "/v3/pay/transactions/h5", "{}")

        nonce_1 = re.search(r'nonce_str="([^"]*)"', first).group(1)
        nonce_2 = re.search(r'nonce_str="([^"]*)"', second).group(1)
        assert nonce_1 != nonce_2
        assert len(nonce_1) == 32
