"""
测试 APP 调起支付签名
"""

from unittest.mock import patch

import pytest

from wxpay.services.invocation_signer import ClientInvocationSigner
from wxpay.utils.rsa_signer import RSASigner

PREPAY_ID = "WX1217752501201407033233368018"
APP_ID = "wx8888888888888888"


class TestClientInvocationSigner:
    """调起支付签名器测试"""

    def test_sign_with_fixed_values(self, rsa_private_key):
        """测试固定随机串和时间戳时的签名结果"""
        signer = RSASigner(rsa_private_key)
        invocation_signer = ClientInvocationSigner(
            signer,
            nonce_source=lambda: "5K8264ILTKCH16CQ2502SI8ZNMTM67VS",
            clock=lambda: "1414561699",
        )

        params = invocation_signer.sign(PREPAY_ID, APP_ID)

        assert params.app_id == APP_ID
        assert params.timestamp == "1414561699"
        assert params.nonce_str == "5K8264ILTKCH16CQ2502SI8ZNMTM67VS"
        assert params.prepay_id == PREPAY_ID
        assert params.package == "Sign=WXPay"

        message = f"{APP_ID}\n1414561699\n5K8264ILTKCH16CQ2502SI8ZNMTM67VS\n{PREPAY_ID}\n"
        assert signer.verify(message, params.sign) is True

    def test_serialized_keys(self, rsa_private_key):
        """测试序列化使用客户端SDK字段名"""
        params = ClientInvocationSigner(RSASigner(rsa_private_key)).sign(PREPAY_ID, APP_ID)

        data = params.model_dump()

        assert set(data) == {"appid", "timeStamp", "nonceStr", "prepayid", "package", "sign"}
        assert data["package"] == "Sign=WXPay"

    def test_default_nonce_and_timestamp(self, rsa_private_key):
        """测试默认随机串为32位十六进制，时间戳为秒级"""
        with patch("wxpay.utils.nonce.time.time", return_value=1690000000.75):
            params = ClientInvocationSigner(RSASigner(rsa_private_key)).sign(PREPAY_ID, APP_ID)

        assert params.timestamp == "1690000000"
        assert len(params.nonce_str) == 32
        int(params.nonce_str, 16)

    def test_nonce_unique_across_calls(self, rsa_private_key):
        invocation_signer = ClientInvocationSigner(RSASigner(rsa_private_key))

        nonces = {invocation_signer.sign(PREPAY_ID, APP_ID).nonce_str for _ in range(5)}

        assert len(nonces) == 5

    @pytest.mark.parametrize("prepay_id,app_id", [("", APP_ID), (PREPAY_ID, "")])
    def test_empty_input_rejected(self, rsa_private_key, prepay_id, app_id):
        with pytest.raises(ValueError):
            ClientInvocationSigner(RSASigner(rsa_private_key)).sign(prepay_id, app_id)
