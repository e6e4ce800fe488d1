"""
微信支付 API v3 常量定义
"""

from typing import Optional


class WxPayAuthScheme:
    """Authorization 头的认证类型"""

    # RSA-SHA256 签名，2048 位密钥
    RSA2048 = "WECHATPAY2-SHA256-RSA2048"


class WxPayTransactionPath:
    """下单接口路径（相对于网关地址）"""

    APP = "v3/pay/transactions/app"
    JSAPI = "v3/pay/transactions/jsapi"
    NATIVE = "v3/pay/transactions/native"
    H5 = "v3/pay/transactions/h5"

    # 下单接口 -> 响应中需要提取的字段
    RESPONSE_FIELDS = {
        APP: "prepay_id",
        JSAPI: "prepay_id",
        NATIVE: "code_url",
        H5: "h5_url",
    }

    @classmethod
    def response_field(cls, path: str) -> Optional[str]:
        """获取下单接口响应中的目标字段

        Args:
            path: 接口路径，允许带或不带前导斜杠

        Returns:
            字段名，未知接口返回 None
        """
        return cls.RESPONSE_FIELDS.get(path.lstrip("/"))


class WxPayNotifyCode:
    """回调应答码"""

    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


# APP 调起支付时的 package 固定值
APP_PAY_PACKAGE = "Sign=WXPay"

# 默认网关地址
DEFAULT_BASE_URL = "https://api.mch.weixin.qq.com/"

# AES-256-GCM
AES_KEY_LENGTH = 32
GCM_TAG_LENGTH = 16

# RSA 最小密钥长度
MIN_RSA_KEY_SIZE = 2048
