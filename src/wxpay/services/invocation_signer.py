"""
APP 调起支付签名

下单成功拿到 prepay_id 后，服务端需要重新签名生成客户端调起支付的参数。
签名串：appId\\n时间戳\\n随机串\\nprepayId\\n

参考：https://pay.weixin.qq.com/wiki/doc/apiv3/apis/chapter4_1_4.shtml
"""

import logging

from ..models import ClientInvocationParams
from ..utils.canonical import build_invocation_message
from ..utils.nonce import Clock, NonceSource, current_timestamp, generate_nonce
from ..utils.rsa_signer import Signer

logger = logging.getLogger(__name__)


class ClientInvocationSigner:
    """调起支付签名器

    Args:
        signer: 签名器（使用商户私钥）
        nonce_source: 随机串生成函数
        clock: 时间戳生成函数
    """

    def __init__(
        self,
        signer: Signer,
        nonce_source: NonceSource = generate_nonce,
        clock: Clock = current_timestamp,
    ) -> None:
        self._signer = signer
        self._nonce_source = nonce_source
        self._clock = clock

    def sign(self, prepay_id: str, app_id: str) -> ClientInvocationParams:
        """生成调起支付参数

        Args:
            prepay_id: 下单返回的预支付交易会话标识
            app_id: 应用ID

        Returns:
            调起支付参数

        Raises:
            ValueError: 如果 prepay_id 或 app_id 为空
        """
        if not prepay_id:
            raise ValueError("prepay_id cannot be empty")
        if not app_id:
            raise ValueError("app_id cannot be empty")

        timestamp = self._clock()
        nonce = self._nonce_source()
        message = build_invocation_message(app_id, timestamp, nonce, prepay_id)

        params = ClientInvocationParams(
            app_id=app_id,
            timestamp=timestamp,
            nonce_str=nonce,
            prepay_id=prepay_id,
            sign=self._signer.sign(message),
        )
        logger.debug(f"Client invocation params signed for prepay_id={prepay_id}")
        return params
