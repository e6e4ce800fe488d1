"""
微信支付下单客户端

支持 APP、JSAPI、Native、H5 四种下单方式，按接口返回对应字段：
- APP / JSAPI: prepay_id
- Native: code_url
- H5: h5_url

接口文档: https://pay.weixin.qq.com/wiki/doc/apiv3/apis/index.shtml
"""

import json
import logging
from typing import Optional, Union

from ..constants import WxPayTransactionPath
from ..exceptions import TransportError
from .base_http_client import WxPayHTTPClient

logger = logging.getLogger(__name__)


class WxPayTransactionClient(WxPayHTTPClient):
    """微信支付下单客户端

    请求体可传入字典或JSON字符串。传入字符串时原样签名并发送，
    与微信官方文档中的请求示例保持一致。
    """

    @staticmethod
    def _serialize(body: Union[dict, str]) -> str:
        """序列化请求体"""
        if isinstance(body, str):
            return body
        return json.dumps(body, ensure_ascii=False, separators=(",", ":"))

    async def create_order(self, path: str, body: Union[dict, str]) -> Optional[str]:
        """下单

        Args:
            path: 下单接口路径
            body: 请求体

        Returns:
            已知下单接口返回对应字段值（字段缺失时为 None），
            其他接口返回原始响应文本

        Raises:
            TransportError: 请求失败或响应不是合法JSON
        """
        text = await self._post(path, self._serialize(body))

        field = WxPayTransactionPath.response_field(path)
        if field is None:
            return text

        try:
            data = json.loads(text)
        except ValueError as e:
            raise TransportError(f"Invalid JSON response from {path}", body=text) from e

        value = data.get(field) if isinstance(data, dict) else None
        if value is None:
            logger.warning(f"Response from {path} has no {field}")
        return value

    async def create_app_order(self, body: Union[dict, str]) -> Optional[str]:
        """APP下单

        Returns:
            prepay_id
        """
        return await self.create_order(WxPayTransactionPath.APP, body)

    async def create_jsapi_order(self, body: Union[dict, str]) -> Optional[str]:
        """JSAPI下单

        Returns:
            prepay_id
        """
        return await self.create_order(WxPayTransactionPath.JSAPI, body)

    async def create_native_order(self, body: Union[dict, str]) -> Optional[str]:
        """Native下单

        Returns:
            二维码链接 code_url
        """
        return await self.create_order(WxPayTransactionPath.NATIVE, body)

    async def create_h5_order(self, body: Union[dict, str]) -> Optional[str]:
        """H5下单

        Returns:
            支付跳转链接 h5_url
        """
        return await self.create_order(WxPayTransactionPath.H5, body)
