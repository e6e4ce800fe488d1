"""
微信支付HTTP客户端基类

负责连接管理和请求签名，子类只需实现具体接口。
"""

import logging
from typing import Optional

import httpx

from ..constants import DEFAULT_BASE_URL
from ..exceptions import TransportError
from ..models import Credential
from ..utils.authorization import RequestAuthorizer

logger = logging.getLogger(__name__)


class WxPayHTTPClient:
    """微信支付HTTP客户端基类

    职责：
    - 管理HTTP连接
    - 为每个请求生成 Authorization 请求头
    - 返回原始响应文本，由调用方负责转换

    Args:
        credential: 商户凭证
        base_url: 网关地址
        timeout: 请求超时时间（秒）
        proxy_url: 可选的代理URL
        authorizer: 可选的请求签名器，默认按凭证创建
        transport: 可选的自定义传输层（测试时注入）
    """

    USER_AGENT = "wxpay-service/1.0"

    def __init__(
        self,
        credential: Credential,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        proxy_url: Optional[str] = None,
        authorizer: Optional[RequestAuthorizer] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.credential = credential
        self.base_url = base_url.rstrip("/")
        self._authorizer = authorizer or RequestAuthorizer(credential)

        limits = httpx.Limits(max_keepalive_connections=5, max_connections=10)

        if transport is None and proxy_url:
            transport = httpx.AsyncHTTPTransport(proxy=proxy_url)

        self._client = httpx.AsyncClient(
            timeout=timeout,
            transport=transport,
            limits=limits,
        )

    async def __aenter__(self) -> "WxPayHTTPClient":
        """异步上下文管理器入口"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """异步上下文管理器退出"""
        await self.close()

    async def close(self) -> None:
        """关闭HTTP客户端"""
        await self._client.aclose()

    def build_url(self, path: str) -> str:
        """拼接网关地址与接口路径"""
        return f"{self.base_url}/{path.lstrip('/')}"

    def build_headers(self, method: str, url: str, body: str = "") -> dict:
        """构建签名请求头

        Args:
            method: HTTP方法
            url: 完整请求URL
            body: 请求体原文

        Returns:
            请求头字典
        """
        return {
            "Authorization": self._authorizer.authorize(method, url, body),
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": self.USER_AGENT,
        }

    async def _signed_request(self, method: str, path: str, body: str = "") -> str:
        """发送签名请求

        Args:
            method: HTTP方法
            path: 接口路径（如 "v3/pay/transactions/native"）
            body: JSON请求体字符串，签名与发送使用同一份字节

        Returns:
            响应体文本

        Raises:
            TransportError: 网络错误或非2xx响应
        """
        url = self.build_url(path)
        headers = self.build_headers(method, url, body)

        try:
            response = await self._client.request(
                method=method,
                url=url,
                content=body.encode("utf-8") if body else None,
                headers=headers,
            )
        except httpx.HTTPError as e:
            logger.error(f"WxPay request {method} {path} failed: {e}")
            raise TransportError(f"{method} {path} failed: {e}") from e

        logger.info(f"WxPay {method} {path} -> {response.status_code}")

        if not response.is_success:
            raise TransportError(
                f"{method} {path} returned {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )
        return response.text

    async def _post(self, path: str, body: str) -> str:
        """通用POST请求方法"""
        return await self._signed_request("POST", path, body)
