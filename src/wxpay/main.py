"""
微信支付服务主入口

- HTTP REST: /health (服务状态查询)
- 回调通知: /api/v1/wxpay/notify

启动后 app.state 提供 transaction_client（下单）和 invocation_signer
（APP 调起支付签名，appid 取 settings.app_id）。

配置见 wxpay.config，额外环境变量：
- LOG_LEVEL: 日志级别（默认INFO）
- WXPAY_HOST / WXPAY_PORT: 监听地址（默认 0.0.0.0:8000）
"""

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.responses import JSONResponse

from .api import notify_router, set_notification_service
from .clients import WxPayTransactionClient
from .config import WxPaySettings
from .models import TransactionNotification
from .services import ClientInvocationSigner, NotificationService
from .utils import AesGcmDecryptor, RSASigner

load_dotenv()

logging.basicConfig(
    level=getattr(logging, os.getenv("LOG_LEVEL", "INFO")),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def log_paid_order(notification: TransactionNotification) -> None:
    """默认业务回调：仅记录订单号，业务方可替换"""
    logger.info(
        f"Order paid: out_trade_no={notification.out_trade_no}, "
        f"transaction_id={notification.transaction_id}"
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理

    启动时加载配置和商户私钥（仅加载一次），关闭时释放HTTP连接。
    """
    logger.info("Starting WxPay service...")

    settings = WxPaySettings.from_env()
    credential = settings.load_credential()
    logger.info(f"Merchant credential loaded: mchid={credential.merchant_id}")

    signer = RSASigner(credential.private_key)
    transaction_client = WxPayTransactionClient(
        credential=credential,
        base_url=settings.base_url,
        timeout=settings.timeout,
        proxy_url=settings.proxy_url,
    )
    notification_service = NotificationService(
        decryptor=AesGcmDecryptor(settings.api_v3_key_bytes),
        on_paid=log_paid_order,
    )
    set_notification_service(notification_service)

    app.state.settings = settings
    app.state.transaction_client = transaction_client
    app.state.invocation_signer = ClientInvocationSigner(signer)

    try:
        yield
    finally:
        set_notification_service(None)
        await transaction_client.close()
        logger.info("WxPay service shutdown complete")


app = FastAPI(
    title="WxPay Service",
    description="微信支付 API v3 签名与回调服务",
    version="1.0.0",
    lifespan=lifespan,
)
app.include_router(notify_router)


@app.get("/health")
async def health() -> JSONResponse:
    """健康检查端点"""
    initialized = hasattr(app.state, "transaction_client")
    return JSONResponse(
        content={
            "status": "healthy" if initialized else "not initialized",
        }
    )


def main() -> None:
    """启动服务

    使用 uvicorn 作为 ASGI 服务器。
    """
    import uvicorn

    uvicorn.run(
        "wxpay.main:app",
        host=os.getenv("WXPAY_HOST", "0.0.0.0"),
        port=int(os.getenv("WXPAY_PORT", "8000")),
        reload=False,
        log_level="info",
    )


if __name__ == "__main__":
    main()
