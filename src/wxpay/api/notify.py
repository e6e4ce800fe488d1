"""
支付回调通知 API

POST /api/v1/wxpay/notify

微信支付服务器推送支付结果，处理成功返回 200，失败返回 500（微信会按策略重试）。
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ..services.notification_service import NotificationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/wxpay", tags=["wxpay"])

# 由应用启动时注入
_notification_service: Optional[NotificationService] = None


def set_notification_service(service: Optional[NotificationService]) -> None:
    """注入回调通知服务"""
    global _notification_service
    _notification_service = service


def get_notification_service() -> NotificationService:
    """获取回调通知服务（FastAPI依赖）"""
    if _notification_service is None:
        raise RuntimeError("NotificationService is not initialized")
    return _notification_service


@router.post("/notify")
async def notify(
    request: Request,
    service: NotificationService = Depends(get_notification_service),
) -> JSONResponse:
    """支付结果通知

    Args:
        request: 回调请求
        service: 回调通知服务

    Returns:
        {"code": "SUCCESS", "message": "SUCCESS"} 或 {"code": "ERROR", "message": "..."}
    """
    body = await request.body()
    result = await service.handle(body)
    return JSONResponse(
        status_code=result.status_code,
        content=result.response.model_dump(),
    )
