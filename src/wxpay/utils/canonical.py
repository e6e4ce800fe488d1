"""
签名串构造

微信支付要求签名串为若干字段按固定顺序排列，每个字段后跟一个换行符（\\n），
包括最后一个字段。网关会按完全相同的字节序列验签，字段顺序不能调整。

两种签名串：
- 请求签名串: HTTP方法\\nURL\\n时间戳\\n随机串\\n请求体\\n
- 调起支付签名串: appId\\n时间戳\\n随机串\\nprepayId\\n
"""

from typing import Optional, Sequence
from urllib.parse import urlsplit


def build_sign_message(fields: Optional[Sequence[str]]) -> Optional[str]:
    """构造签名串

    Args:
        fields: 按顺序排列的字段

    Returns:
        每个字段后跟一个换行符的字符串，字段列表为空时返回 None
    """
    if not fields:
        return None
    return "".join(f"{field}\n" for field in fields)


def canonical_url(url: str) -> str:
    """提取参与签名的 URL 部分

    只保留路径和查询参数（保持编码后的原样），不含协议和域名。
    路径总是以 / 开头；URL 以 ? 结尾时保留空查询。

    Args:
        url: 完整URL或接口路径（可不带前导斜杠）

    Returns:
        路径，若有查询参数则附加 ?query
    """
    parts = urlsplit(url)
    path = parts.path or "/"
    if not path.startswith("/"):
        path = "/" + path
    if parts.query or "?" in url.split("#", 1)[0]:
        return f"{path}?{parts.query}"
    return path


def build_request_message(
    method: str,
    url: str,
    timestamp: str,
    nonce: str,
    body: str = "",
) -> str:
    """构造 API 请求签名串

    Args:
        method: HTTP方法（如 POST）
        url: 请求URL，可为完整地址或路径
        timestamp: Unix时间戳（秒）
        nonce: 请求随机串
        body: 请求体原文，GET 请求为空串

    Returns:
        请求签名串
    """
    return build_sign_message(
        [method, canonical_url(url), str(timestamp), nonce, body]
    )


def build_invocation_message(
    app_id: str,
    timestamp: str,
    nonce: str,
    prepay_id: str,
) -> str:
    """构造调起支付签名串"""
    return build_sign_message([app_id, str(timestamp), nonce, prepay_id])
