"""
随机串与时间戳

签名相关组件通过参数注入这两个函数，测试时可以替换为固定值。
"""

import time
import uuid
from typing import Callable

NonceSource = Callable[[], str]
Clock = Callable[[], str]


def generate_nonce() -> str:
    """生成请求随机串

    Returns:
        32位十六进制字符串（UUID4，122位随机熵）
    """
    return uuid.uuid4().hex


def current_timestamp() -> str:
    """生成秒级时间戳

    Returns:
        10位秒级时间戳字符串
    """
    return str(int(time.time()))
