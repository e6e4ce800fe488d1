"""
Pydantic模型基类

微信支付报文字段命名不统一（如 appid、timeStamp、nonceStr 并存），
因此各模型通过 Field(alias=...) 显式声明报文字段名：
- 内部统一使用 snake_case 属性
- 序列化时默认输出报文字段名
"""

from pydantic import BaseModel, ConfigDict


class WxPayModel(BaseModel):
    """微信支付报文模型基类

    解析时同时接受报文字段名和属性名，未声明的字段忽略。
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )

    def model_dump(self, **kwargs):
        """序列化时默认使用报文字段名"""
        kwargs.setdefault("by_alias", True)
        return super().model_dump(**kwargs)

    def model_dump_json(self, **kwargs):
        """JSON序列化时默认使用报文字段名"""
        kwargs.setdefault("by_alias", True)
        return super().model_dump_json(**kwargs)
