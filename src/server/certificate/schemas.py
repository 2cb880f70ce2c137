"""
证书请求校验的数据模型定义。
"""

from typing import Any, Dict

from pydantic import BaseModel, Field

# 必填字段，按此顺序逐一检查
REQUIRED_FIELDS = ("certificateId", "studentId", "studentEmail", "activePlan")


class HttpRequest(BaseModel):
    """
    传入控制器的请求封装。
    """
    body: Dict[str, Any] = Field(default_factory=dict)


class HttpResponse(BaseModel):
    """
    控制器返回的响应封装，由传输层转换为真实的 HTTP 响应。
    """
    status_code: int
    body: Any = None
