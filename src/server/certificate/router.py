"""
证书请求校验的 FastAPI 路由定义。
路由只负责把 HTTP 请求转换为控制器的请求封装，并把响应封装写回，不做任何判断。
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .controller import CertificateController
from .errors import error_to_dict
from .factory import make_certificate_controller
from .schemas import HttpRequest

router = APIRouter(prefix="/certificate", tags=["Certificate"])


def get_certificate_controller() -> CertificateController:
    return make_certificate_controller()


@router.post("")
async def create_certificate(
    payload: Dict[str, Any] | None = Body(default=None),
    controller: CertificateController = Depends(get_certificate_controller),
) -> JSONResponse:
    """
    校验证书签发请求，返回控制器给出的状态码与响应体。
    """
    http_response = controller.handle(HttpRequest(body=payload or {}))

    body = http_response.body
    if isinstance(body, BaseModel):
        # 错误响应附带可读的 message
        body = error_to_dict(body)
    return JSONResponse(status_code=http_response.status_code, content=body)
