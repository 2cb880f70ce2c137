"""
证书签发请求的校验控制器。
在任何业务逻辑执行之前，检查必填字段并通过注入的校验器检查邮箱格式，
把所有结果映射为带状态码的响应。
"""

from typing import Any, Mapping

from loguru import logger

from .errors import InvalidParamError, MissingParamError
from .http_helpers import bad_request, ok, server_error
from .protocols import FormatValidator
from .schemas import REQUIRED_FIELDS, HttpRequest, HttpResponse


def _is_missing(body: Mapping[str, Any], field: str) -> bool:
    """
    字段不存在、为 None 或为空字符串时视为缺失。
    仅含空白的字符串和布尔值 False 都视为已提供。
    """
    value = body.get(field)
    return value is None or value == ""


class CertificateController:
    """
    校验证书签发请求。控制器本身无状态，可在多个请求间共享。
    """

    def __init__(self, email_validator: FormatValidator) -> None:
        self._email_validator = email_validator

    def handle(self, http_request: HttpRequest) -> HttpResponse:
        """
        处理一次请求，恰好返回一个响应。
        :param http_request: 请求封装，body 中应包含全部必填字段。
        :return: 400 (缺少参数/参数非法)、500 (校验器故障) 或 200。
        """
        body = http_request.body

        # 按固定顺序检查，遇到第一个缺失字段即返回
        for field in REQUIRED_FIELDS:
            if _is_missing(body, field):
                logger.debug(f"请求缺少参数: {field}")
                return bad_request(MissingParamError(field))

        student_email = body["studentEmail"]
        try:
            is_valid = self._email_validator.check_format(student_email)
        except Exception:
            logger.exception("邮箱校验器发生异常")
            return server_error()

        if not is_valid:
            logger.debug(f"邮箱格式非法: {student_email!r}")
            return bad_request(InvalidParamError("studentEmail"))

        return ok(dict(body))
