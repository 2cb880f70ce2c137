"""
证书请求校验的错误类型。

错误以值的形式返回给调用方，而不是抛出；相同类型、相同字段的两个错误相等。
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class MissingParamError(BaseModel):
    """缺少必填参数。"""
    model_config = ConfigDict(frozen=True)

    error: Literal["MissingParamError"] = "MissingParamError"
    param_name: str

    def __init__(self, param_name: str, **data):
        super().__init__(param_name=param_name, **data)

    @property
    def message(self) -> str:
        return f"Missing param: {self.param_name}"


class InvalidParamError(BaseModel):
    """参数存在但取值非法。"""
    model_config = ConfigDict(frozen=True)

    error: Literal["InvalidParamError"] = "InvalidParamError"
    param_name: str

    def __init__(self, param_name: str, **data):
        super().__init__(param_name=param_name, **data)

    @property
    def message(self) -> str:
        return f"Invalid param: {self.param_name}"


class ServerError(BaseModel):
    """内部协作方发生未预期的错误，不向调用方暴露任何细节。"""
    model_config = ConfigDict(frozen=True)

    error: Literal["ServerError"] = "ServerError"

    @property
    def message(self) -> str:
        return "Internal server error"


ErrorBody = Annotated[
    Union[MissingParamError, InvalidParamError, ServerError],
    Field(discriminator="error"),
]


def error_to_dict(error: ErrorBody) -> dict:
    """序列化错误，附带可读的 message 字段。"""
    data = error.model_dump()
    data["message"] = error.message
    return data
