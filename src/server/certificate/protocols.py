"""
控制器依赖的外部能力接口。
"""

from typing import Protocol


class FormatValidator(Protocol):
    """
    校验字符串是否符合预期格式（此处为邮箱格式）。
    """

    def check_format(self, value: str) -> bool:
        """
        :param value: 待校验的原始字符串，调用方不做任何修剪。
        :return: 格式合法返回 True，否则返回 False。
        :raises Exception: 实现方可能因内部故障抛出任意异常。
        """
        ...
