"""
基于 email-validator 库的邮箱格式校验器，实现 FormatValidator 接口。
"""

from email_validator import EmailNotValidError, validate_email
from loguru import logger

from src.server.config import config


class EmailValidatorAdapter:
    """
    只有 EmailNotValidError 会被转换为 False，其余异常原样抛出，
    由控制器统一映射为 500。
    """

    def __init__(
        self,
        check_deliverability: bool | None = None,
        allow_smtputf8: bool | None = None,
    ) -> None:
        self.check_deliverability = (
            config.email_check_deliverability
            if check_deliverability is None
            else check_deliverability
        )
        self.allow_smtputf8 = (
            config.email_allow_smtputf8 if allow_smtputf8 is None else allow_smtputf8
        )

    def check_format(self, value: str) -> bool:
        try:
            validate_email(
                value,
                check_deliverability=self.check_deliverability,
                allow_smtputf8=self.allow_smtputf8,
            )
            return True
        except EmailNotValidError as e:
            logger.debug(f"邮箱未通过校验: {e}")
            return False
