"""
测试 email_validator_adapter.py 模块。
"""

from unittest.mock import patch

import pytest

from src.server.certificate import email_validator_adapter
from src.server.certificate.email_validator_adapter import EmailValidatorAdapter


@pytest.fixture
def adapter():
    return EmailValidatorAdapter(check_deliverability=False)


@pytest.mark.parametrize("email", ["anyEmail@gmail.com", "student.name+tag@university.edu"])
def test_valid_email(adapter, email):
    assert adapter.check_format(email) is True


@pytest.mark.parametrize("email", ["invalid_email", "no-domain@", "@example.com", "a@b@c.com"])
def test_invalid_email(adapter, email):
    assert adapter.check_format(email) is False


def test_unexpected_error_propagates(adapter):
    """非 EmailNotValidError 的异常交由控制器处理"""
    with patch.object(email_validator_adapter, "validate_email", side_effect=RuntimeError("dns")):
        with pytest.raises(RuntimeError):
            adapter.check_format("anyEmail@gmail.com")


def test_options_are_forwarded():
    adapter = EmailValidatorAdapter(check_deliverability=True, allow_smtputf8=False)
    with patch.object(email_validator_adapter, "validate_email") as mock_validate:
        assert adapter.check_format("anyEmail@gmail.com") is True
    mock_validate.assert_called_once_with(
        "anyEmail@gmail.com", check_deliverability=True, allow_smtputf8=False
    )


def test_defaults_come_from_config(monkeypatch):
    monkeypatch.setattr(email_validator_adapter.config, "email_check_deliverability", True)
    monkeypatch.setattr(email_validator_adapter.config, "email_allow_smtputf8", False)
    adapter = EmailValidatorAdapter()
    assert adapter.check_deliverability is True
    assert adapter.allow_smtputf8 is False
