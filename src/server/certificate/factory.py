from .controller import CertificateController
from .email_validator_adapter import EmailValidatorAdapter


def make_certificate_controller() -> CertificateController:
    """组装生产环境使用的证书请求控制器。"""
    return CertificateController(EmailValidatorAdapter())
