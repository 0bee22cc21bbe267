"""
Payment Profile Factory

Builds payment profile entities of the configured class.
"""

from typing import Optional, Union

from ...core.config import ClientConfig
from ...core.data_factory import DataFactory
from .models import PaymentProfile
from .protocols import PaymentProfileProtocol


class PaymentProfileFactory(DataFactory[PaymentProfile]):
    """DataFactory bound to PaymentProfileProtocol"""

    def __init__(self, instance_class: Union[str, type, None] = None):
        super().__init__(instance_class or PaymentProfile, PaymentProfileProtocol)

    @classmethod
    def from_config(cls, config: Optional[ClientConfig] = None) -> "PaymentProfileFactory":
        config = config or ClientConfig.from_env()
        return cls(config.payment_profile_class)


__all__ = ["PaymentProfileFactory"]
