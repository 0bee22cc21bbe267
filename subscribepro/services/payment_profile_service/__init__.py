"""
Payment Profile Service - Vaulted customer payment methods

Create, update, list and redact payment profiles, and store vault tokens
as profiles.
"""

from .factory import create_payment_profile_service
from .models import Address, PaymentMethodType, PaymentProfile, PaymentProfileFilters, ProfileType
from .payment_profile_service import PaymentProfileService, SaveStrategy, resolve_save_strategy
from .profile_factory import PaymentProfileFactory
from .protocols import PaymentProfileProtocol

__all__ = [
    "Address",
    "PaymentMethodType",
    "PaymentProfile",
    "PaymentProfileFactory",
    "PaymentProfileFilters",
    "PaymentProfileProtocol",
    "PaymentProfileService",
    "ProfileType",
    "SaveStrategy",
    "create_payment_profile_service",
    "resolve_save_strategy",
]
