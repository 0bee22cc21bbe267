"""
Payment Profile Service Protocols (Interfaces)

Capability a configured payment profile class must provide.
NO import-time I/O dependencies - safe to import anywhere.
"""
from typing import Any, Dict, Optional, Protocol, runtime_checkable

from ...core.protocols import DataObjectProtocol


@runtime_checkable
class PaymentProfileProtocol(DataObjectProtocol, Protocol):
    """
    Interface for payment profile entities.

    PaymentProfileService reads the discriminators and calls the form data
    projections; a class missing any of them is rejected by the factory.
    """

    def get_profile_type(self) -> Optional[str]:
        ...

    def get_payment_method_type(self) -> Optional[str]:
        ...

    def get_form_data(self) -> Dict[str, Any]:
        ...

    def get_external_vault_creating_form_data(self) -> Dict[str, Any]:
        ...

    def get_external_vault_saving_form_data(self) -> Dict[str, Any]:
        ...

    def get_apple_pay_creating_form_data(self) -> Dict[str, Any]:
        ...

    def get_apple_pay_saving_form_data(self) -> Dict[str, Any]:
        ...

    def get_bank_account_creating_form_data(self) -> Dict[str, Any]:
        ...

    def get_bank_account_saving_form_data(self) -> Dict[str, Any]:
        ...

    def get_third_party_token_creating_form_data(self) -> Dict[str, Any]:
        ...

    def get_third_party_token_saving_form_data(self) -> Dict[str, Any]:
        ...

    def get_token_form_data(self) -> Dict[str, Any]:
        ...


__all__ = ["PaymentProfileProtocol"]
