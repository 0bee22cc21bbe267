"""
Payment Profile Data Models

Payment profile entity, its discriminators, and the billing address value
object. Each API operation gets its own projection of the profile's
attributes, since create and update payloads differ per payment method.
"""

from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

from ...core.data_object import DataObject
from ...core.exceptions import EntityInvalidDataError


# ====================
# Discriminators
# ====================

class ProfileType(str, Enum):
    """Where the payment data is vaulted"""
    EXTERNAL_VAULT = "external_vault"
    SPREEDLY_VAULT = "spreedly_vault"
    SPREEDLY_DUAL_VAULT = "spreedly_dual_vault"


class PaymentMethodType(str, Enum):
    """Kind of payment method stored in the profile"""
    CREDIT_CARD = "credit_card"
    BANK_ACCOUNT = "bank_account"
    APPLE_PAY = "apple_pay"
    ANDROID_PAY = "android_pay"
    THIRD_PARTY_TOKEN = "third_party_token"


# ====================
# Billing Address
# ====================

class Address(BaseModel):
    """Billing address attached to a payment profile"""
    model_config = ConfigDict(frozen=True, extra="allow", coerce_numbers_to_str=True)

    id: Optional[Union[int, str]] = None
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    company: Optional[str] = None
    street1: Optional[str] = None
    street2: Optional[str] = None
    street3: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    postcode: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None

    def is_complete(self) -> bool:
        return bool(self.first_name and self.last_name)


# ====================
# Payment Profile
# ====================

class PaymentProfile(DataObject):
    """Stored customer payment method"""

    # Field names (wire format)
    CUSTOMER_ID = "customer_id"
    MAGENTO_CUSTOMER_ID = "magento_customer_id"
    CUSTOMER_EMAIL = "customer_email"
    CUSTOMER_FIRST_NAME = "customer_first_name"
    CUSTOMER_LAST_NAME = "customer_last_name"
    PAYMENT_TOKEN = "payment_token"
    PAYMENT_METHOD_TYPE = "payment_method_type"
    PROFILE_TYPE = "profile_type"
    STATUS = "status"
    PAYMENT_VAULT = "payment_vault"
    THIRD_PARTY_VAULT_TYPE = "third_party_vault_type"
    THIRD_PARTY_PAYMENT_TOKEN = "third_party_payment_token"
    CREDITCARD_TYPE = "creditcard_type"
    CREDITCARD_NUMBER = "creditcard_number"
    CREDITCARD_VERIFICATION_VALUE = "creditcard_verification_value"
    CREDITCARD_FIRST_DIGITS = "creditcard_first_digits"
    CREDITCARD_LAST_DIGITS = "creditcard_last_digits"
    CREDITCARD_MONTH = "creditcard_month"
    CREDITCARD_YEAR = "creditcard_year"
    BANK_ROUTING_NUMBER = "bank_routing_number"
    BANK_ACCOUNT_NUMBER = "bank_account_number"
    BANK_ACCOUNT_LAST_DIGITS = "bank_account_last_digits"
    BANK_ACCOUNT_TYPE = "bank_account_type"
    BANK_ACCOUNT_HOLDER_TYPE = "bank_account_holder_type"
    APPLE_PAY_PAYMENT_DATA = "apple_pay_payment_data"
    BILLING_ADDRESS = "billing_address"
    VAULT_SPECIFIC_FIELDS = "vault_specific_fields"
    TRANSACTION_ID = "transaction_id"
    CREATED = "created"
    UPDATED = "updated"

    # Projection tables: field -> required

    CREATING_FIELDS = {
        CUSTOMER_ID: True,
        CREDITCARD_NUMBER: True,
        CREDITCARD_VERIFICATION_VALUE: False,
        CREDITCARD_MONTH: True,
        CREDITCARD_YEAR: True,
        BILLING_ADDRESS: True,
    }
    UPDATING_FIELDS = {
        CREDITCARD_MONTH: False,
        CREDITCARD_YEAR: False,
        BILLING_ADDRESS: False,
    }

    EXTERNAL_VAULT_CREATING_FIELDS = {
        CUSTOMER_ID: True,
        PAYMENT_TOKEN: True,
        CREDITCARD_TYPE: False,
        CREDITCARD_FIRST_DIGITS: False,
        CREDITCARD_LAST_DIGITS: False,
        CREDITCARD_MONTH: False,
        CREDITCARD_YEAR: False,
        BILLING_ADDRESS: False,
        VAULT_SPECIFIC_FIELDS: False,
    }
    EXTERNAL_VAULT_UPDATING_FIELDS = {
        CREDITCARD_MONTH: False,
        CREDITCARD_YEAR: False,
        BILLING_ADDRESS: False,
        VAULT_SPECIFIC_FIELDS: False,
    }

    APPLE_PAY_CREATING_FIELDS = {
        CUSTOMER_ID: True,
        APPLE_PAY_PAYMENT_DATA: True,
        BILLING_ADDRESS: False,
    }
    APPLE_PAY_UPDATING_FIELDS = {
        BILLING_ADDRESS: False,
    }

    BANK_ACCOUNT_CREATING_FIELDS = {
        CUSTOMER_ID: True,
        BANK_ROUTING_NUMBER: True,
        BANK_ACCOUNT_NUMBER: True,
        BANK_ACCOUNT_TYPE: True,
        BANK_ACCOUNT_HOLDER_TYPE: True,
        BILLING_ADDRESS: True,
    }
    BANK_ACCOUNT_UPDATING_FIELDS = {
        BANK_ACCOUNT_TYPE: False,
        BANK_ACCOUNT_HOLDER_TYPE: False,
        BILLING_ADDRESS: False,
    }

    THIRD_PARTY_TOKEN_CREATING_FIELDS = {
        CUSTOMER_ID: True,
        THIRD_PARTY_VAULT_TYPE: True,
        THIRD_PARTY_PAYMENT_TOKEN: True,
        CREDITCARD_TYPE: False,
        CREDITCARD_FIRST_DIGITS: False,
        CREDITCARD_LAST_DIGITS: False,
        CREDITCARD_MONTH: False,
        CREDITCARD_YEAR: False,
        BILLING_ADDRESS: False,
    }
    THIRD_PARTY_TOKEN_UPDATING_FIELDS = {
        CREDITCARD_MONTH: False,
        CREDITCARD_YEAR: False,
        BILLING_ADDRESS: False,
    }

    TOKEN_FIELDS = {
        CUSTOMER_ID: True,
        BILLING_ADDRESS: True,
        CREDITCARD_MONTH: False,
        CREDITCARD_YEAR: False,
    }

    # ============ Accessors ============

    @property
    def profile_type(self) -> Optional[str]:
        return self.get(self.PROFILE_TYPE)

    @property
    def payment_method_type(self) -> Optional[str]:
        return self.get(self.PAYMENT_METHOD_TYPE)

    @property
    def customer_id(self) -> Optional[str]:
        return self.get(self.CUSTOMER_ID)

    @property
    def payment_token(self) -> Optional[str]:
        return self.get(self.PAYMENT_TOKEN)

    @property
    def billing_address(self) -> Optional[Address]:
        return self.get(self.BILLING_ADDRESS)

    def get_profile_type(self) -> Optional[str]:
        return self.profile_type

    def get_payment_method_type(self) -> Optional[str]:
        return self.payment_method_type

    def set_billing_address(self, address: Any) -> "PaymentProfile":
        return self.set(self.BILLING_ADDRESS, address)

    # ============ Form Data Projections ============

    def get_form_data(self) -> Dict[str, Any]:
        """Credit card payload; creating or updating fields depending on is_new()"""
        if self.is_new():
            return self._build_profile_form(self.CREATING_FIELDS, "credit card creation")
        return self._build_profile_form(self.UPDATING_FIELDS, "credit card update")

    def get_external_vault_creating_form_data(self) -> Dict[str, Any]:
        return self._build_profile_form(self.EXTERNAL_VAULT_CREATING_FIELDS, "external vault creation")

    def get_external_vault_saving_form_data(self) -> Dict[str, Any]:
        return self._build_profile_form(self.EXTERNAL_VAULT_UPDATING_FIELDS, "external vault update")

    def get_apple_pay_creating_form_data(self) -> Dict[str, Any]:
        return self._build_profile_form(self.APPLE_PAY_CREATING_FIELDS, "Apple Pay creation")

    def get_apple_pay_saving_form_data(self) -> Dict[str, Any]:
        return self._build_profile_form(self.APPLE_PAY_UPDATING_FIELDS, "Apple Pay update")

    def get_bank_account_creating_form_data(self) -> Dict[str, Any]:
        return self._build_profile_form(self.BANK_ACCOUNT_CREATING_FIELDS, "bank account creation")

    def get_bank_account_saving_form_data(self) -> Dict[str, Any]:
        return self._build_profile_form(self.BANK_ACCOUNT_UPDATING_FIELDS, "bank account update")

    def get_third_party_token_creating_form_data(self) -> Dict[str, Any]:
        return self._build_profile_form(self.THIRD_PARTY_TOKEN_CREATING_FIELDS, "third party token creation")

    def get_third_party_token_saving_form_data(self) -> Dict[str, Any]:
        return self._build_profile_form(self.THIRD_PARTY_TOKEN_UPDATING_FIELDS, "third party token update")

    def get_token_form_data(self) -> Dict[str, Any]:
        """Payload for storing a vault token, regardless of profile type"""
        return self._build_profile_form(self.TOKEN_FIELDS, "token storage")

    # ============ Internals ============

    def _normalize(self, key: str, value: Any) -> Any:
        if key == self.BILLING_ADDRESS and isinstance(value, dict):
            return Address.model_validate(value)
        if isinstance(value, Enum):
            return value.value
        return value

    def _build_profile_form(self, fields: Dict[str, bool], form_name: str) -> Dict[str, Any]:
        address = self.billing_address
        if fields.get(self.BILLING_ADDRESS) is not None and isinstance(address, Address) and not address.is_complete():
            raise EntityInvalidDataError(
                f"Billing address for {form_name} requires first_name and last_name"
            )
        return self._build_form_data(fields, form_name)


# ====================
# Request Models
# ====================

class PaymentProfileFilters(BaseModel):
    """Query filters accepted by the payment profile list endpoint"""
    model_config = ConfigDict(extra="forbid")

    customer_id: Optional[Any] = None
    magento_customer_id: Optional[Any] = None
    customer_email: Optional[Any] = None
    profile_type: Optional[Any] = None
    payment_method_type: Optional[Any] = None
    payment_token: Optional[Any] = None
    transaction_id: Optional[Any] = None

    @field_validator("*", mode="before")
    @classmethod
    def _enum_to_value(cls, value: Any) -> Any:
        return value.value if isinstance(value, Enum) else value

    @classmethod
    def allowed_names(cls) -> list:
        return list(cls.model_fields.keys())


__all__ = [
    "ProfileType",
    "PaymentMethodType",
    "Address",
    "PaymentProfile",
    "PaymentProfileFilters",
]
