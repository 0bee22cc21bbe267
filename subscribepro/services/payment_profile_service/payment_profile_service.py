"""
Payment Profile Service

Vault payment profile operations against the SubscribePro API.

Saving a profile picks one of five strategies from the profile's
(profile_type, payment_method_type) pair. Every strategy then follows the
same shape: creating payload + type-specific endpoint for a new profile,
saving payload + the generic profile endpoint for an existing one, and the
response is hydrated into the very instance that was passed in.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from ...core.base_service import BaseService
from ...core.exceptions import EntityInvalidDataError, InvalidArgumentError
from ...core.protocols import TransportProtocol
from .models import PaymentMethodType, PaymentProfile, PaymentProfileFilters, ProfileType
from .profile_factory import PaymentProfileFactory

logger = logging.getLogger(__name__)


# ====================
# Save Strategies
# ====================

@dataclass(frozen=True)
class SaveStrategy:
    """How one kind of profile is created and updated"""
    name: str
    create_path: str
    creating_form: str
    saving_form: str


EXTERNAL_VAULT_STRATEGY = SaveStrategy(
    name="external_vault",
    create_path="/services/v2/vault/paymentprofile/external-vault.json",
    creating_form="get_external_vault_creating_form_data",
    saving_form="get_external_vault_saving_form_data",
)
CREDIT_CARD_STRATEGY = SaveStrategy(
    name="credit_card",
    create_path="/services/v2/vault/paymentprofile/creditcard.json",
    creating_form="get_form_data",
    saving_form="get_form_data",
)
APPLE_PAY_STRATEGY = SaveStrategy(
    name="apple_pay",
    create_path="/services/v2/vault/paymentprofile/applepay.json",
    creating_form="get_apple_pay_creating_form_data",
    saving_form="get_apple_pay_saving_form_data",
)
BANK_ACCOUNT_STRATEGY = SaveStrategy(
    name="bank_account",
    create_path="/services/v2/vault/paymentprofile/bankaccount.json",
    creating_form="get_bank_account_creating_form_data",
    saving_form="get_bank_account_saving_form_data",
)
THIRD_PARTY_TOKEN_STRATEGY = SaveStrategy(
    name="third_party_token",
    create_path="/services/v2/paymentprofile/third-party-token.json",
    creating_form="get_third_party_token_creating_form_data",
    saving_form="get_third_party_token_saving_form_data",
)

# Profiles with no (or an unknown) type have always been saved as credit cards
LEGACY_DEFAULT_STRATEGY = CREDIT_CARD_STRATEGY

SPREEDLY_VAULT_STRATEGIES: Dict[str, SaveStrategy] = {
    PaymentMethodType.CREDIT_CARD.value: CREDIT_CARD_STRATEGY,
    PaymentMethodType.BANK_ACCOUNT.value: BANK_ACCOUNT_STRATEGY,
    PaymentMethodType.THIRD_PARTY_TOKEN.value: THIRD_PARTY_TOKEN_STRATEGY,
    PaymentMethodType.APPLE_PAY.value: APPLE_PAY_STRATEGY,
}

# Recognized but rejected
UNSUPPORTED_PROFILE_TYPES = frozenset({ProfileType.SPREEDLY_DUAL_VAULT.value})
UNSUPPORTED_PAYMENT_METHOD_TYPES = frozenset({PaymentMethodType.ANDROID_PAY.value})


def _discriminator(value: Any) -> Optional[str]:
    if isinstance(value, Enum):
        value = value.value
    return value or None


def resolve_save_strategy(profile_type: Any, payment_method_type: Any) -> SaveStrategy:
    """
    Pick the save strategy for a (profile_type, payment_method_type) pair

    Resolution:
        external_vault                          -> external vault
        spreedly_dual_vault                     -> rejected
        spreedly_vault or no profile type:
            bank_account / third_party_token / apple_pay -> matching strategy
            android_pay                         -> rejected
            credit_card, none or anything else  -> credit card (legacy default)
        any other profile type                  -> credit card (legacy default)

    Raises:
        EntityInvalidDataError: For recognized but unsupported types
    """
    profile_type = _discriminator(profile_type)
    payment_method_type = _discriminator(payment_method_type)

    if profile_type == ProfileType.EXTERNAL_VAULT.value:
        return EXTERNAL_VAULT_STRATEGY
    if profile_type in UNSUPPORTED_PROFILE_TYPES:
        raise EntityInvalidDataError(f"Unsupported profile type: {profile_type}")
    if profile_type not in (None, ProfileType.SPREEDLY_VAULT.value):
        return LEGACY_DEFAULT_STRATEGY

    if payment_method_type in UNSUPPORTED_PAYMENT_METHOD_TYPES:
        raise EntityInvalidDataError(f"Unsupported payment method type: {payment_method_type}")
    return SPREEDLY_VAULT_STRATEGIES.get(payment_method_type, LEGACY_DEFAULT_STRATEGY)


# ====================
# Service
# ====================

class PaymentProfileService(BaseService):
    """Payment profile vault operations"""

    NAME = "payment_profile"

    API_NAME_PROFILE = "payment_profile"
    API_NAME_PROFILES = "payment_profiles"
    API_NAME_META = "_meta"

    UPDATE_PATH = "/services/v2/vault/paymentprofiles/{profile_id}.json"

    def __init__(
        self,
        http_client: TransportProtocol,
        data_factory: Optional[PaymentProfileFactory] = None,
    ):
        super().__init__(http_client, data_factory or PaymentProfileFactory())

    # ============ Local Construction ============

    def create_profile(self, payment_profile_data: Optional[Dict[str, Any]] = None) -> PaymentProfile:
        """Alias of create_credit_card_profile"""
        return self.create_credit_card_profile(payment_profile_data)

    def create_external_vault_profile(self, payment_profile_data: Optional[Dict[str, Any]] = None) -> PaymentProfile:
        data = dict(payment_profile_data or {})
        data[PaymentProfile.PROFILE_TYPE] = ProfileType.EXTERNAL_VAULT.value
        return self.data_factory.create(data)

    def create_credit_card_profile(self, payment_profile_data: Optional[Dict[str, Any]] = None) -> PaymentProfile:
        return self._create_spreedly_profile(payment_profile_data, PaymentMethodType.CREDIT_CARD)

    def create_bank_account_profile(self, payment_profile_data: Optional[Dict[str, Any]] = None) -> PaymentProfile:
        return self._create_spreedly_profile(payment_profile_data, PaymentMethodType.BANK_ACCOUNT)

    def create_apple_pay_profile(self, payment_profile_data: Optional[Dict[str, Any]] = None) -> PaymentProfile:
        return self._create_spreedly_profile(payment_profile_data, PaymentMethodType.APPLE_PAY)

    def create_android_pay_profile(self, payment_profile_data: Optional[Dict[str, Any]] = None) -> PaymentProfile:
        return self._create_spreedly_profile(payment_profile_data, PaymentMethodType.ANDROID_PAY)

    def create_third_party_token_profile(self, payment_profile_data: Optional[Dict[str, Any]] = None) -> PaymentProfile:
        return self._create_spreedly_profile(payment_profile_data, PaymentMethodType.THIRD_PARTY_TOKEN)

    def _create_spreedly_profile(
        self,
        payment_profile_data: Optional[Dict[str, Any]],
        payment_method_type: PaymentMethodType,
    ) -> PaymentProfile:
        data = dict(payment_profile_data or {})
        data[PaymentProfile.PROFILE_TYPE] = ProfileType.SPREEDLY_VAULT.value
        data[PaymentProfile.PAYMENT_METHOD_TYPE] = payment_method_type.value
        return self.data_factory.create(data)

    # ============ Save ============

    async def save_profile(self, payment_profile: PaymentProfile) -> PaymentProfile:
        """
        Create or update a payment profile

        Args:
            payment_profile: Profile to save; hydrated in place from the response

        Returns:
            The same profile instance

        Raises:
            EntityInvalidDataError: Unsupported type or missing required fields
            HttpError: API returned a non-success status
        """
        try:
            strategy = resolve_save_strategy(
                payment_profile.get_profile_type(),
                payment_profile.get_payment_method_type(),
            )
        except EntityInvalidDataError as e:
            logger.warning(f"Refusing to save payment profile {payment_profile.get_id()}: {e}")
            raise

        logger.debug(f"Payment profile {payment_profile.get_id()} resolved to {strategy.name} strategy")
        return await self._save_with_strategy(payment_profile, strategy)

    async def save_third_party_token_profile(self, payment_profile: PaymentProfile) -> PaymentProfile:
        return await self._save_with_strategy(payment_profile, THIRD_PARTY_TOKEN_STRATEGY)

    async def _save_with_strategy(self, payment_profile: PaymentProfile, strategy: SaveStrategy) -> PaymentProfile:
        if payment_profile.is_new():
            form_data = getattr(payment_profile, strategy.creating_form)()
            path = strategy.create_path
        else:
            form_data = getattr(payment_profile, strategy.saving_form)()
            path = self.UPDATE_PATH.format(profile_id=payment_profile.get_id())

        logger.info(f"Saving {strategy.name} payment profile: POST {path}")
        response = await self.http_client.post(path, {self.API_NAME_PROFILE: form_data})
        return self.retrieve_item(response, self.API_NAME_PROFILE, payment_profile)

    # ============ Load / Redact ============

    async def load_profile(self, payment_profile_id: Any) -> PaymentProfile:
        logger.info(f"Loading payment profile {payment_profile_id}")
        response = await self.http_client.get(f"/services/v2/vault/paymentprofiles/{payment_profile_id}.json")
        return self.retrieve_item(response, self.API_NAME_PROFILE)

    async def load_profiles(self, filters: Optional[Dict[str, Any]] = None) -> List[PaymentProfile]:
        """
        List payment profiles

        Available filters: customer_id, magento_customer_id, customer_email,
        profile_type, payment_method_type, payment_token, transaction_id

        Raises:
            InvalidArgumentError: If any other filter is given (no request is made)
        """
        query = self.validate_filters(filters)
        logger.info(f"Listing payment profiles filtered by {sorted(query)}")
        response = await self.http_client.get("/services/v2/vault/paymentprofiles.json", query)
        return self.retrieve_items(response, self.API_NAME_PROFILES)

    @staticmethod
    def validate_filters(filters: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        allowed = PaymentProfileFilters.allowed_names()
        try:
            parsed = PaymentProfileFilters.model_validate(dict(filters or {}))
        except ValidationError as e:
            logger.warning(f"Rejected payment profile filters {sorted((filters or {}).keys())}")
            raise InvalidArgumentError(
                f"Only [{', '.join(allowed)}] query filters are allowed."
            ) from e
        return parsed.model_dump(exclude_none=True)

    async def redact_profile(self, payment_profile_id: Any) -> PaymentProfile:
        logger.info(f"Redacting payment profile {payment_profile_id}")
        response = await self.http_client.put(f"/services/v1/vault/paymentprofiles/{payment_profile_id}/redact.json")
        return self.retrieve_item(response, self.API_NAME_PROFILE)

    # ============ Vault Tokens ============
    # Token values stay out of the logs

    async def save_token(
        self,
        token: str,
        payment_profile: PaymentProfile,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> PaymentProfile:
        """Store a vault token as a payment profile; hydrates `payment_profile` in place"""
        post_data: Dict[str, Any] = {self.API_NAME_PROFILE: payment_profile.get_token_form_data()}
        if metadata:
            post_data[self.API_NAME_META] = metadata
        logger.info(f"Storing vault token for customer {payment_profile.customer_id}")
        response = await self.http_client.post(f"/services/v1/vault/tokens/{token}/store.json", post_data)
        return self.retrieve_item(response, self.API_NAME_PROFILE, payment_profile)

    async def verify_and_save_token(self, token: str, payment_profile: PaymentProfile) -> PaymentProfile:
        """Verify a vault token, then store it; hydrates `payment_profile` in place"""
        post_data = {self.API_NAME_PROFILE: payment_profile.get_token_form_data()}
        logger.info(f"Verifying and storing vault token for customer {payment_profile.customer_id}")
        response = await self.http_client.post(f"/services/v1/vault/tokens/{token}/verifyandstore.json", post_data)
        return self.retrieve_item(response, self.API_NAME_PROFILE, payment_profile)

    async def load_profile_by_token(self, token: str) -> PaymentProfile:
        logger.info("Loading payment profile by vault token")
        response = await self.http_client.get(f"/services/v1/vault/tokens/{token}/paymentprofile.json")
        return self.retrieve_item(response, self.API_NAME_PROFILE)


__all__ = [
    "PaymentProfileService",
    "SaveStrategy",
    "resolve_save_strategy",
    "EXTERNAL_VAULT_STRATEGY",
    "CREDIT_CARD_STRATEGY",
    "APPLE_PAY_STRATEGY",
    "BANK_ACCOUNT_STRATEGY",
    "THIRD_PARTY_TOKEN_STRATEGY",
    "LEGACY_DEFAULT_STRATEGY",
]
