"""Interfaces of the collaborators the payment sheet drives.

Network access, wallet sheets and challenge screens live outside this
package. Hosts subclass these to plug in their own implementations.
"""

from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Tuple

from ..types import (
    ApplePayConfiguration,
    ConfirmationStatus,
    ConsumerPaymentDetails,
    Customer,
    Intent,
    PaymentIntent,
    PaymentIntentParams,
    PaymentMethod,
    PaymentMethodParams,
    PaymentMethodType,
    PaymentSheetResult,
    SetupIntent,
    SetupIntentConfirmParams
)


class APIClient(ABC):
    """Client for the payments API."""

    publishable_key: Optional[str] = None

    @abstractmethod
    async def retrieve_payment_intent_with_preferences(self, client_secret: str) -> PaymentIntent:
        """Fetch a PaymentIntent along with the recommended payment method types."""
        raise NotImplementedError

    @abstractmethod
    async def retrieve_payment_intent(self, client_secret: str) -> Optional[PaymentIntent]:
        raise NotImplementedError

    @abstractmethod
    async def retrieve_setup_intent_with_preferences(self, client_secret: str) -> SetupIntent:
        """Fetch a SetupIntent along with the recommended payment method types."""
        raise NotImplementedError

    @abstractmethod
    async def retrieve_setup_intent(self, client_secret: str) -> Optional[SetupIntent]:
        raise NotImplementedError

    @abstractmethod
    async def create_payment_method(self, params: PaymentMethodParams) -> PaymentMethod:
        raise NotImplementedError

    @abstractmethod
    async def list_payment_methods(
        self,
        customer_id: str,
        ephemeral_key: str,
        types: List[PaymentMethodType]
    ) -> Optional[List[PaymentMethod]]:
        """List the customer's saved payment methods of the given types."""
        raise NotImplementedError

    @abstractmethod
    async def retrieve_customer(self, customer_id: str, ephemeral_key: str) -> Optional[Customer]:
        raise NotImplementedError


class AuthenticationContext:
    """Context handed to the payment handler for next actions such as 3DS."""
    pass


class PaymentSheetAuthenticationContext(AuthenticationContext):
    """Authentication context that can carry Link payment details.

    The payment handler reads ``link_payment_details`` while confirming a
    Link payment. Only one confirmation may be in flight per context.
    """

    def __init__(self):
        self.link_payment_details: Optional[Tuple["LinkAccount", ConsumerPaymentDetails]] = None


class PaymentHandler(ABC):
    """Confirms intents and runs any required next actions."""

    @abstractmethod
    async def confirm_payment(
        self,
        params: PaymentIntentParams,
        authentication_context: AuthenticationContext
    ) -> Tuple[ConfirmationStatus, Optional[Exception]]:
        raise NotImplementedError

    @abstractmethod
    async def confirm_setup_intent(
        self,
        params: SetupIntentConfirmParams,
        authentication_context: AuthenticationContext
    ) -> Tuple[ConfirmationStatus, Optional[Exception]]:
        raise NotImplementedError


class LinkAccount(ABC):
    """A Link consumer session, signed in or not."""

    email: Optional[str] = None

    @abstractmethod
    async def sign_up(self, phone_number: str) -> None:
        """Create the Link account. Raises on failure."""
        raise NotImplementedError

    @abstractmethod
    async def create_payment_details(self, params: PaymentMethodParams) -> Optional[ConsumerPaymentDetails]:
        raise NotImplementedError


class LinkAccountService(ABC):
    """Looks up Link consumer sessions."""

    @property
    @abstractmethod
    def has_session_cookie(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def has_email_logged_out(self, email: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    async def lookup_account(self, email: Optional[str]) -> Optional[LinkAccount]:
        raise NotImplementedError


class AddressSpecProvider(ABC):
    """Loads address format specs shared across the payment sheet."""

    @abstractmethod
    def load_address_specs(self, completion: Callable[[], None]) -> None:
        """Start loading; ``completion`` is called once loading has ended.

        Failures are handled by the provider and never reported.
        """
        raise NotImplementedError


class ApplePayContext(ABC):

    @abstractmethod
    def present(self) -> None:
        raise NotImplementedError


class ApplePayContextFactory(ABC):
    """Creates Apple Pay sheets for an intent."""

    @abstractmethod
    def create(
        self,
        intent: Intent,
        merchant_name: str,
        configuration: ApplePayConfiguration,
        completion: Callable[[PaymentSheetResult], None]
    ) -> Optional[ApplePayContext]:
        """Return ``None`` when Apple Pay is unsupported or has no presenter."""
        raise NotImplementedError
