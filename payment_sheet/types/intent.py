"""Intent models, statuses and payment method types."""

from enum import Enum
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field


class PaymentMethodType(str, Enum):
    """Payment method types known to the payment sheet"""
    CARD = "card"
    LINK = "link"
    US_BANK_ACCOUNT = "us_bank_account"
    SEPA_DEBIT = "sepa_debit"
    IDEAL = "ideal"
    BANCONTACT = "bancontact"
    SOFORT = "sofort"
    AFTERPAY_CLEARPAY = "afterpay_clearpay"
    KLARNA = "klarna"

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()


class PaymentIntentStatus(str, Enum):
    """Server-side PaymentIntent statuses"""
    REQUIRES_PAYMENT_METHOD = "requires_payment_method"
    REQUIRES_CONFIRMATION = "requires_confirmation"
    REQUIRES_ACTION = "requires_action"
    PROCESSING = "processing"
    REQUIRES_CAPTURE = "requires_capture"
    CANCELED = "canceled"
    SUCCEEDED = "succeeded"


class SetupIntentStatus(str, Enum):
    """Server-side SetupIntent statuses"""
    REQUIRES_PAYMENT_METHOD = "requires_payment_method"
    REQUIRES_CONFIRMATION = "requires_confirmation"
    REQUIRES_ACTION = "requires_action"
    PROCESSING = "processing"
    CANCELED = "canceled"
    SUCCEEDED = "succeeded"


class IntentKind(str, Enum):
    PAYMENT_INTENT = "payment_intent"
    SETUP_INTENT = "setup_intent"


TERMINAL_PAYMENT_INTENT_STATUSES = frozenset({
    PaymentIntentStatus.SUCCEEDED,
    PaymentIntentStatus.CANCELED,
    PaymentIntentStatus.REQUIRES_CAPTURE,
})

TERMINAL_SETUP_INTENT_STATUSES = frozenset({
    SetupIntentStatus.SUCCEEDED,
    SetupIntentStatus.CANCELED,
})


class PaymentIntent(BaseModel):
    """A PaymentIntent as returned by the API client."""
    kind: Literal[IntentKind.PAYMENT_INTENT] = IntentKind.PAYMENT_INTENT
    id: Optional[str] = None
    client_secret: str
    status: PaymentIntentStatus
    amount: Optional[int] = None
    currency: Optional[str] = None
    recommended_payment_method_types: List[PaymentMethodType] = Field(default_factory=list)
    unactivated_payment_method_types: List[PaymentMethodType] = Field(default_factory=list)

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_PAYMENT_INTENT_STATUSES


class SetupIntent(BaseModel):
    """A SetupIntent as returned by the API client."""
    kind: Literal[IntentKind.SETUP_INTENT] = IntentKind.SETUP_INTENT
    id: Optional[str] = None
    client_secret: str
    status: SetupIntentStatus
    recommended_payment_method_types: List[PaymentMethodType] = Field(default_factory=list)
    unactivated_payment_method_types: List[PaymentMethodType] = Field(default_factory=list)

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_SETUP_INTENT_STATUSES


Intent = Union[PaymentIntent, SetupIntent]


class IntentClientSecret(BaseModel):
    """Client secret tagged with the kind of intent it belongs to."""
    kind: IntentKind
    secret: str

    @classmethod
    def payment_intent(cls, secret: str) -> "IntentClientSecret":
        return cls(kind=IntentKind.PAYMENT_INTENT, secret=secret)

    @classmethod
    def setup_intent(cls, secret: str) -> "IntentClientSecret":
        return cls(kind=IntentKind.SETUP_INTENT, secret=secret)
