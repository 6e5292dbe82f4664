"""Payment options a customer can pick in the payment sheet."""

from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, field_validator

from .params import (
    ConsumerPaymentDetails,
    IntentConfirmParams,
    PaymentMethod,
    PaymentMethodParams
)


def validate_link_account(account: Any) -> Any:
    """Reject anything that is not a LinkAccount."""
    # Import here to avoid circular imports
    from ..core.services import LinkAccount

    if not isinstance(account, LinkAccount):
        raise ValueError(f"Expected a LinkAccount, got {type(account).__name__}")
    return account


class ForNewAccount(BaseModel):
    """Sign up for Link, then pay with freshly entered details."""
    kind: Literal["for_new_account"] = "for_new_account"
    phone_number: str
    payment_method_params: PaymentMethodParams


class WithPaymentDetails(BaseModel):
    """Pay with payment details already stored in the Link account."""
    kind: Literal["with_payment_details"] = "with_payment_details"
    payment_details: ConsumerPaymentDetails


class WithPaymentMethodParams(BaseModel):
    """Add new payment details to an existing Link account, then pay."""
    kind: Literal["with_payment_method_params"] = "with_payment_method_params"
    payment_method_params: PaymentMethodParams


LinkConfirmOption = Union[ForNewAccount, WithPaymentDetails, WithPaymentMethodParams]


class ApplePay(BaseModel):
    kind: Literal["apple_pay"] = "apple_pay"


class NewPaymentMethod(BaseModel):
    kind: Literal["new"] = "new"
    confirm_params: IntentConfirmParams


class SavedPaymentMethod(BaseModel):
    kind: Literal["saved"] = "saved"
    payment_method: PaymentMethod


class Link(BaseModel):
    # account is a core.services.LinkAccount
    model_config = ConfigDict(arbitrary_types_allowed=True)

    kind: Literal["link"] = "link"
    account: Any
    confirm_option: LinkConfirmOption

    @field_validator("account")
    @classmethod
    def validate_account(cls, v: Any) -> Any:
        return validate_link_account(v)


PaymentOption = Union[ApplePay, NewPaymentMethod, SavedPaymentMethod, Link]
