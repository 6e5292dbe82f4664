"""Payment method and confirmation parameter models."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from .intent import PaymentMethodType


class PaymentMethodParams(BaseModel):
    """Raw parameters used to create a payment method."""
    type: PaymentMethodType
    card: Optional[Dict[str, Any]] = None
    billing_details: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, str]] = None


class PaymentMethod(BaseModel):
    """A payment method object, new or saved to a customer."""
    id: str
    type: PaymentMethodType
    customer: Optional[str] = None


class ConsumerPaymentDetails(BaseModel):
    """Payment details record owned by a Link account."""
    id: str
    type: PaymentMethodType = PaymentMethodType.CARD


class Customer(BaseModel):
    id: str
    email: Optional[str] = None


class ConfirmPaymentMethodOptions(BaseModel):
    """Per-type options sent with a PaymentIntent confirmation."""
    setup_future_usage: Dict[PaymentMethodType, bool] = Field(default_factory=dict)

    def set_setup_future_usage_if_necessary(
        self,
        should_save: bool,
        payment_method_type: PaymentMethodType
    ) -> None:
        """Record whether a payment method of this type should be saved."""
        self.setup_future_usage[payment_method_type] = should_save


class PaymentIntentParams(BaseModel):
    """Parameters for confirming a PaymentIntent."""
    client_secret: str
    payment_method_params: Optional[PaymentMethodParams] = None
    payment_method_id: Optional[str] = None
    payment_method_options: Optional[ConfirmPaymentMethodOptions] = None
    return_url: Optional[str] = None


class SetupIntentConfirmParams(BaseModel):
    """Parameters for confirming a SetupIntent."""
    client_secret: str
    payment_method_params: Optional[PaymentMethodParams] = None
    payment_method_id: Optional[str] = None
    return_url: Optional[str] = None


class IntentConfirmParams(BaseModel):
    """Payment method details entered by the customer for a new payment method.

    Builds the confirmation parameters for either kind of intent.
    """
    payment_method_params: PaymentMethodParams
    save_for_future_use: bool = False

    def make_params(self, payment_intent_client_secret: str) -> PaymentIntentParams:
        params = PaymentIntentParams(
            client_secret=payment_intent_client_secret,
            payment_method_params=self.payment_method_params
        )
        if self.save_for_future_use:
            options = ConfirmPaymentMethodOptions()
            options.set_setup_future_usage_if_necessary(True, self.payment_method_params.type)
            params.payment_method_options = options
        return params

    def make_setup_params(self, setup_intent_client_secret: str) -> SetupIntentConfirmParams:
        return SetupIntentConfirmParams(
            client_secret=setup_intent_client_secret,
            payment_method_params=self.payment_method_params
        )

    def make_dashboard_params(
        self,
        payment_intent_client_secret: str,
        payment_method_id: str
    ) -> PaymentIntentParams:
        """Params for keys that cannot send raw payment method data.

        The payment method must already exist; only its id is sent.
        """
        params = PaymentIntentParams(
            client_secret=payment_intent_client_secret,
            payment_method_id=payment_method_id
        )
        if self.save_for_future_use:
            options = ConfirmPaymentMethodOptions()
            options.set_setup_future_usage_if_necessary(True, self.payment_method_params.type)
            params.payment_method_options = options
        return params
