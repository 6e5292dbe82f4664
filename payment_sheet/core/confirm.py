"""Confirms an intent with the payment option the customer picked."""

import logging
from typing import Optional

from .promise import Promise
from .services import (
    ApplePayContextFactory,
    AuthenticationContext,
    LinkAccount,
    PaymentHandler,
    PaymentSheetAuthenticationContext
)
from .utils import is_restricted_key
from ..types import (
    APIConnectionError,
    ApplePay,
    ConfirmationStatus,
    ConfirmPaymentMethodOptions,
    ConsumerPaymentDetails,
    ForNewAccount,
    Intent,
    IntentConfirmParams,
    Link,
    LinkConfirmOption,
    NewPaymentMethod,
    PaymentIntent,
    PaymentIntentParams,
    PaymentMethod,
    PaymentMethodParams,
    PaymentMethodType,
    PaymentOption,
    PaymentSheetConfiguration,
    PaymentSheetResult,
    PreconditionError,
    SavedPaymentMethod,
    SetupIntentConfirmParams,
    UnknownError,
    WithPaymentDetails,
    WithPaymentMethodParams
)


logger = logging.getLogger(__name__)


async def confirm(
    configuration: PaymentSheetConfiguration,
    authentication_context: AuthenticationContext,
    intent: Intent,
    payment_option: PaymentOption,
    payment_handler: PaymentHandler,
    apple_pay_context_factory: Optional[ApplePayContextFactory] = None
) -> PaymentSheetResult:
    """Confirm ``intent`` with ``payment_option``.

    Every outcome, including collaborator errors, is returned as a
    PaymentSheetResult; nothing is retried.

    Args:
        configuration: Payment sheet configuration holding the API client
        authentication_context: Context passed to the payment handler. Link
            payments require a PaymentSheetAuthenticationContext.
        intent: A non-terminal PaymentIntent or SetupIntent
        payment_option: The option the customer picked
        payment_handler: Handler that performs the confirmation request
        apple_pay_context_factory: Required for Apple Pay

    Returns:
        completed, canceled or failed(error)
    """
    attempt = ConfirmationAttempt(
        configuration,
        authentication_context,
        intent,
        payment_handler,
        apple_pay_context_factory
    )
    return await attempt.run(payment_option)


class ConfirmationAttempt:
    """State of a single confirmation: one intent, one payment option."""

    def __init__(
        self,
        configuration: PaymentSheetConfiguration,
        authentication_context: AuthenticationContext,
        intent: Intent,
        payment_handler: PaymentHandler,
        apple_pay_context_factory: Optional[ApplePayContextFactory] = None
    ):
        self.configuration = configuration
        self.authentication_context = authentication_context
        self.intent = intent
        self.payment_handler = payment_handler
        self.apple_pay_context_factory = apple_pay_context_factory

    async def run(self, payment_option: PaymentOption) -> PaymentSheetResult:
        logger.info(
            f"Confirming {type(self.intent).__name__} with '{payment_option.kind}' payment option"
        )
        if isinstance(payment_option, ApplePay):
            return await self._confirm_apple_pay()
        if isinstance(payment_option, NewPaymentMethod):
            return await self._confirm_new_payment_method(payment_option.confirm_params)
        if isinstance(payment_option, SavedPaymentMethod):
            return await self._confirm_saved_payment_method(payment_option.payment_method)
        if isinstance(payment_option, Link):
            return await self._confirm_link(payment_option.account, payment_option.confirm_option)
        raise TypeError(f"Unsupported payment option: {payment_option!r}")

    # Apple Pay

    async def _confirm_apple_pay(self) -> PaymentSheetResult:
        result_promise: Promise[PaymentSheetResult] = Promise()
        apple_pay_context = None
        if self.configuration.apple_pay is not None and self.apple_pay_context_factory is not None:
            try:
                apple_pay_context = self.apple_pay_context_factory.create(
                    self.intent,
                    self.configuration.merchant_display_name,
                    self.configuration.apple_pay,
                    result_promise.resolve
                )
            except Exception as e:
                logger.error(f"Creating the Apple Pay context raised: {e}", exc_info=True)
                return PaymentSheetResult.failed(e)

        if apple_pay_context is None:
            message = "Attempted Apple Pay but it's not supported by the device, not configured, or missing a presenter"
            self._assertion_failure(message)
            return PaymentSheetResult.failed(PreconditionError(message))

        try:
            apple_pay_context.present()
        except Exception as e:
            logger.error(f"Presenting Apple Pay raised: {e}", exc_info=True)
            if result_promise.is_settled:
                return result_promise.result.get()
            return PaymentSheetResult.failed(e)
        return await result_promise

    # New payment method

    async def _confirm_new_payment_method(self, confirm_params: IntentConfirmParams) -> PaymentSheetResult:
        intent = self.intent
        if not isinstance(intent, PaymentIntent):
            setup_params = confirm_params.make_setup_params(intent.client_secret)
            setup_params.return_url = self.configuration.return_url
            return await self._confirm_setup_intent(setup_params)

        publishable_key = getattr(self.configuration.api_client, "publishable_key", None)
        if is_restricted_key(publishable_key):
            # Restricted keys cannot send payment_method_data; create the payment method first
            logger.debug("Restricted key detected; creating payment method before confirming")
            try:
                payment_method = await self.configuration.api_client.create_payment_method(
                    confirm_params.payment_method_params
                )
            except Exception as e:
                return PaymentSheetResult.failed(e)
            if payment_method is None:
                return PaymentSheetResult.failed(UnknownError("Failed to create PaymentMethod"))
            params = confirm_params.make_dashboard_params(
                payment_intent_client_secret=intent.client_secret,
                payment_method_id=payment_method.id
            )
        else:
            params = confirm_params.make_params(intent.client_secret)
            params.return_url = self.configuration.return_url
        return await self._confirm_payment_intent(params)

    # Saved payment method

    async def _confirm_saved_payment_method(self, payment_method: PaymentMethod) -> PaymentSheetResult:
        if isinstance(self.intent, PaymentIntent):
            params = PaymentIntentParams(
                client_secret=self.intent.client_secret,
                payment_method_id=payment_method.id,
                return_url=self.configuration.return_url
            )
            # Replace any options set earlier so an already-saved payment method is not saved again
            params.payment_method_options = ConfirmPaymentMethodOptions()
            params.payment_method_options.set_setup_future_usage_if_necessary(False, payment_method.type)
            return await self._confirm_payment_intent(params)

        setup_params = SetupIntentConfirmParams(
            client_secret=self.intent.client_secret,
            payment_method_id=payment_method.id,
            return_url=self.configuration.return_url
        )
        return await self._confirm_setup_intent(setup_params)

    # Link

    async def _confirm_link(self, account: LinkAccount, confirm_option: LinkConfirmOption) -> PaymentSheetResult:
        if isinstance(confirm_option, ForNewAccount):
            try:
                await account.sign_up(confirm_option.phone_number)
            except Exception as e:
                logger.info(f"Link sign up failed: {e}")
                return PaymentSheetResult.failed(e)
            return await self._confirm_link_with_payment_method_params(
                account, confirm_option.payment_method_params
            )
        if isinstance(confirm_option, WithPaymentMethodParams):
            return await self._confirm_link_with_payment_method_params(
                account, confirm_option.payment_method_params
            )
        if isinstance(confirm_option, WithPaymentDetails):
            return await self._confirm_link_with_payment_details(account, confirm_option.payment_details)
        raise TypeError(f"Unsupported Link confirm option: {confirm_option!r}")

    async def _confirm_link_with_payment_method_params(
        self,
        account: LinkAccount,
        payment_method_params: PaymentMethodParams
    ) -> PaymentSheetResult:
        try:
            payment_details = await account.create_payment_details(payment_method_params)
        except Exception as e:
            return PaymentSheetResult.failed(e)
        if payment_details is None:
            return PaymentSheetResult.failed(APIConnectionError())
        return await self._confirm_link_with_payment_details(account, payment_details)

    async def _confirm_link_with_payment_details(
        self,
        account: LinkAccount,
        payment_details: ConsumerPaymentDetails
    ) -> PaymentSheetResult:
        context = self.authentication_context
        if not isinstance(context, PaymentSheetAuthenticationContext):
            self._assertion_failure("Link is only available with a PaymentSheetAuthenticationContext")
            return PaymentSheetResult.failed(APIConnectionError())

        context.link_payment_details = (account, payment_details)
        link_params = PaymentMethodParams(type=PaymentMethodType.LINK)

        if isinstance(self.intent, PaymentIntent):
            return await self._confirm_payment_intent(PaymentIntentParams(
                client_secret=self.intent.client_secret,
                payment_method_params=link_params,
                return_url=self.configuration.return_url
            ))
        return await self._confirm_setup_intent(SetupIntentConfirmParams(
            client_secret=self.intent.client_secret,
            payment_method_params=link_params,
            return_url=self.configuration.return_url
        ))

    # Payment handler

    async def _confirm_payment_intent(self, params: PaymentIntentParams) -> PaymentSheetResult:
        try:
            status, error = await self.payment_handler.confirm_payment(params, self.authentication_context)
        except Exception as e:
            logger.error(f"Payment handler raised while confirming PaymentIntent: {e}", exc_info=True)
            status, error = ConfirmationStatus.FAILED, e
        return self._handle_confirmation(status, error)

    async def _confirm_setup_intent(self, params: SetupIntentConfirmParams) -> PaymentSheetResult:
        try:
            status, error = await self.payment_handler.confirm_setup_intent(params, self.authentication_context)
        except Exception as e:
            logger.error(f"Payment handler raised while confirming SetupIntent: {e}", exc_info=True)
            status, error = ConfirmationStatus.FAILED, e
        return self._handle_confirmation(status, error)

    def _handle_confirmation(
        self,
        status: ConfirmationStatus,
        error: Optional[BaseException]
    ) -> PaymentSheetResult:
        """Translate a payment handler outcome into a PaymentSheetResult."""
        if isinstance(self.authentication_context, PaymentSheetAuthenticationContext):
            self.authentication_context.link_payment_details = None

        logger.info(f"Confirmation finished with status '{ConfirmationStatus(status).value}'")
        if status == ConfirmationStatus.CANCELED:
            return PaymentSheetResult.canceled()
        if status == ConfirmationStatus.SUCCEEDED:
            return PaymentSheetResult.completed()
        return PaymentSheetResult.failed(
            error or UnknownError(f"Payment handler failed without an error: {self.payment_handler!r}")
        )

    def _assertion_failure(self, message: str) -> None:
        logger.error(message)
        if self.configuration.debug_assertions:
            raise AssertionError(message)

