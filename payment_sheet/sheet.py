"""Payment sheet facade pairing the loader with the confirmation dispatcher."""

import logging
from typing import Callable, Optional

from .core import (
    AddressSpecProvider,
    ApplePayContextFactory,
    AuthenticationContext,
    LinkAccountService,
    PaymentHandler,
    PaymentSheetAuthenticationContext,
    PaymentSheetLoader,
    confirm
)
from .types import (
    Intent,
    IntentClientSecret,
    LoadResult,
    PaymentOption,
    PaymentSheetConfiguration,
    PaymentSheetResult,
    map_error_to_code
)


logger = logging.getLogger(__name__)


class PaymentSheet:
    """Loads an intent and confirms it with the customer's payment option.

    Example:
        sheet = PaymentSheet(config, payment_handler, link_service, spec_provider)
        loaded = await sheet.load(IntentClientSecret.payment_intent(secret))
        result = await sheet.confirm(loaded.intent, SavedPaymentMethod(payment_method=pm))
    """

    def __init__(
        self,
        configuration: PaymentSheetConfiguration,
        payment_handler: PaymentHandler,
        link_account_service: LinkAccountService,
        address_spec_provider: AddressSpecProvider,
        apple_pay_context_factory: Optional[ApplePayContextFactory] = None
    ):
        """Initialize payment sheet.

        Args:
            configuration: Payment sheet configuration holding the API client
            payment_handler: Handler that performs confirmation requests
            link_account_service: Service used to look up the Link session
            address_spec_provider: Provider of shared address format specs
            apple_pay_context_factory: Factory for Apple Pay sheets, if supported
        """
        self.configuration = configuration
        self.payment_handler = payment_handler
        self.apple_pay_context_factory = apple_pay_context_factory
        self.loader = PaymentSheetLoader(configuration, link_account_service, address_spec_provider)

    async def load(
        self,
        client_secret: IntentClientSecret,
        completion: Optional[Callable[[Optional[LoadResult], Optional[Exception]], None]] = None
    ) -> Optional[LoadResult]:
        """Load the intent and supporting data.

        Without ``completion`` errors are raised. With it, the callback
        receives either the result or the error and nothing is raised.
        """
        try:
            result = await self.loader.load(client_secret)
        except Exception as e:
            logger.error(f"Payment sheet failed to load ({map_error_to_code(e)}): {e}")
            if completion is None:
                raise
            completion(None, e)
            return None

        if completion is not None:
            completion(result, None)
        return result

    async def confirm(
        self,
        intent: Intent,
        payment_option: PaymentOption,
        authentication_context: Optional[AuthenticationContext] = None,
        completion: Optional[Callable[[PaymentSheetResult], None]] = None
    ) -> PaymentSheetResult:
        """Confirm ``intent`` with ``payment_option``.

        A fresh PaymentSheetAuthenticationContext is used when none is
        given, so separate confirmations never share Link payment details.
        """
        if authentication_context is None:
            authentication_context = PaymentSheetAuthenticationContext()

        result = await confirm(
            self.configuration,
            authentication_context,
            intent,
            payment_option,
            self.payment_handler,
            self.apple_pay_context_factory
        )
        if result.is_failed:
            logger.warning(f"Payment sheet confirmation failed ({map_error_to_code(result.error)}): {result.error}")

        if completion is not None:
            completion(result)
        return result
