"""Preloads everything the payment sheet needs before it is shown."""

import asyncio
import logging
from typing import Awaitable, Callable, List, Optional, Set, Tuple

from .promise import Promise
from .services import AddressSpecProvider, LinkAccount, LinkAccountService
from .utils import filter_saved_payment_methods, warn_unactivated_if_needed
from ..types import (
    Intent,
    IntentClientSecret,
    IntentKind,
    IntentStateError,
    LoadResult,
    PaymentMethod,
    PaymentMethodType,
    PaymentSheetConfiguration,
    UnknownError
)


logger = logging.getLogger(__name__)

# Only cards can be shown as saved payment methods for now
SAVED_PAYMENT_METHOD_TYPES: List[PaymentMethodType] = [PaymentMethodType.CARD]

_INTENT_NAMES = {
    IntentKind.PAYMENT_INTENT: "PaymentIntent",
    IntentKind.SETUP_INTENT: "SetupIntent",
}


class PaymentSheetLoader:
    """Fetches the intent, saved payment methods, address specs and Link session.

    All four fetches start at once. Their results are consumed in a fixed
    order (intent, saved payment methods, address specs, Link account) and
    the first failure met along the way becomes the result of the load.

    Example:
        loader = PaymentSheetLoader(configuration, link_service, spec_provider)
        result = await loader.load(IntentClientSecret.payment_intent("pi_123_secret_456"))
    """

    def __init__(
        self,
        configuration: PaymentSheetConfiguration,
        link_account_service: LinkAccountService,
        address_spec_provider: AddressSpecProvider
    ):
        """Initialize loader.

        Args:
            configuration: Payment sheet configuration holding the API client
            link_account_service: Service used to look up the Link session
            address_spec_provider: Provider of shared address format specs
        """
        self.configuration = configuration
        self.link_account_service = link_account_service
        self.address_spec_provider = address_spec_provider
        self._tasks: Set[asyncio.Task] = set()

    @property
    def api_client(self):
        return self.configuration.api_client

    async def load(self, client_secret: IntentClientSecret) -> LoadResult:
        """Load the intent and its supporting data.

        Raises:
            IntentStateError: The intent is already succeeded, canceled or captured
            Exception: The first error raised while fetching, unchanged
        """
        intent_promise: Promise[Intent] = Promise()
        payment_methods_promise: Promise[List[PaymentMethod]] = Promise()
        load_specs_promise: Promise[None] = Promise()
        link_account_promise: Promise[Optional[LinkAccount]] = Promise()

        logger.info(f"Loading payment sheet for {_INTENT_NAMES[client_secret.kind]}")

        self._start(self._fetch_intent(client_secret, intent_promise), intent_promise)
        self._start(self._fetch_saved_payment_methods(payment_methods_promise), payment_methods_promise)
        self.address_spec_provider.load_address_specs(lambda: load_specs_promise.resolve(None))
        self._start(self._lookup_link_account(link_account_promise), link_account_promise)

        intent = await intent_promise

        payment_methods = await payment_methods_promise
        saved_payment_methods = filter_saved_payment_methods(
            payment_methods, intent, self.configuration
        )
        warn_unactivated_if_needed(intent.unactivated_payment_method_types)

        await load_specs_promise

        link_account = await link_account_promise
        if PaymentMethodType.LINK not in intent.recommended_payment_method_types:
            link_account = None

        logger.info(
            f"Payment sheet loaded: {len(saved_payment_methods)} of {len(payment_methods)} "
            f"saved payment methods eligible, Link account {'found' if link_account else 'absent'}"
        )
        return LoadResult(
            intent=intent,
            saved_payment_methods=saved_payment_methods,
            link_account=link_account
        )

    def _start(self, coroutine: Awaitable[None], promise: Promise) -> None:
        """Run a fetch in the background; an unexpected error rejects its promise."""

        async def _run() -> None:
            try:
                await coroutine
            except Exception as e:
                if promise.is_settled:
                    logger.error(f"Error after fetch already settled: {e}", exc_info=True)
                    return
                logger.error(f"Unexpected error while loading payment sheet: {e}", exc_info=True)
                promise.reject(e)

        task = asyncio.ensure_future(_run())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def _intent_fetchers(
        self, kind: IntentKind
    ) -> Tuple[Callable[[str], Awaitable[Intent]], Callable[[str], Awaitable[Optional[Intent]]]]:
        if kind == IntentKind.PAYMENT_INTENT:
            return (
                self.api_client.retrieve_payment_intent_with_preferences,
                self.api_client.retrieve_payment_intent,
            )
        return (
            self.api_client.retrieve_setup_intent_with_preferences,
            self.api_client.retrieve_setup_intent,
        )

    async def _fetch_intent(self, client_secret: IntentClientSecret, promise: Promise[Intent]) -> None:
        intent_name = _INTENT_NAMES[client_secret.kind]
        with_preferences, plain = self._intent_fetchers(client_secret.kind)

        try:
            intent = await with_preferences(client_secret.secret)
            if intent is None:
                raise UnknownError(f"Retrieving {intent_name} with preferences returned nothing")
        except Exception as e:
            # A single fallback to the plain endpoint; no further retries
            logger.info(f"Retrieving {intent_name} with preferences failed, falling back: {e}")
            try:
                intent = await plain(client_secret.secret)
            except Exception as fallback_error:
                promise.reject(fallback_error)
                return
            if intent is None:
                promise.reject(UnknownError(f"Failed to retrieve {intent_name}"))
                return

        if intent.is_terminal:
            message = f"PaymentSheet received a {intent_name} in a terminal state: {intent.status.value}"
            logger.warning(message)
            promise.reject(IntentStateError(message, status=intent.status.value))
            return

        promise.resolve(intent)

    async def _fetch_saved_payment_methods(self, promise: Promise[List[PaymentMethod]]) -> None:
        customer = self.configuration.customer
        if not customer or not customer.id or not customer.ephemeral_key_secret:
            logger.debug("No customer configured; skipping saved payment methods")
            promise.resolve([])
            return

        try:
            payment_methods = await self.api_client.list_payment_methods(
                customer.id,
                customer.ephemeral_key_secret,
                SAVED_PAYMENT_METHOD_TYPES
            )
        except Exception as e:
            promise.reject(e)
            return

        if payment_methods is None:
            promise.reject(UnknownError("Failed to retrieve PaymentMethods for the customer"))
            return
        promise.resolve(list(payment_methods))

    async def _lookup_link_account(self, promise: Promise[Optional[LinkAccount]]) -> None:
        service = self.link_account_service
        customer = self.configuration.customer
        email = self.configuration.customer_email

        if service.has_session_cookie:
            logger.debug("Link session cookie present; looking up without email")
            lookup_email = None
        elif email and not service.has_email_logged_out(email):
            lookup_email = email
        elif customer and customer.id and customer.ephemeral_key_secret:
            # Errors here are ignored; the lookup proceeds without an email
            try:
                customer_record = await self.api_client.retrieve_customer(
                    customer.id, customer.ephemeral_key_secret
                )
            except Exception as e:
                logger.warning(f"Ignoring error retrieving customer {customer.id} for Link lookup: {e}")
                customer_record = None
            lookup_email = customer_record.email if customer_record else None
        else:
            promise.resolve(None)
            return

        try:
            link_account = await service.lookup_account(lookup_email)
        except Exception as e:
            promise.reject(e)
            return
        promise.resolve(link_account)
