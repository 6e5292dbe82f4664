"""Tests for the PaymentSheet facade: load, then confirm."""

import pytest
from unittest.mock import Mock
from payment_sheet import PaymentSheet
from payment_sheet.core import PaymentSheetAuthenticationContext
from payment_sheet.types import (
    ConfirmationStatus,
    IntentClientSecret,
    IntentStateError,
    Link,
    PaymentIntent,
    PaymentIntentStatus,
    PaymentMethodType,
    SavedPaymentMethod,
    WithPaymentDetails
)


PI_SECRET = IntentClientSecret.payment_intent("pi_123_secret_456")


@pytest.fixture
def sheet(configuration, customer_configuration, payment_handler, link_account_service, address_spec_provider):
    configuration.customer = customer_configuration
    return PaymentSheet(configuration, payment_handler, link_account_service, address_spec_provider)


class TestPaymentSheetLoad:
    """Test loading through the facade."""

    @pytest.mark.asyncio
    async def test_load_returns_result(self, sheet, payment_intent):
        result = await sheet.load(PI_SECRET)
        assert result.intent == payment_intent

    @pytest.mark.asyncio
    async def test_load_calls_completion_with_result(self, sheet, payment_intent):
        completion = Mock()

        result = await sheet.load(PI_SECRET, completion=completion)

        completion.assert_called_once_with(result, None)

    @pytest.mark.asyncio
    async def test_load_failure_goes_to_completion(self, sheet, api_client):
        api_client.retrieve_payment_intent_with_preferences.return_value = PaymentIntent(
            client_secret="pi_123_secret_456",
            status=PaymentIntentStatus.SUCCEEDED
        )
        completion = Mock()

        result = await sheet.load(PI_SECRET, completion=completion)

        assert result is None
        completion.assert_called_once()
        loaded, error = completion.call_args.args
        assert loaded is None
        assert isinstance(error, IntentStateError)

    @pytest.mark.asyncio
    async def test_load_failure_raises_without_completion(self, sheet, api_client):
        api_client.list_payment_methods.side_effect = RuntimeError("list failed")

        with pytest.raises(RuntimeError, match="list failed"):
            await sheet.load(PI_SECRET)


class TestPaymentSheetConfirm:
    """Test confirming through the facade."""

    @pytest.mark.asyncio
    async def test_confirm_uses_fresh_authentication_context(self, sheet, payment_intent, payment_handler, saved_card):
        completion = Mock()

        result = await sheet.confirm(payment_intent, SavedPaymentMethod(payment_method=saved_card), completion=completion)

        assert result.is_completed
        completion.assert_called_once_with(result)
        context = payment_handler.confirm_payment.await_args.args[1]
        assert isinstance(context, PaymentSheetAuthenticationContext)

    @pytest.mark.asyncio
    async def test_load_then_confirm_saved_card(self, sheet, api_client, payment_handler, saved_card):
        api_client.list_payment_methods.return_value = [saved_card]

        loaded = await sheet.load(PI_SECRET)
        result = await sheet.confirm(
            loaded.intent,
            SavedPaymentMethod(payment_method=loaded.saved_payment_methods[0])
        )

        assert result.is_completed
        params = payment_handler.confirm_payment.await_args.args[0]
        assert params.payment_method_id == saved_card.id
        assert params.payment_method_options.setup_future_usage[PaymentMethodType.CARD] is False

    @pytest.mark.asyncio
    async def test_load_then_confirm_with_link(
        self, sheet, link_account_service, link_account, link_payment_details, payment_handler
    ):
        link_account_service.has_session_cookie = True

        loaded = await sheet.load(PI_SECRET)
        assert loaded.link_account is link_account

        context = PaymentSheetAuthenticationContext()
        result = await sheet.confirm(
            loaded.intent,
            Link(account=loaded.link_account, confirm_option=WithPaymentDetails(payment_details=link_payment_details)),
            authentication_context=context
        )

        assert result.is_completed
        assert context.link_payment_details is None

    @pytest.mark.asyncio
    async def test_failed_confirmation_is_returned(self, sheet, payment_intent, payment_handler, saved_card):
        payment_handler.confirm_payment.return_value = (ConfirmationStatus.FAILED, RuntimeError("declined"))

        result = await sheet.confirm(payment_intent, SavedPaymentMethod(payment_method=saved_card))

        assert result.is_failed
        assert str(result.error) == "declined"
