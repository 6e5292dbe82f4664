"""Shared pytest fixtures for payment_sheet tests."""

import pytest
from unittest.mock import Mock, AsyncMock
from payment_sheet.core import (
    APIClient,
    AddressSpecProvider,
    LinkAccount,
    LinkAccountService,
    PaymentHandler
)
from payment_sheet.types import (
    ConfirmationStatus,
    ConsumerPaymentDetails,
    Customer,
    CustomerConfiguration,
    PaymentIntent,
    PaymentIntentStatus,
    PaymentMethod,
    PaymentMethodType,
    PaymentSheetConfiguration,
    SetupIntent,
    SetupIntentStatus
)


@pytest.fixture
def payment_intent():
    """Create a confirmable PaymentIntent that recommends card and Link."""
    return PaymentIntent(
        id="pi_123",
        client_secret="pi_123_secret_456",
        status=PaymentIntentStatus.REQUIRES_PAYMENT_METHOD,
        amount=1099,
        currency="usd",
        recommended_payment_method_types=[PaymentMethodType.CARD, PaymentMethodType.LINK]
    )


@pytest.fixture
def setup_intent():
    """Create a confirmable SetupIntent that recommends card and Link."""
    return SetupIntent(
        id="seti_123",
        client_secret="seti_123_secret_456",
        status=SetupIntentStatus.REQUIRES_PAYMENT_METHOD,
        recommended_payment_method_types=[PaymentMethodType.CARD, PaymentMethodType.LINK]
    )


@pytest.fixture
def saved_card():
    return PaymentMethod(id="pm_card_123", type=PaymentMethodType.CARD, customer="cus_123")


@pytest.fixture
def api_client(payment_intent, setup_intent):
    """Create a mock API client that succeeds on every call."""
    client = Mock(spec=APIClient)
    client.publishable_key = "pk_test_123"
    client.retrieve_payment_intent_with_preferences = AsyncMock(return_value=payment_intent)
    client.retrieve_payment_intent = AsyncMock(return_value=payment_intent)
    client.retrieve_setup_intent_with_preferences = AsyncMock(return_value=setup_intent)
    client.retrieve_setup_intent = AsyncMock(return_value=setup_intent)
    client.list_payment_methods = AsyncMock(return_value=[])
    client.retrieve_customer = AsyncMock(return_value=Customer(id="cus_123", email="customer@example.com"))
    client.create_payment_method = AsyncMock(
        return_value=PaymentMethod(id="pm_created_123", type=PaymentMethodType.CARD)
    )
    return client


@pytest.fixture
def customer_configuration():
    return CustomerConfiguration(id="cus_123", ephemeral_key_secret="ek_test_123")


@pytest.fixture
def configuration(api_client):
    """Create a configuration without a customer."""
    return PaymentSheetConfiguration(
        api_client=api_client,
        merchant_display_name="Example, Inc.",
        return_url="example://payment-redirect"
    )


@pytest.fixture
def link_payment_details():
    return ConsumerPaymentDetails(id="csmrpd_123", type=PaymentMethodType.CARD)


@pytest.fixture
def link_account(link_payment_details):
    """Create a mock Link account whose calls succeed."""
    account = Mock(spec=LinkAccount)
    account.email = "customer@example.com"
    account.sign_up = AsyncMock(return_value=None)
    account.create_payment_details = AsyncMock(return_value=link_payment_details)
    return account


@pytest.fixture
def link_account_service(link_account):
    """Create a Link account service with no cookie and no logged out emails."""
    service = Mock(spec=LinkAccountService)
    service.has_session_cookie = False
    service.has_email_logged_out = Mock(return_value=False)
    service.lookup_account = AsyncMock(return_value=link_account)
    return service


@pytest.fixture
def address_spec_provider():
    """Create an address spec provider that finishes loading immediately."""
    provider = Mock(spec=AddressSpecProvider)
    provider.load_address_specs = Mock(side_effect=lambda completion: completion())
    return provider


@pytest.fixture
def payment_handler():
    """Create a payment handler that reports success."""
    handler = Mock(spec=PaymentHandler)
    handler.confirm_payment = AsyncMock(return_value=(ConfirmationStatus.SUCCEEDED, None))
    handler.confirm_setup_intent = AsyncMock(return_value=(ConfirmationStatus.SUCCEEDED, None))
    return handler
