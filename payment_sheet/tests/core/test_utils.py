"""Unit tests for payment_sheet.core.utils module."""

import logging

import pytest
from payment_sheet.core.utils import (
    filter_saved_payment_methods,
    is_restricted_key,
    supports_save_and_reuse,
    warn_unactivated_if_needed
)
from payment_sheet.types import (
    PaymentMethod,
    PaymentMethodType,
    PaymentSheetConfiguration
)


class TestSupportsSaveAndReuse:
    """Test save-and-reuse eligibility per payment method type."""

    def test_card_is_always_reusable(self):
        assert supports_save_and_reuse(PaymentMethodType.CARD, PaymentSheetConfiguration())

    @pytest.mark.parametrize("payment_method_type", [
        PaymentMethodType.US_BANK_ACCOUNT,
        PaymentMethodType.SEPA_DEBIT,
    ])
    def test_delayed_types_require_opt_in(self, payment_method_type):
        assert not supports_save_and_reuse(payment_method_type, PaymentSheetConfiguration())
        assert supports_save_and_reuse(
            payment_method_type,
            PaymentSheetConfiguration(allows_delayed_payment_methods=True)
        )

    @pytest.mark.parametrize("payment_method_type", [
        PaymentMethodType.IDEAL,
        PaymentMethodType.KLARNA,
        PaymentMethodType.LINK,
    ])
    def test_other_types_are_not_reusable(self, payment_method_type):
        configuration = PaymentSheetConfiguration(allows_delayed_payment_methods=True)
        assert not supports_save_and_reuse(payment_method_type, configuration)


class TestFilterSavedPaymentMethods:

    def test_keeps_order_of_eligible_methods(self, payment_intent):
        first = PaymentMethod(id="pm_1", type=PaymentMethodType.CARD)
        ideal = PaymentMethod(id="pm_2", type=PaymentMethodType.IDEAL)
        second = PaymentMethod(id="pm_3", type=PaymentMethodType.CARD)

        filtered = filter_saved_payment_methods([first, ideal, second], payment_intent, PaymentSheetConfiguration())

        assert [pm.id for pm in filtered] == ["pm_1", "pm_3"]

    def test_empty_input(self, setup_intent):
        assert filter_saved_payment_methods([], setup_intent, PaymentSheetConfiguration()) == []


class TestWarnUnactivated:

    def test_no_warning_without_unactivated_types(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert warn_unactivated_if_needed([]) is None
        assert caplog.records == []

    def test_warning_lists_types(self, caplog):
        with caplog.at_level(logging.WARNING):
            message = warn_unactivated_if_needed([PaymentMethodType.KLARNA, PaymentMethodType.US_BANK_ACCOUNT])

        assert "Klarna,Us Bank Account" in message
        assert "activate-a-new-payment-method" in message
        assert caplog.records[0].levelno == logging.WARNING


class TestIsRestrictedKey:

    @pytest.mark.parametrize("key,expected", [
        ("uk_live_123", True),
        ("uk_", True),
        ("pk_test_123", False),
        ("sk_uk_123", False),
        ("", False),
        (None, False),
    ])
    def test_prefix_detection(self, key, expected):
        assert is_restricted_key(key) is expected
