"""Policy helpers shared by the loader and the confirmation dispatcher."""

import logging
from typing import Iterable, List, Optional

from ..types import (
    RESTRICTED_KEY_PREFIX,
    Intent,
    PaymentMethod,
    PaymentMethodType,
    PaymentSheetConfiguration
)


logger = logging.getLogger(__name__)

# Types that can be saved and reused without any extra configuration
ALWAYS_REUSABLE_TYPES = frozenset({PaymentMethodType.CARD})

# Types that settle asynchronously; the merchant must opt in to them
DELAYED_NOTIFICATION_TYPES = frozenset({
    PaymentMethodType.US_BANK_ACCOUNT,
    PaymentMethodType.SEPA_DEBIT,
})

UNACTIVATED_TYPES_HELP_URL = "https://support.stripe.com/questions/activate-a-new-payment-method"


def supports_save_and_reuse(
    payment_method_type: PaymentMethodType,
    configuration: PaymentSheetConfiguration
) -> bool:
    """Whether a saved payment method of this type can be offered again."""
    if payment_method_type in ALWAYS_REUSABLE_TYPES:
        return True
    if payment_method_type in DELAYED_NOTIFICATION_TYPES:
        return configuration.allows_delayed_payment_methods
    return False


def filter_saved_payment_methods(
    payment_methods: Iterable[PaymentMethod],
    intent: Intent,
    configuration: PaymentSheetConfiguration
) -> List[PaymentMethod]:
    """Keep saved payment methods recommended by the intent and reusable here."""
    recommended = set(intent.recommended_payment_method_types)
    return [
        payment_method for payment_method in payment_methods
        if payment_method.type in recommended
        and supports_save_and_reuse(payment_method.type, configuration)
    ]


def warn_unactivated_if_needed(unactivated_payment_method_types: List[PaymentMethodType]) -> Optional[str]:
    """Log a warning for types activated in test mode but not in live mode.

    Returns the logged message, or None when there was nothing to warn about.
    """
    if not unactivated_payment_method_types:
        return None

    names = ",".join(t.display_name for t in unactivated_payment_method_types)
    message = (
        "Your Intent contains the following payment method types which are activated "
        f"for test mode but not activated for live mode: {names}. These payment method "
        "types will not be displayed in live mode until they are activated. To activate "
        "these payment method types visit your dashboard.\n"
        f"More information: {UNACTIVATED_TYPES_HELP_URL}"
    )
    logger.warning(message)
    return message


def is_restricted_key(publishable_key: Optional[str]) -> bool:
    """Keys with this prefix cannot send raw payment method data on confirm."""
    return bool(publishable_key) and publishable_key.startswith(RESTRICTED_KEY_PREFIX)
