"""Core package exports for payment_sheet."""

from .promise import Promise, Result
from .services import (
    APIClient,
    PaymentHandler,
    LinkAccount,
    LinkAccountService,
    AddressSpecProvider,
    ApplePayContext,
    ApplePayContextFactory,
    AuthenticationContext,
    PaymentSheetAuthenticationContext
)
from .utils import (
    supports_save_and_reuse,
    filter_saved_payment_methods,
    warn_unactivated_if_needed,
    is_restricted_key
)
from .loader import PaymentSheetLoader, SAVED_PAYMENT_METHOD_TYPES
from .confirm import confirm, ConfirmationAttempt

__all__ = [
    # Promise primitive
    "Promise",
    "Result",

    # Collaborator interfaces
    "APIClient",
    "PaymentHandler",
    "LinkAccount",
    "LinkAccountService",
    "AddressSpecProvider",
    "ApplePayContext",
    "ApplePayContextFactory",
    "AuthenticationContext",
    "PaymentSheetAuthenticationContext",

    # Policy helpers
    "supports_save_and_reuse",
    "filter_saved_payment_methods",
    "warn_unactivated_if_needed",
    "is_restricted_key",

    # Preload and confirmation
    "PaymentSheetLoader",
    "SAVED_PAYMENT_METHOD_TYPES",
    "confirm",
    "ConfirmationAttempt"
]
