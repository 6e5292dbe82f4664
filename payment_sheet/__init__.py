"""payment_sheet - intent preloading and payment confirmation for a client-side payment sheet."""

# Types
from .types import (
    # Intents
    Intent,
    IntentKind,
    IntentClientSecret,
    PaymentIntent,
    PaymentIntentStatus,
    SetupIntent,
    SetupIntentStatus,
    PaymentMethodType,

    # Payment methods and params
    PaymentMethod,
    PaymentMethodParams,
    ConsumerPaymentDetails,
    Customer,
    IntentConfirmParams,
    PaymentIntentParams,
    SetupIntentConfirmParams,

    # Payment options
    PaymentOption,
    ApplePay,
    NewPaymentMethod,
    SavedPaymentMethod,
    Link,
    ForNewAccount,
    WithPaymentDetails,
    WithPaymentMethodParams,

    # Results
    ConfirmationStatus,
    PaymentSheetResult,
    LoadResult,

    # Configuration
    PaymentSheetConfiguration,
    CustomerConfiguration,
    ApplePayConfiguration,

    # Error Types
    PaymentSheetError,
    UnknownError,
    IntentStateError,
    PreconditionError,
    APIConnectionError,
    StateError,
    PromiseAlreadySettledError,
    PaymentSheetErrorCode,
    map_error_to_code
)

# Core
from .core import (
    Promise,
    Result,
    APIClient,
    PaymentHandler,
    LinkAccount,
    LinkAccountService,
    AddressSpecProvider,
    ApplePayContext,
    ApplePayContextFactory,
    AuthenticationContext,
    PaymentSheetAuthenticationContext,
    PaymentSheetLoader,
    confirm
)

from .sheet import PaymentSheet

__version__ = "1.0.0"

__all__ = [
    # Intents
    "Intent",
    "IntentKind",
    "IntentClientSecret",
    "PaymentIntent",
    "PaymentIntentStatus",
    "SetupIntent",
    "SetupIntentStatus",
    "PaymentMethodType",

    # Payment methods and params
    "PaymentMethod",
    "PaymentMethodParams",
    "ConsumerPaymentDetails",
    "Customer",
    "IntentConfirmParams",
    "PaymentIntentParams",
    "SetupIntentConfirmParams",

    # Payment options
    "PaymentOption",
    "ApplePay",
    "NewPaymentMethod",
    "SavedPaymentMethod",
    "Link",
    "ForNewAccount",
    "WithPaymentDetails",
    "WithPaymentMethodParams",

    # Results
    "ConfirmationStatus",
    "PaymentSheetResult",
    "LoadResult",

    # Configuration
    "PaymentSheetConfiguration",
    "CustomerConfiguration",
    "ApplePayConfiguration",

    # Error Types
    "PaymentSheetError",
    "UnknownError",
    "IntentStateError",
    "PreconditionError",
    "APIConnectionError",
    "StateError",
    "PromiseAlreadySettledError",
    "PaymentSheetErrorCode",
    "map_error_to_code",

    # Core
    "Promise",
    "Result",
    "APIClient",
    "PaymentHandler",
    "LinkAccount",
    "LinkAccountService",
    "AddressSpecProvider",
    "ApplePayContext",
    "ApplePayContextFactory",
    "AuthenticationContext",
    "PaymentSheetAuthenticationContext",
    "PaymentSheetLoader",
    "confirm",

    # Facade
    "PaymentSheet"
]
