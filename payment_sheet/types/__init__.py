"""Types package for payment_sheet - intents, payment options, results and configuration."""

from .intent import (
    Intent,
    IntentKind,
    IntentClientSecret,
    PaymentIntent,
    PaymentIntentStatus,
    SetupIntent,
    SetupIntentStatus,
    PaymentMethodType,
    TERMINAL_PAYMENT_INTENT_STATUSES,
    TERMINAL_SETUP_INTENT_STATUSES
)

from .params import (
    PaymentMethodParams,
    PaymentMethod,
    ConsumerPaymentDetails,
    Customer,
    ConfirmPaymentMethodOptions,
    PaymentIntentParams,
    SetupIntentConfirmParams,
    IntentConfirmParams
)

from .payment_option import (
    PaymentOption,
    ApplePay,
    NewPaymentMethod,
    SavedPaymentMethod,
    Link,
    LinkConfirmOption,
    ForNewAccount,
    WithPaymentDetails,
    WithPaymentMethodParams
)

from .state import (
    ConfirmationStatus,
    PaymentSheetResult,
    PaymentSheetResultStatus,
    LoadResult
)

from .errors import (
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

from .config import (
    RESTRICTED_KEY_PREFIX,
    CustomerConfiguration,
    ApplePayConfiguration,
    PaymentSheetConfiguration
)

__all__ = [

    "Intent",
    "IntentKind",
    "IntentClientSecret",
    "PaymentIntent",
    "PaymentIntentStatus",
    "SetupIntent",
    "SetupIntentStatus",
    "PaymentMethodType",
    "TERMINAL_PAYMENT_INTENT_STATUSES",
    "TERMINAL_SETUP_INTENT_STATUSES",

    "PaymentMethodParams",
    "PaymentMethod",
    "ConsumerPaymentDetails",
    "Customer",
    "ConfirmPaymentMethodOptions",
    "PaymentIntentParams",
    "SetupIntentConfirmParams",
    "IntentConfirmParams",

    "PaymentOption",
    "ApplePay",
    "NewPaymentMethod",
    "SavedPaymentMethod",
    "Link",
    "LinkConfirmOption",
    "ForNewAccount",
    "WithPaymentDetails",
    "WithPaymentMethodParams",

    "ConfirmationStatus",
    "PaymentSheetResult",
    "PaymentSheetResultStatus",
    "LoadResult",

    "PaymentSheetError",
    "UnknownError",
    "IntentStateError",
    "PreconditionError",
    "APIConnectionError",
    "StateError",
    "PromiseAlreadySettledError",
    "PaymentSheetErrorCode",
    "map_error_to_code",

    "RESTRICTED_KEY_PREFIX",
    "CustomerConfiguration",
    "ApplePayConfiguration",
    "PaymentSheetConfiguration"
]
