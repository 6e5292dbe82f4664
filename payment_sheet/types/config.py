"""Configuration types for payment_sheet."""

import os
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict


RESTRICTED_KEY_PREFIX = "uk_"


class CustomerConfiguration(BaseModel):
    """Customer whose saved payment methods should be shown."""
    id: str
    ephemeral_key_secret: str


class ApplePayConfiguration(BaseModel):
    """Merchant settings for the Apple Pay wallet."""
    merchant_id: str
    merchant_country_code: str


class PaymentSheetConfiguration(BaseModel):
    """Configuration for the payment sheet."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    # core.services.APIClient
    api_client: Any = None
    merchant_display_name: str = ""
    return_url: Optional[str] = None
    customer: Optional[CustomerConfiguration] = None
    customer_email: Optional[str] = None
    apple_pay: Optional[ApplePayConfiguration] = None
    allows_delayed_payment_methods: bool = False
    # Raise AssertionError on host misconfiguration instead of only failing
    debug_assertions: bool = False

    @classmethod
    def from_env(cls, api_client: Any = None, **overrides) -> "PaymentSheetConfiguration":
        """Build a configuration from PAYMENT_SHEET_* environment variables.

        A .env file in the working directory is loaded first. Keyword
        arguments take precedence over the environment.
        """
        load_dotenv()

        values = {
            "api_client": api_client,
            "merchant_display_name": os.getenv("PAYMENT_SHEET_MERCHANT_DISPLAY_NAME", ""),
            "return_url": os.getenv("PAYMENT_SHEET_RETURN_URL"),
            "customer_email": os.getenv("PAYMENT_SHEET_CUSTOMER_EMAIL"),
            "allows_delayed_payment_methods": _env_flag("PAYMENT_SHEET_ALLOWS_DELAYED_PAYMENT_METHODS"),
            "debug_assertions": _env_flag("PAYMENT_SHEET_DEBUG_ASSERTIONS"),
        }

        customer_id = os.getenv("PAYMENT_SHEET_CUSTOMER_ID")
        ephemeral_key = os.getenv("PAYMENT_SHEET_CUSTOMER_EPHEMERAL_KEY")
        if customer_id and ephemeral_key:
            values["customer"] = CustomerConfiguration(
                id=customer_id,
                ephemeral_key_secret=ephemeral_key
            )

        merchant_id = os.getenv("PAYMENT_SHEET_APPLE_PAY_MERCHANT_ID")
        if merchant_id:
            values["apple_pay"] = ApplePayConfiguration(
                merchant_id=merchant_id,
                merchant_country_code=os.getenv("PAYMENT_SHEET_APPLE_PAY_COUNTRY_CODE", "US")
            )

        values.update(overrides)
        return cls(**values)


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")
