"""Confirmation statuses and payment sheet results."""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .intent import Intent
from .params import PaymentMethod
from .payment_option import validate_link_account


class ConfirmationStatus(str, Enum):
    """Outcome reported by the payment handler for one confirmation"""
    SUCCEEDED = "succeeded"
    CANCELED = "canceled"
    FAILED = "failed"


class PaymentSheetResultStatus(str, Enum):
    COMPLETED = "completed"
    CANCELED = "canceled"
    FAILED = "failed"


class PaymentSheetResult(BaseModel):
    """Terminal result of a confirmation attempt.

    Use the ``completed()``, ``canceled()`` and ``failed(error)``
    constructors rather than building one by hand.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    status: PaymentSheetResultStatus
    error: Optional[BaseException] = None

    @classmethod
    def completed(cls) -> "PaymentSheetResult":
        return cls(status=PaymentSheetResultStatus.COMPLETED)

    @classmethod
    def canceled(cls) -> "PaymentSheetResult":
        return cls(status=PaymentSheetResultStatus.CANCELED)

    @classmethod
    def failed(cls, error: BaseException) -> "PaymentSheetResult":
        return cls(status=PaymentSheetResultStatus.FAILED, error=error)

    @property
    def is_completed(self) -> bool:
        return self.status == PaymentSheetResultStatus.COMPLETED

    @property
    def is_canceled(self) -> bool:
        return self.status == PaymentSheetResultStatus.CANCELED

    @property
    def is_failed(self) -> bool:
        return self.status == PaymentSheetResultStatus.FAILED


class LoadResult(BaseModel):
    """Everything the payment sheet needs before it can be shown."""
    # link_account is a core.services.LinkAccount
    model_config = ConfigDict(arbitrary_types_allowed=True)

    intent: Intent
    saved_payment_methods: List[PaymentMethod] = Field(default_factory=list)
    link_account: Optional[Any] = None

    @field_validator("link_account")
    @classmethod
    def check_link_account(cls, v: Any) -> Any:
        if v is None:
            return v
        return validate_link_account(v)
