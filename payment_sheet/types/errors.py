# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Payment sheet error types and error code mapping."""

from typing import Optional


class PaymentSheetError(Exception):
    """Base error for the payment sheet."""
    pass


class UnknownError(PaymentSheetError):
    """Generic failure carrying a developer-facing description.

    Used whenever a collaborator reports failure without supplying an
    error of its own.
    """

    def __init__(self, debug_description: str):
        super().__init__(debug_description)
        self.debug_description = debug_description


class IntentStateError(PaymentSheetError):
    """The intent is already in a terminal status and cannot be confirmed."""

    def __init__(self, message: str, status: Optional[str] = None):
        super().__init__(message)
        self.status = status


class PreconditionError(PaymentSheetError):
    """The host application is misconfigured."""
    pass


class APIConnectionError(PaymentSheetError):
    """Generic connection error used when no better error is available."""

    def __init__(self, message: str = "There was an error connecting to the payment service."):
        super().__init__(message)


class StateError(PaymentSheetError):
    """Invalid state transition."""
    pass


class PromiseAlreadySettledError(StateError):
    """A promise was resolved or rejected more than once."""
    pass


class PaymentSheetErrorCode:
    """Stable error codes for logging and analytics."""
    UNKNOWN = "UNKNOWN"
    INTENT_IN_TERMINAL_STATE = "INTENT_IN_TERMINAL_STATE"
    PRECONDITION_FAILED = "PRECONDITION_FAILED"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    INVALID_STATE = "INVALID_STATE"

    @classmethod
    def get_all_codes(cls) -> list[str]:
        """Returns all defined error codes."""
        return [
            cls.UNKNOWN,
            cls.INTENT_IN_TERMINAL_STATE,
            cls.PRECONDITION_FAILED,
            cls.CONNECTION_ERROR,
            cls.INVALID_STATE
        ]


def map_error_to_code(error: Exception) -> str:
    """Maps implementation errors to error codes."""
    error_mapping = {
        IntentStateError: PaymentSheetErrorCode.INTENT_IN_TERMINAL_STATE,
        PreconditionError: PaymentSheetErrorCode.PRECONDITION_FAILED,
        APIConnectionError: PaymentSheetErrorCode.CONNECTION_ERROR,
        StateError: PaymentSheetErrorCode.INVALID_STATE,
        PromiseAlreadySettledError: PaymentSheetErrorCode.INVALID_STATE,
    }
    return error_mapping.get(type(error), PaymentSheetErrorCode.UNKNOWN)
