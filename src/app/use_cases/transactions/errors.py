"""Error builders shared by the transaction use cases"""

from typing import Optional

from libs.result import Error
from src.app.services.payment_gateway import (
    PaymentGatewayError,
    GatewayUnavailableError,
    GatewayTimeoutError,
)


def transaction_not_found(transaction_id: str) -> Error:
    return Error(
        code="TRANSACTION_NOT_FOUND",
        message=f"Transaction {transaction_id} not found",
    )


def gateway_error(exc: PaymentGatewayError, code: Optional[str] = None) -> Error:
    """Translate a gateway exception into a caller-facing error"""
    if isinstance(exc, GatewayUnavailableError):
        message = "Unable to reach the payment gateway. Please try again."
    elif isinstance(exc, GatewayTimeoutError):
        message = "Timed out contacting the payment gateway. Please try again."
    else:
        message = f"Payment gateway error: {exc.message}"
    return Error(code=code or exc.code, message=message, reason=exc.message)
