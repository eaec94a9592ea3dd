"""API error type and status mapping"""

from fastapi import status
from libs.result import Error

ERROR_STATUS = {
    "TRANSACTION_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "DISCOUNT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "GATEWAY_UNAVAILABLE": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "GATEWAY_TIMEOUT": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "GATEWAY_REJECTED": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "GATEWAY_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "PERSISTENCE_FAILED": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(code: str) -> int:
    """HTTP status for an error code; unlisted business errors are 400"""
    return ERROR_STATUS.get(code, status.HTTP_400_BAD_REQUEST)


class ClientError(Exception):
    """
    Raised by routes to return an error envelope

    Rendered as {"error": {"code": ..., "message": ...}}.
    """

    def __init__(self, error: Error, status_code: int = None):
        self.error = error
        self.status_code = status_code or status_for(error.code)
        super().__init__(error.message)
