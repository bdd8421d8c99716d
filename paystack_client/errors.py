from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    GATEWAY_TRANSPORT_ERROR = "GATEWAY_TRANSPORT_ERROR"
    GATEWAY_INVALID_RESPONSE = "GATEWAY_INVALID_RESPONSE"
    GATEWAY_REJECTED = "GATEWAY_REJECTED"


class PaystackException(Exception):
    def __init__(
        self,
        *,
        code: ErrorCode,
        message: str,
        details: Any | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.details = details
        self.detail = {
            "message": message,
            "code": code.value,
            "details": details,
        }
        super().__init__(message)


class TransportError(PaystackException):
    """The connection to the gateway failed before a response was received."""


class ParseError(PaystackException):
    """The gateway answered with a body that is not a JSON envelope."""


class GatewayRejected(PaystackException):
    """The gateway answered with ``status: false``."""


def transport_failed(cause: BaseException) -> TransportError:
    return TransportError(
        code=ErrorCode.GATEWAY_TRANSPORT_ERROR,
        message="Paystack request failed",
        details=str(cause) or type(cause).__name__,
    )


def invalid_response(cause: BaseException, body: bytes | None = None) -> ParseError:
    details: dict[str, Any] = {"error": str(cause)}
    if body is not None:
        details["body"] = body[:200].decode("utf-8", errors="replace")
    return ParseError(
        code=ErrorCode.GATEWAY_INVALID_RESPONSE,
        message="Paystack returned an invalid response",
        details=details,
    )


def gateway_rejected(message: str, payload: dict[str, Any] | None = None) -> GatewayRejected:
    return GatewayRejected(
        code=ErrorCode.GATEWAY_REJECTED,
        message=message or "Paystack rejected the request",
        details=payload,
    )
