from paystack_client.client import Paystack, RefundAPI, TransactionAPI
from paystack_client.currency import SupportedCurrency
from paystack_client.errors import (
    ErrorCode,
    GatewayRejected,
    ParseError,
    PaystackException,
    TransportError,
)
from paystack_client.schemas import (
    AuthorizationResponse,
    PaystackResponse,
    RefundRecord,
    RefundResponse,
    TransactionAuthorization,
    TransactionRecord,
    TransactionResponse,
)
from paystack_client.types import HTTPMethod, PaystackRequest

__all__ = [
    "AuthorizationResponse",
    "ErrorCode",
    "GatewayRejected",
    "HTTPMethod",
    "ParseError",
    "Paystack",
    "PaystackException",
    "PaystackRequest",
    "PaystackResponse",
    "RefundAPI",
    "RefundRecord",
    "RefundResponse",
    "SupportedCurrency",
    "TransactionAPI",
    "TransactionAuthorization",
    "TransactionRecord",
    "TransactionResponse",
    "TransportError",
]
