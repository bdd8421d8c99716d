from paystack_client.payments.paystack_provider import PaystackPaymentProvider
from paystack_client.payments.provider import PaymentProvider
from paystack_client.payments.types import (
    PaymentIntentRequest,
    PaymentIntentResponse,
    PaymentStatus,
    PaymentTransaction,
)

__all__ = [
    "PaymentIntentRequest",
    "PaymentIntentResponse",
    "PaymentProvider",
    "PaymentStatus",
    "PaymentTransaction",
    "PaystackPaymentProvider",
]
