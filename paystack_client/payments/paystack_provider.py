from __future__ import annotations

from typing import Any

from paystack_client.client import Paystack
from paystack_client.errors import gateway_rejected
from paystack_client.logging import get_logger, sanitize_string_for_logging
from paystack_client.payments.provider import PaymentProvider
from paystack_client.payments.types import (
    PaymentIntentRequest,
    PaymentIntentResponse,
    PaymentStatus,
    PaymentTransaction,
)
from paystack_client.schemas import (
    PaystackResponse,
    RefundRecord,
    TransactionAuthorization,
    TransactionRecord,
)

logger = get_logger(__name__)


def _ensure_accepted(response: PaystackResponse[Any], action: str) -> dict[str, Any]:
    payload = response.model_dump(mode="json", warnings=False)
    if not response.status:
        logger.info("Paystack rejected %s: %s", action, sanitize_string_for_logging(response.message))
        raise gateway_rejected(response.message, payload)
    return payload


class PaystackPaymentProvider(PaymentProvider):
    """Maps the provider-neutral payment calls onto the Paystack client.

    Unlike the client itself, this layer treats ``status: false`` envelopes as
    failures and raises ``GatewayRejected``.
    """

    provider_name = "paystack"

    def __init__(self, client: Paystack) -> None:
        self._client = client

    @staticmethod
    def _normalize_status(raw_status: Any) -> PaymentStatus:
        value = str(raw_status or "").strip().lower()
        if value == "success":
            return PaymentStatus.SUCCEEDED
        if value in {"failed", "abandoned"}:
            return PaymentStatus.FAILED
        if value == "reversed":
            return PaymentStatus.REFUNDED
        return PaymentStatus.PENDING

    async def create_intent(self, payload: PaymentIntentRequest) -> PaymentIntentResponse:
        response = await self._client.transaction.initialize(
            amount=payload.amount_minor,
            email=payload.customer_email,
            currency=payload.currency.upper(),
            reference=payload.reference,
        )
        raw = _ensure_accepted(response, "transaction initialization")

        authorization = response.data if isinstance(response.data, TransactionAuthorization) else None
        return PaymentIntentResponse(
            reference=(authorization.reference if authorization else None) or payload.reference,
            status=PaymentStatus.PENDING,
            checkout_url=authorization.authorization_url if authorization else None,
            access_code=authorization.access_code if authorization else None,
            provider_payload=raw,
        )

    async def fetch_transaction(self, *, reference: str) -> PaymentTransaction:
        response = await self._client.transaction.verify(reference=reference)
        raw = _ensure_accepted(response, "transaction verification")

        record = response.data if isinstance(response.data, TransactionRecord) else None
        return PaymentTransaction(
            reference=reference,
            status=self._normalize_status(record.status if record else None),
            raw=raw,
        )

    async def refund(self, *, reference: str, amount_minor: int | None = None) -> PaymentTransaction:
        if amount_minor is None:
            tx = await self.fetch_transaction(reference=reference)
            data = tx.raw.get("data")
            amount_minor = data.get("amount") if isinstance(data, dict) else None
            if amount_minor is None:
                raise gateway_rejected("Paystack transaction amount not available for refund", tx.raw)

        response = await self._client.refund.create(transaction=reference, amount=amount_minor)
        raw = _ensure_accepted(response, "refund creation")

        refund = response.data if isinstance(response.data, RefundRecord) else None
        refund_status = (refund.status if refund else None) or ""
        if refund_status.lower() == "failed":
            status = PaymentStatus.FAILED
        elif refund_status.lower() == "processed":
            status = PaymentStatus.REFUNDED
        else:
            status = PaymentStatus.PENDING
        return PaymentTransaction(reference=reference, status=status, raw=raw)
