from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class PaymentStatus(str, Enum):
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    REFUNDED = "refunded"


@dataclass(frozen=True)
class PaymentIntentRequest:
    amount_minor: int
    currency: str
    reference: str
    customer_email: str | None = None


@dataclass(frozen=True)
class PaymentIntentResponse:
    reference: str
    status: PaymentStatus
    checkout_url: str | None
    access_code: str | None
    provider_payload: dict[str, Any]


@dataclass(frozen=True)
class PaymentTransaction:
    reference: str
    status: PaymentStatus
    raw: dict[str, Any]
