from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

HTTPMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


@dataclass(frozen=True)
class PaystackRequest:
    path: str
    method: HTTPMethod
    # Accepted for callers but never sent; outgoing headers are fixed by the client.
    headers: dict[str, str] | None = None
    body: dict[str, Any] | None = None
    query: dict[str, str] | None = None
