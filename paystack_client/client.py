from __future__ import annotations

import json
from typing import Any, TypeVar
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel

from paystack_client.currency import SupportedCurrency, coerce_currency
from paystack_client.errors import invalid_response, transport_failed
from paystack_client.logging import configure_logging, get_logger, sanitize_string_for_logging
from paystack_client.schemas import AuthorizationResponse, RefundResponse, TransactionResponse
from paystack_client.settings import DEFAULT_BASE_URL, get_settings
from paystack_client.types import PaystackRequest

logger = get_logger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)


def build_path(path: str, query: dict[str, str] | None = None) -> str:
    """Strip one trailing slash and always append ``/?`` plus the encoded query."""
    if path.endswith("/"):
        path = path[:-1]
    return path + "/?" + urlencode(query or {})


def encode_body(body: dict[str, Any] | None) -> bytes | None:
    """Serialize ``body`` as compact JSON, or ``None`` when it has no keys."""
    if not body:
        return None
    return json.dumps(body, separators=(",", ":")).encode("utf-8")


def _given(**fields: Any) -> dict[str, Any]:
    """Drop keyword arguments the caller left unset."""
    return {key: value for key, value in fields.items() if value is not None}


class Paystack:
    """Async client for the Paystack REST API.

    Calls are grouped by resource: ``client.transaction`` and ``client.refund``.
    Every call returns the gateway envelope as-is, including ``status: false``
    answers; inspecting ``status`` is left to the caller.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._http_client = http_client
        self._owns_http_client = http_client is None

        self.transaction = TransactionAPI(self)
        self.refund = RefundAPI(self)

    @classmethod
    def from_settings(cls) -> "Paystack":
        settings = get_settings()
        configure_logging(settings.log_level)
        return cls(settings.paystack_secret_key, base_url=settings.paystack_base_url)

    async def __aenter__(self) -> "Paystack":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    def _get_http_client(self) -> httpx.AsyncClient:
        # One long-lived client so calls reuse the same connection to the gateway
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=None)
        return self._http_client

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    async def execute(self, request: PaystackRequest) -> Any:
        if not request.path:
            raise ValueError("Paystack request path must not be empty")

        path = build_path(request.path, request.query)
        content = encode_body(request.body)
        logger.debug("Paystack request %s %s", request.method, sanitize_string_for_logging(path, 120))

        try:
            response = await self._get_http_client().request(
                request.method,
                self._base_url + path,
                headers=self._headers(),
                content=content,
            )
        except httpx.HTTPError as err:
            logger.warning(
                "Paystack request %s %s failed: %s",
                request.method,
                sanitize_string_for_logging(path, 120),
                type(err).__name__,
            )
            raise transport_failed(err) from err

        logger.debug(
            "Paystack response %s for %s %s",
            response.status_code,
            request.method,
            sanitize_string_for_logging(path, 120),
        )

        try:
            return json.loads(response.content)
        except ValueError as err:
            logger.warning("Paystack returned non-JSON body (HTTP %s)", response.status_code)
            raise invalid_response(err, response.content) from err

    async def _execute_as(self, request: PaystackRequest, response_model: type[ResponseT]) -> ResponseT:
        payload = await self.execute(request)
        return response_model.model_validate(payload)


class TransactionAPI:
    def __init__(self, client: Paystack) -> None:
        self._client = client

    async def verify(self, *, reference: str) -> TransactionResponse:
        return await self._client._execute_as(
            PaystackRequest(path="/transaction/verify/" + reference, method="GET"),
            TransactionResponse,
        )

    async def get(self, *, id: str | int) -> TransactionResponse:
        return await self._client._execute_as(
            PaystackRequest(path="/transaction/" + str(id), method="GET"),
            TransactionResponse,
        )

    async def initialize(
        self,
        *,
        amount: int,
        email: str | None = None,
        currency: SupportedCurrency | str | None = None,
        reference: str | None = None,
    ) -> AuthorizationResponse:
        return await self._client._execute_as(
            PaystackRequest(
                path="/transaction/initialize",
                method="POST",
                body=_given(
                    amount=amount,
                    email=email,
                    currency=coerce_currency(currency).value if currency is not None else None,
                    reference=reference,
                ),
            ),
            AuthorizationResponse,
        )


class RefundAPI:
    def __init__(self, client: Paystack) -> None:
        self._client = client

    async def create(self, *, transaction: str, amount: int) -> RefundResponse:
        return await self._client._execute_as(
            PaystackRequest(
                path="/refund",
                method="POST",
                body=_given(transaction=transaction, amount=amount),
            ),
            RefundResponse,
        )
