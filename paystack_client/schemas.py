from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
    model_validator,
)

DataT = TypeVar("DataT")


class PaystackResponse(BaseModel, Generic[DataT]):
    """Envelope wrapping every Paystack JSON response.

    ``status`` is the gateway's own verdict and is independent of the HTTP
    status code. Any parsed JSON fits the envelope: a missing ``status``
    reads as ``False``, and ``data`` that does not match the endpoint's model
    is kept as the raw JSON value.
    """

    model_config = ConfigDict(extra="allow")

    status: bool = False
    message: str = ""
    data: DataT | None = None

    @model_validator(mode="before")
    @classmethod
    def wrap_bare_json(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return {"data": values}
        return values

    @field_validator("status", mode="wrap")
    @classmethod
    def lenient_status(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> bool:
        try:
            return handler(value)
        except ValidationError:
            return value is True

    @field_validator("message", mode="wrap")
    @classmethod
    def lenient_message(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> str:
        try:
            return handler(value)
        except ValidationError:
            return "" if value is None else str(value)

    @field_validator("data", mode="wrap")
    @classmethod
    def raw_data_fallback(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        try:
            return handler(value)
        except ValidationError:
            return value


class _GatewayRecord(BaseModel):
    model_config = ConfigDict(extra="allow")


class TransactionRecord(_GatewayRecord):
    id: int | None = None
    status: str | None = None
    reference: str | None = None
    amount: int | None = None
    currency: str | None = None
    gateway_response: str | None = None
    paid_at: str | None = None


class TransactionAuthorization(_GatewayRecord):
    authorization_url: str | None = None
    access_code: str | None = None
    reference: str | None = None


class RefundRecord(_GatewayRecord):
    id: int | None = None
    status: str | None = None
    reference: str | None = None
    amount: int | None = None


TransactionResponse = PaystackResponse[TransactionRecord]
AuthorizationResponse = PaystackResponse[TransactionAuthorization]
RefundResponse = PaystackResponse[RefundRecord]
