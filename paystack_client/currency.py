from __future__ import annotations

from enum import Enum


class SupportedCurrency(str, Enum):
    NGN = "NGN"
    GHS = "GHS"
    ZAR = "ZAR"
    KES = "KES"
    USD = "USD"
    XOF = "XOF"
    EGP = "EGP"


def coerce_currency(value: SupportedCurrency | str) -> SupportedCurrency:
    try:
        return SupportedCurrency(value)
    except ValueError as err:
        supported = ", ".join(item.value for item in SupportedCurrency)
        raise ValueError(f"Unsupported currency '{value}'. Expected one of: {supported}") from err
