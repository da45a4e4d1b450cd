"""Static currency conversion into the catalog base currency (JPY).

Rates change only together with `RATES_VERSION`; price filters are
compared against them.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Final, Mapping

BASE_CURRENCY: Final[str] = "JPY"
RATES_VERSION: Final[str] = "2025-01"

# Units of base currency per one unit of the named currency.
EXCHANGE_RATES: Final[Mapping[str, float]] = MappingProxyType(
    {
        "JPY": 1,
        "USD": 150,
        "EUR": 165,
        "GBP": 190,
    }
)

# Search-box spellings of foreign currencies.
CURRENCY_ALIASES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "usd": "USD",
        "dollar": "USD",
        "dollars": "USD",
        "eur": "EUR",
        "euro": "EUR",
        "euros": "EUR",
        "gbp": "GBP",
        "pound": "GBP",
        "pounds": "GBP",
    }
)


def get_currency_for_alias(alias: str) -> str | None:
    return CURRENCY_ALIASES.get(alias.lower())


def convert_to_base(amount: float, currency: str) -> int:
    """Convert an amount to whole units of the base currency.

    Unknown currency codes convert 1:1. Halves round up.

    Args:
        amount: Amount in `currency`.
        currency: ISO code, e.g. "USD".

    Returns:
        Rounded amount in the base currency.
    """
    rate = EXCHANGE_RATES.get(currency, 1)
    return int(math.floor(amount * rate + 0.5))
