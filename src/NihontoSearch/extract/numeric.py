"""Numeric range filters typed into the search box.

Grammar, per whitespace-delimited token (case-insensitive):

    token    := alias op number
    op       := ">=" | "<=" | ">" | "<"
    number   := digits ["." digits]

`alias` is tried first as a field alias (nagasa/cm/length -> blade length,
price/yen/jpy -> price) and then as a foreign currency alias (usd, eur,
gbp, ...), whose amount is converted into the base currency. Anything else,
including a token that has the right shape but an unknown alias, stays a
plain word.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final, Mapping

from NihontoSearch.core.models import NumericField, NumericFilter, Operator
from NihontoSearch.currency import convert_to_base, get_currency_for_alias
from NihontoSearch.text.normalize import DEFAULT_MIN_TERM_LENGTH, is_search_word

_TOKEN_RE = re.compile(r"^([a-z]+)(>=|<=|>|<)([0-9]+(?:\.[0-9]+)?)$")

FIELD_ALIASES: Final[Mapping[str, NumericField]] = MappingProxyType(
    {
        "nagasa": NumericField.LENGTH,
        "cm": NumericField.LENGTH,
        "length": NumericField.LENGTH,
        "price": NumericField.PRICE,
        "yen": NumericField.PRICE,
        "jpy": NumericField.PRICE,
    }
)

OPERATORS: Final[Mapping[str, Operator]] = MappingProxyType(
    {
        ">": Operator.GT,
        ">=": Operator.GTE,
        "<": Operator.LT,
        "<=": Operator.LTE,
    }
)


@dataclass(frozen=True, slots=True)
class NumericExtraction:
    """Result of scanning text for numeric filters.

    Attributes:
        filters: Filters in token order.
        remaining_words: Lower-cased tokens that were not filters, in order.
        runs: `remaining_words` split wherever a filter or a dropped token
            sat between them, so only words typed next to each other share
            a run.
    """

    filters: tuple[NumericFilter, ...] = ()
    remaining_words: tuple[str, ...] = ()
    runs: tuple[tuple[str, ...], ...] = ()


def parse_numeric_token(token: str) -> NumericFilter | None:
    """Parse one token into a filter, or return None if it is not one."""
    match = _TOKEN_RE.match(token.lower())
    if not match:
        return None
    alias, op_text, number_text = match.groups()
    op = OPERATORS.get(op_text)
    if op is None:
        return None
    value = float(number_text)
    # a long enough digit run parses to inf; such a token stays a word
    if not math.isfinite(value):
        return None

    field = FIELD_ALIASES.get(alias)
    if field is not None:
        return NumericFilter(field=field, op=op, value=value)

    currency = get_currency_for_alias(alias)
    if currency is not None:
        try:
            converted = float(convert_to_base(value, currency))
        except OverflowError:
            return None
        return NumericFilter(field=NumericField.PRICE, op=op, value=converted)

    return None


def extract_numeric(text: str, *, min_term_length: int = DEFAULT_MIN_TERM_LENGTH) -> NumericExtraction:
    """Pull numeric filters out of free text.

    Tokens shorter than `min_term_length` (unless dense-script) are
    discarded; every other token ends up either as a filter or in
    `remaining_words`.

    Args:
        text: Search text.
        min_term_length: Minimum token length.

    Returns:
        Extracted filters and leftover words.
    """
    if not text or not text.strip():
        return NumericExtraction()

    filters: list[NumericFilter] = []
    runs: list[list[str]] = [[]]
    for token in text.lower().split():
        if is_search_word(token, min_term_length):
            parsed = parse_numeric_token(token)
            if parsed is None:
                runs[-1].append(token)
                continue
            filters.append(parsed)
        # a filter or a dropped token ends the current run
        if runs[-1]:
            runs.append([])

    kept = tuple(tuple(run) for run in runs if run)
    return NumericExtraction(
        filters=tuple(filters),
        remaining_words=tuple(word for run in kept for word in run),
        runs=kept,
    )


def is_numeric_filter(token: str) -> bool:
    """Return True if a single token parses as a numeric filter."""
    return parse_numeric_token(token.strip()) is not None


def get_supported_field_aliases() -> list[str]:
    return list(FIELD_ALIASES)


def get_field_for_alias(alias: str) -> NumericField | None:
    """Resolve a field alias case-insensitively."""
    return FIELD_ALIASES.get(alias.strip().lower())
