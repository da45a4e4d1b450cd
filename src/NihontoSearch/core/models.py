from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Sequence


class NumericField(str, Enum):
    """Catalog columns a numeric range filter can target."""

    LENGTH = "nagasa_cm"
    PRICE = "price_value"


class Operator(str, Enum):
    """Range comparison operators, valued as the storage filter verbs."""

    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"


@dataclass(frozen=True, slots=True)
class NumericFilter:
    """One range predicate extracted from a `field<op><value>` token.

    Attributes:
        field: Target column.
        op: Comparison operator.
        value: Threshold. Price values are always in the base currency.
    """

    field: NumericField
    op: Operator
    value: float


@dataclass(frozen=True, slots=True)
class SemanticFilters:
    """Exact-match filters recognized from domain vocabulary.

    Each attribute behaves as a set: canonical values appear once, in the
    order they were first recognized.

    Attributes:
        certifications: Canonical certification keys (e.g. "Juyo", "Tokuju").
        item_types: Concrete item types (e.g. "katana", "tsuba").
        signature_statuses: "signed" and/or "unsigned".
        provinces: Canonical province/tradition names (e.g. "Bizen").
    """

    certifications: tuple[str, ...] = ()
    item_types: tuple[str, ...] = ()
    signature_statuses: tuple[str, ...] = ()
    provinces: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.certifications or self.item_types or self.signature_statuses or self.provinces)


@dataclass(frozen=True, slots=True)
class CompiledQuery:
    """Boolean full-text query in the tsquery dialect.

    Attributes:
        query_string: Text for the storage full-text match operator. Empty
            exactly when `is_empty` is true.
        is_phrase_search: Whether at least one quoted phrase contributed.
        terms: Surviving words and phrases, for diagnostics.
        is_empty: Whether no usable term survived.
    """

    query_string: str = ""
    is_phrase_search: bool = False
    terms: tuple[str, ...] = ()
    is_empty: bool = True


EMPTY_QUERY = CompiledQuery()


@dataclass(frozen=True, slots=True)
class QueryPlan:
    """Everything the caller needs to run one search box query.

    Attributes:
        raw: The input string as typed.
        numeric_filters: Range predicates, in token order.
        semantic_filters: Exact-match vocabulary filters.
        compiled: Full-text part of the query.
        free_terms: Unquoted words that reached the full-text builder.
        alias_expansions: Free term -> alternative spellings for terms that
            have known aliases.
    """

    raw: str
    numeric_filters: Sequence[NumericFilter] = ()
    semantic_filters: SemanticFilters = SemanticFilters()
    compiled: CompiledQuery = EMPTY_QUERY
    free_terms: Sequence[str] = ()
    alias_expansions: Mapping[str, Sequence[str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "numeric_filters", tuple(self.numeric_filters))
        object.__setattr__(self, "free_terms", tuple(self.free_terms))
        object.__setattr__(
            self,
            "alias_expansions",
            MappingProxyType({k: tuple(v) for k, v in self.alias_expansions.items()}),
        )

    @property
    def is_empty(self) -> bool:
        return not self.numeric_filters and self.semantic_filters.is_empty and self.compiled.is_empty
