"""`search` section and the top-level `queries` list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from NihontoSearch.config.common import Section, string_list


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Compiler settings.

    Attributes:
        prefix_match: Add `:*` to free words in the compiled tsquery.
        min_term_length: Minimum word length kept by every stage.
        max_query_length: Input longer than this is truncated before compiling.
        extract_provinces: Turn province words into filters instead of text.
        queries: Queries compiled when the CLI gets no arguments.
    """

    prefix_match: bool
    min_term_length: int
    max_query_length: int
    extract_provinces: bool
    queries: tuple[str, ...]


def load_search(raw: Mapping[str, Any]) -> SearchConfig:
    """Read the `search` section plus the optional `queries` list.

    Blank query entries are dropped.
    """
    section = Section.of(raw, "search")
    queries = string_list(raw.get("queries", []), "queries")
    return SearchConfig(
        prefix_match=section.flag("prefix_match"),
        min_term_length=section.integer("min_term_length"),
        max_query_length=section.integer("max_query_length"),
        extract_provinces=section.flag("extract_provinces", False),
        queries=tuple(q.strip() for q in queries if q.strip()),
    )


def check_search(config: SearchConfig) -> None:
    if config.min_term_length < 1:
        raise ValueError("search.min_term_length must be at least 1")
    if config.max_query_length < config.min_term_length:
        raise ValueError("search.max_query_length must be positive and >= search.min_term_length")
