"""Service layer for NihontoSearch.

Provides the query compiler and a factory that builds it from configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from NihontoSearch.services.compiler import QueryCompiler

if TYPE_CHECKING:
    from NihontoSearch.config import AppConfig


def create_query_compiler(config: AppConfig) -> QueryCompiler:
    """Create a query compiler from the search section of the config.

    Args:
        config: Application configuration.

    Returns:
        Configured QueryCompiler instance.
    """
    return QueryCompiler(
        prefix_match=config.search.prefix_match,
        min_term_length=config.search.min_term_length,
        extract_provinces=config.search.extract_provinces,
    )


__all__ = [
    "QueryCompiler",
    "create_query_compiler",
]
