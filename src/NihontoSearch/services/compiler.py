"""Query compiler service: raw search text -> QueryPlan."""

from __future__ import annotations

from dataclasses import dataclass, field

from NihontoSearch.core.models import EMPTY_QUERY, NumericFilter, QueryPlan
from NihontoSearch.extract.numeric import extract_numeric
from NihontoSearch.extract.semantic import SemanticExtractor
from NihontoSearch.text.normalize import DEFAULT_MIN_TERM_LENGTH, expand_search_aliases, is_search_word, normalize
from NihontoSearch.tsquery.builder import TsqueryOptions, assemble_query, is_valid_tsquery, split_quoted
from NihontoSearch.utils.log import log


@dataclass(slots=True)
class QueryCompiler:
    """Compile one search box string into filters plus a tsquery.

    Stages run in a fixed order: quoted phrases are cut out first, then
    numeric filters, then vocabulary terms; whatever is left becomes the
    full-text part. Vocabulary phrases only match words typed next to each
    other: a range filter or a quoted span between two words separates them.
    The instance holds no per-query state and can be shared.
    """

    prefix_match: bool = True
    min_term_length: int = DEFAULT_MIN_TERM_LENGTH
    extract_provinces: bool = False
    _semantic: SemanticExtractor = field(init=False, repr=False)
    _options: TsqueryOptions = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._semantic = SemanticExtractor(
            extract_provinces=self.extract_provinces,
            min_term_length=self.min_term_length,
        )
        self._options = TsqueryOptions(
            prefix_match=self.prefix_match,
            min_term_length=self.min_term_length,
        )

    def compile(self, raw: str) -> QueryPlan:
        """Compile `raw` into a query plan.

        Args:
            raw: Search text as typed.

        Returns:
            Plan with numeric filters, semantic filters and the compiled
            full-text query. Never raises for string input.
        """
        raw = raw or ""
        if not is_search_word(raw.strip(), self.min_term_length):
            log.debug("Query too short, returning empty plan: %r", raw)
            return QueryPlan(raw=raw)

        phrases, pieces = split_quoted(raw, self.min_term_length)
        numeric_filters: list[NumericFilter] = []
        runs: list[str] = []
        for piece in pieces:
            numeric = extract_numeric(piece, min_term_length=self.min_term_length)
            numeric_filters.extend(numeric.filters)
            runs.extend(" ".join(run) for run in numeric.runs)
        semantic = self._semantic.extract_runs(runs)
        log.debug(
            "phrases=%s numeric=%s semantic=%s free=%s",
            phrases,
            numeric_filters,
            semantic.filters,
            semantic.remaining_terms,
        )

        compiled = assemble_query(phrases, " ".join(semantic.remaining_terms), self._options)
        if not is_valid_tsquery(compiled.query_string):
            log.warning("Discarding malformed tsquery %r for input %r", compiled.query_string, raw)
            compiled = EMPTY_QUERY

        return QueryPlan(
            raw=raw,
            numeric_filters=numeric_filters,
            semantic_filters=semantic.filters,
            compiled=compiled,
            free_terms=semantic.remaining_terms,
            alias_expansions=_alias_expansions(semantic.remaining_terms),
        )


def _alias_expansions(terms: tuple[str, ...]) -> dict[str, tuple[str, ...]]:
    out: dict[str, tuple[str, ...]] = {}
    for term in terms:
        expanded = tuple(dict.fromkeys(normalize(t) for t in expand_search_aliases(term)))
        if len(expanded) > 1:
            out[term] = expanded
    return out
