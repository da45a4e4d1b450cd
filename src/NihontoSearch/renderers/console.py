"""Console text output for compiled query plans."""

from __future__ import annotations

from NihontoSearch.core.models import NumericFilter, Operator, QueryPlan
from NihontoSearch.renderers.base import OutputWriter
from NihontoSearch.utils.log import log

_OP_SYMBOLS = {
    Operator.GT: ">",
    Operator.GTE: ">=",
    Operator.LT: "<",
    Operator.LTE: "<=",
}


def _fmt_number(value: float) -> str:
    return str(int(value)) if value.is_integer() else str(value)


def _fmt_filter(f: NumericFilter) -> str:
    return f"{f.field.value} {_OP_SYMBOLS[f.op]} {_fmt_number(f.value)}"


def render_text(plan: QueryPlan) -> str:
    """Render a plan into a human-readable text block.

    Args:
        plan: Compiled query plan.

    Returns:
        A formatted string ready to be printed.
    """
    lines = [f"Query: {plan.raw!r}"]
    if plan.is_empty:
        lines.append("   (nothing to search for)")
        return "\n".join(lines) + "\n"

    for f in plan.numeric_filters:
        lines.append(f"   Filter: {_fmt_filter(f)}")

    semantic = plan.semantic_filters
    if semantic.certifications:
        lines.append(f"   Certification: {', '.join(semantic.certifications)}")
    if semantic.item_types:
        lines.append(f"   Item type: {', '.join(semantic.item_types)}")
    if semantic.signature_statuses:
        lines.append(f"   Signature: {', '.join(semantic.signature_statuses)}")
    if semantic.provinces:
        lines.append(f"   Province: {', '.join(semantic.provinces)}")

    if not plan.compiled.is_empty:
        kind = "phrase" if plan.compiled.is_phrase_search else "terms"
        lines.append(f"   tsquery ({kind}): {plan.compiled.query_string}")
    for term, expansions in plan.alias_expansions.items():
        lines.append(f"   Alias: {term} -> {' | '.join(expansions)}")
    return "\n".join(lines) + "\n"


class ConsoleOutputWriter(OutputWriter):
    """Write plans to console via logging."""

    def write_plan(self, plan: QueryPlan) -> None:
        for line in render_text(plan).splitlines():
            log.info(line)

    def finalize(self, action: str) -> None:
        """No-op for console output."""
