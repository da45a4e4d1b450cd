"""JSON output for compiled query plans.

Provides JsonFileWriter, which accumulates plans and writes one file per run.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from NihontoSearch.core.models import QueryPlan
from NihontoSearch.renderers.base import OutputWriter
from NihontoSearch.utils.log import log
from NihontoSearch.vocabulary import certification_variants, province_variants


def render_json(plan: QueryPlan) -> dict[str, Any]:
    """Render a plan into a JSON-serializable dict.

    Certifications and provinces carry the spellings the catalog stores
    them under, so a consumer can build its exact-match predicate directly.

    Args:
        plan: Compiled query plan.

    Returns:
        Dict with filters, compiled query and free terms.
    """
    semantic = plan.semantic_filters
    return {
        "raw": plan.raw,
        "numeric_filters": [
            {"field": f.field.value, "op": f.op.value, "value": f.value} for f in plan.numeric_filters
        ],
        "semantic_filters": {
            "certifications": [
                {"key": c, "db_variants": list(certification_variants(c))} for c in semantic.certifications
            ],
            "item_types": list(semantic.item_types),
            "signature_statuses": list(semantic.signature_statuses),
            "provinces": [
                {"key": p, "db_variants": list(province_variants(p))} for p in semantic.provinces
            ],
        },
        "tsquery": {
            "query_string": plan.compiled.query_string,
            "is_phrase_search": plan.compiled.is_phrase_search,
            "terms": list(plan.compiled.terms),
            "is_empty": plan.compiled.is_empty,
        },
        "free_terms": list(plan.free_terms),
        "alias_expansions": {k: list(v) for k, v in plan.alias_expansions.items()},
    }


class JsonFileWriter(OutputWriter):
    """Accumulate plans and write to JSON file on finalize."""

    def __init__(self, base_dir: str) -> None:
        """Initialize JSON writer.

        Args:
            base_dir: Base output directory.
        """
        self.output_dir = Path(base_dir) / "json"
        self.all_results: list[dict[str, Any]] = []

    def write_plan(self, plan: QueryPlan) -> None:
        self.all_results.append(render_json(plan))

    def finalize(self, action: str) -> None:
        """Write accumulated plans to `<base_dir>/json/<action>_<timestamp>.json`.

        Args:
            action: The CLI command name (used in filename).
        """
        payload = json.dumps(self.all_results, ensure_ascii=False, indent=2)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = self.output_dir / f"{action}_{timestamp}.json"
        output_path.write_text(payload, encoding="utf-8")
        log.info("JSON saved to %s", output_path)
