"""Command implementations for the NihontoSearch CLI.

Keeps the compile loop apart from click parameter handling and from output
formatting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from NihontoSearch.renderers import OutputWriter
from NihontoSearch.services.compiler import QueryCompiler
from NihontoSearch.utils.log import log


@dataclass(slots=True)
class CompileCommand:
    """Compile a batch of search box queries and hand each plan to the writer."""

    compiler: QueryCompiler
    output_writer: OutputWriter
    queries: Sequence[str]
    max_query_length: int

    def execute(self) -> None:
        """Compile every query in order.

        Queries longer than `max_query_length` are cut to that length first.
        """
        multiple = len(self.queries) > 1
        for idx, raw in enumerate(self.queries, start=1):
            if multiple:
                log.info("=== Query %d/%d ===", idx, len(self.queries))
            if len(raw) > self.max_query_length:
                log.warning(
                    "Query %d is %d characters, truncating to %d",
                    idx,
                    len(raw),
                    self.max_query_length,
                )
                raw = raw[: self.max_query_length]

            plan = self.compiler.compile(raw)
            log.debug("Plan: %s", plan)
            self.output_writer.write_plan(plan)
