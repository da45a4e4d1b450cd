"""Base classes for output writers.

Separates compiling queries from presenting the resulting plans.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from NihontoSearch.core.models import QueryPlan


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_plan(self, plan: QueryPlan) -> None:
        """Write one compiled query plan.

        Args:
            plan: Plan produced by the query compiler.
        """

    @abstractmethod
    def finalize(self, action: str) -> None:
        """Finalize output (e.g., write accumulated plans to file).

        Args:
            action: The CLI command name (e.g., 'compile').
        """


@dataclass(slots=True)
class MultiOutputWriter(OutputWriter):
    """Delegate output to multiple writers."""

    writers: Sequence[OutputWriter]

    def write_plan(self, plan: QueryPlan) -> None:
        for writer in self.writers:
            writer.write_plan(plan)

    def finalize(self, action: str) -> None:
        for writer in self.writers:
            writer.finalize(action)
