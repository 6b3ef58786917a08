"""Persistence port for meal analyses."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from nutrient_profiler.domain.analysis import AnalysisRecord, MealAnalysis


class AnalysisHistoryRepository(Protocol):
    """Persistence interface for analysis results."""

    def save_analysis(self, user_id: UUID, analysis: MealAnalysis) -> UUID:
        """Store an analysis and return its id."""

    def list_recent(self, user_id: UUID, limit: int) -> list[AnalysisRecord]:
        """Return the most recent analyses, newest first."""


@dataclass
class HistoryService:
    """Read access to stored analyses."""

    repository: AnalysisHistoryRepository

    def list_history(self, user_id: UUID, limit: int = 20) -> list[AnalysisRecord]:
        """Return recent analyses for a user."""
        return self.repository.list_recent(user_id, limit=max(1, limit))
