"""Supabase-backed analysis history."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from nutrient_profiler.domain.analysis import AnalysisRecord, MealAnalysis
from nutrient_profiler.domain.nutrition import NUTRIENT_FIELDS, NutrientProfile
from nutrient_profiler.domain.risk import RiskTier
from nutrient_profiler.domain.selection import Basis
from nutrient_profiler.services.history import AnalysisHistoryRepository

_TABLE = "analysis_history"


@dataclass
class SupabaseHistoryRepository(AnalysisHistoryRepository):
    """Stores each analysis as one row with the profile in flat columns."""

    client: Client

    def save_analysis(self, user_id: UUID, analysis: MealAnalysis) -> UUID:
        """Insert an analysis row and return its id."""
        nutrition = analysis.nutrition
        response = (
            self.client.table(_TABLE)
            .insert(
                {
                    "user_id": str(user_id),
                    "food_name": analysis.food_name,
                    "fdc_id": analysis.fdc_id,
                    "portion_grams": analysis.portion_grams,
                    **nutrition.profile.as_dict(),
                    "basis": nutrition.basis.value,
                    "risk_tier": nutrition.risk_tier.value,
                    "warnings": list(analysis.warnings),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to store analysis")
        return UUID(response.data[0]["id"])

    def list_recent(self, user_id: UUID, limit: int) -> list[AnalysisRecord]:
        """Return the newest analyses for a user."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [_to_record(row) for row in response.data or []]


def _to_record(row: dict[str, object]) -> AnalysisRecord:
    return AnalysisRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        created_at=datetime.fromisoformat(str(row["created_at"])),
        food_name=str(row["food_name"]),
        portion_grams=float(row["portion_grams"]),
        profile=NutrientProfile(
            **{name: float(row.get(name) or 0) for name in NUTRIENT_FIELDS}
        ),
        basis=Basis(row["basis"]),
        risk_tier=RiskTier(row["risk_tier"]),
        warnings=tuple(row.get("warnings") or ()),
    )
