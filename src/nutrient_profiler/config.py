"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from nutrient_profiler.domain.risk import RiskThresholds

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    api_token: str
    supabase_url: str
    supabase_service_key: str
    fdc_api_key: str
    fdc_base_url: str = "https://api.nal.usda.gov/fdc/v1"
    fdc_search_ttl_seconds: int = 3600
    fdc_food_ttl_seconds: int = 86400
    fdc_retry_attempts: int = Field(default=1, ge=0)
    nutrition_debug: bool = False
    default_portion_grams: float = Field(default=100.0, gt=0)
    low_confidence_threshold: float = 0.6
    risk_high_carbs: float = 45.0
    risk_high_sugar: float = 25.0
    risk_moderate_carbs: float = 20.0
    risk_moderate_sugar: float = 10.0
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def risk_thresholds(self) -> RiskThresholds:
        """Build risk thresholds from the configured gram limits."""
        return RiskThresholds(
            high_carbs=self.risk_high_carbs,
            high_sugar=self.risk_high_sugar,
            moderate_carbs=self.risk_moderate_carbs,
            moderate_sugar=self.risk_moderate_sugar,
        )
