from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from budget_reconciler import StatusThresholds


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # App settings
    PROJECT_NAME: str = "BudgetReconciler"
    API_PREFIX: str = "/api"
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")

    # Front-end origins allowed to call the API
    CORS_ORIGINS: List[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://localhost:5173"]
    )

    # Budget status thresholds (percent of budget used)
    BUDGET_WARNING_THRESHOLD: float = Field(default=80.0)
    BUDGET_EXCEEDED_THRESHOLD: float = Field(default=100.0)
    BUDGET_UNDER_THRESHOLD: float = Field(default=30.0)

    def status_thresholds(self) -> StatusThresholds:
        return StatusThresholds(
            warning=self.BUDGET_WARNING_THRESHOLD,
            exceeded=self.BUDGET_EXCEEDED_THRESHOLD,
            under_budget=self.BUDGET_UNDER_THRESHOLD,
        )


settings = Settings()
