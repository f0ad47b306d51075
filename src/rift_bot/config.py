"""Runtime configuration for rift-bot."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="RIFT_BOT_", env_file=".env", extra="ignore")

    app_name: str = "rift-bot"
    log_level: str = "INFO"
    pod_cost: int = Field(default=20, gt=0, description="Platinum spent per purchased pod.")
    turn_budget_ms: float = Field(
        default=95.0,
        gt=0,
        description="Per-turn response budget; slower turns are logged as warnings.",
    )
    seed: int | None = Field(default=None, description="Seed for the fallback random choice.")
    engine: str = "greedy"
    movement_policy: str = Field(default="hold", description="hold/frontier")
    history_size: int = Field(default=10, ge=1, description="Number of past turns kept for strategies.")
    turn_log_path: str | None = Field(default=None, description="Optional JSONL file receiving one record per turn.")
    telemetry_enabled: bool = False


settings = Settings()
