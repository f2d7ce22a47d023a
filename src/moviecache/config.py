from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="MOVIECACHE_", env_file=".env", extra="ignore")

    app_name: str = "movie-cache"
    env: str = "dev"
    host: str = "0.0.0.0"  # nosec B104 - intentional for container deployments
    port: int = 8080

    # Key-value store
    store_backend: Literal["redis", "memory"] = Field(
        default="redis", validation_alias="STORE_BACKEND"
    )
    redis_url: str = Field(default="redis://localhost:6379/0", validation_alias="REDIS_URL")
    redis_socket_timeout: float = Field(default=5.0, validation_alias="REDIS_SOCKET_TIMEOUT")

    # Observability
    log_level: str = "INFO"
    log_json: bool | None = Field(default=None, validation_alias="LOG_JSON")
    enable_metrics: bool = Field(default=True, validation_alias="ENABLE_METRICS")

    @property
    def use_json_logs(self) -> bool:
        """JSON logs unless explicitly disabled or running in dev."""
        if self.log_json is not None:
            return self.log_json
        return self.env != "dev"


settings = Settings()
