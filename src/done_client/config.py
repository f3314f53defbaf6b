"""Configuration for done_client."""

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict


class DoneClientConfig(BaseModel):
    """Connection parameters of a single client. Immutable."""

    model_config = ConfigDict(frozen=True)

    base_url: str
    auth_token: str


class DoneSettings(BaseSettings):
    """Environment-driven settings (``DONE_*`` variables or ``.env``)."""

    # Done service
    base_url: str
    auth_token: str
    timeout: float | None = None  # seconds; None leaves requests unbounded

    # Logging
    log_level: str = "INFO"
    log_json_format: bool = True

    model_config = SettingsConfigDict(
        env_prefix="DONE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    def client_config(self) -> DoneClientConfig:
        return DoneClientConfig(base_url=self.base_url, auth_token=self.auth_token)
