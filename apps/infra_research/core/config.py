from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Load env vars from apps/infra_research/.env first, then repo root .env
        env_file=[
            str((Path(__file__).resolve().parents[1] / ".env")),  # apps/infra_research/.env
            str((Path(__file__).resolve().parents[3] / ".env")),  # repo root .env
        ],
        extra="ignore",
    )
    app_env: str = Field(default="dev", alias="APP_ENV")

    # Candidate API hosts, tried in order for every request path
    infra_api_base_urls: list[str] = Field(
        default=["http://localhost:8787"],
        alias="INFRA_API_BASE_URLS",
    )
    infra_api_timeout: float = Field(default=60.0, alias="INFRA_API_TIMEOUT", gt=0)

    log_level: Optional[str] = Field(default=None, alias="INFRA_LOG_LEVEL")


settings = Settings()
