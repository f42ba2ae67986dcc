from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str | None = None  # e.g. postgresql+asyncpg://host:5432/postgres
    database_user: str | None = None
    database_password: str | None = None
    database_echo: bool = False

    # CALL registrar_historial_pago(...) instead of the inline INSERT
    audit_use_stored_procedure: bool = False
    enforce_reservation_transitions: bool = True
    reference_retry_attempts: int = Field(default=3, ge=1)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
