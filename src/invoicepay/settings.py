"""Application settings loaded from environment variables."""

from decimal import Decimal
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration.

    Values come from the environment or a local ``.env`` file; unknown
    variables are ignored.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    commercial_tax_rate: Decimal = Field(default=Decimal("0.14"), ge=0, alias="COMMERCIAL_TAX_RATE")
    store_fallback_to_last: bool = Field(default=False, alias="INVOICE_STORE_FALLBACK_TO_LAST")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # OpenTelemetry
    otel_enabled: bool = Field(default=False, alias="OTEL_ENABLED")
    otel_service_name: str = Field(default="invoicepay", alias="OTEL_SERVICE_NAME")
    otel_exporter: Literal["console", "otlp", "none"] = Field(default="console", alias="OTEL_EXPORTER")
    otel_endpoint: str = Field(default="http://localhost:4318", alias="OTEL_EXPORTER_OTLP_ENDPOINT")


def get_settings() -> Settings:
    """Read settings fresh from the current environment."""
    return Settings()
