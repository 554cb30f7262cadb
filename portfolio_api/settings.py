from datetime import timedelta
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    host: str = "0.0.0.0"  # noqa: S104
    port: int = 5000
    root_path: str = ""

    debug: bool = False
    reload: bool = False

    frontend_url: str = "http://localhost:3000"

    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_user: str = Field(min_length=1)
    smtp_password: str = Field(min_length=1)
    smtp_from: str = ""
    smtp_tls: bool = False
    smtp_starttls: bool = True

    contact_email: str = Field(min_length=1, description="Recipient of contact form submissions")

    mail_backend: Literal["smtp", "memory"] = "smtp"

    contact_rate_limit: int = Field(3, ge=1)
    contact_rate_window: timedelta = timedelta(minutes=15)
    global_rate_limit: int = Field(100, ge=1)
    global_rate_window: timedelta = timedelta(minutes=15)

    maintenance_mode: bool = False
    maintenance_duration: str | None = None

    sentry_dsn: str | None = None
    sentry_environment: str = "test"

    @model_validator(mode="after")
    def _default_sender(self) -> "Settings":
        if not self.smtp_from:
            self.smtp_from = self.smtp_user
        return self
