"""Application settings — company details and service options.

Read from the environment (``QUOTETREK_`` prefix) or a ``.env`` file, e.g.
``QUOTETREK_COMPANY_PHONE=+966500000000``.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Company (shown on exported quotations)
    company_name: str = "Roshan Tours & Travels"
    company_tagline: str = "Professional Umrah & Travel Packages"
    company_phone: str = "+966XXXXXXXXX"
    company_email: str = "info@roshantoursntravels.com"

    # Currency (display only; the engine is currency-agnostic)
    currency_code: str = "GBP"
    currency_symbol: str = "£"

    # Quotations
    quotation_prefix: str = "RTT"
    quotation_validity_days: int = Field(default=7, ge=1)

    # Service
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    cors_origins: str = "*"

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",")]

    model_config = {
        "env_prefix": "QUOTETREK_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
