from __future__ import annotations

import logging
from decimal import Decimal
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LedgerLimits(BaseModel):
    """Pay-in limit and notification thresholds shared by every account."""

    model_config = ConfigDict(frozen=True)

    pay_in_limit: Decimal = Field(default=Decimal("4000"), gt=0)
    low_funds_threshold: Decimal = Field(default=Decimal("500"), ge=0)
    approaching_pay_in_limit_threshold: Decimal = Field(default=Decimal("500"), ge=0)

    @model_validator(mode="after")
    def _check_threshold_within_limit(self) -> "LedgerLimits":
        if self.approaching_pay_in_limit_threshold > self.pay_in_limit:
            raise ValueError(
                "approaching_pay_in_limit_threshold cannot exceed pay_in_limit"
            )
        return self


class Settings(BaseSettings):
    database_url: str = "sqlite:///moneybox_ledger.db"
    log_level: str = "INFO"

    pay_in_limit: Decimal = Decimal("4000")
    low_funds_threshold: Decimal = Decimal("500")
    approaching_pay_in_limit_threshold: Decimal = Decimal("500")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="LEDGER_",
        extra="ignore",
    )

    def limits(self) -> LedgerLimits:
        return LedgerLimits(
            pay_in_limit=self.pay_in_limit,
            low_funds_threshold=self.low_funds_threshold,
            approaching_pay_in_limit_threshold=self.approaching_pay_in_limit_threshold,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)
