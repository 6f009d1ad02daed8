from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    database_url: str = "sqlite:///./tickets.db"
    secret_key: str = "dev-secret-key-change-in-production"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    # Identity of the event issuer (administrator)
    issuer: str = "issuer"

    # Event parameters used to create the event on first startup
    event_name: Optional[str] = None
    event_symbol: Optional[str] = None
    event_start_date: Optional[int] = None
    event_supply_cap: Optional[int] = None
    event_base_price: Optional[int] = None
    event_price_multiple_cap: Optional[int] = None
    event_transfer_fee_percent: Optional[int] = None

    allowed_hosts: list[str] = ["localhost", "127.0.0.1", "testserver"]
    rate_limit: str = "60/minute"

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def has_event_parameters(self) -> bool:
        return None not in (
            self.event_name,
            self.event_symbol,
            self.event_start_date,
            self.event_supply_cap,
            self.event_base_price,
            self.event_price_multiple_cap,
            self.event_transfer_fee_percent,
        )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
