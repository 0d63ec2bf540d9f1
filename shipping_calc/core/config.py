# shipping_calc/core/config.py

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Shipping-calc settings.
    Loads values from environment variables (.env file)
    """
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # DHL (Airborne eCommerce) API
    DHL_API_USER: str = ""
    DHL_API_PASSWORD: str = ""
    DHL_SHIPPING_KEY: str = ""
    DHL_ACCOUNT_NUM: str = ""
    DHL_ENDPOINT: str = "https://eCommerce.airborne.com/ApiLandingTest.asp"  # test bed

    # Freightquote XML quoter
    # xmltest@FreightQuote.com / XML works as a generic test account
    FREIGHTQUOTE_EMAIL: str = ""
    FREIGHTQUOTE_PASSWORD: str = ""
    FREIGHTQUOTE_ENDPOINT: str = "http://b2b.freightquote.com/dll/fqxmlquoter.asp"

    # Transport
    SHIPPING_HTTP_TIMEOUT: Optional[float] = 30.0

    # Logging
    LOG_LEVEL: str = "INFO"


@lru_cache()
def get_settings():
    return Settings()
