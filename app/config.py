"""
Configuration settings for the Document Translation proxy.

This module loads environment variables and provides configuration settings
for the application, including the Azure Translator credentials.
"""

from functools import lru_cache
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application settings
    APP_TITLE: str = "Document Translation API"
    APP_DESCRIPTION: str = "Translates remotely hosted documents from English to Japanese using Azure Translator"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = Field(default=False)
    ENVIRONMENT: str = Field(default="production")
    PORT: int = Field(default=8000)
    ENABLE_DOCS: bool = Field(default=True)

    # CORS settings
    CORS_ORIGINS: List[str] = Field(default=["http://localhost:3000"])

    # Azure Translator settings (not validated here; a missing value
    # surfaces as an authentication failure from the translator)
    TRANSLATOR_TEXT_SUBSCRIPTION_KEY: str = Field(default="")
    TRANSLATOR_TEXT_ENDPOINT: str = Field(default="")
    TRANSLATOR_TEXT_REGION: str = Field(default="")

    # Outbound call settings
    DOWNLOAD_TIMEOUT_SECONDS: float = Field(default=30.0, gt=0)
    TRANSLATION_TIMEOUT_SECONDS: float = Field(default=120.0, gt=0)

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)


class ServiceCredentials(BaseModel):
    """Immutable Azure Translator credentials."""

    subscription_key: str
    endpoint: str
    region: str

    model_config = ConfigDict(frozen=True)


# Create settings instance
settings = Settings()


@lru_cache
def get_service_credentials() -> ServiceCredentials:
    """
    Build the translator credentials once for the process lifetime.

    Returns:
        ServiceCredentials: Credentials taken from the settings
    """
    return ServiceCredentials(
        subscription_key=settings.TRANSLATOR_TEXT_SUBSCRIPTION_KEY,
        endpoint=settings.TRANSLATOR_TEXT_ENDPOINT,
        region=settings.TRANSLATOR_TEXT_REGION,
    )
