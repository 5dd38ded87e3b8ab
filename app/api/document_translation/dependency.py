"""
Document Translation API dependencies.

This module provides dependency injection functions for the translation route.
"""

import httpx

from config import ServiceCredentials, get_service_credentials
from integrations.azure_translator import get_translator_client


async def get_http_client() -> httpx.AsyncClient:
    """
    Dependency that provides the shared HTTP client.

    Returns:
        httpx.AsyncClient: Client used for downloads and translator calls
    """
    return get_translator_client()


async def get_credentials() -> ServiceCredentials:
    """
    Dependency that provides the Azure Translator credentials.

    Returns:
        ServiceCredentials: Credentials loaded at startup
    """
    return get_service_credentials()
