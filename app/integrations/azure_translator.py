"""
Azure Translator integration for the Document Translation proxy.

This module provides the shared HTTP client and the call to the synchronous
Azure Translator document translation endpoint.
"""

import http.cookiejar
import logging
import uuid
from typing import IO, Optional, Union

import httpx

from config import ServiceCredentials

logger = logging.getLogger(__name__)

DOCUMENT_TRANSLATION_ROUTE = "/translator/document:translate"
DOCUMENT_TRANSLATION_API_VERSION = "2024-05-01"
SOURCE_LANGUAGE = "en"
TARGET_LANGUAGE = "ja"

http_client: Optional[httpx.AsyncClient] = None


def build_document_translation_url(endpoint: str) -> str:
    """
    Build the document translation URL for an endpoint.

    Args:
        endpoint: Translator resource endpoint, with or without a trailing slash

    Returns:
        str: Full URL including the fixed api version and language pair
    """
    return (
        f"{endpoint.rstrip('/')}{DOCUMENT_TRANSLATION_ROUTE}"
        f"?api-version={DOCUMENT_TRANSLATION_API_VERSION}"
        f"&sourceLanguage={SOURCE_LANGUAGE}&targetLanguage={TARGET_LANGUAGE}"
    )


async def translate_document(
    client: httpx.AsyncClient,
    credentials: ServiceCredentials,
    document: Union[bytes, IO[bytes]],
    filename: Optional[str],
    content_type: Optional[str],
    timeout: float = 120.0
) -> httpx.Response:
    """
    Submit a document to Azure Translator.

    The response is returned as is, whatever its status; callers decide
    how to interpret it.

    Args:
        client: HTTP client to send the request with
        credentials: Translator credentials
        document: Document content or a readable binary file
        filename: File name declared for the document part
        content_type: Content type declared for the document part
        timeout: Request timeout in seconds

    Returns:
        httpx.Response: Translator response with the body fully read
    """
    url = build_document_translation_url(credentials.endpoint)

    headers = {
        "Ocp-Apim-Subscription-Key": credentials.subscription_key,
        "Ocp-Apim-Subscription-Region": credentials.region,
        "X-ClientTraceId": str(uuid.uuid4())
    }

    # An empty content type lets httpx guess from the filename
    files = {
        "document": (filename, document, content_type or None)
    }

    logger.debug(f"Submitting document {filename} to {url} (trace ID: {headers['X-ClientTraceId']})")

    response = await client.post(
        url,
        headers=headers,
        files=files,
        timeout=timeout
    )

    logger.debug(f"Translator responded with status {response.status_code} for {filename}")

    return response


async def initialize_translator_client(transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
    """
    Initialize the shared HTTP client used for translator and download calls.

    The client is shared by all requests, so its cookie jar refuses every
    cookie; one caller's file host must not see another caller's session.

    Args:
        transport: Transport to send requests through (httpx default if None)
    """
    global http_client
    logger.info("Initializing Azure Translator client")
    no_cookies = http.cookiejar.CookieJar(policy=http.cookiejar.DefaultCookiePolicy(allowed_domains=[]))
    http_client = httpx.AsyncClient(cookies=no_cookies, transport=transport)
    logger.info("Azure Translator client initialized successfully")


async def close_translator_client() -> None:
    """
    Close the shared HTTP client.
    """
    global http_client
    if http_client:
        logger.info("Closing Azure Translator client")
        await http_client.aclose()
        http_client = None
        logger.info("Azure Translator client closed successfully")


def get_translator_client() -> httpx.AsyncClient:
    """
    Get the shared HTTP client.

    Returns:
        httpx.AsyncClient: The client opened at application startup

    Raises:
        ValueError: If the client has not been initialized
    """
    if http_client is None:
        raise ValueError("Azure Translator client not initialized.")
    return http_client
