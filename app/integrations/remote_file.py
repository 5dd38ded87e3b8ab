"""
Remote file download for the Document Translation proxy.
"""

import logging

import httpx

logger = logging.getLogger(__name__)


async def download_file(client: httpx.AsyncClient, url: str, timeout: float = 30.0) -> bytes:
    """
    Download a file with a plain GET request.

    Args:
        client: HTTP client to send the request with
        url: Download URL supplied by the caller
        timeout: Request timeout in seconds

    Returns:
        bytes: File content

    Raises:
        httpx.HTTPError: On transport failures or a non-success status
        httpx.InvalidURL: If the URL cannot be parsed
    """
    response = await client.get(url, timeout=timeout, follow_redirects=True)
    response.raise_for_status()

    logger.debug(f"Downloaded {len(response.content)} bytes from {response.url.host}")

    return response.content
