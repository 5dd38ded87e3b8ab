"""
Document translation service for the Document Translation proxy.

Downloads the first referenced file, submits it to Azure Translator and
returns the translated document Base64 encoded.
"""

import base64
import io
import logging
from typing import Optional

import httpx

from config import ServiceCredentials, settings
from core.exceptions import DownloadFailedError, InvalidInputError, UpstreamTranslationFailedError
from integrations.azure_translator import translate_document as submit_document
from integrations.remote_file import download_file
from api.document_translation.schema import OpenAIFileIdRefs, TranslatedFile
from utils.logging import log_event

logger = logging.getLogger(__name__)

TRANSLATED_NAME_PREFIX = "translated_"
DEFAULT_MIME_TYPE = "application/octet-stream"


async def translate_document(
    request: Optional[OpenAIFileIdRefs],
    credentials: ServiceCredentials,
    client: httpx.AsyncClient,
    download_timeout: Optional[float] = None,
    translation_timeout: Optional[float] = None
) -> TranslatedFile:
    """
    Translate the first file referenced by a request from English to Japanese.

    Only the first file reference is used; any others are ignored.

    Args:
        request: File references supplied by the caller
        credentials: Azure Translator credentials
        client: HTTP client for the download and translation calls
        download_timeout: Download timeout in seconds (settings default if None)
        translation_timeout: Translation timeout in seconds (settings default if None)

    Returns:
        TranslatedFile: The translated document

    Raises:
        InvalidInputError: If no file or no download link is provided
        DownloadFailedError: If the source file cannot be downloaded
        UpstreamTranslationFailedError: If the translator returns a non-success status
    """
    if request is None or not request.file_id_refs:
        raise InvalidInputError("No files provided.")

    file_ref = request.file_id_refs[0]
    if not file_ref.download_link:
        raise InvalidInputError("Download link is missing.")

    if download_timeout is None:
        download_timeout = settings.DOWNLOAD_TIMEOUT_SECONDS
    if translation_timeout is None:
        translation_timeout = settings.TRANSLATION_TIMEOUT_SECONDS

    # 1. Download the source file
    try:
        file_bytes = await download_file(client, file_ref.download_link, timeout=download_timeout)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.warning(f"Download of {file_ref.name} failed: {e}")
        log_event("document_translation_failed", resource_id=file_ref.id, details={"stage": "download"})
        raise DownloadFailedError(str(e)) from e

    logger.info(f"Translating {file_ref.name} ({len(file_bytes)} bytes, {file_ref.mime_type})")

    # 2. Stage the content and submit it; the buffer is closed on every path
    with io.BytesIO(file_bytes) as staged:
        response = await submit_document(
            client,
            credentials,
            staged,
            file_ref.name,
            file_ref.mime_type,
            timeout=translation_timeout
        )

    # 3. Interpret the response
    if not response.is_success:
        logger.warning(f"Translation of {file_ref.name} failed with status {response.status_code}")
        log_event(
            "document_translation_failed",
            resource_id=file_ref.id,
            details={"stage": "translate", "status_code": response.status_code}
        )
        raise UpstreamTranslationFailedError(response.status_code, response.text)

    translated = TranslatedFile(
        name=f"{TRANSLATED_NAME_PREFIX}{file_ref.name or ''}",
        mime_type=response.headers.get("content-type") or DEFAULT_MIME_TYPE,
        content=base64.b64encode(response.content).decode("ascii"),
    )

    log_event(
        "document_translation_completed",
        resource_id=file_ref.id,
        details={"name": translated.name, "size": len(response.content)}
    )

    return translated
