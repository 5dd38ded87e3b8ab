from typing import Optional
import logging

import httpx
from fastapi import APIRouter, Body, Depends, HTTPException, status
from fastapi.responses import JSONResponse, PlainTextResponse

from api.document_translation.dependency import get_credentials, get_http_client
from api.document_translation.schema import ErrorDetail, OpenAIFileIdRefs, OpenAIFileResponse
from config import ServiceCredentials
from core.exceptions import DocumentTranslationError, UpstreamTranslationFailedError
from services.document_translation import translate_document

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/TranslateDocument",
    response_model=OpenAIFileResponse,
    summary="Translate an uploaded document from English to Japanese",
    description="Translates a document from English to Japanese using Azure Translator.",
    responses={
        200: {"description": "Successful translation"},
        400: {"description": "Bad request", "content": {"text/plain": {}}},
        500: {"description": "Internal server error"},
        "4XX": {"model": ErrorDetail, "description": "Translation failed upstream"},
        "5XX": {"model": ErrorDetail, "description": "Translation failed upstream"},
    },
)
async def translate_document_endpoint(
    request: Optional[OpenAIFileIdRefs] = Body(None),
    credentials: ServiceCredentials = Depends(get_credentials),
    client: httpx.AsyncClient = Depends(get_http_client)
):
    """
    Translates the first referenced document and returns it Base64 encoded.
    """
    try:
        translated = await translate_document(request, credentials, client)
    except UpstreamTranslationFailedError as e:
        return JSONResponse(status_code=e.status_code, content=e.to_detail())
    except DocumentTranslationError as e:
        return PlainTextResponse(e.message, status_code=e.status_code)
    except Exception as e:
        logger.error(f"Error translating document: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

    return OpenAIFileResponse(file_responses=[translated])
