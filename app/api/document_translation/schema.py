from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class FileReference(BaseModel):
    id: Optional[str] = Field(None, description="ID of the referenced file")
    name: Optional[str] = Field(None, description="File name, used for the uploaded document part")
    mime_type: Optional[str] = Field(None, description="MIME type of the file (e.g., application/pdf)")
    download_link: Optional[str] = Field(None, description="URL the file can be downloaded from")

    model_config = ConfigDict(frozen=True)


class OpenAIFileIdRefs(BaseModel):
    """Request body. Only the first file reference is translated."""

    file_id_refs: Optional[List[FileReference]] = Field(
        None, alias="openaiFileIdRefs", description="Files to translate; only the first entry is used"
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class TranslatedFile(BaseModel):
    name: str = Field(..., description="Name of the translated file")
    mime_type: str = Field(..., description="MIME type reported by the translation service")
    content: str = Field(..., description="Base64 encoded translated document")

    model_config = ConfigDict(frozen=True)


class OpenAIFileResponse(BaseModel):
    file_responses: List[TranslatedFile] = Field(..., alias="openaiFileResponse")

    model_config = ConfigDict(populate_by_name=True)


class ErrorDetail(BaseModel):
    message: str = Field(..., description="Summary of the failure")
    details: str = Field(..., description="Raw error body returned by the translation service")
