from typing import Callable, Dict, List, Optional

import httpx
import pytest

from config import ServiceCredentials

FILE_HOST = "files.test"
TRANSLATOR_ENDPOINT = "https://translator.test"


class FakeUpstream:
    """Records outbound requests and answers them like the file host and the translator."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.file_content = b"Hello, world"
        self.download_error: Optional[Exception] = None
        self.download_status = 200
        self.translation_status = 200
        self.translation_body = "こんにちは、世界".encode("utf-8")
        self.translation_headers: Dict[str, str] = {
            "content-type": "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
        }

    @property
    def downloads(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == "GET"]

    @property
    def translations(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == "POST"]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == FILE_HOST:
            if self.download_error is not None:
                raise self.download_error
            return httpx.Response(self.download_status, content=self.file_content)
        return httpx.Response(
            self.translation_status,
            content=self.translation_body,
            headers=self.translation_headers,
        )


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def http_client(upstream):
    return httpx.AsyncClient(transport=httpx.MockTransport(upstream.handler))


@pytest.fixture
def credentials() -> ServiceCredentials:
    return ServiceCredentials(
        subscription_key="test-key",
        endpoint=TRANSLATOR_ENDPOINT,
        region="japaneast",
    )


@pytest.fixture
def file_ref_payload() -> Callable[..., dict]:
    def _payload(**overrides) -> dict:
        ref = {
            "id": "file-1",
            "name": "a.docx",
            "mime_type": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
            "download_link": f"http://{FILE_HOST}/a.docx",
        }
        ref.update(overrides)
        return {"openaiFileIdRefs": [ref]}

    return _payload
