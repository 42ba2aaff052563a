"""
Generic API response wrapper for API clients.
"""
from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class APIResponse:
    """Unified response wrapper for both in-memory and HTTP API clients.

    ``data`` is the decoded JSON body for JSON responses and the raw text
    otherwise (HTML pages, plain-text errors).
    """
    status_code: int
    data: Any
    headers: Dict[str, str]

    def json(self):
        return self.data

    @property
    def text(self):
        if isinstance(self.data, str):
            return self.data
        return str(self.data)

    @property
    def content_type(self) -> str:
        for name, value in self.headers.items():
            if name.lower() == 'content-type':
                return value.split(';')[0].strip()
        return ''


def _decode_body(response) -> Any:
    """JSON body when the server says it is JSON, text otherwise."""
    content_type = response.headers.get('content-type', '')
    if 'application/json' in content_type:
        try:
            return response.json()
        except ValueError:
            pass
    return response.text


def wrap_response(response) -> APIResponse:
    """Build an APIResponse from a requests or httpx response."""
    return APIResponse(
        status_code=response.status_code,
        data=_decode_body(response),
        headers=dict(response.headers)
    )
