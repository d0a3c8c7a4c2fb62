"""Request and result models shared by every generated client operation."""

from typing import Any

from pydantic import BaseModel


class Blob(BaseModel):
    """Binary payload with an optional declared media type."""

    data: bytes
    type: str = ""


class ApiRequestOptions(BaseModel):
    """Declarative description of one HTTP call."""

    method: str  # GET / POST / PUT / DELETE / PATCH
    path: str  # /api/users/:id
    query: dict[str, Any] | None = None
    headers: dict[str, str] | None = None
    body: Any = None
    form_data: dict[str, Any] | None = None
    response_header: str | None = None
    errors: dict[int, str] | None = None  # status -> message overrides


class ApiResult(BaseModel):
    """Outcome of one HTTP call, before error classification."""

    url: str
    ok: bool
    status: int
    status_text: str
    body: Any = None
