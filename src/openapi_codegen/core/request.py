"""Request executor used by every generated client operation.

Builds the URL, headers and body from an ApiRequestOptions, sends exactly one
request through httpx, decodes the response and classifies the result.
No retry logic.
"""

import json
import logging
from enum import Enum
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import BaseModel

from openapi_codegen.core.config import ClientConfig
from openapi_codegen.core.errors import ApiError, GenericRequestError, HttpStatusError
from openapi_codegen.core.models import ApiRequestOptions, ApiResult, Blob

logger = logging.getLogger(__name__)

DEFAULT_ERRORS: dict[int, str] = {
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    500: "Internal Server Error",
    502: "Bad Gateway",
    503: "Service Unavailable",
}

GENERIC_ERROR = "Generic Error"

# Characters left unescaped by JavaScript's encodeURIComponent.
URI_COMPONENT_SAFE = "-_.!~*'()"


class DecodeStrategy(str, Enum):
    JSON = "json"
    TEXT = "text"


def _to_str(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _has_body(body: Any) -> bool:
    """Only None, False, empty strings and zero count as no body."""
    if body is None or body is False:
        return False
    if isinstance(body, (str, int, float)):
        return bool(body)
    return True


def _encode(value: Any) -> str:
    return quote(_to_str(value), safe=URI_COMPONENT_SAFE)


def get_query_string(params: dict[str, Any]) -> str:
    """Build ``?k=v&k=v`` from params, one pair per list element.

    None values are skipped. Returns an empty string when nothing remains.
    """
    qs = []
    for key, value in params.items():
        if value is None:
            continue
        items = value if isinstance(value, (list, tuple)) else [value]
        for item in items:
            if item is None:
                continue
            qs.append(f"{_encode(key)}={_encode(item)}")

    if qs:
        return "?" + "&".join(qs)
    return ""


def get_url(options: ApiRequestOptions, config: ClientConfig) -> str:
    path = options.path.replace(":", "_")
    url = f"{config.base}{path}"

    if options.query:
        return url + get_query_string(options.query)
    return url


def get_form_data(params: dict[str, Any]) -> list[tuple[str, tuple]]:
    """Convert form fields into httpx multipart entries, skipping None."""
    fields = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, Blob):
            fields.append((key, ("blob", value.data, value.type or None)))
        elif isinstance(value, (bytes, bytearray)):
            fields.append((key, (None, bytes(value))))
        else:
            fields.append((key, (None, _to_str(value))))
    return fields


def get_headers(options: ApiRequestOptions, config: ClientConfig) -> httpx.Headers:
    merged = {"Accept": "application/json", **(options.headers or {})}
    items = list(merged.items())

    if config.token:
        items.append(("Authorization", f"Bearer {config.token}"))

    body = options.body
    if _has_body(body):
        if isinstance(body, Blob):
            if body.type:
                items.append(("Content-Type", body.type))
        elif isinstance(body, str):
            items.append(("Content-Type", "text/plain"))
        else:
            items.append(("Content-Type", "application/json"))

    return httpx.Headers(items)


def get_request_body(options: ApiRequestOptions) -> bytes | str | None:
    body = options.body
    if not _has_body(body):
        return None
    if isinstance(body, (bytes, bytearray)):
        return bytes(body)
    if isinstance(body, Blob):
        return body.data
    if isinstance(body, str):
        return body
    if isinstance(body, BaseModel):
        return body.model_dump_json()
    return json.dumps(body)


async def send_request(
    client: httpx.AsyncClient,
    options: ApiRequestOptions,
    config: ClientConfig,
    url: str,
) -> httpx.Response:
    headers = get_headers(options, config)
    if options.form_data:
        req = client.build_request(
            options.method, url, headers=headers, files=get_form_data(options.form_data)
        )
    else:
        req = client.build_request(
            options.method, url, headers=headers, content=get_request_body(options)
        )
    return await client.send(req, stream=True)


def get_response_header(response: httpx.Response, response_header: str | None) -> str | None:
    if response_header:
        content = response.headers.get(response_header)
        if isinstance(content, str):
            return content
    return None


def classify_content_type(content_type: str | None) -> DecodeStrategy | None:
    """Pick how to decode a body from its Content-Type header.

    ``application/json`` with or without parameters is JSON, any other media
    type is text. A missing header selects nothing.
    """
    if not content_type:
        return None
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type == "application/json":
        return DecodeStrategy.JSON
    return DecodeStrategy.TEXT


async def get_response_body(response: httpx.Response) -> Any:
    strategy = classify_content_type(response.headers.get("Content-Type"))
    if strategy is None:
        return None

    await response.aread()
    try:
        if strategy is DecodeStrategy.JSON:
            return response.json()
        return response.text
    except ValueError:
        logger.warning("Could not decode response body from %s", response.url, exc_info=True)
    return None


def classify(options: ApiRequestOptions, result: ApiResult) -> ApiResult | ApiError:
    """Return the result, or the error it maps to, without raising.

    A status present in the error table wins even when the response is ok.
    """
    errors = {**DEFAULT_ERRORS, **(options.errors or {})}

    error = errors.get(result.status)
    if error:
        return HttpStatusError(result, error)

    if not result.ok:
        return GenericRequestError(result, GENERIC_ERROR)

    return result


def catch_errors(options: ApiRequestOptions, result: ApiResult) -> None:
    outcome = classify(options, result)
    if isinstance(outcome, ApiError):
        raise outcome


async def request(
    options: ApiRequestOptions,
    config: ClientConfig,
    client: httpx.AsyncClient | None = None,
) -> ApiResult:
    """Send one request and return its classified result.

    A client passed in is left open; otherwise a temporary one is used.

    Raises:
        HttpStatusError: status is in the error table.
        GenericRequestError: response is not ok.
        httpx.HTTPError: transport failure, propagated unchanged.
    """
    if client is None:
        async with httpx.AsyncClient(timeout=None, follow_redirects=True) as owned:
            return await _execute(owned, options, config)
    return await _execute(client, options, config)


async def _execute(
    client: httpx.AsyncClient,
    options: ApiRequestOptions,
    config: ClientConfig,
) -> ApiResult:
    url = get_url(options, config)
    response = await send_request(client, options, config, url)
    try:
        response_body = await get_response_body(response)
    finally:
        await response.aclose()
    response_header = get_response_header(response, options.response_header)

    result = ApiResult(
        url=url,
        ok=response.is_success,
        status=response.status_code,
        status_text=response.reason_phrase,
        body=response_header or response_body,
    )

    catch_errors(options, result)
    return result
