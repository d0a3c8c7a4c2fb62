"""Detect which OpenAPI / Swagger version a loaded document uses."""

from typing import Any


def detect_version(doc: Any) -> str | None:
    """Return 'v2' for Swagger 2.0, 'v3' for OpenAPI 3.x, otherwise None."""
    if not isinstance(doc, dict):
        return None
    if "swagger" in doc:
        return "v2"
    if "openapi" in doc:
        return "v3"
    return None
