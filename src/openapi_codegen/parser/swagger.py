"""OpenAPI / Swagger enum collector.

Finds the enum schemas of Swagger 2.0 and OpenAPI 3.x documents and
returns them merged with their x-enum-* extensions.
"""

from pathlib import Path
from typing import Any

import yaml

from .base import EnumMember
from .detect import detect_version
from .enums import extend_enum, get_enum


def load_document(file_path: Path) -> Any:
    """Load a YAML or JSON document."""
    text = file_path.read_text(encoding="utf-8")
    return yaml.safe_load(text)


def parse_enums(doc: dict) -> dict[str, list[EnumMember]]:
    """Collect enums keyed by schema name, or ``Schema.property`` for properties."""
    enums: dict[str, list[EnumMember]] = {}

    for name, schema in _schemas(doc).items():
        if not isinstance(schema, dict):
            continue
        if _is_enum(schema):
            enums[name] = _build_enum(schema)

        properties = schema.get("properties")
        if not isinstance(properties, dict):
            continue
        for prop_name, prop in properties.items():
            if isinstance(prop, dict) and _is_enum(prop):
                enums[f"{name}.{prop_name}"] = _build_enum(prop)

    return enums


def _schemas(doc: dict) -> dict:
    version = detect_version(doc)
    schemas = None
    if version == "v2":
        schemas = doc.get("definitions")
    elif version == "v3":
        components = doc.get("components")
        if isinstance(components, dict):
            schemas = components.get("schemas")
    return schemas if isinstance(schemas, dict) else {}


def _is_enum(schema: dict) -> bool:
    return bool(schema.get("enum")) and schema.get("type") != "boolean"


def _build_enum(schema: dict) -> list[EnumMember]:
    return extend_enum(get_enum(schema["enum"]), schema)
