"""Data models for enums parsed out of an OpenAPI / Swagger document."""

from typing import Any, Mapping

from pydantic import BaseModel


class EnumMember(BaseModel):
    """A single enum member as the code generator emits it."""

    name: str
    value: Any
    type: str  # string / number
    description: str | None = None
    title: str | None = None


def _as_list(value: Any) -> list | None:
    return value if isinstance(value, list) else None


def _strings(value: Any) -> list[str] | None:
    items = _as_list(value)
    if items is None:
        return None
    return [item for item in items if isinstance(item, str)]


class EnumExtension(BaseModel):
    """The x-enum-* vendor extension arrays of a schema node.

    Names, titles and descriptions keep textual entries only, values are kept
    as-is. Arrays line up with enum members by index.
    """

    values: list[Any] | None = None
    names: list[str] | None = None
    titles: list[str] | None = None
    descriptions: list[str] | None = None

    @classmethod
    def from_definition(cls, definition: Mapping[str, Any]) -> "EnumExtension":
        return cls(
            values=_as_list(definition.get("x-enum-values")),
            names=_strings(definition.get("x-enum-varnames")),
            titles=_strings(definition.get("x-enum-titles")),
            descriptions=_strings(definition.get("x-enum-descriptions")),
        )
