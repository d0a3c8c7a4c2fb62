"""Enum member construction and x-enum-* extension merging."""

import re
from typing import Any, Mapping

from .base import EnumExtension, EnumMember


def get_enum(values: Any) -> list[EnumMember]:
    """Build enum members from a schema ``enum`` array.

    Duplicates and anything that is not a string or number are dropped.
    """
    if not isinstance(values, list):
        return []

    members: list[EnumMember] = []
    seen: list[Any] = []
    for value in values:
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            continue
        if value in seen:
            continue
        seen.append(value)

        if isinstance(value, str):
            members.append(EnumMember(name=_enum_name(value), value=value, type="string"))
        else:
            members.append(EnumMember(name=f"_{value}", value=str(value), type="number"))
    return members


def _enum_name(value: str) -> str:
    name = re.sub(r"\W+", "_", value)
    name = re.sub(r"^(\d+)", r"_\1", name)
    name = re.sub(r"([a-z])([A-Z]+)", r"\1_\2", name)
    return name.upper()


def _at(items: list | None, index: int) -> Any:
    if items is not None and index < len(items):
        return items[index]
    return None


def extend_enum(enumerators: list[EnumMember], definition: Mapping[str, Any]) -> list[EnumMember]:
    """Overlay the x-enum-* arrays of ``definition`` onto ``enumerators``.

    Entries are matched by position. A missing or falsy entry keeps the
    member's own field; the member type is never overridden.
    """
    extension = EnumExtension.from_definition(definition)

    return [
        EnumMember(
            name=_at(extension.names, index) or enumerator.name,
            description=_at(extension.descriptions, index) or enumerator.description,
            value=_at(extension.values, index) or enumerator.value,
            title=_at(extension.titles, index) or enumerator.title,
            type=enumerator.type,
        )
        for index, enumerator in enumerate(enumerators)
    ]
