"""
Base model classes for atsfit data models.

Every profile and result is immutable once constructed; callers that need
a modified profile build a new instance (``model_copy(update=...)``).
"""

from typing import Iterable

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class FrozenModel(BaseModel):
    """
    Base model for immutable, JSON-ready value objects.

    Accepts snake_case or camelCase input and dumps camelCase with
    ``model_dump(by_alias=True)``.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        use_enum_values=True,
        alias_generator=to_camel,
    )


def dedupe_casefold(items: Iterable[str]) -> tuple[str, ...]:
    """Strip items and drop empties and case-insensitive repeats, keeping the first spelling."""
    seen: set[str] = set()
    result: list[str] = []
    for item in items:
        cleaned = item.strip()
        key = cleaned.casefold()
        if not cleaned or key in seen:
            continue
        seen.add(key)
        result.append(cleaned)
    return tuple(result)
