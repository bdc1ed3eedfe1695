"""Module: outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


# Lookup succeeded.
@dataclass(frozen=True)
class Found(Generic[T]):
    record: T


# Lookup or search matched nothing. ``key`` is the id or filter that was used.
@dataclass(frozen=True)
class NotFound:
    entity: str
    key: Any

    @property
    def message(self) -> str:
        return f"{self.entity.capitalize()} not found: {self.key!r}"


# Search matched exactly one record.
@dataclass(frozen=True)
class SingleMatch:
    record_id: int


# Search matched several records; one page of them.
@dataclass(frozen=True)
class ListPage(Generic[T]):
    items: list[T]
    current_page: int
    total_pages: int
    total_items: int


Lookup = Union[Found[T], NotFound]
SearchOutcome = Union[NotFound, SingleMatch, ListPage[T]]
