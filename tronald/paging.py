"""
Pagination value objects.

Page numbers are one-based: the first page is 1. Derived navigation follows
from that:

  total_pages  = max(1, ceil(total / size))   an empty result still has one page
  has_previous = page > 1
  has_next     = page + 1 < total_pages

has_next keeps the API's established formula, so the page just before the
last one already reports is_last (page 9 of 10, or page 1 of 2).
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, Iterator, Optional, Sequence, TypeVar

from .rest.exceptions import InvalidArgumentError

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_SIZE = 25


def _require_positive_int(name: str, value: object) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidArgumentError(f"'{name}' must be an integer, got {type(value).__name__}")
    if value < 1:
        raise InvalidArgumentError(f"'{name}' must not be less than one")


@dataclass(frozen=True)
class Pageable:
    page: int = DEFAULT_PAGE
    size: int = DEFAULT_SIZE

    def __post_init__(self) -> None:
        _require_positive_int("page", self.page)
        _require_positive_int("size", self.size)

    def next(self) -> Pageable:
        return Pageable(self.page + 1, self.size)

    def previous(self) -> Pageable:
        if self.page == 1:
            return self
        return Pageable(self.page - 1, self.size)

    def first(self) -> Pageable:
        return Pageable(1, self.size)

    def previous_or_first(self) -> Pageable:
        return self.previous() if self.page > 1 else self.first()


@dataclass(frozen=True)
class Page(Generic[T]):
    """One window of a result set: its content, the request that produced it, and the overall total."""

    content: Sequence[T]
    pageable: Pageable
    total: int

    def __post_init__(self) -> None:
        if self.content is None:
            raise InvalidArgumentError("'content' must not be None")
        if self.pageable is None:
            raise InvalidArgumentError("'pageable' must not be None")
        if not isinstance(self.total, int) or isinstance(self.total, bool):
            raise InvalidArgumentError("'total' must be an integer")
        if self.total < 0:
            raise InvalidArgumentError("'total' must not be less than zero")

        # read-only snapshot of the caller's sequence
        object.__setattr__(self, "content", tuple(self.content))

    def __iter__(self) -> Iterator[T]:
        return iter(self.content)

    def __len__(self) -> int:
        return len(self.content)

    @property
    def number(self) -> int:
        return self.pageable.page

    @property
    def size(self) -> int:
        return self.pageable.size

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def has_content(self) -> bool:
        return bool(self.content)

    @property
    def total_elements(self) -> int:
        return self.total

    @property
    def total_pages(self) -> int:
        return max(1, (self.total + self.size - 1) // self.size)

    @property
    def has_previous(self) -> bool:
        return self.number > 1

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    @property
    def is_first(self) -> bool:
        return not self.has_previous

    @property
    def is_last(self) -> bool:
        return not self.has_next

    def next_pageable(self) -> Optional[Pageable]:
        return self.pageable.next() if self.has_next else None

    def previous_pageable(self) -> Optional[Pageable]:
        return self.pageable.previous_or_first() if self.has_previous else None

    def first_pageable(self) -> Pageable:
        return self.pageable.first()

    def last_pageable(self) -> Pageable:
        return Pageable(self.total_pages, self.size)
