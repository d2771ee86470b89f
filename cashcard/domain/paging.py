"""
Page and sort handling for list endpoints.

Query strings follow the ``?page=0&size=20&sort=amount,desc`` convention:
``sort`` may be repeated, and a trailing ``asc``/``desc`` applies to every
field listed before it in the same parameter.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

ASC = "asc"
DESC = "desc"
SORTABLE_FIELDS = ("id", "amount", "owner")
# offsets are bound as signed 64-bit integers by the database
MAX_OFFSET = 2**63 - 1


class InvalidSortError(ValueError):
    """Raised when a sort parameter names an unknown field or direction."""


@dataclass(frozen=True)
class Order:
    field: str
    direction: str = ASC

    @property
    def descending(self) -> bool:
        return self.direction == DESC


@dataclass(frozen=True)
class Sort:
    orders: tuple[Order, ...] = ()

    @classmethod
    def by(cls, *fields: str, direction: str = ASC) -> "Sort":
        return cls(tuple(Order(f, direction) for f in fields))

    @property
    def is_sorted(self) -> bool:
        return bool(self.orders)

    def or_default(self, default: "Sort") -> "Sort":
        return self if self.is_sorted else default


DEFAULT_SORT = Sort.by("amount", direction=ASC)


@dataclass(frozen=True)
class PageRequest:
    page: int = 0
    size: int = 20
    sort: Sort = field(default_factory=lambda: DEFAULT_SORT)

    @property
    def offset(self) -> int:
        return self.page * self.size


def _parse_direction(token: str) -> Optional[str]:
    value = token.strip().lower()
    if value in (ASC, DESC):
        return value
    return None


def parse_sort(values: Iterable[str] | None) -> Sort:
    """Turn raw ``sort`` query values into a Sort.

    ``["amount,desc"]`` -> amount DESC, ``["owner", "amount,desc"]`` -> owner
    ASC then amount DESC, ``["owner,amount,desc"]`` -> both DESC.
    """
    orders: list[Order] = []
    for raw in values or ():
        parts = [p.strip() for p in (raw or "").split(",") if p.strip()]
        if not parts:
            continue
        direction = ASC
        if len(parts) > 1:
            maybe_direction = _parse_direction(parts[-1])
            if maybe_direction is not None:
                direction = maybe_direction
                parts = parts[:-1]
        for name in parts:
            if name not in SORTABLE_FIELDS:
                if _parse_direction(name) is not None:
                    raise InvalidSortError(f"Sort direction '{name}' must follow a field name")
                raise InvalidSortError(
                    f"Cannot sort by '{name}'; allowed fields: {', '.join(SORTABLE_FIELDS)}"
                )
            orders.append(Order(name, direction))
    return Sort(tuple(orders))


def page_request_from_query(
    page: Optional[int],
    size: Optional[int],
    sort: Iterable[str] | None,
    *,
    default_size: int,
    max_size: int,
    default_sort: Sort = DEFAULT_SORT,
) -> PageRequest:
    """Build a PageRequest, clamping out-of-range values instead of failing."""
    page_number = page if page is not None and page > 0 else 0
    if size is None or size < 1:
        page_size = default_size
    else:
        page_size = min(size, max_size)
    page_number = min(page_number, (MAX_OFFSET - page_size) // page_size)
    return PageRequest(page=page_number, size=page_size, sort=parse_sort(sort).or_default(default_sort))
