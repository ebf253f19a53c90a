# backend/services/pagination.py
import math
from dataclasses import dataclass
from typing import Generic, List, TypeVar

from sqlalchemy.orm import Query

from schemas.common import MAX_DB_INT

T = TypeVar("T")

MAX_PAGE_SIZE = 1000


@dataclass
class Page(Generic[T]):
    """A window of results plus totals computed over the full filtered set."""

    content: List[T]
    total_elements: int
    number: int
    size: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size) if self.size else 0


def clamp_page(page: int, size: int):
    # Page is zero-based; out-of-range values are pulled into range so OFFSET stays a valid integer
    page = min(max(page, 0), MAX_DB_INT)
    size = min(max(size, 1), MAX_PAGE_SIZE)
    return page, size


def paginate(query: Query, page: int, size: int) -> Page:
    page, size = clamp_page(page, size)
    # Count before windowing so the totals reflect every match
    total = query.order_by(None).count()
    items = query.offset(page * size).limit(size).all()
    return Page(content=items, total_elements=total, number=page, size=size)
