# backend/services/feedback_search.py
"""Admin search over feedback: optional filters, sorting and paging.

Every filter is optional. Each supplied filter contributes one SQL clause,
the clauses are ANDed together, and an empty clause list matches every row.
"""
import logging
import re
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy import and_, true
from sqlalchemy.orm import Session, joinedload
from sqlalchemy.sql.elements import ColumnElement

from models.feedback import Feedback, FeedbackStatus
from schemas.common import MAX_DB_INT
from services.pagination import Page, paginate
from utils.errors import ValidationError

logger = logging.getLogger(__name__)

DEFAULT_SORT_FIELD = "created_at"

# Sortable columns, keyed by snake_case name
SORT_COLUMNS = {
    "id": Feedback.id,
    "created_at": Feedback.created_at,
    "rating": Feedback.rating,
    "status": Feedback.status,
    "submitter_name": Feedback.submitter_name,
    "submitter_email": Feedback.submitter_email,
    "user_id": Feedback.user_id,
    "product_id": Feedback.product_id,
}

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


@dataclass(frozen=True)
class FeedbackFilters:
    name: Optional[str] = None
    email: Optional[str] = None
    status: Optional[FeedbackStatus] = None
    rating: Optional[int] = None
    category_id: Optional[int] = None


def parse_status(value: str) -> FeedbackStatus:
    """Parse a status name case-insensitively, raising ValidationError otherwise."""
    try:
        return FeedbackStatus(value.strip().upper())
    except (ValueError, AttributeError):
        raise ValidationError(f"Invalid status: {value}")


def _db_int(value: Optional[int], label: str) -> Optional[int]:
    if value is not None and abs(value) > MAX_DB_INT:
        raise ValidationError(f"Invalid {label}: {value}")
    return value


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value


def build_filters(
    name: Optional[str] = None,
    email: Optional[str] = None,
    status: Optional[str] = None,
    rating: Optional[int] = None,
    category_id: Optional[int] = None,
) -> FeedbackFilters:
    """Normalise raw request values. Invalid status or out-of-range ids fail here, before any query runs."""
    status_value = _blank_to_none(status)
    return FeedbackFilters(
        name=_blank_to_none(name),
        email=_blank_to_none(email),
        status=parse_status(status_value) if status_value is not None else None,
        rating=_db_int(rating, "rating"),
        category_id=_db_int(category_id, "category"),
    )


def filter_clauses(filters: FeedbackFilters) -> List[ColumnElement]:
    clauses: List[ColumnElement] = []

    # Text filters: case-insensitive substring, LIKE wildcards matched literally
    if filters.name is not None:
        clauses.append(Feedback.submitter_name.icontains(filters.name, autoescape=True))
    if filters.email is not None:
        clauses.append(Feedback.submitter_email.icontains(filters.email, autoescape=True))

    if filters.status is not None:
        clauses.append(Feedback.status == filters.status)
    if filters.rating is not None:
        clauses.append(Feedback.rating == filters.rating)

    # Uncategorized rows have a NULL category_id and never compare equal
    if filters.category_id is not None:
        clauses.append(Feedback.category_id == filters.category_id)

    return clauses


def _to_snake(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def resolve_sort(sort_by: Optional[str], sort_order: Optional[str]):
    """Return ORDER BY clauses for the requested field and direction.

    Blank field means creation time. Direction is descending unless it is
    "asc" in any case. Ties fall back to id in the same direction.
    """
    key = DEFAULT_SORT_FIELD if sort_by is None or not sort_by.strip() else _to_snake(sort_by.strip())
    column = SORT_COLUMNS.get(key)
    if column is None:
        raise ValidationError(f"Invalid sort field: {sort_by}")

    ascending = (sort_order or "").strip().lower() == "asc"
    if ascending:
        return [column.asc(), Feedback.id.asc()]
    return [column.desc(), Feedback.id.desc()]


def search_feedback(
    db: Session,
    page: int,
    size: int,
    sort_by: Optional[str] = None,
    sort_order: Optional[str] = None,
    filters: Optional[FeedbackFilters] = None,
) -> Page:
    filters = filters or FeedbackFilters()
    order_by = resolve_sort(sort_by, sort_order)
    clauses = filter_clauses(filters)

    query = (
        db.query(Feedback)
        .options(joinedload(Feedback.category))
        .filter(and_(true(), *clauses))
        .order_by(*order_by)
    )

    result = paginate(query, page, size)
    logger.debug(
        "Feedback search: %d filter(s), page %d, size %d, %d match(es)",
        len(clauses), result.number, result.size, result.total_elements,
    )
    return result
