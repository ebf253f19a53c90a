# backend/schemas/feedback.py
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from models.feedback import COMMENT_MAX_LENGTH, FeedbackStatus
from schemas.category import CategoryResponse
from schemas.common import CamelModel, DbInt, PageMeta


# Category reference inside a submission, resolved by id
class CategoryRef(CamelModel):
    id: Optional[DbInt] = None


# Input schema for a feedback submission
class FeedbackCreate(CamelModel):
    user_id: Optional[str] = None
    product_id: Optional[str] = None
    rating: DbInt
    comment: Optional[str] = Field(default=None, max_length=COMMENT_MAX_LENGTH)
    submitter_name: Optional[str] = None
    submitter_email: Optional[str] = None
    # Accepted for compatibility, ignored: new feedback always starts PENDING
    status: Optional[str] = None
    category: Optional[CategoryRef] = None


# Full feedback representation
class FeedbackResponse(CamelModel):
    id: int
    user_id: Optional[str] = None
    product_id: Optional[str] = None
    rating: Optional[int] = None
    comment: Optional[str] = None
    submitter_name: Optional[str] = None
    submitter_email: Optional[str] = None
    status: FeedbackStatus
    category: Optional[CategoryResponse] = None
    created_at: datetime


# Body of a status change
class StatusUpdate(CamelModel):
    status: str


# Result of a status change
class StatusUpdateResponse(CamelModel):
    id: int
    status: FeedbackStatus


# Paginated admin search result
class FeedbackPage(PageMeta):
    content: List[FeedbackResponse]
