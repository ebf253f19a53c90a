# backend/services/feedback.py
import logging
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from models.category import Category
from models.feedback import Feedback, FeedbackStatus
from schemas.feedback import FeedbackCreate
from services.feedback_search import FeedbackFilters, parse_status, search_feedback
from services.pagination import Page
from utils.errors import NotFoundError

logger = logging.getLogger(__name__)


class FeedbackService:
    """Feedback lifecycle: public submission and admin moderation."""

    def __init__(self, db: Session):
        self.db = db

    def _category(self, category_id: int) -> Category:
        category = self.db.query(Category).filter(Category.id == category_id).first()
        if category is None:
            raise NotFoundError("Category not found")
        return category

    def get(self, feedback_id: int) -> Feedback:
        feedback = (
            self.db.query(Feedback)
            .options(joinedload(Feedback.category))
            .filter(Feedback.id == feedback_id)
            .first()
        )
        if feedback is None:
            raise NotFoundError("Feedback not found")
        return feedback

    def submit(self, data: FeedbackCreate) -> Feedback:
        category = None
        if data.category is not None and data.category.id is not None:
            category = self._category(data.category.id)

        # Status from the caller is ignored: new feedback always starts PENDING
        feedback = Feedback(
            user_id=data.user_id,
            product_id=data.product_id,
            rating=data.rating,
            comment=data.comment,
            submitter_name=data.submitter_name,
            submitter_email=data.submitter_email,
            status=FeedbackStatus.PENDING,
            category=category,
        )
        self.db.add(feedback)
        self.db.commit()
        self.db.refresh(feedback)
        logger.info("Feedback %s submitted (category=%s)", feedback.id, feedback.category_id)
        return feedback

    def list_by_user(self, user_id: str) -> List[Feedback]:
        return (
            self.db.query(Feedback)
            .options(joinedload(Feedback.category))
            .filter(Feedback.user_id == user_id)
            .order_by(Feedback.created_at.desc(), Feedback.id.desc())
            .all()
        )

    def list_all(self) -> List[Feedback]:
        return (
            self.db.query(Feedback)
            .options(joinedload(Feedback.category))
            .order_by(Feedback.id.asc())
            .all()
        )

    def update_status(self, feedback_id: int, status) -> Feedback:
        # No transition rules: any status may replace any other
        new_status = status if isinstance(status, FeedbackStatus) else parse_status(status)
        feedback = self.get(feedback_id)
        feedback.status = new_status
        self.db.commit()
        self.db.refresh(feedback)
        logger.info("Feedback %s status set to %s", feedback.id, new_status.value)
        return feedback

    def update_category(self, feedback_id: int, category_id: int) -> Feedback:
        feedback = self.get(feedback_id)
        feedback.category = self._category(category_id)
        self.db.commit()
        self.db.refresh(feedback)
        logger.info("Feedback %s moved to category %s", feedback.id, category_id)
        return feedback

    def delete(self, feedback_id: int) -> None:
        feedback = self.get(feedback_id)
        self.db.delete(feedback)
        self.db.commit()
        logger.info("Feedback %s deleted", feedback_id)

    def search(
        self,
        page: int,
        size: int,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
        filters: Optional[FeedbackFilters] = None,
    ) -> Page:
        return search_feedback(self.db, page, size, sort_by, sort_order, filters)
