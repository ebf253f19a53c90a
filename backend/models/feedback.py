# backend/models/feedback.py
import enum
from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Enum
from sqlalchemy.orm import relationship
from database import Base

# Moderation state of a feedback record; any state may move to any other
class FeedbackStatus(str, enum.Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    RESOLVED = "RESOLVED"
    REJECTED = "REJECTED"

COMMENT_MAX_LENGTH = 500

def _utcnow():
    return datetime.now(timezone.utc)

# Feedback submitted by an end user (registered or not) about a product
class Feedback(Base):
    __tablename__ = "feedback"

    id = Column(Integer, primary_key=True, index=True)

    # Free text, not a reference to users.id
    user_id = Column(String, nullable=True, index=True)
    product_id = Column(String, nullable=True)
    rating = Column(Integer, nullable=True, index=True)
    comment = Column(String(COMMENT_MAX_LENGTH), nullable=True)

    submitter_name = Column(String, nullable=True)
    submitter_email = Column(String, nullable=True)

    status = Column(Enum(FeedbackStatus), nullable=False, default=FeedbackStatus.PENDING, index=True)

    category_id = Column(Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True, index=True)
    category = relationship("Category", back_populates="feedback")

    # Set once on insert, never updated
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)
