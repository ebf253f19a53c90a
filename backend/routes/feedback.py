# backend/routes/feedback.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_db
from schemas.feedback import FeedbackCreate, FeedbackResponse
from services.feedback import FeedbackService

# Public endpoints: no token required
router = APIRouter(prefix="/api/feedback", tags=["Feedback"])


@router.post("", response_model=FeedbackResponse, status_code=status.HTTP_201_CREATED)
def submit_feedback(payload: FeedbackCreate, db: Session = Depends(get_db)):
    return FeedbackService(db).submit(payload)


@router.get("/user/{user_id}", response_model=List[FeedbackResponse])
def get_user_feedback(user_id: str, db: Session = Depends(get_db)):
    return FeedbackService(db).list_by_user(user_id)
