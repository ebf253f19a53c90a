# backend/routes/admin_feedback.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from config import settings
from database import get_db
from models.users import Role
from schemas.common import MAX_DB_INT, RowId
from schemas.feedback import FeedbackPage, FeedbackResponse, StatusUpdate, StatusUpdateResponse
from services.feedback import FeedbackService
from services.feedback_search import build_filters
from utils.auth_deps import role_required

# Every route here requires an ADMIN token
router = APIRouter(
    prefix="/api/v1/admin/feedback",
    tags=["Admin feedback"],
    dependencies=[Depends(role_required(Role.ADMIN))],
)


# Paginated + filterable list
@router.get("", response_model=FeedbackPage)
def search_feedback(
    page: int = Query(0, le=MAX_DB_INT),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, le=MAX_DB_INT),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    sort_order: Optional[str] = Query(None, alias="sortOrder"),
    name: Optional[str] = Query(None, description="Substring of submitter name"),
    email: Optional[str] = Query(None, description="Substring of submitter email"),
    status_filter: Optional[str] = Query(None, alias="status", description="PENDING, IN_PROGRESS, RESOLVED or REJECTED"),
    rating: Optional[int] = Query(None, ge=-MAX_DB_INT, le=MAX_DB_INT),
    category: Optional[int] = Query(None, ge=-MAX_DB_INT, le=MAX_DB_INT, description="Category id"),
    db: Session = Depends(get_db),
):
    # Invalid status is rejected before the query runs
    filters = build_filters(name=name, email=email, status=status_filter, rating=rating, category_id=category)
    result = FeedbackService(db).search(page, size, sort_by, sort_order, filters)
    return {
        "content": result.content,
        "total_elements": result.total_elements,
        "total_pages": result.total_pages,
        "number": result.number,
        "size": result.size,
    }


# Legacy non-paginated list
@router.get("/all", response_model=List[FeedbackResponse])
def get_all_feedback(db: Session = Depends(get_db)):
    return FeedbackService(db).list_all()


@router.get("/{feedback_id}", response_model=FeedbackResponse)
def get_feedback(feedback_id: RowId, db: Session = Depends(get_db)):
    return FeedbackService(db).get(feedback_id)


@router.put("/{feedback_id}/status", response_model=StatusUpdateResponse)
def update_status(feedback_id: RowId, payload: StatusUpdate, db: Session = Depends(get_db)):
    updated = FeedbackService(db).update_status(feedback_id, payload.status)
    return {"id": updated.id, "status": updated.status}


@router.put("/{feedback_id}/category/{category_id}", response_model=FeedbackResponse)
def update_category(feedback_id: RowId, category_id: RowId, db: Session = Depends(get_db)):
    return FeedbackService(db).update_category(feedback_id, category_id)


@router.delete("/{feedback_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_feedback(feedback_id: RowId, db: Session = Depends(get_db)):
    FeedbackService(db).delete(feedback_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
