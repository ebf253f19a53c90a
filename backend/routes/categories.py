# backend/routes/categories.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from config import settings
from database import get_db
from models.users import Role
from schemas.common import MAX_DB_INT, RowId
from schemas.category import CategoryCreate, CategoryPage, CategoryResponse
from services.categories import CategoryService
from utils.auth_deps import role_required

router = APIRouter(
    prefix="/api/v1/admin/categories",
    tags=["Categories"],
    dependencies=[Depends(role_required(Role.ADMIN))],
)


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(payload: CategoryCreate, db: Session = Depends(get_db)):
    return CategoryService(db).create(payload.name)


# Paginated list, optionally filtered by name substring
@router.get("", response_model=CategoryPage)
def list_categories(
    page: int = Query(0, le=MAX_DB_INT),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, le=MAX_DB_INT),
    name: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    result = CategoryService(db).search(name, page, size)
    return {
        "content": result.content,
        "total_elements": result.total_elements,
        "total_pages": result.total_pages,
        "number": result.number,
        "size": result.size,
    }


@router.get("/all", response_model=List[CategoryResponse])
def all_categories(db: Session = Depends(get_db)):
    return CategoryService(db).list_all()


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(category_id: RowId, db: Session = Depends(get_db)):
    return CategoryService(db).get(category_id)


@router.put("/{category_id}", response_model=CategoryResponse)
def update_category(category_id: RowId, payload: CategoryCreate, db: Session = Depends(get_db)):
    return CategoryService(db).update(category_id, payload.name)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(category_id: RowId, db: Session = Depends(get_db)):
    CategoryService(db).delete(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
