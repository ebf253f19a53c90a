# backend/services/categories.py
import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models.category import Category
from services.pagination import Page, paginate
from utils.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class CategoryService:
    def __init__(self, db: Session):
        self.db = db

    def _by_name(self, name: str) -> Optional[Category]:
        return self.db.query(Category).filter(Category.name == name).first()

    def _commit_name(self) -> None:
        try:
            self.db.commit()
        except IntegrityError:
            # Another request took the name between the check and the write
            self.db.rollback()
            raise ValidationError("Category name already exists")

    def get(self, category_id: int) -> Category:
        category = self.db.query(Category).filter(Category.id == category_id).first()
        if category is None:
            raise NotFoundError("Category not found")
        return category

    def create(self, name: str) -> Category:
        name = (name or "").strip()
        if not name:
            raise ValidationError("Category name is required")
        if self._by_name(name) is not None:
            raise ValidationError("Category name already exists")

        category = Category(name=name)
        self.db.add(category)
        self._commit_name()
        self.db.refresh(category)
        logger.info("Created category %s (id=%s)", category.name, category.id)
        return category

    def update(self, category_id: int, name: str) -> Category:
        category = self.get(category_id)
        name = (name or "").strip()
        if not name:
            raise ValidationError("Category name is required")

        existing = self._by_name(name)
        if existing is not None and existing.id != category.id:
            raise ValidationError("Category name already exists")

        category.name = name
        self._commit_name()
        self.db.refresh(category)
        logger.info("Renamed category %s to %s", category.id, category.name)
        return category

    def delete(self, category_id: int) -> None:
        category = self.get(category_id)
        # Feedback in this category becomes uncategorized
        self.db.delete(category)
        self.db.commit()
        logger.info("Deleted category %s", category_id)

    def list_all(self) -> List[Category]:
        return self.db.query(Category).order_by(Category.id.asc()).all()

    def search(self, name: Optional[str], page: int, size: int) -> Page:
        query = self.db.query(Category)
        if name is not None and name.strip():
            query = query.filter(Category.name.icontains(name.strip(), autoescape=True))
        return paginate(query.order_by(Category.id.asc()), page, size)
