# backend/models/category.py
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from database import Base

# Feedback category; name is unique across all categories
class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False, index=True)

    # Deleting a category nulls the reference on its feedback
    feedback = relationship("Feedback", back_populates="category")
