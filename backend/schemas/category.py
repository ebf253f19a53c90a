from typing import List

from pydantic import Field

from schemas.common import CamelModel, PageMeta


# Input schema for creating or renaming a category
class CategoryCreate(CamelModel):
    name: str = Field(..., min_length=1)


# Output schema for a category
class CategoryResponse(CamelModel):
    id: int
    name: str


# Paginated category listing
class CategoryPage(PageMeta):
    content: List[CategoryResponse]
