# backend/schemas/common.py
from typing import Annotated

from fastapi import Path
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Largest value an INTEGER column holds on every supported database (PostgreSQL INTEGER is 32-bit)
MAX_DB_INT = 2**31 - 1

# Integer body field bounded the same way
DbInt = Annotated[int, Field(ge=-MAX_DB_INT, le=MAX_DB_INT)]

# Path id that the database can compare against; anything larger is a 422
RowId = Annotated[int, Path(ge=-MAX_DB_INT, le=MAX_DB_INT)]


# Base configuration: camelCase on the wire, snake_case in Python, ORM compatible
class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# Shared page metadata; totals are computed over the whole filtered set
class PageMeta(CamelModel):
    total_elements: int
    total_pages: int
    number: int
    size: int
