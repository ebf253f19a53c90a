# backend/models/users.py
import enum
from sqlalchemy import Column, Integer, String, Enum
from database import Base

# Role tag; fixed per principal table
class Role(str, enum.Enum):
    ADMIN = "ADMIN"
    USER = "USER"

# Administrator account; email is unique within this table only
class Admin(Base):
    __tablename__ = "admins"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, nullable=True)
    email = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    role = Column(Enum(Role, name="admin_role"), nullable=False, default=Role.ADMIN)

# End-user account; email is unique within this table only
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, nullable=True)
    email = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    role = Column(Enum(Role, name="user_role"), nullable=False, default=Role.USER)

# Principal tables in lookup order: login and token resolution try Admin first
PRINCIPAL_MODELS = {
    Role.ADMIN: Admin,
    Role.USER: User,
}
