from pydantic import BaseModel, EmailStr
from typing import Optional

from models.users import Role
from schemas.common import CamelModel

# Schema for registration requests (admin and user share the shape)
class RegisterRequest(BaseModel):
    username: Optional[str] = None
    email: EmailStr
    password: str

# Output schema for a registered principal; never carries the password hash
class PrincipalResponse(CamelModel):
    id: int
    username: Optional[str] = None
    email: str
    role: Role

# Schema for login credentials
class LoginRequest(BaseModel):
    email: str
    password: str

# Schema for login response: token plus the role resolved at login
class LoginResponse(BaseModel):
    token: str
    role: Role
    email: str

# Identity derived from a bearer token
class CurrentPrincipal(BaseModel):
    email: str
    role: Role

# Response of the bootstrap endpoint
class MessageResponse(BaseModel):
    message: str
