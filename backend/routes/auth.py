# backend/routes/auth.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database import get_db
from models.users import Role
from schemas import user as schemas
from services.auth import AuthService, AuthenticatedPrincipal
from services.bootstrap import seed_defaults
from utils.auth_deps import get_current_principal

router = APIRouter(prefix="/api/auth", tags=["Auth"])


# Register a new administrator
@router.post("/admin/register", response_model=schemas.PrincipalResponse)
def register_admin(payload: schemas.RegisterRequest, db: Session = Depends(get_db)):
    return AuthService(db).register(Role.ADMIN, payload.username, payload.email, payload.password)


# Register a new end user
@router.post("/user/register", response_model=schemas.PrincipalResponse)
def register_user(payload: schemas.RegisterRequest, db: Session = Depends(get_db)):
    return AuthService(db).register(Role.USER, payload.username, payload.email, payload.password)


# Universal login: admin accounts are checked before user accounts
@router.post("/login", response_model=schemas.LoginResponse)
def login(payload: schemas.LoginRequest, db: Session = Depends(get_db)):
    result = AuthService(db).login(payload.email, payload.password)
    return {"token": result.token, "role": result.role, "email": result.email}


# Create default admin, user and categories; repeated calls still succeed
@router.post("/init", response_model=schemas.MessageResponse)
def initialize(db: Session = Depends(get_db)):
    seed_defaults(db)
    return {"message": "Default admin, user, and categories created successfully"}


# Identity and current role behind the presented token
@router.get("/me", response_model=schemas.CurrentPrincipal)
def me(principal: AuthenticatedPrincipal = Depends(get_current_principal)):
    return {"email": principal.email, "role": principal.role}
