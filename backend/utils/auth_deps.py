# utils/auth_deps.py
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import Optional
from sqlalchemy.orm import Session

from database import get_db
from services.auth import AuthService, AuthenticatedPrincipal
from utils.errors import AuthenticationError, AuthorizationError

# auto_error is off so a missing header raises our own 401 instead of FastAPI's default
bearer_scheme = HTTPBearer(auto_error=False)


# Resolve the principal behind the Authorization: Bearer header
def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> AuthenticatedPrincipal:
    if credentials is None or (credentials.scheme or "").lower() != "bearer":
        raise AuthenticationError("Authorization header required")
    return AuthService(db).authenticate(credentials.credentials)


# Dependency factory for role-based access control
def role_required(*allowed_roles):
    def _checker(principal: AuthenticatedPrincipal = Depends(get_current_principal)) -> AuthenticatedPrincipal:
        if allowed_roles and principal.role not in allowed_roles:
            raise AuthorizationError("Forbidden")
        return principal
    return _checker
