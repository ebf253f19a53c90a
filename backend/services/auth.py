# backend/services/auth.py
"""Registration, login and token resolution across the Admin and User tables.

The two tables are disjoint and share one login endpoint and one token
scheme. Lookups always try Admin first, then User. The token carries only
the email; the role is re-derived from storage on every request.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Union

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models.users import PRINCIPAL_MODELS, Admin, Role, User
from utils.errors import AuthenticationError, ValidationError
from utils.hashing import dummy_verify, get_password_hash, verify_password
from utils.tokenJWT import create_access_token, decode_access_token

logger = logging.getLogger(__name__)

Principal = Union[Admin, User]

INVALID_CREDENTIALS = "Invalid credentials"


@dataclass(frozen=True)
class LoginResult:
    token: str
    role: Role
    email: str


@dataclass(frozen=True)
class AuthenticatedPrincipal:
    email: str
    role: Role


def _normalize_email(email: str) -> str:
    return (email or "").strip().lower()


class AuthService:
    def __init__(self, db: Session):
        self.db = db

    def _find_in(self, role: Role, email: str) -> Optional[Principal]:
        model = PRINCIPAL_MODELS[role]
        return self.db.query(model).filter(func.lower(model.email) == email).first()

    def find_principal(self, email: str) -> Optional[Principal]:
        """Ordered lookup: Admin table first, then User table."""
        normalized = _normalize_email(email)
        for role in PRINCIPAL_MODELS:
            principal = self._find_in(role, normalized)
            if principal is not None:
                return principal
        return None

    def register(self, role: Role, username: Optional[str], email: str, password: str) -> Principal:
        """Create a principal in the table for ``role``.

        Email uniqueness is checked within that table only, so the same address
        may be registered once as Admin and once as User.
        """
        normalized = _normalize_email(email)
        if not normalized:
            raise ValidationError("Email is required")
        if not password:
            raise ValidationError("Password is required")

        if self._find_in(role, normalized) is not None:
            logger.warning("Registration rejected, %s email already exists: %s", role.value, normalized)
            raise ValidationError("Email already registered")

        model = PRINCIPAL_MODELS[role]
        principal = model(
            username=username,
            email=normalized,
            password_hash=get_password_hash(password),
            role=role,
        )
        self.db.add(principal)
        try:
            self.db.commit()
        except IntegrityError:
            # Concurrent registration won the unique index
            self.db.rollback()
            logger.warning("Registration rejected, %s email already exists: %s", role.value, normalized)
            raise ValidationError("Email already registered")
        self.db.refresh(principal)

        logger.info("Registered %s %s (id=%s)", role.value, principal.email, principal.id)
        return principal

    def login(self, email: str, password: str) -> LoginResult:
        """Issue a token for the first table whose account matches.

        An unknown email and a wrong password fail identically.
        """
        normalized = _normalize_email(email)
        matched_any = False

        for role in PRINCIPAL_MODELS:
            principal = self._find_in(role, normalized)
            if principal is None:
                continue
            matched_any = True
            if verify_password(password or "", principal.password_hash):
                token = create_access_token(subject=principal.email)
                logger.info("Login succeeded for %s as %s", principal.email, role.value)
                return LoginResult(token=token, role=role, email=principal.email)

        if not matched_any:
            dummy_verify()
        logger.warning("Login failed for %s", normalized)
        raise AuthenticationError(INVALID_CREDENTIALS)

    def authenticate(self, token: str) -> AuthenticatedPrincipal:
        """Validate a bearer token and resolve its principal's current role."""
        email = decode_access_token(token)

        principal = self.find_principal(email)
        if principal is None:
            logger.warning("Valid token for unknown principal: %s", email)
            raise AuthenticationError("Principal not found")

        role = Role.ADMIN if isinstance(principal, Admin) else Role.USER
        return AuthenticatedPrincipal(email=principal.email, role=role)
