# utils/tokenJWT.py
from jose import jwt, JWTError
from datetime import datetime, timedelta, timezone
from typing import Optional
import logging

from config import settings
from utils.errors import AuthenticationError

logger = logging.getLogger(__name__)

# Generate a signed access token for a principal's email.
# The role is deliberately absent: it is looked up again on every request.
def create_access_token(subject: str, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.now(timezone.utc) + (
        expires_delta if expires_delta is not None else timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode = {"sub": subject, "exp": expire}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

# Check signature and expiry and return the email the token was issued for
def decode_access_token(token: str) -> str:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as exc:
        logger.warning("Token rejected: %s", exc)
        raise AuthenticationError("Invalid token")

    email = payload.get("sub")
    # Ensure email is present in the token payload
    if not email:
        raise AuthenticationError("Invalid token")
    return email
