# backend/utils/errors.py
from typing import Dict, Optional


# Caller errors; main.py turns status_code and message into the HTTP response
class AppError(Exception):
    status_code = 400

    def __init__(self, message: str, headers: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.headers = headers


# Bad input or duplicate unique value
class ValidationError(AppError):
    status_code = 400


# Bad credentials, bad token or unknown principal
class AuthenticationError(AppError):
    status_code = 401

    def __init__(self, message: str = "Could not validate credentials"):
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class AuthorizationError(AppError):
    status_code = 403


class NotFoundError(AppError):
    status_code = 404
