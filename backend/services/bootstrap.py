# backend/services/bootstrap.py
"""Default accounts and categories for a fresh installation.

Safe to run more than once: anything that already exists is logged and skipped.
"""
import logging

from sqlalchemy.orm import Session

from models.users import Role
from services.auth import AuthService
from services.categories import CategoryService
from utils.errors import ValidationError

logger = logging.getLogger(__name__)

DEFAULT_PRINCIPALS = [
    (Role.ADMIN, "admin", "admin@admin.com", "admin123"),
    (Role.USER, "user", "user@user.com", "user123"),
]

DEFAULT_CATEGORIES = ["Bug Report", "Feature Request", "General Feedback", "Usability"]


def seed_defaults(db: Session) -> dict:
    """Create the default admin, user and categories. Returns counts of what was created."""
    auth = AuthService(db)
    categories = CategoryService(db)
    created = {"principals": 0, "categories": 0}

    for role, username, email, password in DEFAULT_PRINCIPALS:
        try:
            auth.register(role, username, email, password)
            created["principals"] += 1
        except ValidationError as exc:
            logger.warning("Bootstrap skipped %s %s: %s", role.value, email, exc.message)

    for name in DEFAULT_CATEGORIES:
        try:
            categories.create(name)
            created["categories"] += 1
        except ValidationError as exc:
            logger.warning("Bootstrap skipped category %s: %s", name, exc.message)

    logger.info(
        "Bootstrap finished: %d principal(s), %d categor(ies) created",
        created["principals"], created["categories"],
    )
    return created
