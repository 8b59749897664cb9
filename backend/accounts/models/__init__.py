"""SQLAlchemy models exposed for Alembic and imports."""
from .user import USER_ROLE_VALUES, User

__all__ = ["User", "USER_ROLE_VALUES"]
