"""Route modules for the accounts API."""
from . import health, user_v1

__all__ = ["health", "user_v1"]
