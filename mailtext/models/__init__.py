"""
SQLAlchemy models
"""
from mailtext.models.user import User
from mailtext.models.translation_override import TranslationOverride
from mailtext.models.user_history import UserHistory, UserHistoryAction

__all__ = [
    "User",
    "TranslationOverride",
    "UserHistory",
    "UserHistoryAction",
]

# Import Base for Alembic
from mailtext.core.database import Base
