"""
Audit Service - writes staff actions to user_histories
"""
import json
import logging
from typing import Optional, Union, Dict

from sqlalchemy.orm import Session

from mailtext.models.user import User
from mailtext.models.user_history import UserHistory, UserHistoryAction

logger = logging.getLogger(__name__)


def _as_text(value: Union[str, Dict[str, str], None]) -> Optional[str]:
    # Plural values are stored as JSON
    if value is None or isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, sort_keys=True)


class AuditService:
    """Append-only audit records. Joins the caller's transaction, never commits."""

    def __init__(self, db: Session, acting_user: Optional[User] = None):
        self.db = db
        self.acting_user = acting_user

    def log_site_text_change(
        self,
        key: str,
        new_value: Union[str, Dict[str, str], None],
        previous_value: Union[str, Dict[str, str], None]
    ) -> UserHistory:
        """
        Record a change of one translation key.

        Args:
            key: Translation key that changed
            new_value: Value after the change
            previous_value: Value before the change

        Returns:
            The pending UserHistory row
        """
        entry = UserHistory(
            action=UserHistoryAction.CHANGE_SITE_TEXT.value,
            subject=key,
            previous_value=_as_text(previous_value),
            new_value=_as_text(new_value),
            acting_user_id=self.acting_user.id if self.acting_user else None,
        )
        self.db.add(entry)

        actor = self.acting_user.username if self.acting_user else "system"
        logger.info(f"Site text '{key}' changed by {actor}")
        return entry
