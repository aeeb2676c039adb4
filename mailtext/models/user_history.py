"""
User history model - append-only staff action log
"""
import enum
import uuid

from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Index, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from mailtext.core.database import Base


class UserHistoryAction(str, enum.Enum):
    """Staff actions recorded in user_histories.action"""

    CHANGE_SITE_TEXT = "change_site_text"


class UserHistory(Base):
    """One audited change. Rows are never updated or deleted by the app."""
    
    __tablename__ = "user_histories"
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    action = Column(String(50), nullable=False)
    subject = Column(String(200), nullable=True)  # translation key for site text changes
    previous_value = Column(Text, nullable=True)
    new_value = Column(Text, nullable=True)
    acting_user_id = Column(Uuid, ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    
    acting_user = relationship("User", backref="staff_actions")
    
    __table_args__ = (
        Index("idx_user_histories_action_subject", "action", "subject"),
    )
    
    def __repr__(self):
        return f"<UserHistory(id={self.id}, action={self.action}, subject={self.subject})>"
