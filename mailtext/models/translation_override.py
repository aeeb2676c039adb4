"""
Translation override model - admin edits that shadow built-in strings
"""
from sqlalchemy import Column, String, Text, DateTime, UniqueConstraint, Uuid
from sqlalchemy.sql import func
import uuid

from mailtext.core.database import Base


class TranslationOverride(Base):
    """A customised value for one translation key in one locale"""
    
    __tablename__ = "translation_overrides"
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    translation_key = Column(String(200), nullable=False)  # user_notifications.admin_login.subject_template
    locale = Column(String(10), nullable=False)  # en, de
    value = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
    
    # Presence of a row means the built-in string is shadowed
    __table_args__ = (
        UniqueConstraint("translation_key", "locale", name="uq_translation_override_key_locale"),
    )
    
    def __repr__(self):
        return f"<TranslationOverride(key={self.translation_key}, locale={self.locale})>"
