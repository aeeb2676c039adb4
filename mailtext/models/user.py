"""
User model - accounts that can sign in to the admin API
"""
from sqlalchemy import Column, String, Boolean, DateTime, Uuid
from sqlalchemy.sql import func
import uuid

from mailtext.core.database import Base


class User(Base):
    """User model with admin/moderator role flags"""
    
    __tablename__ = "users"
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    username = Column(String(60), nullable=False, unique=True)
    email = Column(String(255), nullable=True)
    password_hash = Column(String(255), nullable=False)
    admin = Column(Boolean, default=False, nullable=False)
    moderator = Column(Boolean, default=False, nullable=False)
    active = Column(Boolean, default=True, nullable=False)
    locale = Column(String(10), nullable=True)  # en, de; None = site default
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    
    def __repr__(self):
        return f"<User(id={self.id}, username={self.username}, admin={self.admin})>"
