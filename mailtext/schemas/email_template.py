"""
Pydantic schemas for Email Templates API
"""
from pydantic import BaseModel
from typing import Optional, Dict, List, Union


class EmailTemplate(BaseModel):
    """Effective state of one subject/body pair, computed on read"""
    id: str
    title: str
    subject: Union[str, Dict[str, str]]
    body: str
    can_revert: bool


class EmailTemplateUpdate(BaseModel):
    """New subject/body. A null field is left unchanged."""
    subject: Optional[str] = None
    body: Optional[str] = None


class EmailTemplateResponse(BaseModel):
    email_template: EmailTemplate


class EmailTemplateListResponse(BaseModel):
    email_templates: List[EmailTemplate]
