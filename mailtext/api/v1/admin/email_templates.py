"""
Email templates endpoints for Admin API.
Admins customise the subject and body of outgoing emails; edits are stored
as translation overrides and can be reverted to the built-in text.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from mailtext.core.database import get_db
from mailtext.core.security import Guardian, get_guardian, require_admin
from mailtext.schemas.email_template import (
    EmailTemplateListResponse,
    EmailTemplateResponse,
    EmailTemplateUpdate,
)
from mailtext.services.email_template_service import EmailTemplateService

logger = logging.getLogger(__name__)

PATH_PREFIX = "/customize/email_templates"

router = APIRouter(prefix=PATH_PREFIX, dependencies=[Depends(require_admin)])


def get_email_template_service(
    locale: Optional[str] = Query(None, description="Locale to edit, defaults to the admin's locale"),
    db: Session = Depends(get_db),
    guardian: Guardian = Depends(get_guardian)
) -> EmailTemplateService:
    """FastAPI dependency building the service for the current request"""
    return EmailTemplateService(db, guardian, locale=locale)


@router.get("", response_model=EmailTemplateListResponse)
async def list_email_templates(
    service: EmailTemplateService = Depends(get_email_template_service)
):
    """
    List all editable email templates with their effective subject and body.
    
    Returns:
        {"email_templates": [...]}
    """
    return EmailTemplateListResponse(email_templates=service.list_templates())


@router.get("/{template_id}", response_model=EmailTemplateResponse)
async def show_email_template(
    template_id: str,
    service: EmailTemplateService = Depends(get_email_template_service)
):
    """Get one email template by id (e.g. 'user_notifications.admin_login')"""
    return EmailTemplateResponse(email_template=service.show(template_id))


@router.put("/{template_id}", response_model=EmailTemplateResponse)
async def update_email_template(
    template_id: str,
    payload: EmailTemplateUpdate,
    service: EmailTemplateService = Depends(get_email_template_service)
):
    """
    Override the subject and/or body of an email template.
    
    Args:
        template_id: Email template id
        payload: New subject/body; placeholders must match the built-in text
    
    Returns:
        Updated template, or {"errors": [...]} when validation fails
    """
    template = service.update(template_id, payload.subject, payload.body)
    return EmailTemplateResponse(email_template=template)


@router.delete("/{template_id}", response_model=EmailTemplateResponse)
async def revert_email_template(
    template_id: str,
    service: EmailTemplateService = Depends(get_email_template_service)
):
    """
    Revert an email template to its built-in subject and body.
    
    Returns:
        Restored template
    """
    return EmailTemplateResponse(email_template=service.revert(template_id))
