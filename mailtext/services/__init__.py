"""
Business logic services
"""
from mailtext.services.translation_service import TranslationService
from mailtext.services.audit_service import AuditService
from mailtext.services.email_template_service import EmailTemplateService

__all__ = [
    "TranslationService",
    "AuditService",
    "EmailTemplateService",
]
