"""
Email Template Service - list, edit and revert subject/body pairs.
Edits are stored as translation overrides and every change is audited.
"""
import logging
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from mailtext.core.exceptions import NotFound, ValidationFailed
from mailtext.core.security import Guardian
from mailtext.locales import EMAIL_KEYS, body_key, is_plural, subject_key
from mailtext.schemas.email_template import EmailTemplate
from mailtext.services.audit_service import AuditService
from mailtext.services.interpolation import format_keys, invalid_keys
from mailtext.services.translation_service import TranslationService

logger = logging.getLogger(__name__)


class EmailTemplateService:
    """
    Admin operations on the fixed set of email templates.
    Every public method checks the guardian first.
    """

    def __init__(
        self,
        db: Session,
        guardian: Guardian,
        locale: Optional[str] = None,
        translations: Optional[TranslationService] = None
    ):
        self.db = db
        self.guardian = guardian
        self.translations = translations or TranslationService(db)
        user_locale = guardian.user.locale if guardian.user else None
        self.locale = self.translations.normalize_locale(locale or user_locale)
        self.audit = AuditService(db, guardian.user)

    @staticmethod
    def title_for(template_id: str) -> str:
        """'user_notifications.admin_login' -> 'Admin Login'"""
        return template_id.split(".")[-1].replace("_", " ").title()

    def _ensure_known(self, template_id: str) -> None:
        if template_id not in EMAIL_KEYS:
            raise NotFound(template_id)

    def _load(self, template_id: str) -> EmailTemplate:
        s_key, b_key = subject_key(template_id), body_key(template_id)
        return EmailTemplate(
            id=template_id,
            title=self.title_for(template_id),
            subject=self.translations.effective_value(s_key, self.locale),
            body=self.translations.effective_value(b_key, self.locale),
            can_revert=(
                self.translations.has_override(s_key, self.locale)
                or self.translations.has_override(b_key, self.locale)
            ),
        )

    def list_templates(self) -> List[EmailTemplate]:
        self.guardian.ensure_admin()
        return [self._load(template_id) for template_id in EMAIL_KEYS]

    def show(self, template_id: str) -> EmailTemplate:
        self.guardian.ensure_admin()
        self._ensure_known(template_id)
        return self._load(template_id)

    def _field_label(self, field: str) -> str:
        return self.translations.render(f"admin.email_templates.{field}", self.locale)

    def update(
        self,
        template_id: str,
        subject: Optional[str],
        body: Optional[str]
    ) -> EmailTemplate:
        """
        Validate and store a new subject/body.

        Plural subjects cannot be replaced by a flat string and are skipped.
        Values equal to the current effective value are not written.

        Raises:
            InvalidAccess: caller is not an admin
            NotFound: unknown template id
            ValidationFailed: placeholder mismatch in subject and/or body; nothing is written
        """
        self.guardian.ensure_admin()
        self._ensure_known(template_id)

        fields = (
            ("subject", subject_key(template_id), subject),
            ("body", body_key(template_id), body),
        )

        errors: List[str] = []
        changes: List[Tuple[str, object, str]] = []

        for field, key, value in fields:
            if value is None:
                continue

            original = self.translations.default_value(key, self.locale)
            if is_plural(original):
                logger.info(f"Skipping plural translation '{key}'")
                continue

            bad_keys = invalid_keys(original, value)
            if bad_keys:
                message = self.translations.render(
                    "errors.translation_overrides.invalid_interpolation_keys",
                    self.locale,
                    {"keys": format_keys(bad_keys)},
                )
                errors.append(f"<b>{self._field_label(field)}</b>: {message}")
                continue

            current = self.translations.effective_value(key, self.locale)
            if value != current:
                changes.append((key, current, value))

        if errors:
            logger.info(f"Email template '{template_id}' rejected: {errors}")
            raise ValidationFailed(errors)

        try:
            for key, previous, new in changes:
                self.translations.upsert_override(key, self.locale, new)
                self.audit.log_site_text_change(key, new, previous)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        finally:
            self.translations.invalidate(self.locale)

        logger.info(f"Email template '{template_id}' updated ({len(changes)} field(s), locale={self.locale})")
        return self._load(template_id)

    def revert(self, template_id: str) -> EmailTemplate:
        """
        Remove the subject/body overrides and restore the built-in values.

        Raises:
            InvalidAccess: caller is not an admin
            NotFound: unknown template id
        """
        self.guardian.ensure_admin()
        self._ensure_known(template_id)

        reverted = 0
        try:
            for key in (subject_key(template_id), body_key(template_id)):
                previous = self.translations.delete_override(key, self.locale)
                if previous is None:
                    continue
                restored = self.translations.default_value(key, self.locale)
                self.audit.log_site_text_change(key, restored, previous)
                reverted += 1
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        finally:
            self.translations.invalidate(self.locale)

        logger.info(f"Email template '{template_id}' reverted ({reverted} field(s), locale={self.locale})")
        return self._load(template_id)
