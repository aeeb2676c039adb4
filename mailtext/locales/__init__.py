"""
Built-in translation catalogs and the fixed set of editable email templates.
"""
from typing import Any, Dict, Optional, Union

from mailtext.locales import de, en

PluralValue = Dict[str, str]
TranslationValue = Union[str, PluralValue]

PLURAL_CATEGORIES = frozenset({"zero", "one", "two", "few", "many", "other"})

CATALOGS: Dict[str, Dict[str, Any]] = {
    "en": en.TRANSLATIONS,
    "de": de.TRANSLATIONS,
}

SUBJECT_SUFFIX = "subject_template"
BODY_SUFFIX = "text_body_template"

# Editable email templates, in display order
EMAIL_KEYS = (
    "invite_forum_mailer",
    "invite_mailer",
    "invite_password_instructions",
    "system_messages.backup_succeeded",
    "system_messages.pending_users_reminder",
    "system_messages.welcome_invite",
    "system_messages.welcome_user",
    "test_mailer",
    "user_notifications.account_created",
    "user_notifications.admin_login",
    "user_notifications.email_login",
    "user_notifications.forgot_password",
    "user_notifications.notify_old_email",
    "user_notifications.set_password",
    "user_notifications.signup",
    "user_notifications.signup_after_approval",
    "user_notifications.user_mentioned",
    "user_notifications.user_replied",
)


def is_plural(value: Any) -> bool:
    """True for a {category: text} mapping that includes 'other'"""
    return (
        isinstance(value, dict)
        and "other" in value
        and set(value).issubset(PLURAL_CATEGORIES)
    )


def lookup(locale: str, key: str) -> Optional[TranslationValue]:
    """
    Find a built-in value in one catalog.

    Args:
        locale: Catalog locale (e.g. 'en')
        key: Dotted translation key

    Returns:
        A string, a plural mapping, or None when the catalog has no leaf there
    """
    node: Any = CATALOGS.get(locale)
    for part in key.split("."):
        if not isinstance(node, dict) or is_plural(node) or part not in node:
            return None
        node = node[part]

    if isinstance(node, str) or is_plural(node):
        return node
    return None


def subject_key(template_id: str) -> str:
    return f"{template_id}.{SUBJECT_SUFFIX}"


def body_key(template_id: str) -> str:
    return f"{template_id}.{BODY_SUFFIX}"
