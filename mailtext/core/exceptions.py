"""
Domain exceptions. Mapped to JSON responses by the handlers in mailtext.main.
"""
from typing import List


class MailtextError(Exception):
    """Base class for request-scoped, recoverable errors"""


class InvalidAccess(MailtextError):
    """Caller is not an authenticated administrator"""


class NotFound(MailtextError):
    """Requested email template does not exist"""


class ValidationFailed(MailtextError):
    """One or more submitted fields were rejected"""

    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


class MissingTranslation(KeyError):
    """No catalog provides a value for the key"""

    def __init__(self, key: str, locale: str):
        super().__init__(f"translation missing: {locale}.{key}")
        self.key = key
        self.locale = locale
