"""
Translation Service - built-in strings shadowed by admin overrides.
Lookup order: override for (key, locale) > catalog for locale > default locale catalog.
Overrides are cached per locale in Redis when it is available.
"""
import logging
from typing import Optional, Dict, Any

from sqlalchemy.orm import Session

from mailtext.core.config import settings
from mailtext.core.exceptions import MissingTranslation
from mailtext.core.redis import RedisCache, cache as default_cache
from mailtext.locales import TranslationValue, is_plural, lookup
from mailtext.models.translation_override import TranslationOverride
from mailtext.services.interpolation import interpolate

logger = logging.getLogger(__name__)


class TranslationService:
    """
    Request-scoped translation store.
    Reads go through a per-instance memo and the shared Redis cache;
    call invalidate() after committing override writes.
    """

    CACHE_PREFIX = "translation_overrides"

    def __init__(self, db: Session, cache: Optional[RedisCache] = None):
        self.db = db
        self.cache = cache or default_cache
        self._overrides: Dict[str, Dict[str, str]] = {}  # locale -> {key: value}

    def normalize_locale(self, locale: Optional[str] = None) -> str:
        """
        Normalize a locale code to a supported catalog.

        Args:
            locale: Locale such as 'de', 'de-DE' or 'de_AT'

        Returns:
            Supported 2-letter locale, DEFAULT_LOCALE otherwise
        """
        base = (locale or "").replace("_", "-").split("-")[0].lower().strip()
        if base in settings.SUPPORTED_LOCALES:
            return base
        return settings.DEFAULT_LOCALE

    def default_value(self, key: str, locale: Optional[str] = None) -> TranslationValue:
        """
        Built-in value, ignoring overrides.

        Raises:
            MissingTranslation: no catalog defines the key
        """
        locale = self.normalize_locale(locale)
        for candidate in (locale, settings.DEFAULT_LOCALE):
            value = lookup(candidate, key)
            if value is not None:
                return value
        raise MissingTranslation(key, locale)

    def _version_key(self, locale: str) -> str:
        return f"{self.CACHE_PREFIX}:{locale}:version"

    def _cache_key(self, locale: str, version: int) -> str:
        return f"{self.CACHE_PREFIX}:{locale}:{version}"

    def _get_overrides(self, locale: str) -> Dict[str, str]:
        """All override values for a locale (lazy load)"""
        if locale in self._overrides:
            return self._overrides[locale]

        # Version is read before the query; a write committed meanwhile bumps it,
        # so a stale map can only land under a key nobody reads any more.
        version = self.cache.get(self._version_key(locale)) or 0
        cache_key = self._cache_key(locale, version)

        overrides = self.cache.get(cache_key)
        if overrides is None:
            rows = self.db.query(TranslationOverride).filter(
                TranslationOverride.locale == locale
            ).all()
            overrides = {row.translation_key: row.value for row in rows}
            self.cache.set(cache_key, overrides, ttl=settings.TRANSLATION_CACHE_TTL)

        self._overrides[locale] = overrides
        return overrides

    def has_override(self, key: str, locale: Optional[str] = None) -> bool:
        return key in self._get_overrides(self.normalize_locale(locale))

    def effective_value(self, key: str, locale: Optional[str] = None) -> TranslationValue:
        """
        Current value of a key: the override if one exists, else the built-in value.

        Args:
            key: Translation key (e.g. 'user_notifications.admin_login.subject_template')
            locale: Locale code, defaults to DEFAULT_LOCALE

        Returns:
            String or plural mapping
        """
        locale = self.normalize_locale(locale)
        overrides = self._get_overrides(locale)
        if key in overrides:
            return overrides[key]
        return self.default_value(key, locale)

    def upsert_override(self, key: str, locale: str, value: str) -> TranslationOverride:
        """
        Create or replace the override for (key, locale). Does not commit.
        """
        locale = self.normalize_locale(locale)
        override = self.db.query(TranslationOverride).filter(
            TranslationOverride.translation_key == key,
            TranslationOverride.locale == locale
        ).first()

        if override:
            override.value = value
        else:
            override = TranslationOverride(translation_key=key, locale=locale, value=value)
            self.db.add(override)

        self.db.flush()
        self._overrides.pop(locale, None)
        return override

    def delete_override(self, key: str, locale: str) -> Optional[str]:
        """
        Remove the override for (key, locale). Does not commit.

        Returns:
            The removed value, or None when there was no override
        """
        locale = self.normalize_locale(locale)
        override = self.db.query(TranslationOverride).filter(
            TranslationOverride.translation_key == key,
            TranslationOverride.locale == locale
        ).first()

        if not override:
            return None

        previous = override.value
        self.db.delete(override)
        self.db.flush()
        self._overrides.pop(locale, None)
        return previous

    def invalidate(self, locale: Optional[str] = None) -> None:
        """Drop cached overrides so the next read sees committed rows"""
        locale = self.normalize_locale(locale)
        self._overrides.pop(locale, None)
        self.cache.incr(self._version_key(locale))
        logger.debug(f"Translation overrides cache invalidated for '{locale}'")

    def render(
        self,
        key: str,
        locale: Optional[str] = None,
        variables: Optional[Dict[str, Any]] = None
    ) -> str:
        """
        Effective value with %{name} substitution.
        Plural values pick a form from variables['count'].

        Args:
            key: Translation key
            locale: Locale code
            variables: Values for substitution (e.g. {'site_name': 'Forum'})

        Returns:
            Rendered text
        """
        variables = variables or {}
        value = self.effective_value(key, locale)

        if is_plural(value):
            count = variables.get("count")
            if count == 0 and "zero" in value:
                value = value["zero"]
            elif count == 1 and "one" in value:
                value = value["one"]
            else:
                value = value["other"]

        return interpolate(value, variables)
