"""
Tests for the translation store
"""
import pytest

from mailtext.core.exceptions import MissingTranslation
from mailtext.locales import EMAIL_KEYS, body_key, lookup, subject_key
from mailtext.models.translation_override import TranslationOverride
from mailtext.services.translation_service import TranslationService

KEY = "user_notifications.signup.subject_template"


class FakeCache:
    """Dict-backed stand-in for RedisCache"""

    def __init__(self):
        self.store = {}

    def get(self, key):
        return self.store.get(key)

    def set(self, key, value, ttl=3600):
        self.store[key] = value
        return True

    def delete(self, key):
        self.store.pop(key, None)
        return True

    def incr(self, key):
        self.store[key] = self.store.get(key, 0) + 1
        return self.store[key]


class InterleavingCache(FakeCache):
    """Runs a callback between a reader's query and its cache write"""

    def __init__(self, before_first_set):
        super().__init__()
        self.before_first_set = before_first_set

    def set(self, key, value, ttl=3600):
        callback, self.before_first_set = self.before_first_set, None
        if callback:
            callback()
        return super().set(key, value, ttl)


@pytest.fixture
def service(db_session):
    return TranslationService(db_session)


def test_every_email_template_resolves_in_default_locale(service):
    for template_id in EMAIL_KEYS:
        for key in (subject_key(template_id), body_key(template_id)):
            value = service.effective_value(key)
            assert value, key
            assert "translation missing" not in str(value)


def test_effective_value_without_override_is_default(service):
    assert service.effective_value(KEY, "en") == lookup("en", KEY)
    assert service.has_override(KEY, "en") is False


def test_upsert_override_shadows_default(service, db_session):
    service.upsert_override(KEY, "en", "[%{email_prefix}] Hello")
    db_session.commit()

    assert service.effective_value(KEY, "en") == "[%{email_prefix}] Hello"
    assert service.has_override(KEY, "en") is True
    assert service.default_value(KEY, "en") == lookup("en", KEY)


def test_upsert_override_replaces_existing_row(service, db_session):
    service.upsert_override(KEY, "en", "first %{email_prefix}")
    service.upsert_override(KEY, "en", "second %{email_prefix}")
    db_session.commit()

    rows = db_session.query(TranslationOverride).all()
    assert [row.value for row in rows] == ["second %{email_prefix}"]


def test_overrides_are_per_locale(service, db_session):
    service.upsert_override(KEY, "de", "Hallo %{email_prefix}")
    db_session.commit()

    assert service.has_override(KEY, "de") is True
    assert service.has_override(KEY, "en") is False


def test_delete_override(service, db_session):
    service.upsert_override(KEY, "en", "custom %{email_prefix}")
    db_session.commit()

    assert service.delete_override(KEY, "en") == "custom %{email_prefix}"
    db_session.commit()

    assert service.has_override(KEY, "en") is False
    assert db_session.query(TranslationOverride).count() == 0


def test_delete_missing_override_is_a_no_op(service):
    assert service.delete_override(KEY, "en") is None


@pytest.mark.parametrize("raw,expected", [
    ("de", "de"),
    ("de-AT", "de"),
    ("de_DE", "de"),
    ("EN", "en"),
    ("fr", "en"),
    (None, "en"),
    ("", "en"),
])
def test_normalize_locale(service, raw, expected):
    assert service.normalize_locale(raw) == expected


def test_default_value_falls_back_to_default_locale(service):
    key = "test_mailer.subject_template"
    assert lookup("de", key) is None
    assert service.default_value(key, "de") == lookup("en", key)


def test_missing_key_raises(service):
    with pytest.raises(MissingTranslation):
        service.effective_value("user_notifications.does_not_exist.subject_template")


def test_branch_key_is_not_a_translation(service):
    with pytest.raises(MissingTranslation):
        service.default_value("user_notifications.admin_login")


def test_render_interpolates_override(service, db_session):
    service.upsert_override(KEY, "en", "[%{email_prefix}] Confirm")
    db_session.commit()

    assert service.render(KEY, "en", {"email_prefix": "Forum"}) == "[Forum] Confirm"


@pytest.mark.parametrize("count,expected", [
    (1, "1 user waiting for approval"),
    (5, "5 users waiting for approval"),
    (0, "0 users waiting for approval"),
])
def test_render_plural(service, count, expected):
    key = "system_messages.pending_users_reminder.subject_template"
    assert service.render(key, "en", {"count": count}) == expected


def test_overrides_are_cached_and_invalidated(db_session):
    cache = FakeCache()
    writer = TranslationService(db_session, cache=cache)

    assert writer.has_override(KEY, "en") is False
    assert cache.store["translation_overrides:en:0"] == {}

    writer.upsert_override(KEY, "en", "cached %{email_prefix}")
    db_session.commit()
    writer.invalidate("en")
    assert cache.store["translation_overrides:en:version"] == 1

    # A fresh request sees the committed row immediately
    reader = TranslationService(db_session, cache=cache)
    assert reader.effective_value(KEY, "en") == "cached %{email_prefix}"
    assert cache.store["translation_overrides:en:1"] == {KEY: "cached %{email_prefix}"}


def test_cached_overrides_are_used_without_querying(db_session):
    cache = FakeCache()
    cache.set("translation_overrides:en:0", {KEY: "from cache %{email_prefix}"})

    service = TranslationService(db_session, cache=cache)
    assert service.effective_value(KEY, "en") == "from cache %{email_prefix}"


def test_reader_caching_during_a_write_does_not_hide_it(db_session):
    """A map queried before a commit but cached after it is never served"""

    def commit_write():
        writer = TranslationService(db_session, cache=cache)
        writer.upsert_override(KEY, "en", "fresh %{email_prefix}")
        db_session.commit()
        writer.invalidate("en")

    cache = InterleavingCache(before_first_set=commit_write)
    slow_reader = TranslationService(db_session, cache=cache)
    assert slow_reader.has_override(KEY, "en") is False
    assert cache.store["translation_overrides:en:0"] == {}

    reader = TranslationService(db_session, cache=cache)
    assert reader.effective_value(KEY, "en") == "fresh %{email_prefix}"
    assert reader.has_override(KEY, "en") is True
