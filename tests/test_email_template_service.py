"""
Tests for EmailTemplateService used directly, without the HTTP layer
"""
import pytest

from mailtext.core.exceptions import InvalidAccess, NotFound, ValidationFailed
from mailtext.core.security import Guardian
from mailtext.locales import EMAIL_KEYS, lookup
from mailtext.models.translation_override import TranslationOverride
from mailtext.models.user_history import UserHistory
from mailtext.services.email_template_service import EmailTemplateService

TEMPLATE_ID = "user_notifications.forgot_password"
SUBJECT = "%{email_prefix} Reset"
BODY = "Reset at [%{site_name}](%{base_url}): %{base_url}/u/password-reset/%{email_token}"


@pytest.fixture
def service(db_session, admin):
    return EmailTemplateService(db_session, Guardian(admin))


@pytest.mark.parametrize("role", [None, "user", "moderator"])
def test_guardian_rejects_non_admins(db_session, request, role):
    user = request.getfixturevalue(role) if role else None
    service = EmailTemplateService(db_session, Guardian(user))

    with pytest.raises(InvalidAccess):
        service.list_templates()
    with pytest.raises(InvalidAccess):
        service.update(TEMPLATE_ID, SUBJECT, BODY)
    with pytest.raises(InvalidAccess):
        service.revert(TEMPLATE_ID)

    assert db_session.query(TranslationOverride).count() == 0


def test_access_is_checked_before_template_id(db_session, user):
    service = EmailTemplateService(db_session, Guardian(user))
    with pytest.raises(InvalidAccess):
        service.update("non_existent_template", "Foo", "Bar")


def test_list_follows_declaration_order(service):
    assert [t.id for t in service.list_templates()] == list(EMAIL_KEYS)


@pytest.mark.parametrize("template_id,title", [
    ("user_notifications.admin_login", "Admin Login"),
    ("test_mailer", "Test Mailer"),
    ("system_messages.pending_users_reminder", "Pending Users Reminder"),
])
def test_title_for(template_id, title):
    assert EmailTemplateService.title_for(template_id) == title


def test_unknown_template(service):
    with pytest.raises(NotFound):
        service.show("non_existent_template")
    with pytest.raises(NotFound):
        service.update("non_existent_template", "Foo", "Bar")
    with pytest.raises(NotFound):
        service.revert("non_existent_template")


def test_validation_errors_are_collected(service, db_session):
    with pytest.raises(ValidationFailed) as exc_info:
        service.update(TEMPLATE_ID, "No prefix", "No keys at all")

    assert exc_info.value.errors == [
        "<b>Subject</b>: The following interpolation key(s) are invalid: email_prefix",
        "<b>Body</b>: The following interpolation key(s) are invalid: base_url, email_token, site_name",
    ]
    assert db_session.query(TranslationOverride).count() == 0
    assert db_session.query(UserHistory).count() == 0


def test_update_and_revert_round_trip(service, db_session, admin):
    updated = service.update(TEMPLATE_ID, SUBJECT, BODY)
    assert updated.subject == SUBJECT
    assert updated.body == BODY
    assert updated.can_revert is True

    reverted = service.revert(TEMPLATE_ID)
    assert reverted.subject == lookup("en", f"{TEMPLATE_ID}.subject_template")
    assert reverted.body == lookup("en", f"{TEMPLATE_ID}.text_body_template")
    assert reverted.can_revert is False

    histories = db_session.query(UserHistory).all()
    assert len(histories) == 4
    assert all(h.acting_user_id == admin.id for h in histories)


def test_failed_commit_writes_nothing(service, db_session, monkeypatch):
    def failing_commit():
        raise RuntimeError("database went away")

    monkeypatch.setattr(db_session, "commit", failing_commit)

    with pytest.raises(RuntimeError):
        service.update(TEMPLATE_ID, SUBJECT, BODY)

    monkeypatch.undo()
    assert db_session.query(TranslationOverride).count() == 0
    assert db_session.query(UserHistory).count() == 0


def test_plural_subject_is_skipped_without_validation(service, db_session):
    template_id = "system_messages.pending_users_reminder"
    template = service.update(template_id, "%{anything} goes", None)

    assert template.subject == lookup("en", f"{template_id}.subject_template")
    assert template.can_revert is False
    assert db_session.query(UserHistory).count() == 0


def test_explicit_locale_wins_over_user_locale(db_session, admin):
    admin.locale = "de"
    db_session.commit()

    assert EmailTemplateService(db_session, Guardian(admin)).locale == "de"
    assert EmailTemplateService(db_session, Guardian(admin), locale="en").locale == "en"
