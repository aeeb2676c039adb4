"""
German strings. Keys missing here fall back to the default locale.
"""

TRANSLATIONS = {
    "admin": {
        "email_templates": {
            "subject": "Betreff",
            "body": "Inhalt",
        },
    },
    "errors": {
        "translation_overrides": {
            "invalid_interpolation_keys": "Die folgenden Platzhalter sind ungültig: %{keys}",
        },
    },
    "user_notifications": {
        "admin_login": {
            "subject_template": "[%{email_prefix}] Anmelden",
            "text_body_template": (
                "Jemand hat versucht, sich mit deinem Konto auf [%{site_name}](%{base_url}) anzumelden.\n\n"
                "Falls du das nicht warst, kannst du diese E-Mail ignorieren.\n\n"
                "Klicke auf den folgenden Link, um dich anzumelden:\n"
                "%{base_url}/session/email-login/%{email_token}\n"
            ),
        },
        "signup": {
            "subject_template": "[%{email_prefix}] Bestätige dein neues Konto",
            "text_body_template": (
                "Willkommen bei %{site_name}!\n\n"
                "Klicke auf den folgenden Link, um dein neues Konto zu bestätigen und zu aktivieren:\n"
                "%{base_url}/u/activate-account/%{email_token}\n"
            ),
        },
    },
}
