"""
Built-in English strings. Interpolation uses %{name} placeholders; plural
values are mappings of plural category to string.
"""

TRANSLATIONS = {
    "admin": {
        "email_templates": {
            "subject": "Subject",
            "body": "Body",
        },
    },
    "errors": {
        "translation_overrides": {
            "invalid_interpolation_keys": "The following interpolation key(s) are invalid: %{keys}",
        },
    },
    "invite_mailer": {
        "subject_template": "[%{email_prefix}] %{inviter_name} invited you to '%{topic_title}'",
        "text_body_template": (
            "%{inviter_name} invited you to a discussion\n\n"
            "> **%{topic_title}**\n"
            ">\n"
            "> %{topic_excerpt}\n\n"
            "at\n\n"
            "> [%{site_title}](%{base_url})\n\n"
            "If you're interested, click the link below:\n\n"
            "%{invite_link}\n"
        ),
    },
    "invite_forum_mailer": {
        "subject_template": "[%{email_prefix}] %{inviter_name} invited you to join %{site_domain_name}",
        "text_body_template": (
            "%{inviter_name} invited you to join\n\n"
            "> **[%{site_title}](%{base_url})**\n"
            ">\n"
            "> %{site_description}\n\n"
            "If you're interested, click the link below:\n\n"
            "%{invite_link}\n"
        ),
    },
    "invite_password_instructions": {
        "subject_template": "Set password for your %{site_name} account",
        "text_body_template": (
            "Thanks for accepting your invitation to %{site_name} -- welcome!\n\n"
            "Click this link to choose a password now:\n"
            "%{base_url}/u/password-reset/%{email_token}\n\n"
            "(If the link above has expired, choose \"I forgot my password\" when logging in with your email address.)\n"
        ),
    },
    "test_mailer": {
        "subject_template": "[%{email_prefix}] Email Deliverability Test",
        "text_body_template": (
            "This is a test email from\n\n"
            "[**%{base_url}**][0]\n\n"
            "Email deliverability is complicated. If you received this, your mail setup works.\n\n"
            "[0]: %{base_url}\n"
        ),
    },
    "system_messages": {
        "pending_users_reminder": {
            "subject_template": {
                "one": "1 user waiting for approval",
                "other": "%{count} users waiting for approval",
            },
            "text_body_template": (
                "There are new user signups waiting to be approved (or rejected) "
                "before they can access this forum.\n\n"
                "Please review them in the admin section.\n"
            ),
        },
        "welcome_user": {
            "subject_template": "Welcome to %{site_name}!",
            "text_body_template": (
                "Thanks for joining %{site_name}, and welcome!\n\n"
                "%{new_user_tips}\n\n"
                "We believe in civilized community behavior at all times.\n\n"
                "Enjoy your stay!\n\n"
                "(If you need to communicate with staff as a new user, reply to this message.)\n"
            ),
        },
        "welcome_invite": {
            "subject_template": "Welcome to %{site_name}!",
            "text_body_template": (
                "Thanks for accepting your invitation to %{site_name} -- welcome!\n\n"
                "We've created this new account **%{username}** for you. Change your name "
                "or password by visiting your user profile.\n\n"
                "%{new_user_tips}\n"
            ),
        },
        "backup_succeeded": {
            "subject_template": "Backup completed successfully",
            "text_body_template": "The backup was successful.\n\nVisit the [admin > backup section](%{base_url}/admin/backups) to download your new backup.\n",
        },
    },
    "user_notifications": {
        "account_created": {
            "subject_template": "[%{email_prefix}] Your New Account",
            "text_body_template": (
                "A new account was created for you at %{site_name}\n\n"
                "Click the following link to set a password for your new account:\n"
                "%{base_url}/u/password-reset/%{email_token}\n"
            ),
        },
        "admin_login": {
            "subject_template": "[%{email_prefix}] Login",
            "text_body_template": (
                "Somebody asked to log in to your account on [%{site_name}](%{base_url}).\n\n"
                "If you did not make this request, you can safely ignore this email.\n\n"
                "Click the following link to log in:\n"
                "%{base_url}/session/email-login/%{email_token}\n"
            ),
        },
        "email_login": {
            "subject_template": "[%{email_prefix}] Log in via link",
            "text_body_template": (
                "Here's your link to log in at [%{site_name}](%{base_url}).\n\n"
                "If you did not request this link, you can safely ignore this email.\n\n"
                "Click the following link to log in:\n"
                "%{base_url}/session/email-login/%{email_token}\n"
            ),
        },
        "forgot_password": {
            "subject_template": "[%{email_prefix}] Password reset",
            "text_body_template": (
                "Somebody asked to reset your password on [%{site_name}](%{base_url}).\n\n"
                "If it was not you, you can safely ignore this email.\n\n"
                "Click the following link to choose a new password:\n"
                "%{base_url}/u/password-reset/%{email_token}\n"
            ),
        },
        "set_password": {
            "subject_template": "[%{email_prefix}] Set Password",
            "text_body_template": (
                "Somebody asked to add a password to your account on [%{site_name}](%{base_url}). "
                "Alternatively, you can log in using any supported online service.\n\n"
                "If you did not make this request, you can safely ignore this email.\n\n"
                "Click the following link to choose a new password:\n"
                "%{base_url}/u/password-reset/%{email_token}\n"
            ),
        },
        "signup": {
            "subject_template": "[%{email_prefix}] Confirm your new account",
            "text_body_template": (
                "Welcome to %{site_name}!\n\n"
                "Click the following link to confirm and activate your new account:\n"
                "%{base_url}/u/activate-account/%{email_token}\n\n"
                "If the above link is not clickable, try copying and pasting it into the address bar of your web browser.\n"
            ),
        },
        "signup_after_approval": {
            "subject_template": "You've Been Approved on %{site_name}!",
            "text_body_template": (
                "Welcome to %{site_name}!\n\n"
                "A staff member approved your account on %{site_name}.\n\n"
                "You can now access your new account by logging in at:\n"
                "%{base_url}\n\n"
                "%{new_user_tips}\n"
            ),
        },
        "notify_old_email": {
            "subject_template": "[%{email_prefix}] Your email address has been changed",
            "text_body_template": (
                "This is an automated message to let you know that your email address for "
                "%{site_name} has been changed. If this was done in error, please contact a site administrator.\n\n"
                "Your email address has been changed to:\n\n"
                "%{new_email}\n"
            ),
        },
        "user_mentioned": {
            "subject_template": "[%{email_prefix}] %{topic_title}",
            "text_body_template": "%{header_instructions}\n\n%{message}\n\n%{context}\n\n---\n%{respond_instructions}\n",
        },
        "user_replied": {
            "subject_template": "[%{email_prefix}] %{topic_title}",
            "text_body_template": "%{header_instructions}\n\n%{message}\n\n%{context}\n\n---\n%{respond_instructions}\n",
        },
    },
}
