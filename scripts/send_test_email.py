"""
Send a test email to verify Mailgun (or SendGrid) is configured correctly.
Usage: python scripts/send_test_email.py <to_email>
"""
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from sunescape.config import get_settings
from sunescape.services.notifications import send_email


def main():
    to_email = (sys.argv[1] if len(sys.argv) > 1 else "").strip()
    if not to_email:
        print("Usage: python scripts/send_test_email.py <to_email>")
        sys.exit(1)

    settings = get_settings()
    if not (settings.mailgun_api_key and settings.mailgun_domain) and not settings.sendgrid_api_key:
        print("Email is not configured. Set MAILGUN_API_KEY and MAILGUN_DOMAIN (or SENDGRID_API_KEY) in .env")
        print(f"  MAILGUN_API_KEY: {'(set)' if settings.mailgun_api_key else '(missing)'}")
        print(f"  MAILGUN_DOMAIN: {repr(settings.mailgun_domain) if settings.mailgun_domain else '(missing)'}")
        print(f"  SENDGRID_API_KEY: {'(set)' if settings.sendgrid_api_key else '(missing)'}")
        sys.exit(1)

    print(f"Sending test email to: {to_email}")
    if settings.mailgun_api_key:
        print(f"From: {settings.mailgun_from_name} <{settings.mailgun_from_email}> via {settings.mailgun_domain}")

    subject = f"[{settings.app_name}] Test email"
    text = f"This is a test from {settings.app_name}. If you received this, email delivery works."
    html = f"<p>This is a <strong>test email</strong> from {settings.app_name}.</p><p>If you received this, email delivery works.</p>"

    if send_email(to_email, subject, html, text_content=text):
        print("Success: Test email sent. Check the inbox (and spam) for", to_email)
    else:
        print("Failed: the provider returned an error. See the log lines above.")
        print("  - For EU Mailgun accounts set MAILGUN_BASE_URL=https://api.eu.mailgun.net in .env")
        sys.exit(1)


if __name__ == "__main__":
    main()
