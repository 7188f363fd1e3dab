"""Notification dispatch: transactional email (Mailgun/SendGrid) and Web Push to profiles.

Everything here is best-effort. Callers go through the outbox so a failed
dispatch never reaches the request that triggered it.
"""
import json
import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from sunescape.config import get_settings
from sunescape.database import SessionLocal
from sunescape.models.profile import Profile
from sunescape.services.email_templates import (
    build_invite_email_html,
    build_join_request_email_html,
    build_join_response_email_html,
)

log = logging.getLogger("uvicorn.error")

MAILGUN_US_BASE = "https://api.mailgun.net"
MAILGUN_EU_BASE = "https://api.eu.mailgun.net"


@dataclass
class DispatchResult:
    sent: int = 0
    failed: int = 0


def send_email(to_email: str, subject: str, html_content: str, text_content: str | None = None) -> bool:
    """Send one email via Mailgun (preferred) or SendGrid. Returns True if the provider accepted it."""
    settings = get_settings()
    if settings.mailgun_api_key and settings.mailgun_domain:
        return _send_email_mailgun(to_email, subject, html_content, text_content=text_content, settings=settings)
    if settings.sendgrid_api_key:
        return _send_email_sendgrid(to_email, subject, html_content, text_content=text_content, settings=settings)
    log.warning(
        "[Email] NOT SENT: to=%s subject=%s. Set MAILGUN_API_KEY and MAILGUN_DOMAIN (or SENDGRID_API_KEY) in .env.",
        to_email,
        subject,
    )
    return False


def _send_email_mailgun(to_email: str, subject: str, html_content: str, text_content: str | None = None, settings=None) -> bool:
    if settings is None:
        settings = get_settings()
    try:
        import httpx

        base = (settings.mailgun_base_url or MAILGUN_US_BASE).strip().rstrip("/")
        domain = (settings.mailgun_domain or "").strip().lower()
        from_addr = (settings.mailgun_from_email or "").strip()
        from_domain = from_addr.split("@")[-1].lower() if "@" in from_addr else ""
        if domain and from_domain != domain:
            # Mailgun drops mail whose sender domain differs from the sending domain
            from_addr = f"noreply@{domain}"
        data = {
            "from": f"{settings.mailgun_from_name} <{from_addr}>",
            "to": to_email,
            "subject": subject,
            "text": text_content or "",
            "html": html_content or "",
        }
        with httpx.Client(timeout=10.0) as client:
            r = client.post(f"{base}/v3/{domain}/messages", auth=("api", settings.mailgun_api_key), data=data)
            if 200 <= r.status_code < 300:
                log.info("[Mailgun] sent: to=%s status=%s", to_email, r.status_code)
                return True
            if r.status_code == 401 and base == MAILGUN_US_BASE:
                log.info("[Mailgun] 401 with US endpoint. Retrying with EU endpoint...")
                r2 = client.post(f"{MAILGUN_EU_BASE}/v3/{domain}/messages", auth=("api", settings.mailgun_api_key), data=data)
                if 200 <= r2.status_code < 300:
                    return True
                log.warning("[Mailgun] EU request failed: status=%s body=%s", r2.status_code, r2.text[:500])
                return False
            log.warning("[Mailgun] API failed: status=%s to=%s body=%s", r.status_code, to_email, r.text[:500])
            return False
    except Exception as e:
        log.warning("[Mailgun] Exception: to=%s error=%s: %s", to_email, type(e).__name__, e)
        return False


def _send_email_sendgrid(to_email: str, subject: str, html_content: str, text_content: str | None = None, settings=None) -> bool:
    if settings is None:
        settings = get_settings()
    try:
        from sendgrid import SendGridAPIClient
        from sendgrid.helpers.mail import Mail

        message = Mail(
            from_email=(settings.sendgrid_from_email, settings.sendgrid_from_name),
            to_emails=to_email,
            subject=subject,
            html_content=html_content,
            plain_text_content=text_content or "",
        )
        SendGridAPIClient(settings.sendgrid_api_key).send(message)
        return True
    except Exception as e:
        log.warning("[SendGrid] Exception: to=%s error=%s: %s", to_email, type(e).__name__, e)
        return False


def send_email_to_profiles(
    db: Session,
    subject: str,
    html: str,
    text: str | None = None,
    exclude_user_id: int | None = None,
    target_user_id: int | None = None,
) -> DispatchResult:
    """Email every profile with an address, or only target_user_id when given.

    One message per recipient so addresses are never exposed to each other.
    """
    query = db.query(Profile).filter(Profile.email.isnot(None))
    if target_user_id is not None:
        query = query.filter(Profile.id == target_user_id)
    elif exclude_user_id is not None:
        query = query.filter(Profile.id != exclude_user_id)
    recipients = [p.email for p in query.all() if p.email]

    result = DispatchResult()
    for to in recipients:
        if send_email(to, subject, html, text_content=text):
            result.sent += 1
        else:
            result.failed += 1
    log.info("[Email] %s: sent=%d failed=%d", subject, result.sent, result.failed)
    return result


def send_push(db: Session, title: str, body: str, exclude_user_id: int | None = None) -> DispatchResult:
    """Web Push to every stored subscription (VAPID)."""
    settings = get_settings()
    result = DispatchResult()
    if not settings.vapid_public_key or not settings.vapid_private_key:
        log.warning("[Push] VAPID keys not configured; push skipped.")
        return result

    query = db.query(Profile).filter(Profile.push_subscription.isnot(None))
    if exclude_user_id is not None:
        query = query.filter(Profile.id != exclude_user_id)
    subscriptions = [p.push_subscription for p in query.all() if p.push_subscription]

    from pywebpush import webpush

    payload = json.dumps({"title": title, "body": body, "url": settings.app_base_url})
    for sub in subscriptions:
        try:
            webpush(
                subscription_info=sub,
                data=payload,
                vapid_private_key=settings.vapid_private_key,
                vapid_claims={"sub": settings.vapid_subject},
            )
            result.sent += 1
        except Exception as e:
            # One bad subscription must not stop the others
            log.warning("[Push] delivery failed: %s: %s", type(e).__name__, e)
            result.failed += 1
    log.info("[Push] %s: sent=%d failed=%d", title, result.sent, result.failed)
    return result


# Outbox jobs. Each runs after the response in its own session.


def push_new_invite(sender_id: int, sender_name: str) -> None:
    db = SessionLocal()
    try:
        send_push(
            db,
            "SunEscape — New invitation!",
            f"{sender_name} created a reservation and invited you to join. Check the app!",
            exclude_user_id=sender_id,
        )
    finally:
        db.close()


def notify_new_invite(sender_id: int, sender_name: str, start_date: str, end_date: str, message: str | None) -> None:
    db = SessionLocal()
    try:
        send_email_to_profiles(
            db,
            f"{sender_name} invited you to stay at SunEscape",
            build_invite_email_html(sender_name, start_date, end_date, message),
            exclude_user_id=sender_id,
        )
    finally:
        db.close()


def notify_join_request(
    owner_id: int,
    requester_name: str,
    reservation_name: str,
    start_date: str,
    end_date: str,
    rooms: int,
    message: str | None,
) -> None:
    db = SessionLocal()
    try:
        send_email_to_profiles(
            db,
            f"{requester_name} wants to join your SunEscape reservation",
            build_join_request_email_html(requester_name, reservation_name, start_date, end_date, rooms, message),
            target_user_id=owner_id,
        )
    finally:
        db.close()


def notify_join_response(requester_id: int, reservation_name: str, start_date: str, end_date: str, approved: bool) -> None:
    if approved:
        subject = f'Your request to join "{reservation_name}" was approved!'
    else:
        subject = f'Update on your request to join "{reservation_name}"'
    db = SessionLocal()
    try:
        send_email_to_profiles(
            db,
            subject,
            build_join_response_email_html(reservation_name, start_date, end_date, approved),
            target_user_id=requester_id,
        )
    finally:
        db.close()
