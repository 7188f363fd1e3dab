"""Push subscription management and the admin test email."""
from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.orm import Session

from sunescape.config import get_settings
from sunescape.database import get_db
from sunescape.models.profile import Profile
from sunescape.schemas.auth import ProfileResponse, PushSubscriptionIn
from sunescape.services.notifications import send_email
from sunescape.services.profiles import clear_push_subscription, save_push_subscription
from sunescape.dependencies import get_current_user, profile_response, require_admin

router = APIRouter(prefix="/notifications", tags=["notifications"])


class TestEmailBody(BaseModel):
    to: str | None = None


@router.get("/vapid-public-key")
def vapid_public_key():
    """Public VAPID key the browser needs for pushManager.subscribe()."""
    key = get_settings().vapid_public_key
    if not key:
        raise HTTPException(status_code=503, detail="Push notifications are not configured.")
    return {"public_key": key}


@router.put("/push-subscription", response_model=ProfileResponse)
def subscribe(
    data: PushSubscriptionIn,
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    profile = save_push_subscription(db, current_user, data.model_dump())
    return profile_response(profile)


@router.delete("/push-subscription", response_model=ProfileResponse)
def unsubscribe(
    db: Session = Depends(get_db),
    current_user: Profile = Depends(get_current_user),
):
    return profile_response(clear_push_subscription(db, current_user))


@router.post("/test-email")
def send_test_email(
    body: TestEmailBody | None = Body(None),
    current_user: Profile = Depends(require_admin),
):
    """
    Send a test email to `to`, or to the calling admin when omitted.
    Needs MAILGUN_API_KEY and MAILGUN_DOMAIN (or SENDGRID_API_KEY) in .env.
    """
    settings = get_settings()
    if not (settings.mailgun_api_key and settings.mailgun_domain) and not settings.sendgrid_api_key:
        raise HTTPException(
            status_code=503,
            detail="Email is not configured. Set MAILGUN_API_KEY and MAILGUN_DOMAIN (or SENDGRID_API_KEY) in .env.",
        )
    to_email = (body.to if body and body.to else current_user.email).strip()
    subject = f"[{settings.app_name}] Test email"
    html_content = f"<p>This is a test email from <strong>{settings.app_name}</strong>. Email delivery is working.</p>"
    text_content = f"This is a test email from {settings.app_name}. Email delivery is working."
    if not send_email(to_email, subject, html_content, text_content=text_content):
        raise HTTPException(status_code=502, detail="Email provider rejected the request. Check server logs.")
    return {"status": "ok", "message": f"Test email sent to {to_email}."}
