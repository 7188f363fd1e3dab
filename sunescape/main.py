"""SunEscape – FastAPI application."""
# Load .env before any app code that might read config
from dotenv import load_dotenv
from pathlib import Path
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sunescape.config import get_settings
from sunescape.database import Base, SessionLocal, engine
# Import models so Base.metadata has all tables before create_all (schema source of truth)
from sunescape.models import (  # noqa: F401
    Profile, HouseSettings, Reservation, ReservationGuest, ReservationNote,
    Grocery, Todo, Invite, InviteResponse, JoinRequest,
)
from sunescape.routers import (
    auth, house, reservations, calendar, ledger, invites, join_requests,
    checklists, dashboard, notifications,
)
from sunescape.seed import seed_house_settings

log = logging.getLogger("uvicorn.error")

settings = get_settings()
app = FastAPI(title=settings.app_name, debug=settings.debug)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(house.router)
app.include_router(reservations.router)
app.include_router(calendar.router)
app.include_router(ledger.router)
app.include_router(invites.router)
app.include_router(join_requests.router)
app.include_router(checklists.router)
app.include_router(dashboard.router)
app.include_router(notifications.router)


def _log_mail_config() -> None:
    if settings.mailgun_api_key and settings.mailgun_domain:
        from_addr = settings.mailgun_from_email or ""
        from_domain = from_addr.split("@")[-1].lower() if "@" in from_addr else ""
        send_domain = (settings.mailgun_domain or "").strip().lower()
        if from_domain and send_domain and from_domain != send_domain:
            log.warning("[Mailgun] from=%s does not match domain=%s. Emails may not be delivered!", from_addr, settings.mailgun_domain)
            log.warning("[Mailgun] Fix: in .env set MAILGUN_FROM_EMAIL=noreply@%s then restart", settings.mailgun_domain)
        else:
            log.info("[Mailgun] using domain=%s from=%s", settings.mailgun_domain, from_addr or "(none)")
    elif settings.sendgrid_api_key:
        log.info("[SendGrid] configured; Mailgun not set")
    else:
        log.warning("[Email] Not configured - notification emails will be skipped; set MAILGUN_API_KEY and MAILGUN_DOMAIN in .env and restart")
    if not (settings.vapid_public_key and settings.vapid_private_key):
        log.warning("[Push] VAPID keys not set - push notifications will be skipped")


@app.on_event("startup")
def startup():
    _log_mail_config()
    # A database failure here stops startup
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_house_settings(db)
    finally:
        db.close()


@app.get("/")
def root():
    return {"app": settings.app_name, "status": "ok"}


@app.get("/health")
def health():
    return {"status": "healthy"}
