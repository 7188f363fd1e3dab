"""HTML bodies for transactional email. Rendered fully here; the dispatcher only sends strings."""
from html import escape

from sunescape.config import get_settings

_BRAND = "#0f766e"


def _wrap(title: str, body: str) -> str:
    return f"""
    <div style="font-family:sans-serif;max-width:520px;margin:0 auto">
      <h2 style="color:{_BRAND}">{title}</h2>
      {body}
    </div>
    """


def _app_link(action: str) -> str:
    url = escape(get_settings().app_base_url)
    return f'<p>Open the <a href="{url}" style="color:{_BRAND}">SunEscape app</a> {action}</p>'


def _message_line(message: str | None) -> str:
    return f'<p><strong>Message:</strong> "{escape(message)}"</p>' if message else ""


def build_invite_email_html(sender_name: str, start_date: str, end_date: str, message: str | None) -> str:
    body = f"""
      <p><strong>{escape(sender_name)}</strong> has reserved the SunEscape house and is inviting you to join.</p>
      <p><strong>Dates:</strong> {escape(start_date)} → {escape(end_date)}</p>
      {_message_line(message)}
      {_app_link("to accept and choose how many rooms you need.")}
    """
    return _wrap("SunEscape — You're invited!", body)


def build_join_request_email_html(
    requester_name: str,
    reservation_name: str,
    start_date: str,
    end_date: str,
    rooms: int,
    message: str | None,
) -> str:
    body = f"""
      <p><strong>{escape(requester_name)}</strong> wants to join your reservation <strong>{escape(reservation_name)}</strong>.</p>
      <p><strong>Dates:</strong> {escape(start_date)} → {escape(end_date)}</p>
      <p><strong>Rooms needed:</strong> {rooms}</p>
      {_message_line(message)}
      {_app_link("to approve or deny this request.")}
    """
    return _wrap("SunEscape — Join Request", body)


def build_join_response_email_html(reservation_name: str, start_date: str, end_date: str, approved: bool) -> str:
    if approved:
        title = "SunEscape — Join Request Approved 🎉"
        outcome = "approved!"
        follow_up = "<p>You've been added to the guest list. See you at SunEscape!</p>"
    else:
        title = "SunEscape — Join Request Update"
        outcome = "declined."
        follow_up = "<p>The owner wasn't able to accommodate your request at this time.</p>"
    body = f"""
      <p>Your request to join <strong>{escape(reservation_name)}</strong> ({escape(start_date)} → {escape(end_date)}) has been <strong>{outcome}</strong></p>
      {follow_up}
      {_app_link("for details.")}
    """
    return _wrap(title, body)
