from sunescape.schemas.auth import SignUp, SignIn, Token, ProfileResponse, PushSubscriptionIn
from sunescape.schemas.reservation import ReservationCreate, ReservationIn, ReservationResponse, DayView, CalendarMonthView
from sunescape.schemas.ledger import GuestCreate, GuestResponse, NoteCreate, NoteResponse
from sunescape.schemas.invite import InviteView, JoinRequestCreate, JoinRequestResponse
from sunescape.schemas.checklist import ChecklistItemCreate, ChecklistItemResponse
from sunescape.schemas.dashboard import DashboardSnapshot
