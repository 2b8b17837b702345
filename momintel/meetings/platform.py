"""Meeting platform detection and the platform calendar catalog."""

from datetime import datetime, timedelta

from momintel.errors import UnsupportedPlatformError
from momintel.models.base import utc_now
from momintel.models.calendar import CalendarEvent, PlatformInfo

PLATFORM_HOSTS = (
    ("meet.google.com", "google_meet"),
    ("zoom.us", "zoom"),
    ("teams.microsoft.com", "microsoft_teams"),
)

SUPPORTED_PLATFORMS = {
    "google_meet": "Google Meet",
    "zoom": "Zoom",
    "microsoft_teams": "Microsoft Teams",
    "manual": "Manual",
}

DEMO_LINKS = {
    "google_meet": "https://meet.google.com/demo-phase3",
    "zoom": "https://zoom.us/j/1234567890",
    "microsoft_teams": "https://teams.microsoft.com/l/meetup-join/demo",
    "manual": "",
}

# (slug, title, minutes from now, attendees)
DEMO_EVENTS = (
    (
        "weekly-product-sync",
        "Weekly Product Sync",
        5,
        ("pm@example.com", "eng@example.com", "qa@example.com"),
    ),
    (
        "customer-review",
        "Customer Review",
        45,
        ("sales@example.com", "support@example.com"),
    ),
)

DEFAULT_OWNER_EMAIL = "owner@example.com"


def detect_platform(meeting_link: str | None) -> str:
    link = (meeting_link or "").lower()
    for host, platform in PLATFORM_HOSTS:
        if host in link:
            return platform
    return "manual"


def supported_platforms() -> list[PlatformInfo]:
    return [PlatformInfo(id=key, label=label) for key, label in SUPPORTED_PLATFORMS.items()]


def list_calendar_events(
    platform: str,
    owner_email: str | None = None,
    now: datetime | None = None,
) -> list[CalendarEvent]:
    """Upcoming events for a platform calendar.

    The catalog is a fixed demo calendar: event ids are stable per
    platform so a listed event can be started later by id.

    Raises:
        UnsupportedPlatformError: If the platform is not supported
    """
    if platform not in SUPPORTED_PLATFORMS:
        raise UnsupportedPlatformError(f"Unsupported platform: {platform}")

    now = now or utc_now()
    return [
        CalendarEvent(
            event_id=f"{platform}-{slug}",
            title=title,
            owner_email=owner_email or DEFAULT_OWNER_EMAIL,
            starts_at=now + timedelta(minutes=minutes),
            attendees=list(attendees),
            meeting_link=DEMO_LINKS[platform],
        )
        for slug, title, minutes, attendees in DEMO_EVENTS
    ]


def normalize_attendees(attendees: list[str]) -> list[str]:
    """Trim and lower-case attendee emails, dropping blanks."""
    return [a.strip().lower() for a in attendees if a and a.strip()]
