"""UTC clock helpers for session expiry and identity timestamps.

Every stored timestamp is timezone-aware UTC. SQLite hands
``DateTime(timezone=True)`` columns back naive, so values read from it
pass through ``ensure_tz_aware`` before they meet ``utc_now()`` in an
expiry comparison.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """The clock every ``expires_at <= now`` check reads."""
    return datetime.now(tz=timezone.utc)


def ensure_tz_aware(dt: datetime) -> datetime:
    """Tag a naive value read back from storage as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt
