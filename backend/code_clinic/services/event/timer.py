from datetime import datetime, timedelta, timezone
from typing import Optional

from code_clinic.models import EventState

_ONE_MS = timedelta(milliseconds=1)


def utc_now() -> datetime:
    """Current UTC instant at millisecond resolution."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def elapsed_ms(state: EventState, now: Optional[datetime] = None) -> int:
    """Milliseconds the event timer has been running.

    While paused the value is frozen at ``pause_time``; ``start_time`` is
    shifted on resume so that this stays correct across pause cycles.
    """
    if state.start_time is None:
        return 0
    if not state.timer_running:
        end = state.pause_time or state.start_time
    else:
        end = now or utc_now()
    return (end - state.start_time) // _ONE_MS
