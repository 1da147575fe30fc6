"""
Resolves the user's temporal context from an instant.
"""

from datetime import datetime

from taskflow.core.models import FocusLevel, TimeOfDay, UserContext

MORNING_START = 5
AFTERNOON_START = 12
EVENING_START = 17
NIGHT_START = 21


def time_of_day_for(now: datetime) -> TimeOfDay:
    """Bucket the hour of an instant (in its own timezone)"""
    hour = now.hour

    if MORNING_START <= hour < AFTERNOON_START:
        return TimeOfDay.MORNING
    elif AFTERNOON_START <= hour < EVENING_START:
        return TimeOfDay.AFTERNOON
    elif EVENING_START <= hour < NIGHT_START:
        return TimeOfDay.EVENING
    else:
        return TimeOfDay.NIGHT


def resolve_context(now: datetime) -> UserContext:
    """
    Build the user context for an instant.

    Focus is high in the morning and medium otherwise; LOW is never produced
    here.
    """
    time_of_day = time_of_day_for(now)
    focus = FocusLevel.HIGH if time_of_day == TimeOfDay.MORNING else FocusLevel.MEDIUM
    return UserContext(now=now, time_of_day=time_of_day, focus_level=focus)
