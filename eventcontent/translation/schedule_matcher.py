"""Resolve an event's schedule back to its key in the shared schedule mapping."""

from typing import Mapping, Optional

from ..errors import ScheduleMatchError
from ..schemas import Schedule


def schedules_match(candidate: Schedule, schedule: Schedule, language: str) -> bool:
    """Same timezone, same period count and identical start/end/label per period."""
    if (
        candidate.timezone_country != schedule.timezone_country
        or candidate.timezone_id != schedule.timezone_id
        or len(candidate.periods) != len(schedule.periods)
    ):
        return False
    return all(
        period.start == target.start
        and period.end == target.end
        and period.label.get(language) == target.label.get(language)
        for period, target in zip(candidate.periods, schedule.periods)
    )


def find_schedule_key(
    schedule: Schedule,
    schedules: Mapping[str, Schedule],
    language: str,
    slug: Optional[str] = None,
) -> str:
    """
    Return the first key (in mapping order) whose schedule structurally equals ``schedule``.

    Args:
        schedule: The event's schedule
        schedules: Shared schedule mapping the schedule must originate from
        language: Language whose labels take part in the comparison
        slug: Event slug, used only in the error message

    Raises:
        ScheduleMatchError: if no key matches
    """
    for key, candidate in schedules.items():
        if schedules_match(candidate, schedule, language):
            return key
    raise ScheduleMatchError(slug)
