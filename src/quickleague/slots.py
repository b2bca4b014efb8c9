"""Slot calendar: every (date, time) a game can be played in a season."""

from datetime import date, timedelta

from quickleague.models import DayOfWeek, Slot


def first_on_or_after(start: date, day: DayOfWeek) -> date:
    """First date on or after start that falls on the given weekday."""
    return start + timedelta(days=(day.value - start.weekday()) % 7)


def build_slots(days, time_slots, season_start: date | None,
                season_end: date | None) -> list[Slot]:
    """Build the chronological slot list for a weekly recurrence.

    Each configured weekday produces one slot per time slot every week,
    from its first occurrence on or after season_start through season_end
    (inclusive). Slots are sorted by date, then by time string, which
    assumes zero-padded 24-hour "HH:MM" times.

    An inverted range, or no days or time slots, gives an empty list.
    """
    if season_start is None or season_end is None:
        return []
    if not days or not time_slots or season_start > season_end:
        return []

    slots = []
    for day in dict.fromkeys(days):
        current = first_on_or_after(season_start, day)
        while current <= season_end:
            for t in time_slots:
                slots.append(Slot(current, t))
            current += timedelta(days=7)

    slots.sort()
    return slots
