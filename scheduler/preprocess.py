import logging
from typing import Iterable
from core.state import ScheduleState
from schemas.schedule.generate import WorkPreference
from scheduler.rules.fixed import (
    NO_WORK,
    default_code_for,
    first_matching_preference,
    is_locked,
    no_night_dates,
    rest_code_for,
    validated_preferences,
)

logger = logging.getLogger(__name__)


def apply_desiderata(state: ScheduleState, preferences: Iterable[WorkPreference]) -> None:
    """
    Seed the working roster before assignment.

    For every date and every employee:
    1. clear any code that is not locked, so it can be regenerated;
    2. if the day is now unset, apply the first validated NO_WORK preference
       covering it (weekend -> weekly rest, weekday -> non-worked);
    3. default unset Sundays to weekly rest for counted staff;
    4. default unset weekdays to the generic day code for supervisory roles.

    No skill or eligibility check happens here. Validated NO_NIGHT preferences
    are indexed on the state for the assignment tiers.
    """
    prefs_by_employee = validated_preferences(preferences)
    cleared = kept = from_prefs = defaults = 0

    for day in state.dates:
        for emp in state.employees:
            existing = emp.shifts.get(day)

            if existing and not is_locked(existing):
                del emp.shifts[day]
                cleared += 1
            elif existing:
                kept += 1

            if not emp.shifts.get(day):
                pref = first_matching_preference(
                    prefs_by_employee.get(emp.id, []), day, NO_WORK
                )
                if pref is not None:
                    emp.shifts[day] = rest_code_for(day)
                    from_prefs += 1

            if not emp.shifts.get(day):
                code = default_code_for(emp, day)
                if code:
                    emp.shifts[day] = code
                    defaults += 1

    state.no_night = no_night_dates(prefs_by_employee, state.dates)

    logger.info(
        f"🧹 Desiderata applied: {cleared} cleared, {kept} locked kept, "
        f"{from_prefs} from preferences, {defaults} defaults."
    )
