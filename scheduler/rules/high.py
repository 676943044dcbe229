from datetime import date, timedelta
from typing import List
from core.hard_rules import HardRule, RelaxationTier
from core.state import ScheduleState
from schemas.schedule.generate import Employee
from utils.constants import (
    NIGHT_CODE,
    GENERIC_DAY_CODES,
    MAX_WEEKLY_HOURS,
    FULL_TIME_FTE,
    PART_TIME_FTE_MIN,
    PART_TIME_FTE_MAX,
)
from utils.date_utils import (
    FRIDAY,
    SATURDAY,
    friday_of,
    is_weekend,
    week_index,
    weekend_of,
)
from utils.shift_utils import shift_hours, trailing_week_hours, worked_on

"""
This module contains the eligibility rules a candidate must pass before being assigned a
shift, and the ordered relaxation tiers the assignment engine walks through.
"""


def counted_role(state: ScheduleState, emp: Employee, day: date, code: str) -> bool:
    """Supervisory roles are never picked to fill a target."""
    return emp.is_counted


def free_that_day(state: ScheduleState, emp: Employee, day: date, code: str) -> bool:
    return not emp.shifts.get(day)


def rested_after_night(state: ScheduleState, emp: Employee, day: date, code: str) -> bool:
    """
    A night shift on the previous day forces rest today, and a night shift
    is never placed before a day that already holds work (e.g. locked training).
    """
    if emp.shifts.get(day - timedelta(days=1)) == NIGHT_CODE:
        return False
    if code == NIGHT_CODE:
        return not worked_on(emp, day + timedelta(days=1), state.catalog)
    return True


def has_required_skill(state: ScheduleState, emp: Employee, day: date, code: str) -> bool:
    if code in GENERIC_DAY_CODES:
        return True
    definition = state.catalog.get(code)
    if definition is None or not definition.requiredSkill:
        return True
    return definition.requiredSkill in emp.skills


def accepts_night(state: ScheduleState, emp: Employee, day: date, code: str) -> bool:
    """Validated NO_NIGHT preferences keep the employee off the night code."""
    if code != NIGHT_CODE:
        return True
    return day not in state.no_night.get(emp.id, set())


def within_weekly_hours(state: ScheduleState, emp: Employee, day: date, code: str) -> bool:
    """Trailing 7-day hours, this shift included, must not exceed the weekly cap."""
    total = trailing_week_hours(emp, day, state.catalog) + shift_hours(code, state.catalog)
    return total <= MAX_WEEKLY_HOURS


def _worked_weekend(state: ScheduleState, emp: Employee, day: date) -> bool:
    """True if the employee works the weekend of the week containing `day`."""
    if state.equity[emp.id].last_weekend_week == week_index(day):
        return True
    return any(worked_on(emp, d, state.catalog) for d in weekend_of(day))


def _worked_friday_night(state: ScheduleState, emp: Employee, day: date) -> bool:
    """True if the employee works the night code on the Friday of the week containing `day`."""
    if state.equity[emp.id].last_friday_night_week == week_index(day):
        return True
    return emp.shifts.get(friday_of(day)) == NIGHT_CODE


def maternity_rotation(state: ScheduleState, emp: Employee, day: date, code: str) -> bool:
    """
    Maternity rotation exclusions:

    * full time (fte >= 1.0): no weekend shift if the previous week's weekend was worked;
    * 80% staff (0.75 <= fte < 0.9): no Friday night if that week's weekend is already
      worked, and no Saturday if that week's Friday night is already worked.
    """
    if state.config is None or not state.config.is_maternity:
        return True

    if emp.fte >= FULL_TIME_FTE:
        if is_weekend(day):
            return not _worked_weekend(state, emp, day - timedelta(days=7))
        return True

    if PART_TIME_FTE_MIN <= emp.fte < PART_TIME_FTE_MAX:
        weekday = day.weekday()
        if weekday == FRIDAY and code == NIGHT_CODE:
            return not _worked_weekend(state, emp, day)
        if weekday == SATURDAY:
            return not _worked_friday_night(state, emp, day)
    return True


BASE_RULES = [
    HardRule("Counted role", counted_role, "Supervisory roles do not fill staffing targets."),
    HardRule("Free that day", free_that_day, "Already assigned or absent that day."),
    HardRule("Rest after night", rested_after_night, "Night shift the day before, or work already set the day after a night."),
    HardRule("Required skill", has_required_skill, "Lacks the skill required by the shift."),
    HardRule("No night preference", accepts_night, "Validated no-night preference."),
]
ROTATION_RULE = HardRule(
    "Maternity rotation", maternity_rotation, "Breaks the maternity weekend rotation."
)
WEEKLY_HOURS_RULE = HardRule(
    "Max weekly hours",
    within_weekly_hours,
    f"Would exceed {MAX_WEEKLY_HOURS}h over the trailing 7 days.",
)


def define_relaxation_tiers() -> List[RelaxationTier]:
    """
    Return the candidate tiers, strictest first:

    * tier 2: base rules + maternity rotation + weekly hours cap;
    * tier 1: tier 2 without the weekly hours cap;
    * tier 0: tier 1 without the maternity rotation.
    """
    return [
        RelaxationTier(2, BASE_RULES + [ROTATION_RULE, WEEKLY_HOURS_RULE]),
        RelaxationTier(1, BASE_RULES + [ROTATION_RULE]),
        RelaxationTier(0, list(BASE_RULES)),
    ]
