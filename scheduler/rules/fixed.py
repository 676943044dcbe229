from datetime import date
from typing import Dict, Iterable, List, Optional, Set
from schemas.schedule.generate import Employee, WorkPreference
from utils.constants import (
    LOCKED_CODES,
    WEEKEND_REST_CODE,
    WEEKDAY_REST_CODE,
    SUPERVISOR_DEFAULT_CODE,
)
from utils.date_utils import is_weekend, SUNDAY, SATURDAY

"""
This module contains the rules for locked assignments, validated preferences and the
default rest codes used to seed and complete a roster.
"""

VALIDATED = "VALIDATED"
NO_WORK = "NO_WORK"
NO_NIGHT = "NO_NIGHT"


def is_locked(code: Optional[str]) -> bool:
    """Locked codes (leave, training, cycle rest, sickness...) survive regeneration."""
    return bool(code) and code in LOCKED_CODES


def rest_code_for(day: date) -> str:
    """Weekend days rest on the weekly-rest code, weekdays on the cycle non-worked code."""
    return WEEKEND_REST_CODE if is_weekend(day) else WEEKDAY_REST_CODE


def validated_preferences(
    preferences: Iterable[WorkPreference],
) -> Dict[str, List[WorkPreference]]:
    """Group VALIDATED preferences by employee id, keeping their input order."""
    by_employee: Dict[str, List[WorkPreference]] = {}
    for pref in preferences:
        if pref.status.strip().upper() != VALIDATED:
            continue
        by_employee.setdefault(pref.employeeId.strip(), []).append(pref)
    return by_employee


def first_matching_preference(
    prefs: Iterable[WorkPreference], day: date, pref_type: str
) -> Optional[WorkPreference]:
    for pref in prefs:
        if pref.type.strip().upper() == pref_type and pref.covers(day):
            return pref
    return None


def no_night_dates(
    prefs_by_employee: Dict[str, List[WorkPreference]], dates: Iterable[date]
) -> Dict[str, Set[date]]:
    """Employee id -> dates on which a validated no-night preference applies."""
    dates = list(dates)
    result: Dict[str, Set[date]] = {}
    for emp_id, prefs in prefs_by_employee.items():
        blocked = {d for d in dates if first_matching_preference(prefs, d, NO_NIGHT)}
        if blocked:
            result[emp_id] = blocked
    return result


def default_code_for(emp: Employee, day: date) -> Optional[str]:
    """
    Default seed for an unset day:

    * counted staff rest on Sundays (service closed);
    * supervisory roles take the generic day code Monday to Friday. Their
      presence never counts towards the staffing targets.
    """
    weekday = day.weekday()
    if emp.is_counted:
        return WEEKEND_REST_CODE if weekday == SUNDAY else None
    if weekday < SATURDAY:
        return SUPERVISOR_DEFAULT_CODE
    return None


def backfill_rest(employees: Iterable[Employee], dates: Iterable[date]) -> int:
    """Give every still-unset employee-day a rest code. Returns how many were filled."""
    dates = list(dates)
    filled = 0
    for emp in employees:
        for day in dates:
            if not emp.shifts.get(day):
                emp.shifts[day] = rest_code_for(day)
                filled += 1
    return filled
