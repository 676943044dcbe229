from datetime import timedelta
from typing import List
from core.state import CheckContext
from schemas.schedule.generate import ConstraintViolation
from utils.constants import (
    DAYS_PER_WEEK,
    MAX_WEEKLY_HOURS,
    MIN_WEEKLY_REST_DAYS,
    STRICT_MAX_CONSECUTIVE_DAYS,
    SATURDAY_ROTATION_ROLES,
    NIGHT_CODE,
    FULL_TIME_FTE,
    PART_TIME_FTE_MIN,
    PART_TIME_FTE_MAX,
)
from utils.date_utils import FRIDAY, SATURDAY
from utils.shift_utils import is_work, shift_hours

"""
This module contains the individual pattern sweeps of the constraint checker. Every sweep
walks employees, then dates, and only looks at dates inside the audited range.
"""

MAX_HOURS = "MAX_HOURS"
REST_AFTER_NIGHT = "REST_AFTER_NIGHT"
WEEKLY_REST = "WEEKLY_REST"
WEEKEND_ROTATION = "WEEKEND_ROTATION"
FRIDAY_NIGHT_WEEKEND = "FRIDAY_NIGHT_WEEKEND"
CONSECUTIVE_DAYS = "CONSECUTIVE_DAYS"
SATURDAY_ROTATION = "SATURDAY_ROTATION"

# codes that mean "nothing planned" rather than rest
BLANK_CODES = {"OFF"}


def max_hours_sweep(ctx: CheckContext) -> List[ConstraintViolation]:
    """Every full 7-day window above MAX_WEEKLY_HOURS is an error dated at the window start."""
    violations: List[ConstraintViolation] = []
    windows = len(ctx.dates) - DAYS_PER_WEEK + 1

    for emp in ctx.employees:
        hours = [shift_hours(emp.shifts.get(d), ctx.catalog) for d in ctx.dates]
        for i in range(windows):
            total = sum(hours[i : i + DAYS_PER_WEEK])
            if total > MAX_WEEKLY_HOURS:
                violations.append(
                    ConstraintViolation(
                        employeeId=emp.id,
                        date=ctx.dates[i],
                        type=MAX_HOURS,
                        message=f"{emp.name or emp.id}: {total:g}h over 7 rolling days (max {MAX_WEEKLY_HOURS}h).",
                        severity="error",
                    )
                )
    return violations


def rest_after_night_sweep(ctx: CheckContext) -> List[ConstraintViolation]:
    """A night shift followed by a work shift is an error dated the second day."""
    violations: List[ConstraintViolation] = []
    for emp in ctx.employees:
        for day, next_day in zip(ctx.dates, ctx.dates[1:]):
            if emp.shifts.get(day) != NIGHT_CODE:
                continue
            next_code = emp.shifts.get(next_day)
            if is_work(next_code, ctx.catalog):
                violations.append(
                    ConstraintViolation(
                        employeeId=emp.id,
                        date=next_day,
                        type=REST_AFTER_NIGHT,
                        message=f"{emp.name or emp.id}: {NIGHT_CODE} followed by {next_code} (rest or absence required).",
                        severity="error",
                    )
                )
    return violations


def weekly_rest_sweep(ctx: CheckContext) -> List[ConstraintViolation]:
    """Counted staff need MIN_WEEKLY_REST_DAYS rest or absence days in every full 7-day window."""
    violations: List[ConstraintViolation] = []
    windows = len(ctx.dates) - DAYS_PER_WEEK + 1

    for emp in ctx.employees:
        if not emp.is_counted:
            continue
        rest = []
        for d in ctx.dates:
            code = emp.shifts.get(d)
            rest.append(
                bool(code) and code not in BLANK_CODES and not is_work(code, ctx.catalog)
            )
        for i in range(windows):
            rest_days = sum(rest[i : i + DAYS_PER_WEEK])
            if rest_days < MIN_WEEKLY_REST_DAYS:
                violations.append(
                    ConstraintViolation(
                        employeeId=emp.id,
                        date=ctx.dates[i],
                        type=WEEKLY_REST,
                        message=f"{emp.name or emp.id}: {rest_days} rest day(s) over 7 rolling days (min {MIN_WEEKLY_REST_DAYS}).",
                        severity="warning",
                    )
                )
    return violations


def _longest_run(flags) -> int:
    longest = run = 0
    for worked in flags:
        run = run + 1 if worked else 0
        longest = max(longest, run)
    return longest


def strict_consecutive_sweep(ctx: CheckContext) -> List[ConstraintViolation]:
    """
    Strict services allow at most STRICT_MAX_CONSECUTIVE_DAYS worked in a row.
    Every full 7-day window holding a longer run is an error dated at the window start.
    Supervisory roles are skipped.
    """
    violations: List[ConstraintViolation] = []
    windows = len(ctx.dates) - DAYS_PER_WEEK + 1

    for emp in ctx.employees:
        if not emp.is_counted:
            continue
        worked = [is_work(emp.shifts.get(d), ctx.catalog) for d in ctx.dates]
        for i in range(windows):
            longest = _longest_run(worked[i : i + DAYS_PER_WEEK])
            if longest > STRICT_MAX_CONSECUTIVE_DAYS:
                violations.append(
                    ConstraintViolation(
                        employeeId=emp.id,
                        date=ctx.dates[i],
                        type=CONSECUTIVE_DAYS,
                        message=f"{emp.name or emp.id}: {longest} consecutive days worked (max {STRICT_MAX_CONSECUTIVE_DAYS} in strict mode).",
                        severity="error",
                    )
                )
    return violations


def saturday_rotation_sweep(ctx: CheckContext) -> List[ConstraintViolation]:
    """Nurses and midwives working two Saturdays 7 days apart: warning on the second one."""
    violations: List[ConstraintViolation] = []
    in_range = set(ctx.dates)

    for emp in ctx.employees:
        if emp.role not in SATURDAY_ROTATION_ROLES:
            continue
        for day in ctx.dates:
            if day.weekday() != SATURDAY:
                continue
            previous = day - timedelta(days=7)
            if previous not in in_range:
                continue
            if is_work(emp.shifts.get(day), ctx.catalog) and is_work(
                emp.shifts.get(previous), ctx.catalog
            ):
                violations.append(
                    ConstraintViolation(
                        employeeId=emp.id,
                        date=day,
                        type=SATURDAY_ROTATION,
                        message=f"{emp.name or emp.id}: two consecutive Saturdays worked (target 1 in 2).",
                        severity="warning",
                    )
                )
    return violations


def maternity_weekend_sweep(ctx: CheckContext) -> List[ConstraintViolation]:
    """Full-time staff working two Saturdays 7 days apart: error on the second one."""
    violations: List[ConstraintViolation] = []
    in_range = set(ctx.dates)

    for emp in ctx.employees:
        if emp.fte < FULL_TIME_FTE:
            continue
        for day in ctx.dates:
            if day.weekday() != SATURDAY:
                continue
            following = day + timedelta(days=7)
            if following not in in_range:
                continue
            if is_work(emp.shifts.get(day), ctx.catalog) and is_work(
                emp.shifts.get(following), ctx.catalog
            ):
                violations.append(
                    ConstraintViolation(
                        employeeId=emp.id,
                        date=following,
                        type=WEEKEND_ROTATION,
                        message=f"{emp.name or emp.id} (maternity 100%): two consecutive weekends worked (target 1 in 2).",
                        severity="error",
                    )
                )
    return violations


def maternity_friday_night_sweep(ctx: CheckContext) -> List[ConstraintViolation]:
    """80% staff working Friday night and the next Saturday: error on the Friday."""
    violations: List[ConstraintViolation] = []
    in_range = set(ctx.dates)

    for emp in ctx.employees:
        if not (PART_TIME_FTE_MIN <= emp.fte < PART_TIME_FTE_MAX):
            continue
        for day in ctx.dates:
            if day.weekday() != FRIDAY or emp.shifts.get(day) != NIGHT_CODE:
                continue
            saturday = day + timedelta(days=1)
            if saturday in in_range and is_work(emp.shifts.get(saturday), ctx.catalog):
                violations.append(
                    ConstraintViolation(
                        employeeId=emp.id,
                        date=day,
                        type=FRIDAY_NIGHT_WEEKEND,
                        message=f"{emp.name or emp.id} (maternity 80%): Friday night and the following weekend both worked.",
                        severity="error",
                    )
                )
    return violations
