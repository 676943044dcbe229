from typing import List
from core.state import CheckContext
from core.targets import parity_targets, resolve_targets
from schemas.schedule.generate import ConstraintViolation
from utils.constants import ALL_EMPLOYEES
from utils.date_utils import is_odd_iso_week
from utils.shift_utils import is_work

"""
This module contains the service-wide staffing sweep of the constraint checker.
"""

UNDERSTAFFED = "UNDERSTAFFED"
PARITY_SHORTFALL = "PARITY_SHORTFALL"
CLOSED_DAY_WORK = "CLOSED_DAY_WORK"


def daily_staffing_sweep(ctx: CheckContext) -> List[ConstraintViolation]:
    """
    For each date, compare headcount per shift code with the resolved targets.

    * On a day the service is configured closed, any work code is an error.
    * In maternity mode on parity days, a parity code below its odd/even-week
      count gets a dedicated violation; that code is then skipped by the generic
      check. Parity codes owned by a manual override go through the generic check.
    * Any other target not met is a warning.
    """
    violations: List[ConstraintViolation] = []
    opened = None
    if ctx.config is not None and ctx.config.openDays is not None:
        opened = ctx.config.openDays

    for day in ctx.dates:
        if opened is not None and day.weekday() not in opened:
            for emp in ctx.employees:
                code = emp.shifts.get(day)
                if is_work(code, ctx.catalog):
                    violations.append(
                        ConstraintViolation(
                            employeeId=emp.id,
                            date=day,
                            type=CLOSED_DAY_WORK,
                            message=f"{emp.name or emp.id}: works {code} while the service is closed.",
                            severity="error",
                        )
                    )
            continue

        counts = {}
        for emp in ctx.employees:
            code = emp.shifts.get(day)
            if code and emp.is_counted:
                counts[code] = counts.get(code, 0) + 1

        parity = parity_targets(day, ctx.config)
        if parity:
            week_kind = "odd" if is_odd_iso_week(day) else "even"
            for code, needed in parity.items():
                have = counts.get(code, 0)
                if have < needed:
                    violations.append(
                        ConstraintViolation(
                            employeeId=ALL_EMPLOYEES,
                            date=day,
                            type=PARITY_SHORTFALL,
                            message=f"{code}: {have}/{needed} staff required in {week_kind} ISO week.",
                            severity="error",
                        )
                    )

        for code, needed in resolve_targets(day, ctx.config).items():
            if code in parity:
                continue
            have = counts.get(code, 0)
            if have < needed:
                violations.append(
                    ConstraintViolation(
                        employeeId=ALL_EMPLOYEES,
                        date=day,
                        type=UNDERSTAFFED,
                        message=f"Missing staff on {code} ({have}/{needed}).",
                        severity="warning",
                    )
                )

    return violations
