import logging
from datetime import date
from typing import Dict, List, Optional
from core.hard_rules import RelaxationTier
from core.state import ScheduleState
from core.targets import resolve_targets
from exceptions.custom_errors import GenerationCancelledError
from schemas.schedule.generate import Employee
from scheduler.rules.high import define_relaxation_tiers
from scheduler.rules.low import rank_candidates
from utils.constants import (
    DEFAULT_OPEN_DAYS,
    LEGACY_TARGETS,
    NIGHT_CODE,
    SHIFT_PRIORITY,
    WEEKDAY_NAMES,
)
from utils.date_utils import FRIDAY, is_weekend, week_index
from utils.shift_utils import shift_hours

logger = logging.getLogger(__name__)


def open_days(state: ScheduleState) -> set:
    if state.config is not None and state.config.openDays is not None:
        return set(state.config.openDays)
    return set(DEFAULT_OPEN_DAYS)


def day_targets(state: ScheduleState, day: date) -> Dict[str, int]:
    """Configured targets for `day`, or the legacy weekday table when none resolve."""
    targets = resolve_targets(day, state.config)
    if not targets:
        targets = dict(LEGACY_TARGETS.get(day.weekday(), {}))
    return targets


def order_codes(targets: Dict[str, int]) -> List[str]:
    """
    Night code first (rest-after-night makes it the scarcest), then the fixed
    priority order, then any other configured code alphabetically.
    """
    ordered = [NIGHT_CODE] if NIGHT_CODE in targets else []
    ordered += [c for c in SHIFT_PRIORITY if c in targets and c not in ordered]
    ordered += sorted(c for c in targets if c not in ordered)
    return ordered


def count_assigned(employees: List[Employee], day: date, code: str) -> int:
    """Count counted staff on `code` for `day`."""
    return sum(1 for e in employees if e.is_counted and e.shifts.get(day) == code)


def commit(state: ScheduleState, emp: Employee, day: date, code: str) -> None:
    """Write the assignment into the working roster and update equity counters."""
    emp.shifts[day] = code
    stats = state.equity[emp.id]
    stats.total_hours += shift_hours(code, state.catalog)
    weekday = day.weekday()
    if is_weekend(day):
        stats.last_weekend_week = week_index(day)
    if weekday == FRIDAY and code == NIGHT_CODE:
        stats.last_friday_night_week = week_index(day)


def blocked_reasons(
    state: ScheduleState, tier: RelaxationTier, day: date, code: str
) -> Dict[str, str]:
    """Employee id -> name of the first rule of `tier` that keeps them off `code` on `day`."""
    reasons = {}
    for emp in state.employees:
        rule = tier.first_failure(state, emp, day, code)
        if rule is not None:
            reasons[emp.id] = rule.name
    return reasons


def fill_shift(
    state: ScheduleState,
    day: date,
    code: str,
    needed: int,
    tiers: Optional[List[RelaxationTier]] = None,
) -> int:
    """
    Assign up to `needed` employees to `code` on `day`, walking the tiers from
    strictest to loosest and stopping once the gap is closed.

    Returns how many employees were assigned.
    """
    tiers = tiers if tiers is not None else define_relaxation_tiers()
    assigned = 0

    for tier in tiers:
        gap = needed - assigned
        if gap <= 0:
            break

        candidates = [
            emp for emp in state.employees if tier.allows(state, emp, day, code)
        ]
        if not candidates:
            if logger.isEnabledFor(logging.DEBUG):
                reasons = blocked_reasons(state, tier, day, code)
                logger.debug(f"{day} {code}: no candidate at tier {tier.level}: {reasons}")
            continue

        ranked = rank_candidates(state, candidates, day)
        for score, emp in ranked[:gap]:
            commit(state, emp, day, code)
            assigned += 1
            logger.debug(
                f"{day} {code}: {emp.id} assigned at tier {tier.level} (score {score:.1f})"
            )

    return assigned


def assign_day(state: ScheduleState, day: date, tiers: List[RelaxationTier]) -> None:
    """Fill every target of `day` in priority order. Unfillable gaps stay open."""
    targets = day_targets(state, day)

    for code in order_codes(targets):
        needed = targets.get(code, 0)
        if needed <= 0:
            continue

        current = count_assigned(state.employees, day, code)
        if current >= needed:
            continue

        gap = needed - current
        filled = fill_shift(state, day, code, gap, tiers)
        if filled < gap:
            state.unfilled.append((day, code, gap - filled))
            logger.warning(
                f"⚠️ {WEEKDAY_NAMES[day.weekday()]} {day}: {code} short by {gap - filled} "
                f"({current + filled}/{needed})"
            )


def run_assignment(state: ScheduleState) -> None:
    """Walk the days chronologically and fill each open day's targets."""
    tiers = define_relaxation_tiers()
    opened = open_days(state)

    for day in state.dates:
        if state.should_cancel is not None and state.should_cancel():
            raise GenerationCancelledError(f"Generation cancelled before {day}.")
        if day.weekday() not in opened:
            continue
        assign_day(state, day, tiers)
