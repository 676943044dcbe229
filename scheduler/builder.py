import logging
import time
from datetime import date as dt_date
from random import Random
from typing import Callable, Iterable, List, Mapping, Optional, Union
from core.state import ScheduleState
from schemas.schedule.generate import Employee, ServiceConfig, ShiftDefinition, WorkPreference
from scheduler.preprocess import apply_desiderata
from scheduler.rules.fixed import backfill_rest
from scheduler.solver import run_assignment
from utils.date_utils import date_range, month_bounds
from utils.shift_utils import build_shift_catalog
from utils.validate import (
    validate_config_codes,
    validate_employees,
    validate_preferences,
    validate_shift_codes,
)

logger = logging.getLogger(__name__)

PreferenceSource = Union[Iterable[WorkPreference], Callable[[], Iterable[WorkPreference]]]


def load_preferences(source: Optional[PreferenceSource]) -> List[WorkPreference]:
    """
    Resolve the preference input. A callable is invoked to fetch them; if the
    fetch fails the run continues without preferences.
    """
    if source is None:
        return []
    if callable(source):
        try:
            return list(source())
        except Exception as e:
            logger.warning(f"⚠️ Could not fetch preferences, continuing without them: {e}")
            return []
    return list(source)


# == Build Schedule ==
def generate_schedule(
    employees: List[Employee],
    start_date: dt_date,
    num_days: int,
    service_config: Optional[ServiceConfig] = None,
    preferences: Optional[PreferenceSource] = None,
    catalog: Optional[Mapping[str, ShiftDefinition]] = None,
    rng: Optional[Random] = None,
    should_cancel: Optional[Callable[[], bool]] = None,
) -> List[Employee]:
    """
    Generate a roster for `num_days` days from `start_date`.

    Works on a deep copy of the (non-placeholder) employees: non-locked codes in the
    range are cleared, validated preferences and defaults are seeded, each open day's
    targets are filled greedily through the relaxation tiers, and remaining days get
    a rest code. Gaps that no candidate can fill are left open; run the checker to
    report them.

    Returns the updated copy of the employees. Callers persist the deltas they need
    (see scheduler.extractor.extract_changes).
    """
    dates = date_range(start_date, num_days)
    catalog = catalog if catalog is not None else build_shift_catalog()

    # === Validate inputs ===
    validate_employees(employees)
    validate_shift_codes(employees, catalog)
    validate_config_codes(service_config, catalog)
    prefs = load_preferences(preferences)
    note = validate_preferences(employees, prefs, exact_match=False)
    if note:
        logger.info(note)
    prefs = [p for p in prefs if p.status.strip().upper() == "VALIDATED"]

    working = [emp.model_copy(deep=True) for emp in employees if not emp.isPlaceholder]
    state = ScheduleState(
        employees=working,
        dates=dates,
        config=service_config,
        catalog=catalog,
        rng=rng if rng is not None else Random(),
        should_cancel=should_cancel,
    )

    logger.info(
        f"📋 Generating roster {dates[0]} → {dates[-1]} for {len(working)} employees "
        f"({len(prefs)} validated preferences)..."
    )
    t0 = time.perf_counter()

    # === Phase 1: locked codes, desiderata, defaults ===
    apply_desiderata(state, prefs)

    # === Phase 2: daily assignment loop ===
    run_assignment(state)

    # === Phase 3: fill holes with rest codes ===
    filled = backfill_rest(state.employees, state.dates)

    logger.info(f"🛌 {filled} unset days filled with rest codes.")
    if state.unfilled:
        missing = sum(gap for _, _, gap in state.unfilled)
        logger.warning(
            f"⚠️ {len(state.unfilled)} shift targets left short ({missing} staff missing)."
        )
    else:
        logger.info("✅ All staffing targets filled.")
    logger.info(f"⏱ Generation time: {time.perf_counter() - t0:.2f} seconds")

    return state.employees


def generate_monthly_schedule(
    employees: List[Employee],
    year: int,
    month: int,
    service_config: Optional[ServiceConfig] = None,
    preferences: Optional[PreferenceSource] = None,
    catalog: Optional[Mapping[str, ShiftDefinition]] = None,
    rng: Optional[Random] = None,
    should_cancel: Optional[Callable[[], bool]] = None,
) -> List[Employee]:
    """Generate the roster for a whole calendar month (`month` is 1-12)."""
    start_date, num_days = month_bounds(year, month)
    return generate_schedule(
        employees,
        start_date,
        num_days,
        service_config=service_config,
        preferences=preferences,
        catalog=catalog,
        rng=rng,
        should_cancel=should_cancel,
    )
