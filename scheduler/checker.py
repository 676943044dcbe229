import logging
from datetime import date as dt_date
from typing import List, Mapping, Optional, Sequence
from core.constraint_manager import ConstraintManager
from core.state import CheckContext
from schemas.schedule.generate import ConstraintViolation, Employee, ServiceConfig, ShiftDefinition
from scheduler.rules.patterns import (
    max_hours_sweep,
    maternity_friday_night_sweep,
    maternity_weekend_sweep,
    rest_after_night_sweep,
    saturday_rotation_sweep,
    strict_consecutive_sweep,
    weekly_rest_sweep,
)
from scheduler.rules.staffing import daily_staffing_sweep
from utils.date_utils import date_range
from utils.shift_utils import build_shift_catalog
from utils.validate import validate_config_codes

logger = logging.getLogger(__name__)


def check_constraints(
    employees: Sequence[Employee],
    start_date: dt_date,
    num_days: int,
    service_config: Optional[ServiceConfig] = None,
    catalog: Optional[Mapping[str, ShiftDefinition]] = None,
) -> List[ConstraintViolation]:
    """
    Audit a roster and return its violations in discovery order
    (sweep, then employee, then date).

    Sweeps, in order: daily staffing, rolling 48h cap, rest after night,
    weekly rest, then either the plain-mode Saturday rotation or the
    maternity rules (strict consecutive days, weekend rotation, Friday night).

    Pure: the employees are never modified, and identical inputs give
    identical output. Raises InvalidDateRangeError for a non-positive day count
    and UnknownShiftCodeError for configured targets outside the catalog.
    """
    dates = date_range(start_date, num_days)
    catalog = catalog if catalog is not None else build_shift_catalog()
    validate_config_codes(service_config, catalog)
    if not employees:
        return []

    ctx = CheckContext(
        employees=list(employees),
        dates=dates,
        config=service_config,
        catalog=catalog,
    )
    maternity = service_config is not None and service_config.is_maternity

    manager = ConstraintManager(ctx)
    manager.add_rule(daily_staffing_sweep)
    manager.add_rule(max_hours_sweep)
    manager.add_rule(rest_after_night_sweep)
    manager.add_rule(weekly_rest_sweep)
    manager.add_rule(saturday_rotation_sweep, condition=not maternity)
    manager.add_rule(strict_consecutive_sweep, condition=maternity)
    manager.add_rule(maternity_weekend_sweep, condition=maternity)
    manager.add_rule(maternity_friday_night_sweep, condition=maternity)

    violations = manager.apply_all()
    errors = sum(1 for v in violations if v.severity == "error")
    logger.info(
        f"🔎 Checked {len(ctx.employees)} employees over {num_days} days: "
        f"{errors} errors, {len(violations) - errors} warnings."
    )
    return violations
