from datetime import date as dt_date
from typing import Dict, Optional
from schemas.schedule.generate import ServiceConfig
from utils.constants import (
    PARITY_CODES,
    PARITY_WEEKDAYS,
    PARITY_ODD_WEEK_STAFF,
    PARITY_EVEN_WEEK_STAFF,
)
from utils.date_utils import is_odd_iso_week

"""
Daily staffing targets: shift code -> minimum headcount for a given date.
"""


def is_parity_day(day: dt_date, config: Optional[ServiceConfig]) -> bool:
    """True on the weekdays where the maternity parity rule applies."""
    return bool(config and config.is_maternity and day.weekday() in PARITY_WEEKDAYS)


def parity_targets(day: dt_date, config: Optional[ServiceConfig]) -> Dict[str, int]:
    """
    Return the parity-linked codes injected for `day`, with their headcount.

    Odd ISO weeks need PARITY_ODD_WEEK_STAFF on each parity code, even weeks
    PARITY_EVEN_WEEK_STAFF. A code with a manual shiftTargets entry for the
    weekday is left out: the manual entry owns it.
    """
    if not is_parity_day(day, config):
        return {}
    count = PARITY_ODD_WEEK_STAFF if is_odd_iso_week(day) else PARITY_EVEN_WEEK_STAFF
    manual = config.shiftTargets.get(day.weekday(), {})
    return {code: count for code in PARITY_CODES if code not in manual}


def resolve_targets(day: dt_date, config: Optional[ServiceConfig] = None) -> Dict[str, int]:
    """
    Compute the minimum staffing per shift code for `day`.

    1. seed from the service's skill requirements (minStaff per code);
    2. in maternity mode on parity days, inject the parity codes;
    3. apply shiftTargets[weekday] last, manual entries always win.

    Without a config the result is empty. Never mutates `config`.
    """
    if config is None:
        return {}

    targets: Dict[str, int] = {}
    for requirement in config.skillRequirements:
        targets[requirement.code] = requirement.minStaff

    targets.update(parity_targets(day, config))
    targets.update(config.shiftTargets.get(day.weekday(), {}))
    return targets
