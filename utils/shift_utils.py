from datetime import timedelta, date as dt_date
from typing import Dict, Iterable, Mapping, Optional
from schemas.schedule.generate import Employee, ShiftDefinition
from utils.constants import SHIFT_TYPES, DAYS_PER_WEEK


def build_shift_catalog(
    raw: Optional[Mapping[str, dict]] = None,
) -> Dict[str, ShiftDefinition]:
    """
    Build the shift catalog (code -> ShiftDefinition) from raw definitions.

    Falls back to the static catalog in config/constants.json when `raw` is None.
    Codes are upper-cased so lookups match normalised employee shift maps.
    """
    raw = SHIFT_TYPES if raw is None else raw
    catalog: Dict[str, ShiftDefinition] = {}
    for code, definition in raw.items():
        key = str(code).strip().upper()
        if key in catalog:
            raise ValueError(f"Duplicate shift code: {key}")
        catalog[key] = ShiftDefinition(code=key, **definition)
    return catalog


def is_work(code: Optional[str], catalog: Mapping[str, ShiftDefinition]) -> bool:
    """True if `code` is a known work shift. Unset and unknown codes are not work."""
    if not code:
        return False
    definition = catalog.get(code)
    return bool(definition and definition.isWork)


def shift_hours(code: Optional[str], catalog: Mapping[str, ShiftDefinition]) -> float:
    """Nominal work hours of `code`; rest, absence and unknown codes count 0."""
    if not code:
        return 0.0
    definition = catalog.get(code)
    if definition is None or not definition.isWork:
        return 0.0
    return definition.hours


def worked_on(
    emp: Employee, day: dt_date, catalog: Mapping[str, ShiftDefinition]
) -> bool:
    return is_work(emp.shifts.get(day), catalog)


def hours_between(
    emp: Employee,
    start: dt_date,
    num_days: int,
    catalog: Mapping[str, ShiftDefinition],
) -> float:
    """Sum of nominal hours over `num_days` consecutive dates from `start`."""
    return sum(
        shift_hours(emp.shifts.get(start + timedelta(days=i)), catalog)
        for i in range(num_days)
    )


def trailing_week_hours(
    emp: Employee, day: dt_date, catalog: Mapping[str, ShiftDefinition]
) -> float:
    """Hours in the 7-day window ending on `day` (the day itself plus the 6 before it)."""
    return hours_between(
        emp, day - timedelta(days=DAYS_PER_WEEK - 1), DAYS_PER_WEEK, catalog
    )


def consecutive_days_worked(
    emp: Employee, day: dt_date, catalog: Mapping[str, ShiftDefinition]
) -> int:
    """Length of the run of worked days ending the day before `day`."""
    run = 0
    cursor = day - timedelta(days=1)
    while worked_on(emp, cursor, catalog):
        run += 1
        cursor -= timedelta(days=1)
    return run


def unknown_codes(
    employees: Iterable[Employee], catalog: Mapping[str, ShiftDefinition]
) -> Dict[str, set]:
    """Return employee id -> set of shift codes not present in the catalog."""
    unknown: Dict[str, set] = {}
    for emp in employees:
        bad = {code for code in emp.shifts.values() if code not in catalog}
        if bad:
            unknown[emp.id] = bad
    return unknown
