import pandas as pd
import logging
from datetime import date as dt_date
from typing import Dict, List, Mapping, Optional, Sequence
from schemas.schedule.generate import Employee, ShiftDefinition
from utils.date_utils import date_range, format_day, is_weekend
from utils.constants import NIGHT_CODE
from utils.shift_utils import build_shift_catalog, is_work, shift_hours

logger = logging.getLogger(__name__)


def schedule_to_frame(
    employees: Sequence[Employee], start_date: dt_date, num_days: int
) -> pd.DataFrame:
    """
    Return the roster as a grid: one row per employee id, one column per date
    (labelled e.g. 'Mon 2025-07-07'), shift codes as values ('' when unset).
    """
    dates = date_range(start_date, num_days)
    headers = [format_day(d) for d in dates]
    rows = {emp.id: [emp.shifts.get(d, "") for d in dates] for emp in employees}
    df = pd.DataFrame.from_dict(rows, orient="index", columns=headers)
    df.index.name = "id"
    return df


def summarise_hours(
    employees: Sequence[Employee],
    start_date: dt_date,
    num_days: int,
    catalog: Optional[Mapping[str, ShiftDefinition]] = None,
) -> pd.DataFrame:
    """Per-employee totals over the range: worked days, hours, weekend days and night shifts."""
    catalog = catalog if catalog is not None else build_shift_catalog()
    dates = date_range(start_date, num_days)
    records = []
    for emp in employees:
        codes = [emp.shifts.get(d) for d in dates]
        worked = [(d, c) for d, c in zip(dates, codes) if is_work(c, catalog)]
        records.append(
            {
                "id": emp.id,
                "name": emp.name,
                "role": emp.role,
                "fte": emp.fte,
                "Work Days": len(worked),
                "Hours": sum(shift_hours(c, catalog) for _, c in worked),
                "Weekend Days": sum(1 for d, _ in worked if is_weekend(d)),
                "Night Shifts": sum(1 for _, c in worked if c == NIGHT_CODE),
            }
        )
    columns = ["id", "name", "role", "fte", "Work Days", "Hours", "Weekend Days", "Night Shifts"]
    return pd.DataFrame(records, columns=columns).set_index("id")


def staffing_counts(
    employees: Sequence[Employee], start_date: dt_date, num_days: int
) -> pd.DataFrame:
    """Counted staff per date (rows) and shift code (columns). Supervisory roles are left out."""
    dates = date_range(start_date, num_days)
    records = [
        {"date": d, "code": emp.shifts[d]}
        for emp in employees
        if emp.is_counted
        for d in dates
        if emp.shifts.get(d)
    ]
    if not records:
        return pd.DataFrame(index=pd.Index(dates, name="date"))
    df = pd.DataFrame(records)
    counts = pd.crosstab(df["date"], df["code"])
    counts = counts.reindex(dates, fill_value=0)
    counts.index.name = "date"
    counts.columns.name = None
    return counts.astype(int)


def extract_changes(
    before: Sequence[Employee],
    after: Sequence[Employee],
    start_date: dt_date,
    num_days: int,
) -> List[Dict]:
    """
    Compare two rosters over the range and list the cells that changed, in
    employee then date order. Employees missing from `after` (e.g. placeholders)
    are not reported.
    """
    dates = date_range(start_date, num_days)
    previous = {emp.id: emp for emp in before}
    changes = []
    for emp in after:
        old = previous.get(emp.id)
        old_shifts = old.shifts if old is not None else {}
        for d in dates:
            new_code = emp.shifts.get(d)
            old_code = old_shifts.get(d)
            if new_code != old_code:
                changes.append(
                    {"employeeId": emp.id, "date": d, "before": old_code, "after": new_code}
                )
    logger.info(f"{len(changes)} roster cells changed.")
    return changes
