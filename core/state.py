from dataclasses import dataclass, field
from datetime import date
from random import Random
from typing import Callable, Dict, List, Mapping, Optional, Set
from schemas.schedule.generate import Employee, ServiceConfig, ShiftDefinition


@dataclass
class EquityStats:
    """
    Per-employee counters for one generation run. Created when the run starts
    and dropped when it returns; never persisted.
    """

    total_hours: float = 0.0
    """Hours assigned to the employee during this run."""
    last_weekend_week: Optional[int] = None
    """Week index of the last Saturday/Sunday assigned during this run."""
    last_friday_night_week: Optional[int] = None
    """Week index of the last Friday night-code assigned during this run."""


@dataclass
class ScheduleState:
    """
    A dataclass to hold all the state of a single generation run: the working
    copy of the roster, the inputs it is generated from and the equity counters.
    """

    employees: List[Employee]
    """Working copy of the (non-placeholder) employees, owned by this run."""
    dates: List[date]
    """Dates of the generation range in chronological order."""
    config: Optional[ServiceConfig]
    """Service configuration, or None for legacy defaults."""
    catalog: Mapping[str, ShiftDefinition]
    """Shift code catalog used for work flags, hours and required skills."""
    rng: Random
    """Random source for the scoring jitter. Seed it to pin the output."""

    equity: Dict[str, EquityStats] = field(default_factory=dict)
    """Equity counters keyed by employee id."""
    no_night: Dict[str, Set[date]] = field(default_factory=dict)
    """Dates on which an employee has a validated no-night preference."""
    unfilled: List[tuple] = field(default_factory=list)
    """(date, code, missing) gaps left open after all tiers were tried."""
    should_cancel: Optional[Callable[[], bool]] = None
    """Polled once per day; returning True aborts the run."""

    def __post_init__(self):
        for emp in self.employees:
            self.equity.setdefault(emp.id, EquityStats())

    @property
    def start_date(self) -> date:
        return self.dates[0]

    @property
    def num_days(self) -> int:
        return len(self.dates)


@dataclass
class CheckContext:
    """Read-only inputs shared by the checker sweeps."""

    employees: List[Employee]
    """Employees to audit. Never modified."""
    dates: List[date]
    """Dates of the audited range in chronological order."""
    config: Optional[ServiceConfig]
    """Service configuration, or None."""
    catalog: Mapping[str, ShiftDefinition]
    """Shift code catalog used for work flags and hours."""
