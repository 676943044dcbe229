from pydantic import BaseModel, model_validator, field_validator, Field, ConfigDict
from typing import Dict, List, Literal, Optional, Set
import datetime as dt
from utils.constants import NON_COUNTING_ROLES
from utils.date_utils import normalise_date


def _normalise_code(code) -> str:
    return str(code).strip().upper()


# Define data models
class Employee(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    name: str = ""
    role: str = "Infirmier"
    fte: float = Field(default=1.0, ge=0.0, le=1.0)
    skills: Set[str] = Field(default_factory=set)
    shifts: Dict[dt.date, str] = Field(default_factory=dict)
    # interim identities the caller manages itself; never part of a generated roster
    isPlaceholder: bool = False

    @field_validator("shifts", mode="before")
    @classmethod
    def normalise_codes(cls, value):
        """
        Strip and upper-case shift codes and drop blank cells (e.g. empty CSV columns).
        Dates may be given as grid labels such as 'Mon 2025-07-07'.
        """
        if not isinstance(value, dict):
            return value
        return {
            normalise_date(day): _normalise_code(code)
            for day, code in value.items()
            if code is not None and str(code).strip()
        }

    @property
    def is_counted(self) -> bool:
        """Supervisory and administrative roles never count towards staffing targets."""
        return self.role not in NON_COUNTING_ROLES


class ShiftDefinition(BaseModel):
    model_config = ConfigDict(extra="allow")

    code: str
    isWork: bool
    duration: float = 0.0
    breakDuration: float = 0.0
    requiredSkill: Optional[str] = None
    description: str = ""

    @property
    def hours(self) -> float:
        """Nominal paid hours: duration minus break, never negative."""
        return max(0.0, self.duration - self.breakDuration)


class SkillRequirement(BaseModel):
    model_config = ConfigDict(extra="allow")

    code: str
    minStaff: int = Field(default=0, ge=0)

    @field_validator("code")
    @classmethod
    def normalise_code(cls, value: str) -> str:
        return _normalise_code(value)


class ServiceConfig(BaseModel):
    model_config = ConfigDict(extra="allow")

    # weekday numbers as date.weekday(): Mon=0 .. Sun=6; None means "not configured"
    openDays: Optional[Set[int]] = None
    skillRequirements: List[SkillRequirement] = Field(default_factory=list)
    shiftTargets: Dict[int, Dict[str, int]] = Field(default_factory=dict)
    fteConstraintMode: Literal["PLAIN", "MATERNITY_STANDARD"] = "PLAIN"

    @field_validator("openDays")
    @classmethod
    def check_weekdays(cls, value):
        if value is not None and any(d < 0 or d > 6 for d in value):
            raise ValueError("openDays must contain weekday numbers between 0 (Mon) and 6 (Sun).")
        return value

    @field_validator("shiftTargets")
    @classmethod
    def normalise_target_codes(cls, value):
        """Upper-case target codes so they match the catalog and employee shifts."""
        normalised = {}
        for weekday, targets in value.items():
            day_targets = {}
            for code, count in targets.items():
                key = _normalise_code(code)
                if key in day_targets:
                    raise ValueError(f"shiftTargets[{weekday}] lists {key} twice.")
                day_targets[key] = count
            normalised[weekday] = day_targets
        return normalised

    @model_validator(mode="after")
    def check_targets(self) -> "ServiceConfig":
        for weekday, targets in self.shiftTargets.items():
            if weekday < 0 or weekday > 6:
                raise ValueError(f"shiftTargets key {weekday} is not a weekday (0-6).")
            for code, count in targets.items():
                if count < 0:
                    raise ValueError(
                        f"shiftTargets[{weekday}][{code}] must be non-negative, got {count}."
                    )
        return self

    @property
    def is_maternity(self) -> bool:
        return self.fteConstraintMode == "MATERNITY_STANDARD"

    @property
    def target_codes(self) -> Set[str]:
        """Every shift code named by a skill requirement or a manual target."""
        codes = {req.code for req in self.skillRequirements}
        for targets in self.shiftTargets.values():
            codes.update(targets)
        return codes


class WorkPreference(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    employeeId: str
    startDate: dt.date
    endDate: dt.date
    recurringDays: Optional[List[int]] = None
    type: str = "NO_WORK"
    status: str = "PENDING"

    @field_validator("startDate", "endDate", mode="before")
    @classmethod
    def parse_dates(cls, value):
        return normalise_date(value)

    @model_validator(mode="after")
    def check_range(self) -> "WorkPreference":
        if self.endDate < self.startDate:
            raise ValueError(
                f"Preference {self.id or ''} ends ({self.endDate}) before it starts ({self.startDate})."
            )
        return self

    def covers(self, day: dt.date) -> bool:
        """True if the preference applies on `day`, honouring the recurring-weekday filter."""
        if not (self.startDate <= day <= self.endDate):
            return False
        if self.recurringDays and day.weekday() not in self.recurringDays:
            return False
        return True


class ConstraintViolation(BaseModel):
    model_config = ConfigDict(extra="allow")

    employeeId: str
    date: dt.date
    type: str
    message: str
    severity: Literal["warning", "error"]


class GenerateRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    employees: List[Employee]
    startDate: Optional[dt.date] = None
    numDays: Optional[int] = None
    year: Optional[int] = None
    month: Optional[int] = Field(default=None, ge=1, le=12)
    serviceConfig: Optional[ServiceConfig] = None
    preferences: List[WorkPreference] = Field(default_factory=list)
    seed: Optional[int] = None

    @field_validator("startDate", mode="before")
    @classmethod
    def parse_start(cls, value):
        return None if value is None else normalise_date(value)

    @model_validator(mode="after")
    def check_period(self) -> "GenerateRequest":
        has_range = self.startDate is not None and self.numDays is not None
        has_month = self.year is not None and self.month is not None
        if not (has_range or has_month):
            raise ValueError("Either startDate and numDays, or year and month, are required.")
        return self
