from typing import List, Mapping, Optional, Sequence
from schemas.schedule.generate import Employee, ServiceConfig, ShiftDefinition, WorkPreference
from exceptions.custom_errors import (
    InputMismatchError,
    MissingIdentifierError,
    UnknownShiftCodeError,
)
from utils.shift_utils import unknown_codes


def validate_employees(employees: Sequence[Employee]) -> None:
    """
    Ensure every employee has a non-blank, unique id.

    Raises:
        MissingIdentifierError: If an id is blank or shared by two employees.
    """
    seen = set()
    for pos, emp in enumerate(employees):
        emp_id = (emp.id or "").strip()
        if not emp_id:
            raise MissingIdentifierError(
                f"Employee at position {pos} ({emp.name or 'unnamed'}) has no id."
            )
        if emp_id in seen:
            raise MissingIdentifierError(f"Duplicate employee id: {emp_id}")
        seen.add(emp_id)


def validate_shift_codes(
    employees: Sequence[Employee], catalog: Mapping[str, ShiftDefinition]
) -> None:
    """Raise UnknownShiftCodeError if any employee carries a code outside the catalog."""
    unknown = unknown_codes(employees, catalog)
    if unknown:
        details = [
            f"     • {emp_id}: {', '.join(sorted(codes))}"
            for emp_id, codes in sorted(unknown.items())
        ]
        raise UnknownShiftCodeError(
            "Unknown shift codes found:\n" + "\n".join(details)
        )


def validate_preferences(
    employees: Sequence[Employee],
    preferences: Sequence[WorkPreference],
    exact_match: bool = False,
) -> Optional[str]:
    """
    Validate that preferences reference known employees.

    If exact_match is True, preferences for unknown employees raise an error.
    Otherwise they are reported in the returned note and ignored downstream.

    Returns:
        Optional[str]: Note listing preferences for unknown employees, if any.

    Raises:
        MissingIdentifierError: If a preference has no employee id.
        InputMismatchError: If exact_match is True and unknown employee ids are found.
    """
    known = {emp.id for emp in employees}
    extra: List[str] = []
    for pref in preferences:
        emp_id = (pref.employeeId or "").strip()
        if not emp_id:
            raise MissingIdentifierError(
                f"Preference {pref.id or '(no id)'} has no employeeId."
            )
        if emp_id not in known:
            extra.append(emp_id)

    if not extra:
        return None

    msg = [f"⚠️ Preferences reference {len(set(extra))} unknown employee(s):\n"]
    msg.append(f"     • {', '.join(sorted(set(extra)))}\n")
    if exact_match:
        raise InputMismatchError("\n".join(msg))
    msg.append("They will be ignored for this run.\n")
    return "\n".join(msg)


def validate_config_codes(
    config: Optional[ServiceConfig], catalog: Mapping[str, ShiftDefinition]
) -> None:
    """Raise UnknownShiftCodeError if a target or skill requirement names a code outside the catalog."""
    if config is None:
        return
    unknown = sorted(config.target_codes - set(catalog))
    if unknown:
        raise UnknownShiftCodeError(
            f"Service configuration targets unknown shift codes: {', '.join(unknown)}"
        )
