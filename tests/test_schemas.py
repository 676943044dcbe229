from __future__ import annotations

import datetime

import pytest
from pydantic import ValidationError

from schemas.schedule.generate import Employee, GenerateRequest, ServiceConfig, SkillRequirement, WorkPreference
from schemas.schedule.validate import ValidateRequest

MON = datetime.date(2025, 7, 7)


def test_shift_dates_accept_grid_labels() -> None:
    emp = Employee(id="n1", shifts={"Mon 2025-07-07": "it", "2025/07/08": "S"})

    assert emp.shifts == {MON: "IT", MON + datetime.timedelta(days=1): "S"}


def test_unparseable_shift_date_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Employee(id="n1", shifts={"someday": "IT"})


def test_preference_dates_are_normalised() -> None:
    pref = WorkPreference(employeeId="n1", startDate="Mon 2025-07-07", endDate="20250709")

    assert pref.startDate == MON
    assert pref.endDate == MON + datetime.timedelta(days=2)


def test_request_start_dates_are_normalised() -> None:
    generate = GenerateRequest(employees=[], startDate="2025/07/07", numDays=7)
    validate = ValidateRequest(employees=[], startDate="Mon 2025-07-07", numDays=7)

    assert generate.startDate == MON
    assert validate.startDate == MON


def test_month_request_has_no_start_date() -> None:
    assert GenerateRequest(employees=[], year=2025, month=7).startDate is None


def test_target_codes_are_upper_cased() -> None:
    config = ServiceConfig(
        skillRequirements=[SkillRequirement(code=" s ", minStaff=1)],
        shiftTargets={0: {"it": 2, "Cpf_J": 1}},
    )

    assert config.skillRequirements[0].code == "S"
    assert config.shiftTargets == {0: {"IT": 2, "CPF_J": 1}}
    assert config.target_codes == {"S", "IT", "CPF_J"}


def test_target_codes_clashing_after_upper_case_are_rejected() -> None:
    with pytest.raises(ValidationError):
        ServiceConfig(shiftTargets={0: {"it": 1, "IT": 2}})
