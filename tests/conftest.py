from __future__ import annotations

import datetime
from random import Random

import pytest

from core.state import ScheduleState
from schemas.schedule.generate import Employee, ServiceConfig
from utils.date_utils import date_range
from utils.shift_utils import build_shift_catalog

ALL_SKILLS = {"S", "T5", "T6", "CPF"}


@pytest.fixture()
def catalog():
    return build_shift_catalog()


@pytest.fixture()
def make_employee():
    def _make(emp_id: str, role: str = "Infirmier", fte: float = 1.0, skills=None, shifts=None, **extra) -> Employee:
        return Employee(
            id=emp_id,
            name=f"Nurse {emp_id}",
            role=role,
            fte=fte,
            skills=set(ALL_SKILLS if skills is None else skills),
            shifts=dict(shifts or {}),
            **extra,
        )

    return _make


@pytest.fixture()
def make_state(catalog):
    def _make(employees, start: datetime.date, num_days: int, config: ServiceConfig | None = None, seed: int = 7) -> ScheduleState:
        return ScheduleState(
            employees=employees,
            dates=date_range(start, num_days),
            config=config,
            catalog=catalog,
            rng=Random(seed),
        )

    return _make


@pytest.fixture()
def maternity_config():
    return ServiceConfig(fteConstraintMode="MATERNITY_STANDARD")
