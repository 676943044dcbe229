from __future__ import annotations

import datetime

import pytest

from core.targets import is_parity_day, parity_targets, resolve_targets
from schemas.schedule.generate import ServiceConfig, SkillRequirement

# ISO week 3 of 2025 (odd) and ISO week 2 (even)
ODD_WEDNESDAY = datetime.date(2025, 1, 15)
ODD_FRIDAY = datetime.date(2025, 1, 17)
EVEN_WEDNESDAY = datetime.date(2025, 1, 8)
ODD_THURSDAY = datetime.date(2025, 1, 16)


@pytest.mark.parametrize(
    "day",
    [datetime.date(2025, 1, 6), ODD_WEDNESDAY, EVEN_WEDNESDAY, datetime.date(2024, 12, 29)],
)
def test_no_config_resolves_to_empty(day: datetime.date) -> None:
    assert resolve_targets(day) == {}
    assert resolve_targets(day, None) == {}


def test_skill_requirements_seed_targets() -> None:
    config = ServiceConfig(skillRequirements=[SkillRequirement(code="IT", minStaff=3), SkillRequirement(code="S", minStaff=1)])

    assert resolve_targets(datetime.date(2025, 1, 6), config) == {"IT": 3, "S": 1}


def test_parity_odd_week_wednesday_needs_two(maternity_config) -> None:
    targets = resolve_targets(ODD_WEDNESDAY, maternity_config)

    assert targets == {"CPF_J": 2, "CPF_N": 2}


def test_parity_odd_week_friday_needs_two(maternity_config) -> None:
    assert resolve_targets(ODD_FRIDAY, maternity_config) == {"CPF_J": 2, "CPF_N": 2}


def test_parity_even_week_needs_one(maternity_config) -> None:
    assert resolve_targets(EVEN_WEDNESDAY, maternity_config) == {"CPF_J": 1, "CPF_N": 1}


def test_parity_not_injected_on_other_days(maternity_config) -> None:
    assert resolve_targets(ODD_THURSDAY, maternity_config) == {}
    assert not is_parity_day(ODD_THURSDAY, maternity_config)


def test_parity_not_injected_in_plain_mode() -> None:
    config = ServiceConfig(fteConstraintMode="PLAIN")

    assert resolve_targets(ODD_WEDNESDAY, config) == {}
    assert parity_targets(ODD_WEDNESDAY, config) == {}


def test_manual_target_overrides_parity_default() -> None:
    config = ServiceConfig(
        fteConstraintMode="MATERNITY_STANDARD",
        shiftTargets={2: {"CPF_J": 5}},
    )

    targets = resolve_targets(ODD_WEDNESDAY, config)

    assert targets["CPF_J"] == 5
    assert targets["CPF_N"] == 2
    # the overridden code is no longer a parity-owned code
    assert parity_targets(ODD_WEDNESDAY, config) == {"CPF_N": 2}


def test_manual_target_overrides_skill_requirement() -> None:
    config = ServiceConfig(
        skillRequirements=[SkillRequirement(code="IT", minStaff=4)],
        shiftTargets={0: {"IT": 2, "S": 1}},
    )

    assert resolve_targets(datetime.date(2025, 1, 6), config) == {"IT": 2, "S": 1}
    # Tuesday has no manual entry
    assert resolve_targets(datetime.date(2025, 1, 7), config) == {"IT": 4}


def test_resolve_does_not_mutate_config() -> None:
    config = ServiceConfig(
        fteConstraintMode="MATERNITY_STANDARD",
        shiftTargets={2: {"IT": 3}},
    )
    before = config.model_dump()

    targets = resolve_targets(ODD_WEDNESDAY, config)
    targets["IT"] = 99

    assert config.model_dump() == before
