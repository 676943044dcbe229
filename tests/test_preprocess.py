from __future__ import annotations

import datetime

from scheduler.preprocess import apply_desiderata
from scheduler.rules.fixed import backfill_rest, default_code_for, rest_code_for
from schemas.schedule.generate import WorkPreference

MON = datetime.date(2025, 1, 6)
TUE = MON + datetime.timedelta(days=1)
WED = MON + datetime.timedelta(days=2)
SAT = MON + datetime.timedelta(days=5)
SUN = MON + datetime.timedelta(days=6)


def _pref(emp_id: str, start, end, pref_type: str = "NO_WORK", status: str = "VALIDATED", **extra) -> WorkPreference:
    return WorkPreference(employeeId=emp_id, startDate=start, endDate=end, type=pref_type, status=status, **extra)


def test_locked_codes_kept_and_others_cleared(make_employee, make_state) -> None:
    nurse = make_employee("n1", shifts={MON: "CA", TUE: "IT", WED: "FO"})
    state = make_state([nurse], MON, 7)

    apply_desiderata(state, [])

    assert nurse.shifts[MON] == "CA"
    assert nurse.shifts[WED] == "FO"
    assert TUE not in nurse.shifts


def test_counted_staff_rest_on_sunday(make_employee, make_state) -> None:
    nurse = make_employee("n1")
    state = make_state([nurse], MON, 7)

    apply_desiderata(state, [])

    assert nurse.shifts == {SUN: "RH"}


def test_supervisor_defaults_to_day_code_on_weekdays(make_employee, make_state) -> None:
    boss = make_employee("c1", role="Cadre")
    state = make_state([boss], MON, 7)

    apply_desiderata(state, [])

    weekdays = [MON + datetime.timedelta(days=i) for i in range(5)]
    assert all(boss.shifts[d] == "IT" for d in weekdays)
    assert SAT not in boss.shifts and SUN not in boss.shifts


def test_no_work_preference_uses_weekday_or_weekend_rest(make_employee, make_state) -> None:
    nurse = make_employee("n1", shifts={TUE: "MAL"})
    state = make_state([nurse], MON, 7)

    apply_desiderata(state, [_pref("n1", MON, SAT)])

    assert nurse.shifts[MON] == "NT"
    # locked absence wins over the preference
    assert nurse.shifts[TUE] == "MAL"
    assert nurse.shifts[SAT] == "RH"


def test_recurring_days_filter(make_employee, make_state) -> None:
    nurse = make_employee("n1")
    state = make_state([nurse], MON, 14)

    apply_desiderata(state, [_pref("n1", MON, MON + datetime.timedelta(days=13), recurringDays=[1])])

    rest_days = sorted(d for d, c in nurse.shifts.items() if c == "NT")
    assert rest_days == [TUE, TUE + datetime.timedelta(days=7)]


def test_unvalidated_preferences_are_ignored(make_employee, make_state) -> None:
    nurse = make_employee("n1")
    state = make_state([nurse], MON, 7)

    apply_desiderata(state, [_pref("n1", MON, SAT, status="PENDING")])

    assert MON not in nurse.shifts


def test_no_night_preferences_are_indexed(make_employee, make_state) -> None:
    nurse = make_employee("n1")
    state = make_state([nurse], MON, 7)

    apply_desiderata(state, [_pref("n1", MON, TUE, pref_type="NO_NIGHT")])

    assert state.no_night == {"n1": {MON, TUE}}
    # a no-night preference does not seed a rest code
    assert MON not in nurse.shifts


def test_rest_code_and_defaults(make_employee) -> None:
    assert rest_code_for(SAT) == "RH"
    assert rest_code_for(SUN) == "RH"
    assert rest_code_for(WED) == "NT"

    assert default_code_for(make_employee("n1"), WED) is None
    assert default_code_for(make_employee("c1", role="Directeur"), SAT) is None


def test_backfill_rest_fills_only_unset_days(make_employee) -> None:
    nurse = make_employee("n1", shifts={MON: "IT"})
    dates = [MON + datetime.timedelta(days=i) for i in range(7)]

    filled = backfill_rest([nurse], dates)

    assert filled == 6
    assert nurse.shifts[MON] == "IT"
    assert nurse.shifts[TUE] == "NT"
    assert nurse.shifts[SUN] == "RH"
