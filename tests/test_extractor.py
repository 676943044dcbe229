from __future__ import annotations

import datetime

from scheduler.extractor import extract_changes, schedule_to_frame, staffing_counts, summarise_hours

MON = datetime.date(2025, 7, 7)
TUE = MON + datetime.timedelta(days=1)
SAT = MON + datetime.timedelta(days=5)


def _ward(make_employee):
    return [
        make_employee("n1", shifts={MON: "IT", TUE: "S", SAT: "IT"}),
        make_employee("n2", shifts={MON: "CA"}),
        make_employee("c1", role="Cadre", shifts={MON: "IT", TUE: "IT"}),
    ]


def test_schedule_grid(make_employee) -> None:
    df = schedule_to_frame(_ward(make_employee), MON, 7)

    assert list(df.index) == ["n1", "n2", "c1"]
    assert df.columns[0] == "Mon 2025-07-07"
    assert df.loc["n1", "Tue 2025-07-08"] == "S"
    assert df.loc["n2", "Tue 2025-07-08"] == ""


def test_hours_summary(make_employee) -> None:
    df = summarise_hours(_ward(make_employee), MON, 7)

    nurse = df.loc["n1"]
    assert nurse["Work Days"] == 3
    assert nurse["Hours"] == 11.5 + 6 + 11.5
    assert nurse["Weekend Days"] == 1
    assert nurse["Night Shifts"] == 1
    assert df.loc["n2", "Hours"] == 0


def test_staffing_counts_leave_out_supervisors(make_employee) -> None:
    counts = staffing_counts(_ward(make_employee), MON, 7)

    assert len(counts) == 7
    assert counts.loc[MON, "IT"] == 1
    assert counts.loc[MON, "CA"] == 1
    assert counts.loc[TUE, "IT"] == 0
    assert counts.loc[TUE, "S"] == 1


def test_staffing_counts_empty_roster(make_employee) -> None:
    counts = staffing_counts([make_employee("n1")], MON, 3)

    assert list(counts.index) == [MON, TUE, MON + datetime.timedelta(days=2)]
    assert counts.empty


def test_extract_changes_lists_changed_cells(make_employee) -> None:
    before = _ward(make_employee)
    after = [emp.model_copy(deep=True) for emp in before]
    after[0].shifts[TUE] = "RH"
    after[1].shifts[TUE] = "NT"
    after[2].shifts[MON + datetime.timedelta(days=20)] = "IT"  # outside the range

    changes = extract_changes(before, after, MON, 7)

    assert changes == [
        {"employeeId": "n1", "date": TUE, "before": "S", "after": "RH"},
        {"employeeId": "n2", "date": TUE, "before": None, "after": "NT"},
    ]
