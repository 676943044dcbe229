from datetime import date, timedelta
from typing import List, Tuple
from core.state import ScheduleState
from schemas.schedule.generate import Employee
from utils.constants import (
    SCORE_BASE,
    CONTINUITY_BONUS,
    NO_CONTINUITY_PENALTY,
    LONG_RUN_DAYS,
    LONG_RUN_PENALTY,
    HOURS_PENALTY,
    FTE_BONUS,
    SCORE_JITTER,
)
from utils.shift_utils import consecutive_days_worked, worked_on

"""
This module contains the soft, equity-weighted scoring used to rank eligible candidates.
"""


def score_candidate(state: ScheduleState, emp: Employee, day: date) -> float:
    """
    Rank an eligible candidate for a shift on `day`; higher is better.

    * continuity: working yesterday earns a bonus, a fresh start a small penalty;
    * long runs: already LONG_RUN_DAYS or more consecutive days is heavily penalised;
    * equity: every hour assigned so far in this run lowers the score;
    * FTE: higher FTE staff are preferred for full shifts;
    * a small seeded jitter breaks ties.
    """
    score = float(SCORE_BASE)

    if worked_on(emp, day - timedelta(days=1), state.catalog):
        score += CONTINUITY_BONUS
    else:
        score -= NO_CONTINUITY_PENALTY

    if consecutive_days_worked(emp, day, state.catalog) >= LONG_RUN_DAYS:
        score -= LONG_RUN_PENALTY

    score -= HOURS_PENALTY * state.equity[emp.id].total_hours
    score += FTE_BONUS * emp.fte
    score += state.rng.random() * SCORE_JITTER
    return score


def rank_candidates(
    state: ScheduleState, candidates: List[Employee], day: date
) -> List[Tuple[float, Employee]]:
    """Score candidates and sort them best first. Ties keep candidate order."""
    scored = [(score_candidate(state, emp, day), emp) for emp in candidates]
    scored.sort(key=lambda pair: pair[0], reverse=True)
    return scored
