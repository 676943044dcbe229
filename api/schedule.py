from schemas.schedule.generate import GenerateRequest
from schemas.schedule.validate import ValidateRequest
from random import Random
from fastapi import APIRouter, HTTPException
from fastapi.encoders import jsonable_encoder
from scheduler.builder import generate_schedule
from scheduler.checker import check_constraints
from scheduler.extractor import (
    extract_changes,
    schedule_to_frame,
    staffing_counts,
    summarise_hours,
)
from utils.date_utils import month_bounds
from exceptions.custom_errors import *
from docs.schedule.roster import schedule_roster_description, validate_roster_description
from utils.logger import logger
import traceback
import os

router = APIRouter(prefix="/schedule", tags=["Roster"])

# default jitter seed when the request does not pin one; unset means random
ROSTER_SEED = os.getenv("ROSTER_SEED")


def _make_rng(seed):
    if seed is None and ROSTER_SEED:
        seed = int(ROSTER_SEED)
    return Random(seed)


# generate roster
@router.post(
    "/generate",
    response_model=dict,
    description=schedule_roster_description,
    summary="Generate Roster",
)
def generate_roster(request: GenerateRequest):
    try:
        if request.startDate is not None and request.numDays is not None:
            start_date, num_days = request.startDate, request.numDays
        else:
            start_date, num_days = month_bounds(request.year, request.month)

        logger.info(
            f"Generate request: {len(request.employees)} employees, "
            f"{start_date} + {num_days} days, {len(request.preferences)} preferences"
        )

        roster = generate_schedule(
            request.employees,
            start_date,
            num_days,
            service_config=request.serviceConfig,
            preferences=request.preferences,
            rng=_make_rng(request.seed),
        )
        violations = check_constraints(
            roster, start_date, num_days, service_config=request.serviceConfig
        )

        # ---- schedule ----
        sched_df = schedule_to_frame(roster, start_date, num_days).reset_index()

        # ---- summary ----
        sum_df = summarise_hours(roster, start_date, num_days).reset_index()

        # ==== final response ====
        response = {
            "employees": [emp.model_dump(mode="json") for emp in roster],
            "changes": extract_changes(request.employees, roster, start_date, num_days),
            "schedule": sched_df.to_dict(orient="records"),
            "summary": sum_df.to_dict(orient="records"),
            "violations": [v.model_dump(mode="json") for v in violations],
        }
        return jsonable_encoder(response)

    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))
    except Exception as e:
        tb = traceback.format_exc()
        raise HTTPException(status_code=500, detail=f"{str(e)}\n\nTraceback:\n{tb}")


# check roster
@router.post(
    "/validate",
    response_model=dict,
    description=validate_roster_description,
    summary="Check Roster",
)
def validate_roster(request: ValidateRequest):
    try:
        violations = check_constraints(
            request.employees,
            request.startDate,
            request.numDays,
            service_config=request.serviceConfig,
        )
        counts = staffing_counts(request.employees, request.startDate, request.numDays)
        counts.index = counts.index.map(lambda d: d.isoformat())

        response = {
            "violations": [v.model_dump(mode="json") for v in violations],
            "counts": counts.reset_index().to_dict(orient="records"),
        }
        return jsonable_encoder(response)

    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))
    except Exception as e:
        tb = traceback.format_exc()
        raise HTTPException(status_code=500, detail=f"{str(e)}\n\nTraceback:\n{tb}")
