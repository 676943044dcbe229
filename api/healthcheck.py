from fastapi import APIRouter
from utils.constants import SHIFT_TYPES

router = APIRouter(prefix="/health", tags=["Health Check"])


@router.get("/check", summary="Health Check")
def healthcheck():
    return {"status": "ok", "shiftCodes": len(SHIFT_TYPES)}
