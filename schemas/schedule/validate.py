from pydantic import BaseModel, ConfigDict, field_validator
from typing import List, Optional
import datetime as dt
from schemas.schedule.generate import Employee, ServiceConfig
from utils.date_utils import normalise_date


class ValidateRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    employees: List[Employee]
    startDate: dt.date
    numDays: int
    serviceConfig: Optional[ServiceConfig] = None

    @field_validator("startDate", mode="before")
    @classmethod
    def parse_start(cls, value):
        return normalise_date(value)
