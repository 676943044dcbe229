import json
from config.paths import CONSTANTS_PATH

from exceptions.custom_errors import FileContentError

"""
Loads roster constants from config/constants.json and exposes them as module-level variables.
Edit constants.json to change values; import from utils.constants to use in code.
"""

try:
    with open(CONSTANTS_PATH, "r", encoding="utf-8") as f:
        _constants = json.load(f)
except json.JSONDecodeError as e:
    raise FileContentError(f"Malformed constants file {CONSTANTS_PATH}: {e}") from e

try:
    # Shift catalog: code -> {isWork, duration, breakDuration, requiredSkill?}
    SHIFT_TYPES = _constants["SHIFT_TYPES"]
    LOCKED_CODES = frozenset(_constants["LOCKED_CODES"])
    NON_COUNTING_ROLES = frozenset(_constants["NON_COUNTING_ROLES"])

    NIGHT_CODE = _constants["NIGHT_CODE"]
    GENERIC_DAY_CODES = frozenset(_constants["GENERIC_DAY_CODES"])
    SUPERVISOR_DEFAULT_CODE = _constants["SUPERVISOR_DEFAULT_CODE"]
    SHIFT_PRIORITY = list(_constants["SHIFT_PRIORITY"])
    WEEKEND_REST_CODE = _constants["WEEKEND_REST_CODE"]
    WEEKDAY_REST_CODE = _constants["WEEKDAY_REST_CODE"]

    PARITY_CODES = tuple(_constants["PARITY_CODES"])
    PARITY_WEEKDAYS = frozenset(_constants["PARITY_WEEKDAYS"])
    PARITY_ODD_WEEK_STAFF = _constants["PARITY_ODD_WEEK_STAFF"]
    PARITY_EVEN_WEEK_STAFF = _constants["PARITY_EVEN_WEEK_STAFF"]

    DEFAULT_OPEN_DAYS = frozenset(_constants["DEFAULT_OPEN_DAYS"])
    # JSON keys are strings; weekdays follow date.weekday() (Mon=0 .. Sun=6)
    LEGACY_TARGETS = {
        int(weekday): dict(targets)
        for weekday, targets in _constants["LEGACY_TARGETS"].items()
    }

    DAYS_PER_WEEK = _constants["DAYS_PER_WEEK"]
    MAX_WEEKLY_HOURS = _constants["MAX_WEEKLY_HOURS"]
    MIN_WEEKLY_REST_DAYS = _constants["MIN_WEEKLY_REST_DAYS"]
    STRICT_MAX_CONSECUTIVE_DAYS = _constants["STRICT_MAX_CONSECUTIVE_DAYS"]
    SATURDAY_ROTATION_ROLES = frozenset(_constants["SATURDAY_ROTATION_ROLES"])

    FULL_TIME_FTE = _constants["FULL_TIME_FTE"]
    PART_TIME_FTE_MIN = _constants["PART_TIME_FTE_MIN"]
    PART_TIME_FTE_MAX = _constants["PART_TIME_FTE_MAX"]

    SCORE_BASE = _constants["SCORE_BASE"]
    CONTINUITY_BONUS = _constants["CONTINUITY_BONUS"]
    NO_CONTINUITY_PENALTY = _constants["NO_CONTINUITY_PENALTY"]
    LONG_RUN_DAYS = _constants["LONG_RUN_DAYS"]
    LONG_RUN_PENALTY = _constants["LONG_RUN_PENALTY"]
    HOURS_PENALTY = _constants["HOURS_PENALTY"]
    FTE_BONUS = _constants["FTE_BONUS"]
    SCORE_JITTER = _constants["SCORE_JITTER"]
except KeyError as e:
    raise FileContentError(f"Missing key {e} in {CONSTANTS_PATH}") from e

WEEKDAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
ALL_EMPLOYEES = "ALL"
