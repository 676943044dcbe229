schedule_roster_description = """
Generate a roster for a date range or a calendar month, then check it.

### Request Body

- `employees`: List of `Employee` objects:
    - `id`: Primary key of the employee (required)

    - `name`: Display name
    - `role`: Job title (e.g. "Infirmier", "Aide-Soignant"). Supervisory roles ("Cadre", "Directeur", ...) never count towards targets
    - `fte`: Full-time equivalent between 0 and 1
    - `skills`: List of skill codes (e.g. "S", "T5", "CPF")
    - `shifts`: Mapping `YYYY-MM-DD` -> shift code. Locked codes (CA, FO, RC, MAL, ...) are kept, other codes in range are regenerated
    - `isPlaceholder`: Interim placeholder managed by the caller; left out of the generated roster

- `startDate` + `numDays`, or `year` + `month` (1-12): the period to generate

- `serviceConfig`: Optional `ServiceConfig`:
    - `openDays`: Weekdays the service is open (0 = Monday ... 6 = Sunday). Default Monday to Saturday
    - `skillRequirements`: List of `{code, minStaff}`
    - `shiftTargets`: Mapping weekday -> {code -> headcount}. Always overrides other targets
    - `fteConstraintMode`: "PLAIN" or "MATERNITY_STANDARD"

- `preferences`: List of `WorkPreference` objects. Only `VALIDATED` ones apply:
    - `employeeId`, `startDate`, `endDate`
    - `recurringDays`: Optional weekday filter
    - `type`: "NO_WORK" (day seeded as rest) or "NO_NIGHT" (kept off the night shift)

- `seed`: Optional seed for the tie-break jitter, for reproducible rosters

### Response

- `employees`: The generated roster
- `changes`: `{employeeId, date, before, after}` cells that differ from the input
- `schedule`: Grid of shift codes per employee and date
- `summary`: Work days, hours, weekend days and night shifts per employee
- `violations`: Checker output for the generated roster (unfilled targets show up here)
"""

validate_roster_description = """
Check a roster and list its violations.

### Request Body

- `employees`: List of `Employee` objects (see Generate Roster)
- `startDate`: First date to check
- `numDays`: Number of days to check (at least 1)
- `serviceConfig`: Optional `ServiceConfig`

### Response

- `violations`: `{employeeId, date, type, message, severity}` in discovery order. `employeeId` is "ALL" for service-wide staffing issues
- `counts`: Counted staff per date and shift code
"""
