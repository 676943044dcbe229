"""
scheduler.rules
---------------

Exposes all roster rules by importing from:

- `fixed`: Locked codes, validated preferences and default rest codes.
- `high`: Eligibility rules and relaxation tiers for the assignment engine.
- `low`: Equity-weighted candidate scoring.
- `staffing`: Service-wide staffing sweep of the checker.
- `patterns`: Individual pattern sweeps of the checker (48h, rest after night, maternity).

Allows unified access to all rule and constraint definitions via wildcard imports.
"""
from .fixed import *
from .high import *
from .low import *
from .staffing import *
from .patterns import *
