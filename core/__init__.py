"""
core
----

Core roster engine components:

- resolve_targets:
  Compute the minimum headcount per shift code for a date, including the
  maternity parity rule and manual overrides.

- HardRule & RelaxationTier:
  Named eligibility predicates, grouped into ordered relaxation tiers.

- ConstraintManager:
  Register and apply checker sweeps in a controlled sequence.

- ScheduleState & EquityStats:
  Encapsulate the working roster, inputs and per-run equity counters of one
  generation call.
"""
