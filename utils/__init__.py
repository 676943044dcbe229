"""
utils package
-------------

Shared helpers for the roster engine and the API:

- `constants`: values loaded from config/constants.json (shift catalog, locked codes, limits).
- `date_utils`: date parsing, ranges, ISO week parity and week anchoring.
- `shift_utils`: shift catalog, worked hours and run lengths.
- `validate`: input checks raising the custom errors.
- `logger`: run log and stdout handlers.
"""
