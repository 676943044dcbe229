"""
scheduler
---------

Main roster module. Initializes key components:

- `builder`: Generation entry points (preprocess, assign, back-fill).
- `checker`: Constraint checker producing violations for any roster.
- `extractor`: pandas views of a roster and the changes to persist.

Provides high-level access to core scheduling functionality.
"""
from . import builder, checker, extractor
