"""Module-level defaults shared by the kernel.

These are plain constants rather than a runtime configuration layer; pass
explicit keyword arguments to override them per call.
"""

import math

# Intersection window. Hits behind the ray origin are rejected by default.
T_MIN: float = 0.0
T_MAX: float = math.inf

# Tolerances used by the is_close() helpers.
REL_TOL: float = 1e-9
ABS_TOL: float = 1e-12
