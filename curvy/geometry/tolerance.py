from __future__ import annotations

# Positional epsilon for near-zero distance/length checks.
EPS_POS = 1e-12

# Angular epsilon for span membership at arc endpoints.
EPS_ANG = 1e-9

# Relative epsilon for over-specified constructions (equidistance checks).
EPS_REL = 1e-9

# Area epsilon for degenerate polygon checks.
EPS_AREA = 1e-12

# Point comparison epsilon used by isclose() helpers.
EPS_WELD = 1e-6

# Absolute epsilon for single precision equidistance checks.
EPS_F32 = 1e-5
