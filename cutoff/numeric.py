"""
Rounding helpers shared by the forecasting engine.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

_TENTHS = Decimal("0.1")


def to_one_digit(value: float) -> float:
    """Round to one decimal, half away from zero on the shortest decimal repr.

    2.25 rounds to 2.3 even though its binary value sits just below the
    midpoint.
    """
    if not math.isfinite(value):
        return float(value)
    return float(Decimal(repr(float(value))).quantize(_TENTHS, rounding=ROUND_HALF_UP))
