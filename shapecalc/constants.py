"""Numeric and formatting constants shared across shapecalc."""

import numpy as np

PI: float = float(np.pi)

# Decimal places for every number in the text report
PRECISION: int = 2

SEPARATOR: str = "------------------------"
