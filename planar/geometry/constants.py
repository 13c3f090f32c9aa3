# planar/geometry/constants.py
"""Constants for geometric calculations."""
import sys

# Tolerance for floating-point comparisons
EPSILON = 1e-10

# Returned by intercept queries when the line never reaches the axis
NO_INTERCEPT = sys.float_info.max
