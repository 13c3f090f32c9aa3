"""
planar - Point and infinite line primitives for 2D geometry
"""
__version__ = "1.0"

import logging

# Configure logging to print to console
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

from planar.geometry.constants import EPSILON, NO_INTERCEPT
from planar.geometry.point import Point, subtract, dot, norm, points_equal
from planar.geometry.line import Line, lines_equal

__all__ = [
    'EPSILON',
    'NO_INTERCEPT',
    'Point',
    'Line',
    'subtract',
    'dot',
    'norm',
    'points_equal',
    'lines_equal',
]
