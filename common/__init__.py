"""
Common utilities for the Fast Lambert Conformal Conic Projector.

This package provides foundational components used across all modules:
- Constants with provenance (spherical earth radius, tolerances)
- Linear unit conversion through pint
- Projection parameter type
- Logging
"""

from common.constants import PhysicalConstants, EARTH_RADIUS, TOLERANCE
from common.units import ureg, Q_, convert_length, is_length_unit
from common.types import ProjectionParameters
from common.logging_config import get_logger

__all__ = [
    "PhysicalConstants",
    "EARTH_RADIUS",
    "TOLERANCE",
    "ureg",
    "Q_",
    "convert_length",
    "is_length_unit",
    "ProjectionParameters",
    "get_logger",
]
