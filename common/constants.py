"""
Physical Constants for Spherical-Earth Map Projection.

This module provides the constants used when deriving projection constants,
with their uncertainty bounds and sources.

References
----------
- Spherical earth radius: NCEP / netCDF-Java spherical earth (6371.229 km)
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class Constant:
    """A physical constant with uncertainty and provenance.
    
    Attributes
    ----------
    value : float
        The nominal value of the constant.
    uncertainty : float
        The standard uncertainty (1-sigma) of the constant.
    unit : str
        The unit of the constant.
    source : str
        Reference for the constant value.
    description : str
        Human-readable description of the constant.
    """
    value: float
    uncertainty: float
    unit: str
    source: str
    description: str


class PhysicalConstants:
    """Registry of constants used by the projection code.
    
    Spherical Earth
    ---------------
    Conformal conic projections of gridded weather data are almost always
    defined on a sphere. The radius below is the one used by NCEP grids
    and by the netCDF-Java projection library, expressed in kilometres.
    """

    EARTH_RADIUS: Final[Constant] = Constant(
        value=6371.229,
        uncertainty=0.0,  # Defined exactly
        unit="km",
        source="NCEP GRIB spherical earth, netCDF-Java Earth.getRadius()",
        description="Radius of the spherical earth used for projections"
    )

    SINGLE_PARALLEL_TOLERANCE: Final[Constant] = Constant(
        value=1.0e-6,
        uncertainty=0.0,
        unit="degree",
        source="netCDF-Java LambertConformal",
        description="Parallels closer than this are treated as one standard parallel"
    )


# Plain float aliases used on hot paths
EARTH_RADIUS: Final[float] = PhysicalConstants.EARTH_RADIUS.value
EARTH_RADIUS_UNIT: Final[str] = PhysicalConstants.EARTH_RADIUS.unit
TOLERANCE: Final[float] = PhysicalConstants.SINGLE_PARALLEL_TOLERANCE.value
