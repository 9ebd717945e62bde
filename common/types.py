"""
Type Definitions for the Lambert Conformal Conic Projector.

This module defines the value objects passed between modules. They are
plain frozen dataclasses: once built they cannot change, so a projector
derived from them can be shared freely between threads.
"""

from dataclasses import dataclass, replace
from typing import Tuple

from common.constants import EARTH_RADIUS, EARTH_RADIUS_UNIT, TOLERANCE
from common.units import convert_length


@dataclass(frozen=True)
class ProjectionParameters:
    """Definition of a spherical Lambert Conformal Conic projection.
    
    Attributes
    ----------
    origin_lon : float
        Longitude of the central meridian in DEGREES.
    origin_lat : float
        Latitude of the projection origin in DEGREES.
    par1, par2 : float
        Standard parallels in DEGREES. Equal values (within `TOLERANCE`)
        define a tangent cone with a single standard parallel.
    false_easting, false_northing : float
        Offsets added to projected coordinates, in `linear_unit`.
    earth_radius : float
        Radius of the spherical earth, in `linear_unit`.
    linear_unit : str
        Unit shared by the earth radius, the false offsets and therefore
        the projected output.
    
    Notes
    -----
    Values are not validated. Non-finite input produces non-finite
    projection constants and, later, non-finite projected coordinates.
    
    Examples
    --------
    >>> params = ProjectionParameters(origin_lon=-96.0, origin_lat=23.0,
    ...                               par1=33.0, par2=45.0)
    >>> params.is_single_parallel
    False
    """
    origin_lon: float  # degrees
    origin_lat: float  # degrees
    par1: float  # degrees
    par2: float  # degrees
    false_easting: float = 0.0
    false_northing: float = 0.0
    earth_radius: float = EARTH_RADIUS
    linear_unit: str = EARTH_RADIUS_UNIT

    @property
    def is_single_parallel(self) -> bool:
        """True when both standard parallels collapse onto one."""
        return abs(self.par2 - self.par1) < TOLERANCE

    @property
    def standard_parallels(self) -> Tuple[float, float]:
        return self.par1, self.par2

    def in_units(self, unit: str) -> 'ProjectionParameters':
        """Express the linear parameters in another unit.
        
        Parameters
        ----------
        unit : str
            Target linear unit (e.g. 'm', 'km', 'ft').
        
        Returns
        -------
        ProjectionParameters
            Copy with earth radius and false easting/northing converted.
        
        Raises
        ------
        ValueError
            If `unit` is not a unit of length.
        """
        return replace(
            self,
            false_easting=convert_length(self.false_easting, self.linear_unit, unit),
            false_northing=convert_length(self.false_northing, self.linear_unit, unit),
            earth_radius=convert_length(self.earth_radius, self.linear_unit, unit),
            linear_unit=unit,
        )

    @property
    def proj4_string(self) -> str:
        """PROJ definition of the same projection, in metres."""
        metric = self.in_units("m")
        return (
            f"+proj=lcc +lat_1={self.par1} +lat_2={self.par2} "
            f"+lat_0={self.origin_lat} +lon_0={self.origin_lon} "
            f"+x_0={metric.false_easting} +y_0={metric.false_northing} "
            f"+R={metric.earth_radius} +units=m +no_defs"
        )
