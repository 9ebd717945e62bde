"""
Fast Spherical Lambert Conformal Conic Projection.

This module converts geographic coordinates (latitude, longitude in degrees)
into planar coordinates on a Lambert Conformal Conic (LCC) projection of a
spherical earth. All constants that depend only on the projection definition
are derived once, so projecting a point costs one `tan`, one `pow` and a
`sin`/`cos` pair.

Scientific Context
------------------
Domain: Cartography, weather-model grids
Model: Conformal conic projection, spherical earth

Derivation
----------
With t(phi) = tan(pi/4 + phi/2) and phi1, phi2 the standard parallels:

    n    = ln(cos phi1 / cos phi2) / ln(t(phi2) / t(phi1))
    n    = sin phi1                    (single standard parallel)
    F    = cos phi1 * t(phi1)^n / n
    rho0 = R * F / t(phi0)^n

and for a point (phi, lambda):

    theta = n * (lambda - lambda0)
    r     = R * F / t(phi)^n
    x     = r * sin(theta)         + false easting
    y     = rho0 - r * cos(theta)  + false northing

Numerical Caveats
-----------------
- t(phi) is evaluated with `tan`, not a log-based reformulation; it is
  singular as phi approaches +-90 degrees. At -90 degrees the radius r is
  infinite and the result is inf/NaN; no clamping is applied.
- n is not checked. Parallels that are numerically distinct but
  ill-conditioned give unstable or infinite constants.
- Arithmetic is done with numpy float64 scalars, so overflow and division
  by zero produce IEEE inf/NaN (with a numpy RuntimeWarning) rather than
  Python exceptions.

References
----------
- Snyder, J.P. (1987). Map Projections - A Working Manual. USGS Prof. Paper 1395,
  pp. 104-110.
"""

from dataclasses import dataclass, field
from typing import Tuple

import numpy as np

from common.constants import EARTH_RADIUS, EARTH_RADIUS_UNIT
from common.logging_config import get_logger
from common.types import ProjectionParameters

logger = get_logger(__name__)

PI_OVER_4 = np.pi / 4


def normalize_lon(value: float) -> float:
    """Fold a longitude (or longitude difference) into [-180, 180] degrees.
    
    Values already in range, including exactly -180 and +180, are returned
    unchanged. Values above 180 land in (-180, 180]; values below -180 land
    in [-180, 180). Thus 540 maps to 180 and -540 maps to -180.
    
    Parameters
    ----------
    value : float
        Angle in degrees.
    
    Returns
    -------
    float
        The folded angle in degrees. NaN stays NaN.
    """
    if -180.0 <= value <= 180.0:
        return value
    folded = float(np.fmod(value, 360.0))
    if folded > 180.0:
        folded -= 360.0
    elif folded < -180.0:
        folded += 360.0
    return folded


def isometric_tangent(phi_rad: float) -> float:
    """Return t(phi) = tan(pi/4 + phi/2) for a latitude in radians."""
    return np.tan(PI_OVER_4 + phi_rad / 2)


@dataclass(frozen=True)
class TissotIndicatrix:
    """Local distortion of a conformal projection at one point.
    
    A conformal map turns an infinitesimal circle into a circle, so the
    indicatrix is fully described by its radius (the point scale) and by
    how far the projected meridian is turned from grid north.
    
    Attributes
    ----------
    scale : float
        Point scale factor, equal along the meridian and the parallel (h = k).
    convergence_rad : float
        Meridian convergence in radians, positive east of the central meridian.
    """
    scale: float
    convergence_rad: float

    @property
    def semi_major(self) -> float:
        return self.scale

    @property
    def semi_minor(self) -> float:
        return self.scale

    @property
    def area_scale(self) -> float:
        """Area distortion factor h * k."""
        return self.scale * self.scale

    @property
    def angular_distortion_rad(self) -> float:
        return 0.0

    @property
    def linear_distortion(self) -> float:
        """Relative length error, e.g. -0.0006 for a 6 cm/100 m shortening."""
        return self.scale - 1.0

    @property
    def is_equal_area(self) -> bool:
        """Check if the point is (to 1e-6) free of area distortion."""
        return bool(np.abs(self.area_scale - 1.0) < 1e-6)


@dataclass(frozen=True)
class LambertConformalProjector:
    """Forward spherical Lambert Conformal Conic projector.
    
    Build it with `from_parameters` (or `build_projector`); the fields are
    the precomputed projection constants and never change afterwards, so a
    single instance may be used concurrently from many threads.
    
    Attributes
    ----------
    n : float
        Cone constant.
    F : float
        Scale factor relating parallel radius to t(phi)^-n.
    rho0 : float
        Radius from the cone apex to the origin parallel, in linear units.
    earth_radius_times_f : float
        earth_radius * F, reused for every point.
    origin_lon : float
        Central meridian in degrees.
    false_easting, false_northing : float
        Offsets added to every projected point, in linear units.
    parameters : ProjectionParameters
        The definition the constants were derived from.
    
    Examples
    --------
    >>> projector = LambertConformalProjector.from_parameters(
    ...     ProjectionParameters(origin_lon=-96.0, origin_lat=23.0, par1=33.0, par2=45.0))
    >>> projector.project(23.0, -96.0)
    (0.0, 0.0)
    """
    n: float
    F: float
    rho0: float
    earth_radius_times_f: float
    origin_lon: float
    false_easting: float
    false_northing: float
    parameters: ProjectionParameters = field(repr=False, compare=False)

    @classmethod
    def from_parameters(cls, parameters: ProjectionParameters) -> 'LambertConformalProjector':
        """Derive the projection constants for `parameters`.
        
        Never raises for degenerate input; see the module notes.
        """
        par1r = np.radians(parameters.par1)
        par2r = np.radians(parameters.par2)
        lat0r = np.radians(parameters.origin_lat)

        t1 = isometric_tangent(par1r)
        t2 = isometric_tangent(par2r)

        if parameters.is_single_parallel:
            n = np.sin(par1r)
        else:
            n = np.log(np.cos(par1r) / np.cos(par2r)) / np.log(t2 / t1)

        F = np.cos(par1r) * np.power(t1, n) / n
        earth_radius_times_f = parameters.earth_radius * F
        rho0 = earth_radius_times_f / np.power(isometric_tangent(lat0r), n)

        projector = cls(
            n=n,
            F=F,
            rho0=rho0,
            earth_radius_times_f=earth_radius_times_f,
            origin_lon=parameters.origin_lon,
            false_easting=parameters.false_easting,
            false_northing=parameters.false_northing,
            parameters=parameters,
        )

        logger.debug(
            f"Derived LCC constants n={n:.12g} F={F:.12g} rho0={rho0:.12g} "
            f"({parameters.linear_unit})"
        )
        if not projector.is_finite:
            logger.warning(
                f"Non-finite LCC constants for parallels "
                f"({parameters.par1}, {parameters.par2}) and origin latitude "
                f"{parameters.origin_lat}: n={n}, F={F}, rho0={rho0}"
            )
        return projector

    @property
    def name(self) -> str:
        return f"Lambert Conformal Conic ({self.parameters.par1}°, {self.parameters.par2}°)"

    @property
    def proj4_string(self) -> str:
        """PROJ.4 definition string (metres)."""
        return self.parameters.proj4_string

    @property
    def is_finite(self) -> bool:
        """Whether every derived constant is a finite number."""
        return bool(np.all(np.isfinite([self.n, self.F, self.rho0, self.earth_radius_times_f])))

    def project(self, lat: float, lon: float) -> Tuple[float, float]:
        """Transform a geographic point to projected coordinates.
        
        Parameters
        ----------
        lat, lon : float
            Latitude and longitude in degrees.
        
        Returns
        -------
        Tuple[float, float]
            (x, y) in the linear unit of the projection parameters.
        """
        dlon = normalize_lon(lon - self.origin_lon)
        theta = self.n * np.radians(dlon)
        tn = np.power(isometric_tangent(np.radians(lat)), self.n)
        r = self.earth_radius_times_f / tn
        x = r * np.sin(theta)
        y = self.rho0 - r * np.cos(theta)
        return float(x + self.false_easting), float(y + self.false_northing)

    def convergence_angle(self, lon: float) -> float:
        """Meridian convergence at `lon` in degrees (angle of the meridian from grid north)."""
        return float(self.n * normalize_lon(lon - self.origin_lon))

    def scale_factor(self, lat: float) -> float:
        """Point scale factor along meridians and parallels at `lat` (degrees).
        
        Equal to 1 on the standard parallels, below 1 between them and
        above 1 outside.
        """
        lat_rad = np.radians(lat)
        tn = np.power(isometric_tangent(lat_rad), self.n)
        return float(self.n * self.F / (np.cos(lat_rad) * tn))

    def compute_distortion(self, lat: float, lon: float) -> TissotIndicatrix:
        """Describe local distortion at a point (degrees).
        
        LCC is conformal, so the indicatrix is a circle whose radius depends
        on latitude only; its orientation follows the meridian convergence.
        """
        return TissotIndicatrix(
            scale=self.scale_factor(lat),
            convergence_rad=float(np.radians(self.convergence_angle(lon)))
        )


def build_projector(
    origin_lon: float,
    origin_lat: float,
    par1: float,
    par2: float,
    false_easting: float = 0.0,
    false_northing: float = 0.0,
    earth_radius: float = EARTH_RADIUS,
    linear_unit: str = EARTH_RADIUS_UNIT
) -> LambertConformalProjector:
    """Build a projector directly from flat LCC parameters."""
    return LambertConformalProjector.from_parameters(
        ProjectionParameters(
            origin_lon=origin_lon,
            origin_lat=origin_lat,
            par1=par1,
            par2=par2,
            false_easting=false_easting,
            false_northing=false_northing,
            earth_radius=earth_radius,
            linear_unit=linear_unit,
        )
    )
