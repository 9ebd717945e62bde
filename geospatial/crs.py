"""
PROJ / pyproj Interoperability.

Lambert Conformal Conic grids usually arrive as a coordinate reference
system: a PROJ string in a GRIB/netCDF header, a WKT blob, a CF grid
mapping. This module reads such a definition into `ProjectionParameters`
and exposes pyproj's own implementation of the same projection as an
independent reference for checking the fast projector.

The projector itself never imports pyproj; only these adapters do.
"""

import warnings
from typing import Any, Dict, Tuple

from pyproj import CRS, Proj

from common.logging_config import get_logger
from common.types import ProjectionParameters

logger = get_logger(__name__)


def _proj_dict(crs: CRS) -> Dict[str, Any]:
    with warnings.catch_warnings():
        # pyproj warns that PROJ strings lose information; only the
        # projection parameters are needed here
        warnings.simplefilter("ignore", UserWarning)
        return crs.to_dict()


def _sphere_radius(crs: CRS) -> float:
    ellipsoid = crs.ellipsoid
    if ellipsoid is None:
        raise ValueError("CRS has no ellipsoid; cannot determine the earth radius")
    a = ellipsoid.semi_major_metre
    if ellipsoid.inverse_flattening == 0.0 or ellipsoid.semi_minor_metre == a:
        return float(a)
    raise ValueError(
        "Only spherical earth models are supported; "
        f"got {ellipsoid.name} (1/f={ellipsoid.inverse_flattening})"
    )


def parameters_from_crs(crs: Any) -> ProjectionParameters:
    """Read a spherical LCC definition from a CRS.
    
    Parameters
    ----------
    crs : Any
        Anything accepted by `pyproj.CRS.from_user_input`: a `CRS`, a PROJ
        string, WKT, an EPSG code, a PROJ JSON dict.
    
    Returns
    -------
    ProjectionParameters
        Parameters in metres. A missing `lat_2` means a single standard
        parallel; missing `lat_0`, `lon_0`, `x_0`, `y_0` default to 0.
    
    Raises
    ------
    ValueError
        If the CRS is not a Lambert Conformal Conic projection of a sphere.
    """
    crs = CRS.from_user_input(crs)
    params = _proj_dict(crs)

    if params.get("proj") != "lcc":
        raise ValueError(f"Expected a Lambert Conformal Conic CRS, got proj={params.get('proj')!r}")
    if "lat_1" not in params:
        raise ValueError("LCC definition has no standard parallel (lat_1)")
    scale = float(params.get("k_0", params.get("k", 1.0)))
    if scale != 1.0:
        raise ValueError(f"Scaled LCC definitions are not supported (k_0={scale})")

    par1 = float(params["lat_1"])
    parameters = ProjectionParameters(
        origin_lon=float(params.get("lon_0", 0.0)),
        origin_lat=float(params.get("lat_0", 0.0)),
        par1=par1,
        par2=float(params.get("lat_2", par1)),
        false_easting=float(params.get("x_0", 0.0)),
        false_northing=float(params.get("y_0", 0.0)),
        earth_radius=_sphere_radius(crs),
        linear_unit="m",
    )
    logger.debug(f"Read LCC parameters from CRS: {parameters}")
    return parameters


def reference_proj(parameters: ProjectionParameters) -> Proj:
    """pyproj implementation of the same projection (metres, no datum shift)."""
    return Proj(parameters.proj4_string)


def reference_project(
    parameters: ProjectionParameters,
    lat: float,
    lon: float
) -> Tuple[float, float]:
    """Project one point with PROJ, returning metres."""
    x, y = reference_proj(parameters)(lon, lat)
    return float(x), float(y)
