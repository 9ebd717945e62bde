"""
Geospatial Module for the Fast Lambert Conformal Conic Projector.

This module provides:
- Spherical Lambert Conformal Conic forward projection with precomputed constants
- Longitude normalisation
- Point scale and Tissot distortion description
- pyproj interoperability (reading CRS definitions, reference projection)
"""

from geospatial.projections import (
    LambertConformalProjector,
    TissotIndicatrix,
    build_projector,
    isometric_tangent,
    normalize_lon,
)

from geospatial.crs import (
    parameters_from_crs,
    reference_proj,
    reference_project,
)

__all__ = [
    # Projection
    "LambertConformalProjector",
    "TissotIndicatrix",
    "build_projector",
    "isometric_tangent",
    "normalize_lon",
    # pyproj interoperability
    "parameters_from_crs",
    "reference_proj",
    "reference_project",
]
