"""
Consistency Checks for a Lambert Conformal Conic Projector.

This module verifies that a constructed projector obeys the properties every
spherical LCC projection must have, and optionally compares it point by
point against PROJ.

Check Categories
----------------
1. Derived constants are finite
2. Origin maps onto the false origin
3. Scale is exactly 1 on the standard parallels
4. Mirror symmetry about the central meridian
5. Agreement with an independent implementation (pyproj)
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np
from pyproj.exceptions import CRSError, ProjError

from common.logging_config import get_logger
from geospatial.crs import reference_proj
from geospatial.projections import LambertConformalProjector

DEFAULT_SAMPLE_POINTS: Tuple[Tuple[float, float], ...] = (
    (0.0, 0.0),
    (10.0, 5.0),
    (-10.0, -5.0),
)


class ProjectionConsistencyError(ValueError):
    """Raised in strict mode when a projector fails a consistency check."""

    def __init__(self, failures: List['ValidationResult']):
        self.failures = failures
        names = ", ".join(f.test_name for f in failures)
        super().__init__(f"Projection consistency checks failed: {names}")


@dataclass
class ValidationResult:
    """Result of a validation check.
    
    Attributes
    ----------
    test_name : str
        Name of the test.
    passed : bool
        Whether the test passed.
    message : str
        Description of result.
    details : dict
        Additional details.
    """
    test_name: str
    passed: bool
    message: str
    details: Dict[str, Any]


class ProjectionConsistencyChecker:
    """Checker for the geometric consistency of an LCC projector."""

    def __init__(
        self,
        strict_mode: bool = False,
        log_violations: bool = True
    ):
        """Initialize projection checker.
        
        Parameters
        ----------
        strict_mode : bool
            If True, `check_all` raises `ProjectionConsistencyError` on failures.
        log_violations : bool
            Whether to log failed checks.
        """
        self.strict_mode = strict_mode
        self.log_violations = log_violations
        self._logger = get_logger("ProjectionConsistencyChecker")

    def check_all(
        self,
        projector: LambertConformalProjector,
        sample_points: Optional[Sequence[Tuple[float, float]]] = None,
        reference_tolerance_m: float = 1e-3
    ) -> List[ValidationResult]:
        """Run all checks on a projector.
        
        Parameters
        ----------
        projector : LambertConformalProjector
            The projector under test.
        sample_points : sequence of (lat, lon), optional
            Points, as offsets in degrees from the projection origin, used
            for the symmetry and reference checks.
        reference_tolerance_m : float
            Allowed difference from PROJ in metres.
        
        Returns
        -------
        List[ValidationResult]
            Results of all checks.
        
        Raises
        ------
        ProjectionConsistencyError
            In strict mode, if any check failed.
        """
        if sample_points is None:
            sample_points = DEFAULT_SAMPLE_POINTS

        params = projector.parameters
        absolute_points = [
            (params.origin_lat + dlat, params.origin_lon + dlon)
            for dlat, dlon in sample_points
        ]
        offsets = [abs(dlon) for _, dlon in sample_points if dlon != 0.0]

        results = [
            self.check_finite_constants(projector),
            self.check_origin(projector),
            self.check_standard_parallels(projector),
            self.check_meridian_symmetry(projector, params.origin_lat, offsets or [5.0]),
            self.check_against_reference(projector, absolute_points, reference_tolerance_m),
        ]

        failures = [r for r in results if not r.passed]
        if self.log_violations:
            for failure in failures:
                self._logger.warning(f"CHECK FAILED | {failure.test_name} | {failure.message}")

        if failures and self.strict_mode:
            raise ProjectionConsistencyError(failures)
        return results

    def check_finite_constants(
        self,
        projector: LambertConformalProjector
    ) -> ValidationResult:
        """Check that n, F and rho0 are finite."""
        return ValidationResult(
            test_name="finite_constants",
            passed=projector.is_finite,
            message=f"Derived constants finite: {projector.is_finite}",
            details={
                'n': float(projector.n),
                'F': float(projector.F),
                'rho0': float(projector.rho0),
            }
        )

    def check_origin(
        self,
        projector: LambertConformalProjector,
        tolerance: float = 1e-6
    ) -> ValidationResult:
        """Check that the origin projects onto the false origin."""
        params = projector.parameters
        x, y = projector.project(params.origin_lat, params.origin_lon)
        error = float(np.hypot(x - projector.false_easting, y - projector.false_northing))

        return ValidationResult(
            test_name="origin",
            passed=bool(error <= tolerance),
            message=f"Origin offset from false origin: {error:.3e} {params.linear_unit}",
            details={
                'projected': (x, y),
                'expected': (projector.false_easting, projector.false_northing),
                'tolerance': tolerance,
            }
        )

    def check_standard_parallels(
        self,
        projector: LambertConformalProjector,
        tolerance: float = 1e-9
    ) -> ValidationResult:
        """Check that the point scale is 1 on both standard parallels."""
        scales = [projector.scale_factor(lat) for lat in projector.parameters.standard_parallels]
        max_error = float(np.max(np.abs(np.asarray(scales) - 1.0)))

        return ValidationResult(
            test_name="standard_parallel_scale",
            passed=bool(max_error <= tolerance),
            message=f"Standard parallel scale error: max={max_error:.3e}",
            details={
                'scales': scales,
                'tolerance': tolerance,
            }
        )

    def check_meridian_symmetry(
        self,
        projector: LambertConformalProjector,
        lat: float,
        lon_offsets: Sequence[float],
        tolerance: float = 1e-9
    ) -> ValidationResult:
        """Check that mirrored longitudes give mirrored x and equal y."""
        origin_lon = projector.origin_lon
        errors = []
        for offset in lon_offsets:
            x_east, y_east = projector.project(lat, origin_lon + offset)
            x_west, y_west = projector.project(lat, origin_lon - offset)
            scale = max(abs(x_east - projector.false_easting), 1.0)
            errors.append(max(
                abs((x_east - projector.false_easting) + (x_west - projector.false_easting)),
                abs(y_east - y_west)
            ) / scale)
        max_error = float(np.max(errors))

        return ValidationResult(
            test_name="meridian_symmetry",
            passed=bool(max_error <= tolerance),
            message=f"Meridian symmetry check: max relative error={max_error:.3e}",
            details={
                'latitude': lat,
                'offsets': list(lon_offsets),
                'tolerance': tolerance,
            }
        )

    def check_against_reference(
        self,
        projector: LambertConformalProjector,
        points: Sequence[Tuple[float, float]],
        tolerance_m: float = 1e-3
    ) -> ValidationResult:
        """Compare projected points with PROJ's implementation.
        
        Differences are measured in metres regardless of the projector's
        linear unit.
        """
        if len(points) == 0:
            return ValidationResult(
                test_name="reference_agreement",
                passed=True,
                message="No points to compare",
                details={}
            )

        metric = projector.parameters.in_units("m")
        metric_projector = LambertConformalProjector.from_parameters(metric)
        try:
            proj = reference_proj(metric)
        except (CRSError, ProjError) as e:
            return ValidationResult(
                test_name="reference_agreement",
                passed=False,
                message=f"PROJ rejected the projection definition: {e}",
                details={'proj4': metric.proj4_string}
            )

        errors = []
        for lat, lon in points:
            x, y = metric_projector.project(lat, lon)
            x_ref, y_ref = proj(lon, lat)
            errors.append(float(np.hypot(x - x_ref, y - y_ref)))
        max_error = float(np.max(errors))

        return ValidationResult(
            test_name="reference_agreement",
            passed=bool(max_error <= tolerance_m),
            message=f"Agreement with PROJ: max={max_error:.3e} m",
            details={
                'max_error_m': max_error,
                'mean_error_m': float(np.mean(errors)),
                'num_points': len(errors),
                'tolerance_m': tolerance_m,
            }
        )
