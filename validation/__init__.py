"""
Validation Framework for the Lambert Conformal Conic Projector.

This module provides consistency checks for constructed projectors.
"""

from validation.projection_checks import (
    ProjectionConsistencyChecker,
    ProjectionConsistencyError,
    ValidationResult,
)

__all__ = [
    "ProjectionConsistencyChecker",
    "ProjectionConsistencyError",
    "ValidationResult",
]
