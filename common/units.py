"""
Linear Unit Handling for Projected Coordinates.

Projected coordinates come out in whatever linear unit the earth radius and
the false easting/northing were given in. This module uses the `pint`
library so that moving a parameter set between kilometres, metres, feet
and so on is done by a real unit registry rather than by hand-written
factors.

Example Usage
-------------
>>> from common.units import ureg, Q_
>>> radius = Q_(6371.229, 'km')
>>> radius.to('m')
<Quantity(6371229.0, 'meter')>
"""

import pint
from pint import UnitRegistry as PintUnitRegistry

# Create the global unit registry
ureg = PintUnitRegistry()

# Convenience alias for creating quantities
Q_ = ureg.Quantity

LENGTH = ureg.parse_expression("meter").dimensionality


def is_length_unit(unit: str) -> bool:
    """Return True if `unit` parses to a unit of length."""
    try:
        return ureg.parse_units(unit).dimensionality == LENGTH
    except (pint.errors.PintError, AttributeError, TypeError, ValueError):
        return False


def convert_length(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a linear distance between units.
    
    Parameters
    ----------
    value : float
        Distance expressed in `from_unit`.
    from_unit, to_unit : str
        Unit strings understood by pint (e.g. 'km', 'm', 'ft', 'survey_foot').
    
    Returns
    -------
    float
        The distance expressed in `to_unit`.
    
    Raises
    ------
    ValueError
        If either unit is unknown or is not a unit of length.
    """
    for unit in (from_unit, to_unit):
        if not is_length_unit(unit):
            raise ValueError(f"'{unit}' is not a unit of length")
    if from_unit == to_unit:
        return value
    try:
        return float(Q_(value, from_unit).to(to_unit).magnitude)
    except pint.DimensionalityError as e:
        raise ValueError(
            f"Cannot convert from {from_unit} to {to_unit}"
        ) from e
