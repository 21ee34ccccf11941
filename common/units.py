"""
Unit Registry and Distance Unit Tokens.

This module maps the short distance-unit tokens accepted throughout the
toolkit (``'km'``, ``'mi'``, ``'nm'``, ...) onto canonical tokens and onto
the `pint` unit names they correspond to. The pint registry is used to
accept `pint.Quantity` distances anywhere a bare number plus unit token is
accepted, and to cross-check the literal multiplier table.

Note that pint reads ``'nm'`` as nanometer; the toolkit token ``'nm'`` is
the nautical mile, so tokens must always go through `pint_unit_name`.

Example Usage
-------------
>>> from common.units import Q_, canonical_unit, length_magnitude
>>> canonical_unit('Kilometres')
'km'
>>> round(length_magnitude(Q_(2, 'mile'), 1000.0), 6)
3.218688
"""

from typing import Dict, Union

import pint
from pint import UnitRegistry as PintUnitRegistry

from common.constants import DISTANCE_MULTIPLIERS
from common.errors import UnknownUnit

# Create the global unit registry
ureg = PintUnitRegistry()

# Convenience alias for creating quantities
Q_ = ureg.Quantity


# Long-form spellings accepted for each canonical token
UNIT_ALIASES: Dict[str, str] = {
    "m": "m",
    "meter": "m",
    "meters": "m",
    "metre": "m",
    "metres": "m",
    "cm": "cm",
    "centimeter": "cm",
    "centimeters": "cm",
    "centimetre": "cm",
    "centimetres": "cm",
    "km": "km",
    "kilometer": "km",
    "kilometers": "km",
    "kilometre": "km",
    "kilometres": "km",
    "in": "in",
    "inch": "in",
    "inches": "in",
    "ft": "ft",
    "foot": "ft",
    "feet": "ft",
    "yd": "yd",
    "yard": "yd",
    "yards": "yd",
    "mi": "mi",
    "mile": "mi",
    "miles": "mi",
    "nm": "nm",
    "nmi": "nm",
    "nautical mile": "nm",
    "nautical miles": "nm",
}

# Canonical token -> pint unit name
PINT_UNIT_NAMES: Dict[str, str] = {
    "m": "meter",
    "cm": "centimeter",
    "km": "kilometer",
    "in": "inch",
    "ft": "foot",
    "yd": "yard",
    "mi": "mile",
    "nm": "nautical_mile",
}


def canonical_unit(unit: str) -> str:
    """Resolve a unit token or alias to its canonical token.

    Parameters
    ----------
    unit : str
        Unit token, case-insensitive (e.g. 'km', 'Miles', 'nautical miles').

    Returns
    -------
    str
        Canonical token. Tokens that are not aliases are returned
        lower-cased so that custom ellipsoid tables can use them.
    """
    if not isinstance(unit, str):
        raise UnknownUnit(f"Unit must be a string, got {type(unit).__name__}")
    token = " ".join(unit.strip().lower().split())
    return UNIT_ALIASES.get(token, token)


def pint_unit_name(unit: str) -> str:
    """Get the pint unit name for a toolkit unit token.

    Raises
    ------
    UnknownUnit
        If the token has no pint counterpart.
    """
    token = canonical_unit(unit)
    try:
        return PINT_UNIT_NAMES[token]
    except KeyError:
        raise UnknownUnit(f"Unit '{unit}' has no pint equivalent") from None


def is_quantity(value) -> bool:
    """Whether `value` is a pint Quantity."""
    return isinstance(value, pint.Quantity)


def quantity_to_meters(value: pint.Quantity) -> float:
    """Convert a length Quantity to a bare number of meters."""
    try:
        return float(value.to("meter").magnitude)
    except pint.DimensionalityError as e:
        raise ValueError(
            f"Distance has incompatible units. Expected a length, got {value.units}"
        ) from e


def length_magnitude(value: Union[float, pint.Quantity], meters_per_unit: float) -> float:
    """Express a distance as a bare number of some unit.

    Parameters
    ----------
    value : float or pint.Quantity
        Bare numbers are assumed to already be in the target unit.
        Quantities are converted to meters with pint and then divided by
        `meters_per_unit`.
    meters_per_unit : float
        Size of the target unit, usually ``ellipsoid.multiplier(unit)``.

    Returns
    -------
    float
        Magnitude of the distance in the target unit.

    Raises
    ------
    ValueError
        If a Quantity does not have length dimensionality.
    """
    if is_quantity(value):
        return quantity_to_meters(value) / meters_per_unit
    return float(value)


def pint_multiplier(unit: str) -> float:
    """Meters per unit for a token, as computed by pint."""
    return float(Q_(1.0, pint_unit_name(unit)).to("meter").magnitude)


def check_multiplier_table(rel_tol: float = 1e-12) -> Dict[str, float]:
    """Compare the literal multiplier table against pint.

    Returns
    -------
    dict
        Relative difference per canonical token. All values are within
        `rel_tol` for a consistent table.
    """
    differences = {}
    for token, multiplier in DISTANCE_MULTIPLIERS.items():
        reference = pint_multiplier(token)
        differences[token] = abs(multiplier - reference) / reference
        if differences[token] > rel_tol:
            raise ValueError(
                f"Multiplier for '{token}' ({multiplier}) disagrees with pint ({reference})"
            )
    return differences
