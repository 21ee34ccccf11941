"""
Computation Context.

A `GeodesyContext` bundles everything a distance computation depends on
besides its arguments: the reference ellipsoid, the default distance
formula and the computation strategy. Contexts are immutable and passed
explicitly, so computations using different ellipsoids can run
concurrently without interfering.

Examples
--------
>>> from geospatial.coordinate_models import Ellipsoid
>>> mars = DEFAULT_CONTEXT.with_ellipsoid(Ellipsoid(a=3_396_190.0, f=0.00589, name="Mars"))
>>> mars.ellipsoid.name
'Mars'
>>> DEFAULT_CONTEXT.ellipsoid.name
'WGS84'
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Union

from common.types import DistanceFormula
from geospatial.coordinate_models import Ellipsoid, EARTH
from geospatial.strategies import GeodesicStrategy, ReferenceGeodesic


def as_formula(formula: Union[DistanceFormula, int, str]) -> DistanceFormula:
    """Accept a DistanceFormula, its integer value or its name."""
    if isinstance(formula, DistanceFormula):
        return formula
    if isinstance(formula, str):
        try:
            return DistanceFormula[formula.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown distance formula '{formula}'") from None
    return DistanceFormula(formula)


@dataclass(frozen=True)
class GeodesyContext:
    """Explicit configuration for the distance engine.

    Attributes
    ----------
    ellipsoid : Ellipsoid
        Reference body (default: Earth, WGS84).
    formula : DistanceFormula
        Formula used when a call does not choose one (default: HAVERSINE).
    strategy : GeodesicStrategy
        Implementation of the formulas (default: ReferenceGeodesic).
    """
    ellipsoid: Ellipsoid = EARTH
    formula: DistanceFormula = DistanceFormula.HAVERSINE
    strategy: GeodesicStrategy = field(default_factory=ReferenceGeodesic)

    def __post_init__(self):
        object.__setattr__(self, "formula", as_formula(self.formula))

    def with_ellipsoid(self, ellipsoid: Ellipsoid) -> "GeodesyContext":
        return replace(self, ellipsoid=ellipsoid)

    def with_formula(self, formula: Union[DistanceFormula, int, str]) -> "GeodesyContext":
        return replace(self, formula=as_formula(formula))

    def with_strategy(self, strategy: GeodesicStrategy) -> "GeodesyContext":
        return replace(self, strategy=strategy)


DEFAULT_CONTEXT = GeodesyContext()


def resolve_context(context: Optional[GeodesyContext]) -> GeodesyContext:
    """Use `DEFAULT_CONTEXT` when no context is given."""
    return DEFAULT_CONTEXT if context is None else context
