"""
Base beam data types and analyzer interface.

Defines the value objects shared by every support condition (material,
beam geometry, equation points) together with the abstract ``Equation``
and ``BeamAnalyzer`` classes that concrete analyzers implement.

Units follow a fixed convention: span lengths and positions in millimetres
and distributed load in N/mm (kN/m). The deflection formulas rescale ``EI``
by ``1000³`` and the result by ``1000`` to reconcile the length unit with
the force unit ``EI`` is given in; these constants are part of the convention.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import ClassVar, Optional, Union

import numpy as np

from beamcalc.core.exceptions import (
    InvalidArgumentError,
    QuantityNotSupportedError,
    UnsupportedConditionError,
)

FLEXURAL_RIGIDITY_KEY = "EI"
SCALING_FACTOR_KEY = "j2"

# Length unit (mm) to force-unit reconciliation for EI and deflection.
EI_UNIT_SCALE = 1000.0**3
DEFLECTION_UNIT_SCALE = 1000.0


class AnalysisCondition(str, Enum):
    """Supported structural support conditions."""

    SIMPLY_SUPPORTED = "simply-supported"
    TWO_SPAN_UNEQUAL = "two-span-unequal"

    @classmethod
    def coerce(cls, value: Union["AnalysisCondition", str]) -> "AnalysisCondition":
        """Return the enum member for ``value`` or raise ``UnsupportedConditionError``."""
        try:
            return cls(value)
        except ValueError as exc:
            raise UnsupportedConditionError(value) from exc


class Quantity(str, Enum):
    """Diagram quantities an analyzer can produce."""

    DEFLECTION = "deflection"
    BENDING_MOMENT = "bending-moment"
    SHEAR_FORCE = "shear-force"

    @classmethod
    def coerce(cls, value: Union["Quantity", str]) -> "Quantity":
        try:
            return cls(value)
        except ValueError as exc:
            raise InvalidArgumentError(f"Unknown quantity: {value!r}") from exc


class Side(str, Enum):
    """Side of the interior support at which a discontinuous diagram is read."""

    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def coerce(cls, value: Union["Side", bool, str, None]) -> Optional["Side"]:
        """
        Normalise a side hint.

        ``True`` means the position belongs to the primary span (left of the
        interior support), ``False`` to the secondary span.
        """
        if value is None or isinstance(value, Side):
            return value
        if isinstance(value, (bool, np.bool_)):
            return cls.LEFT if value else cls.RIGHT
        try:
            return cls(value)
        except ValueError as exc:
            raise InvalidArgumentError(f"Invalid side hint: {value!r}") from exc

    @property
    def is_primary_span(self) -> bool:
        return self is Side.LEFT


@dataclass(frozen=True)
class Material:
    """
    Named set of structural stiffness coefficients.

    Attributes:
        name: Material name
        properties: Coefficients such as ``EI`` (flexural rigidity) and
            ``j2`` (deflection scaling factor [-]). Keys not used by an
            analyzer are ignored.
    """

    name: str
    properties: Mapping[str, float] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        """Freeze the property mapping."""
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    def require(self, key: str) -> float:
        """Return property ``key`` or raise ``InvalidArgumentError`` if it is missing."""
        try:
            return float(self.properties[key])
        except KeyError as exc:
            raise InvalidArgumentError(
                f"Material {self.name!r} has no {key!r} property"
            ) from exc

    @property
    def flexural_rigidity(self) -> float:
        """Return the flexural rigidity EI."""
        return self.require(FLEXURAL_RIGIDITY_KEY)

    @property
    def scaling_factor(self) -> float:
        """Return the deflection scaling coefficient j2 [-]."""
        return self.require(SCALING_FACTOR_KEY)


@dataclass(frozen=True)
class Beam:
    """
    Prismatic beam geometry.

    Attributes:
        primary_span: First (or only) span length [mm]
        secondary_span: Second span length [mm], ignored for a single span
        material: Shared material record
    """

    primary_span: float
    secondary_span: float
    material: Material

    def __post_init__(self):
        """Validate span lengths."""
        for name in ("primary_span", "secondary_span"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float, np.number)):
                raise InvalidArgumentError(f"{name} must be a number, got {value!r}")
            if not np.isfinite(value):
                raise InvalidArgumentError(f"{name} must be finite, got {value!r}")
            object.__setattr__(self, name, float(value))

        if self.primary_span <= 0:
            raise InvalidArgumentError(
                f"primary_span must be positive, got {self.primary_span}"
            )
        if self.secondary_span < 0:
            raise InvalidArgumentError(
                f"secondary_span must be non-negative, got {self.secondary_span}"
            )

    def total_length(self, condition: Union[AnalysisCondition, str]) -> float:
        """Return the length of the analysis domain for ``condition``."""
        condition = AnalysisCondition.coerce(condition)
        if condition is AnalysisCondition.SIMPLY_SUPPORTED:
            return self.primary_span
        return self.primary_span + self.secondary_span


def create_material(name: str, properties: Optional[Mapping[str, float]] = None) -> Material:
    """Build a :class:`Material`."""
    return Material(name=name, properties=properties or {})


def create_beam(primary_span: float, secondary_span: float, material: Material) -> Beam:
    """Build a :class:`Beam`."""
    return Beam(primary_span=primary_span, secondary_span=secondary_span, material=material)


@dataclass(frozen=True)
class EquationPoint:
    """A single evaluated point of a diagram."""

    x: float
    y: float


@dataclass(frozen=True)
class Equation(ABC):
    """
    Immutable diagram equation bound to a beam and a load.

    Subclasses implement ``_value`` for positions already validated against
    ``[0, total_length]``. Evaluation never mutates the equation, so the same
    instance may be shared between callers.

    Attributes:
        beam: Beam the equation was derived for
        load: Uniformly distributed load w [N/mm]
    """

    condition: ClassVar[AnalysisCondition]
    quantity: ClassVar[Quantity]

    beam: Beam
    load: float

    def __post_init__(self):
        if isinstance(self.load, bool) or not isinstance(self.load, (int, float, np.number)):
            raise InvalidArgumentError(f"load must be a number, got {self.load!r}")
        if not np.isfinite(self.load):
            raise InvalidArgumentError(f"load must be finite, got {self.load!r}")
        object.__setattr__(self, "load", float(self.load))

    @property
    def total_length(self) -> float:
        """Return the right end of the equation's domain [mm]."""
        return self.beam.total_length(self.condition)

    def evaluate(self, x: float, side: Union[Side, bool, str, None] = None) -> EquationPoint:
        """
        Evaluate the equation at position ``x``.

        Args:
            x: Distance from the left support [mm]
            side: Side of the interior support, only needed where the
                diagram is discontinuous

        Returns:
            The evaluated point

        Raises:
            InvalidArgumentError: If ``x`` lies outside ``[0, total_length]``
        """
        x = self._check_domain(x)
        return EquationPoint(x=x, y=float(self._value(x, Side.coerce(side))))

    def __call__(self, x: float, side: Union[Side, bool, str, None] = None) -> EquationPoint:
        return self.evaluate(x, side)

    def evaluate_many(
        self,
        xs: Iterable[float],
        sides: Optional[Iterable[Union[Side, bool, str, None]]] = None,
    ) -> np.ndarray:
        """
        Evaluate the equation at several positions.

        Args:
            xs: Positions along the beam [mm]
            sides: Optional side hint per position

        Returns:
            Diagram values at each position
        """
        xs = list(xs)
        sides = [None] * len(xs) if sides is None else list(sides)
        if len(sides) != len(xs):
            raise InvalidArgumentError(
                f"Got {len(sides)} side hints for {len(xs)} positions"
            )
        return np.array([self.evaluate(x, s).y for x, s in zip(xs, sides)], dtype=float)

    def _check_domain(self, x: float) -> float:
        try:
            x = float(x)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(f"x must be a number, got {x!r}") from exc

        total = self.total_length
        if not np.isfinite(x) or x < 0 or x > total:
            raise InvalidArgumentError(f"x={x} out of domain [0, {total}]")
        return x

    @abstractmethod
    def _value(self, x: float, side: Optional[Side]) -> float:
        """Return the diagram value at a validated position."""


@dataclass(frozen=True)
class DeflectionEquation(Equation):
    """
    Base for deflection equations using the rescaled flexural rigidity.

    Attributes:
        reduced_rigidity: EI' = EI / 1000³
        scaling_factor: Material coefficient j2
    """

    quantity: ClassVar[Quantity] = Quantity.DEFLECTION

    reduced_rigidity: float = field(init=False)
    scaling_factor: float = field(init=False)

    def __post_init__(self):
        super().__post_init__()
        ei = self.beam.material.flexural_rigidity
        if ei == 0:
            raise InvalidArgumentError(f"Material {self.beam.material.name!r} has EI = 0")
        object.__setattr__(self, "reduced_rigidity", ei / EI_UNIT_SCALE)
        object.__setattr__(self, "scaling_factor", self.beam.material.scaling_factor)


class BeamAnalyzer(ABC):
    """
    Abstract base class for support-condition analyzers.

    An analyzer is a stateless factory of equations. Every quantity it does
    not implement raises :class:`QuantityNotSupportedError`.
    """

    name: str = "BaseAnalyzer"

    @property
    @abstractmethod
    def condition(self) -> AnalysisCondition:
        """Support condition handled by this analyzer."""

    def get_deflection_equation(self, beam: Beam, load: float) -> Equation:
        raise QuantityNotSupportedError(self.name, Quantity.DEFLECTION)

    def get_bending_moment_equation(self, beam: Beam, load: float) -> Equation:
        raise QuantityNotSupportedError(self.name, Quantity.BENDING_MOMENT)

    def get_shear_force_equation(self, beam: Beam, load: float) -> Equation:
        raise QuantityNotSupportedError(self.name, Quantity.SHEAR_FORCE)

    def get_equation(self, quantity: Union[Quantity, str], beam: Beam, load: float) -> Equation:
        """Dispatch to the equation factory for ``quantity``."""
        quantity = Quantity.coerce(quantity)
        factories = {
            Quantity.DEFLECTION: self.get_deflection_equation,
            Quantity.BENDING_MOMENT: self.get_bending_moment_equation,
            Quantity.SHEAR_FORCE: self.get_shear_force_equation,
        }
        return factories[quantity](beam, load)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"{self.__class__.__name__}(condition={self.condition.value})"
