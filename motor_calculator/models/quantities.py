"""
Physical quantity value types.

Each quantity is an immutable value with a unit tag. Negative values are
rejected at construction.
"""

from dataclasses import dataclass

from ..exceptions import InvalidQuantity, UnknownUnit
from ..utils.constants import POWER_UNIT_TO_WATTS


@dataclass(frozen=True)
class _Quantity:
    value: float
    unit: str

    def __post_init__(self):
        if not self.value >= 0:
            raise InvalidQuantity(type(self).__name__, self.value)

    def __float__(self) -> float:
        return float(self.value)


@dataclass(frozen=True)
class Power(_Quantity):
    """
    Rated power.

    Attributes:
        value: Power in the given unit
        unit: One of 'CV', 'HP', 'kW', 'W'
    """
    unit: str = 'CV'

    def to_watts(self) -> float:
        """Power in Watts using the fixed per-unit multipliers."""
        try:
            factor = POWER_UNIT_TO_WATTS[self.unit]
        except KeyError:
            raise UnknownUnit(self.unit) from None
        return self.value * factor

    def __str__(self) -> str:
        return f"{self.value:.2f} {self.unit}"


@dataclass(frozen=True)
class Voltage(_Quantity):
    """Line voltage [V]."""
    unit: str = 'V'

    def __str__(self) -> str:
        return f"{self.value:.1f} {self.unit}"


@dataclass(frozen=True)
class Current(_Quantity):
    """Line current [A]."""
    unit: str = 'A'

    def __str__(self) -> str:
        return f"{self.value:.2f} {self.unit}"


@dataclass(frozen=True)
class MagneticInduction(_Quantity):
    """Magnetic flux density [T]."""
    unit: str = 'T'

    def __str__(self) -> str:
        return f"{self.value:.4f} {self.unit}"
