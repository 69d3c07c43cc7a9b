"""
Evaluation configuration.

The configuration is an immutable value handed to every evaluation call.
Nothing in the parser keeps a reference to it, so two evaluations running
with different angle units never observe each other's settings.
"""

from dataclasses import dataclass, replace
from enum import Enum


class AngleUnit(Enum):
    """Unit used for trigonometric arguments and inverse-trigonometric results"""
    DEGREES = "degrees"
    RADIANS = "radians"

    @classmethod
    def from_name(cls, name: str) -> 'AngleUnit':
        key = (name or "").strip().lower()
        for unit in cls:
            if unit.value == key or unit.name.lower() == key:
                return unit
        raise ValueError(f"Invalid angle unit '{name}'. Choose 'degrees' or 'radians'.")


@dataclass(frozen=True)
class EvaluationConfig:
    angle_unit: AngleUnit = AngleUnit.DEGREES

    @property
    def uses_degrees(self) -> bool:
        return self.angle_unit is AngleUnit.DEGREES

    def with_angle_unit(self, angle_unit: AngleUnit) -> 'EvaluationConfig':
        """Return a copy of this configuration using another angle unit"""
        return replace(self, angle_unit=angle_unit)


DEFAULT_CONFIG = EvaluationConfig()
