"""
    Scalar types shared by the models: positions, weights, the
    "unreachable" distance sentinel.
"""
import math
from typing import Any, Tuple

# Presentation-only coordinates of a node
Position = Tuple[float, float]

# Distance of a node the search never reached
UNREACHABLE = math.inf


def is_unreachable(distance: float) -> bool:
    return distance == UNREACHABLE


class WeightValidator:
    """Validation and conversion of edge weights"""

    @staticmethod
    def is_numeric(value: Any) -> bool:
        """Check whether the value can be read as a finite number"""
        if isinstance(value, bool):
            return False
        if isinstance(value, (int, float)):
            return math.isfinite(value)
        if isinstance(value, str):
            try:
                return math.isfinite(float(value.strip()))
            except ValueError:
                return False
        return False

    @staticmethod
    def convert(value: Any) -> float:
        """
        Convert a raw weight (number or numeric string) to float.

        Raises:
            ValueError: If the value is empty, non-numeric or not finite.
        """
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValueError("Weight is required.")
        if not WeightValidator.is_numeric(value):
            raise ValueError(f"Weight must be a number, got {value!r}.")
        return float(value.strip()) if isinstance(value, str) else float(value)

    @staticmethod
    def is_negative(weight: float) -> bool:
        return weight < 0
