"""
Slider parsing and the small interpolation helpers shared by adjustments.
"""
import numpy as np
from ..constants import ADJUSTMENT_MIN, ADJUSTMENT_MAX
from ..core.errors import InvalidInputError


def slider_value(label: str, value: float, low: float = ADJUSTMENT_MIN, high: float = ADJUSTMENT_MAX) -> float:
    """
    Coerce a slider to float and clamp it to [low, high].

    Raises:
        InvalidInputError: If value is not a number or is NaN
    """
    try:
        value = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"{label} must be a number, got {value!r}") from e
    if value != value:
        raise InvalidInputError(f"{label} must not be NaN")
    return max(low, min(high, value))


def smoothstep(edge0: float, edge1: float, x):
    """Hermite step between edge0 and edge1; 0 everywhere when the edges coincide."""
    x = np.asarray(x, dtype=np.float64)
    if edge0 == edge1:
        return np.zeros_like(x)
    t = np.clip((x - edge0) / (edge1 - edge0), 0.0, 1.0)
    return t * t * (3.0 - 2.0 * t)


def lerp(a, b, t):
    return a + (b - a) * t
