"""Named easing curves for remapping normalized progress."""
from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Callable, Dict, Tuple, Union

log = logging.getLogger(__name__)

EasingFunction = Callable[[float], float]
BezierPoints = Tuple[float, float, float, float]


class Easing(str, Enum):
    LINEAR = "linear"
    EASE_IN_SINE = "easeInSine"
    EASE_OUT_SINE = "easeOutSine"
    EASE_IN_OUT_SINE = "easeInOutSine"
    EASE_IN_QUAD = "easeInQuad"
    EASE_OUT_QUAD = "easeOutQuad"
    EASE_IN_OUT_QUAD = "easeInOutQuad"
    EASE_IN_CUBIC = "easeInCubic"
    EASE_OUT_CUBIC = "easeOutCubic"
    EASE_IN_OUT_CUBIC = "easeInOutCubic"
    EASE_IN_QUART = "easeInQuart"
    EASE_OUT_QUART = "easeOutQuart"
    EASE_IN_OUT_QUART = "easeInOutQuart"
    EASE_IN_QUINT = "easeInQuint"
    EASE_OUT_QUINT = "easeOutQuint"
    EASE_IN_OUT_QUINT = "easeInOutQuint"
    EASE_IN_EXPO = "easeInExpo"
    EASE_OUT_EXPO = "easeOutExpo"
    EASE_IN_OUT_EXPO = "easeInOutExpo"
    # Literal control-point curves used by the legacy 11/13-step generator.
    BEZIER_TINT = "bezierTint"
    BEZIER_SHADE = "bezierShade"
    BEZIER_TINT_HUE = "bezierTintHue"
    BEZIER_SHADE_HUE = "bezierShadeHue"
    BEZIER_TINT_SATURATION = "bezierTintSaturation"
    BEZIER_SHADE_SATURATION = "bezierShadeSaturation"


EasingName = Union[Easing, str]


# --- Cubic bezier ----------------------------------------------------------

BEZIER_ITERATIONS = 20
BEZIER_PRECISION = 1e-4


def cubic_bezier(t: float, x1: float, y1: float, x2: float, y2: float) -> float:
    """Approximate CSS ``cubic-bezier(x1, y1, x2, y2)`` at progress ``t``.

    The curve runs from (0, 0) to (1, 1). A bisection on the parametric X
    curve finds the parameter whose X equals ``t``; the Y at that parameter is
    returned.
    """

    def bezier_x(u: float) -> float:
        return 3 * (1 - u) * (1 - u) * u * x1 + 3 * (1 - u) * u * u * x2 + u * u * u

    def bezier_y(u: float) -> float:
        return 3 * (1 - u) * (1 - u) * u * y1 + 3 * (1 - u) * u * u * y2 + u * u * u

    low, high = 0.0, 1.0
    mid = 0.5
    for _ in range(BEZIER_ITERATIONS):
        mid = (low + high) / 2
        x = bezier_x(mid)
        if abs(x - t) < BEZIER_PRECISION:
            break
        if x < t:
            low = mid
        else:
            high = mid
    return bezier_y(mid)


# --- In / out / in-out families --------------------------------------------


def _power_in(exponent: int) -> EasingFunction:
    return lambda t: t ** exponent


def _sine_in(t: float) -> float:
    return 1.0 - math.cos(t * math.pi / 2)


def _expo_in(t: float) -> float:
    return 0.0 if t == 0 else 2.0 ** (10 * t - 10)


def _ease_out(ease_in: EasingFunction) -> EasingFunction:
    return lambda t: 1.0 - ease_in(1.0 - t)


def _ease_in_out(ease_in: EasingFunction) -> EasingFunction:
    def ease_in_out(t: float) -> float:
        if t < 0.5:
            return ease_in(2 * t) / 2
        return 1.0 - ease_in(2 - 2 * t) / 2

    return ease_in_out


def _bezier(points: BezierPoints) -> EasingFunction:
    return lambda t: cubic_bezier(t, *points)


def _linear(t: float) -> float:
    return t


BEZIER_CURVES: Dict[Easing, BezierPoints] = {
    # Gentle start, strong acceleration at the end.
    Easing.BEZIER_TINT: (0.8, 0.05, 0.6, 0.75),
    # S-shape with a lifted middle section.
    Easing.BEZIER_SHADE: (0.7, 0.075, 0.3, 0.5),
    Easing.BEZIER_TINT_SATURATION: (0.6, 0.1, 0.65, 1.0),
    Easing.BEZIER_SHADE_SATURATION: (0.4, 0.0, 0.6, 1.0),
}

_FAMILIES: Dict[str, EasingFunction] = {
    "Sine": _sine_in,
    "Quad": _power_in(2),
    "Cubic": _power_in(3),
    "Quart": _power_in(4),
    "Quint": _power_in(5),
    "Expo": _expo_in,
}


def _build_registry() -> Dict[Easing, EasingFunction]:
    registry: Dict[Easing, EasingFunction] = {
        Easing.LINEAR: _linear,
        Easing.BEZIER_TINT_HUE: _linear,
        Easing.BEZIER_SHADE_HUE: _linear,
    }
    for family, ease_in in _FAMILIES.items():
        registry[Easing(f"easeIn{family}")] = ease_in
        registry[Easing(f"easeOut{family}")] = _ease_out(ease_in)
        registry[Easing(f"easeInOut{family}")] = _ease_in_out(ease_in)
    for easing, points in BEZIER_CURVES.items():
        registry[easing] = _bezier(points)
    return registry


EASING_FUNCTIONS: Dict[Easing, EasingFunction] = _build_registry()


def resolve_easing(name: EasingName) -> Easing:
    """Look up an easing by name, falling back to linear for unknown names."""
    if isinstance(name, Easing):
        return name
    try:
        return Easing(name)
    except ValueError:
        log.warning("Unknown easing type %r, falling back to linear", name)
        return Easing.LINEAR


def ease(t: float, name: EasingName = Easing.LINEAR) -> float:
    return EASING_FUNCTIONS[resolve_easing(name)](t)
