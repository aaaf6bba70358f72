import logging
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from easing import (  # noqa: E402
    EASING_FUNCTIONS,
    Easing,
    cubic_bezier,
    ease,
    resolve_easing,
)

GRID = [i / 20 for i in range(21)]


def test_registry_covers_every_easing():
    assert set(EASING_FUNCTIONS) == set(Easing)


@pytest.mark.parametrize("easing", list(Easing))
def test_easing_endpoints(easing):
    assert ease(0.0, easing) == pytest.approx(0.0, abs=1e-3)
    assert ease(1.0, easing) == pytest.approx(1.0, abs=1e-3)


@pytest.mark.parametrize("easing", list(Easing))
def test_easing_is_non_decreasing(easing):
    values = [ease(t, easing) for t in GRID]
    assert all(values[i] <= values[i + 1] + 1e-4 for i in range(len(values) - 1))


@pytest.mark.parametrize(
    "name, t, expected",
    [
        ("linear", 0.3, 0.3),
        ("easeInQuad", 0.5, 0.25),
        ("easeOutQuad", 0.5, 0.75),
        ("easeInCubic", 0.5, 0.125),
        ("easeInOutCubic", 0.25, 0.0625),
        ("easeInOutQuart", 0.75, 0.96875),
        ("easeInOutSine", 0.5, 0.5),
        ("easeInExpo", 1.0, 1.0),
        ("easeOutExpo", 0.0, 0.0),
    ],
)
def test_named_easing_values(name, t, expected):
    assert ease(t, name) == pytest.approx(expected)


def test_ease_in_and_out_are_mirrored():
    for t in GRID:
        assert ease(t, Easing.EASE_OUT_QUINT) == pytest.approx(
            1.0 - ease(1.0 - t, Easing.EASE_IN_QUINT)
        )


def test_resolve_easing_accepts_names_and_members():
    assert resolve_easing("easeInOutSine") is Easing.EASE_IN_OUT_SINE
    assert resolve_easing(Easing.EASE_OUT_EXPO) is Easing.EASE_OUT_EXPO


def test_unknown_easing_falls_back_to_linear(caplog):
    with caplog.at_level(logging.WARNING, logger="easing"):
        assert ease(0.37, "easeInBounce") == pytest.approx(0.37)
    assert "easeInBounce" in caplog.text


def test_cubic_bezier_diagonal_control_points_is_identity():
    for t in GRID:
        assert cubic_bezier(t, 0.25, 0.25, 0.75, 0.75) == pytest.approx(t, abs=1e-4)
        assert cubic_bezier(t, 0.0, 0.0, 1.0, 1.0) == pytest.approx(t, abs=1e-4)


def test_bezier_tint_starts_slowly():
    assert ease(0.25, Easing.BEZIER_TINT) < 0.25
    assert ease(0.5, Easing.BEZIER_TINT_HUE) == 0.5
