"""Piecewise easing curves anchored to scale steps."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

from defaults import CompactCurve
from easing import Easing, EasingName, ease, resolve_easing

log = logging.getLogger(__name__)

SCALE_STEPS: Tuple[int, ...] = (50, 100, 150, 200, 300, 400, 500, 600, 700, 800, 850, 900, 950)
BASE_STEP = 500
FIRST_STEP = SCALE_STEPS[0]
LAST_STEP = SCALE_STEPS[-1]


@dataclass(frozen=True)
class CurveSegment:
    """Runs from the previous segment's ``end_step`` (or step 50) to ``end_step``.

    ``rate`` is the share of the half's total progress the segment contributes.
    """

    easing: EasingName
    end_step: int
    rate: float = 1.0


CurveSpec = Tuple[CurveSegment, ...]
CurveLike = Union[CurveSpec, Sequence[CurveSegment], CompactCurve]


def _parse_token(token: str) -> Tuple[Easing, float]:
    name, sep, rate_text = token.partition(":")
    rate = 1.0
    if sep:
        try:
            rate = float(rate_text)
        except ValueError:
            raise ValueError(f"invalid rate in curve token {token!r}") from None
    return resolve_easing(name.strip()), rate


def parse_curve_spec(compact: CompactCurve) -> CurveSpec:
    """Parse ``["easing:rate", step, "easing:rate", ...]`` into segments.

    A trailing easing without an anchor step runs to step 950.
    """
    segments: List[CurveSegment] = []
    pending = None
    for item in compact:
        if isinstance(item, str):
            if pending is not None:
                raise ValueError(f"curve token {item!r} follows {pending!r} without an anchor step")
            pending = item
            continue
        if pending is None:
            raise ValueError(f"anchor step {item!r} has no easing before it")
        if isinstance(item, bool) or not isinstance(item, (int, float)):
            raise ValueError(f"anchor step must be a number, got {item!r}")
        easing, rate = _parse_token(pending)
        segments.append(CurveSegment(easing=easing, end_step=int(item), rate=rate))
        pending = None
    if pending is not None:
        easing, rate = _parse_token(pending)
        segments.append(CurveSegment(easing=easing, end_step=LAST_STEP, rate=rate))
    spec = tuple(segments)
    segment_ranges(spec)
    return spec


def as_curve_spec(curve: CurveLike) -> CurveSpec:
    if all(isinstance(item, CurveSegment) for item in curve):
        spec = tuple(curve)
        segment_ranges(spec)
        return spec
    return parse_curve_spec(curve)


def segment_ranges(spec: CurveSpec) -> List[Tuple[int, int, CurveSegment]]:
    """Pair each segment with its ``(start, end)`` step range."""
    ranges = []
    start = FIRST_STEP
    for segment in spec:
        end = segment.end_step
        if end not in SCALE_STEPS:
            raise ValueError(f"curve anchor {end!r} is not a scale step")
        if end <= start:
            raise ValueError(f"curve anchors must increase, got {end} after {start}")
        ranges.append((start, end, segment))
        start = end
    return ranges


def _half_ranges(spec: CurveSpec, tint: bool) -> List[Tuple[int, int, CurveSegment]]:
    if tint:
        return [r for r in segment_ranges(spec) if r[1] <= BASE_STEP]
    return [r for r in segment_ranges(spec) if r[0] >= BASE_STEP]


def curve_progress(step: int, spec: CurveSpec) -> float:
    """Cumulative eased progress of ``step`` through its half of the scale.

    Tints progress from step 50 toward the base, shades from the base toward
    step 950. Step 500 and unknown steps report 0.0.
    """
    if step not in SCALE_STEPS or step == BASE_STEP:
        return 0.0
    tint = step < BASE_STEP
    ranges = _half_ranges(spec, tint)
    if not ranges:
        # No segments for this half: linear across it.
        if tint:
            ranges = [(FIRST_STEP, BASE_STEP, CurveSegment(Easing.LINEAR, BASE_STEP))]
        else:
            ranges = [(BASE_STEP, LAST_STEP, CurveSegment(Easing.LINEAR, LAST_STEP))]

    total = 0.0
    for start, end, segment in ranges:
        fraction = min(1.0, max(0.0, (step - start) / (end - start)))
        total += ease(fraction, segment.easing) * segment.rate
        if step <= end:
            break
    return min(total, 1.0)


def evaluate_piecewise_curve(
    step: int,
    spec: CurveSpec,
    start_value: float,
    base_value: float,
    end_value: float,
) -> float:
    """Value of a curve-driven property at ``step``.

    Tints move from ``start_value`` toward ``base_value``, shades from
    ``base_value`` toward ``end_value``. Step 500 is ``base_value`` exactly.
    """
    if step not in SCALE_STEPS:
        log.warning("Unknown scale step %r, using the base value", step)
        return base_value
    if step == BASE_STEP:
        return base_value
    p = curve_progress(step, spec)
    if step < BASE_STEP:
        return start_value + (base_value - start_value) * p
    return base_value + (end_value - base_value) * p
