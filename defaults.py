"""Centralized application default values for easier review and tweaks."""

from typing import Any, Dict, List, Tuple, Union

CompactCurve = List[Union[str, int]]

# Extremes at step 50 (tint) and step 950 (shade)
DEFAULT_START_L = 98.0
DEFAULT_END_L = 19.0
DEFAULT_START_S = 0.1
DEFAULT_END_S = 0.25

# Piecewise curves: "easing:rate" strings alternating with anchor steps.
# The rates of each half add up to 1.0.
DEFAULT_LIGHTNESS_CURVE: CompactCurve = [
    "linear:0.12", 150, "easeInOutSine:0.88", 500, "easeInOutSine:0.78", 850, "linear:0.22",
]
DEFAULT_SATURATION_CURVE: CompactCurve = [
    "linear:0.12", 150, "easeInOutSine:0.88", 500, "easeInOutSine:0.65", 850, "linear:0.35",
]
DEFAULT_HUE_CURVE: CompactCurve = ["linear", 500, "linear"]

# Legacy 11/13-step generator saturation ranges
LEGACY_TINT_START_S = 0.1
LEGACY_TINT_END_S = 0.5
LEGACY_SHADE_START_S = 0.9
LEGACY_SHADE_END_S = 0.2
LEGACY_STEPS_COUNTS: Tuple[int, ...] = (11, 13)

# Export defaults
DEFAULT_EXPORT_KEY_PREFIX = ""
DEFAULT_EXPORT_LINE_TERMINATOR = ";"
DEFAULT_EXPORT_WRAP_QUOTES = False
# Stored as the PaletteFormat enum value name for cycle-free import.
DEFAULT_EXPORT_FORMAT = "hex"

# Preset ramps. Base colors are OKhsl (h, s, l in 0..1), hue shifts in degrees.
DEFAULT_COLOR_PRESETS: Tuple[Dict[str, Any], ...] = (
    # #f23441, hue 0.0652 is 23.5 degrees
    {"name": "red-500", "base_hue": 0.0652, "base_saturation": 0.941, "base_lightness": 0.569,
     "start_hue_shift": -8.0, "end_hue_shift": -5.0},
    # #f67b29
    {"name": "orange-500", "base_hue": 0.1365, "base_saturation": 0.938, "base_lightness": 0.667,
     "start_hue_shift": 26.0, "end_hue_shift": -20.0},
    # #f5a314
    {"name": "amber-500", "base_hue": 0.2011, "base_saturation": 0.978, "base_lightness": 0.741,
     "start_hue_shift": 20.0, "end_hue_shift": -25.0},
    # #fab905
    {"name": "yellow-500", "base_hue": 0.2301, "base_saturation": 0.996, "base_lightness": 0.795,
     "start_hue_shift": 15.0, "end_hue_shift": -30.0},
    # #c5c020
    {"name": "olive-500", "base_hue": 0.2990, "base_saturation": 0.9, "base_lightness": 0.75,
     "start_hue_shift": 0.0, "end_hue_shift": -5.0},
    # #9dc535
    {"name": "lime-500", "base_hue": 0.3451, "base_saturation": 0.85, "base_lightness": 0.73,
     "start_hue_shift": -10.0, "end_hue_shift": 5.0},
    # #01c15b
    {"name": "green-500", "base_hue": 0.4175, "base_saturation": 0.999, "base_lightness": 0.662,
     "start_hue_shift": -10.0, "end_hue_shift": 12.0},
    # #0cbc7d
    {"name": "emerald-500", "base_hue": 0.4450, "base_saturation": 0.988, "base_lightness": 0.654,
     "start_hue_shift": 0.0, "end_hue_shift": 12.0},
    # #14b8a6
    {"name": "teal-500", "base_hue": 0.5070, "base_saturation": 0.957, "base_lightness": 0.656,
     "start_hue_shift": -5.0, "end_hue_shift": 5.0},
    # #00b8db
    {"name": "cyan-500", "base_hue": 0.6054, "base_saturation": 1.0, "base_lightness": 0.677,
     "start_hue_shift": -5.0, "end_hue_shift": -2.0},
    # #00a6f4
    {"name": "sky-500", "base_hue": 0.6677, "base_saturation": 1.0, "base_lightness": 0.642,
     "start_hue_shift": -5.0, "end_hue_shift": 0.0},
    # #3d88fd
    {"name": "blue-500", "base_hue": 0.7200, "base_saturation": 0.967, "base_lightness": 0.583,
     "start_hue_shift": -5.0, "end_hue_shift": 5.0},
    # #5766fc
    {"name": "indigo-500", "base_hue": 0.7587, "base_saturation": 0.943, "base_lightness": 0.520,
     "start_hue_shift": -5.0, "end_hue_shift": 0.0},
    # #6d4aff
    {"name": "iris-500", "base_hue": 0.7879, "base_saturation": 0.979, "base_lightness": 0.492,
     "start_hue_shift": -5.0, "end_hue_shift": 7.0},
    # #8e51ff
    {"name": "violet-500", "base_hue": 0.8164, "base_saturation": 0.965, "base_lightness": 0.536,
     "start_hue_shift": -5.0, "end_hue_shift": 5.0},
    # #ad48fe
    {"name": "purple-500", "base_hue": 0.8482, "base_saturation": 0.971, "base_lightness": 0.562,
     "start_hue_shift": 4.5, "end_hue_shift": -1.2},
    # #d641ec
    {"name": "fuchsia-500", "base_hue": 0.8950, "base_saturation": 0.923, "base_lightness": 0.601,
     "start_hue_shift": -2.5, "end_hue_shift": 3.5},
    # #f53da5
    {"name": "pink-500", "base_hue": 0.9751, "base_saturation": 0.909, "base_lightness": 0.611,
     "start_hue_shift": -5.0, "end_hue_shift": 3.0},
    # #ee3a59
    {"name": "rose-500", "base_hue": 0.0466, "base_saturation": 0.904, "base_lightness": 0.570,
     "start_hue_shift": -4.0, "end_hue_shift": -12.0},
    # Low-saturation neutrals pin their own saturation extremes.
    # #99615c
    {"name": "sand-500", "base_hue": 0.0702, "base_saturation": 0.377, "base_lightness": 0.481,
     "start_hue_shift": 10.0, "end_hue_shift": -20.0, "start_s": 0.02, "end_s": 0.04},
    # #617085
    {"name": "slate-500", "base_hue": 0.7134, "base_saturation": 0.202, "base_lightness": 0.468,
     "start_hue_shift": -8.0, "end_hue_shift": 8.0, "start_s": 0.02, "end_s": 0.04},
    # #636a79
    {"name": "grey-500", "base_hue": 0.7378, "base_saturation": 0.134, "base_lightness": 0.448,
     "start_hue_shift": -10.0, "end_hue_shift": -5.0, "start_s": 0.02, "end_s": 0.02},
    # #67676f
    {"name": "zinc-500", "base_hue": 0.7943, "base_saturation": 0.067, "base_lightness": 0.440,
     "start_hue_shift": 0.0, "end_hue_shift": 0.0, "start_s": 0.02, "end_s": 0.02},
    # #686868
    {"name": "neutral-500", "base_hue": 0.2497, "base_saturation": 0.0, "base_lightness": 0.441,
     "start_hue_shift": 0.0, "end_hue_shift": 0.0, "start_s": 0.0, "end_s": 0.0},
)
