"""Color space utilities for OKLab/OKLCH conversions and display output."""
from __future__ import annotations

import math
from typing import NamedTuple, Tuple

RgbTuple = Tuple[int, int, int]
OklchColor = Tuple[float, float, float]
OklabColor = Tuple[float, float, float]
SrgbFloat = Tuple[float, float, float]

_HEX_DIGITS = set("0123456789abcdefABCDEF")


class ScaleColor(NamedTuple):
    """An OKLCH coordinate with lightness on the 0..100 scale."""

    lightness: float
    chroma: float
    hue: float


# --- Basic RGB helpers -----------------------------------------------------

def hex_to_rgb(hex_color: str) -> RgbTuple:
    raw = hex_color.strip().lstrip("#")
    if len(raw) == 3:
        raw = "".join(ch * 2 for ch in raw)
    if len(raw) != 6 or not set(raw) <= _HEX_DIGITS:
        raise ValueError(f"invalid hex color: {hex_color!r}")
    return (int(raw[0:2], 16), int(raw[2:4], 16), int(raw[4:6], 16))


def rgb_to_hex(rgb: RgbTuple) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def _srgb_byte_to_float(value: int) -> float:
    return max(0.0, min(1.0, value / 255.0))


def _srgb_float_to_byte(value: float) -> int:
    return max(0, min(255, int(round(value * 255.0))))


def _srgb_to_linear(channel: float) -> float:
    if channel <= 0.04045:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def _linear_to_srgb(channel: float) -> float:
    if channel <= 0.0031308:
        return channel * 12.92
    return 1.055 * (channel ** (1 / 2.4)) - 0.055


# --- OKLab/OKLCH conversions -----------------------------------------------

def linear_srgb_to_oklab(rgb: SrgbFloat) -> OklabColor:
    r_l, g_l, b_l = rgb

    l = 0.4122214708 * r_l + 0.5363325363 * g_l + 0.0514459929 * b_l
    m = 0.2119034982 * r_l + 0.6806995451 * g_l + 0.1073969566 * b_l
    s = 0.0883024619 * r_l + 0.2817188376 * g_l + 0.6299787005 * b_l

    l_ = math.copysign(abs(l) ** (1 / 3), l)
    m_ = math.copysign(abs(m) ** (1 / 3), m)
    s_ = math.copysign(abs(s) ** (1 / 3), s)

    L = 0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_
    a = 1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_
    b = 0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_
    return (L, a, b)


def oklab_to_linear_srgb(oklab: OklabColor) -> SrgbFloat:
    L, a, b = oklab
    l_ = L + 0.3963377774 * a + 0.2158037573 * b
    m_ = L - 0.1055613458 * a - 0.0638541728 * b
    s_ = L - 0.0894841775 * a - 1.2914855480 * b

    l = l_ ** 3
    m = m_ ** 3
    s = s_ ** 3

    r_l = +4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s
    g_l = -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s
    b_l = -0.0041960863 * l - 0.7034186147 * m + 1.7076147010 * s
    return (r_l, g_l, b_l)


def _oklch_to_srgb_float(oklch: OklchColor) -> SrgbFloat:
    L, C, h = oklch
    a = C * math.cos(math.radians(h))
    b = C * math.sin(math.radians(h))
    return tuple(_linear_to_srgb(c) for c in oklab_to_linear_srgb((L, a, b)))


def rgb_to_oklch(rgb: RgbTuple) -> OklchColor:
    linear = tuple(_srgb_to_linear(_srgb_byte_to_float(c)) for c in rgb)
    L, a, b = linear_srgb_to_oklab(linear)
    C = math.sqrt(a * a + b * b)
    h = normalize_hue(math.degrees(math.atan2(b, a)))
    return (L, C, h)


def oklch_to_rgb(oklch: OklchColor) -> RgbTuple:
    # Out-of-gamut channels are clipped per channel.
    return tuple(_srgb_float_to_byte(c) for c in _oklch_to_srgb_float(oklch))


def hex_to_oklch(hex_color: str) -> OklchColor:
    return rgb_to_oklch(hex_to_rgb(hex_color))


def oklch_to_hex(oklch: OklchColor) -> str:
    return rgb_to_hex(oklch_to_rgb(oklch))


def normalize_hue(hue: float) -> float:
    wrapped = hue % 360.0
    # A tiny negative input rounds up to exactly 360.0.
    return 0.0 if wrapped >= 360.0 else wrapped


# --- Scale colors (lightness 0..100) ---------------------------------------

def scale_color_to_oklch(color: ScaleColor) -> OklchColor:
    return (color.lightness / 100.0, color.chroma, color.hue)


def scale_color_to_rgb(color: ScaleColor) -> RgbTuple:
    return oklch_to_rgb(scale_color_to_oklch(color))


def scale_color_to_hex(color: ScaleColor) -> str:
    return oklch_to_hex(scale_color_to_oklch(color))


# --- Contrast --------------------------------------------------------------

def relative_luminance(hex_color: str) -> float:
    """WCAG 2.x relative luminance of an sRGB hex color."""
    channels = []
    for value in hex_to_rgb(hex_color):
        c = value / 255.0
        channels.append(c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4)
    r, g, b = channels
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_color(hex_color: str) -> str:
    """Pick white or black, whichever contrasts more with ``hex_color``."""
    luminance = relative_luminance(hex_color)
    contrast_white = 1.05 / (luminance + 0.05)
    contrast_black = (luminance + 0.05) / 0.05
    return "#ffffff" if contrast_white >= contrast_black else "#000000"


# --- Toe remap helpers -----------------------------------------------------

K1 = 0.206
K2 = 0.03
K3 = (1 + K1) / (1 + K2)


def toe(x: float) -> float:
    return 0.5 * (K3 * x - K1 + math.sqrt((K3 * x - K1) ** 2 + 4 * K2 * K3 * x))


def toe_inv(x: float) -> float:
    return (x * x + K1 * x) / (K3 * (x + K2))
