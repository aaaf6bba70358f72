"""OKhsl <-> OKLCH conversion.

Follows Björn Ottosson's OKhsl construction
(https://bottosson.github.io/posts/colorpicker/#okhsl). Saturation is mapped
onto chroma through three characteristic chroma values per lightness and hue,
so that ``s = 1`` always lands on the sRGB gamut boundary.

Scale-facing functions use OKLCH lightness on the 0..100 scale and hue in
degrees; OKhsl components are all in 0..1.
"""
from __future__ import annotations

import math
from typing import NamedTuple

from color_spaces import ScaleColor, normalize_hue, oklab_to_linear_srgb, toe, toe_inv

# Breakpoint of the two-segment saturation -> chroma interpolation.
MID = 0.8
MID_INV = 1.25


class OkhslColor(NamedTuple):
    h: float
    s: float
    l: float


class Cusp(NamedTuple):
    L: float
    C: float


class STPair(NamedTuple):
    S: float
    T: float


class ChromaBounds(NamedTuple):
    c_0: float
    c_mid: float
    c_max: float


def _cbrt(x: float) -> float:
    return math.copysign(abs(x) ** (1 / 3), x)


# --- Gamut geometry --------------------------------------------------------

def compute_max_saturation(a: float, b: float) -> float:
    """Max saturation ``S = C / L`` for the normalized hue direction ``(a, b)``.

    The channel that clips first is picked by three linear threshold tests, a
    polynomial gives the first estimate and one Halley step refines it (max
    error around 1e-6, worse for some blue hues).
    """
    if -1.88170328 * a - 0.80936493 * b > 1:
        # Red
        k0, k1, k2, k3, k4 = 1.19086277, 1.76576728, 0.59662641, 0.75515197, 0.56771245
        wl, wm, ws = 4.0767416621, -3.3077115913, 0.2309699292
    elif 1.81444104 * a - 1.19445276 * b > 1:
        # Green
        k0, k1, k2, k3, k4 = 0.73956515, -0.45954404, 0.08285427, 0.12541070, 0.14503204
        wl, wm, ws = -1.2684380046, 2.6097574011, -0.3413193965
    else:
        # Blue
        k0, k1, k2, k3, k4 = 1.35733652, -0.00915799, -1.15130210, -0.50559606, 0.00692167
        wl, wm, ws = -0.0041960863, -0.7034186147, 1.7076147010

    S = k0 + k1 * a + k2 * b + k3 * a * a + k4 * a * b

    k_l = 0.3963377774 * a + 0.2158037573 * b
    k_m = -0.1055613458 * a - 0.0638541728 * b
    k_s = -0.0894841775 * a - 1.2914855480 * b

    l_ = 1 + S * k_l
    m_ = 1 + S * k_m
    s_ = 1 + S * k_s

    l = l_ * l_ * l_
    m = m_ * m_ * m_
    s = s_ * s_ * s_

    l_dS = 3 * k_l * l_ * l_
    m_dS = 3 * k_m * m_ * m_
    s_dS = 3 * k_s * s_ * s_

    l_d2S = 6 * k_l * k_l * l_
    m_d2S = 6 * k_m * k_m * m_
    s_d2S = 6 * k_s * k_s * s_

    f = wl * l + wm * m + ws * s
    f1 = wl * l_dS + wm * m_dS + ws * s_dS
    f2 = wl * l_d2S + wm * m_d2S + ws * s_d2S

    return S - f * f1 / (f1 * f1 - 0.5 * f * f2)


def find_cusp(a: float, b: float) -> Cusp:
    S_cusp = compute_max_saturation(a, b)
    # Scale so the brightest channel of the max-saturation color hits 1.
    r, g, b_ = oklab_to_linear_srgb((1.0, S_cusp * a, S_cusp * b))
    L_cusp = _cbrt(1 / max(r, g, b_, 0.0))
    return Cusp(L=L_cusp, C=L_cusp * S_cusp)


def find_gamut_intersection(
    a: float, b: float, L1: float, C1: float, L0: float, cusp: Cusp
) -> float:
    """Intersect the line from ``(L0, 0)`` to ``(L1, C1)`` with the gamut triangle.

    Returns the fraction ``t`` along the line; with ``C1 = 1`` that is the
    chroma at the intersection.
    """
    if (L1 - L0) * cusp.C - (cusp.L - L0) * C1 <= 0:
        # Lower half
        return cusp.C * L0 / (C1 * cusp.L + cusp.C * (L0 - L1))
    # Upper half
    return cusp.C * (L0 - 1) / (C1 * (cusp.L - 1) + cusp.C * (L0 - L1))


def get_st_mid(a: float, b: float) -> STPair:
    """Empirical fit of the mid-saturation S/T slopes for hue direction ``(a, b)``."""
    S = 0.11516993 + 1 / (
        7.44778970 + 4.15901240 * b
        + a * (-2.19557347 + 1.75198401 * b
               + a * (-2.13704948 - 10.02301043 * b
                      + a * (-4.24894561 + 5.38770819 * b + 4.69891013 * a)))
    )
    T = 0.11239642 + 1 / (
        1.61320320 - 0.68124379 * b
        + a * (0.40370612 + 0.90148123 * b
               + a * (-0.27087943 + 0.61223990 * b
                      + a * (0.00299215 - 0.45399568 * b - 0.14661872 * a)))
    )
    return STPair(S=S, T=T)


def get_cs(L: float, a: float, b: float) -> ChromaBounds:
    """Characteristic chroma values at OKLab lightness ``L`` (0..1, exclusive)."""
    cusp = find_cusp(a, b)
    c_max = find_gamut_intersection(a, b, L, 1.0, L, cusp)
    st_max = STPair(S=cusp.C / cusp.L, T=cusp.C / (1 - cusp.L))

    # Compensates for the curved part of the gamut shape.
    k = c_max / min(L * st_max.S, (1 - L) * st_max.T)

    # Soft minimums instead of the sharp triangle keep chroma smooth in L.
    st_mid = get_st_mid(a, b)
    c_a = L * st_mid.S
    c_b = (1 - L) * st_mid.T
    c_mid = 0.9 * k * math.sqrt(math.sqrt(1 / (1 / c_a ** 4 + 1 / c_b ** 4)))

    # Hue independent; roughly the average S/T values.
    c_a = L * 0.4
    c_b = (1 - L) * 0.8
    c_0 = math.sqrt(1 / (1 / (c_a * c_a) + 1 / (c_b * c_b)))

    return ChromaBounds(c_0=c_0, c_mid=c_mid, c_max=c_max)


# --- Conversions -----------------------------------------------------------

def oklch_to_okhsl(L: float, C: float, H: float) -> OkhslColor:
    """Convert OKLCH (``L`` 0..100, ``H`` degrees) to OKhsl."""
    L_lab = L / 100.0
    h_rad = math.radians(H)
    a = C * math.cos(h_rad)
    b = C * math.sin(h_rad)
    C_lab = math.hypot(a, b)
    l = toe(L_lab)

    if C_lab == 0 or L_lab <= 0 or L_lab >= 1:
        # Achromatic axis: hue is undefined, keep the given one.
        return OkhslColor(h=normalize_hue(H) / 360.0, s=0.0, l=l)

    a_ = a / C_lab
    b_ = b / C_lab
    h = 0.5 + 0.5 * math.atan2(-b, -a) / math.pi

    c_0, c_mid, c_max = get_cs(L_lab, a_, b_)

    if C_lab < c_mid:
        k_1 = MID * c_0
        k_2 = 1 - k_1 / c_mid
        t = C_lab / (k_1 + k_2 * C_lab)
        s = t * MID
    else:
        k_0 = c_mid
        k_1 = (1 - MID) * c_mid * c_mid * MID_INV * MID_INV / c_0
        k_2 = 1 - k_1 / (c_max - c_mid)
        t = (C_lab - k_0) / (k_1 + k_2 * (C_lab - k_0))
        s = MID + (1 - MID) * t

    return OkhslColor(h=h, s=s, l=l)


def okhsl_to_oklch(h: float, s: float, l: float) -> ScaleColor:
    """Convert OKhsl to OKLCH (lightness 0..100, hue in degrees).

    At ``s = 0`` chroma is 0 with slope ``c_0``, at ``s = 0.8`` it reaches
    ``c_mid`` and at ``s = 1`` the gamut boundary ``c_max``.
    """
    H = normalize_hue(h * 360.0)
    if l >= 1.0:
        return ScaleColor(100.0, 0.0, H)
    if l <= 0.0:
        return ScaleColor(0.0, 0.0, H)

    a_ = math.cos(2 * math.pi * h)
    b_ = math.sin(2 * math.pi * h)
    L = toe_inv(l)

    c_0, c_mid, c_max = get_cs(L, a_, b_)

    if s < MID:
        t = MID_INV * s
        k_1 = MID * c_0
        k_2 = 1 - k_1 / c_mid
        C = t * k_1 / (1 - k_2 * t)
    else:
        t = (s - MID) / (1 - MID)
        k_0 = c_mid
        k_1 = (1 - MID) * c_mid * c_mid * MID_INV * MID_INV / c_0
        k_2 = 1 - k_1 / (c_max - c_mid)
        C = k_0 + t * k_1 / (1 - k_2 * t)

    return ScaleColor(L * 100.0, C, H)
