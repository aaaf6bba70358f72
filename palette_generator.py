import json
import logging
import math
import re
from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import typer

from color_spaces import (
    ScaleColor,
    normalize_hue,
    scale_color_to_hex,
    scale_color_to_rgb,
)
from curves import (
    BASE_STEP,
    SCALE_STEPS,
    CurveLike,
    as_curve_spec,
    evaluate_piecewise_curve,
)
from defaults import (
    DEFAULT_COLOR_PRESETS,
    DEFAULT_END_L,
    DEFAULT_END_S,
    DEFAULT_EXPORT_FORMAT,
    DEFAULT_EXPORT_KEY_PREFIX,
    DEFAULT_EXPORT_LINE_TERMINATOR,
    DEFAULT_EXPORT_WRAP_QUOTES,
    DEFAULT_HUE_CURVE,
    DEFAULT_LIGHTNESS_CURVE,
    DEFAULT_SATURATION_CURVE,
    DEFAULT_START_L,
    DEFAULT_START_S,
    LEGACY_SHADE_END_S,
    LEGACY_SHADE_START_S,
    LEGACY_STEPS_COUNTS,
    LEGACY_TINT_END_S,
    LEGACY_TINT_START_S,
)
from easing import Easing, ease
from okhsl import okhsl_to_oklch, oklch_to_okhsl

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScaleConfig:
    """Inputs for one 13-step ramp. ``base_*`` is the step-500 OKLCH color."""

    base_l: float
    base_c: float
    base_h: float
    start_hue_shift: float = 0.0
    end_hue_shift: float = 0.0
    start_l: float = DEFAULT_START_L
    end_l: float = DEFAULT_END_L
    start_s: float = DEFAULT_START_S
    end_s: float = DEFAULT_END_S
    lightness_curve: CurveLike = field(default_factory=lambda: list(DEFAULT_LIGHTNESS_CURVE))
    saturation_curve: CurveLike = field(default_factory=lambda: list(DEFAULT_SATURATION_CURVE))
    hue_curve: CurveLike = field(default_factory=lambda: list(DEFAULT_HUE_CURVE))

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_h", normalize_hue(self.base_h))
        for name in ("lightness_curve", "saturation_curve", "hue_curve"):
            object.__setattr__(self, name, as_curve_spec(getattr(self, name)))

    @property
    def base_color(self) -> ScaleColor:
        return ScaleColor(self.base_l, self.base_c, self.base_h)


@dataclass(frozen=True)
class ColorConfig:
    """A named ramp whose step-500 color is given in OKhsl."""

    name: str
    base_hue: float
    base_saturation: float
    base_lightness: float
    start_hue_shift: float = 0.0
    end_hue_shift: float = 0.0
    start_l: Optional[float] = None
    end_l: Optional[float] = None
    start_s: Optional[float] = None
    end_s: Optional[float] = None
    lightness_curve: Optional[CurveLike] = None
    saturation_curve: Optional[CurveLike] = None
    hue_curve: Optional[CurveLike] = None

    @property
    def short_name(self) -> str:
        return self.name.split("-")[0]


@dataclass
class GeneratedPalette:
    name: str
    colors: Dict[int, ScaleColor]
    _hex_cache: Dict[int, str] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def hex_colors(self) -> Dict[int, str]:
        if not self._hex_cache:
            self._hex_cache = {
                step: scale_color_to_hex(color) for step, color in self.colors.items()
            }
        return self._hex_cache


class PaletteFormat(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    OKLCH = "oklch"


class ExportStyle(str, Enum):
    JSON = "json"
    OBJECT = "object"


@dataclass
class PaletteExportOptions:
    key_prefix: str = DEFAULT_EXPORT_KEY_PREFIX
    line_terminator: str = DEFAULT_EXPORT_LINE_TERMINATOR
    wrap_values_in_quotes: bool = DEFAULT_EXPORT_WRAP_QUOTES


# --- Scale generation ------------------------------------------------------


def _gamut_chroma(hue: float, saturation: float, lightness: float) -> float:
    if saturation <= 0:
        return 0.0
    chroma = okhsl_to_oklch(hue / 360.0, saturation, lightness).chroma
    if not math.isfinite(chroma) or chroma < 0:
        log.warning(
            "OKhsl inversion gave chroma %r for h=%.2f s=%.3f l=%.3f, using 0",
            chroma,
            hue,
            saturation,
            lightness,
        )
        return 0.0
    return chroma


def generate_scale(config: ScaleConfig) -> List[ScaleColor]:
    """Build the 13 colors of a ramp, ordered from the lightest tint to the darkest shade."""
    base_okhsl = oklch_to_okhsl(config.base_l, config.base_c, config.base_h)

    scale: List[ScaleColor] = []
    for step in SCALE_STEPS:
        if step == BASE_STEP:
            scale.append(config.base_color)
            continue

        lightness = evaluate_piecewise_curve(
            step, config.lightness_curve, config.start_l, config.base_l, config.end_l
        )
        saturation = evaluate_piecewise_curve(
            step, config.saturation_curve, config.start_s, base_okhsl.s, config.end_s
        )
        hue_shift = evaluate_piecewise_curve(
            step, config.hue_curve, config.start_hue_shift, 0.0, config.end_hue_shift
        )
        hue = normalize_hue(config.base_h + hue_shift)

        # Chroma is looked up at the base OKhsl lightness so lightness and
        # saturation progressions stay independent.
        chroma = _gamut_chroma(hue, saturation, base_okhsl.l)
        scale.append(ScaleColor(lightness, chroma, hue))

    return scale


def generate_tint_shade_scale(
    *,
    base_l: float,
    base_c: float,
    base_h: float,
    start_l: float,
    end_l: float,
    start_hue_shift: float,
    end_hue_shift: float,
    steps_count: int,
    tint_start_s: float = LEGACY_TINT_START_S,
    tint_end_s: float = LEGACY_TINT_END_S,
    shade_start_s: float = LEGACY_SHADE_START_S,
    shade_end_s: float = LEGACY_SHADE_END_S,
) -> List[ScaleColor]:
    """Older 11/13-step ramp driven by one global bezier curve per half."""
    if steps_count not in LEGACY_STEPS_COUNTS:
        raise ValueError("steps_count must be 11 or 13")

    mid = steps_count // 2
    base_h = normalize_hue(base_h)
    base_okhsl = oklch_to_okhsl(base_l, base_c, base_h)
    scale: List[ScaleColor] = []

    for i in range(mid + 1):
        if i == mid:
            scale.append(ScaleColor(base_l, base_c, base_h))
            continue
        t = i / mid
        lightness = start_l + (base_l - start_l) * ease(t, Easing.BEZIER_TINT)
        hue = base_h + start_hue_shift * (1 - ease(t, Easing.BEZIER_TINT_HUE))
        saturation = tint_start_s + (tint_end_s - tint_start_s) * ease(
            t, Easing.BEZIER_TINT_SATURATION
        )
        hue = normalize_hue(hue)
        scale.append(ScaleColor(lightness, _gamut_chroma(hue, saturation, base_okhsl.l), hue))

    for i in range(mid + 1, steps_count):
        t = (i - mid) / mid
        # Front-load the first shades.
        adjusted_t = t * 2 if t < 0.2 else 0.4 + (t - 0.2) * 0.75
        lightness = base_l - (base_l - end_l) * ease(adjusted_t, Easing.BEZIER_SHADE)
        hue = normalize_hue(base_h + end_hue_shift * ease(t, Easing.BEZIER_SHADE_HUE))
        saturation = shade_start_s + (shade_end_s - shade_start_s) * ease(
            t, Easing.BEZIER_SHADE_SATURATION
        )
        scale.append(ScaleColor(lightness, _gamut_chroma(hue, saturation, base_okhsl.l), hue))

    return scale


# --- Color configs ---------------------------------------------------------

_COLOR_CONFIG_FIELDS = {f.name for f in fields(ColorConfig)}


def _snake_case(key: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", key).lower()


def color_config_from_dict(data: Mapping[str, Any]) -> ColorConfig:
    """Build a ``ColorConfig`` from snake_case or camelCase keys (``baseHue``...)."""
    kwargs: Dict[str, Any] = {}
    for key, value in data.items():
        name = key if key in _COLOR_CONFIG_FIELDS else _snake_case(key)
        if name not in _COLOR_CONFIG_FIELDS:
            raise ValueError(f"unknown color config key: {key!r}")
        kwargs[name] = value
    try:
        return ColorConfig(**kwargs)
    except TypeError as exc:
        raise ValueError(f"invalid color config {dict(data)!r}: {exc}") from None


def load_color_configs(path: Path) -> List[ColorConfig]:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON list of color configs")
    return [color_config_from_dict(item) for item in data]


DEFAULT_COLOR_CONFIGS: Tuple[ColorConfig, ...] = tuple(
    color_config_from_dict(preset) for preset in DEFAULT_COLOR_PRESETS
)


def _or_default(value: Any, default: Any) -> Any:
    return default if value is None else value


def scale_config_from_color(color_config: ColorConfig) -> ScaleConfig:
    base = okhsl_to_oklch(
        color_config.base_hue, color_config.base_saturation, color_config.base_lightness
    )
    return ScaleConfig(
        base_l=base.lightness,
        base_c=base.chroma,
        base_h=base.hue,
        start_hue_shift=color_config.start_hue_shift,
        end_hue_shift=color_config.end_hue_shift,
        start_l=_or_default(color_config.start_l, DEFAULT_START_L),
        end_l=_or_default(color_config.end_l, DEFAULT_END_L),
        start_s=_or_default(color_config.start_s, DEFAULT_START_S),
        end_s=_or_default(color_config.end_s, DEFAULT_END_S),
        lightness_curve=_or_default(color_config.lightness_curve, DEFAULT_LIGHTNESS_CURVE),
        saturation_curve=_or_default(color_config.saturation_curve, DEFAULT_SATURATION_CURVE),
        hue_curve=_or_default(color_config.hue_curve, DEFAULT_HUE_CURVE),
    )


def generate_palette(color_config: ColorConfig) -> GeneratedPalette:
    scale = generate_scale(scale_config_from_color(color_config))
    return GeneratedPalette(
        name=color_config.short_name,
        colors=dict(zip(SCALE_STEPS, scale)),
    )


def generate_palettes(
    color_configs: Iterable[ColorConfig] = DEFAULT_COLOR_CONFIGS,
) -> Dict[str, GeneratedPalette]:
    palettes: Dict[str, GeneratedPalette] = {}
    for color_config in color_configs:
        palette = generate_palette(color_config)
        palettes[palette.name] = palette
    return palettes


# --- Export ----------------------------------------------------------------


def format_oklch_color(color: ScaleColor, palette_format: PaletteFormat) -> str:
    if palette_format == PaletteFormat.RGB:
        r, g, b = scale_color_to_rgb(color)
        return f"rgb({r}, {g}, {b})"
    if palette_format == PaletteFormat.OKLCH:
        return f"oklch({color.lightness:.1f}% {color.chroma:.3f} {color.hue:.1f})"
    return scale_color_to_hex(color)


def format_palette_export(
    palette: Mapping[int, ScaleColor],
    palette_format: PaletteFormat,
    options: PaletteExportOptions,
) -> str:
    lines: List[str] = []
    for step, color in palette.items():
        formatted_value = format_oklch_color(color, palette_format)
        if options.wrap_values_in_quotes:
            value_str = f'"{formatted_value}"'
        else:
            value_str = formatted_value

        key_str = f"{options.key_prefix}{step}"
        if " " in key_str or "-" in key_str:  # Basic check if key needs quotes
            key_str = f'"{key_str}"'

        lines.append(f"    {key_str}: {value_str}{options.line_terminator}")

    return "{\n" + "\n".join(lines) + "\n}"


def format_scale_data(
    palettes: Mapping[str, GeneratedPalette],
    palette_format: PaletteFormat = PaletteFormat.HEX,
) -> str:
    """JSON ``{name: {step: value}}`` for every palette."""
    data = {
        name: {
            str(step): format_oklch_color(color, palette_format)
            for step, color in palette.colors.items()
        }
        for name, palette in palettes.items()
    }
    return json.dumps(data)


# --- CLI -------------------------------------------------------------------

app = typer.Typer(
    help="Generate perceptually uniform 13-step color ramps.",
    add_completion=False,
)


def _select_configs(
    color_configs: Sequence[ColorConfig], names: Optional[List[str]]
) -> List[ColorConfig]:
    if not names:
        return list(color_configs)
    by_name = {c.short_name: c for c in color_configs}
    missing = [name for name in names if name not in by_name]
    if missing:
        raise KeyError(", ".join(missing))
    return [by_name[name] for name in names]


@app.command()
def main(
    palette_format: PaletteFormat = typer.Option(
        PaletteFormat(DEFAULT_EXPORT_FORMAT), "--format", "-f", help="Color value format."
    ),
    config: Optional[Path] = typer.Option(  # noqa: B008
        None,
        "--config",
        "-c",
        exists=True,
        dir_okay=False,
        help="JSON list of color configs to use instead of the presets.",
    ),
    colors: Optional[List[str]] = typer.Option(  # noqa: B008
        None, "--color", help="Only export these ramps (e.g. red). Repeatable."
    ),
    style: ExportStyle = typer.Option(
        ExportStyle.JSON, "--style", help="json: one JSON document; object: one block per ramp."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Print generated ramps to stdout."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    color_configs: Sequence[ColorConfig] = DEFAULT_COLOR_CONFIGS
    if config is not None:
        try:
            color_configs = load_color_configs(config)
        except ValueError as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(code=1)

    try:
        selected = _select_configs(color_configs, colors)
    except KeyError as exc:
        typer.echo(f"Error: unknown color(s): {exc.args[0]}", err=True)
        raise typer.Exit(code=1)

    palettes = generate_palettes(selected)
    log.debug("Generated %d palettes", len(palettes))

    if style == ExportStyle.JSON:
        typer.echo(format_scale_data(palettes, palette_format))
        return

    blocks = [
        format_palette_export(
            palette.colors, palette_format, PaletteExportOptions(key_prefix=f"{name}-")
        )
        for name, palette in palettes.items()
    ]
    typer.echo("\n\n".join(blocks))


if __name__ == "__main__":
    app()
