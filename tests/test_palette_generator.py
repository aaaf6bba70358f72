import json
import math
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from color_spaces import ScaleColor  # noqa: E402
from curves import SCALE_STEPS  # noqa: E402
from palette_generator import (  # noqa: E402
    DEFAULT_COLOR_CONFIGS,
    ColorConfig,
    PaletteExportOptions,
    PaletteFormat,
    ScaleConfig,
    app,
    color_config_from_dict,
    format_palette_export,
    format_scale_data,
    generate_palette,
    generate_palettes,
    generate_scale,
    generate_tint_shade_scale,
    scale_config_from_color,
)

BASE_INDEX = SCALE_STEPS.index(500)


def red_config(**overrides):
    params = dict(
        base_l=57.0,
        base_c=0.18,
        base_h=23.5,
        start_l=98.0,
        end_l=19.0,
        start_hue_shift=-8.0,
        end_hue_shift=-5.0,
    )
    params.update(overrides)
    return ScaleConfig(**params)


def preset(name):
    return next(c for c in DEFAULT_COLOR_CONFIGS if c.short_name == name)


def test_red_scale_scenario():
    scale = generate_scale(red_config())

    assert len(scale) == 13
    assert scale[BASE_INDEX] == (57.0, 0.18, 23.5)
    assert 95.0 <= scale[0].lightness < 100.0
    assert scale[-1].lightness < 25.0
    assert abs(scale[0].hue - 15.5) < abs(scale[BASE_INDEX].hue - 15.5)


def test_scale_is_ordered_light_to_dark():
    lightness = [color.lightness for color in generate_scale(red_config())]
    assert all(lightness[i] >= lightness[i + 1] for i in range(len(lightness) - 1))


def test_generate_scale_is_repeatable():
    config = red_config()
    assert generate_scale(config) == generate_scale(config)


def test_base_hue_is_wrapped():
    config = red_config(base_h=-336.5)
    assert config.base_h == pytest.approx(23.5)
    assert generate_scale(config)[BASE_INDEX].hue == config.base_h


def test_hue_shift_wraps_around_zero():
    scale = generate_scale(red_config(base_h=3.0, start_hue_shift=-10.0, end_hue_shift=10.0))
    assert scale[0].hue == pytest.approx(353.0)
    assert scale[-1].hue == pytest.approx(13.0)


def test_grayscale_config_has_no_chroma():
    scale = generate_scale(red_config(base_c=0.0, start_s=0.0, end_s=0.0))
    assert [color.chroma for color in scale] == [0.0] * 13


@pytest.mark.parametrize("color_config", DEFAULT_COLOR_CONFIGS, ids=lambda c: c.name)
def test_preset_scales_respect_invariants(color_config):
    scale = generate_scale(scale_config_from_color(color_config))

    assert len(scale) == 13
    for color in scale:
        assert 0.0 <= color.hue < 360.0
        assert math.isfinite(color.chroma)
        assert color.chroma >= 0.0


def test_scale_config_from_color_uses_okhsl_base_and_defaults():
    config = scale_config_from_color(preset("red"))

    assert config.base_h == pytest.approx(23.5, abs=0.1)
    assert config.start_l == 98.0
    assert config.end_l == 19.0
    assert config.start_s == 0.1
    assert config.end_s == 0.25
    assert config.hue_curve[0].end_step == 500


def test_neutral_preset_is_pure_gray():
    palette = generate_palette(preset("neutral"))
    assert all(color.chroma == 0.0 for color in palette.colors.values())


def test_generate_palette_keys_and_hex():
    palette = generate_palette(preset("blue"))

    assert palette.name == "blue"
    assert list(palette.colors) == list(SCALE_STEPS)
    hex_colors = palette.hex_colors()
    assert hex_colors[50].startswith("#") and len(hex_colors[50]) == 7
    assert hex_colors[950] != hex_colors[50]


def test_generate_palettes_uses_short_names():
    palettes = generate_palettes(DEFAULT_COLOR_CONFIGS[:3])
    assert list(palettes) == ["red", "orange", "amber"]


def test_color_config_from_dict_accepts_camel_case():
    config = color_config_from_dict(
        {
            "name": "sand-500",
            "baseHue": 0.0702,
            "baseSaturation": 0.377,
            "baseLightness": 0.481,
            "startHueShift": 10.0,
            "endHueShift": -20.0,
            "startS": 0.02,
            "endS": 0.04,
            "lightnessCurve": ["linear", 500, "easeInQuad"],
        }
    )
    assert config == ColorConfig(
        name="sand-500",
        base_hue=0.0702,
        base_saturation=0.377,
        base_lightness=0.481,
        start_hue_shift=10.0,
        end_hue_shift=-20.0,
        start_s=0.02,
        end_s=0.04,
        lightness_curve=["linear", 500, "easeInQuad"],
    )
    assert scale_config_from_color(config).lightness_curve[-1].end_step == 950


def test_color_config_from_dict_rejects_unknown_keys():
    with pytest.raises(ValueError, match="baseHew"):
        color_config_from_dict({"name": "x", "baseHew": 0.1})


def test_color_config_from_dict_rejects_missing_fields():
    with pytest.raises(ValueError):
        color_config_from_dict({"name": "x"})


def test_legacy_generator_validates_steps_count():
    with pytest.raises(ValueError):
        generate_tint_shade_scale(
            base_l=57.0, base_c=0.18, base_h=23.5, start_l=98.0, end_l=19.0,
            start_hue_shift=-8.0, end_hue_shift=-5.0, steps_count=12,
        )


@pytest.mark.parametrize("steps_count", [11, 13])
def test_legacy_generator_keeps_base_in_the_middle(steps_count):
    scale = generate_tint_shade_scale(
        base_l=57.0, base_c=0.18, base_h=23.5, start_l=98.0, end_l=19.0,
        start_hue_shift=-8.0, end_hue_shift=-5.0, steps_count=steps_count,
    )
    assert len(scale) == steps_count
    assert scale[steps_count // 2] == (57.0, 0.18, 23.5)
    assert scale[0].lightness == pytest.approx(98.0, abs=0.01)
    assert scale[0].hue == pytest.approx(15.5)
    assert all(color.chroma >= 0.0 for color in scale)


def test_export_preserves_step_order():
    palette = generate_palette(preset("red"))
    ts_str = format_palette_export(
        palette.colors,
        PaletteFormat.HEX,
        PaletteExportOptions(line_terminator=",", wrap_values_in_quotes=True),
    )

    last_idx = -1
    for step in SCALE_STEPS:
        marker = f" {step}:"
        idx = ts_str.find(marker)
        assert idx != -1, f"Missing step {step} in export"
        assert idx > last_idx, "Steps are out of order in export"
        last_idx = idx

    assert ts_str.strip().startswith("{")
    assert ts_str.strip().endswith("}")


def test_export_rgb_format():
    colors = {50: ScaleColor(100.0, 0.0, 0.0), 950: ScaleColor(0.0, 0.0, 0.0)}
    ts_str = format_palette_export(colors, PaletteFormat.RGB, PaletteExportOptions())

    assert "50: rgb(255, 255, 255);" in ts_str
    assert "950: rgb(0, 0, 0);" in ts_str
    assert "#" not in ts_str


def test_export_oklch_format_and_quoted_keys():
    colors = {500: ScaleColor(57.0, 0.18, 23.5)}
    ts_str = format_palette_export(
        colors, PaletteFormat.OKLCH, PaletteExportOptions(key_prefix="red-")
    )
    assert '"red-500": oklch(57.0% 0.180 23.5);' in ts_str


def test_format_scale_data_is_json_by_name_and_step():
    palettes = generate_palettes([preset("red"), preset("slate")])
    data = json.loads(format_scale_data(palettes))

    assert list(data) == ["red", "slate"]
    assert list(data["red"]) == [str(step) for step in SCALE_STEPS]
    assert data["red"]["500"] == palettes["red"].hex_colors()[500]


def test_cli_exports_selected_colors():
    result = CliRunner().invoke(app, ["--color", "red", "--color", "teal"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert list(data) == ["red", "teal"]
    assert len(data["teal"]) == 13


def test_cli_object_style_in_oklch():
    result = CliRunner().invoke(app, ["--color", "red", "--style", "object", "-f", "oklch"])

    assert result.exit_code == 0
    assert '"red-500": oklch(' in result.stdout


def test_cli_reads_config_file(tmp_path):
    config_path = tmp_path / "colors.json"
    config_path.write_text(
        json.dumps(
            [{"name": "brand-500", "baseHue": 0.72, "baseSaturation": 0.9, "baseLightness": 0.6}]
        )
    )
    result = CliRunner().invoke(app, ["--config", str(config_path)])

    assert result.exit_code == 0
    assert list(json.loads(result.stdout)) == ["brand"]


def test_cli_rejects_unknown_color():
    result = CliRunner().invoke(app, ["--color", "chartreuse"])
    assert result.exit_code == 1
