"""Preset catalogue and constraint stage tests."""
import logging

import pytest
from pydantic import ValidationError

from balcony.core.constraints import check_params, params_from_preset, sanitize_params
from balcony.data.catalogue import (
    all_manufacturers, all_presets, get_manufacturer, get_preset, presets_for_manufacturer,
)
from balcony.models import AxisLimits, BalconyParams, FrameMaterial, PlatformMaterial, Preset


class TestCatalogue:

    def test_manufacturers(self):
        assert {m.slug for m in all_manufacturers()} == {"balkonpro", "terrassenbau"}
        assert get_manufacturer("balkonpro").name == "BalkonPro GmbH"
        assert get_manufacturer("nobody") is None

    def test_presets_for_manufacturer(self):
        ids = [p.id for p in presets_for_manufacturer("terrassenbau")]
        assert ids == ["terrassenbau-eco", "terrassenbau-glas"]
        assert presets_for_manufacturer("nobody") == []

    def test_every_preset_belongs_to_its_manufacturer(self):
        for preset in all_presets():
            assert preset.id in get_manufacturer(preset.manufacturer_id).presets

    def test_preset_defaults_are_allowed(self):
        for preset in all_presets():
            assert check_params(params_from_preset(preset), preset) == []


class TestCheckParams:

    def test_defaults_pass_without_preset(self):
        assert check_params(BalconyParams()) == []

    def test_out_of_default_range(self):
        issues = check_params(BalconyParams(width=7.0, depth=0.5))
        assert len(issues) == 2
        assert issues[0].startswith("width")

    def test_disallowed_options(self):
        preset = get_preset("balkonpro-premium")
        params = BalconyParams(width=3.0, depth=2.0, support_count=2, railing_style="bars")
        issues = check_params(params, preset)
        assert any("support_count" in i for i in issues)
        assert any("railing_style bars" in i for i in issues)

    def test_unsupported_count_without_preset(self):
        assert check_params(BalconyParams(support_count=5)) == ["support_count 5 is not offered"]

    def test_unknown_style_without_preset(self):
        assert check_params(BalconyParams(railing_style="wood")) == ["railing_style wood is not offered"]


class TestSanitizeParams:

    def test_untouched_params_are_returned_as_is(self):
        params = BalconyParams()
        assert sanitize_params(params) is params

    def test_clamps_into_preset_range(self):
        preset = get_preset("terrassenbau-eco")
        params = BalconyParams(width=5.0, depth=0.5, platform_height=2.0, railing_height=1.0,
                               railing_style="bars", frame_material=FrameMaterial.FEUERVERZINKT)
        clean = sanitize_params(params, preset)
        assert clean.width == 4.0
        assert clean.depth == 0.8
        assert clean.platform_height == 2.0

    def test_disallowed_options_fall_back_to_defaults(self):
        preset = get_preset("balkonpro-premium")
        params = BalconyParams(width=4.0, depth=2.0, support_count=3, railing_style="bars",
                               platform_material=PlatformMaterial.DOUGLASIE)
        clean = sanitize_params(params, preset)
        assert clean.support_count == 4
        assert clean.railing_style == "glass"
        assert clean.platform_material == PlatformMaterial.WPC
        assert check_params(clean, preset) == []

    def test_default_range_without_preset(self):
        clean = sanitize_params(BalconyParams(width=10.0, railing_height=0.2))
        assert clean.width == 6.0
        assert clean.railing_height == 0.8

    def test_non_positive_sizes_are_left_for_the_engine(self):
        params = BalconyParams(width=0.0, depth=-1.0)
        assert sanitize_params(params) is params

    def test_small_positive_width_is_clamped(self):
        assert sanitize_params(BalconyParams(width=0.05)).width == 1.0

    def test_adjustments_are_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="balcony.core.constraints"):
            sanitize_params(BalconyParams(width=12.0))
        assert "Adjusted width from 12.0 to 6.0" in caplog.text


class TestParamsFromPreset:

    def test_glass_line_defaults(self):
        params = params_from_preset(get_preset("terrassenbau-glas"))
        assert params.width == pytest.approx(3.5)
        assert params.depth == pytest.approx(1.8)
        assert params.platform_height == pytest.approx(3.0)
        assert params.railing_height == pytest.approx(1.2)
        assert params.support_count == 3
        assert params.railing_style == "glass-double"
        assert params.platform_material == PlatformMaterial.ALU


class TestPresetValidation:

    def test_min_above_max_rejected(self):
        with pytest.raises(ValidationError):
            AxisLimits(min=3.0, max=2.0, default=2.5)

    def test_default_outside_range_rejected(self):
        with pytest.raises(ValidationError):
            AxisLimits(min=1.0, max=2.0, default=2.5)

    def test_default_option_must_be_allowed(self):
        data = get_preset("terrassenbau-eco").model_dump()
        data["defaults"]["railing_style"] = "glass"
        with pytest.raises(ValidationError):
            Preset.model_validate(data)

    def test_catalogue_round_trips_through_validation(self):
        data = get_preset("balkonpro-premium").model_dump()
        assert Preset.model_validate(data) == get_preset("balkonpro-premium")
