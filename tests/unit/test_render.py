"""Tests for render models, identifier mapping and cross-reference resolution."""

from __future__ import annotations

import pytest

from figtokens.core.errors import BrokenCrossReference, DuplicateNameError, RenderError
from figtokens.core.ir.tokens import ColorToken, GradientStop, GradientToken, TextCaseStyle, TextStyleToken
from figtokens.core.names import NameStyle
from figtokens.core.pairing import pair_assets
from figtokens.exporters.render import (
    GradientModel,
    StopModel,
    TemplateRenderer,
    build_gradient_models,
    build_identifier_map,
    build_text_style_models,
    resolve_gradient,
)


def color(name: str, value: float = 0.0) -> ColorToken:
    return ColorToken(name=name, red=value, green=value, blue=value, alpha=1.0)


def gradient(name: str, *stops: tuple[str, float]) -> GradientToken:
    return GradientToken(
        name=name, stops=[GradientStop(color_name=c, position=p) for c, p in stops]
    )


class TestIdentifierMap:
    def test_camel_case(self):
        mapping = build_identifier_map(["brand_gradient_0", "Brand / Primary"])
        assert mapping == {"brand_gradient_0": "brandGradient0", "Brand / Primary": "brandPrimary"}

    def test_snake_case(self):
        mapping = build_identifier_map(["brandRed"], NameStyle.SNAKE_CASE)
        assert mapping == {"brandRed": "brand_red"}

    def test_identifier_collision_raises(self):
        with pytest.raises(DuplicateNameError) as exc:
            build_identifier_map(["brand_red", "Brand Red"])
        assert "brandRed" in str(exc.value)

    def test_repeated_name_raises(self):
        with pytest.raises(DuplicateNameError):
            build_identifier_map(["a", "a"])

    def test_unusable_name_raises(self):
        with pytest.raises(RenderError):
            build_identifier_map(["///"])


class TestResolveGradient:
    def test_stops_resolve_to_identifiers(self):
        mapping = build_identifier_map(["brand_gradient_0", "brand_gradient_1"])
        model = resolve_gradient(
            gradient("brand_gradient", ("brand_gradient_0", 0.0), ("brand_gradient_1", 1.0)),
            mapping,
            NameStyle.CAMEL_CASE,
        )
        assert model == GradientModel(
            identifier="brandGradient",
            stops=(StopModel("brandGradient0", 0.0), StopModel("brandGradient1", 1.0)),
        )

    def test_missing_color_is_broken_reference(self):
        mapping = build_identifier_map(["g_0"])
        with pytest.raises(BrokenCrossReference) as exc:
            resolve_gradient(gradient("g", ("g_0", 0.0), ("g_1", 1.0)), mapping, NameStyle.CAMEL_CASE)
        assert exc.value.gradient_name == "g"
        assert exc.value.color_name == "g_1"


class TestGradientModels:
    def test_dark_gradient_with_unknown_stop_fails(self):
        colors = pair_assets([color("g_0"), color("g_1")], [color("g_0")])
        gradients = pair_assets(
            [gradient("g", ("g_0", 0.0), ("g_1", 1.0))],
            [gradient("g", ("g_0", 0.0), ("g_9", 1.0))],
        )
        with pytest.raises(BrokenCrossReference) as exc:
            build_gradient_models(gradients, colors, NameStyle.CAMEL_CASE)
        assert exc.value.color_name == "g_9"

    def test_dark_gradient_may_use_light_only_colors(self):
        colors = pair_assets([color("g_0"), color("g_1"), color("g_dark_0"), color("g_dark_1")])
        gradients = pair_assets(
            [gradient("g", ("g_0", 0.0), ("g_1", 1.0))],
            [gradient("g", ("g_dark_0", 0.0), ("g_dark_1", 1.0))],
        )
        models = build_gradient_models(gradients, colors, NameStyle.CAMEL_CASE)
        assert [s.color for s in models[0].stops] == ["g0", "g1"]

    def test_light_stops_rendered(self):
        colors = pair_assets([color("g_0"), color("g_1")])
        gradients = pair_assets([gradient("g", ("g_0", 0.0), ("g_1", 1.0))])
        models = build_gradient_models(gradients, colors, NameStyle.CAMEL_CASE)
        assert [s.color for s in models[0].stops] == ["g0", "g1"]


class TestTextStyleModels:
    def test_fields(self):
        token = TextStyleToken(
            name="body_bold",
            font_name="Inter-Bold",
            font_size=15,
            font_style="body",
            line_height=None,
            letter_spacing=0.2,
            text_case=TextCaseStyle.LOWERCASED,
        )
        model = build_text_style_models([token], NameStyle.CAMEL_CASE)[0]
        assert model.identifier == "bodyBold"
        assert model.class_name == "BodyBold"
        assert model.line_height == 0.0
        assert model.supports_dynamic_type
        assert model.text_case == "lowercased"

    @pytest.mark.parametrize(
        "name,class_name",
        [("heading", "Heading"), ("class", "Class"), ("1x", "_1x"), ("2 column body", "_2ColumnBody")],
    )
    def test_label_class_names_are_valid_swift(self, name, class_name):
        token = TextStyleToken(name=name, font_name="Inter", font_size=12)
        [model] = build_text_style_models([token], NameStyle.CAMEL_CASE)
        assert model.class_name == class_name
        assert not model.class_name[0].isdigit()


class TestTemplateRenderer:
    def test_missing_template_raises_render_error(self):
        with pytest.raises(RenderError):
            TemplateRenderer().render("nope.jinja")

    def test_undefined_variable_raises_render_error(self):
        with pytest.raises(RenderError):
            TemplateRenderer().render("gradient.swift.jinja")
