"""
Property-based tests using Hypothesis.

These tests verify the token pipeline's invariants across generated style
catalogs instead of hand-picked examples.
"""

from pathlib import Path

from figma_fakes import gradient_paint, make_node, make_style, solid_paint
from hypothesis import given, settings
from hypothesis import strategies as st

from figtokens.core.config import IOSConfig
from figtokens.core.diagnostics import DiagnosticsCollector
from figtokens.core.ir.tokens import ColorResult, ColorToken, VariantPair
from figtokens.core.names import make_identifier
from figtokens.core.normalizer import normalize
from figtokens.core.variants import split_single_file
from figtokens.exporters import ColorExporter, GradientExporter
from figtokens.pipeline import build_export_input

unit = st.floats(min_value=0.0, max_value=1.0, allow_nan=False)
rgba = st.tuples(unit, unit, unit, unit)
stops = st.lists(st.tuples(unit, rgba), min_size=1, max_size=8)

# Lower-case letters only: distinct names always map to distinct identifiers
style_names = st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=12)

gradient_catalogs = st.dictionaries(style_names, stops, min_size=1, max_size=6)

OUTPUT = IOSConfig(
    output_directory=Path("out"),
    color_swift=Path("Color+Tokens.swift"),
    gradient_swift=Path("Gradient+Tokens.swift"),
)


def normalize_gradients(catalog: dict) -> ColorResult:
    styles = [make_style(name) for name in catalog]
    nodes = {s.node_id: make_node(s, gradient_paint(catalog[s.name])) for s in styles}
    return normalize(nodes, styles, DiagnosticsCollector())


# =============================================================================
# Normalizer Property Tests
# =============================================================================


class TestNormalizerProperties:
    """Property-based tests for the token normalizer."""

    @given(gradient_catalogs)
    @settings(max_examples=100)
    def test_stop_count_equals_color_count(self, catalog: dict) -> None:
        """Invariant: a gradient style yields one color per stop and one gradient."""
        result = normalize_gradients(catalog)

        assert len(result.gradients) == len(catalog)
        assert len(result.colors) == sum(len(s) for s in catalog.values())
        for gradient in result.gradients:
            assert len(gradient.stops) == len(catalog[gradient.name])

    @given(rgba, unit)
    @settings(max_examples=100)
    def test_opacity_wins_over_alpha(self, color: tuple, opacity: float) -> None:
        """Invariant: a solid fill's opacity replaces the color's own alpha."""
        style = make_style("fill")
        node = make_node(style, solid_paint(*color, opacity=opacity))

        [token] = normalize({node.id: node}, [style], DiagnosticsCollector()).colors

        assert token.alpha == opacity

    @given(gradient_catalogs)
    @settings(max_examples=100)
    def test_stops_reference_existing_colors(self, catalog: dict) -> None:
        """Invariant: every stop names a color of the same result."""
        result = normalize_gradients(catalog)
        names = result.color_names()
        assert all(stop.color_name in names for g in result.gradients for stop in g.stops)


# =============================================================================
# Variant Resolver Property Tests
# =============================================================================


class TestSuffixSplitProperties:
    """Property-based tests for the single-file suffix split."""

    @given(
        st.lists(
            st.text(alphabet="ab_dkr", min_size=1, max_size=10),
            unique=True,
            max_size=20,
        )
    )
    @settings(max_examples=200)
    def test_suffix_partition(self, names: list[str]) -> None:
        """Invariant: X_dark becomes dark X and never stays light."""
        colors = [ColorToken(name=n, red=0, green=0, blue=0, alpha=1) for n in names]

        pair = split_single_file(ColorResult(colors=colors), "_dark")

        light = {c.name for c in pair.light.colors}
        dark = {c.name for c in pair.dark.colors}
        for name in names:
            if name.endswith("_dark"):
                assert name[: -len("_dark")] in dark
                assert name not in light
            else:
                assert name in light
        assert len(light) + len(dark) == len(names)


# =============================================================================
# Rendering Property Tests
# =============================================================================


class TestRenderProperties:
    """Property-based tests for identifier generation and rendering."""

    @given(st.text(min_size=1, max_size=30).filter(lambda s: any(c.isascii() and c.isalnum() for c in s)))
    @settings(max_examples=200)
    def test_identifiers_are_valid(self, name: str) -> None:
        """Invariant: any name with a letter or digit yields a usable identifier."""
        ident = make_identifier(name)
        assert ident.isidentifier()
        assert not ident[0].isdigit()

    @given(gradient_catalogs)
    @settings(max_examples=50, deadline=None)
    def test_render_resolves_and_is_idempotent(self, catalog: dict) -> None:
        """Invariant: normalized gradients always render, byte for byte the same."""
        export_input = build_export_input(VariantPair(light=normalize_gradients(catalog)), [])

        first = GradientExporter(OUTPUT).export(export_input) + ColorExporter(OUTPUT).export(export_input)
        second = GradientExporter(OUTPUT).export(export_input) + ColorExporter(OUTPUT).export(export_input)

        assert [f.content for f in first] == [f.content for f in second]
        for gradient in export_input.gradients:
            assert f"static var {make_identifier(gradient.light.name)} = Gradient(" in first[0].text
