"""Tests for the token normalizer."""

from __future__ import annotations

from figma_fakes import TWO_STOPS, gradient_paint, make_node, make_style, solid_paint

from figtokens.core.diagnostics import DiagnosticKind, DiagnosticsCollector
from figtokens.core.ir.figma import Paint
from figtokens.core.ir.tokens import ColorToken, GradientStop, Platform
from figtokens.core.normalizer import normalize


def _run(pairs, diagnostics=None):
    styles = [style for style, _ in pairs]
    nodes = {node.id: node for _, node in pairs if node is not None}
    return normalize(nodes, styles, diagnostics if diagnostics is not None else DiagnosticsCollector())


class TestSolidStyles:
    def test_brand_red(self):
        style = make_style("brand_red")
        result = _run([(style, make_node(style, solid_paint(1.0, 0.0, 0.0)))])

        assert result.colors == [
            ColorToken(name="brand_red", platform=None, red=1.0, green=0.0, blue=0.0, alpha=1.0)
        ]
        assert result.gradients == []

    def test_opacity_overrides_alpha(self):
        style = make_style("overlay")
        result = _run([(style, make_node(style, solid_paint(0.0, 0.0, 0.0, a=0.8, opacity=0.4)))])
        assert result.colors[0].alpha == 0.4

    def test_only_first_fill_counts(self):
        style = make_style("layered")
        node = make_node(style, solid_paint(0.0, 1.0, 0.0), solid_paint(1.0, 0.0, 0.0))
        result = _run([(style, node)])
        assert len(result.colors) == 1
        assert result.colors[0].green == 1.0

    def test_platform_tag_from_description(self):
        style = make_style("ios_only", description="ios")
        result = _run([(style, make_node(style, solid_paint(0.1, 0.2, 0.3)))])
        assert result.colors[0].platform == Platform.IOS


class TestGradientStyles:
    def test_brand_gradient(self):
        style = make_style("brand_gradient")
        result = _run([(style, make_node(style, gradient_paint(TWO_STOPS)))])

        assert [c.name for c in result.colors] == ["brand_gradient_0", "brand_gradient_1"]
        assert len(result.gradients) == 1
        gradient = result.gradients[0]
        assert gradient.name == "brand_gradient"
        assert gradient.stops == [
            GradientStop(color_name="brand_gradient_0", position=0.0),
            GradientStop(color_name="brand_gradient_1", position=1.0),
        ]

    def test_stops_keep_own_alpha(self):
        style = make_style("fade")
        node = make_node(style, gradient_paint(TWO_STOPS, opacity=0.2))
        result = _run([(style, node)])
        assert [c.alpha for c in result.colors] == [1.0, 0.5]

    def test_token_count_matches_stop_count(self):
        stops = [(i / 4, (0.1 * i, 0.0, 0.0, 1.0)) for i in range(5)]
        style = make_style("five")
        result = _run([(style, make_node(style, gradient_paint(stops, kind="GRADIENT_RADIAL")))])
        assert len(result.colors) == 5
        assert len(result.gradients) == 1
        assert result.gradients[0].stops[-1].color_name == "five_4"

    def test_every_stop_references_a_color(self):
        style = make_style("g")
        result = _run([(style, make_node(style, gradient_paint(TWO_STOPS)))])
        names = result.color_names()
        assert all(stop.color_name in names for g in result.gradients for stop in g.stops)


class TestSkippedStyles:
    def test_missing_node_is_skipped_with_diagnostic(self):
        diagnostics = DiagnosticsCollector()
        kept = make_style("kept")
        result = _run(
            [(make_style("orphan"), None), (kept, make_node(kept, solid_paint(0.0, 0.0, 0.0)))],
            diagnostics,
        )
        assert [c.name for c in result.colors] == ["kept"]
        assert [d.style_name for d in diagnostics.of_kind(DiagnosticKind.MISSING_NODE)] == ["orphan"]

    def test_unsupported_fill_is_skipped_with_diagnostic(self):
        diagnostics = DiagnosticsCollector()
        style = make_style("photo")
        result = _run([(style, make_node(style, Paint(type="IMAGE")))], diagnostics)
        assert result.colors == []
        assert result.gradients == []
        recorded = diagnostics.of_kind(DiagnosticKind.UNSUPPORTED_FILL)
        assert len(recorded) == 1
        assert recorded[0].style_name == "photo"

    def test_node_without_fills(self):
        diagnostics = DiagnosticsCollector()
        style = make_style("empty")
        result = _run([(style, make_node(style))], diagnostics)
        assert result.colors == []
        assert diagnostics.of_kind(DiagnosticKind.MISSING_FILL)

    def test_default_sink_logs(self, caplog):
        style = make_style("photo")
        node = make_node(style, Paint(type="IMAGE"))
        with caplog.at_level("INFO", logger="figtokens.diagnostics"):
            normalize({node.id: node}, [style])
        assert "photo" in caplog.text


class TestOrdering:
    def test_tokens_follow_style_order(self):
        a, b, c = make_style("a"), make_style("b"), make_style("c")
        result = _run(
            [
                (b, make_node(b, solid_paint(0.0, 0.0, 0.0))),
                (a, make_node(a, gradient_paint(TWO_STOPS))),
                (c, make_node(c, solid_paint(1.0, 1.0, 1.0))),
            ]
        )
        assert [t.name for t in result.colors] == ["b", "a_0", "a_1", "c"]

    def test_deterministic(self):
        style = make_style("g")
        pairs = [(style, make_node(style, gradient_paint(TWO_STOPS)))]
        assert _run(pairs) == _run(pairs)
