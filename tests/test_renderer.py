"""
Tests for the Renderer: expanding markers into cased text.
"""

import logging

import pytest

from smappet.casing import CasingFunction, CasingRegistry, DEFAULT_CASING_ORDER
from smappet.exceptions import MalformedMarkerError, UnknownCasingError
from smappet.template import KeySubstitutor, Renderer, Tagger, UnknownMarkerPolicy


class TestRenderer:
    """Test the Renderer class."""

    def test_apply_example(self):
        """Each marker renders the substituted value in its own casing."""
        template = "const {{#camelCase}}userName{{/camelCase}} = {{#constantCase}}userName{{/constantCase}};"
        substituted = KeySubstitutor().substitute(template, {"userName": "first name"})
        assert Renderer().render(substituted) == "const firstName = FIRST_NAME;"

    @pytest.mark.parametrize("casing_name", DEFAULT_CASING_ORDER)
    def test_round_trip(self, casing_name):
        """Tag a variant, substitute a new value and render it in the same casing."""
        registry = CasingRegistry()
        casing = registry.get(casing_name)

        template = Tagger([casing]).tag(casing("userName"), ["userName"])
        substituted = KeySubstitutor().substitute(template, {"userName": "account id"})

        assert Renderer(registry).render(substituted) == casing("account id")

    def test_path_case_renders(self):
        """pathCase markers render like every other registered casing."""
        assert Renderer().render("{{#pathCase}}src main{{/pathCase}}") == "src/main"

    def test_text_without_markers_unchanged(self):
        """Literal text, including characters HTML would escape, passes through."""
        assert Renderer().render("if (a < b && c) { return; }") == "if (a < b && c) { return; }"

    def test_plain_mustache_variables_render_empty(self):
        """Non-section tags follow Mustache rules and have no value in the view."""
        assert Renderer().render("x{{name}}y {{#snakeCase}}a b{{/snakeCase}}") == "xy a_b"

    def test_rendered_value_is_not_html_escaped(self):
        """Section output is inserted as is."""
        assert Renderer().render("{{#capitalCase}}a b{{/capitalCase}} & <c>") == "A B & <c>"

    def test_nested_inner_rendered_first(self):
        """The outer casing sees the inner marker's rendered output."""
        text = "{{#constantCase}}x {{#camelCase}}b c{{/camelCase}}{{/constantCase}}"
        # inner -> 'bC', outer sees 'x bC'
        assert Renderer().render(text) == "X_B_C"

    def test_multiline_content(self):
        """Content spanning lines is cased as a whole."""
        assert Renderer().render("{{#snakeCase}}a\nb{{/snakeCase}}") == "a_b"

    def test_tag_names_may_be_padded(self):
        """Whitespace inside tags is ignored."""
        assert Renderer().render("{{# dotCase }}a b{{/ dotCase }}") == "a.b"

    def test_custom_casing(self):
        """Casings registered by embedding code are available to markers."""
        registry = CasingRegistry()
        registry.register(CasingFunction(name="reversed", transform=lambda s: s[::-1]))
        assert Renderer(registry).render("{{#reversed}}abc{{/reversed}}") == "cba"


class TestUnknownMarkers:
    """Test rendering of markers whose name is not a registered casing."""

    def test_default_renders_empty(self, caplog):
        """An unknown name is a falsy section and renders nothing."""
        with caplog.at_level(logging.WARNING):
            result = Renderer().render("a{{#shoutCase}}x{{/shoutCase}}b")
        assert result == "ab"
        assert "Unknown casing 'shoutCase'" in caplog.text

    def test_verbatim_policy(self):
        """The verbatim policy renders the body unchanged."""
        renderer = Renderer(unknown_markers=UnknownMarkerPolicy.VERBATIM)
        assert renderer.render("a{{#shoutCase}}x{{/shoutCase}}b") == "axb"

    def test_verbatim_policy_still_renders_inner_markers(self):
        """Known markers nested in an unknown one are still expanded."""
        renderer = Renderer(unknown_markers=UnknownMarkerPolicy.VERBATIM)
        text = "{{#shoutCase}}[{{#snakeCase}}a b{{/snakeCase}}]{{/shoutCase}}"
        assert renderer.render(text) == "[a_b]"

    def test_policy_accepts_string_value(self):
        """Policies can be given by their config value."""
        renderer = Renderer(unknown_markers="verbatim")
        assert renderer.unknown_markers == UnknownMarkerPolicy.VERBATIM

    def test_error_policy(self):
        """The error policy raises for the unknown name."""
        renderer = Renderer(unknown_markers=UnknownMarkerPolicy.ERROR)
        with pytest.raises(UnknownCasingError, match="shoutCase"):
            renderer.render("{{#shoutCase}}x{{/shoutCase}}")

    def test_view_binds_only_used_names(self):
        """The view holds a section lambda per marker name in the text."""
        view = Renderer().build_view("{{#camelCase}}a{{/camelCase}}{{#shoutCase}}b{{/shoutCase}}")
        assert list(view) == ["camelCase"]
        assert callable(view["camelCase"])


class TestMalformedMarkers:
    """Test structural errors during rendering."""

    @pytest.mark.parametrize("text", [
        "{{/camelCase}}",
        "{{#camelCase}}x",
        "{{#camelCase}}x{{/snakeCase}}",
    ])
    def test_raises(self, text):
        """Unopened, unclosed and mismatched sections are rejected."""
        with pytest.raises(MalformedMarkerError):
            Renderer().render(text)

    def test_template_syntax_error_is_malformed(self):
        """An unterminated tag reported by the template engine is a marker error."""
        with pytest.raises(MalformedMarkerError):
            Renderer().render("{{#camelCase}}a{{/camelCase}} {{oops")
