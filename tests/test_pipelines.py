"""
Tests for the capture and apply pipelines against an in-memory host.
"""

import pytest

from smappet.config import SmappetConfig
from smappet.exceptions import InvalidVariableNameError, MalformedMarkerError
from smappet.host import MemoryHost
from smappet.pipelines import apply_template, capture_template, parse_list, parse_values


class TestParseList:
    """Test splitting prompted lists."""

    def test_trims_and_drops_empty(self):
        assert parse_list(" a, b ,,c ") == ["a", "b", "c"]

    def test_cancelled(self):
        assert parse_list(None) is None

    def test_custom_separator(self):
        assert parse_list("a;b", separator=";") == ["a", "b"]


class TestParseValues:
    """Test splitting prompted values."""

    def test_blanks_keep_their_position(self):
        """An empty item stays in the list as an empty value."""
        assert parse_values(" one, ,three ") == ["one", "", "three"]

    def test_cancelled(self):
        """A cancelled prompt yields None."""
        assert parse_values(None) is None

    def test_custom_separator(self):
        """The configured separator is used."""
        assert parse_values("a;;b", separator=";") == ["a", "", "b"]


class TestCaptureTemplate:
    """Test the capture pipeline."""

    def test_writes_template_to_clipboard(self):
        host = MemoryHost(answers=["userName"], selection="let userName = 1;")

        result = capture_template(host)

        assert result == "let {{#camelCase}}userName{{/camelCase}} = 1;"
        assert host.clipboard == result
        assert host.clipboard_writes == 1

    def test_prompts_with_configured_text(self):
        host = MemoryHost(answers=["a"], selection="a")
        capture_template(host)
        assert host.prompts == [(
            "Comma separated list of camelCase variable names to pick up",
            "variableNames, toPickUp",
        )]

    def test_no_selection_writes_nothing(self):
        host = MemoryHost(answers=["userName"], selection=None, clipboard="old")

        assert capture_template(host) is None
        assert host.clipboard == "old"
        assert host.clipboard_writes == 0

    def test_cancelled_prompt_writes_nothing(self):
        host = MemoryHost(answers=[None], selection="userName", clipboard="old")

        assert capture_template(host) is None
        assert host.clipboard_writes == 0

    def test_uses_configured_casings(self):
        config = SmappetConfig(casings=["snakeCase"])
        host = MemoryHost(answers=["userName"], selection="userName user_name")

        assert capture_template(host, config) == "userName {{#snakeCase}}userName{{/snakeCase}}"

    def test_invalid_variable_name(self):
        host = MemoryHost(answers=["ok, bad}"], selection="text")
        with pytest.raises(InvalidVariableNameError):
            capture_template(host)
        assert host.clipboard_writes == 0


class TestApplyTemplate:
    """Test the apply pipeline."""

    def test_renders_and_inserts(self):
        host = MemoryHost(
            answers=["first name"],
            clipboard="const {{#camelCase}}userName{{/camelCase}} = {{#constantCase}}userName{{/constantCase}};",
        )

        result = apply_template(host)

        assert result == "const firstName = FIRST_NAME;"
        assert host.inserted == [result]

    def test_placeholder_lists_variable_names(self):
        host = MemoryHost(
            answers=["x, y"],
            clipboard="{{#camelCase}}alpha{{/camelCase}}{{#snakeCase}}beta{{/snakeCase}}{{#dotCase}}alpha{{/dotCase}}",
        )
        apply_template(host)
        assert host.prompts[0][1] == "New values for alpha, beta"

    def test_values_map_by_position(self):
        host = MemoryHost(
            answers=["order id, line item"],
            clipboard="{{#pascalCase}}userId{{/pascalCase}}.{{#snakeCase}}userName{{/snakeCase}}",
        )
        assert apply_template(host) == "OrderId.line_item"

    def test_blank_value_keeps_later_values_in_place(self):
        """A blank middle value empties its variable without shifting the rest."""
        host = MemoryHost(
            answers=["one,,three"],
            clipboard=(
                "{{#snakeCase}}alpha{{/snakeCase}}|"
                "{{#snakeCase}}beta{{/snakeCase}}|"
                "{{#snakeCase}}gamma{{/snakeCase}}"
            ),
        )
        assert apply_template(host) == "one||three"

    def test_cancelled_values_prompt_inserts_nothing(self):
        host = MemoryHost(answers=[None], clipboard="{{#camelCase}}a{{/camelCase}}")

        assert apply_template(host) is None
        assert host.inserted == []

    def test_missing_value_renders_original_name(self):
        host = MemoryHost(
            answers=["new thing"],
            clipboard="{{#snakeCase}}itemKey{{/snakeCase}} {{#constantCase}}otherName{{/constantCase}}",
        )
        assert apply_template(host) == "new_thing OTHER_NAME"

    def test_template_without_markers_skips_prompt(self):
        host = MemoryHost(clipboard="just text")

        assert apply_template(host) == "just text"
        assert host.prompts == []
        assert host.inserted == ["just text"]

    def test_strict_markers(self):
        config = SmappetConfig(strict_markers=True)
        host = MemoryHost(answers=["x"], clipboard="{{#camelCase}}a{{/snakeCase}}")
        with pytest.raises(MalformedMarkerError):
            apply_template(host, config)
        assert host.inserted == []

    def test_mismatched_markers_fail_before_values_prompt(self):
        """Unpaired tags are rejected before the user is asked for values."""
        host = MemoryHost(answers=["x"], clipboard="{{#camelCase}}alpha{{/snakeCase}}")
        with pytest.raises(MalformedMarkerError):
            apply_template(host)
        assert host.prompts == []
        assert host.inserted == []


def test_capture_then_apply():
    """A captured template renders new values in each recorded casing."""
    source = "class UserName:\n    user_name = 'USER_NAME'\n"
    host = MemoryHost(answers=["userName", "account holder"], selection=source)

    capture_template(host)
    result = apply_template(host)

    assert result == "class AccountHolder:\n    account_holder = 'ACCOUNT_HOLDER'\n"
