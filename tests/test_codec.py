"""Tests for escape sequence encoding and the scheme file format."""

import logging

import pytest

from dynamic_colors.codec.osc import (
    color_sequence,
    encode,
    in_multiplexer,
    osc,
    palette_index,
    passthrough,
)
from dynamic_colors.codec.scheme_file import (
    format_scheme,
    parse_assignment,
    parse_scheme,
    render_template,
)
from dynamic_colors.core.constants import COLOR_NAMES, COLOR_SLOTS, PALETTE_SLOTS
from dynamic_colors.core.scheme import Colorscheme
from dynamic_colors.errors import SchemeFormatError


class TestOsc:
    """Tests for OSC sequence construction."""

    def test_framing(self) -> None:
        assert osc(11, "#000000") == "\x1b]11;#000000\x07"

    def test_palette_slot(self) -> None:
        assert color_sequence("color0", "#073642") == "\x1b]4;0;#073642\x07"
        assert color_sequence("color15", "white") == "\x1b]4;15;white\x07"

    @pytest.mark.parametrize(
        "slot, code",
        [
            ("foreground", 10),
            ("background", 11),
            ("cursor", 12),
            ("mouse_foreground", 13),
            ("mouse_background", 14),
            ("highlight", 17),
            ("border", 708),
        ],
    )
    def test_special_slots(self, slot: str, code: int) -> None:
        assert color_sequence(slot, "red") == f"\x1b]{code};red\x07"

    def test_unknown_slots_are_ignored(self) -> None:
        assert color_sequence("color16", "red") is None
        assert color_sequence("color01", "red") is None
        assert color_sequence("colour1", "red") is None
        assert color_sequence("bogus", "red") is None

    def test_palette_index(self) -> None:
        assert palette_index("color7") == 7
        assert palette_index("color") is None
        assert palette_index("color-1") is None
        assert palette_index("background") is None

    def test_passthrough(self) -> None:
        seq = osc(11, "#000000")
        assert passthrough(seq) == "\x1bPtmux;\x1b\x1b]11;#000000\x07\x1b\\"

    def test_encode_wraps_only_when_multiplexed(self) -> None:
        raw = encode("background", "#000000")
        assert raw == "\x1b]11;#000000\x07"
        assert encode("background", "#000000", multiplexed=True) == passthrough(raw)
        assert encode("bogus", "#000000", multiplexed=True) is None

    def test_in_multiplexer(self) -> None:
        assert in_multiplexer({"TMUX": "/tmp/tmux-1000/default,123,0"}) is True
        assert in_multiplexer({"TMUX": ""}) is False
        assert in_multiplexer({}) is False


class TestParseAssignment:
    """Tests for single-line parsing."""

    def test_blank_and_comment_lines(self) -> None:
        assert parse_assignment("") is None
        assert parse_assignment("   ") is None
        assert parse_assignment("# a comment") is None
        assert parse_assignment("#!/bin/sh") is None

    def test_quoted_values(self) -> None:
        assert parse_assignment('background="#002b36"') == ("background", "#002b36")
        assert parse_assignment("foreground='#839496'") == ("foreground", "#839496")

    def test_bare_value_keeps_hash(self) -> None:
        assert parse_assignment("background=#002b36") == ("background", "#002b36")
        assert parse_assignment("cursor=red # comment") == ("cursor", "red")

    def test_trailing_comment_after_quotes(self) -> None:
        assert parse_assignment('color0="" # black') == ("color0", "")
        assert parse_assignment('color1="#dc322f"  # red') == ("color1", "#dc322f")

    def test_export_prefix(self) -> None:
        assert parse_assignment('export border="#000000"') == ("border", "#000000")

    def test_empty_value(self) -> None:
        assert parse_assignment("highlight=") == ("highlight", "")

    @pytest.mark.parametrize(
        "line",
        [
            'echo "hello"',
            'background = "#000000"',
            'background="#000000',
            'background="#000000" extra',
            "$(rm -rf /)",
        ],
    )
    def test_malformed_lines(self, line: str) -> None:
        with pytest.raises(ValueError):
            parse_assignment(line)


class TestParseScheme:
    """Tests for whole-file parsing."""

    def test_partial_scheme(self) -> None:
        scheme = parse_scheme('#!/bin/sh\nbackground="#000000"\n\ncolor1="#ff0000" # red\n', "partial")
        assert scheme.name == "partial"
        assert scheme.get("background") == "#000000"
        assert scheme.get("color1") == "#ff0000"
        assert scheme.get("foreground") is None

    def test_later_assignment_wins(self) -> None:
        scheme = parse_scheme('cursor="red"\ncursor="blue"\n', "x")
        assert scheme.get("cursor") == "blue"

    def test_unknown_keys_are_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            scheme = parse_scheme('base03="#002b36"\nbackground="#002b36"\n', "x")
        assert scheme.colors == {"background": "#002b36"}
        assert "base03" in caplog.text

    def test_error_names_file_and_line(self) -> None:
        with pytest.raises(SchemeFormatError) as excinfo:
            parse_scheme('background="#000000"\nthis is not valid\n', "bad", source="bad.sh")
        assert excinfo.value.lineno == 2
        assert "bad.sh:2" in str(excinfo.value)


class TestTemplate:
    """Tests for scheme templates."""

    def test_template_lists_every_slot(self) -> None:
        lines = [line for line in render_template("mine").splitlines() if not line.startswith("#")]
        assert [line.split("=", 1)[0] for line in lines] == list(COLOR_SLOTS)

    def test_palette_slots_are_annotated_in_order(self) -> None:
        text = render_template("mine")
        for index, slot in enumerate(PALETTE_SLOTS):
            assert f'{slot}="" # {COLOR_NAMES[index]}\n' in text
        assert 'background=""\n' in text

    def test_template_loads_as_empty_scheme(self) -> None:
        scheme = parse_scheme(render_template("mine"), "mine")
        assert scheme.missing_slots() == list(COLOR_SLOTS)

    def test_format_scheme_keeps_values(self) -> None:
        original = Colorscheme(name="x", colors={"background": "#000000", "color4": "#0000ff"})
        scheme = parse_scheme(format_scheme(original), "x")
        assert scheme.defined() == original.defined()
