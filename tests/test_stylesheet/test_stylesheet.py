"""Tests for the stylesheet parser."""

import logging
from pathlib import Path

import pytest

from styletree.stylesheet import (
    Color,
    Declaration,
    Length,
    Other,
    Rule,
    Selector,
    SimpleSelector,
    Stylesheet,
    Unit,
    parse_stylesheet,
)
from styletree.stylesheet.parser import translate_color, translate_length

FIXTURES = Path(__file__).parent.parent / "fixtures"

RED = Color(1.0, 0.0, 0.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0, 1.0)


def _simple(ss: Stylesheet, rule: int = 0, selector: int = 0) -> SimpleSelector:
    return ss.rules[rule].selectors[selector].simple[0]


# ---------------------------------------------------------------------------
# Selector parsing
# ---------------------------------------------------------------------------


class TestTagSelector:
    def test_parse_tag(self):
        ss = parse_stylesheet("p { color: red; }")
        assert len(ss.rules) == 1
        rule = ss.rules[0]
        assert rule.selectors == [Selector([SimpleSelector(tag_name="p")])]
        assert rule.declarations == [Declaration("color", RED)]

    def test_tag_is_lowercased(self):
        ss = parse_stylesheet("DIV { width: 1px; }")
        assert _simple(ss).tag_name == "div"

    def test_combinators_always_empty(self):
        ss = parse_stylesheet("p { color: red; }")
        assert ss.rules[0].selectors[0].combinators == []


class TestClassSelector:
    def test_tag_with_class(self):
        ss = parse_stylesheet("div.box { width: 10px; }")
        assert _simple(ss) == SimpleSelector(tag_name="div", classes=["box"])
        assert ss.rules[0].declarations == [Declaration("width", Length(10.0, Unit.PX))]

    def test_class_only(self):
        ss = parse_stylesheet(".note { color: red; }")
        assert _simple(ss) == SimpleSelector(classes=["note"])

    def test_class_chain(self):
        ss = parse_stylesheet("p.a.b { color: red; }")
        assert _simple(ss).classes == ["a", "b"]

    def test_duplicate_classes_kept(self):
        ss = parse_stylesheet(".a.a { color: red; }")
        assert _simple(ss).classes == ["a", "a"]


class TestIdSelector:
    def test_parse_id(self):
        ss = parse_stylesheet("#main { margin: 2em }")
        assert _simple(ss) == SimpleSelector(id="main")
        assert ss.rules[0].declarations == [Declaration("margin", Length(2.0, Unit.EM))]

    def test_tag_id_and_classes(self):
        ss = parse_stylesheet("div#x.a { color: red; }")
        assert _simple(ss) == SimpleSelector(tag_name="div", id="x", classes=["a"])

    def test_second_id_clears_constraint(self):
        ss = parse_stylesheet("div#a#b { color: red; }")
        assert _simple(ss) == SimpleSelector(tag_name="div")

    def test_third_id_keeps_constraint_cleared(self):
        ss = parse_stylesheet("#a#b#c.k { color: red; }")
        assert _simple(ss) == SimpleSelector(classes=["k"])


class TestSelectorList:
    def test_comma_separated(self):
        ss = parse_stylesheet("h1, h2 { color: red; }")
        tags = [s.simple[0].tag_name for s in ss.rules[0].selectors]
        assert tags == ["h1", "h2"]

    def test_doubled_and_trailing_commas_tolerated(self):
        ss = parse_stylesheet("h1,, h2, { color: red; }")
        tags = [s.simple[0].tag_name for s in ss.rules[0].selectors]
        assert tags == ["h1", "h2"]

    def test_one_simple_selector_per_selector(self):
        ss = parse_stylesheet("h1.a, p#b { color: red; }")
        assert all(len(s.simple) == 1 for s in ss.rules[0].selectors)

    def test_whitespace_separates_selectors(self):
        # No descendant combinator: "div p" reads as two selectors.
        ss = parse_stylesheet("div p { color: red; }")
        tags = [s.simple[0].tag_name for s in ss.rules[0].selectors]
        assert tags == ["div", "p"]

    def test_unsupported_tokens_skipped(self):
        ss = parse_stylesheet("a:hover { color: red; }")
        assert ss.rules[0].selectors == [Selector([SimpleSelector(tag_name="a")])]

    def test_universal_selector_discarded(self):
        ss = parse_stylesheet("* { color: red; }")
        assert ss.rules[0].selectors == []
        assert ss.rules[0].declarations == [Declaration("color", RED)]


class TestTokenScanCondition:
    """The id/class scan runs until ',', '{' or whitespace."""

    def test_scan_stops_at_whitespace(self):
        ss = parse_stylesheet("div .a { color: red; }")
        selectors = ss.rules[0].selectors
        assert selectors == [
            Selector([SimpleSelector(tag_name="div")]),
            Selector([SimpleSelector(classes=["a"])]),
        ]

    def test_scan_stops_at_comma(self):
        ss = parse_stylesheet("#a,.b { color: red; }")
        assert [s.simple[0] for s in ss.rules[0].selectors] == [
            SimpleSelector(id="a"),
            SimpleSelector(classes=["b"]),
        ]

    def test_skip_runs_to_next_comma(self):
        ss = parse_stylesheet("p>q, em { color: red; }")
        tags = [s.simple[0].tag_name for s in ss.rules[0].selectors]
        assert tags == ["p", "em"]


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------


class TestDeclarations:
    def test_multiple_declarations(self):
        ss = parse_stylesheet("p { color: red; width: 5px; display: block; }")
        assert ss.rules[0].declarations == [
            Declaration("color", RED),
            Declaration("width", Length(5.0, Unit.PX)),
            Declaration("display", Other("block")),
        ]

    def test_property_and_value_lowercased(self):
        ss = parse_stylesheet("p { DISPLAY: BLOCK; }")
        assert ss.rules[0].declarations == [Declaration("display", Other("block"))]

    def test_duplicate_properties_kept_in_order(self):
        ss = parse_stylesheet("p { color: red; color: blue; }")
        props = [d.property for d in ss.rules[0].declarations]
        assert props == ["color", "color"]

    def test_last_declaration_without_semicolon(self):
        ss = parse_stylesheet("p { color: red; width: 3px }")
        assert ss.rules[0].declarations[-1] == Declaration("width", Length(3.0, Unit.PX))

    def test_unterminated_declaration_dropped(self):
        ss = parse_stylesheet("p {\n  color: red\n  width: 3px;\n}")
        assert ss.rules[0].declarations == [Declaration("width", Length(3.0, Unit.PX))]

    def test_empty_block(self):
        ss = parse_stylesheet("p {}")
        assert ss.rules[0].declarations == []

    def test_other_value_kept_raw(self):
        ss = parse_stylesheet("p { font-family: serif; }")
        assert ss.rules[0].declarations == [Declaration("font-family", Other("serif"))]


class TestColors:
    @pytest.mark.parametrize(
        "keyword, expected",
        [
            ("black", Color(0.0, 0.0, 0.0, 1.0)),
            ("white", Color(1.0, 1.0, 1.0, 1.0)),
            ("red", Color(1.0, 0.0, 0.0, 1.0)),
            ("green", Color(0.0, 1.0, 0.0, 1.0)),
            ("blue", Color(0.0, 0.0, 1.0, 1.0)),
        ],
    )
    def test_keywords(self, keyword, expected):
        assert translate_color(keyword) == expected

    def test_unknown_color_is_black(self):
        ss = parse_stylesheet("p { color: purple; }")
        assert ss.rules[0].declarations == [Declaration("color", BLACK)]

    def test_unknown_color_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="styletree"):
            parse_stylesheet("p { color: purple; }")
        assert "purple" in caplog.text

    def test_color_properties(self):
        ss = parse_stylesheet("p { background-color: white; border-color: BLUE; }")
        values = [d.value for d in ss.rules[0].declarations]
        assert values == [Color(1.0, 1.0, 1.0, 1.0), Color(0.0, 0.0, 1.0, 1.0)]


class TestLengths:
    @pytest.mark.parametrize("unit", list(Unit))
    def test_units(self, unit):
        assert translate_length(f"7{unit.value}") == Length(7.0, unit)

    def test_unknown_unit_is_px(self):
        assert translate_length("3pt") == Length(3.0, Unit.PX)

    def test_missing_unit_is_px(self):
        assert translate_length("12") == Length(12.0, Unit.PX)

    def test_missing_number_is_zero(self):
        assert translate_length("auto") == Length(0.0, Unit.PX)

    def test_digits_stop_at_first_non_digit(self):
        # "1e2px" -> numeral "1", unit "e2px"
        assert translate_length("1e2px") == Length(1.0, Unit.PX)
        assert translate_length("1.5em") == Length(1.0, Unit.PX)

    def test_length_properties(self):
        ss = parse_stylesheet(
            "p { margin-top: 1px; padding-left: 2em; border-bottom-width: 3rem; height: 4vh; }"
        )
        values = [d.value for d in ss.rules[0].declarations]
        assert values == [
            Length(1.0, Unit.PX),
            Length(2.0, Unit.EM),
            Length(3.0, Unit.REM),
            Length(4.0, Unit.VH),
        ]


# ---------------------------------------------------------------------------
# Multiple rules
# ---------------------------------------------------------------------------


class TestMultipleRules:
    def test_two_rules(self):
        source = """
        p { color: red; }
        .code { width: 1px; }
        """
        ss = parse_stylesheet(source)
        assert len(ss.rules) == 2
        assert _simple(ss, 0).tag_name == "p"
        assert _simple(ss, 1).classes == ["code"]

    def test_fixture(self):
        ss = parse_stylesheet((FIXTURES / "page.css").read_text())
        assert len(ss.rules) == 6
        assert _simple(ss, 2) == SimpleSelector(id="main", classes=["box"])
        assert ss.rules[4].declarations[-1] == Declaration("color", BLACK)


# ---------------------------------------------------------------------------
# Edge cases
# ---------------------------------------------------------------------------


class TestEmptyStylesheet:
    def test_empty_string(self):
        ss = parse_stylesheet("")
        assert ss.rules == []

    def test_whitespace_only(self):
        ss = parse_stylesheet("   \n\t  ")
        assert ss.rules == []

    def test_trailing_whitespace_adds_no_rule(self):
        ss = parse_stylesheet("p { color: red; }\n\n")
        assert len(ss.rules) == 1

    def test_unclosed_block_ends_at_input(self):
        ss = parse_stylesheet("p { color: red;")
        assert ss.rules == [Rule([Selector([SimpleSelector(tag_name="p")])], [Declaration("color", RED)])]


class TestStylesheetDataclass:
    def test_stylesheet_is_frozen(self):
        ss = parse_stylesheet("p { color: red; }")
        with pytest.raises(AttributeError):
            ss.rules = []  # type: ignore[misc]

    def test_selector_structural_equality(self):
        assert SimpleSelector("p", None, ["a"]) == SimpleSelector("p", None, ["a"])
        assert SimpleSelector("p", None, ["a"]) != SimpleSelector("p", "x", ["a"])


class TestStringForms:
    def test_simple_selector(self):
        assert str(SimpleSelector("div", "x", ["a", "b"])) == "div#x.a.b"

    def test_rule(self):
        ss = parse_stylesheet("h1, p.note { width: 10px; display: block; }")
        assert str(ss.rules[0]) == "h1, p.note {\n    width: 10px;\n    display: block;\n}"

    def test_color(self):
        assert str(RED) == "rgba(1.0, 0.0, 0.0, 1.0)"

    def test_stylesheet_joins_rules(self):
        ss = parse_stylesheet("a { color: red; } b { color: red; }")
        assert str(ss).count("\n\n") == 1
