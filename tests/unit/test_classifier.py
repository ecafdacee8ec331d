"""Tests for classifier.py - line classification."""

import pytest

from template_lines import (
    ExpressionParts,
    InterpolationLine,
    LiteralLine,
    MalformedExpressionError,
    TagKind,
    TagLine,
    UnrecognizedLine,
    classify,
    is_interpolation_line,
    is_tag_line,
    match_tag_kind,
)


class TestLiteral:
    def test_html_line(self):
        line = "<h1>Hello world</h1>"
        assert classify(line) == LiteralLine(text=line)

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "plain text",
            "for item in items",
            "if this then that",
            "{ single braces }",
            "{% for x in xs",
            "{{ name",
            "name }}",
        ],
    )
    def test_text_without_delimiter_pairs(self, line):
        assert classify(line) == LiteralLine(text=line)


class TestInterpolation:
    def test_greeting(self):
        expected = InterpolationLine(parts=ExpressionParts(head="Hi ", variable="name", tail=" ,welcome"))
        assert classify("Hi {{name}} ,welcome") == expected

    def test_bare_variable(self):
        assert classify("{{name}}") == InterpolationLine(parts=ExpressionParts(variable="name"))

    def test_reassembles_original(self):
        line = "<span class='user'>{{ username }}</span>"
        result = classify(line)
        assert isinstance(result, InterpolationLine)
        assert result.parts.to_source() == line

    def test_tag_delimiters_without_keywords_fall_through_to_interpolation(self):
        result = classify("{% block %} {{ title }}")
        assert isinstance(result, InterpolationLine)

    def test_malformed_interpolation_raises(self):
        with pytest.raises(MalformedExpressionError):
            classify("}} text {{")


class TestTag:
    @pytest.mark.parametrize(
        "line",
        [
            "{% for name in names %}",
            "{% for name in names %} ,welcome",
            "{% endfor %}",
            "{%for x in xs%}",
        ],
    )
    def test_loop(self, line):
        assert classify(line) == TagLine(tag=TagKind.LOOP)

    @pytest.mark.parametrize(
        "line",
        [
            "{% if name == 'Bob' %}",
            "{% if name == 'Bob' %} ,welcome",
            "{% endif %}",
        ],
    )
    def test_conditional(self, line):
        assert classify(line) == TagLine(tag=TagKind.CONDITIONAL)

    def test_for_without_in_is_not_loop(self):
        assert classify("{% for %}") == UnrecognizedLine()

    def test_loop_wins_over_conditional(self):
        assert classify("{% for x in xs if x %}") == TagLine(tag=TagKind.LOOP)

    def test_tag_wins_over_interpolation(self):
        assert classify("{% for name in names %} {{ name }}") == TagLine(tag=TagKind.LOOP)
        assert classify("{% if flag %}{{ value }}") == TagLine(tag=TagKind.CONDITIONAL)

    def test_keywords_match_inside_words(self):
        assert classify("{% information %}") == TagLine(tag=TagKind.LOOP)
        assert classify("{% gift %}") == TagLine(tag=TagKind.CONDITIONAL)

    def test_delimiter_order_not_enforced(self):
        assert classify("%} if {%") == TagLine(tag=TagKind.CONDITIONAL)


class TestUnrecognized:
    @pytest.mark.parametrize(
        "line",
        [
            "{% unknownkeyword %}",
            "{% raw %}",
            "{% endblock %}",
            "%} text {%",
        ],
    )
    def test_tag_without_keywords(self, line):
        assert classify(line) == UnrecognizedLine()


class TestPredicates:
    def test_is_tag_line(self):
        assert is_tag_line("{% anything %}") is True
        assert is_tag_line("{{ anything }}") is False

    def test_is_interpolation_line(self):
        assert is_interpolation_line("{{ anything }}") is True
        assert is_interpolation_line("{% anything %}") is False

    @pytest.mark.parametrize(
        "line,expected",
        [
            ("for x in xs", TagKind.LOOP),
            ("endfor", TagKind.LOOP),
            ("if x", TagKind.CONDITIONAL),
            ("endif", TagKind.CONDITIONAL),
            ("for x", None),
            ("plain", None),
        ],
    )
    def test_match_tag_kind(self, line, expected):
        assert match_tag_kind(line) == expected


def test_classify_is_idempotent():
    line = "Hi {{name}} ,welcome"
    assert classify(line) == classify(line)
