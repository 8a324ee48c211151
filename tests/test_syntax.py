"""Unit tests for the tag-balance and attribute-quoting scanner."""

import pytest

from faqrender.validation.syntax import validate_html_syntax


class TestValidateHTMLSyntax:
    """Test validate_html_syntax."""

    @pytest.mark.parametrize(
        "html",
        [
            "<p>Hello <strong>world</strong></p>",
            "<p>Text<br/>More text</p>",
            '<div><img src="test.jpg"><input type="text"></div>',
            "<div><ul><li>Item 1</li><li>Item 2</li></ul></div>",
            "<a href='https://example.com'>Single quoted</a>",
            "<td colspan=2>bare word value</td>",
            "<P>Upper case</p>",
        ],
    )
    def test_valid_html(self, html):
        assert validate_html_syntax(html) == []

    @pytest.mark.parametrize("value", ["", None])
    def test_empty_input(self, value):
        assert validate_html_syntax(value) == []

    def test_unclosed_double_quote(self):
        errors = validate_html_syntax('<a href="https://example.com>Link</a>')
        assert errors == ['Unclosed attribute quote in tag: <a href="https://example.com>']

    def test_unclosed_single_quote(self):
        errors = validate_html_syntax("<a href='https://example.com>Link</a>")
        assert any("unclosed attribute quote" in e.lower() for e in errors)

    def test_unclosed_quote_on_second_attribute(self):
        errors = validate_html_syntax('<a href="https://example.com" target="_blank>Link</a>')
        assert any("unclosed attribute quote" in e.lower() for e in errors)

    def test_long_tag_excerpt_is_truncated(self):
        tag = '<a href="https://example.com/a/very/long/path/that/keeps/going>'
        errors = validate_html_syntax(tag + "Link</a>")
        assert errors[0] == "Unclosed attribute quote in tag: " + tag[:50] + "..."

    def test_unclosed_tag_bracket(self):
        errors = validate_html_syntax('<div><p>Hello</p><span class="test"')
        assert errors == [
            'Unclosed tag bracket: <span class="test"',
            "Unclosed tag: <div> is missing closing tag </div>",
        ]

    def test_orphaned_closing_tag(self):
        assert validate_html_syntax("<p>Hello</p></div>") == ["Orphaned closing tag: </div>"]

    def test_missing_closing_tag(self):
        assert validate_html_syntax("<div><p>Hello</div>") == [
            "Mismatched tags: Expected closing tag for <p>, found </div>",
            "Unclosed tag: <p> is missing closing tag </p>",
        ]

    def test_mismatch_does_not_cascade(self):
        errors = validate_html_syntax("<div><span>Text</div></span>")
        assert errors == ["Mismatched tags: Expected closing tag for <span>, found </div>"]

    def test_unclosed_tags_reported_in_open_order(self):
        assert validate_html_syntax("<div><span><p>Text") == [
            "Unclosed tag: <div> is missing closing tag </div>",
            "Unclosed tag: <span> is missing closing tag </span>",
            "Unclosed tag: <p> is missing closing tag </p>",
        ]

    def test_malformed_attribute(self):
        errors = validate_html_syntax("<div class=!x>Text</div>")
        assert errors == ["Malformed attribute syntax: <div class=!x>"]

    def test_deep_nesting_does_not_recurse(self):
        depth = 5000
        html = "<div>" * depth + "x" + "</div>" * depth
        assert validate_html_syntax(html) == []
