"""Tests for site_checker.cleaner module."""

from __future__ import annotations

from site_checker.cleaner import extract_text_content, strip_tags


class TestExtractTextContent:
    def test_removes_script_bodies(self):
        html = '<div>Hello</div><script>alert("xss")</script><p>World</p>'
        assert extract_text_content(html) == "Hello World"

    def test_removes_style_bodies(self):
        html = "<div>Hello</div><style>body { color: red; }</style>"
        assert extract_text_content(html) == "Hello"

    def test_case_insensitive(self):
        html = '<SCRIPT type="text/javascript">alert(1)</SCRIPT><div>OK</div>'
        assert extract_text_content(html) == "OK"

    def test_tags_become_spaces(self):
        assert extract_text_content("<p>one</p><p>two</p>") == "one two"

    def test_collapses_whitespace(self):
        html = "<div>   lots  \n\n  of    spaces   </div>"
        assert extract_text_content(html) == "lots of spaces"

    def test_keeps_japanese_text(self):
        assert extract_text_content("<h1>会社概要</h1>") == "会社概要"

    def test_empty(self):
        assert extract_text_content("") == ""


class TestStripTags:
    def test_no_spaces_added(self):
        assert strip_tags("Our <strong>work</strong>") == "Our work"

    def test_trims(self):
        assert strip_tags("  <span>x</span>  ") == "x"
