"""Tests for sanitizer.parse_content and plain_text."""

import pytest

from app.services.sanitizer import parse_content, plain_text


class TestParseContent:
    def test_strips_trailing_script(self):
        assert parse_content("<p>hi</p><script>evil()</script>") == "<p>hi</p>"

    def test_strips_script_with_attributes(self):
        html = '<p>a</p><script type="text/javascript" src="x.js"></script><p>b</p>'
        assert parse_content(html) == "<p>a</p><p>b</p>"

    def test_strips_uppercase_script(self):
        assert parse_content("<SCRIPT>alert(1)</SCRIPT><p>ok</p>") == "<p>ok</p>"

    def test_strips_multiline_script(self):
        html = "<p>x</p><script>\nvar a = 1;\nalert(a);\n</script>"
        assert parse_content(html) == "<p>x</p>"

    def test_non_greedy_between_scripts(self):
        html = "<script>a()</script><p>keep me</p><script>b()</script>"
        assert parse_content(html) == "<p>keep me</p>"

    def test_strips_comments(self):
        assert parse_content("<p>Visible</p><!-- hidden comment -->") == "<p>Visible</p>"

    def test_strips_multiline_wordpress_block_comments(self):
        html = "<!-- wp:paragraph -->\n<p>Body</p>\n<!-- /wp:paragraph -->"
        assert parse_content(html) == "\n<p>Body</p>\n"

    def test_script_reassembled_after_inner_removal_is_stripped(self):
        html = "<scr<script>x()</script>ipt>evil()</script><p>ok</p>"
        assert parse_content(html) == "<p>ok</p>"

    def test_event_handler_attributes_pass_through(self):
        html = '<a href="/page" onclick="doSomething()">Link</a>'
        assert parse_content(html) == html

    def test_empty_string(self):
        assert parse_content("") == ""

    def test_no_markup_to_strip_is_unchanged(self):
        html = "<h2>Title</h2><p>Plain <strong>content</strong>.</p>"
        assert parse_content(html) == html

    @pytest.mark.parametrize(
        "html",
        [
            "<p>hi</p><script>evil()</script>",
            "<scr<script>x()</script>ipt>evil()</script>",
            "<!--<!-- nested -->-->",
            "<script><!-- </script> -->",
            "<p>just text</p>",
            "<<!-- a -->!-- b -->",
        ],
    )
    def test_idempotent(self, html):
        once = parse_content(html)
        assert parse_content(once) == once


class TestPlainText:
    def test_strips_tags(self):
        assert plain_text("<p>Hello <em>world</em></p>") == "Hello world"

    def test_collapses_whitespace(self):
        assert plain_text("<p>One</p>\n\n<p>Two</p>") == "One Two"

    def test_drops_script_text(self):
        assert plain_text("<p>Shown</p><script>hidden()</script>") == "Shown"

    def test_empty(self):
        assert plain_text("") == ""
