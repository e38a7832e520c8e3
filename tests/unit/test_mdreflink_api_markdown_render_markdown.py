"""Unit tests for mdreflink.api.markdown rendering."""

import pytest
from marko import inline

from mdreflink.api.markdown import (
    Definition,
    Link,
    LinkReference,
    format_destination,
    parse_markdown,
    render_inline,
    render_markdown,
)

pytestmark = pytest.mark.markdown


def _round_trip(text: str) -> str:
    return render_markdown(parse_markdown(text))


@pytest.mark.parametrize(
    "text",
    [
        "[hello](world)\n",
        '[hello](http://x "Greeting")\n',
        "[a][r]\n\n[r]: http://x\n",
        "[a][]\n\n[a]: http://x\n",
        "[a]\n\n[a]: http://x\n",
        '[a]\n\n[a]: http://x "Title"\n',
        "[a]\n\n[a]: <my url>\n",
        "---\ntitle: Test\n---\n\n# Doc\n",
        "> one\n> two\n",
        '![alt](pic.png "Caption")\n',
        "![alt](<my pic.png>)\n",
    ],
)
def test_round_trip_preserves_text(text):
    assert _round_trip(text) == text


def test_render_link_created_in_code():
    document = parse_markdown("x\n")
    document.children[0].children = [Link.create("http://x", "T", [inline.RawText("a")])]
    assert render_markdown(document) == '[a](http://x "T")\n'


def test_render_reference_forms():
    document = parse_markdown("x\n")
    document.children[0].children = [
        LinkReference("Label", "full", [inline.RawText("a")]),
        inline.RawText(" "),
        LinkReference("b", "collapsed", [inline.RawText("b")]),
        inline.RawText(" "),
        LinkReference("c", "shortcut", [inline.RawText("c")]),
    ]
    assert render_markdown(document) == "[a][Label] [b][] [c]\n"


def test_render_definition_with_escaped_title():
    document = parse_markdown("x\n")
    document.children = [Definition("a", "http://x", 'Say "hi"')]
    assert render_markdown(document) == '[a]: http://x "Say \\"hi\\""\n'


def test_multiline_text_keeps_quote_prefix():
    document = parse_markdown("> [a](x)\n")
    link = document.children[0].children[0].children[0]
    link.children = [inline.RawText("one\ntwo")]
    assert render_markdown(document) == "> [one\n> two](x)\n"


def test_render_inline_keeps_formatting():
    link = parse_markdown("[*em* and `code`](x)\n").children[0].children[0]
    assert render_inline(link) == "*em* and `code`"


class TestFormatDestination:
    """Destinations are bracketed only when they would not parse back."""

    def test_plain_url(self):
        assert format_destination("http://example.com/a?b=c") == "http://example.com/a?b=c"

    def test_empty(self):
        assert format_destination("") == "<>"

    def test_whitespace(self):
        assert format_destination("my file.md") == "<my file.md>"

    def test_unbalanced_parentheses(self):
        assert format_destination("foo(bar") == "<foo(bar>"

    def test_balanced_parentheses(self):
        assert format_destination("foo(bar)") == "foo(bar)"

    def test_angle_brackets_escaped(self):
        assert format_destination("a<b") == "<a\\<b>"

    def test_hugo_shortcode_verbatim(self):
        assert format_destination('{{< ref "page.md" >}}') == '{{< ref "page.md" >}}'
        assert format_destination('{{% relref "page.md" %}}') == '{{% relref "page.md" %}}'
