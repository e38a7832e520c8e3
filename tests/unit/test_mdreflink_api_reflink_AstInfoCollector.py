"""Unit tests for mdreflink.api.reflink.AstInfoCollector."""

import pytest
from marko import block

from mdreflink.api.markdown import Link, LinkReference, parse_markdown
from mdreflink.api.reflink import AstInfoCollector

pytestmark = pytest.mark.reflink

DOCUMENT = """Intro [a](x)

# One

[b](y) and [a](x)

[r]: z
[R]: w

## Two

[c][r]
"""


@pytest.fixture
def info():
    return AstInfoCollector().collect(parse_markdown(DOCUMENT))


class TestLinks:
    """Link records get identity ids, heading ids and parents."""

    def test_records_in_traversal_order(self, info):
        assert [record.identity for record in info.links] == ["a", "b", "a", "c"]

    def test_same_identity_shares_id(self, info):
        ids = [record.id for record in info.links]
        assert ids == [1, 2, 1, 3]

    def test_heading_ids(self, info):
        assert [record.heading_id for record in info.links] == [None, 1, 1, 2]

    def test_grouped_by_identity(self, info):
        assert list(info.links_by_identity) == ["a", "b", "c"]
        assert len(info.links_by_identity["a"]) == 2

    def test_parent_holds_node(self, info):
        for record in info.links:
            assert any(child is record.elem for child in record.parent.children)

    def test_node_types(self, info):
        assert isinstance(info.links[0].elem, Link)
        assert isinstance(info.links[3].elem, LinkReference)

    def test_empty_identity_skipped(self):
        info = AstInfoCollector().collect(parse_markdown("[](x) and [ ](y)\n"))
        assert info.links == []

    def test_whitespace_equivalent_text_shares_identity(self):
        info = AstInfoCollector().collect(parse_markdown("[hello  world](x) and [hello\nworld](x)\n"))
        assert [record.identity for record in info.links] == ["hello world", "hello world"]
        assert info.links[0].id == info.links[1].id

    def test_case_is_part_of_identity(self):
        info = AstInfoCollector().collect(parse_markdown("[Foo](x) [foo](x)\n"))
        assert [record.identity for record in info.links] == ["Foo", "foo"]
        assert info.links[0].id != info.links[1].id
        assert list(info.links_by_identity) == ["Foo", "foo"]

    def test_formatting_is_part_of_identity(self):
        info = AstInfoCollector().collect(parse_markdown("[*a*](x) [a](y)\n"))
        assert [record.identity for record in info.links] == ["*a*", "a"]
        assert info.links[0].id != info.links[1].id


class TestDefinitions:
    """First definition per identifier wins; every definition is listed."""

    def test_first_wins(self, info):
        assert list(info.definitions_by_identifier) == ["r"]
        assert info.definitions_by_identifier["r"].elem.dest == "z"

    def test_all_definitions_listed(self, info):
        assert [record.elem.dest for record in info.definitions] == ["z", "w"]

    def test_parent_is_document(self, info):
        assert isinstance(info.definitions[0].parent, block.Document)


class TestHeadings:
    """Headings are numbered in document order."""

    def test_heading_ids(self, info):
        assert [record.id for record in info.headings] == [1, 2]
        assert info.heading_ids[info.headings[1].elem] == 2

    def test_setext_heading(self):
        info = AstInfoCollector().collect(parse_markdown("Title\n=====\n\n[a](x)\n"))
        assert len(info.headings) == 1
        assert info.links[0].heading_id == 1

    def test_fresh_counters_per_instance(self):
        tree_text = "# H\n\n[a](x)\n"
        first = AstInfoCollector().collect(parse_markdown(tree_text))
        second = AstInfoCollector().collect(parse_markdown(tree_text))
        assert first.links[0].id == second.links[0].id == 1
        assert first.links[0].heading_id == second.links[0].heading_id == 1

    def test_collect_does_not_mutate(self):
        from mdreflink.api.markdown import render_markdown

        tree = parse_markdown(DOCUMENT)
        before = render_markdown(tree)
        AstInfoCollector().collect(tree)
        assert render_markdown(tree) == before
