"""
Predicate contract tests.

These pin down how a single `Match` is evaluated against one node: tag name,
attribute presence/value rules (including the class-token rule), and the
recursive parent / first-child constraints.
"""

import pytest

from dorkhound.markup import Match, parse


def texts(elements):
    return [element.text() for element in elements]


class TestNameConstraint:
    def test_matches_exact_tag_name(self):
        doc = parse("<p>a</p><span>b</span><p>c</p>")
        assert texts(doc.find_all(Match(name="p"))) == ["a", "c"]

    def test_name_never_matches_non_element_nodes(self):
        doc = parse("<p>text</p>")
        text_node = doc.find(Match(name="p")).node.contents[0]
        assert not Match(name="p").matches(text_node)
        assert not Match(name="p").matches(doc.node)

    def test_name_is_case_sensitive_after_parser_lowercasing(self):
        doc = parse("<DIV>x</DIV>")
        assert doc.find(Match(name="div")) is not None
        assert doc.find(Match(name="DIV")) is None


class TestAttributeConstraint:
    def test_class_matches_single_token(self):
        doc = parse('<p class="g ads">a</p><p class="x g y">b</p><p class="gx">c</p>')
        assert texts(doc.find_all(Match(attributes={"class": "g"}))) == ["a", "b"]

    def test_class_token_split_on_any_whitespace(self):
        doc = parse('<p class="x\tg\ny">a</p>')
        assert doc.find(Match(attributes={"class": "g"})) is not None

    def test_non_class_attribute_requires_exact_value(self):
        doc = parse('<p id="main">a</p><p id="main x">b</p><p id="x main">c</p>')
        assert texts(doc.find_all(Match(attributes={"id": "main"}))) == ["a"]

    def test_non_class_attribute_with_spaces_matches_whole_value(self):
        doc = parse('<p title="two words">a</p>')
        assert doc.find(Match(attributes={"title": "two words"})) is not None
        assert doc.find(Match(attributes={"title": "two"})) is None

    def test_empty_required_value_only_checks_presence(self):
        doc = parse('<a href="">e</a><a href="/x">f</a><a>g</a><a href>h</a>')
        assert texts(doc.find_all(Match(name="a", attributes={"href": ""}))) == ["e", "f", "h"]

    def test_every_listed_attribute_must_hold(self):
        doc = parse('<a class="r" href="/1">one</a><a class="r">two</a><a href="/3">three</a>')
        found = doc.find_all(Match(name="a", attributes={"class": "r", "href": ""}))
        assert texts(found) == ["one"]

    def test_missing_attribute_fails(self):
        doc = parse("<div>x</div>")
        assert doc.find(Match(name="div", attributes={"class": "g"})) is None

    def test_empty_attribute_mapping_is_satisfied(self):
        doc = parse("<div>x</div>")
        assert doc.find(Match(name="div", attributes={})) is not None

    def test_duplicate_attribute_first_occurrence_wins(self):
        doc = parse('<a href="/first" href="/second">x</a>')
        assert doc.find(Match(name="a", attributes={"href": "/first"})) is not None
        assert doc.find(Match(name="a", attributes={"href": "/second"})) is None


class TestParentConstraint:
    def test_parent_must_match(self):
        doc = parse("<a><h3>in link</h3></a><div><h3>in div</h3></div>")
        assert texts(doc.find_all(Match(name="h3", parent=Match(name="a")))) == ["in link"]

    def test_parent_checks_direct_parent_only(self):
        doc = parse("<a><span><h3>deep</h3></span></a>")
        assert doc.find(Match(name="h3", parent=Match(name="a"))) is None

    def test_nested_parent_chain_three_levels(self):
        doc = parse(
            '<div class="g"><a href="/r"><h3>hit</h3></a></div>'
            '<div class="other"><a href="/o"><h3>miss</h3></a></div>'
        )
        heading = Match(
            name="h3",
            parent=Match(name="a", parent=Match(name="div", attributes={"class": "g"})),
        )
        assert texts(doc.find_all(heading)) == ["hit"]

    def test_detached_element_has_no_parent(self):
        doc = parse("<div><p>x</p></div>")
        paragraph = doc.find(Match(name="p")).detach()
        assert not Match(parent=Match()).matches(paragraph.node)

    def test_body_content_parent_is_body(self):
        doc = parse("<div>x</div>")
        assert doc.find(Match(name="div", parent=Match(name="body"))).text() == "x"

    def test_html_parent_is_document_not_element(self):
        doc = parse("<div>x</div>")
        assert doc.find(Match(name="html", parent=Match())) is not None
        assert doc.find(Match(name="html", parent=Match(name="body"))) is None

    def test_paragraph_closed_by_block_element(self):
        doc = parse("<p>a<div>b</div></p>")
        assert doc.find(Match(name="p")).text() == "a"
        assert doc.find(Match(name="div", parent=Match(name="p"))) is None
        assert doc.find(Match(name="div", parent=Match(name="body"))).text() == "b"


class TestFirstChildConstraint:
    def test_first_child_must_match(self):
        doc = parse("<ul><li>one</li></ul><ul><p>no</p><li>two</li></ul>")
        found = doc.find_all(Match(name="ul", first_child=Match(name="li")))
        assert texts(found) == ["one"]

    def test_first_child_can_be_text(self):
        doc = parse("<ul>\n<li>two</li></ul>")
        assert doc.find(Match(name="ul", first_child=Match(name="li"))) is None

    def test_no_children_fails(self):
        doc = parse("<ul></ul>")
        assert doc.find(Match(name="ul", first_child=Match())) is None

    def test_first_child_recurses(self):
        doc = parse('<a href="/x"><h3><b>x</b></h3></a><a href="/y"><h3>y</h3></a>')
        match = Match(name="a", first_child=Match(name="h3", first_child=Match(name="b")))
        assert [e.attribute("href") for e in doc.find_all(match)] == ["/x"]


class TestMatchValue:
    def test_empty_match_matches_anything(self):
        doc = parse("<p>x</p>")
        assert Match().is_empty
        assert Match().matches(doc.node)
        assert Match().matches(doc.find(Match(name="p")).node)

    def test_match_with_any_field_is_not_empty(self):
        assert not Match(name="p").is_empty
        assert not Match(attributes={}).is_empty

    def test_none_node_never_matches(self):
        assert not Match().matches(None)

    def test_attributes_are_copied(self):
        required = {"class": "g"}
        match = Match(attributes=required)
        required["class"] = "changed"
        assert match.attributes == {"class": "g"}

    def test_predicates_are_immutable(self):
        match = Match(name="p")
        with pytest.raises(AttributeError):
            match.name = "div"

    def test_equal_predicates_compare_equal(self):
        assert Match(name="a", parent=Match(name="div")) == Match(name="a", parent=Match(name="div"))

    def test_equal_predicates_hash_equal(self):
        first = Match(name="div", attributes={"class": "g"}, parent=Match(name="body"))
        second = Match(name="div", attributes={"class": "g"}, parent=Match(name="body"))
        assert hash(first) == hash(second)
        assert len({first, second, Match(name="div")}) == 2

    def test_predicates_work_as_dict_keys(self):
        labels = {Match(name="a", attributes={"href": ""}): "link"}
        assert labels[Match(name="a", attributes={"href": ""})] == "link"
