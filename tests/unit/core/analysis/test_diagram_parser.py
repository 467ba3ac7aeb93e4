from __future__ import annotations

"""
Unit tests for the Diagram Parser.

Verifies depth inference from indentation cells, content attachment,
forest assembly order and the structural error taxonomy.
"""

import pytest

from setupfs.core.analysis.diagram_parser import (
    classify_line,
    iter_diagram_lines,
    parse_diagram,
    unescape_content,
)
from setupfs.domain.errors import (
    DirectoryWithContent,
    InvalidDepthJump,
    MalformedLine,
    OrphanContent,
    ParseError,
)
from setupfs.domain.tree_models import LineKind

# -----------------------------------------------------------------------------
# LINE CLASSIFICATION
# -----------------------------------------------------------------------------

def test_classify_branch_line_depth_counts_cells():
    """Depth is the number of 2-char cells before the marker, bars or blanks."""
    assert classify_line(1, "|_root").depth == 0
    assert classify_line(1, "| |_child").depth == 1
    assert classify_line(1, "|   |_grandchild").depth == 2
    assert classify_line(1, "      |_deep").depth == 3


def test_classify_branch_line_payload_is_trimmed_name():
    line = classify_line(7, "| |_my file.txt   ")

    assert line.kind is LineKind.BRANCH
    assert line.payload == "my file.txt"
    assert line.number == 7


def test_classify_content_line():
    line = classify_line(3, '|     "hello world"')

    assert line.kind is LineKind.CONTENT
    assert line.depth == 3
    assert line.payload == "hello world"


def test_classify_blank_and_spacer_lines_are_skipped():
    assert classify_line(1, "") is None
    assert classify_line(1, "     ") is None
    assert classify_line(1, "|") is None
    assert classify_line(1, "| |   ") is None


@pytest.mark.parametrize("raw", [
    "plain text",
    "|_",
    '|_bad"name',
    "|_a|_b",
    '  "unterminated',
    '  "a"b"',
    "   |_odd-indent",
    "|-wrong-marker",
])
def test_classify_malformed_lines(raw):
    with pytest.raises(MalformedLine):
        classify_line(5, raw)


def test_unescape_content_sequences():
    assert unescape_content(r"a\"b") == 'a"b'
    assert unescape_content(r"line1\nline2") == "line1\nline2"
    assert unescape_content(r"tab\there") == "tab\there"
    assert unescape_content(r"back\\slash") == "back\\slash"
    assert unescape_content(r"\q") == "q"


def test_iter_diagram_lines_removes_common_margin():
    text = "\n    |_a\n      |_b\n"
    lines = list(iter_diagram_lines(text))

    assert [(l.number, l.depth, l.payload) for l in lines] == [(2, 0, "a"), (3, 1, "b")]

# -----------------------------------------------------------------------------
# TREE ASSEMBLY
# -----------------------------------------------------------------------------

def test_parse_simple_diagram_structure(simple_diagram):
    forest = parse_diagram(simple_diagram)

    assert [root.name for root in forest] == ["dir-a", "dir-c"]

    dir_a = forest.roots[0]
    dir_b = dir_a.children[0]
    file_one = dir_b.children[0]
    assert dir_b.name == "dir-b"
    assert file_one.name == "file-one"
    assert file_one.content == "hello"
    assert file_one.is_leaf
    assert dir_a.content is None

    file_two = forest.roots[1].children[0]
    assert file_two.name == "file-two"
    assert file_two.content is None


def test_parse_indented_diagram_with_spacer_line(jcr_diagram):
    forest = parse_diagram(jcr_diagram)

    assert [root.name for root in forest] == ["initial-content", "server-zip"]
    leaf = forest.roots[1].children[0].children[0].children[0]
    assert leaf.name == "test-file"
    assert leaf.content == "zip-content"


def test_parse_margin_does_not_change_result(simple_diagram):
    indented = "\n".join("        " + line for line in simple_diagram.splitlines())

    assert parse_diagram(indented) == parse_diagram(simple_diagram)


def test_parse_sibling_order_is_preserved():
    forest = parse_diagram("|_d\n  |_z\n  |_a\n  |_m\n")

    assert [c.name for c in forest.roots[0].children] == ["z", "a", "m"]


def test_parse_depth_may_drop_several_levels():
    forest = parse_diagram("|_a\n  |_b\n    |_c\n      |_d\n|_e\n")

    assert [root.name for root in forest] == ["a", "e"]
    assert forest.roots[1].is_leaf


def test_parse_multiline_content_is_joined():
    forest = parse_diagram('|_f\n  "first"\n  "second"\n')

    assert forest.roots[0].content == "first\nsecond"


def test_parse_escaped_content():
    forest = parse_diagram('|_f\n  "say \\"hi\\"\\n"\n')

    assert forest.roots[0].content == 'say "hi"\n'


def test_parse_empty_quoted_content():
    forest = parse_diagram('|_f\n  ""\n')

    assert forest.roots[0].content == ""


def test_parse_blank_diagram_is_empty_forest():
    forest = parse_diagram("\n   \n\n")

    assert forest.is_empty
    assert len(forest) == 0


def test_parse_names_are_opaque_tokens():
    forest = parse_diagram("|_.hidden\n|_données v2.tar.gz\n|_a+b=c\n")

    assert [root.name for root in forest] == [".hidden", "données v2.tar.gz", "a+b=c"]

# -----------------------------------------------------------------------------
# STRUCTURAL ERRORS
# -----------------------------------------------------------------------------

def test_content_at_depth_zero_is_orphan():
    with pytest.raises(OrphanContent) as exc:
        parse_diagram('\n\n"x"\n')

    assert exc.value.line == 3


def test_content_after_directory_with_children_is_orphan():
    with pytest.raises(OrphanContent) as exc:
        parse_diagram('|_a\n  |_b\n  "x"\n')

    assert exc.value.line == 3


def test_content_too_deep_is_orphan():
    with pytest.raises(OrphanContent):
        parse_diagram('|_a\n    "x"\n')


def test_depth_jump_from_zero_to_two():
    with pytest.raises(InvalidDepthJump) as exc:
        parse_diagram("|_a\n    |_b\n")

    assert exc.value.line == 2


def test_first_entry_must_be_a_root():
    with pytest.raises(InvalidDepthJump) as exc:
        parse_diagram("| |_a\n")

    assert exc.value.line == 1


def test_child_under_file_with_content_is_rejected():
    with pytest.raises(DirectoryWithContent) as exc:
        parse_diagram('|_a\n  "x"\n  |_b\n')

    assert exc.value.line == 3


def test_malformed_line_reports_number_and_text():
    with pytest.raises(MalformedLine) as exc:
        parse_diagram("|_a\n  |_b\n  oops\n")

    err = exc.value
    assert isinstance(err, ParseError)
    assert err.line == 3
    assert "oops" in err.text
    assert "line 3" in str(err)

# -----------------------------------------------------------------------------
# WHITESPACE AND LINE BREAKS
# -----------------------------------------------------------------------------

def test_literal_tabs_in_name_and_content_are_kept():
    forest = parse_diagram('|_a\tb\n  "x\ty"\n')

    assert forest.roots[0].name == "a\tb"
    assert forest.roots[0].content == "x\ty"


def test_tabs_in_indentation_are_expanded():
    # One tab spans two cells
    forest = parse_diagram("|_a\n  |_b\n\t|_c\n")

    assert forest.roots[0].children[0].children[0].name == "c"


def test_only_newlines_split_rows():
    forest = parse_diagram('|_f\n  "page\x0cbreak sep"\n|_g\n')

    assert forest.roots[0].content == "page\x0cbreak sep"
    assert [root.name for root in forest] == ["f", "g"]


def test_crlf_line_endings_keep_numbering():
    with pytest.raises(MalformedLine) as exc:
        parse_diagram("|_a\r\n\x0b\r\n  oops\r\n")

    assert exc.value.line == 3


@pytest.mark.parametrize("name", ["/etc", "\\share", "..", "a/../b", "..\\up"])
def test_names_leaving_the_root_are_rejected(name):
    with pytest.raises(MalformedLine):
        parse_diagram(f"|_{name}\n")


def test_names_with_dots_are_allowed():
    forest = parse_diagram("|_..hidden\n|_a..b\n")

    assert [root.name for root in forest] == ["..hidden", "a..b"]
