import textwrap

import pytest

from yangfmt.ast import (
    Comment,
    Date,
    EmptyLine,
    Node,
    Number,
    Other,
    QuotedString,
    RootNode,
    Statement,
    dump_tree,
)
from yangfmt.diagnostics import (
    ParseError,
    UnclosedBlockError,
    UnexpectedClosingBraceError,
    UnterminatedStringError,
)
from yangfmt.parser import parse

from tests._shared_cases import YANG_CASES, YangCase, case_id


def dedent(text: str) -> str:
    return textwrap.dedent(text).strip() + "\n"


def test_parse_smoke_dump() -> None:
    source = dedent(
        """
        /*
         * This is a block comment
         */

        module test {
            yang-version 1;
            namespace "https://github.com/Hubro/yangparse";
            description 'A small smoke test to make sure basic lexing works';

            revision 2018-12-03 {
                // I'm a comment!
                description
                  "A multi-line string starting in an indented line

                   This is an idiomatic way to format large strings
                   in YANG models";
            }

            ext:omg-no-value;

            number 12.34; // Same-line comment
        }
        """
    )
    expected = dedent(
        """
        (root
          (comment)
          [EmptyLine]
          (Keyword "module" Other
            (Keyword "yang-version" Number)
            (Keyword "namespace" String)
            (Keyword "description" String)
            [EmptyLine]
            (Keyword "revision" Date
              (comment)
              (Keyword "description" String))
            [EmptyLine]
            (ExtensionKeyword "ext:omg-no-value")
            [EmptyLine]
            (INVALID "number" Number <post-comment>)))
        """
    )
    assert dump_tree(parse(source)) == expected


def test_parse_dump_shows_every_comment_slot() -> None:
    source = dedent(
        """
        // Comment before the module
        module /* Comment before the module name */ foo // Comment after the module name
        {
          // Comment inside module
          description // Comment after description keyword
            "Description" // Comment before semicolon
          ; // Comment after semicolon

          container /* before name */ bar /* after name */ { // after opening brace
          } // after closing brace
        }
        """
    )
    expected = dedent(
        """
        (root
          (comment)
          (Keyword "module" <comment> Other <comment>
            (comment)
            (Keyword "description" <comment> String <comment> <post-comment>)
            [EmptyLine]
            (Keyword "container" <comment> Other <comment> <post-comment>)
            (comment)))
        """
    )
    assert dump_tree(parse(source)) == expected


def test_parse_tree_shape() -> None:
    root = parse("module foo {\n  revision 2020-01-01 { x 1; }\n  leaf bar;\n}\n")
    assert root == RootNode(
        children=[
            Statement.new(
                "module",
                value=Other("foo"),
                children=[
                    Statement.new(
                        "revision",
                        value=Date("2020-01-01"),
                        children=[Statement.new("x", value=Number("1"))],
                    ),
                    Statement.new("leaf", value=Other("bar")),
                ],
            )
        ]
    )


def test_parse_empty_block_and_leaf_statement() -> None:
    root = parse("a {}\nb;\n")
    block, leaf = root.children
    assert isinstance(block, Statement) and block.children == []
    assert block.is_block
    assert isinstance(leaf, Statement) and leaf.children is None
    assert not leaf.is_block


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("a;\nb;\n", [Statement.new("a"), Statement.new("b")]),
        ("a;\n\nb;\n", [Statement.new("a"), EmptyLine(), Statement.new("b")]),
        ("a;\n\n\nb;\n", [Statement.new("a"), EmptyLine(), EmptyLine(), Statement.new("b")]),
        ("a;\n   \n b;\n", [Statement.new("a"), EmptyLine(), Statement.new("b")]),
        ("a; b;\n", [Statement.new("a"), Statement.new("b")]),
    ],
)
def test_parse_records_blank_lines(source: str, expected: list[Node]) -> None:
    assert parse(source).children == expected


def test_parse_blank_lines_keep_their_line_break_text() -> None:
    root = parse("a;\r\n\r\nb;\r\n")
    assert root.children[1] == EmptyLine("\r\n")


def test_parse_comment_after_closing_brace_is_a_sibling() -> None:
    root = parse("a {\n}// c\n")
    assert root.children == [Statement.new("a", children=[]), Comment("// c")]


def test_parse_string_values_keep_their_quotes() -> None:
    root = parse("a 'x';\n")
    assert root.children == [Statement.new("a", value=QuotedString("'x'"))]


def test_parse_accepts_several_top_level_statements_and_empty_input() -> None:
    assert parse("").children == []
    assert parse("\n\n").children == [EmptyLine()]
    assert [node.keyword.text for node in parse("module a;\nsubmodule b;\n").children] == [
        "module",
        "submodule",
    ]


def test_parse_accepts_bytes() -> None:
    assert parse(b"a 1;").children == [Statement.new("a", value=Number("1"))]


def test_parse_unexpected_closing_brace() -> None:
    with pytest.raises(UnexpectedClosingBraceError) as exc_info:
        parse("a;\n}")
    assert exc_info.value.position == 3
    assert exc_info.value.message == "Unexpected closing curly brace"


def test_parse_unclosed_block() -> None:
    with pytest.raises(UnclosedBlockError) as exc_info:
        parse("foo { bar;")
    assert exc_info.value.position == 6
    assert exc_info.value.message == "Unclosed block at end of file"


def test_parse_propagates_lexer_errors() -> None:
    with pytest.raises(ParseError) as exc_info:
        parse('foo "bar')
    assert isinstance(exc_info.value, UnterminatedStringError)
    assert exc_info.value.position == 4


def test_parse_deep_nesting_does_not_recurse() -> None:
    depth = 5000
    root = parse("a {" * depth + "}" * depth)

    nodes = root.children
    levels = 0
    while nodes:
        (node,) = nodes
        assert isinstance(node, Statement)
        levels += 1
        nodes = node.children or []
    assert levels == depth


@pytest.mark.parametrize("case", YANG_CASES, ids=case_id)
def test_parse_all_shared_cases(case: YangCase) -> None:
    root = parse(case.source)
    assert isinstance(root.children, list)
    assert dump_tree(root).startswith("(root")
