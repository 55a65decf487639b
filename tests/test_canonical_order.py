import textwrap

from yangfmt.ast import Comment, EmptyLine, Node, Statement
from yangfmt.format import LEAF_CANONICAL_ORDER, FormatConfig, format_text, is_sorted, sort_statements
from yangfmt.format.canonical_order import UNKNOWN_RANK, rank_of


def keywords(nodes: list[Node]) -> list[str]:
    return [node.keyword.text if isinstance(node, Statement) else type(node).__name__ for node in nodes]


def leaf_body() -> list[Node]:
    return [
        Statement.new("description"),
        Comment("// stays put"),
        Statement.new("type"),
        EmptyLine(),
        Statement.new("ext:annotation"),
        Statement.new("units"),
    ]


def test_sort_statements_permutes_only_statement_slots() -> None:
    nodes = leaf_body()
    sort_statements("leaf", nodes)
    assert keywords(nodes) == ["type", "Comment", "units", "EmptyLine", "description", "ext:annotation"]
    assert is_sorted(LEAF_CANONICAL_ORDER, nodes)


def test_sort_statements_applies_to_leaf_list() -> None:
    nodes = leaf_body()
    sort_statements("leaf-list", nodes)
    assert keywords(nodes)[0] == "type"


def test_sort_statements_ignores_other_parents() -> None:
    for parent in (None, "container", "module", "list"):
        nodes = leaf_body()
        sort_statements(parent, nodes)
        assert keywords(nodes) == keywords(leaf_body())


def test_sort_is_stable_for_equal_ranks() -> None:
    first = Statement.new("must", post_comments=["// first"])
    second = Statement.new("must", post_comments=["// second"])
    nodes: list[Node] = [Statement.new("reference"), first, second, Statement.new("when")]
    sort_statements("leaf", nodes)
    assert nodes == [Statement.new("when"), first, second, Statement.new("reference")]


def test_rank_of_unknown_keywords_and_non_statements() -> None:
    assert rank_of(LEAF_CANONICAL_ORDER, Statement.new("when")) == 1
    assert rank_of(LEAF_CANONICAL_ORDER, Statement.new("reference")) == 14
    assert rank_of(LEAF_CANONICAL_ORDER, Statement.new("foo:bar")) == UNKNOWN_RANK
    assert rank_of(LEAF_CANONICAL_ORDER, Comment("// c")) == UNKNOWN_RANK


def test_is_sorted_ignores_comments_and_blank_lines() -> None:
    assert is_sorted(LEAF_CANONICAL_ORDER, [Statement.new("type"), Comment("// c"), Statement.new("units")])
    assert not is_sorted(LEAF_CANONICAL_ORDER, [Statement.new("units"), EmptyLine(), Statement.new("type")])
    assert is_sorted(LEAF_CANONICAL_ORDER, [])


def test_format_with_canonical_order() -> None:
    source = textwrap.dedent(
        """\
        container c {
          description "not sorted";
          leaf foo {
            description "d"; // about d
            mandatory true;
            type string;
          }
          config false;
        }
        """
    )

    assert format_text(source, FormatConfig(canonical_order=False)) == source
    assert format_text(source, FormatConfig(canonical_order=True)) == textwrap.dedent(
        """\
        container c {
          description "not sorted";
          leaf foo {
            type string;
            mandatory true;
            description "d"; // about d
          }
          config false;
        }
        """
    )
