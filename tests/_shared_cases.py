"""Centralized YANG source cases used across parser/formatter tests."""

from __future__ import annotations

from dataclasses import dataclass
import textwrap


@dataclass(frozen=True, slots=True)
class YangCase:
    name: str
    source: str


def _dedent(text: str) -> str:
    return textwrap.dedent(text).strip() + "\n"


YANG_CASES: tuple[YangCase, ...] = (
    YangCase(name="single_statement", source="module foo { bar 'x' ; }\n"),
    YangCase(name="empty_input", source=""),
    YangCase(name="only_comments", source="// one\n/* two */\n"),
    YangCase(
        name="small_module",
        source=_dedent(
            """
            module example {
                yang-version 1.1;
                namespace "urn:example:system";
                prefix "sys";

                import ietf-inet-types { prefix inet; revision-date 2013-07-15; }

                organization 'Example Inc.';
                contact
                    "joe@example.com";

                revision 2007-06-09 {
                    description "Initial revision.";
                }
            }
            """
        ),
    ),
    YangCase(
        name="multiline_descriptions",
        source=_dedent(
            """
            container system {
                description
                      "The first line.
                       An indented continuation.

                       After a blank line.";
                leaf host-name {
                    type string;
                    description "
                        Hostname for this system
                    ";
                }
            }
            """
        ),
    ),
    YangCase(
        name="string_concatenation",
        source=_dedent(
            """
            typedef ipv4-address {
                type string {
                    pattern '(([0-9]|[1-9][0-9]|1[0-9][0-9]|2[0-4][0-9]|25[0-5])\\.){3}'
                          +  '([0-9]|[1-9][0-9]|1[0-9][0-9]|2[0-4][0-9]|25[0-5])' // octets
                          + '(%[\\p{N}\\p{L}]+)?';
                }
            }
            """
        ),
    ),
    YangCase(
        name="comments_everywhere",
        source=_dedent(
            """
            // Leading
            module /* a */ weird // b
            {
                leaf x /* c */ { type int8; } // d
                leaf y // e
                  /* f */ ; // g
                pattern "a" /* h */ + "b" // i
                  ;
            }
            // Trailing
            """
        ),
    ),
    YangCase(
        name="blank_line_runs",
        source="\n\n\nmodule m {\n\n\n\n  leaf a { type string; }\n\n\n  leaf b { type string; }\n\n}\n\n\n",
    ),
    YangCase(
        name="crlf_line_breaks",
        source="module a {\r\n  leaf b {\r\n    type string;\r\n  }\r\n\r\n\r\n  leaf c;\r\n}\r\n",
    ),
    YangCase(
        name="extensions_and_unknown_keywords",
        source=_dedent(
            """
            module ext {
                ext:annotation foo {
                    ext:flag;
                }
                bogus-keyword 12.5;
                leaf-list tags { type string; ordered-by user; }
            }
            """
        ),
    ),
    YangCase(
        name="long_values_wrap",
        source=_dedent(
            """
            module wrap {
                container c {
                    leaf l {
                        description "This description is long enough that it has to move onto the next line";
                        default this-is-a-rather-long-unquoted-value-that-also-needs-to-be-wrapped-somehow;
                    }
                }
            }
            """
        ),
    ),
)


def case_id(case: YangCase) -> str:
    return case.name
