"""Statement keyword vocabulary (YANG 1.1, RFC 7950)."""

import re
from typing import Final

STATEMENT_KEYWORDS: Final[frozenset[str]] = frozenset(
    {
        "action",
        "anydata",
        "anyxml",
        "argument",
        "augment",
        "base",
        "belongs-to",
        "bit",
        "case",
        "choice",
        "config",
        "contact",
        "container",
        "default",
        "description",
        "deviate",
        "deviation",
        "enum",
        "error-app-tag",
        "error-message",
        "extension",
        "feature",
        "fraction-digits",
        "grouping",
        "identity",
        "if-feature",
        "import",
        "include",
        "input",
        "key",
        "leaf",
        "leaf-list",
        "length",
        "list",
        "mandatory",
        "max-elements",
        "min-elements",
        "modifier",
        "module",
        "must",
        "namespace",
        "notification",
        "ordered-by",
        "organization",
        "output",
        "path",
        "pattern",
        "position",
        "prefix",
        "presence",
        "range",
        "reference",
        "refine",
        "require-instance",
        "revision",
        "revision-date",
        "rpc",
        "status",
        "submodule",
        "type",
        "typedef",
        "unique",
        "units",
        "uses",
        "value",
        "when",
        "yang-version",
        "yin-element",
    }
)

# identifier ":" identifier, see "unknown-statement" in the ABNF
EXTENSION_KEYWORD_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"[a-zA-Z_][a-zA-Z0-9\-_.]*:[a-zA-Z_][a-zA-Z0-9\-_.]*"
)
