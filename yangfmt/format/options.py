"""Formatter configuration."""

from dataclasses import dataclass

DEFAULT_INDENT_WIDTH = 2
DEFAULT_MAX_WIDTH = 79


@dataclass(frozen=True, slots=True)
class FormatConfig:
    """Options controlling indentation, wrapping and statement ordering."""

    indent_width: int = DEFAULT_INDENT_WIDTH
    max_width: int = DEFAULT_MAX_WIDTH
    canonical_order: bool = False

    def __post_init__(self):
        if self.indent_width < 0:
            raise ValueError("indent_width cannot be negative")
        if self.max_width <= 0:
            raise ValueError("max_width must be positive")

    def indent(self, depth: int) -> str:
        return " " * (self.indent_width * depth)
