from .rule import Rule, parse_rules, first_match_table
from .l_systems import LSystem, rewrite, generate, markdown_outline
from .turtle_symbols import (
    F,
    TURN_LEFT,
    TURN_RIGHT,
    YAW_LEFT,
    YAW_RIGHT,
    BRANCH_OPEN,
    BRANCH_CLOSE,
)

__all__ = [
    "Rule",
    "parse_rules",
    "first_match_table",
    "LSystem",
    "rewrite",
    "generate",
    "markdown_outline",
    "F",
    "TURN_LEFT",
    "TURN_RIGHT",
    "YAW_LEFT",
    "YAW_RIGHT",
    "BRANCH_OPEN",
    "BRANCH_CLOSE",
]
