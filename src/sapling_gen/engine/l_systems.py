from collections.abc import Mapping, Sequence
from typing import Dict, List

import rerun as rr
from pydantic import BaseModel, Field, field_validator

from .rule import Rule, first_match_table, parse_rules
from .turtle_symbols import BRANCH_CLOSE, BRANCH_OPEN


def _rewrite(sequence: str, table: Dict[str, str]) -> str:
    return "".join([table.get(symbol, symbol) for symbol in sequence])


def rewrite(sequence: str, rules: Sequence[Rule]) -> str:
    """Apply one rewriting pass. Symbols without a rule are copied unchanged."""
    return _rewrite(sequence, first_match_table(rules))


def generate(axiom: str, rules: Sequence[Rule], iterations: int) -> str:
    """Rewrite the axiom `iterations` times."""
    if iterations < 0:
        raise ValueError(f"iterations must be >= 0, got {iterations}")

    table = first_match_table(rules)
    sequence = axiom
    for _ in range(iterations):
        sequence = _rewrite(sequence, table)
    return sequence


def markdown_outline(sequence: str) -> List[str]:
    """List items for each run of symbols, indented by bracket depth."""
    lines: List[str] = []
    depth = 0
    run = ""
    for symbol in sequence:
        if symbol in (BRANCH_OPEN, BRANCH_CLOSE):
            if run:
                lines.append(f"{'  ' * depth}- {run}")
                run = ""
            if symbol == BRANCH_OPEN:
                depth += 1
            else:
                depth = max(0, depth - 1)
            continue
        run += symbol

    if run:
        lines.append(f"{'  ' * depth}- {run}")
    return lines


class LSystem(BaseModel):
    world: str = ""
    rules: List[Rule] = Field(default_factory=list)
    generation: int = 0

    @field_validator("rules", mode="before")
    @classmethod
    def _parse_rules(cls, value):
        if isinstance(value, (Mapping, list, tuple)):
            return parse_rules(value)
        return value

    def iterate(self, n: int = 1):
        self.world = generate(self.world, self.rules, n)
        self.generation += n

    def log_as_markdown(self):
        rr.log(
            "markdown",
            rr.TextDocument(
                "\n".join(markdown_outline(self.world)),
                media_type=rr.MediaType.MARKDOWN,
            ),
        )
