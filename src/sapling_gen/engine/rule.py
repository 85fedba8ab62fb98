from collections.abc import Mapping, Sequence
from typing import Dict, List, Tuple

from pydantic import BaseModel, Field


class Rule(BaseModel):
    """Production rule replacing a single symbol with a sequence of symbols."""

    predecessor: str = Field(min_length=1, max_length=1)
    replacement: str = Field(default="", description="Empty replacement deletes the symbol")

    def __str__(self) -> str:
        return f"{self.predecessor} -> {self.replacement}"


def parse_rules(
    rules: Sequence[Rule | Mapping | Tuple[str, str]] | Mapping[str, str],
) -> List[Rule]:
    """Normalise rules given as models, dicts, (predecessor, replacement) pairs or a mapping."""
    if isinstance(rules, Mapping):
        items = list(rules.items())
    else:
        items = list(rules)

    parsed: List[Rule] = []
    for item in items:
        if isinstance(item, Rule):
            parsed.append(item)
        elif isinstance(item, Mapping):
            parsed.append(Rule.model_validate(item))
        elif (
            isinstance(item, (tuple, list))
            and len(item) == 2
            and all(isinstance(part, str) for part in item)
        ):
            predecessor, replacement = item
            parsed.append(Rule(predecessor=predecessor, replacement=replacement))
        else:
            raise ValueError(
                f"Rule must be a Rule, a mapping or a (predecessor, replacement) pair, got {item!r}"
            )
    return parsed


def first_match_table(rules: Sequence[Rule]) -> Dict[str, str]:
    """Map every predecessor to the replacement of its earliest-listed rule."""
    table: Dict[str, str] = {}
    for rule in rules:
        # Later rules with the same predecessor are unreachable
        table.setdefault(rule.predecessor, rule.replacement)
    return table
