from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

import numpy as np
from pydantic import BaseModel, Field, model_validator

from .branch import Branch
from .engine import (
    BRANCH_CLOSE,
    BRANCH_OPEN,
    F,
    TURN_LEFT,
    TURN_RIGHT,
    YAW_LEFT,
    YAW_RIGHT,
)
from .transform_3d import Transform3D, local_euler


class BranchStackError(ValueError):
    """Raised when a `]` has no matching `[`."""


class TurnMode(str, Enum):
    FIXED = "fixed"
    RANGED_RANDOM = "ranged_random"


class TurtleConfig(BaseModel):
    """Turtle parameters. Angles are in degrees."""

    turn_mode: TurnMode = TurnMode.RANGED_RANDOM
    min_angle: float = Field(default=25.0, description="Lower bound of sampled turns")
    max_angle: float = Field(default=60.0, description="Upper bound of sampled turns")
    angle: float = Field(default=25.0, description="Turn used in fixed mode")
    yaw_multiplier: float = Field(
        default=4.0, description="Scale of `<` and `>` turns relative to `+` and `-`"
    )
    step_length: float = Field(default=1.0, gt=0.0)

    @model_validator(mode="after")
    def _check_angle_range(self):
        if self.min_angle > self.max_angle:
            raise ValueError(
                f"min_angle ({self.min_angle}) must not exceed max_angle ({self.max_angle})"
            )
        return self

    def turn_angle(self, rng: Optional[np.random.Generator], scale: float = 1.0) -> float:
        if self.turn_mode == TurnMode.FIXED:
            return self.angle * scale
        if rng is None:
            raise ValueError("ranged_random turn mode needs a random generator")
        return float(rng.uniform(self.min_angle * scale, self.max_angle * scale))


@dataclass
class TurtleState:
    transform: Transform3D
    branch: Branch

    def copy(self) -> "TurtleState":
        return TurtleState(transform=self.transform.model_copy(), branch=self.branch)


@dataclass
class TreeBlueprint:
    root: Branch
    branches: List[Branch] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.branches)


def build_tree(
    sequence: str,
    config: Optional[TurtleConfig] = None,
    rng: Optional[np.random.Generator] = None,
) -> TreeBlueprint:
    """Interpret `sequence` with a turtle and return the resulting branch tree.

    The flat branch list starts with the root and continues with one branch
    per `F`, in the order they appear in the sequence.
    """
    config = config or TurtleConfig()

    root = Branch(max_length=config.step_length)
    branches: List[Branch] = [root]

    turtle = TurtleState(transform=Transform3D(), branch=root)
    turtle.transform.position = turtle.transform.translated(config.step_length)
    transform_stack: List[TurtleState] = []

    for symbol in sequence:
        if symbol == F:
            branch = Branch(
                max_length=config.step_length,
                position=turtle.transform.position.copy(),
                direction=turtle.transform.forward,
            )
            turtle.branch.add_child(branch)
            branches.append(branch)

            turtle.branch = branch
            turtle.transform.position = turtle.transform.translated(config.step_length)

        elif symbol == TURN_LEFT:
            turtle.transform.rotation = local_euler(
                turtle.transform.rotation, "z", config.turn_angle(rng)
            )

        elif symbol == TURN_RIGHT:
            turtle.transform.rotation = local_euler(
                turtle.transform.rotation, "z", -config.turn_angle(rng)
            )

        elif symbol == YAW_LEFT:
            turtle.transform.rotation = local_euler(
                turtle.transform.rotation, "y", config.turn_angle(rng, config.yaw_multiplier)
            )

        elif symbol == YAW_RIGHT:
            turtle.transform.rotation = local_euler(
                turtle.transform.rotation, "y", -config.turn_angle(rng, config.yaw_multiplier)
            )

        elif symbol == BRANCH_OPEN:
            transform_stack.append(turtle.copy())

        elif symbol == BRANCH_CLOSE:
            if not transform_stack:
                raise BranchStackError("Unmatched BranchClose symbol encountered.")
            turtle = transform_stack.pop()

    return TreeBlueprint(root=root, branches=branches)
