from .engine import LSystem, Rule, generate, rewrite
from .branch import Branch, iter_depth_first
from .tree_builder import (
    BranchStackError,
    TreeBlueprint,
    TurnMode,
    TurtleConfig,
    TurtleState,
    build_tree,
)
from .growth import GrowthSimulator, is_fully_grown, recalc_positions
from .config import GrowthConfig, TreeConfig
from .tree import GrowingTree

__all__ = [
    "LSystem",
    "Rule",
    "generate",
    "rewrite",
    "Branch",
    "iter_depth_first",
    "BranchStackError",
    "TreeBlueprint",
    "TurnMode",
    "TurtleConfig",
    "TurtleState",
    "build_tree",
    "GrowthSimulator",
    "is_fully_grown",
    "recalc_positions",
    "GrowthConfig",
    "TreeConfig",
    "GrowingTree",
]
