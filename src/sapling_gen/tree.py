from typing import List, Optional

import numpy as np

from .branch import Branch
from .config import TreeConfig
from .engine import LSystem
from .growth import GrowthSimulator, is_fully_grown
from .tree_builder import TreeBlueprint, build_tree


class GrowingTree:
    """Generated tree plus the simulator that grows it, advanced once per tick."""

    def __init__(
        self,
        lsystem: LSystem,
        blueprint: TreeBlueprint,
        simulator: GrowthSimulator,
    ):
        self.lsystem = lsystem
        self.blueprint = blueprint
        self.simulator = simulator
        self.time = 0.0

    @classmethod
    def from_config(
        cls, config: TreeConfig, rng: Optional[np.random.Generator] = None
    ) -> "GrowingTree":
        rng = rng if rng is not None else config.rng()

        lsystem = LSystem(world=config.axiom, rules=config.rules)
        lsystem.iterate(config.iterations)

        blueprint = build_tree(lsystem.world, config.turtle, rng)
        return cls(lsystem, blueprint, GrowthSimulator(rate=config.growth.rate))

    @property
    def sentence(self) -> str:
        return self.lsystem.world

    @property
    def root(self) -> Branch:
        return self.blueprint.root

    @property
    def branches(self) -> List[Branch]:
        return self.blueprint.branches

    @property
    def branch_count(self) -> int:
        return len(self.blueprint)

    @property
    def is_fully_grown(self) -> bool:
        return is_fully_grown(self.root)

    def step(self, dt: float) -> int:
        active = self.simulator.step(self.root, dt)
        self.time += dt
        return active
