from pathlib import Path
from typing import List, Optional

import numpy as np
import toml
from pydantic import BaseModel, Field, field_validator

from .engine import Rule, parse_rules
from .tree_builder import TurtleConfig


class GrowthConfig(BaseModel):
    rate: float = Field(
        default=4.0, ge=0.0, description="Growth speed in length units per second"
    )


class TreeConfig(BaseModel):
    axiom: str = "F"
    rules: List[Rule] = Field(default_factory=list)
    iterations: int = Field(default=4, ge=0)
    turtle: TurtleConfig = Field(default_factory=TurtleConfig)
    growth: GrowthConfig = Field(default_factory=GrowthConfig)
    seed: Optional[int] = Field(default=None, description="Seed for turn angle sampling")

    @field_validator("rules", mode="before")
    @classmethod
    def _parse_rules(cls, value):
        if isinstance(value, (dict, list, tuple)):
            return parse_rules(value)
        return value

    @classmethod
    def load_from_toml(cls, toml_path: str | Path) -> "TreeConfig":
        """Load and validate a tree configuration from a TOML file"""
        with open(toml_path, "r") as f:
            data = toml.load(f)
        return cls.model_validate(data)

    def rng(self) -> np.random.Generator:
        return np.random.default_rng(self.seed)
