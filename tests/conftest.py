from pathlib import Path

import numpy as np
import pytest
import rerun as rr

from sapling_gen import Branch, TurnMode, TurtleConfig

EXAMPLES_DIR = Path(__file__).parent.parent / "examples"


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def fixed_turtle():
    return TurtleConfig(turn_mode=TurnMode.FIXED, angle=25.0)


@pytest.fixture
def recording():
    rr.init("sapling_test")
    return rr.memory_recording()


@pytest.fixture
def chain():
    """root -> child -> grandchild, each with max_length 1."""
    root = Branch()
    child = root.add_child(Branch())
    grandchild = child.add_child(Branch())
    return root, child, grandchild


@pytest.fixture
def examples_dir():
    return EXAMPLES_DIR
