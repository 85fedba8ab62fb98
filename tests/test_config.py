import pytest
from pydantic import ValidationError

from sapling_gen import TreeConfig, TurnMode


def test_defaults():
    config = TreeConfig()
    assert config.axiom == "F"
    assert config.rules == []
    assert config.iterations == 4
    assert config.turtle.turn_mode == TurnMode.RANGED_RANDOM
    assert (config.turtle.min_angle, config.turtle.max_angle) == (25.0, 60.0)
    assert config.turtle.yaw_multiplier == 4.0
    assert config.growth.rate == 4.0


def test_load_from_toml(tmp_path):
    path = tmp_path / "tree.toml"
    path.write_text(
        """
axiom = "X"
iterations = 2
seed = 3

[[rules]]
predecessor = "X"
replacement = "F[+X]F"

[[rules]]
predecessor = "X"
replacement = "ignored"

[turtle]
turn_mode = "fixed"
angle = 30.0

[growth]
rate = 2.5
"""
    )
    config = TreeConfig.load_from_toml(path)
    assert config.axiom == "X"
    assert [r.replacement for r in config.rules] == ["F[+X]F", "ignored"]
    assert config.turtle.turn_mode == TurnMode.FIXED
    assert config.turtle.angle == 30.0
    assert config.growth.rate == 2.5
    assert config.seed == 3


def test_shipped_examples_load(examples_dir):
    for path in sorted(examples_dir.glob("*.toml")):
        config = TreeConfig.load_from_toml(path)
        assert config.rules


def test_rules_as_mapping_or_pairs():
    assert TreeConfig(rules={"F": "FF"}).rules[0].replacement == "FF"
    pairs = TreeConfig(rules=[("A", "B"), ("A", "C")]).rules
    assert [r.replacement for r in pairs] == ["B", "C"]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"iterations": -1},
        {"rules": [{"predecessor": "AB", "replacement": "C"}]},
        {"rules": ["AB"]},
        {"rules": [5]},
        {"rules": [("F", "FF", "F")]},
        {"rules": {"F": 5}},
        {"turtle": {"min_angle": 90.0, "max_angle": 10.0}},
        {"turtle": {"turn_mode": "spiral"}},
        {"growth": {"rate": -2.0}},
    ],
)
def test_invalid_config_rejected(kwargs):
    with pytest.raises(ValidationError):
        TreeConfig(**kwargs)


def test_seeded_rng_is_reproducible():
    config = TreeConfig(seed=11)
    assert config.rng().uniform() == config.rng().uniform()
