from dataclasses import dataclass
from typing import List, Tuple

from .branch import Branch

LENGTH_DECAY = 0.95


@dataclass
class GrowthSimulator:
    """Grows branches root to leaf, one depth wavefront at a time.

    A branch only starts growing once it and all of its ancestors reached
    their `max_length`; growth never overshoots.
    """

    rate: float = 4.0  # length units per second

    def __post_init__(self):
        if self.rate < 0:
            raise ValueError(f"Growth rate must be >= 0, got {self.rate}")

    def step(self, root: Branch, dt: float) -> int:
        """Advance growth by `dt` seconds. Returns the size of the growth wavefront."""
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")

        grown = 0
        stack: List[Branch] = [root]
        while stack:
            branch = stack.pop()
            if branch.length < branch.max_length:
                branch.length = min(branch.length + self.rate * dt, branch.max_length)
                grown += 1
            else:
                stack.extend(reversed(branch.children))
        return grown


def is_fully_grown(root: Branch) -> bool:
    stack: List[Branch] = [root]
    while stack:
        branch = stack.pop()
        if not branch.is_full_grown:
            return False
        stack.extend(branch.children)
    return True


def recalc_positions(root: Branch, length: float, decay: float = LENGTH_DECAY):
    """Drive branch lengths externally and re-place every branch on its parent.

    Each branch gets `length * decay**depth` and starts where its parent's
    direction reaches with that length.
    """
    stack: List[Tuple[Branch, float]] = [(root, length)]
    while stack:
        branch, branch_length = stack.pop()
        branch.length = branch_length
        parent = branch.parent
        if parent is not None:
            branch.position = parent.position + parent.direction * branch_length

        for child in reversed(branch.children):
            stack.append((child, branch_length * decay))
