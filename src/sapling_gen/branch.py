import weakref
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .transform_3d import FORWARD


@dataclass(eq=False)
class Branch:
    """A rigid segment of the tree that grows from `position` along `direction`."""

    max_length: float = 1.0
    length: float = 0.0
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    direction: np.ndarray = field(default_factory=lambda: FORWARD.copy())
    children: List["Branch"] = field(default_factory=list, repr=False)
    _parent: Optional[weakref.ref] = field(default=None, repr=False)

    @property
    def parent(self) -> Optional["Branch"]:
        """The owning branch, or None for the root. Not kept alive by the child."""
        if self._parent is None:
            return None
        return self._parent()

    @property
    def tip(self) -> np.ndarray:
        return self.position + self.direction * self.length

    @property
    def is_full_grown(self) -> bool:
        return self.length >= self.max_length

    def add_child(self, child: "Branch") -> "Branch":
        if child._parent is not None:
            raise ValueError("Branch is already attached to a parent")
        child._parent = weakref.ref(self)
        self.children.append(child)
        return child

    def depth(self) -> int:
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth


def iter_depth_first(root: Branch) -> Iterator[Tuple[Branch, int]]:
    """Yield (branch, depth) in pre-order, children left to right."""
    stack: List[Tuple[Branch, int]] = [(root, 0)]
    while stack:
        branch, depth = stack.pop()
        yield branch, depth
        for child in reversed(branch.children):
            stack.append((child, depth + 1))
