from typing import List, Tuple

import numpy as np
import rerun as rr

from .branch import iter_depth_first
from .tree_builder import TreeBlueprint


class Palette:
    Red = [228, 26, 28]
    Green = [77, 175, 74]
    Brown = [166, 86, 40]
    Yellow = [255, 255, 51]
    Gray = [153, 153, 153]


def branch_segments(
    blueprint: TreeBlueprint,
) -> Tuple[List[List[np.ndarray]], List[List[int]]]:
    """Segments from each branch's position to its current tip, skipping unsprouted ones."""
    strips = []
    colors = []
    for branch, _ in iter_depth_first(blueprint.root):
        if branch.length <= 0.0:
            continue
        strips.append([branch.position, branch.tip])
        colors.append(Palette.Green if branch.is_full_grown else Palette.Brown)
    return strips, colors


def branch_graph(
    blueprint: TreeBlueprint,
) -> Tuple[List[str], List[str], List[Tuple[str, str]]]:
    """Node ids, labels and parent -> child edges, ids taken from creation order."""
    index = {id(branch): i for i, branch in enumerate(blueprint.branches)}
    depths = {id(branch): depth for branch, depth in iter_depth_first(blueprint.root)}

    node_ids = [str(i) for i in range(len(blueprint.branches))]
    labels = [f"{i} ({depths[id(branch)]})" for i, branch in enumerate(blueprint.branches)]
    edges = [
        (str(i), str(index[id(child)]))
        for i, branch in enumerate(blueprint.branches)
        for child in branch.children
    ]
    return node_ids, labels, edges


def log_tree(blueprint: TreeBlueprint, path: str = "tree"):
    """Log every branch as a segment from its position to its current tip."""
    strips, colors = branch_segments(blueprint)
    rr.log(f"{path}/branches", rr.LineStrips3D(strips, colors=colors))

    grown = sum(1 for branch in blueprint.branches if branch.is_full_grown)
    rr.log(
        f"{path}/stats",
        rr.AnyValues(
            branch_count=len(blueprint),
            full_grown_count=grown,
            total_length=float(sum(branch.length for branch in blueprint.branches)),
        ),
    )


def log_branch_graph(blueprint: TreeBlueprint, path: str = "tree_graph"):
    node_ids, labels, edges = branch_graph(blueprint)
    rr.log(
        path,
        rr.GraphNodes(node_ids=node_ids, labels=labels),
        rr.GraphEdges(edges=edges, graph_type="directed"),
    )


def log_turtle_frames(blueprint: TreeBlueprint, path: str = "tree"):
    """Log the start point of every branch, colored by depth parity."""
    positions = []
    colors = []
    for branch, depth in iter_depth_first(blueprint.root):
        positions.append(branch.position)
        colors.append(Palette.Red if depth % 2 == 0 else Palette.Yellow)

    rr.log(
        f"{path}/origins",
        rr.Points3D(np.asarray(positions).reshape(-1, 3), colors=colors, radii=0.02),
    )
