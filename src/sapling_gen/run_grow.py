import argparse
import time

import rerun as rr

from sapling_gen.config import TreeConfig
from sapling_gen.rerun_log import log_branch_graph, log_tree, log_turtle_frames
from sapling_gen.tree import GrowingTree


def grow(config: TreeConfig, frames: int = 240, dt: float = 1 / 30) -> GrowingTree:
    build_start = time.perf_counter()
    tree = GrowingTree.from_config(config)
    print(
        f"Built in {time.perf_counter() - build_start:.3f}s, "
        f"sentence length: {len(tree.sentence)}, branches: {tree.branch_count}"
    )

    tree.lsystem.log_as_markdown()
    log_branch_graph(tree.blueprint)
    log_turtle_frames(tree.blueprint)

    for i in range(frames):
        rr.set_time("frame_idx", sequence=i)
        active = tree.step(dt)
        log_tree(tree.blueprint)
        if tree.is_fully_grown:
            print(f"Fully grown at frame {i} ({tree.time:.2f}s)")
            break
        if i % 30 == 0:
            print(f"Frame {i}, growing branches: {active}")

    return tree


def main(argv=None):
    parser = argparse.ArgumentParser(description="Grow an L-system tree and log it to rerun")
    parser.add_argument("config", help="TOML tree configuration, see examples/")
    parser.add_argument("--frames", type=int, default=240)
    parser.add_argument("--dt", type=float, default=1 / 30)
    parser.add_argument("--no-spawn", action="store_true", help="Do not start the viewer")
    args = parser.parse_args(argv)

    config = TreeConfig.load_from_toml(args.config)
    rr.init("sapling", spawn=not args.no_spawn)
    grow(config, frames=args.frames, dt=args.dt)


if __name__ == "__main__":
    main()
