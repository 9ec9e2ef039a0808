"""Statistics for AVL trees."""

import argparse
import logging
import math
import os
import time
from dataclasses import dataclass
from datetime import datetime
from statistics import mean
from typing import List, Optional, Tuple

import numpy as np
from tqdm import trange

from avl_trees.avl_tree_base import AVLTree
from avl_trees.display import print_structure
from avl_trees.invariants import assert_tree_invariants_raise
from avl_trees.tree_stats import Stats, avl_tree_stats_

logger = logging.getLogger(__name__)


@dataclass
class StatsConfig:
    """Configuration for experiment runs."""

    # Reproducibility
    seed: int = 123456

    # Experiment parameters
    sizes: List[int] = None
    repetitions: int = 10
    key_space: int = 1000

    # Logging
    log_level: str = "INFO"

    def __post_init__(self):
        if self.sizes is None:
            self.sizes = [500]

    @classmethod
    def from_env(cls) -> "StatsConfig":
        """Create config from environment variables."""
        return cls(
            seed=int(os.environ.get("AVL_STATS_SEED", "123456")),
            log_level=os.environ.get("AVL_STATS_LOG_LEVEL", "INFO"),
        )


def random_avl_tree(
    n: int,
    key_space: int = 1000,
    rng: Optional[np.random.RandomState] = None,
) -> Tuple[AVLTree, bool]:
    """
    Build an AVL tree from ``n`` keys drawn uniformly from ``[0, key_space)``
    (duplicates included) and re-check membership of every drawn key.

    Returns (tree, ok) where *ok* is True iff every drawn key is found.
    """
    if rng is None:
        rng = np.random.RandomState()

    tree = AVLTree()
    content = [int(v) for v in rng.randint(0, key_space, size=n)]
    tree_insert = tree.insert
    for v in content:
        tree_insert(v)

    check = all(tree.contains(v) for v in content)
    logger.info("Created tree with %d elements, ok: %s", n, check)
    return tree, check


def demo_sequential(n: int = 10) -> AVLTree:
    """Insert 0..n-1 in order, dump the tree, then remove 5 and 7 and dump it again."""
    tree = AVLTree()
    for i in range(n):
        tree.insert(i)
    logger.info("\n%s", print_structure(tree))
    logger.info("Height:%d %s %s", tree.get_height(), tree.check_balanced(), tree.check_ordering())
    tree.remove(5)
    tree.remove(7)
    logger.info("\n%s", print_structure(tree))
    return tree


def repeated_experiment(
    size: int,
    repetitions: int,
    key_space: int = 1000,
    rng: Optional[np.random.RandomState] = None,
) -> List[Stats]:
    """
    Repeatedly builds random AVL trees from ``size`` drawn keys, asserts the
    tree invariants on each and logs aggregated height statistics.
    """
    if rng is None:
        rng = np.random.RandomState()

    t_all_0 = time.perf_counter()

    results: List[Stats] = []
    times_build = []
    all_ok = True

    for _ in trange(repetitions, desc=f"n={size}", unit="tree", leave=False):
        t0 = time.perf_counter()
        tree, ok = random_avl_tree(size, key_space, rng)
        times_build.append(time.perf_counter() - t0)
        all_ok = all_ok and ok

        stats = avl_tree_stats_(tree)
        assert_tree_invariants_raise(tree, stats)
        logger.info("Height:%d %s %s", tree.get_height(), tree.check_balanced(), tree.check_ordering())
        results.append(stats)

    if not results:
        return results

    # Perfect height: ceil( log2(n + 1) ) over the distinct keys actually stored
    avg_node_count = mean(s.node_count for s in results)
    perfect_height = math.ceil(math.log2(avg_node_count + 1)) if avg_node_count > 0 else 0

    avg_height = mean(s.height for s in results)
    avg_leaf_count = mean(s.leaf_count for s in results)
    avg_height_amp = mean((s.height / perfect_height) for s in results) if perfect_height else 0
    avg_build_time = mean(times_build)

    var_height = mean((s.height - avg_height) ** 2 for s in results)
    var_node_count = mean((s.node_count - avg_node_count) ** 2 for s in results)
    var_leaf_count = mean((s.leaf_count - avg_leaf_count) ** 2 for s in results)
    var_height_amp = mean(((s.height / perfect_height) - avg_height_amp) ** 2 for s in results) if perfect_height else 0
    var_build_time = mean((t - avg_build_time) ** 2 for t in times_build)

    rows = [
        ("Node count", avg_node_count, var_node_count),
        ("Leaf count", avg_leaf_count, var_leaf_count),
        ("Height", avg_height, var_height),
        ("Perfect height", perfect_height, None),
        ("Height amplification", avg_height_amp, var_height_amp),
    ]

    header = f"{'Metric':<20} {'Avg':>15} {'(Var)':>15}"
    sep_line = "-" * len(header)

    logger.info(header)
    logger.info(sep_line)
    for name, avg, var in rows:
        if var is None:
            logger.info(f"{name:<20} {avg:>15}")
        else:
            var_str = f"({var:.2f})"
            avg_fmt = f"{avg:15.2f}"
            logger.info(f"{name:<20} {avg_fmt} {var_str:>15}")

    logger.info("")
    logger.info(f"{'Build time (s)':<20}{avg_build_time:13.6f}{var_build_time:13.6f}{sum(times_build):13.6f}")
    logger.info("All membership checks ok: %s", all_ok)
    logger.info("Execution time: %.3f seconds", time.perf_counter() - t_all_0)

    return results


def main(argv=None) -> int:
    config = StatsConfig.from_env()

    parser = argparse.ArgumentParser(description="Run statistics experiments for AVL trees.")
    parser.add_argument(
        "--sizes", type=int, nargs="+", default=config.sizes, help="List of draw counts per tree."
    )
    parser.add_argument("--repetitions", type=int, default=config.repetitions, help="Number of trees per size.")
    parser.add_argument("--key-space", type=int, default=config.key_space, help="Keys are drawn from [0, key_space).")
    parser.add_argument("--seed", type=int, default=config.seed, help="Random seed for reproducibility.")
    parser.add_argument("--no-logfile", action="store_true", help="Only log to the console.")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=config.log_level,
        help="Set the logging level (default: INFO)",
    )

    args = parser.parse_args(argv)

    handlers = [logging.StreamHandler()]
    if not args.no_logfile:
        log_dir = os.path.join(os.getcwd(), "stats/logs/avl_tree_logs")
        os.makedirs(log_dir, exist_ok=True)
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        handlers.append(logging.FileHandler(os.path.join(log_dir, f"run_{ts}.log"), mode="w"))

    log_level = getattr(logging, args.log_level)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=handlers,
        force=True,
    )
    logging.getLogger("avl_trees").setLevel(log_level)

    rng = np.random.RandomState(args.seed)

    logger.info("AVL test:")
    demo_sequential()

    for n in args.sizes:
        logger.info("")
        logger.info(
            f"---------------- NOW RUNNING EXPERIMENT: n = {n}, repetitions = {args.repetitions} ----------------"
        )
        t0 = time.perf_counter()
        repeated_experiment(size=n, repetitions=args.repetitions, key_space=args.key_space, rng=rng)
        logger.info(f"Total experiment time: {time.perf_counter() - t0:.3f} seconds")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
