"""
Balanced Tree Demo — Scripted operations and height growth visualization.

Generates:
- viz/height_growth.png — Tree height against size, with the AVL bound
"""

import random

import numpy as np
import matplotlib.pyplot as plt
from pathlib import Path

from balanced_tree import BalancedTree
from tree_printer import print_tree

SEED = 42

VIZ_DIR = Path(__file__).parent / "viz"

COLORS = {
    "ascending": "#3498db",
    "shuffled": "#e74c3c",
    "bound": "#27ae60",
    "log2": "#7f8c8d",
}


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


def _join(values) -> str:
    return " ".join(str(v) for v in values)


def example_1_reference_sequence() -> BalancedTree[int]:
    """Insert, query, remove and traverse a small tree, printing every step."""
    print("=" * 60)
    print("Example 1: Reference Sequence")
    print("=" * 60)

    tree: BalancedTree[int] = BalancedTree()

    print("Inserting: 10, 20, 30, 40, 50, 25")
    for value in (10, 20, 30, 40, 50, 25):
        tree.insert(value)
    print_tree(tree)

    print(f"Contains 30: {_yes_no(tree.contains(30))}")
    print(f"Contains 35: {_yes_no(tree.contains(35))}")
    print()

    print("Removing 30")
    tree.remove(30)
    print_tree(tree)

    print(f"In-order traversal: {_join(tree.in_order())}")
    print()

    print("Inserting: 15, 5, 35")
    for value in (15, 5, 35):
        tree.insert(value)
    print_tree(tree)

    print(f"Pre-order traversal: {_join(tree.pre_order())}")
    print()

    return tree


def example_2_height_growth(n: int = 2000, step: int = 50):
    """Tree height for ascending vs shuffled inserts against the AVL bound."""
    print("=" * 60)
    print("Example 2: Height Growth")
    print("=" * 60)

    rng = random.Random(SEED)
    keys = list(range(n))
    shuffled = keys[:]
    rng.shuffle(shuffled)

    sizes = list(range(step, n + 1, step))
    heights = {"ascending": [], "shuffled": []}
    for name, order in (("ascending", keys), ("shuffled", shuffled)):
        tree: BalancedTree[int] = BalancedTree()
        for i, key in enumerate(order, start=1):
            tree.insert(key)
            if i % step == 0:
                heights[name].append(tree.height())
        print(f"{name:>10}: n={len(tree)}, height={tree.height()}, balanced={tree.is_balanced()}")

    x = np.array(sizes, dtype=np.float64)
    bound = 1.44 * np.log2(x + 2)

    VIZ_DIR.mkdir(exist_ok=True)
    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(x, heights["ascending"], c=COLORS["ascending"], linewidth=2, label="Ascending inserts")
    ax.plot(x, heights["shuffled"], c=COLORS["shuffled"], linewidth=2, label="Shuffled inserts")
    ax.plot(x, bound, c=COLORS["bound"], linewidth=2, linestyle="--", label="1.44 log2(n + 2)")
    ax.plot(x, np.log2(x + 1), c=COLORS["log2"], linewidth=1, linestyle=":", label="log2(n + 1)")
    ax.set_xlabel("Number of values", fontsize=12)
    ax.set_ylabel("Tree height", fontsize=12)
    ax.set_title("Balanced Tree: Height Growth", fontsize=14)
    ax.legend(fontsize=10)
    ax.grid(True, alpha=0.3)

    path = VIZ_DIR / "height_growth.png"
    fig.savefig(path, dpi=150)
    plt.close(fig)
    print(f"Saved: {path}")
    print()

    return sizes, heights


def main():
    example_1_reference_sequence()
    example_2_height_growth()


if __name__ == "__main__":
    main()
