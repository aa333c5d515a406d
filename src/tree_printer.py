"""
Tree Printer - indented text view of a BalancedTree.

Each line shows a stored value together with the cached height and balance
factor of its node:

    AVL tree (h - height, b - balance):
    └──30 (h:3, b:0)
        ├──20 (h:2, b:0)
        │   ├──10 (h:1, b:0)
        │   └──25 (h:1, b:0)
        └──40 (h:2, b:-1)
            └──50 (h:1, b:0)

Left children are drawn with a tee, right children (and the root) with a
corner. The printer only reads the tree and must not run while the tree is
being modified.
"""

from typing import List, Optional, TextIO, Tuple

from balanced_tree import BalancedTree

HEADER = "AVL tree (h - height, b - balance):"
EMPTY = "Tree is empty"

LEFT_BRANCH = "├──"
RIGHT_BRANCH = "└──"
LEFT_INDENT = "│   "
RIGHT_INDENT = "    "


def render_lines(tree: BalancedTree) -> List[str]:
    """
    Render the tree one line per node, in pre-order.

    Args:
        tree: Tree to render

    Returns:
        Lines without trailing newlines. An empty tree gives ``[EMPTY]``.
    """
    if tree.root is None:
        return [EMPTY]

    lines = [HEADER]
    # each entry carries its own prefix, nothing is shared between siblings
    stack: List[Tuple[BalancedTree.Node, str, bool]] = [(tree.root, "", False)]
    while stack:
        node, prefix, is_left = stack.pop()
        branch = LEFT_BRANCH if is_left else RIGHT_BRANCH
        lines.append(f"{prefix}{branch}{node.value} (h:{node.height}, b:{tree.balance_factor(node)})")

        child_prefix = prefix + (LEFT_INDENT if is_left else RIGHT_INDENT)
        if node.right is not None:
            stack.append((node.right, child_prefix, False))
        if node.left is not None:
            stack.append((node.left, child_prefix, True))
    return lines


def render(tree: BalancedTree) -> str:
    return "\n".join(render_lines(tree))


def print_tree(tree: BalancedTree, file: Optional[TextIO] = None) -> None:
    print(render(tree), file=file)
    print(file=file)
