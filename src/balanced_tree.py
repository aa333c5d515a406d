"""
Balanced Tree - AVL-balanced ordered set.

Every node caches the height of its subtree. After any structural change the
heights are recomputed on the way back up and each ancestor is rebalanced with
a single or double rotation, which keeps the tree height within
1.44 * log2(n + 2) for n stored values.

Values are compared with ``<`` only. Two values are considered equal when
neither is less than the other, so the element type must define a strict
total order. Anything else (NaN floats, inconsistent ``__lt__``) silently
breaks the ordering and balance guarantees.
"""

from typing import Any, Generic, Iterator, List, Optional, Protocol, TypeVar


class SupportsLessThan(Protocol):
    def __lt__(self, other: Any) -> bool: ...


T = TypeVar('T', bound=SupportsLessThan)


class BalancedTree(Generic[T]):
    """Ordered set of unique values backed by an AVL tree."""

    class Node:
        def __init__(self, value: T) -> None:
            self.value: T = value
            self.left: Optional['BalancedTree.Node'] = None
            self.right: Optional['BalancedTree.Node'] = None
            self.height: int = 1

        def __repr__(self) -> str:
            return f"Node({self.value!r}, height={self.height})"

    def __init__(self) -> None:
        self._root: Optional[BalancedTree.Node] = None
        self._size: int = 0

    @property
    def root(self) -> Optional[Node]:
        """Root node, for read-only consumers such as the tree printer."""
        return self._root

    # structural primitives

    def _get_height(self, node: Optional[Node]) -> int:
        if node is None:
            return 0
        return node.height

    def _update_height(self, node: Node) -> None:
        node.height = 1 + max(self._get_height(node.left), self._get_height(node.right))

    def balance_factor(self, node: Optional[Node]) -> int:
        """Height of the left subtree minus the right; 0 for a missing node."""
        if node is None:
            return 0
        return self._get_height(node.left) - self._get_height(node.right)

    def _rotate_right(self, y: Node) -> Node:
        x = y.left
        assert x is not None
        y.left = x.right
        x.right = y

        # y is now below x, so its height must be fixed first
        self._update_height(y)
        self._update_height(x)
        return x

    def _rotate_left(self, x: Node) -> Node:
        y = x.right
        assert y is not None
        x.right = y.left
        y.left = x

        self._update_height(x)
        self._update_height(y)
        return y

    def _rebalance(self, node: Node) -> Node:
        """
        Restore the balance invariant at ``node`` and return the subtree root.

        Assumes both children already satisfy the invariant. The sign of the
        heavy child's balance factor decides between a single rotation
        (LL / RR) and a double rotation (LR / RL).
        """
        self._update_height(node)
        balance = self.balance_factor(node)

        if balance > 1:
            if self.balance_factor(node.left) < 0:
                assert node.left is not None
                node.left = self._rotate_left(node.left)
            return self._rotate_right(node)

        if balance < -1:
            if self.balance_factor(node.right) > 0:
                assert node.right is not None
                node.right = self._rotate_right(node.right)
            return self._rotate_left(node)

        return node

    # insert

    def _insert(self, node: Optional[Node], value: T) -> Node:
        if node is None:
            self._size += 1
            return BalancedTree.Node(value)

        if value < node.value:
            node.left = self._insert(node.left, value)
        elif node.value < value:
            node.right = self._insert(node.right, value)
        else:
            return node

        return self._rebalance(node)

    def insert(self, value: T) -> bool:
        """Add ``value``. Returns False if an equal value was already stored."""
        before = self._size
        self._root = self._insert(self._root, value)
        return self._size != before

    # remove

    def _find_min(self, node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    def _find_max(self, node: Node) -> Node:
        while node.right is not None:
            node = node.right
        return node

    def _remove_min(self, node: Node) -> Optional[Node]:
        if node.left is None:
            return node.right
        node.left = self._remove_min(node.left)
        return self._rebalance(node)

    def _remove(self, node: Optional[Node], value: T) -> Optional[Node]:
        if node is None:
            return None

        if value < node.value:
            node.left = self._remove(node.left, value)
        elif node.value < value:
            node.right = self._remove(node.right, value)
        else:
            self._size -= 1
            left, right = node.left, node.right
            node.left = node.right = None
            if right is None:
                return left

            # lift the in-order successor node into the vacated position
            successor = self._find_min(right)
            successor.right = self._remove_min(right)
            successor.left = left
            return self._rebalance(successor)

        return self._rebalance(node)

    def remove(self, value: T) -> bool:
        """Delete ``value``. Returns False if it was not stored."""
        before = self._size
        self._root = self._remove(self._root, value)
        return self._size != before

    # queries

    def contains(self, value: T) -> bool:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif node.value < value:
                node = node.right
            else:
                return True
        return False

    def empty(self) -> bool:
        return self._root is None

    def is_empty(self) -> bool:
        return self.empty()

    def size(self) -> int:
        return self._size

    def height(self) -> int:
        return self._get_height(self._root)

    def _non_empty_root(self, what: str) -> Node:
        if self._root is None:
            raise ValueError(f"{what} from empty tree")
        return self._root

    def min(self) -> T:
        return self._find_min(self._non_empty_root("min")).value

    def max(self) -> T:
        return self._find_max(self._non_empty_root("max")).value

    def clear(self) -> None:
        self._root = None
        self._size = 0

    # traversals

    def in_order(self) -> List[T]:
        result: List[T] = []
        stack: List[BalancedTree.Node] = []
        node = self._root
        while stack or node is not None:
            if node is not None:
                stack.append(node)
                node = node.left
                continue
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def pre_order(self) -> List[T]:
        result: List[T] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            # right pushed first so the left subtree is visited first
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def post_order(self) -> List[T]:
        # root-right-left pre-order, reversed
        result: List[T] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def _clone_node(self, node: Node) -> Node:
        clone = BalancedTree.Node(node.value)
        clone.height = node.height
        return clone

    def copy(self) -> 'BalancedTree[T]':
        """Independent tree with the same shape; values themselves are shared."""
        clone: BalancedTree[T] = BalancedTree()
        clone._size = self._size
        if self._root is None:
            return clone

        clone._root = self._clone_node(self._root)
        stack = [(self._root, clone._root)]
        while stack:
            source, target = stack.pop()
            if source.left is not None:
                target.left = self._clone_node(source.left)
                stack.append((source.left, target.left))
            if source.right is not None:
                target.right = self._clone_node(source.right)
                stack.append((source.right, target.right))
        return clone

    def is_balanced(self) -> bool:
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            if abs(self.balance_factor(node)) > 1:
                return False
            stack.extend(child for child in (node.left, node.right) if child is not None)
        return True

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        # snapshot, so mutating the tree while iterating is safe
        yield from self.in_order()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)})"

    def __str__(self) -> str:
        return f"{type(self).__name__}(size={len(self)}, height={self.height()})"
