"""Binary search tree of integers with the classic traversals."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class Node:
    """A tree node holding one value and two optional children."""

    data: int
    left: Node | None = None
    right: Node | None = None

    def is_leaf(self) -> bool:
        """Return True when the node has no children."""
        return self.left is None and self.right is None


class BinarySearchTree:
    """Binary search tree that keeps each value at most once."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> bool:
        """Insert ``value``; return False if it was already present."""
        if self.root is None:
            self.root = Node(value)
            return True
        node = self.root
        while True:
            if value == node.data:
                return False
            if value < node.data:
                if node.left is None:
                    node.left = Node(value)
                    return True
                node = node.left
            else:
                if node.right is None:
                    node.right = Node(value)
                    return True
                node = node.right

    def delete(self, value: int) -> bool:
        """Remove ``value``; return False if it was not in the tree.

        A node with two children takes the smallest value of its right
        subtree, and that node is unlinked instead.
        """
        parent: Node | None = None
        node = self.root
        while node is not None and node.data != value:
            parent = node
            node = node.left if value < node.data else node.right
        if node is None:
            return False

        if node.left is not None and node.right is not None:
            succ_parent, succ = node, node.right
            while succ.left is not None:
                succ_parent, succ = succ, succ.left
            node.data = succ.data
            if succ_parent is node:
                succ_parent.right = succ.right
            else:
                succ_parent.left = succ.right
            return True

        child = node.left if node.left is not None else node.right
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        return True

    def _nodes(self) -> Iterator[Node]:
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def preorder(self) -> Iterator[int]:
        """Yield values node, left, right."""
        for node in self._nodes():
            yield node.data

    def inorder(self) -> Iterator[int]:
        """Yield values left, node, right (ascending order)."""
        stack: list[Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def postorder(self) -> Iterator[int]:
        """Yield values left, right, node."""
        stack: list[tuple[Node, bool]] = []
        if self.root is not None:
            stack.append((self.root, False))
        while stack:
            node, expanded = stack.pop()
            if expanded:
                yield node.data
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    def count_leaves(self) -> int:
        """Return the number of leaf nodes."""
        return sum(1 for node in self._nodes() if node.is_leaf())

    def clear(self) -> None:
        """Remove every node."""
        self.root = None

    def __contains__(self, value: object) -> bool:
        node = self.root
        while node is not None:
            if value == node.data:
                return True
            node = node.left if value < node.data else node.right  # type: ignore[operator]
        return False


def main(argv: list[str] | None = None) -> int:
    """Build a small demo tree and print its postorder walk and leaf count."""
    tree = BinarySearchTree([10, 5, 3, 15, 13, 12])
    print("Postorder traversal:")
    for value in tree.postorder():
        print(f"Visit {value}")
    print()
    print(f"Leaf count: {tree.count_leaves()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())