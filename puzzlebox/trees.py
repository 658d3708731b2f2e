"""Binary tree puzzles: branch balancing, BST repair, height, validity, runs and mirroring."""

from collections import deque
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; ``left_cost`` and ``right_cost`` weigh the edges to the children."""

    value: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None
    left_cost: int = 0
    right_cost: int = 0


def _inorder_nodes(root):
    """Yield the nodes of the tree in order, without recursion."""
    stack = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def min_cost_equal_branches(root):
    """Total weight to add so that every branch below a node weighs the same.

    A node with a single child counts only the edge to that child and does
    not look further down it.
    """
    if root is None:
        return 0
    cost = 0

    def heaviest(node):
        nonlocal cost
        if node.left is None and node.right is None:
            return 0
        if node.left is None:
            return node.right_cost
        if node.right is None:
            return node.left_cost
        left = heaviest(node.left) + node.left_cost
        right = heaviest(node.right) + node.right_cost
        cost += abs(left - right)
        return max(left, right)

    heaviest(root)
    return cost


def recover_bst(root):
    """Swap back the values of the two nodes of a BST that were exchanged.

    The tree is changed in place and returned. A tree that is already a
    valid BST is left as it is.
    """
    first = middle = last = prev = None
    for node in _inorder_nodes(root):
        if prev is not None and node.value < prev.value:
            if first is None:
                first, middle = prev, node
            else:
                last = node
        prev = node
    if first is not None and last is not None:
        first.value, last.value = last.value, first.value
    elif first is not None:
        first.value, middle.value = middle.value, first.value
    return root


def inorder(root):
    """Values of the tree in in-order sequence."""
    return [node.value for node in _inorder_nodes(root)]


def height(root):
    """Number of nodes on the longest path from the root down; 0 for an empty tree."""
    levels = 0
    level = [root] if root is not None else []
    while level:
        levels += 1
        level = [child for node in level for child in (node.left, node.right) if child is not None]
    return levels


def is_valid_bst(root):
    """True if the in-order values strictly increase."""
    values = inorder(root)
    return all(a < b for a, b in zip(values, values[1:]))


def longest_consecutive(root):
    """Length of the longest downward path whose values rise by one at each step."""
    if root is None:
        return 0
    best = 0
    stack = [(root, 0, root.value)]
    while stack:
        node, length, expected = stack.pop()
        length = length + 1 if node.value == expected else 1
        best = max(best, length)
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, length, node.value + 1))
    return best


def mirror(root):
    """Swap the children of every node, in place; returns the root."""
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        node.left, node.right = node.right, node.left
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return root