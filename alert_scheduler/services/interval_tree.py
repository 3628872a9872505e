# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Augmented interval tree — pure computation, no side effects.

One tree per team. Nodes live in a flat arena and reference children by
index, so insertion and lookup are loops rather than recursion. The tree is
a plain BST keyed on ``start`` and is never rebalanced: chronological input
degrades it to a chain, which ``height()`` makes visible.
"""

from typing import Iterator, Optional

from alert_scheduler.models.domain import Alert

NIL = -1
ROOT = 0


def intervals_conflict(a: Alert, b: Alert) -> bool:
    """
    True when the two intervals overlap.
    Touching endpoints do not overlap; a zero-length interval overlaps only
    intervals strictly containing it.
    """
    return not (a.end <= b.start or a.start >= b.end)


class _Node:
    __slots__ = ("alert", "max_end", "left", "right")

    def __init__(self, alert: Alert) -> None:
        self.alert = alert
        self.max_end = alert.end
        self.left = NIL
        self.right = NIL


class IntervalTree:
    """Insert-only interval tree answering "does anything overlap this?"."""

    def __init__(self) -> None:
        self._nodes: list[_Node] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Alert]:
        """Yield stored alerts in key order (by start, ties in insertion order)."""
        stack: list[int] = []
        current = ROOT if self._nodes else NIL
        while stack or current != NIL:
            while current != NIL:
                stack.append(current)
                current = self._nodes[current].left
            current = stack.pop()
            yield self._nodes[current].alert
            current = self._nodes[current].right

    @property
    def max_end(self) -> Optional[int]:
        """Largest end value in the tree, or None when empty."""
        return self._nodes[ROOT].max_end if self._nodes else None

    # ── Write ──

    def insert(self, alert: Alert) -> None:
        index = len(self._nodes)
        self._nodes.append(_Node(alert))
        if index == ROOT:
            return

        current = ROOT
        while True:
            node = self._nodes[current]
            node.max_end = max(node.max_end, alert.end)
            if alert.start < node.alert.start:
                if node.left == NIL:
                    node.left = index
                    return
                current = node.left
            else:
                if node.right == NIL:
                    node.right = index
                    return
                current = node.right

    # ── Read ──

    def overlaps(self, candidate: Alert) -> bool:
        """
        Existence-only overlap search.
        Goes left only when the left subtree's max_end reaches past the
        candidate's start, otherwise goes right.
        """
        current = ROOT if self._nodes else NIL
        while current != NIL:
            node = self._nodes[current]
            if intervals_conflict(node.alert, candidate):
                return True
            if node.left != NIL and self._nodes[node.left].max_end > candidate.start:
                current = node.left
            else:
                current = node.right
        return False

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        if not self._nodes:
            return 0
        deepest = 0
        stack = [(ROOT, 1)]
        while stack:
            index, depth = stack.pop()
            deepest = max(deepest, depth)
            node = self._nodes[index]
            if node.left != NIL:
                stack.append((node.left, depth + 1))
            if node.right != NIL:
                stack.append((node.right, depth + 1))
        return deepest
