"""Binary search tree that buffers contig records until they are written sorted.

Records sharing a key are kept together on one node in the order they were
inserted, so writing the tree out in order is a stable sort by key.

The tree is never rebalanced. Already-sorted input degrades it into a chain,
which is why every walk below uses an explicit stack instead of recursion.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Protocol, Tuple

__all__ = ["ContigNode", "ContigTree"]


class TextSink(Protocol):
    def write(self, text: str) -> object: ...


class ContigNode:
    """A single key together with every record that sorted under it."""

    __slots__ = ("key", "records", "left", "right")

    def __init__(self, key: int, record: str) -> None:
        self.key = key
        self.records: List[str] = [record]
        self.left: Optional[ContigNode] = None
        self.right: Optional[ContigNode] = None

    def __repr__(self) -> str:
        return f"ContigNode(key={self.key}, records={len(self.records)})"


class ContigTree:
    """Append-only ordered multi-map from integer keys to record texts."""

    def __init__(self) -> None:
        self.root: Optional[ContigNode] = None
        self._num_records = 0
        self._num_nodes = 0

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------
    def insert(self, key: int, record: str) -> None:
        """Add *record* under *key*.

        An existing node with the same key gets the record appended;
        otherwise a new leaf is hung off the tree, smaller keys to the left
        and larger ones to the right.
        """
        self._num_records += 1
        if self.root is None:
            self.root = ContigNode(key, record)
            self._num_nodes += 1
            return

        leaf = self.root
        while True:
            if key == leaf.key:
                leaf.records.append(record)
                return
            if key < leaf.key:
                if leaf.left is None:
                    leaf.left = ContigNode(key, record)
                    break
                leaf = leaf.left
            else:
                if leaf.right is None:
                    leaf.right = ContigNode(key, record)
                    break
                leaf = leaf.right
        self._num_nodes += 1

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def search(self, key: int) -> Optional[ContigNode]:
        """Return the node holding *key*, or None if the key was never inserted."""
        leaf = self.root
        while leaf is not None:
            if key == leaf.key:
                return leaf
            leaf = leaf.left if key < leaf.key else leaf.right
        return None

    def __contains__(self, key: int) -> bool:
        return self.search(key) is not None

    def __len__(self) -> int:
        return self._num_records

    @property
    def node_count(self) -> int:
        """Number of distinct keys in the tree."""
        return self._num_nodes

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        if self.root is None:
            return 0
        deepest = 0
        stack: List[Tuple[ContigNode, int]] = [(self.root, 1)]
        while stack:
            node, depth = stack.pop()
            deepest = max(deepest, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return deepest

    # ------------------------------------------------------------------
    # In-order walks
    # ------------------------------------------------------------------
    def _iter_nodes(self) -> Iterator[ContigNode]:
        stack: List[ContigNode] = []
        leaf = self.root
        while stack or leaf is not None:
            while leaf is not None:
                stack.append(leaf)
                leaf = leaf.left
            leaf = stack.pop()
            yield leaf
            leaf = leaf.right

    def items(self) -> Iterator[Tuple[int, List[str]]]:
        """Yield ``(key, records)`` pairs in ascending key order."""
        for node in self._iter_nodes():
            yield node.key, list(node.records)

    __iter__ = items

    def keys(self) -> List[int]:
        return [node.key for node in self._iter_nodes()]

    def iter_records(self) -> Iterator[str]:
        """Yield every record text in the order ``output_in_order`` writes them."""
        for node in self._iter_nodes():
            yield from node.records

    def output_in_order(self, sink: TextSink) -> None:
        """Write each record followed by a newline to *sink*, sorted by key.

        Records with equal keys come out in the order they were inserted.
        Nothing is written for an empty tree.
        """
        for record in self.iter_records():
            sink.write(record)
            sink.write("\n")
