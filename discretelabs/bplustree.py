"""A B+ tree of string keys with linked leaves."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Callable, Iterator

DEFAULT_ORDER = 20


class _Node:
    """A tree node; leaves have no children and link to the next leaf."""

    __slots__ = ("keys", "children", "next")

    def __init__(self, keys: list[str], children: list[_Node] | None = None) -> None:
        self.keys = keys
        self.children = children
        self.next: _Node | None = None

    @property
    def is_leaf(self) -> bool:
        return self.children is None


class BPlusTree:
    """A B+ tree holding at most ``order`` keys in each node.

    ``listener``, when set, is called with a short message for each structural
    event: splits, transfers between siblings, merges and root changes.
    """

    def __init__(self, order: int = DEFAULT_ORDER) -> None:
        if order < 3:
            raise ValueError(f"order must be at least 3, got {order}")
        self.order = order
        self.listener: Callable[[str], None] | None = None
        self._root: _Node | None = None
        self._size = 0

    @property
    def _min_leaf(self) -> int:
        return (self.order + 1) // 2

    @property
    def _min_internal(self) -> int:
        return (self.order + 1) // 2 - 1

    def _emit(self, message: str) -> None:
        if self.listener is not None:
            self.listener(message)

    def _descend(self, key: str) -> tuple[list[tuple[_Node, int]], _Node]:
        path: list[tuple[_Node, int]] = []
        node = self._root
        assert node is not None
        while not node.is_leaf:
            index = bisect_right(node.keys, key)
            path.append((node, index))
            node = node.children[index]
        return path, node

    def __contains__(self, key: object) -> bool:
        if self._root is None or not isinstance(key, str):
            return False
        _, leaf = self._descend(key)
        index = bisect_left(leaf.keys, key)
        return index < len(leaf.keys) and leaf.keys[index] == key

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        node = self._root
        if node is None:
            return
        while not node.is_leaf:
            node = node.children[0]
        while node is not None:
            yield from list(node.keys)
            node = node.next

    def clear(self) -> None:
        """Remove every key."""
        self._root = None
        self._size = 0

    def lines(self) -> list[str]:
        """The nodes depth first, one line each; leaf lines start with 'Leaf:'."""
        result: list[str] = []

        def visit(node: _Node) -> None:
            if node.is_leaf:
                result.append(" ".join(["Leaf:", *node.keys]))
                return
            result.append(" ".join(node.keys))
            for child in node.children:
                visit(child)

        if self._root is not None:
            visit(self._root)
        return result

    def insert(self, key: str) -> bool:
        """Add ``key``; return False if it was already present."""
        if self._root is None:
            self._root = _Node([key])
            self._size = 1
            self._emit("Created root")
            return True
        path, leaf = self._descend(key)
        index = bisect_left(leaf.keys, key)
        if index < len(leaf.keys) and leaf.keys[index] == key:
            return False
        leaf.keys.insert(index, key)
        self._size += 1
        if len(leaf.keys) > self.order:
            self._emit("Overflow in leaf node!")
            self._emit("Splitting leaf node")
            middle = (self.order + 1) // 2
            sibling = _Node(leaf.keys[middle:])
            del leaf.keys[middle:]
            sibling.next = leaf.next
            leaf.next = sibling
            self._insert_parent(path, leaf, sibling.keys[0], sibling)
        return True

    def _insert_parent(
        self, path: list[tuple[_Node, int]], left: _Node, key: str, right: _Node
    ) -> None:
        if not path:
            self._root = _Node([key], [left, right])
            self._emit("Created new root")
            return
        parent, index = path.pop()
        parent.keys.insert(index, key)
        parent.children.insert(index + 1, right)
        if len(parent.keys) <= self.order:
            return
        middle = (self.order + 1) // 2
        separator = parent.keys[middle]
        sibling = _Node(parent.keys[middle + 1:], parent.children[middle + 1:])
        del parent.keys[middle:]
        del parent.children[middle + 1:]
        self._insert_parent(path, parent, separator, sibling)

    def remove(self, key: str) -> None:
        """Delete ``key``; raise KeyError if it is not present."""
        if self._root is None:
            raise KeyError(key)
        path, leaf = self._descend(key)
        index = bisect_left(leaf.keys, key)
        if index == len(leaf.keys) or leaf.keys[index] != key:
            raise KeyError(key)
        del leaf.keys[index]
        self._size -= 1
        self._emit(f"Deleted {key} from leaf node successfully")

        if not path:
            if not leaf.keys:
                self._root = None
                self._emit("Tree died")
            return
        if len(leaf.keys) >= self._min_leaf:
            return

        self._emit("Underflow in leaf node!")
        parent, position = path[-1]
        left = parent.children[position - 1] if position > 0 else None
        right = parent.children[position + 1] if position + 1 < len(parent.children) else None

        if left is not None and len(left.keys) > self._min_leaf:
            leaf.keys.insert(0, left.keys.pop())
            parent.keys[position - 1] = leaf.keys[0]
            self._emit(f"Transferred {leaf.keys[0]} from left sibling of leaf node")
            return
        if right is not None and len(right.keys) > self._min_leaf:
            leaf.keys.append(right.keys.pop(0))
            parent.keys[position] = right.keys[0]
            self._emit(f"Transferred {leaf.keys[-1]} from right sibling of leaf node")
            return

        self._emit("Merging two leaf nodes")
        if left is not None:
            left.keys.extend(leaf.keys)
            left.next = leaf.next
            self._drop(path, position - 1, position)
        else:
            assert right is not None
            leaf.keys.extend(right.keys)
            leaf.next = right.next
            self._drop(path, position, position + 1)

    def _drop(self, path: list[tuple[_Node, int]], key_index: int, child_index: int) -> None:
        node, _ = path[-1]
        removed = node.keys.pop(key_index)
        del node.children[child_index]

        if len(path) == 1:
            if not node.keys:
                self._root = node.children[0]
                self._emit("Changed root node")
            return
        if len(node.keys) >= self._min_internal:
            self._emit(f"Deleted {removed} from internal node successfully")
            return

        self._emit("Underflow in internal node!")
        parent, position = path[-2]
        left = parent.children[position - 1] if position > 0 else None
        right = parent.children[position + 1] if position + 1 < len(parent.children) else None

        if left is not None and len(left.keys) > self._min_internal:
            node.keys.insert(0, parent.keys[position - 1])
            parent.keys[position - 1] = left.keys.pop()
            node.children.insert(0, left.children.pop())
            self._emit(f"Transferred {node.keys[0]} from left sibling of internal node")
            return
        if right is not None and len(right.keys) > self._min_internal:
            node.keys.append(parent.keys[position])
            parent.keys[position] = right.keys.pop(0)
            node.children.append(right.children.pop(0))
            self._emit(f"Transferred {node.keys[-1]} from right sibling of internal node")
            return

        if left is not None:
            left.keys.append(parent.keys[position - 1])
            left.keys.extend(node.keys)
            left.children.extend(node.children)
            self._drop(path[:-1], position - 1, position)
            self._emit("Merged with left sibling")
        else:
            assert right is not None
            node.keys.append(parent.keys[position])
            node.keys.extend(right.keys)
            node.children.extend(right.children)
            self._drop(path[:-1], position, position + 1)
            self._emit("Merged with right sibling")