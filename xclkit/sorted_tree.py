"""An ordered container backed by a red-black tree.

Items are ordered by a key taken from each item (the item itself by
default) and a three-way comparison function (natural ordering by
default). Items with equal keys are kept in insertion order.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class Color(Enum):
    RED = 0
    BLACK = 1


class TreeInvariantError(RuntimeError):
    """Raised by :meth:`SortedTree.verify` when the tree is malformed."""


def _natural_compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _identity(item: Any) -> Any:
    return item


class _Node:
    __slots__ = ("item", "left", "right", "parent", "color")

    def __init__(self, item: Any, color: Color = Color.RED) -> None:
        self.item = item
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None
        self.parent: Optional[_Node] = None
        self.color = color


def _is_red(node: Optional[_Node]) -> bool:
    return node is not None and node.color is Color.RED


def _leftmost(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _rightmost(node: _Node) -> _Node:
    while node.right is not None:
        node = node.right
    return node


def _successor(node: _Node) -> Optional[_Node]:
    if node.right is not None:
        return _leftmost(node.right)
    parent = node.parent
    while parent is not None and node is parent.right:
        node, parent = parent, parent.parent
    return parent


def _predecessor(node: _Node) -> Optional[_Node]:
    if node.left is not None:
        return _rightmost(node.left)
    parent = node.parent
    while parent is not None and node is parent.left:
        node, parent = parent, parent.parent
    return parent


def _clone(node: Optional[_Node], parent: Optional[_Node]) -> Optional[_Node]:
    if node is None:
        return None
    copy = _Node(node.item, node.color)
    copy.parent = parent
    copy.left = _clone(node.left, copy)
    copy.right = _clone(node.right, copy)
    return copy


class SortedTree(Generic[T]):
    """Red-black tree holding items ordered by key; duplicates are allowed."""

    def __init__(
        self,
        key: Optional[Callable[[T], Any]] = None,
        compare: Optional[Callable[[Any, Any], int]] = None,
    ) -> None:
        self._key = key or _identity
        self._compare = compare or _natural_compare
        self._root: Optional[_Node] = None
        self._size = 0

    # -- basic protocol ----------------------------------------------------

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return self._walk_forward(_leftmost(self._root) if self._root else None)

    def __reversed__(self) -> Iterator[T]:
        node = _rightmost(self._root) if self._root else None
        while node is not None:
            yield node.item
            node = _predecessor(node)

    def __contains__(self, key: Any) -> bool:
        return self._find_node(key) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SortedTree):
            return NotImplemented
        return self._size == other._size and self._tree_equal(self._root, other._root)

    def __repr__(self) -> str:
        return f"SortedTree({list(self)!r})"

    def _walk_forward(self, node: Optional[_Node]) -> Iterator[T]:
        while node is not None:
            yield node.item
            node = _successor(node)

    def _cmp(self, a: Any, b: Any) -> int:
        return self._compare(a, b)

    def _tree_equal(self, a: Optional[_Node], b: Optional[_Node]) -> bool:
        if a is None or b is None:
            return a is b
        if a.color is not b.color or self._cmp(self._key(a.item), self._key(b.item)):
            return False
        return self._tree_equal(a.left, b.left) and self._tree_equal(a.right, b.right)

    # -- lookup ------------------------------------------------------------

    def _find_node(self, key: Any) -> Optional[_Node]:
        cur = self._root
        while cur is not None:
            ret = self._cmp(key, self._key(cur.item))
            if ret == 0:
                return cur
            cur = cur.left if ret < 0 else cur.right
        return None

    def _lower_node(self, key: Any) -> Optional[_Node]:
        bound = None
        cur = self._root
        while cur is not None:
            if self._cmp(key, self._key(cur.item)) <= 0:
                bound, cur = cur, cur.left
            else:
                cur = cur.right
        return bound

    def _upper_node(self, key: Any) -> Optional[_Node]:
        bound = None
        cur = self._root
        while cur is not None:
            if self._cmp(key, self._key(cur.item)) < 0:
                bound, cur = cur, cur.left
            else:
                cur = cur.right
        return bound

    def find(self, key: Any) -> T:
        """Return an item whose key equals ``key``."""
        node = self._find_node(key)
        if node is None:
            raise KeyError(key)
        return node.item

    def lower_bound(self, key: Any) -> Iterator[T]:
        """Iterate from the first item whose key is not less than ``key``."""
        return self._walk_forward(self._lower_node(key))

    def upper_bound(self, key: Any) -> Iterator[T]:
        """Iterate from the first item whose key is greater than ``key``."""
        return self._walk_forward(self._upper_node(key))

    def equal_range(self, key: Any) -> List[T]:
        """All items whose key equals ``key``, in order."""
        end = self._upper_node(key)
        result: List[T] = []
        node = self._lower_node(key)
        while node is not None and node is not end:
            result.append(node.item)
            node = _successor(node)
        return result

    def first(self) -> T:
        if self._root is None:
            raise IndexError("first of empty SortedTree")
        return _leftmost(self._root).item

    def last(self) -> T:
        if self._root is None:
            raise IndexError("last of empty SortedTree")
        return _rightmost(self._root).item

    # -- rotations ---------------------------------------------------------

    def _rotate_left(self, x: _Node) -> None:
        y = x.right
        assert y is not None
        x.right = y.left
        if y.left is not None:
            y.left.parent = x
        self._replace_child(x, y)
        y.left = x
        x.parent = y

    def _rotate_right(self, x: _Node) -> None:
        y = x.left
        assert y is not None
        x.left = y.right
        if y.right is not None:
            y.right.parent = x
        self._replace_child(x, y)
        y.right = x
        x.parent = y

    def _replace_child(self, old: _Node, new: Optional[_Node]) -> None:
        parent = old.parent
        if parent is None:
            self._root = new
        elif old is parent.left:
            parent.left = new
        else:
            parent.right = new
        if new is not None:
            new.parent = parent

    # -- insertion ---------------------------------------------------------

    def add(self, item: T, unique: bool = False) -> bool:
        """Insert ``item``; with ``unique`` refuse an equal key and return False."""
        key = self._key(item)
        parent: Optional[_Node] = None
        ret = -1
        cur = self._root
        while cur is not None:
            ret = self._cmp(key, self._key(cur.item))
            if ret == 0 and unique:
                return False
            parent = cur
            cur = cur.left if ret < 0 else cur.right
        node = _Node(item)
        node.parent = parent
        if parent is None:
            self._root = node
        elif ret < 0:
            parent.left = node
        else:
            parent.right = node
        self._insert_fixup(node)
        self._size += 1
        return True

    def _insert_fixup(self, z: _Node) -> None:
        while z.parent is not None and z.parent.color is Color.RED:
            p = z.parent
            g = p.parent
            assert g is not None
            if p is g.left:
                uncle = g.right
                if _is_red(uncle):
                    p.color = Color.BLACK
                    uncle.color = Color.BLACK  # type: ignore[union-attr]
                    g.color = Color.RED
                    z = g
                    continue
                if z is p.right:
                    z = p
                    self._rotate_left(z)
                    p = z.parent  # type: ignore[assignment]
                p.color = Color.BLACK
                g.color = Color.RED
                self._rotate_right(g)
            else:
                uncle = g.left
                if _is_red(uncle):
                    p.color = Color.BLACK
                    uncle.color = Color.BLACK  # type: ignore[union-attr]
                    g.color = Color.RED
                    z = g
                    continue
                if z is p.left:
                    z = p
                    self._rotate_right(z)
                    p = z.parent  # type: ignore[assignment]
                p.color = Color.BLACK
                g.color = Color.RED
                self._rotate_left(g)
        assert self._root is not None
        self._root.color = Color.BLACK

    # -- removal -----------------------------------------------------------

    def remove(self, key: Any) -> None:
        """Remove one item whose key equals ``key``."""
        self.pop(key)

    def pop(self, key: Any) -> T:
        """Remove and return one item whose key equals ``key``."""
        node = self._find_node(key)
        if node is None:
            raise KeyError(key)
        self._delete(node)
        self._size -= 1
        return node.item

    def _delete(self, z: _Node) -> None:
        y_color = z.color
        if z.left is None:
            x, x_parent = z.right, z.parent
            self._replace_child(z, z.right)
        elif z.right is None:
            x, x_parent = z.left, z.parent
            self._replace_child(z, z.left)
        else:
            y = _leftmost(z.right)
            y_color = y.color
            x = y.right
            if y.parent is z:
                x_parent = y
            else:
                x_parent = y.parent
                self._replace_child(y, y.right)
                y.right = z.right
                y.right.parent = y
            self._replace_child(z, y)
            y.left = z.left
            y.left.parent = y
            y.color = z.color
        if y_color is Color.BLACK:
            self._delete_fixup(x, x_parent)

    def _delete_fixup(self, x: Optional[_Node], parent: Optional[_Node]) -> None:
        while x is not self._root and not _is_red(x):
            assert parent is not None
            if x is parent.left:
                w = parent.right
                assert w is not None
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_left(parent)
                    w = parent.right
                    assert w is not None
                if not _is_red(w.left) and not _is_red(w.right):
                    w.color = Color.RED
                    x, parent = parent, parent.parent
                    continue
                if not _is_red(w.right):
                    w.left.color = Color.BLACK  # type: ignore[union-attr]
                    w.color = Color.RED
                    self._rotate_right(w)
                    w = parent.right
                    assert w is not None
                w.color = parent.color
                parent.color = Color.BLACK
                w.right.color = Color.BLACK  # type: ignore[union-attr]
                self._rotate_left(parent)
            else:
                w = parent.left
                assert w is not None
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_right(parent)
                    w = parent.left
                    assert w is not None
                if not _is_red(w.left) and not _is_red(w.right):
                    w.color = Color.RED
                    x, parent = parent, parent.parent
                    continue
                if not _is_red(w.left):
                    w.right.color = Color.BLACK  # type: ignore[union-attr]
                    w.color = Color.RED
                    self._rotate_left(w)
                    w = parent.left
                    assert w is not None
                w.color = parent.color
                parent.color = Color.BLACK
                w.left.color = Color.BLACK  # type: ignore[union-attr]
                self._rotate_right(parent)
            x = self._root
            break
        if x is not None:
            x.color = Color.BLACK

    # -- whole-tree operations ---------------------------------------------

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def copy(self) -> "SortedTree[T]":
        """Return a tree with the same shape, colours and items."""
        other: SortedTree[T] = SortedTree(self._key, self._compare)
        other._root = _clone(self._root, None)
        other._size = self._size
        return other

    def swap(self, other: "SortedTree[T]") -> None:
        """Exchange contents with ``other``."""
        self._root, other._root = other._root, self._root
        self._size, other._size = other._size, self._size

    def move_from(self, other: "SortedTree[T]") -> None:
        """Take the contents of ``other``, leaving it empty."""
        if other is self:
            return
        self._root, self._size = other._root, other._size
        other._root, other._size = None, 0

    def verify(self) -> None:
        """Check the red-black and ordering invariants."""
        root = self._root
        if root is None:
            if self._size:
                raise TreeInvariantError("empty tree reports a non-zero size")
            return
        if root.parent is not None:
            raise TreeInvariantError("root has a parent")
        if root.color is not Color.BLACK:
            raise TreeInvariantError("root is not black")
        count = self._verify_node(root)[1]
        if count != self._size:
            raise TreeInvariantError(f"size {self._size} does not match {count} nodes")

    def _verify_node(self, node: _Node) -> "tuple[int, int]":
        key = self._key(node.item)
        black_heights = []
        count = 1
        for child, sign in ((node.left, 1), (node.right, -1)):
            if child is None:
                black_heights.append(0)
                continue
            if child.parent is not node:
                raise TreeInvariantError("broken parent link")
            if node.color is Color.RED and child.color is Color.RED:
                raise TreeInvariantError("red node has a red child")
            if self._cmp(self._key(child.item), key) * sign > 0:
                raise TreeInvariantError("items out of order")
            height, sub_count = self._verify_node(child)
            black_heights.append(height)
            count += sub_count
        if black_heights[0] != black_heights[1]:
            raise TreeInvariantError("unequal black heights")
        return black_heights[0] + (node.color is Color.BLACK), count