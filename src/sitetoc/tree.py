#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sitetoc/tree.py
"""Persistent labelled trees and cursors into them.

A :class:`Tree` is an immutable node holding a label and an ordered tuple of
child trees (a *forest*). A :class:`Location` is a cursor focused on one tree
within a forest; it carries its parent cursor by value, so moving up, across,
or forward never needs back-references in the tree itself.

Examples
--------
    >>> tree = Tree("root", [Tree("a", [Tree("a1")]), Tree("b")])
    >>> loc = Location.at(tree, [0, 0])
    >>> loc.tree.label, loc.depth
    ('a1', 2)
    >>> [l.tree.label for l in loc.path]
    ['a1', 'a']
    >>> loc.next.tree.label
    'b'

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, Iterable, Iterator, Optional, Sequence, Tuple, TypeVar

from sitetoc.exceptions import InvalidLocationError

T = TypeVar("T")


@dataclass(frozen=True)
class Tree(Generic[T]):
    """Immutable tree node with a label and ordered children.

    Parameters
    ----------
    label : T
        Value held at this node
    children : iterable of Tree, default = ()
        Child trees in order; frozen into a tuple on construction

    """

    label: T
    children: Tuple[Tree[T], ...] = ()

    def __post_init__(self) -> None:
        """Freeze the children into a tuple."""
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    @classmethod
    def leaf(cls, label: T) -> Tree[T]:
        """Create a tree without children."""
        return cls(label)

    def flatten(self) -> list[T]:
        """Return the labels of this tree in pre-order."""
        labels = [self.label]
        for child in self.children:
            labels.extend(child.flatten())
        return labels


Forest = Tuple[Tree[T], ...]


def flatten_forest(forest: Iterable[Tree[T]]) -> list[T]:
    """Return the labels of every tree in a forest, in pre-order."""
    labels: list[T] = []
    for tree in forest:
        labels.extend(tree.flatten())
    return labels


@dataclass(frozen=True, eq=False)
class Location(Generic[T]):
    """Cursor focused on one tree within a forest.

    Parameters
    ----------
    siblings : tuple of Tree
        The forest the focused tree belongs to
    index : int
        Position of the focused tree in ``siblings``
    parent : Location or None, default = None
        Cursor on the tree owning ``siblings``; None at the top level

    Notes
    -----
    Locations compare by identity. Two cursors built separately onto the
    same node are distinct objects; compare ``tree`` or ``tree.label`` to
    test whether they focus the same node.

    """

    siblings: Tuple[Tree[T], ...]
    index: int
    parent: Optional[Location[T]] = field(default=None, repr=False)

    @classmethod
    def of(cls, tree: Tree[T]) -> Location[T]:
        """Create a cursor on the root of ``tree``."""
        return cls((tree,), 0)

    @classmethod
    def forest(cls, forest: Sequence[Tree[T]]) -> Optional[Location[T]]:
        """Create a cursor on the first tree of a forest.

        Every top-level member of the forest has depth 0 and no parent.

        Returns
        -------
        Location or None
            Cursor on ``forest[0]``, or None for an empty forest

        """
        if not forest:
            return None
        return cls(tuple(forest), 0)

    @classmethod
    def at(cls, tree: Tree[T], indices: Sequence[int]) -> Location[T]:
        """Create a cursor reached from the root of ``tree`` by child indices.

        Parameters
        ----------
        tree : Tree
            Root tree
        indices : sequence of int
            Child index to follow at each level

        Raises
        ------
        InvalidLocationError
            If an index does not address a child at its level

        """
        location = cls.of(tree)
        for position, child_index in enumerate(indices):
            children = location.tree.children
            if not 0 <= child_index < len(children):
                raise InvalidLocationError(
                    f"Index {child_index} at level {position + 1} is out of range "
                    f"for a node with {len(children)} children",
                    indices=indices,
                )
            location = cls(children, child_index, location)
        return location

    @property
    def tree(self) -> Tree[T]:
        """Tree at this cursor."""
        return self.siblings[self.index]

    @property
    def depth(self) -> int:
        """Distance from the top of the parent chain (top = 0)."""
        depth = 0
        location = self.parent
        while location is not None:
            depth += 1
            location = location.parent
        return depth

    @property
    def path(self) -> Tuple[Location[T], ...]:
        """Cursors from this one up to, but excluding, the root; innermost first."""
        path = []
        location: Optional[Location[T]] = self
        while location is not None and location.parent is not None:
            path.append(location)
            location = location.parent
        return tuple(path)

    @property
    def ancestors(self) -> Tuple[Location[T], ...]:
        """Proper ancestors of this cursor, innermost first, including the root."""
        ancestors = []
        location = self.parent
        while location is not None:
            ancestors.append(location)
            location = location.parent
        return tuple(ancestors)

    @property
    def lefts(self) -> Tuple[Tree[T], ...]:
        """Sibling trees before this cursor's tree."""
        return self.siblings[: self.index]

    @property
    def rights(self) -> Tuple[Tree[T], ...]:
        """Sibling trees after this cursor's tree."""
        return self.siblings[self.index + 1 :]

    @property
    def left(self) -> Optional[Location[T]]:
        """Cursor on the previous sibling, if any."""
        if self.index == 0:
            return None
        return Location(self.siblings, self.index - 1, self.parent)

    @property
    def right(self) -> Optional[Location[T]]:
        """Cursor on the next sibling, if any."""
        if self.index + 1 >= len(self.siblings):
            return None
        return Location(self.siblings, self.index + 1, self.parent)

    @property
    def first_child(self) -> Optional[Location[T]]:
        """Cursor on the first child, if any."""
        children = self.tree.children
        if not children:
            return None
        return Location(children, 0, self)

    @property
    def next(self) -> Optional[Location[T]]:
        """Next cursor in pre-order.

        The first child if there is one, else the right sibling, else the
        right sibling of the nearest ancestor that has one.
        """
        return self.first_child or self._next_right()

    def _next_right(self) -> Optional[Location[T]]:
        location: Optional[Location[T]] = self
        while location is not None:
            right = location.right
            if right is not None:
                return right
            location = location.parent
        return None

    @property
    def root(self) -> Location[T]:
        """Cursor at the top of the parent chain."""
        location = self
        while location.parent is not None:
            location = location.parent
        return location

    def iter_forward(self) -> Iterator[Location[T]]:
        """Yield this cursor and every following cursor in pre-order."""
        location: Optional[Location[T]] = self
        while location is not None:
            yield location
            location = location.next

    def find(self, predicate: Callable[[Tree[T]], bool]) -> Optional[Location[T]]:
        """Return the first cursor from here on, in pre-order, whose tree matches."""
        for location in self.iter_forward():
            if predicate(location.tree):
                return location
        return None


__all__ = [
    "Tree",
    "Forest",
    "Location",
    "flatten_forest",
]
