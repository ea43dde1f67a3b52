# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tree - A mutable, ordered N-ary node for parse trees.

This module provides the Tree class. Tree, Branch and Node are synonyms:
any node is the root of the subtree below it, so there is no separate
container type.

Key Features:
    - **Ordered branches**: Children keep insertion order (source token order)
    - **Weak back-reference**: A child knows its parent without owning it
    - **Attributes**: Uniquely named string values; ints and floats are
      stored in their formatted string form
    - **Tags**: A valueless, insertion-ordered set of markers
    - **Snapshot enumeration**: Post-order list of descendants, safe to use
      for teardown or rewriting while the tree changes underneath
    - **Rooted path lookup**: 'root/child/grandchild'

Example:
    Building and querying::

        root = Tree('root')
        cmd = root.add_branch(Tree('command'))
        cmd.set_attribute('raw', 'list')
        cmd.tag('KEYWORD')

        root.find('root/command') is cmd  # True
        [n.name for n in root.enumerate()]  # ['command']

Lookups that miss are not errors: ``remove_branch``, ``replace_branch`` and
``find`` return None, ``attribute`` returns an empty string.
"""

from __future__ import annotations

import logging
import weakref
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from ..exceptions import InvalidBranchError, UnsupportedOperationError
from ..formatting import format_value
from .dump import render

logger = logging.getLogger(__name__)

PATH_SEPARATOR = '/'

_NOTHING = object()


class Tree:
    """A node in a parse tree, and the root of the subtree below it.

    Each node has:
    - name: Identifier fixed at construction, used by find()
    - parent: The node this one is a branch of, or None for a root
    - branches: Ordered children, each exclusively held by this node
    - attributes: name -> string value, names unique per node
    - tags: Insertion-ordered set of strings

    Trees cannot be copied: copy.copy, copy.deepcopy and pickling raise
    UnsupportedOperationError.

    Example:
        >>> root = Tree('root')
        >>> a = root.add_branch(Tree('a'))
        >>> a.parent is root
        True
        >>> root.count()
        2
    """

    __slots__ = ('_name', '_trunk', '_branches', '_attributes', '_tags', '__weakref__')

    def __init__(self, name: str) -> None:
        """Initialize a Tree with no parent, branches, attributes or tags.

        Args:
            name: The node's name.
        """
        self._name = name
        self._trunk: weakref.ref[Tree] | None = None
        self._branches: list[Tree] = []
        self._attributes: dict[str, str] = {}
        # dict keys give an insertion-ordered set
        self._tags: dict[str, None] = {}

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"Tree({self._name!r}, branches={len(self._branches)})"

    def __iter__(self) -> Iterator[Tree]:
        """Iterate over direct branches in order."""
        return iter(list(self._branches))

    def __copy__(self) -> Tree:
        raise UnsupportedOperationError("Tree cannot be copied")

    def __deepcopy__(self, memo: dict[int, Any]) -> Tree:
        raise UnsupportedOperationError("Tree cannot be deep-copied")

    def __reduce_ex__(self, protocol: Any) -> Any:
        raise UnsupportedOperationError("Tree cannot be pickled")

    # ==================== Properties ====================

    @property
    def name(self) -> str:
        """The node's name."""
        return self._name

    @property
    def parent(self) -> Tree | None:
        """The node this one is a branch of, or None for a root."""
        if self._trunk is None:
            return None
        return self._trunk()

    @property
    def branches(self) -> tuple[Tree, ...]:
        """Snapshot of the direct branches in order."""
        return tuple(self._branches)

    @property
    def attributes(self) -> Mapping[str, str]:
        """Read-only view of the attributes in insertion order."""
        return MappingProxyType(self._attributes)

    @property
    def tags(self) -> tuple[str, ...]:
        """Tags in insertion order."""
        return tuple(self._tags)

    @property
    def root(self) -> Tree:
        """The topmost ancestor of this node (itself for a root)."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    @property
    def depth(self) -> int:
        """Distance from the root (root=0)."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    @property
    def path(self) -> str:
        """Names from the root down to this node, joined by '/'.

        ``node.root.find(node.path)`` finds ``node`` unless an earlier
        sibling on the way shares a name.
        """
        names = []
        node: Tree | None = self
        while node is not None:
            names.append(node._name)
            node = node.parent
        return PATH_SEPARATOR.join(reversed(names))

    # ==================== Branches ====================

    def _check_attachable(self, branch: Any) -> None:
        """Raise InvalidBranchError unless branch can become a child of self."""
        if branch is None:
            raise InvalidBranchError("Cannot add a missing branch")
        if not isinstance(branch, Tree):
            raise InvalidBranchError(
                f"branch must be a Tree, not {type(branch).__name__}"
            )
        if branch.parent is not None:
            raise InvalidBranchError(
                f"'{branch._name}' is already a branch of '{branch.parent._name}'"
            )
        node: Tree | None = self
        while node is not None:
            if node is branch:
                raise InvalidBranchError(
                    f"'{branch._name}' cannot be a branch of its own subtree"
                )
            node = node.parent

    def add_branch(self, branch: Tree) -> Tree:
        """Append a branch and make this node its parent.

        Args:
            branch: A node without a parent.

        Returns:
            The added branch, for chaining.

        Raises:
            InvalidBranchError: If branch is None, not a Tree, already
                attached somewhere, or this node or one of its ancestors.
                The tree is left unchanged.

        Example:
            >>> root.add_branch(Tree('a')).add_branch(Tree('a1'))
        """
        self._check_attachable(branch)
        branch._trunk = weakref.ref(self)
        self._branches.append(branch)
        return branch

    def _index_of(self, branch: Tree) -> int:
        """Position of branch by identity, or -1."""
        for i, node in enumerate(self._branches):
            if node is branch:
                return i
        return -1

    def remove_branch(self, branch: Tree) -> Tree | None:
        """Detach a branch without destroying it.

        The detached node keeps its own subtree and becomes a root.
        Removing a node that is not a direct branch is a no-op.

        Args:
            branch: The branch to detach, matched by identity.

        Returns:
            The detached node, or None if it was not a branch of this node.
        """
        idx = self._index_of(branch)
        if idx < 0:
            logger.debug("remove_branch: %r is not a branch of %r", branch, self)
            return None
        del self._branches[idx]
        branch._trunk = None
        return branch

    def replace_branch(self, old: Tree, new: Tree) -> Tree | None:
        """Put new in the position held by old.

        The replaced node is detached, not destroyed. If old is not a
        direct branch nothing changes and new stays with the caller.
        Replacing a branch with itself changes nothing.

        Args:
            old: The branch to replace, matched by identity.
            new: A node without a parent.

        Returns:
            The detached old node, or None if old was not found or is new.

        Raises:
            InvalidBranchError: If new cannot be attached (see add_branch).
        """
        idx = self._index_of(old)
        if idx < 0:
            logger.debug("replace_branch: %r is not a branch of %r", old, self)
            return None
        if new is old:
            return None
        self._check_attachable(new)
        new._trunk = weakref.ref(self)
        self._branches[idx] = new
        old._trunk = None
        return old

    # ==================== Attributes ====================

    def set_attribute(self, name: str, value: str | int | float) -> None:
        """Set or overwrite an attribute.

        Integers are stored as decimal strings, floats in fixed-point form
        with up to 8 fractional digits.

        Raises:
            TypeError: If value is not a str, int or float.

        Example:
            >>> node.set_attribute('ratio', 0.25)
            >>> node.attribute('ratio')
            '0.25'
        """
        self._attributes[name] = format_value(value)

    def attribute(self, name: str, value: Any = _NOTHING) -> str | None:
        """Return the attribute value, or '' if it is not set.

        A miss does not add the attribute. Called with a value, sets it
        instead (see set_attribute) and returns None.

        Example:
            >>> node.attribute('id', 7)
            >>> node.attribute('id')
            '7'
        """
        if value is not _NOTHING:
            self.set_attribute(name, value)
            return None
        return self._attributes.get(name, '')

    def remove_attribute(self, name: str) -> None:
        """Delete an attribute if present."""
        self._attributes.pop(name, None)

    # ==================== Tags ====================

    def has_tag(self, tag: str) -> bool:
        return tag in self._tags

    def tag(self, tag: str) -> None:
        """Add a tag. Adding an existing tag does nothing."""
        self._tags.setdefault(tag, None)

    # ==================== Traversal ====================

    def enumerate(self) -> list[Tree]:
        """Return all descendants, depth first, post-order, left to right.

        Each node appears after all of its own descendants and before any of
        its ancestors, and the receiver itself is not included. The list is
        a snapshot: it does not follow later changes, so it can be used to
        detach or rewrite nodes while iterating. Do not use it against a
        later state of the tree.

        Example:
            >>> # root -> [a -> [a1], b]
            >>> [n.name for n in root.enumerate()]
            ['a1', 'a', 'b']
        """
        result: list[Tree] = []
        # (node, remaining branches); node is None for the receiver
        stack: list[tuple[Tree | None, Iterator[Tree]]] = [
            (None, iter(list(self._branches)))
        ]
        while stack:
            node, branches = stack[-1]
            branch = next(branches, None)
            if branch is not None:
                stack.append((branch, iter(list(branch._branches))))
                continue
            stack.pop()
            if node is not None:
                result.append(node)
        return result

    def count(self) -> int:
        """Number of nodes in this subtree, including this node."""
        total = 0
        stack = [self]
        while stack:
            node = stack.pop()
            total += 1
            stack.extend(node._branches)
        return total

    def walk(self) -> Iterator[tuple[int, Tree]]:
        """Yield (depth, node) pairs pre-order, starting with this node.

        Depth is relative to this node (this node=0).
        """
        stack = [(0, self)]
        while stack:
            depth, node = stack.pop()
            yield depth, node
            stack.extend((depth + 1, branch) for branch in reversed(node._branches))

    def find(self, path: str) -> Tree | None:
        """Look up a node by a '/'-separated path of names.

        The first segment must be this node's own name; each further segment
        picks the first direct branch with that name.

        Args:
            path: e.g. 'root/command/arg'.

        Returns:
            The matching node, or None if any segment has no match.

        Example:
            >>> root.find('root') is root
            True
            >>> root.find('other/x') is None
            True
        """
        first, *rest = path.split(PATH_SEPARATOR)
        if first != self._name:
            return None

        cursor = self
        for segment in rest:
            for branch in cursor._branches:
                if branch._name == segment:
                    cursor = branch
                    break
            else:
                return None
        return cursor

    # ==================== Teardown ====================

    def destroy(self) -> int:
        """Release this node and its whole subtree.

        The post-order snapshot is taken before anything changes. The node
        is then detached from its parent and every descendant is released
        exactly once, so no node is touched after an ancestor has been
        released.

        Returns:
            Number of released nodes, including this one.
        """
        snapshot = self.enumerate()
        parent = self.parent
        if parent is not None:
            parent.remove_branch(self)

        released = 0
        for node in snapshot + [self]:
            node._release()
            released += 1
        logger.debug("destroy: released %d nodes under '%s'", released, self._name)
        return released

    def _release(self) -> None:
        self._branches.clear()
        self._attributes.clear()
        self._tags.clear()
        self._trunk = None

    # ==================== Diagnostics ====================

    def dump(self, color: bool = False, indent: str = '  ') -> str:
        """Render this subtree as indented text for debugging.

        Not a stable format. See parsetree.tree.dump.render.
        """
        return render(self, color=color, indent=indent)

    def log_dump(
        self, log: logging.Logger | None = None, level: int = logging.DEBUG
    ) -> None:
        """Send dump() to a logger (this module's logger by default)."""
        log = log or logger
        if log.isEnabledFor(level):
            log.log(level, "%s", self.dump())
