# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Debug rendering of a Tree.

The output is meant for people reading logs or a terminal, not for
machines: its layout may change at any time.

Example output::

    Tree (3 nodes)
      root
        command raw='list' KEYWORD
        filter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .core import Tree

BOLD = '\033[1m'
YELLOW = '\033[33m'
GREEN = '\033[32m'
RESET = '\033[0m'


def render_node(node: Tree, color: bool = False) -> str:
    """Render one node as 'name attr='value' ... tag ...' without indentation.

    Attributes are sorted by name, tags keep insertion order.
    """
    if color:
        line = f"{BOLD}{node.name}{RESET}"
    else:
        line = node.name

    attrs = []
    for name in sorted(node.attributes):
        value = node.attributes[name]
        if color:
            value = f"{YELLOW}{value}{RESET}"
        attrs.append(f"{name}='{value}'")
    if attrs:
        line += ' ' + ' '.join(attrs)

    tags = ' '.join(node.tags)
    if tags:
        line += f" {GREEN}{tags}{RESET}" if color else f" {tags}"
    return line


def render(tree: Tree, color: bool = False, indent: str = '  ') -> str:
    """Render a subtree pre-order, one node per line.

    The first line is a 'Tree (<count> nodes)' header, and the subtree
    root sits one indentation level below it.

    Args:
        tree: Root of the subtree to render.
        color: If True, use ANSI escapes (bold names, yellow values,
            green tags).
        indent: String repeated once per depth level.

    Returns:
        The rendered text, newline-terminated.
    """
    lines = [f"Tree ({tree.count()} nodes)"]
    for depth, node in tree.walk():
        lines.append(indent * (depth + 1) + render_node(node, color=color))
    return '\n'.join(lines) + '\n'
