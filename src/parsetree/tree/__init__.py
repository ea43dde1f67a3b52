# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tree package - The parse tree node type.

The package is organized into:
- core: The Tree class with branch management, attributes, tags,
  enumeration and path lookup
- dump: Debug rendering of a subtree

Example:
    >>> from parsetree import Tree
    >>> root = Tree('root')
    >>> root.add_branch(Tree('a'))
    >>> root.find('root/a').name
    'a'
"""

from .core import PATH_SEPARATOR, Tree
from .dump import render

__all__ = ["PATH_SEPARATOR", "Tree", "render"]
