# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Parse tree exceptions."""

from __future__ import annotations


class ParseTreeError(Exception):
    """Base exception for parse tree errors."""

    pass


class InvalidBranchError(ParseTreeError, ValueError):
    """Raised when a node cannot be attached as a branch.

    Covers a missing node, an object that is not a Tree, a node that
    already has a parent, and a node that would become its own ancestor.
    """

    pass


class UnsupportedOperationError(ParseTreeError, TypeError):
    """Raised when a Tree is copied or pickled."""

    pass
