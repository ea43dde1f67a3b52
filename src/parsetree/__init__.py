# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Parsetree - A mutable, ordered N-ary tree for parsed syntax.

A lightweight, zero-dependency library providing the node type a parser
builds, annotates and rewrites in place.
"""

__version__ = "0.1.0"

from .exceptions import (
    InvalidBranchError,
    ParseTreeError,
    UnsupportedOperationError,
)
from .formatting import DOUBLE_PRECISION, format_double, format_int, format_value
from .tree import PATH_SEPARATOR, Tree

__all__ = [
    # Core classes
    "Tree",
    "PATH_SEPARATOR",
    # Attribute formatting
    "DOUBLE_PRECISION",
    "format_double",
    "format_int",
    "format_value",
    # Exceptions
    "ParseTreeError",
    "InvalidBranchError",
    "UnsupportedOperationError",
]
