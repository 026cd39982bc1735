"""Classification enums shared across layers.

Error codes carried by ``ServiceError.code``, the three command keywords
understood by the interpreter, and the available traversal strategies.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    """Error codes reported in ``ServiceError.code``."""

    DUPLICATE_PAGE = "DUPLICATE_PAGE"
    UNKNOWN_PAGE = "UNKNOWN_PAGE"
    MALFORMED_COMMAND = "MALFORMED_COMMAND"
    TRAVERSAL_TOO_DEEP = "TRAVERSAL_TOO_DEEP"
    TOO_MANY_ARGUMENTS = "TOO_MANY_ARGUMENTS"
    INPUT_UNAVAILABLE = "INPUT_UNAVAILABLE"


class CommandKeyword(StrEnum):
    """Leading keyword of an interpreter command line."""

    ADD_PAGES = "@addPages"
    ADD_LINKS = "@addLinks"
    IS_CONNECTED = "@isConnected"


class TraversalStrategy(StrEnum):
    """How the depth-first search walks the graph."""

    ITERATIVE = "iterative"
    RECURSIVE = "recursive"
