from __future__ import annotations

"""
Error Taxonomy.

Every failure raised by the package derives from SetupFsError. Parse errors
carry the offending line; materialization errors carry the offending path and
the underlying I/O cause.
"""

from typing import Optional


class SetupFsError(Exception):
    """Base class for all errors raised by setupfs."""

# -----------------------------------------------------------------------------
# PARSER ERRORS
# -----------------------------------------------------------------------------

class ParseError(SetupFsError):
    """
    The diagram is not structurally well-formed.

    Attributes:
        line: 1-based line number of the offending row.
        text: Raw text of the offending row.
    """
    reason = "invalid diagram"

    def __init__(self, line: int, text: str = ""):
        self.line = line
        self.text = text
        super().__init__(f"line {line}: {self.reason}: '{text.strip()}'")


class InvalidDepthJump(ParseError):
    reason = "entry is nested more than one level below its parent"


class OrphanContent(ParseError):
    reason = "quoted content has no file entry to attach to"


class MalformedLine(ParseError):
    reason = "line is neither a '|_' entry nor a quoted content line"


class DirectoryWithContent(ParseError):
    reason = "entry is nested under a file that already has content"

# -----------------------------------------------------------------------------
# MATERIALIZER ERRORS
# -----------------------------------------------------------------------------

class MaterializeError(SetupFsError):
    """
    A filesystem operation failed while creating an entry.

    Attributes:
        path: Directory or file the operation targeted.
        cause: Underlying exception, if any.
    """
    template = "cannot materialize '{path}': {cause}"

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        super().__init__(self.template.format(path=path, cause=cause))


class DirCreationError(MaterializeError):
    template = "cannot create dir '{path}': {cause}"


class FileCreationError(MaterializeError):
    template = "cannot create file '{path}': {cause}"


class WriteError(MaterializeError):
    template = "cannot write to file '{path}': {cause}"


class EmptyPathError(MaterializeError):
    template = "cannot get parent directory of {path}"
