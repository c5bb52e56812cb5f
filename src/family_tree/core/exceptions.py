from __future__ import annotations


class PipelineError(Exception):
    """Base exception for pipeline misuse (missing input, bad query setup)."""


class TreeError(Exception):
    """Base exception for everything that can go wrong with a family tree."""


class TreeBuildError(TreeError):
    """Raised when a declaration line cannot be applied to the tree."""


class MalformedLineError(TreeBuildError):
    """Raised when a declaration line lacks the ``:`` separator."""

    def __init__(self, line: str, lineno: int = 0):
        self.line = line
        self.lineno = lineno
        where = f"Line {lineno}: " if lineno else ""
        super().__init__(f"{where}Line does not contain a colon: {line!r}")


class ParentNotFoundError(TreeBuildError):
    """Raised when a declaration names a parent that is not in the tree yet."""

    def __init__(self, parent: str, line: str, lineno: int = 0):
        self.parent = parent
        self.line = line
        self.lineno = lineno
        where = f"Line {lineno}: " if lineno else ""
        super().__init__(f"{where}Parent node not found: {parent!r} in {line!r}")


class RootAlreadySetError(TreeBuildError):
    """Raised when something tries to replace an installed root."""

    def __init__(self, current: str, attempted: str):
        self.current = current
        self.attempted = attempted
        super().__init__(
            f"Tree already has root {current!r}; cannot install {attempted!r}"
        )


class NodeNotFoundError(TreeError):
    """Raised when a queried name is not present in the tree."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Node not found with name: {name!r}")
