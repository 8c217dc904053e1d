from __future__ import annotations

"""
Navigation Index Error Taxonomy.

Separates caller-facing failures (an unusable scan root) from internal
invariant violations that signal a defect in the tree builder.
"""


class RootUnavailableError(ValueError):
    """The requested scan root does not exist or is not a directory."""

    def __init__(self, root: str, reason: str) -> None:
        super().__init__(f"Root directory unavailable '{root}': {reason}")
        self.root = root
        self.reason = reason


class NavTreeInvariantError(RuntimeError):
    """A structural invariant of the navigation tree was violated."""
