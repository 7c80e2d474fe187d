"""Exception hierarchy for md2editor.

Every failure reported to a caller derives from :class:`Md2EditorError` so
the CLI and the web service can turn them into a single ``{ok, error}``
shape.  Malformed Markdown is never an error.
"""

from __future__ import annotations


class Md2EditorError(Exception):
    """Base class for all md2editor failures."""


class EmptyInputError(Md2EditorError, ValueError):
    """The Markdown document is blank or whitespace-only."""

    def __init__(self, message: str = "Markdown document is empty.") -> None:
        super().__init__(message)


class EditorNotFoundError(Md2EditorError):
    """No plausible editable surface was found before the timeout."""

    role = "editor"

    def __init__(self, editable_count: int = 0) -> None:
        self.editable_count = editable_count
        super().__init__(
            f"Could not find the {self.role} editor "
            f"(detected editable nodes: {editable_count}). "
            "Click into the draft once and retry."
        )


class NoTitleTargetError(EditorNotFoundError):
    role = "title"


class NoBodyTargetError(EditorNotFoundError):
    role = "body"


class TargetConflictError(Md2EditorError):
    """Title and body resolved to the same effective input node."""

    def __init__(self) -> None:
        super().__init__(
            "Editor detection conflict: title and body are the same node. "
            "Click into the body editor once and retry."
        )
