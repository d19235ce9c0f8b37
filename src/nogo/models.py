"""Defines classes for representing notes and the errors nogo can report.

The most important classes are :class:`NoteInfo` and :class:`Error`.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


class Error(Exception):
    """Base class for problems that should end the current command with a message to the user."""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputError(Error):
    """Raised when a prompt cannot read a line from standard input."""
    def __init__(self, message: str = 'Oops, what was that?'):
        super().__init__(message)


class NotFoundError(Error):
    """Raised when a topic or note substring does not match anything."""
    def __init__(self, kind: str, name: str):
        super().__init__(f"Oops, couldn't find that {kind}: {name}")
        self.kind = kind
        self.name = name


class FilesystemError(Error):
    """Raised when a directory cannot be read, or a file or directory cannot be created."""
    def __init__(self, message: str, path: str, cause: BaseException = None):
        super().__init__(f'{message}: {path}')
        self.path = path
        self.cause = cause


class TemplateError(Error):
    """Raised when the template for new notes cannot be compiled or rendered."""
    def __init__(self, path: str, cause: BaseException):
        super().__init__(f"Oops, couldn't render the template {path}: {cause}")
        self.path = path
        self.cause = cause


class EditorError(Error):
    """Raised when the editor cannot be started or exits with a nonzero status."""
    def __init__(self, message: str, editor: str, cause: BaseException = None):
        super().__init__(message)
        self.editor = editor
        self.cause = cause


@dataclass
class NoteInfo:
    """Container for what nogo knows about a single note file.

    All of the attributes except :attr:`path` and :attr:`filename` are derived from the filename
    by :mod:`nogo.codec`; nothing is read from the file's contents.
    """

    path: str
    """The absolute path of the note."""

    filename: str
    """The name of the file within its topic directory."""

    title: Optional[str] = None
    """The title from the filename, with dashes turned back into spaces.

    None if the filename could not be parsed.
    """

    created: Optional[str] = None
    """The date portion of the filename, if it has one, exactly as it appears in the name."""

    display: str = ''
    """The human-readable form of the filename, as shown by ``nogo ls``."""

    def as_json(self) -> dict:
        """Returns a dict representing the instance, suitable for serializing as json."""
        return {
            'path': self.path,
            'filename': self.filename,
            'title': self.title,
            'created': self.created,
            'display': self.display,
        }
