"""Converts between note metadata and note filenames.

A note for the event "Kickoff Call" created on 2 May 2012 is stored as ``2012-05-02_Kickoff-Call.md``,
and displayed by ``nogo ls`` as ``Kickoff Call (2012-05-02)``. Notes without a date, such as ``todo.md``,
are displayed as just the title.

The mapping is lossy: dashes in a title are indistinguishable from spaces.
"""

from datetime import date
import os
import re
from typing import Optional, Tuple, Union

EXTENSION = '.md'
SEPARATOR = '_'
DATE_FORMAT = '%Y-%m-%d'
UNPARSABLE = 'unparsable filename'


def normalize(value: str) -> str:
    """Replaces each run of whitespace with a single dash, after stripping leading and trailing whitespace.

    This is applied to topic names before creating directories, and to event titles before encoding them.
    """
    return re.sub(r'\s+', '-', value.strip())


def encode(title: str, timestamp: Optional[date] = None) -> str:
    """Returns the filename for a note with the given title.

    If timestamp is given (a :class:`datetime.date` or :class:`datetime.datetime`), the filename is prefixed
    with the date in ``YYYY-MM-DD`` form, so that sorting filenames as strings sorts them chronologically.
    Underscores in the title become dashes, since an underscore separates the date from the title.
    """
    title = normalize(title).replace(SEPARATOR, '-')
    if timestamp is None:
        return f'{title}{EXTENSION}'
    return f'{timestamp.strftime(DATE_FORMAT)}{SEPARATOR}{title}{EXTENSION}'


def parse(filename: Union[str, bytes]) -> Optional[Tuple[Optional[str], str]]:
    """Splits a filename into its date text (or None) and its title, with dashes replaced by spaces.

    Returns None if the filename does not have one of the two shapes produced by :func:`encode`.
    The date text is returned as it appears in the filename; it is not validated.
    """
    if isinstance(filename, bytes):
        filename = os.fsdecode(filename)
    if not isinstance(filename, str) or not filename.endswith(EXTENSION):
        return None
    parts = filename.split(SEPARATOR)
    if len(parts) == 1:
        created, rest = None, parts[0]
    elif len(parts) == 2:
        created, rest = parts
        if not created:
            return None
    else:
        return None
    title = rest[:-len(EXTENSION)].replace('-', ' ')
    if not title:
        return None
    return created, title


def decode(filename: Union[str, bytes]) -> str:
    """Returns the human-readable form of a note filename.

    Never raises; filenames that cannot be parsed are displayed as :data:`UNPARSABLE`.
    """
    parsed = parse(filename)
    if parsed is None:
        return UNPARSABLE
    created, title = parsed
    if created is None:
        return title
    return f'{title} ({created})'
