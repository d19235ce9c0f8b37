"""Finds topics and notes by partial name.

Lookups return the first entry, in sorted order, whose name contains the given substring. Matching is
case-sensitive, and an empty substring matches the first entry. Ambiguous substrings are not an error.
"""

import logging
import os
import os.path
from typing import List, Optional

from nogo.codec import normalize
from nogo.conf import NogoConf
from nogo.models import FilesystemError


logger = logging.getLogger(__name__)


def _entries(conf: NogoConf, dirpath: str, dirs: bool) -> List[str]:
    try:
        with os.scandir(dirpath) as it:
            names = [entry.name for entry in it
                     if not conf.ignore(dirpath, entry.name)
                     and (entry.is_dir() if dirs else entry.is_file())]
    except OSError as e:
        raise FilesystemError("Oops, couldn't read that directory", dirpath, e)
    names.sort()
    return names


def topic_path(conf: NogoConf, topic: str) -> str:
    return os.path.join(conf.notes_root, topic)


def list_topics(conf: NogoConf) -> List[str]:
    """Returns the names of all topic directories, sorted.

    Raises :exc:`nogo.models.FilesystemError` if the notes root cannot be read.
    """
    return _entries(conf, conf.notes_root, dirs=True)


def list_notes(conf: NogoConf, topic: str) -> List[str]:
    """Returns the filenames of all notes in the given topic, sorted.

    The topic must be a complete topic name, as returned by :func:`find_topic`.
    Raises :exc:`nogo.models.FilesystemError` if the topic directory cannot be read.
    """
    return _entries(conf, topic_path(conf, topic), dirs=False)


def find_topic(conf: NogoConf, substring: str) -> Optional[str]:
    """Returns the first topic whose name contains substring, or None."""
    for topic in list_topics(conf):
        if substring in topic:
            logger.debug('topic substring %r matched %s', substring, topic)
            return topic
    return None


def find_note(conf: NogoConf, topic: str, substring: str) -> Optional[str]:
    """Returns the filename of the first note in topic containing substring, or None.

    Spaces in substring are normalized to dashes before matching, so ``kickoff call`` finds
    ``2012-05-02_kickoff-call.md``.
    """
    substring = normalize(substring)
    for filename in list_notes(conf, topic):
        if substring in filename:
            logger.debug('note substring %r matched %s', substring, filename)
            return filename
    return None
