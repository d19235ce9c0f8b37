"""Provides the main entry point for using the library, :class:`Nogo`"""

from __future__ import annotations
from datetime import datetime
import logging
import os
import os.path
from typing import List, Optional, Tuple
from mako.template import Template
from nogo import codec, resolver
from nogo.conf import NogoConf
from nogo.editor import open_in_editor
from nogo.models import InputError, NotFoundError, FilesystemError, TemplateError, NoteInfo


logger = logging.getLogger(__name__)


def _check_name(kind: str, name: str) -> None:
    if not name:
        raise InputError(f'Oops, the {kind} needs a name!')
    if name in (os.curdir, os.pardir) or any(sep and sep in name for sep in ('/', os.sep, os.altsep)):
        raise InputError(f"Oops, the {kind} can't be {name!r} or contain a path separator!")


class Nogo:
    """Main entry point for working programmatically with your notes.

    Generally, you should get an instance using the :meth:`Nogo.for_user` method.

    None of the methods prompt for input or exit the process; problems are reported by raising a subclass of
    :exc:`nogo.models.Error`. Interactive behavior lives in :mod:`nogo.cli`.

    .. attribute:: conf
       :type: nogo.conf.NogoConf

    Here's an example that prints the title of every note in the first topic containing "work":

    .. code-block:: python

       from nogo.api import Nogo
       nd = Nogo.for_user()
       topic, notes = nd.notes('work')
       for info in notes:
           print(info.title)
    """

    @staticmethod
    def for_user() -> Nogo:
        """Creates an instance using the user's environment and optional ``~/.nogo.conf.py`` file."""
        return NogoConf.for_user().instantiate()

    def __init__(self, conf: NogoConf):
        self.conf = conf

    def new(self, topic: str, event: str, now: Optional[datetime] = None) -> str:
        """Creates a note for the event in the given topic, creating the topic directory if needed.

        Both the topic and the event are normalized with :func:`nogo.codec.normalize`, and the filename is
        prefixed with the current date (or the date of ``now``, if given).

        If a note with the same filename already exists it is left untouched. Otherwise the note is created
        empty, or from :attr:`nogo.conf.NogoConf.template` if one is configured.

        Returns the path of the note.
        """
        topic = codec.normalize(topic)
        event = codec.normalize(event)
        _check_name('topic', topic)
        _check_name('event', event)
        now = now or datetime.now()

        topic_dir = resolver.topic_path(self.conf, topic)
        try:
            os.makedirs(topic_dir, exist_ok=True)
        except OSError as e:
            raise FilesystemError("Oops, I couldn't make the directory", topic_dir, e)

        path = os.path.join(topic_dir, codec.encode(event, now))
        if os.path.exists(path):
            logger.debug('%s already exists, leaving it as-is', path)
            return path

        contents = self._render(topic, event, now) if self.conf.template else ''
        try:
            with open(path, 'w') as file:
                file.write(contents)
        except OSError as e:
            raise FilesystemError("Oops, I couldn't create the file", path, e)
        logger.debug('created %s', path)
        return path

    def _render(self, topic: str, event: str, now: datetime) -> str:
        template_path = self.conf.template
        if not os.path.isfile(template_path):
            raise FilesystemError("Oops, couldn't find the template", template_path)
        try:
            template = Template(filename=os.path.abspath(template_path))
            return template.render(topic=topic, title=event.replace('-', ' '), created=now)
        except Exception as e:
            raise TemplateError(template_path, e)

    def topics(self) -> List[str]:
        """Returns the names of all topics, sorted."""
        return resolver.list_topics(self.conf)

    def find_topic(self, substring: str) -> str:
        """Returns the complete name of the first topic containing substring.

        Raises :exc:`nogo.models.NotFoundError` if there is none.
        """
        topic = resolver.find_topic(self.conf, substring)
        if topic is None:
            raise NotFoundError('topic', substring)
        return topic

    def note_info(self, topic: str, filename: str) -> NoteInfo:
        """Returns the details of a note, derived from its filename."""
        info = NoteInfo(os.path.join(resolver.topic_path(self.conf, topic), filename), filename,
                        display=codec.decode(filename))
        parsed = codec.parse(filename)
        if parsed:
            info.created, info.title = parsed
        return info

    def notes(self, topic_substring: str) -> Tuple[str, List[NoteInfo]]:
        """Resolves the topic and returns its complete name along with the details of each of its notes."""
        topic = self.find_topic(topic_substring)
        return topic, [self.note_info(topic, f) for f in resolver.list_notes(self.conf, topic)]

    def locate(self, topic_substring: str, note_substring: str) -> str:
        """Returns the path of the first note containing note_substring, in the first topic containing topic_substring.

        Raises :exc:`nogo.models.NotFoundError` if either lookup fails.
        """
        return self.find_note(self.find_topic(topic_substring), note_substring)

    def find_note(self, topic: str, substring: str) -> str:
        """Returns the path of the first note in the topic whose filename contains substring.

        The topic must be a complete topic name, such as one returned by :meth:`find_topic`.
        Raises :exc:`nogo.models.NotFoundError` if there is no such note.
        """
        filename = resolver.find_note(self.conf, topic, substring)
        if filename is None:
            raise NotFoundError('note', substring)
        return os.path.join(resolver.topic_path(self.conf, topic), filename)

    def open(self, path: str) -> None:
        """Opens the note in the configured editor and waits for the editor to exit."""
        open_in_editor(self.conf.editor, path)
