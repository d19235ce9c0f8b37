from __future__ import annotations
from dataclasses import dataclass, replace
import logging
import os
import os.path
from typing import Callable, Optional


logger = logging.getLogger(__name__)

NOTES_SUBDIR = 'notes'
"""Notes are stored in ``~/notes`` unless the ``NOGODIR`` environment variable is set."""

DEFAULT_EDITOR = 'vim'
"""Used when the ``EDITOR`` environment variable is not set."""

ROOT_ENV = 'NOGODIR'
EDITOR_ENV = 'EDITOR'


def default_ignore(parentpath: str, filename: str) -> bool:
    return filename.startswith('.')


def default_notes_root() -> str:
    return os.path.join(os.path.expanduser('~'), NOTES_SUBDIR)


@dataclass
class NogoConf:
    notes_root: str
    """The directory containing one subdirectory per topic."""

    editor: str = DEFAULT_EDITOR
    """Name or path of the program used to edit notes. It is called with the note's path as its only argument."""

    ignore: Callable[[str, str], bool] = default_ignore
    """Use this to indicate files or folders that should not be treated as topics or notes.

    The first argument is the path to the directory containing the file/folder, and the second argument is
    the filename.

    The current default behavior is to ignore all files or folders whose name begins with a period (``.``),
    which keeps version control directories like ``.git`` out of topic listings.
    """

    template: Optional[str] = None
    """Optional path to a Mako template used for the contents of new notes.

    The template is rendered with the names ``topic``, ``title`` and ``created`` (a :class:`datetime.datetime`).
    If unset, new notes are created empty.

    For example:

    .. code-block:: python

       conf.template = '/Users/jacob/notes/.templates/note.md.mako'
    """

    @classmethod
    def for_user(cls, environ=None) -> NogoConf:
        """Loads the configuration for the current user.

        If ``~/.nogo.conf.py`` exists, it is executed and must assign an instance of NogoConf to the
        variable ``conf``. Otherwise the defaults are used. Either way, the ``NOGODIR`` and ``EDITOR``
        environment variables take precedence.
        """
        environ = os.environ if environ is None else environ
        path = os.path.expanduser(os.path.join('~', '.nogo.conf.py'))
        if os.path.exists(path):
            with open(path, 'r') as file:
                conf_script = file.read()
            context = {}
            exec(conf_script, context)
            if 'conf' not in context or not isinstance(context['conf'], cls):
                raise Exception('You need to assign an instance of NogoConf to the variable `conf` '
                                f'in your config file: {path}')
            conf = context['conf']
            logger.debug('loaded config file %s', path)
        else:
            conf = cls(notes_root=default_notes_root())

        if environ.get(ROOT_ENV):
            conf = replace(conf, notes_root=environ[ROOT_ENV])
        if environ.get(EDITOR_ENV):
            conf = replace(conf, editor=environ[EDITOR_ENV])
        logger.debug('notes root is %s, editor is %s', conf.notes_root, conf.editor)
        return conf

    def standardize(self):
        return replace(
            self,
            notes_root=os.path.realpath(os.path.expanduser(self.notes_root)),
            template=os.path.realpath(os.path.expanduser(self.template)) if self.template else None
        )

    def instantiate(self):
        from nogo.api import Nogo
        return Nogo(self.standardize())
