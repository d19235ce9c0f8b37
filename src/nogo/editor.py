"""Launches the user's editor on a note."""

import logging
import subprocess

from nogo.models import EditorError


logger = logging.getLogger(__name__)


def open_in_editor(editor: str, path: str) -> None:
    """Runs the editor with path as its only argument and waits for it to exit.

    The editor shares this process's stdin, stdout and stderr.
    Raises :exc:`nogo.models.EditorError` if it cannot be started or exits with a nonzero status.
    """
    logger.debug('running %s %s', editor, path)
    try:
        subprocess.run([editor, path], check=True)
    except OSError as e:
        raise EditorError(f"Couldn't open the file: {e}", editor, e)
    except subprocess.CalledProcessError as e:
        raise EditorError(f"Couldn't open the file: {editor} exited with status {e.returncode}", editor, e)
