import subprocess
import pytest
from nogo.editor import open_in_editor
from nogo.models import EditorError


def test_open_in_editor(mocker):
    run = mocker.patch('subprocess.run')
    open_in_editor('nano', '/notes/work/todo.md')
    run.assert_called_once_with(['nano', '/notes/work/todo.md'], check=True)


def test_open_in_editor_missing(mocker):
    mocker.patch('subprocess.run', side_effect=FileNotFoundError(2, 'No such file or directory', 'bogus-editor'))
    with pytest.raises(EditorError) as exc_info:
        open_in_editor('bogus-editor', '/notes/work/todo.md')
    assert exc_info.value.editor == 'bogus-editor'
    assert exc_info.value.message.startswith("Couldn't open the file: ")


def test_open_in_editor_failure(mocker):
    mocker.patch('subprocess.run', side_effect=subprocess.CalledProcessError(3, ['vim', '/notes/work/todo.md']))
    with pytest.raises(EditorError, match='vim exited with status 3'):
        open_in_editor('vim', '/notes/work/todo.md')
