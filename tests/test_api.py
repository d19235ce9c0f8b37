from datetime import datetime
from pathlib import Path
import pytest
from freezegun import freeze_time
from nogo.api import Nogo
from nogo.conf import NogoConf
from nogo.models import InputError, NotFoundError, FilesystemError, TemplateError, NoteInfo


def config(**kwargs):
    return NogoConf(notes_root='/notes', **kwargs)


def test_for_user(fs, monkeypatch):
    monkeypatch.setenv('NOGODIR', '/notes')
    monkeypatch.setenv('EDITOR', 'nano')
    fs.create_dir('/notes')
    nd = Nogo.for_user()
    assert nd.conf == NogoConf(notes_root='/notes', editor='nano')


@freeze_time('2012-05-02T03:04:05')
def test_new(fs):
    nd = config().instantiate()
    path = nd.new('Project X', 'Kickoff Call')
    assert path == '/notes/Project-X/2012-05-02_Kickoff-Call.md'
    assert Path('/notes/Project-X').is_dir()
    assert Path(path).read_text() == ''


def test_new_with_time(fs):
    nd = config().instantiate()
    path = nd.new('work', '  weekly   retro ', datetime(2024, 2, 1, 9, 30))
    assert path == '/notes/work/2024-02-01_weekly-retro.md'


def test_new_existing_is_untouched(fs):
    fs.create_file('/notes/work/2024-02-01_retro.md', contents='already here')
    nd = config().instantiate()
    path = nd.new('work', 'retro', datetime(2024, 2, 1))
    assert Path(path).read_text() == 'already here'


def test_new_blank_names(fs):
    nd = config().instantiate()
    with pytest.raises(InputError, match='topic'):
        nd.new('   ', 'retro')
    with pytest.raises(InputError, match='event'):
        nd.new('work', '')
    assert not Path('/notes').exists()


def test_new_uncreatable_directory(fs):
    fs.create_file('/notes/work')
    nd = config().instantiate()
    with pytest.raises(FilesystemError) as exc_info:
        nd.new('work', 'retro')
    assert exc_info.value.path == '/notes/work'
    assert exc_info.value.message.startswith("Oops, I couldn't make the directory")


def test_new_from_template(fs):
    template = """\
---
title: ${title}
topic: ${topic}
created: ${created.strftime('%Y-%m-%d %H:%M')}
...
"""
    fs.create_file('/notes/.templates/note.md.mako', contents=template)
    nd = config(template='/notes/.templates/note.md.mako').instantiate()
    path = nd.new('Project X', 'Kickoff Call', datetime(2012, 5, 2, 3, 4))
    assert Path(path).read_text() == """\
---
title: Kickoff Call
topic: Project-X
created: 2012-05-02 03:04
...
"""


def test_new_missing_template(fs):
    nd = config(template='/notes/.templates/nope.mako').instantiate()
    with pytest.raises(FilesystemError, match="couldn't find the template"):
        nd.new('work', 'retro')


def test_topics(fs):
    fs.create_dir('/notes/work')
    fs.create_dir('/notes/home')
    fs.create_dir('/notes/.git')
    assert config().instantiate().topics() == ['home', 'work']


def test_notes(fs):
    fs.create_file('/notes/work/2024-1-5_project-kickoff.md')
    fs.create_file('/notes/work/2024-2-1_retro.md')
    fs.create_file('/notes/work/todo.md')
    fs.create_file('/notes/work/notes.txt')
    topic, infos = config().instantiate().notes('wor')
    assert topic == 'work'
    assert infos == [
        NoteInfo('/notes/work/2024-1-5_project-kickoff.md', '2024-1-5_project-kickoff.md',
                 title='project kickoff', created='2024-1-5', display='project kickoff (2024-1-5)'),
        NoteInfo('/notes/work/2024-2-1_retro.md', '2024-2-1_retro.md',
                 title='retro', created='2024-2-1', display='retro (2024-2-1)'),
        NoteInfo('/notes/work/notes.txt', 'notes.txt', display='unparsable filename'),
        NoteInfo('/notes/work/todo.md', 'todo.md', title='todo', display='todo'),
    ]
    assert infos[1].as_json() == {
        'path': '/notes/work/2024-2-1_retro.md',
        'filename': '2024-2-1_retro.md',
        'title': 'retro',
        'created': '2024-2-1',
        'display': 'retro (2024-2-1)',
    }


def test_notes_unknown_topic(fs):
    fs.create_dir('/notes/work')
    with pytest.raises(NotFoundError) as exc_info:
        config().instantiate().notes('home')
    assert exc_info.value.kind == 'topic'
    assert exc_info.value.message == "Oops, couldn't find that topic: home"


def test_locate(fs):
    fs.create_file('/notes/a-work/todo.md')
    fs.create_file('/notes/work/2024-2-1_retro.md')
    nd = config().instantiate()
    with pytest.raises(NotFoundError, match='note: retro'):
        nd.locate('work', 'retro')
    assert nd.find_note('work', 'retro') == '/notes/work/2024-2-1_retro.md'
    assert nd.locate('a-', 'todo') == '/notes/a-work/todo.md'


def test_open(fs, mocker):
    run = mocker.patch('subprocess.run')
    nd = config(editor='nano').instantiate()
    nd.open('/notes/work/todo.md')
    run.assert_called_once_with(['nano', '/notes/work/todo.md'], check=True)


def test_new_event_with_underscore(fs):
    nd = config().instantiate()
    path = nd.new('work', 'q3_planning', datetime(2012, 5, 2))
    assert path == '/notes/work/2012-05-02_q3-planning.md'
    topic, infos = nd.notes('work')
    assert [i.display for i in infos] == ['q3 planning (2012-05-02)']


def test_new_rejects_paths(fs):
    fs.create_dir('/notes')
    nd = config().instantiate()
    for topic, event in [('..', 'retro'), ('.', 'retro'), ('../elsewhere', 'retro'), ('work/sub', 'retro'),
                         ('work', '../../escape'), ('work', 'a/b')]:
        with pytest.raises(InputError, match='path separator'):
            nd.new(topic, event, datetime(2012, 5, 2))
    assert not Path('/elsewhere').exists()
    assert not Path('/notes/work').exists()


def test_new_template_syntax_error(fs):
    fs.create_file('/notes/.templates/note.md.mako', contents='% if True:\nunclosed\n')
    nd = config(template='/notes/.templates/note.md.mako').instantiate()
    with pytest.raises(TemplateError) as exc_info:
        nd.new('work', 'retro', datetime(2012, 5, 2))
    assert exc_info.value.path == '/notes/.templates/note.md.mako'
    assert exc_info.value.message.startswith("Oops, couldn't render the template /notes/.templates/note.md.mako: ")
    assert not Path('/notes/work/2012-05-02_retro.md').exists()


def test_new_template_undefined_name(fs):
    fs.create_file('/notes/.templates/note.md.mako', contents='${no_such_name}')
    nd = config(template='/notes/.templates/note.md.mako').instantiate()
    with pytest.raises(TemplateError):
        nd.new('work', 'retro', datetime(2012, 5, 2))
    assert not Path('/notes/work/2012-05-02_retro.md').exists()
