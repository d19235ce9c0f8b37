"""Command-line interface for nogo."""


import argparse
import json
import logging
import sys
from typing import List
from terminaltables import AsciiTable
from nogo.api import Nogo
from nogo.models import Error, InputError, NoteInfo


LOGGING_FORMAT = '%(asctime)s [%(name)s:%(lineno)s - %(funcName)s()] %(message)s'

ACTIONS = """actions:

  nogo help

  nogo new
  nogo new [topic]
  nogo new [topic] [event]

  nogo ls
  nogo ls [topic]

  nogo edit
  nogo edit [topic]
  nogo edit [topic] [note name substring]
"""


class UsageError(Exception):
    pass


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def _prompt(question: str) -> str:
    print(question, end='', flush=True)
    line = sys.stdin.readline()
    if not line.endswith('\n'):
        raise InputError()
    return line.strip()


def _print_notes(topic: str, infos: List[NoteInfo], heading: str) -> None:
    print()
    if infos:
        print(heading.format(topic=topic))
    for info in infos:
        print('  ', info.display)
    print()


def _new(args, nd: Nogo) -> int:
    topic = args.topic if args.topic is not None else _prompt('Enter the notes topic: ')
    event = args.event if args.event is not None else _prompt('Enter the event name: ')
    path = nd.new(topic, event)
    nd.open(path)
    return 0


def _ls(args, nd: Nogo) -> int:
    if args.topic is None:
        topics = nd.topics()
        if args.json:
            print(json.dumps(topics))
        elif args.table:
            print(AsciiTable([('Topic',)] + [(t,) for t in topics]).table)
        else:
            print()
            if topics:
                print('all topics:')
            else:
                print("looks like there aren't any topics to list!")
            for topic in topics:
                print('  ', topic)
            print()
        return 0

    topic, infos = nd.notes(args.topic)
    if args.json:
        print(json.dumps({'topic': topic, 'notes': [i.as_json() for i in infos]}))
    elif args.table:
        data = [('Title', 'Created', 'Filename')]
        data.extend((i.title if i.title is not None else i.display, i.created or '', i.filename) for i in infos)
        print(AsciiTable(data, topic).table)
    elif infos:
        _print_notes(topic, infos, 'notes in {topic}:')
    else:
        print()
        print("looks like there aren't any notes to list!")
        print()
    return 0


def _edit(args, nd: Nogo) -> int:
    topic_substring = args.topic if args.topic is not None else _prompt('\nWhat topic would you like to edit? ')
    if args.note:
        path = nd.locate(topic_substring, '-'.join(args.note))
    else:
        topic, infos = nd.notes(topic_substring)
        _print_notes(topic, infos, 'Files in {topic}:')
        path = nd.find_note(topic, _prompt(f'What file would you like to edit in {topic}? '))
    nd.open(path)
    return 0


def argparser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog='nogo',
        description='nogo - the notes helper',
        epilog=ACTIONS,
        formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debugging details to stderr.')
    parser.set_defaults(func=None)

    subs = parser.add_subparsers(title='Commands')

    p_help = subs.add_parser('help', help='Show this message.')
    p_help.set_defaults(func=None)

    p_new = subs.add_parser(
        'new',
        help='Create a note for an event and open it in your editor. The note is stored in the topic folder, '
             'which is created if needed, and its filename starts with today\'s date. You will be asked for '
             'the topic and event if they are not given.')
    p_new.add_argument('topic', nargs='?', help='Topic of the note. Spaces are replaced with dashes.')
    p_new.add_argument('event', nargs='?', help='Name of the event. Spaces are replaced with dashes.')
    p_new.set_defaults(func=_new)

    p_ls = subs.add_parser('ls', help='List all topics, or the notes in a topic.')
    p_ls.add_argument('topic', nargs='?',
                      help='Part of the topic name. The first topic (alphabetically) containing it is used.')
    p_ls_formats = p_ls.add_mutually_exclusive_group()
    p_ls_formats.add_argument('-j', '--json', action='store_true', help='Output as JSON.')
    p_ls_formats.add_argument('-t', '--table', action='store_true', help='Format output as a table.')
    p_ls.set_defaults(func=_ls)

    p_edit = subs.add_parser(
        'edit',
        help='Open a note in your editor. You will be asked for the topic and the note if they are not given.')
    p_edit.add_argument('topic', nargs='?',
                        help='Part of the topic name. The first topic (alphabetically) containing it is used.')
    p_edit.add_argument('note', nargs='*',
                        help='Part of the note\'s filename. Multiple words are joined with dashes. '
                             'The first note (alphabetically) containing it is used.')
    p_edit.set_defaults(func=_edit)

    return parser


def main(args=None) -> int:
    """Runs the tool and returns its exit code.

    args may be an array of string command-line arguments; if absent,
    the process's arguments are used.
    """
    parser = argparser()
    try:
        args = parser.parse_args(args)
    except UsageError as e:
        print(f'nogo: {e}', file=sys.stderr)
        parser.print_help()
        return 1
    logging.basicConfig(format=LOGGING_FORMAT)
    logging.getLogger('nogo').setLevel(logging.DEBUG if args.verbose else logging.WARNING)
    if not args.func:
        parser.print_help()
        return 0
    try:
        nd = Nogo.for_user()
        return args.func(args, nd)
    except Error as e:
        print(e.message, file=sys.stderr)
        return 1
