"""CLI Argument Parsing"""

import argparse
import argcomplete

from committer import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='committer',
        description='AI-powered git commit message generator',
        epilog='Run without a command to generate a message for staged changes and commit.'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--verbose', action='store_true', help='Show debug logging on stderr')

    subparsers = parser.add_subparsers(dest='command', metavar='COMMAND')
    subparsers.add_parser('setup', help='Create the config file template at ~/.committer/config.yml')
    subparsers.add_parser('help', help='Show available commands')
    output = subparsers.add_parser('output-message', help='Generate a commit message without creating a commit')
    output.add_argument('context', nargs='?', default=None, help='Why the change is being made')
    subparsers.add_parser('setup-git-hook', help='Install the prepare-commit-msg git hook')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
