"""CLI Argument Parsing"""

import argparse
import argcomplete

from aicommit import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='aicommit',
        description='Draft a commit message for your staged changes with Claude, then commit it',
        epilog='Example: git add -p && aicommit'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-m', '--model', type=str, metavar='MODEL', help='Claude model name (default: claude-3-5-haiku-20241022)')
    parser.add_argument('--shell-quoting', action='store_true', help='Run git commit through the shell with escaped double quotes (legacy behaviour)')
    parser.add_argument('--verbose', action='store_true', help='Show debug info (staged files, prompt size, tokens used)')

    argcomplete.autocomplete(parser)
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
