"""CLI Argument Parsing"""

import argparse
import argcomplete
from argcomplete.completers import ChoicesCompleter

from svnmerge import __version__

# Canonical command -> (aliases, help)
COMMANDS = {
    'branch-to-trunk': (['btt'], 'Merge branch to trunk (merge only)'),
    'trunk-to-branch': (['ttb'], 'Merge trunk to branch (merge only)'),
    'generate-commit': (['gc'], 'Generate commit message and commit'),
    'revisions-trunk': (['rt'], 'Show recent revisions for trunk'),
    'revisions-branch': (['rb'], 'Show recent revisions for branch'),
    'config': ([], 'Show current configuration'),
    'setup': ([], 'Configure repository locations'),
    'help': (['--help', '-h'], 'Show this help message'),
}

ALIASES = {alias: name for name, (aliases, _) in COMMANDS.items() for alias in [name, *aliases]}

COMPLETION_CHOICES = [alias for alias in ALIASES if not alias.startswith('-')]

EPILOG = """\
Commands:
{commands}

Workflow:
  1. svnmerge branch-to-trunk    # Do the merge
  2. svnmerge generate-commit    # Generate commit message

Short aliases:
  btt = branch-to-trunk
  ttb = trunk-to-branch
  gc  = generate-commit
  rt  = revisions-trunk
  rb  = revisions-branch"""


def _command_lines() -> str:
    return '\n'.join(f"  {name:<18} {help_text}" for name, (_, help_text) in COMMANDS.items())


def resolve_command(name: str | None) -> str | None:
    """Map a command or alias to its canonical name (None if unknown)."""
    if name is None:
        return None
    return ALIASES.get(name)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='svnmerge',
        description='Merge between SVN trunk and branch and generate merge commit messages',
        epilog=EPILOG.format(commands=_command_lines()),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )

    command = parser.add_argument('command', nargs='?', metavar='COMMAND', help='Command to run (see below)')
    command.completer = ChoicesCompleter(COMPLETION_CHOICES)
    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    # Repository overrides
    parser.add_argument('--repo-base', type=str, metavar='URL', help='Repository base URL (overrides REPO_BASE)')
    parser.add_argument('--branch-path', type=str, metavar='PATH', help='Branch path, e.g. /branches/feature-x (overrides BRANCH_PATH)')
    parser.add_argument('--local-path', type=str, metavar='DIR', help='Local checkout root (overrides LOCAL_REPO_PATH)')

    # History options
    parser.add_argument('-n', '--limit', type=int, metavar='N', help='Number of revisions to fetch (default: 10)')
    parser.add_argument('--remote', action='store_true', help='revisions-*: read history from the repository URL')

    # Output options
    parser.add_argument('--verbose', action='store_true', help='Echo svn commands before running them')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    args, extra = parser.parse_known_args(argv)
    # "-h"/"--help" are accepted as the help command rather than argparse flags
    if args.command is None and extra and extra[0] in ALIASES:
        args.command = extra.pop(0)
    if extra:
        parser.error(f"unrecognized arguments: {' '.join(extra)}")
    return args
