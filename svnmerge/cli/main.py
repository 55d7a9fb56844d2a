"""CLI Main Entry Point"""

from dataclasses import replace

from svnmerge.config import Config, load_config
from svnmerge.output import print_error
from svnmerge.svn import SvnClient

from svnmerge.cli.args import build_parser, parse_args, resolve_command
from svnmerge.cli.commands import (
    display_config,
    run_branch_to_trunk,
    run_generate_commit,
    run_setup,
    run_show_revisions,
    run_trunk_to_branch,
)


def _apply_overrides(args, config: Config) -> Config:
    """Apply CLI overrides to config.

    Precedence: CLI args > environment variables > config file
    """
    config = replace(config)
    if args.repo_base is not None:
        config.repo_base = args.repo_base
    if args.branch_path is not None:
        config.branch_path = args.branch_path
    if args.local_path is not None:
        config.local_repo_path = args.local_path
    if args.limit is not None:
        config.log_limit = args.limit
        for warning in config.validate():
            print_error(warning)
    return config


def _show_usage(message: str | None = None) -> None:
    if message:
        print_error(message)
        print()
    build_parser().print_help()


def _dispatch(command: str, args, config: Config) -> int:
    """Run a configured command and return its exit code."""
    if command == 'config':
        return display_config(config)
    if command == 'setup':
        return run_setup(config)

    client = SvnClient(verbose=args.verbose)
    runners = {
        'branch-to-trunk': lambda: run_branch_to_trunk(config, client),
        'trunk-to-branch': lambda: run_trunk_to_branch(config, client),
        'generate-commit': lambda: run_generate_commit(config, client),
        'revisions-trunk': lambda: run_show_revisions(
            config, client, config.local_trunk_path, config.trunk_url, remote=args.remote),
        'revisions-branch': lambda: run_show_revisions(
            config, client, config.local_branch_path, config.branch_url, remote=args.remote),
    }
    # main() only passes names known to resolve_command
    return runners[command]()


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    if args.command is None:
        _show_usage("No command specified")
        return 1

    command = resolve_command(args.command)
    if command is None:
        _show_usage(f"Unknown command '{args.command}'")
        return 1
    if command == 'help':
        _show_usage()
        return 0

    config = _apply_overrides(args, load_config())

    try:
        return _dispatch(command, args, config)
    except EOFError:
        print()
        print_error("Input closed before the selection was complete")
        return 1
