"""CLI Main Entry Point"""

import logging
import sys

from committer.config import ConfigResolver
from committer.errors import CommitterError, ErrorKind
from committer.git import GitRepository
from committer.output import print_error, dim

from committer.cli.args import parse_args
from committer.cli.commands import (
    run_commit,
    run_help,
    run_output_message,
    run_setup,
    run_setup_git_hook,
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )


def _report_error(e: CommitterError) -> None:
    print_error(str(e))
    if e.kind is ErrorKind.OVERLOAD:
        print(dim("  The model provider is busy. Wait a moment and run the command again.", sys.stderr), file=sys.stderr)
    elif e.kind is ErrorKind.FORMAT:
        print(dim("  Check that your config.yml is a YAML mapping of key: value pairs.", sys.stderr), file=sys.stderr)


def _dispatch(args) -> int:
    if args.command == 'help':
        return run_help()
    if args.command == 'setup':
        return run_setup()

    git = GitRepository()
    if args.command == 'setup-git-hook':
        return run_setup_git_hook(git)

    resolver = ConfigResolver(find_repo_root=git.repo_root)
    if args.command == 'output-message':
        return run_output_message(args.context, git, resolver)
    return run_commit(git, resolver)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    _configure_logging(args.verbose)

    try:
        return _dispatch(args)
    except CommitterError as e:
        _report_error(e)
        return 1
    except KeyboardInterrupt:
        print(dim("\nCancelled.", sys.stderr), file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
