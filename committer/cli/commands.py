"""CLI Commands"""

import sys
from pathlib import Path
from typing import Callable, Optional

from committer.config import ConfigResolver, ResolvedConfig
from committer.config.writer import EXAMPLE_CONFIG, create_default_config
from committer.generator import prepare_commit_message
from committer.git import GitRepository
from committer.llm import LLMClient, get_client
from committer.output import bold, dim, print_success, format_commit_message, Spinner
from committer.cli.hook import install_hook

ClientFactory = Callable[[ResolvedConfig], LLMClient]

CONTEXT_QUESTION = 'Why are you making this change? (Press Enter to skip)'
NOTHING_STAGED = 'No changes are staged for commit.'


def run_help() -> int:
    print(f"{bold('Committer')} - AI-powered git commit message generator")
    print()
    print('Commands:')
    print('  committer setup          - Create the config file template at ~/.committer/config.yml')
    print('  committer                - Generate commit message for staged changes')
    print('  committer output-message - Generate commit message without creating a commit')
    print('  committer setup-git-hook - Install the prepare-commit-msg git hook')
    print()
    return 0


def run_setup(home: Optional[Path] = None) -> int:
    """Write the default config template, leaving an existing one alone."""
    path, created = create_default_config(home)
    if created:
        print_success(f"Created config file at: {path}")
    else:
        print(f"Config file already exists at {path}, skipping write")

    print("\nPlease edit this file to add your Anthropic API key.")
    print("Example config format:")
    print(dim(EXAMPLE_CONFIG))
    return 0


def _read_context() -> str:
    print(CONTEXT_QUESTION)
    try:
        return input().strip()
    except EOFError:
        return ""


def run_commit(
    git: GitRepository,
    resolver: ConfigResolver,
    client_factory: ClientFactory = get_client,
    read_context: Callable[[], str] = _read_context,
) -> int:
    """Ask for context, generate a message and open it in git's commit editor."""
    diff = git.staged_diff()
    if not diff.strip():
        print(NOTHING_STAGED)
        return 0

    user_context = read_context()
    with Spinner("Generating commit message..."):
        message = prepare_commit_message(diff, user_context, resolver, client_factory)

    git.commit(message.summary, message.body)
    return 0


def run_output_message(
    user_context: Optional[str],
    git: GitRepository,
    resolver: ConfigResolver,
    client_factory: ClientFactory = get_client,
) -> int:
    """Print the generated message to stdout (used by the git hook)."""
    diff = git.staged_diff()
    if not diff.strip():
        print(NOTHING_STAGED, file=sys.stderr)
        return 0

    message = prepare_commit_message(diff, user_context, resolver, client_factory)
    print(format_commit_message(message.summary, message.body), end='')
    return 0


def run_setup_git_hook(git: GitRepository, cwd: Optional[Path] = None) -> int:
    hook_path = install_hook(cwd or Path.cwd(), git.repo_root())
    print_success(f"Git hook successfully installed at {hook_path}")
    print("Now your commit messages will be automatically generated.")
    return 0
