"""prepare-commit-msg hook installer"""

import os
import stat
from pathlib import Path

from committer.errors import GitError

HOOK_RELATIVE_PATH = Path('.git') / 'hooks' / 'prepare-commit-msg'

HOOK_SCRIPT = """\
#!/bin/sh
# Installed by committer: fills in the commit message from the staged diff.
COMMIT_MSG_FILE=$1
COMMIT_SOURCE=$2

# Leave messages from -m, templates, merges and amends alone.
if [ -n "$COMMIT_SOURCE" ]; then
  exit 0
fi

MESSAGE=$(committer output-message) || exit 0
if [ -z "$MESSAGE" ]; then
  exit 0
fi

ORIGINAL=$(cat "$COMMIT_MSG_FILE")
printf '%s\\n%s\\n' "$MESSAGE" "$ORIGINAL" > "$COMMIT_MSG_FILE"
"""


class HookInstallError(GitError):
    """Raised when the hook cannot be installed."""
    pass


def install_hook(cwd: Path, repo_root: Path | None) -> Path:
    """Write the hook into cwd/.git/hooks. Must be run from the repository root."""
    if repo_root is None or Path(repo_root).resolve() != Path(cwd).resolve():
        raise HookInstallError("Please run this command from the root of your git repository.")
    if not (cwd / '.git').is_dir():
        raise HookInstallError("Current directory is not a git repository.")

    hook_path = cwd / HOOK_RELATIVE_PATH
    if hook_path.exists():
        raise HookInstallError(
            "prepare-commit-msg hook already exists.\n"
            "Please remove or rename the existing hook and try again."
        )

    hook_path.parent.mkdir(parents=True, exist_ok=True)
    hook_path.write_text(HOOK_SCRIPT, encoding='utf-8')
    mode = os.stat(hook_path).st_mode
    os.chmod(hook_path, mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return hook_path
