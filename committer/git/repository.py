"""Git Repository - read the staged diff and create commits."""

import logging
import subprocess
from pathlib import Path

from committer.errors import GitError

logger = logging.getLogger(__name__)


class GitRepository:
    """Thin wrapper over the git commands committer needs."""

    def __init__(self, cwd: Path | None = None):
        self.cwd = cwd

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout."""
        try:
            result = subprocess.run(
                ['git', *args],
                capture_output=True,
                text=True,
                check=True,
                encoding='utf-8',
                errors='replace',
                cwd=self.cwd,
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            raise GitError(f"Git command failed: git {' '.join(args)}\n{e.stderr}", stderr=e.stderr or "")
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")

    def staged_diff(self) -> str:
        """Return the diff of staged changes (empty string if nothing is staged)."""
        diff = self._run_git('diff', '--staged')
        logger.debug("Staged diff is %d chars", len(diff))
        return diff

    def repo_root(self) -> Path | None:
        """Top-level directory of the enclosing repository, or None outside one."""
        try:
            root = self._run_git('rev-parse', '--show-toplevel').strip()
        except GitError:
            return None
        return Path(root) if root else None

    def commit(self, summary: str, body: str | None = None) -> None:
        """Commit with the given message and leave the editor open for review."""
        args = ['git', 'commit', '-m', summary]
        if body:
            args.extend(['-m', body])
        args.append('-e')

        # Not captured: git needs the terminal for the editor.
        try:
            result = subprocess.run(args, cwd=self.cwd)
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")
        if result.returncode != 0:
            raise GitError(f"git commit exited with status {result.returncode}")
