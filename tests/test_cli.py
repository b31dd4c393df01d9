"""
Tests for the command layer, the git boundary and the hook installer.

Run with:
    pytest tests/test_cli.py -v
"""

import os
import subprocess

import pytest
import yaml

from committer.cli.main import main
from committer.cli.args import parse_args
from committer.cli.commands import (
    CONTEXT_QUESTION,
    NOTHING_STAGED,
    run_commit,
    run_output_message,
    run_setup,
    run_setup_git_hook,
)
from committer.cli.hook import HOOK_RELATIVE_PATH, HOOK_SCRIPT, HookInstallError, install_hook
from committer.errors import ErrorKind, GitError
from committer.git import GitRepository
from committer.output import format_commit_message, paint, print_error

DIFF = "diff --git a/VERSION b/VERSION\n-0.1.0\n+0.1.1\n"


@pytest.fixture
def configured(resolver, home, write_config):
    write_config(home, {"api_key": "k", "model": "m"})
    return resolver


def _never_called(config):
    raise AssertionError("client should not be created")


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

class TestParseArgs:

    def test_default_command(self):
        args = parse_args([])
        assert args.command is None
        assert args.verbose is False

    def test_output_message_with_context(self):
        args = parse_args(["output-message", "fixing the login bug"])
        assert args.command == "output-message"
        assert args.context == "fixing the login bug"

    def test_output_message_without_context(self):
        assert parse_args(["output-message"]).context is None

    def test_verbose(self):
        assert parse_args(["--verbose", "setup"]).verbose is True


# ---------------------------------------------------------------------------
# Default commit command
# ---------------------------------------------------------------------------

class TestRunCommit:

    def test_empty_diff_short_circuits(self, capsys, configured, make_git):
        git = make_git(diff="")

        def read_context():
            raise AssertionError("should not ask for context")

        assert run_commit(git, configured, _never_called, read_context) == 0
        assert NOTHING_STAGED in capsys.readouterr().out
        assert git.commits == []

    def test_whitespace_diff_short_circuits(self, configured, make_git):
        git = make_git(diff="\n  \n")
        assert run_commit(git, configured, _never_called, lambda: "") == 0
        assert git.commits == []

    def test_commits_summary_and_body(self, configured, make_git, make_client):
        git = make_git(diff=DIFF)
        client = make_client("chore: bump version\n\nIncremented patch version to prepare release")

        code = run_commit(git, configured, lambda config: client, lambda: "preparing the release")

        assert code == 0
        assert git.commits == [("chore: bump version", "Incremented patch version to prepare release")]
        assert "preparing the release" in client.prompts[0]

    def test_no_context_commits_summary_only(self, configured, make_git, make_client):
        git = make_git(diff=DIFF)
        client = make_client("chore: bump version\n\nstray body")

        run_commit(git, configured, lambda config: client, lambda: "")

        assert git.commits == [("chore: bump version\n\nstray body", None)]
        assert "User's context" not in client.prompts[0]

    def test_asks_why(self, capsys, monkeypatch, configured, make_git, make_client):
        monkeypatch.setattr("builtins.input", lambda: "")
        git = make_git(diff=DIFF)
        run_commit(git, configured, lambda config: make_client("fix: x"))
        assert CONTEXT_QUESTION in capsys.readouterr().out


# ---------------------------------------------------------------------------
# output-message command
# ---------------------------------------------------------------------------

class TestRunOutputMessage:

    def test_prints_summary_and_body(self, capsys, configured, make_git, make_client):
        client = make_client("feat: add new feature\n\nThis is the commit body")
        code = run_output_message("Test commit context", make_git(diff=DIFF), configured, lambda c: client)

        assert code == 0
        assert capsys.readouterr().out == "feat: add new feature\n\nThis is the commit body\n"

    def test_prints_summary_only(self, capsys, configured, make_git, make_client):
        run_output_message(None, make_git(diff=DIFF), configured, lambda c: make_client("fix: x"))
        assert capsys.readouterr().out == "fix: x\n"

    def test_empty_diff_prints_nothing_to_stdout(self, capsys, configured, make_git):
        assert run_output_message(None, make_git(diff=""), configured, _never_called) == 0
        captured = capsys.readouterr()
        assert captured.out == ""
        assert NOTHING_STAGED in captured.err

    def test_format_commit_message(self):
        assert format_commit_message("a", "b") == "a\n\nb\n"
        assert format_commit_message("a", None) == "a\n"


class TestOutput:

    def test_plain_when_no_color(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        assert paint("x", "bold") == "x"

    def test_styled_when_forced(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("FORCE_COLOR", "1")
        assert paint("x", "red") == "\033[31mx\033[0m"

    def test_error_goes_to_stderr(self, capsys, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        print_error("boom")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "Error: boom\n"


# ---------------------------------------------------------------------------
# setup command
# ---------------------------------------------------------------------------

class TestRunSetup:

    def test_writes_default_config(self, capsys, home):
        assert run_setup(home) == 0
        path = home / ".committer" / "config.yml"
        data = yaml.safe_load(path.read_text())
        assert data == {"api_key": None, "model": "claude-3-7-sonnet-20250219", "scopes": None}
        assert "api_key: your_api_key_here" in capsys.readouterr().out

    def test_keeps_existing_config(self, capsys, home, write_config):
        path = write_config(home, {"api_key": "mine"})
        run_setup(home)
        assert yaml.safe_load(path.read_text()) == {"api_key": "mine"}
        assert "already exists" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# main() error handling
# ---------------------------------------------------------------------------

class TestMain:

    @pytest.fixture
    def isolated(self, monkeypatch, tmp_path, make_git):
        """Fake git plus an empty home directory."""
        git = make_git(diff=DIFF, root=None)
        monkeypatch.setattr("committer.cli.main.GitRepository", lambda: git)
        monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path)
        monkeypatch.setattr("builtins.input", lambda: "")
        return git

    def test_help(self, capsys):
        assert main(["help"]) == 0
        assert "Commands:" in capsys.readouterr().out

    def test_not_setup_exits_one(self, capsys, isolated):
        assert main([]) == 1
        err = capsys.readouterr().err
        assert "committer setup" in err
        assert isolated.commits == []

    def test_missing_api_key_exits_one(self, capsys, isolated, tmp_path, write_config):
        write_config(tmp_path, {"api_key": None, "model": "m"})
        assert main(["output-message"]) == 1
        assert "API key not configured" in capsys.readouterr().err

    def test_nothing_staged_exits_zero(self, capsys, isolated):
        isolated.diff = ""
        assert main([]) == 0
        assert NOTHING_STAGED in capsys.readouterr().out

    def test_git_error_exits_one(self, capsys, monkeypatch, isolated):
        def fail():
            raise GitError("Git command failed: git diff --staged\nfatal: not a git repository")

        monkeypatch.setattr(isolated, "staged_diff", fail)
        assert main([]) == 1
        assert "not a git repository" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# GitRepository
# ---------------------------------------------------------------------------

class RunRecorder(list):
    """Records subprocess.run args and answers from a queue of results."""

    def __init__(self):
        super().__init__()
        self.results = []

    def __call__(self, args, **kwargs):
        self.append(args)
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


class TestGitRepository:

    @pytest.fixture
    def calls(self, monkeypatch):
        recorder = RunRecorder()
        monkeypatch.setattr("committer.git.repository.subprocess.run", recorder)
        return recorder

    def _completed(self, args, stdout="", returncode=0):
        return subprocess.CompletedProcess(args, returncode, stdout=stdout, stderr="")

    def test_staged_diff(self, calls):
        calls.results.append(self._completed([], stdout=DIFF))
        assert GitRepository().staged_diff() == DIFF
        assert calls[0] == ["git", "diff", "--staged"]

    def test_staged_diff_failure_carries_stderr(self, calls):
        calls.results.append(subprocess.CalledProcessError(
            128, ["git", "diff", "--staged"], stderr="fatal: not a git repository"))
        with pytest.raises(GitError) as exc:
            GitRepository().staged_diff()
        assert exc.value.kind is ErrorKind.GIT
        assert exc.value.stderr == "fatal: not a git repository"
        assert "not a git repository" in str(exc.value)

    def test_git_missing(self, calls):
        calls.results.append(FileNotFoundError())
        with pytest.raises(GitError):
            GitRepository().staged_diff()

    def test_repo_root(self, calls, tmp_path):
        calls.results.append(self._completed([], stdout=f"{tmp_path}\n"))
        assert GitRepository().repo_root() == tmp_path

    def test_repo_root_outside_repository(self, calls):
        calls.results.append(subprocess.CalledProcessError(128, ["git"], stderr="fatal"))
        assert GitRepository().repo_root() is None

    def test_commit_with_body(self, calls):
        calls.results.append(self._completed([]))
        GitRepository().commit("feat: add x", "Because y")
        assert calls[0] == ["git", "commit", "-m", "feat: add x", "-m", "Because y", "-e"]

    def test_commit_without_body(self, calls):
        calls.results.append(self._completed([]))
        GitRepository().commit("feat: add x")
        assert calls[0] == ["git", "commit", "-m", "feat: add x", "-e"]

    def test_commit_failure(self, calls):
        calls.results.append(self._completed([], returncode=1))
        with pytest.raises(GitError):
            GitRepository().commit("feat: add x")


# ---------------------------------------------------------------------------
# prepare-commit-msg hook
# ---------------------------------------------------------------------------

class TestInstallHook:

    @pytest.fixture
    def git_dir(self, tmp_path):
        (tmp_path / ".git" / "hooks").mkdir(parents=True)
        return tmp_path

    def test_installs_executable_hook(self, git_dir):
        path = install_hook(git_dir, git_dir)
        assert path == git_dir / HOOK_RELATIVE_PATH
        assert path.read_text() == HOOK_SCRIPT
        assert os.access(path, os.X_OK)

    def test_refuses_existing_hook(self, git_dir):
        (git_dir / HOOK_RELATIVE_PATH).write_text("#!/bin/sh\n")
        with pytest.raises(HookInstallError, match="already exists"):
            install_hook(git_dir, git_dir)

    def test_requires_repo_root(self, git_dir):
        sub = git_dir / "sub"
        sub.mkdir()
        with pytest.raises(HookInstallError, match="root of your git repository"):
            install_hook(sub, git_dir)

    def test_requires_repository(self, tmp_path):
        with pytest.raises(HookInstallError):
            install_hook(tmp_path, None)

    def test_requires_git_directory(self, tmp_path):
        with pytest.raises(HookInstallError, match="not a git repository"):
            install_hook(tmp_path, tmp_path)

    def test_command(self, capsys, git_dir, make_git):
        assert run_setup_git_hook(make_git(root=git_dir), cwd=git_dir) == 0
        assert "successfully installed" in capsys.readouterr().out
        assert (git_dir / HOOK_RELATIVE_PATH).exists()
