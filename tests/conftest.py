"""Shared fixtures: isolated config dirs and fake git/model collaborators."""

import pytest
import yaml

from committer.config import ConfigResolver, CONFIG_DIR_NAME, CONFIG_FILE_NAME


class FakeGit:
    """Stands in for GitRepository without touching a real repo."""

    def __init__(self, diff="", root=None):
        self.diff = diff
        self.root = root
        self.commits = []

    def staged_diff(self):
        return self.diff

    def repo_root(self):
        return self.root

    def commit(self, summary, body=None):
        self.commits.append((summary, body))


class FakeClient:
    """Returns a canned reply and records every prompt it receives."""

    def __init__(self, text):
        self.text = text
        self.prompts = []

    def send(self, prompt, timeout=None):
        self.prompts.append(prompt)
        return {"type": "message", "content": [{"type": "text", "text": self.text}]}


def reply(text):
    return {"type": "message", "content": [{"type": "text", "text": text}]}


@pytest.fixture
def home(tmp_path):
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def repo(tmp_path):
    path = tmp_path / "repo"
    path.mkdir()
    return path


@pytest.fixture
def write_config():
    """Return a function that writes <base>/.committer/config.yml."""
    def _write(base, data=None, raw=None):
        config_dir = base / CONFIG_DIR_NAME
        config_dir.mkdir(exist_ok=True)
        path = config_dir / CONFIG_FILE_NAME
        path.write_text(raw if raw is not None else yaml.safe_dump(data))
        return path
    return _write


@pytest.fixture
def resolver(home, repo):
    return ConfigResolver(home=home, find_repo_root=lambda: repo)


@pytest.fixture
def make_git():
    return FakeGit


@pytest.fixture
def make_client():
    return FakeClient
