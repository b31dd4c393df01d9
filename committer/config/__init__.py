"""
Config Package

Resolves committer settings from two YAML files:

1. <repo root>/.committer/config.yml (project-specific, wins)
2. ~/.committer/config.yml (global default)

Keys present only in the home file survive the merge. Formatting rules are
looked up separately (repo file, home file, bundled default) and the first
non-empty one is used.

Config format (YAML):
    api_key: your_api_key_here
    model: claude-3-7-sonnet-20250219
    scopes:
      - api
      - ui
"""

import logging
from dataclasses import dataclass, field, asdict
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

import yaml

from committer import COMMIT_TYPES
from committer.errors import FormatError, NotSetupError

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".committer"
CONFIG_FILE_NAME = "config.yml"
FORMATTING_RULES_FILE_NAME = "formatting_rules.txt"
DEFAULT_MODEL = "claude-3-7-sonnet-20250219"

_TYPES_LIST = "\n".join(f"- {name}: {desc}" for name, desc in COMMIT_TYPES.items())

DEFAULT_FORMATTING_RULES = f"""\
Follow the Conventional Commits format:

Format: <type>(<optional scope>): <description>

Types:
{_TYPES_LIST}

Guidelines:
- Keep the summary under 70 characters
- Use imperative, present tense (e.g., "add" not "added" or "adds")
- Do not end the summary with a period
- Be concise but descriptive in the summary"""


class ConfigSource(Enum):
    HOME = "home"
    REPO_ROOT = "repo_root"


@dataclass(frozen=True)
class ResolvedConfig:
    """Settings needed to build a prompt and call the model."""
    api_key: str = ""
    model: str = ""
    scopes: tuple[str, ...] = ()
    formatting_rules: str = DEFAULT_FORMATTING_RULES

    def to_dict(self) -> dict:
        data = asdict(self)
        data["scopes"] = list(self.scopes)
        return data

    @classmethod
    def from_dict(cls, data: dict, formatting_rules: str = DEFAULT_FORMATTING_RULES) -> 'ResolvedConfig':
        return cls(
            api_key=str(data.get("api_key") or ""),
            model=str(data.get("model") or ""),
            scopes=_coerce_scopes(data.get("scopes")),
            formatting_rules=formatting_rules,
        )


def _coerce_scopes(value) -> tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise FormatError(f"'scopes' must be a list, got {type(value).__name__}")
    return tuple(str(scope) for scope in value)


def _default_repo_root() -> Optional[Path]:
    from committer.git import GitRepository
    return GitRepository().repo_root()


@dataclass
class ConfigResolver:
    """Loads and merges configuration. The result is cached until reload()."""
    home: Optional[Path] = None
    find_repo_root: Callable[[], Optional[Path]] = _default_repo_root
    _config: Optional[ResolvedConfig] = field(default=None, init=False, repr=False)

    def _home_dir(self) -> Path:
        return (self.home or Path.home()) / CONFIG_DIR_NAME

    def _repo_dir(self) -> Optional[Path]:
        root = self.find_repo_root()
        if not root:
            return None
        return Path(root) / CONFIG_DIR_NAME

    def config_path(self, source: ConfigSource) -> Optional[Path]:
        """Location of the config file for a source (None if there is no repo)."""
        if source is ConfigSource.HOME:
            return self._home_dir() / CONFIG_FILE_NAME
        repo_dir = self._repo_dir()
        return repo_dir / CONFIG_FILE_NAME if repo_dir else None

    def _load_from_file(self, path: Optional[Path]) -> dict:
        if path is None or not path.exists():
            return {}
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (yaml.YAMLError, UnicodeDecodeError, OSError) as e:
            raise FormatError(f"Could not parse {path}: {e}")
        if not isinstance(data, dict):
            raise FormatError(f"Config file must be a YAML hash: {path}")
        logger.debug("Loaded config from %s (keys: %s)", path, ", ".join(map(str, data)))
        return data

    def load_settings(self) -> dict:
        """Merge home and repo settings, repo keys winning."""
        home_settings = self._load_from_file(self.config_path(ConfigSource.HOME))
        repo_settings = self._load_from_file(self.config_path(ConfigSource.REPO_ROOT))
        if not home_settings and not repo_settings:
            raise NotSetupError()
        return {**home_settings, **repo_settings}

    def resolve_formatting_rules(self) -> str:
        """First non-empty rules text from repo file, home file, bundled default."""
        strategies = [
            lambda: self._read_rules(self._repo_dir()),
            lambda: self._read_rules(self._home_dir()),
        ]
        for strategy in strategies:
            rules = strategy()
            if rules:
                return rules
        logger.debug("Using bundled formatting rules")
        return DEFAULT_FORMATTING_RULES

    def _read_rules(self, directory: Optional[Path]) -> str:
        if directory is None:
            return ""
        path = directory / FORMATTING_RULES_FILE_NAME
        if not path.is_file():
            return ""
        try:
            rules = path.read_text(encoding="utf-8").strip()
        except (UnicodeDecodeError, OSError) as e:
            raise FormatError(f"Could not read {path}: {e}")
        if rules:
            logger.debug("Using formatting rules from %s", path)
        return rules

    def resolve(self) -> ResolvedConfig:
        """Resolve once and cache for the rest of the process."""
        if self._config is not None:
            return self._config
        settings = self.load_settings()
        self._config = ResolvedConfig.from_dict(settings, self.resolve_formatting_rules())
        return self._config

    def reload(self) -> ResolvedConfig:
        """Drop the cached config and resolve again from disk."""
        self._config = None
        return self.resolve()


__all__ = [
    "ConfigResolver",
    "ConfigSource",
    "ResolvedConfig",
    "DEFAULT_FORMATTING_RULES",
    "DEFAULT_MODEL",
    "CONFIG_DIR_NAME",
    "CONFIG_FILE_NAME",
    "FORMATTING_RULES_FILE_NAME",
]
