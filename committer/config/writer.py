"""Config Writer - create the default home config file."""

from pathlib import Path
from typing import Optional

import yaml

from committer.config import CONFIG_DIR_NAME, CONFIG_FILE_NAME, DEFAULT_MODEL

DEFAULT_CONFIG = {
    'api_key': None,
    'model': DEFAULT_MODEL,
    'scopes': None,
}

EXAMPLE_CONFIG = """\
---
api_key: your_api_key_here
model: claude-3-7-sonnet-20250219
scopes:
  - feature
  - api
  - ui"""


def home_config_path(home: Optional[Path] = None) -> Path:
    return (home or Path.home()) / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def create_default_config(home: Optional[Path] = None) -> tuple[Path, bool]:
    """
    Write the default config to ~/.committer/config.yml.

    An existing file is left untouched.

    Returns:
        (path, created) - created is False when the file already existed
    """
    path = home_config_path(home)
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.exists():
        return path, False

    with open(path, 'w', encoding='utf-8') as f:
        yaml.safe_dump(DEFAULT_CONFIG, f, default_flow_style=False, sort_keys=False)
    return path, True
