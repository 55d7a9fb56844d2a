"""Configuration Management Package"""

import json
import os
import sys
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from svnmerge import DEFAULT_LOG_LIMIT

# Environment variable -> Config field
ENV_OVERRIDES = {
    "REPO_BASE": "repo_base",
    "BRANCH_PATH": "branch_path",
    "LOCAL_REPO_PATH": "local_repo_path",
    "SVNMERGE_LOG_LIMIT": "log_limit",
}


@dataclass
class Config:
    """Repository locations and tool settings.

    Paths and URLs are joined by plain concatenation, so ``branch_path`` is
    expected to carry its own leading slash (e.g. ``/branches/feature-x``).
    """
    repo_base: str = ""
    branch_path: str = ""
    local_repo_path: str = ""
    log_limit: int = DEFAULT_LOG_LIMIT

    @property
    def trunk_url(self) -> str:
        return self.repo_base + "/trunk"

    @property
    def branch_url(self) -> str:
        return self.repo_base + self.branch_path

    @property
    def local_trunk_path(self) -> str:
        return self.local_repo_path + "/trunk"

    @property
    def local_branch_path(self) -> str:
        return self.local_repo_path + self.branch_path

    @property
    def branch_label(self) -> str:
        """Branch name as it appears in commit messages."""
        return self.branch_path

    def to_dict(self) -> dict:
        return asdict(self)

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults after warning.
        """
        warnings = []
        defaults = Config()

        for name in ("repo_base", "branch_path", "local_repo_path"):
            if not isinstance(getattr(self, name), str):
                warnings.append(f"Invalid {name} '{getattr(self, name)}', using '{getattr(defaults, name)}'")
                setattr(self, name, getattr(defaults, name))

        if isinstance(self.log_limit, str) and self.log_limit.strip().isdigit():
            self.log_limit = int(self.log_limit)
        if not isinstance(self.log_limit, int) or isinstance(self.log_limit, bool) or self.log_limit <= 0:
            warnings.append(f"Invalid log_limit '{self.log_limit}', using {defaults.log_limit}")
            self.log_limit = defaults.log_limit

        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


class ConfigManager:
    """Resolves configuration from file, .env and environment."""

    CONFIG_FILENAME = ".svnmergerc"
    DOTENV_FILENAME = ".env"

    def __init__(self):
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None
        self._env_overrides: dict[str, str] = {}

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        config = self._load_file_config()
        self._apply_env(config)
        self._config = config
        return self._config

    def _load_file_config(self) -> Config:
        local_path = Path.cwd() / self.CONFIG_FILENAME
        if local_path.exists():
            self._config_path = local_path
            return self._load_from_file(local_path)

        home_path = Path.home() / self.CONFIG_FILENAME
        if home_path.exists():
            self._config_path = home_path
            return self._load_from_file(home_path)

        return Config()

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("expected a JSON object")
            return Config.from_dict(data)
        except (json.JSONDecodeError, ValueError, IOError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()

    def _apply_env(self, config: Config) -> None:
        """Overlay .env and process environment on top of file settings."""
        dotenv_path = Path.cwd() / self.DOTENV_FILENAME
        if dotenv_path.exists():
            # Real environment variables win over .env entries
            load_dotenv(dotenv_path=dotenv_path, override=False)

        self._env_overrides = {}
        for env_name, field_name in ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value:
                self._env_overrides[env_name] = value
                setattr(config, field_name, value)

        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)

    def save(self, config: Config, global_config: bool = True) -> Path:
        path = Path.home() / self.CONFIG_FILENAME if global_config else Path.cwd() / self.CONFIG_FILENAME
        with open(path, 'w') as f:
            json.dump(config.to_dict(), f, indent=2)
        return path

    def get_config_path(self) -> Optional[Path]:
        return self._config_path

    def get_env_overrides(self) -> dict[str, str]:
        return dict(self._env_overrides)


_manager = ConfigManager()


def load_config() -> Config:
    return _manager.load()


def save_config(config: Config, global_config: bool = True) -> Path:
    return _manager.save(config, global_config)


def get_config_path() -> Optional[Path]:
    return _manager.get_config_path()


def get_env_overrides() -> dict[str, str]:
    return _manager.get_env_overrides()


__all__ = [
    "Config",
    "ConfigManager",
    "ENV_OVERRIDES",
    "load_config",
    "save_config",
    "get_config_path",
    "get_env_overrides",
]
