"""Configuration Management Package"""

import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from subchangelog import COMMIT_TYPE_NAMES


@dataclass
class Config:
    """User configuration with sensible defaults."""
    output_name: str = "changelog"
    gitmodules: str = ".gitmodules"
    include_submodules: bool = True
    headers: dict[str, str] = field(default_factory=dict)  # Section header overrides per commit type

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults silently after warning.
        """
        warnings = []
        defaults = Config()

        if not isinstance(self.output_name, str) or not self.output_name.strip():
            warnings.append(f"Invalid output_name '{self.output_name}', using '{defaults.output_name}'")
            self.output_name = defaults.output_name

        if not isinstance(self.gitmodules, str) or not self.gitmodules.strip():
            warnings.append(f"Invalid gitmodules '{self.gitmodules}', using '{defaults.gitmodules}'")
            self.gitmodules = defaults.gitmodules

        if not isinstance(self.include_submodules, bool):
            warnings.append(f"Invalid include_submodules '{self.include_submodules}', using {str(defaults.include_submodules).lower()}")
            self.include_submodules = defaults.include_submodules

        if not isinstance(self.headers, dict):
            warnings.append(f"Invalid headers '{self.headers}', using defaults")
            self.headers = defaults.headers
        else:
            for commit_type in list(self.headers):
                if commit_type not in COMMIT_TYPE_NAMES or not isinstance(self.headers[commit_type], str):
                    warnings.append(f"Ignoring header for unknown commit type '{commit_type}'")
                    del self.headers[commit_type]

        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        # Validate and print warnings to stderr
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


class ConfigManager:
    """Manages loading configuration."""

    CONFIG_FILENAME = ".subchangelogrc"

    def __init__(self):
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        local_path = Path.cwd() / self.CONFIG_FILENAME
        if local_path.exists():
            self._config = self._load_from_file(local_path)
            self._config_path = local_path
            return self._config

        home_path = Path.home() / self.CONFIG_FILENAME
        if home_path.exists():
            self._config = self._load_from_file(home_path)
            self._config_path = home_path
            return self._config

        self._config = Config()
        return self._config

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                print(f"Warning: Could not load {path}: expected a JSON object", file=sys.stderr)
                return Config()
            return Config.from_dict(data)
        except (json.JSONDecodeError, IOError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


_manager = ConfigManager()


def load_config() -> Config:
    return _manager.load()


def get_config_path() -> Optional[Path]:
    return _manager.get_config_path()


__all__ = [
    "Config",
    "ConfigManager",
    "load_config",
    "get_config_path",
]
