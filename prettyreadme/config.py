"""Configuration management for prettyreadme."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .augment import RUST_LANGUAGES
from .errors import ConfigError
from .loader import resolve_project_root

CONFIG_FILENAME = ".prettyreadme.yaml"
CONFIG_ENV = "PRETTY_README_CONFIG"


@dataclass
class Config:
    """Prettyreadme configuration."""

    project_root: Path
    languages: list[str] = field(default_factory=lambda: sorted(RUST_LANGUAGES))

    @classmethod
    def from_file(cls, path: Path) -> "Config":
        """Load configuration from YAML file.

        A relative project_root is taken relative to the config file's directory.
        """
        try:
            with path.open() as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Error reading config file at {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file at {path} must contain a mapping")

        languages = data.get("languages", sorted(RUST_LANGUAGES))
        if not isinstance(languages, list) or not all(isinstance(lang, str) for lang in languages):
            raise ConfigError(f"'languages' in {path} must be a list of strings")

        project_root = data.get("project_root", ".")
        if not isinstance(project_root, str):
            raise ConfigError(f"'project_root' in {path} must be a string")

        return cls(
            project_root=path.parent / project_root,
            languages=[lang.lower() for lang in languages],
        )

    @classmethod
    def default(cls) -> "Config":
        """Create default configuration (root from PRETTY_README_ROOT or cwd)."""
        return cls(project_root=resolve_project_root())

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from default locations."""
        # Check for config file in the working directory
        config_path = Path(CONFIG_FILENAME)
        if config_path.exists():
            return cls.from_file(config_path)

        # Check environment variable
        if env_path := os.getenv(CONFIG_ENV):
            return cls.from_file(Path(env_path))

        return cls.default()
