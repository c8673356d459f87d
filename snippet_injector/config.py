"""
Injection Run Configuration

Where the codesnippet definitions live, which files receive them, and the
limits applied while injecting. Loaded from YAML or built from CLI flags.

Example YAML:
    codesnippet_root: src/samples/java
    codesnippet_glob: "**/*.java"
    sources_root: src/main/java
    sources_glob: "**/*.java"
    include_sources: true
    readme_path: README.md
    include_readme: true
    max_line_length: 120
    enforce_max_line_length: false
"""

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional

import yaml

import config as settings
from utils.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_GLOB = "**/*.java"
DEFAULT_MAX_LINE_LENGTH = 120

_PATH_FIELDS = ("codesnippet_root", "sources_root", "readme_path")


@dataclass
class InjectionConfig:
    """Settings for one injection or verification run."""

    codesnippet_root: Optional[Path] = settings.CODESNIPPET_ROOT
    codesnippet_glob: str = DEFAULT_GLOB
    sources_root: Optional[Path] = settings.SOURCES_ROOT
    sources_glob: str = DEFAULT_GLOB
    include_sources: bool = True
    readme_path: Optional[Path] = settings.README_PATH
    include_readme: bool = True
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH
    enforce_max_line_length: bool = False

    def __post_init__(self) -> None:
        for name in _PATH_FIELDS:
            value = getattr(self, name)
            if value is not None and not isinstance(value, Path):
                setattr(self, name, Path(value))
        if self.max_line_length <= 0:
            raise ConfigError(f"max_line_length must be positive, got {self.max_line_length}")

    @classmethod
    def from_yaml(cls, path: Path) -> "InjectionConfig":
        """Load a run configuration from a YAML file.

        Relative paths are resolved against the YAML file's directory.
        """
        path = Path(path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Expected a mapping at the top of {path}")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config key(s) in {path}: {', '.join(unknown)}")

        base_dir = path.parent
        for name in _PATH_FIELDS:
            if data.get(name) is not None:
                value = Path(data[name]).expanduser()
                data[name] = value if value.is_absolute() else (base_dir / value).resolve()

        logger.debug(f"Loaded injection config from {path}")
        return cls(**data)

    def with_overrides(self, **overrides: Any) -> "InjectionConfig":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)
