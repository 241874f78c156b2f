"""Project configuration for sqlblocks."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

CONFIG_DIR = ".sqlblocks"
CONFIG_FILE = "config.yaml"
DEFAULT_SQL_DIR = "sql_files"


@dataclass
class ParserConfig:
    """Settings controlling where SQL files are found and how they are read."""

    sql_dir: str = DEFAULT_SQL_DIR
    pattern: str = "*.sql"
    recursive: bool = True
    encoding: str = "utf-8"
    workers: int = 1  # threads used to scan sources before tracking

    def __post_init__(self) -> None:
        """Validate numeric settings."""
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "sql_dir": self.sql_dir,
            "pattern": self.pattern,
            "recursive": self.recursive,
            "encoding": self.encoding,
            "workers": self.workers,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ParserConfig:
        """Create config from dictionary, ignoring unknown keys."""
        return cls(
            sql_dir=str(data.get("sql_dir", DEFAULT_SQL_DIR)),
            pattern=str(data.get("pattern", "*.sql")),
            recursive=bool(data.get("recursive", True)),
            encoding=str(data.get("encoding", "utf-8")),
            workers=int(data.get("workers", 1)),
        )


def config_path(project_root: Path | str) -> Path:
    """Location of the config file for a project."""
    return Path(project_root) / CONFIG_DIR / CONFIG_FILE


def load_config(project_root: Path | str = ".") -> ParserConfig:
    """Load config from .sqlblocks/config.yaml.

    A missing file gives the defaults. An unreadable or malformed file
    is logged and also gives the defaults.

    Args:
        project_root: Directory containing the .sqlblocks folder.

    Returns:
        Loaded ParserConfig.
    """
    path = config_path(project_root)
    if not path.exists():
        return ParserConfig()

    try:
        data = yaml.safe_load(path.read_text()) or {}
        if not isinstance(data, dict):
            raise ValueError("top level of config must be a mapping")
        return ParserConfig.from_dict(data.get("parser", data) or {})
    except (yaml.YAMLError, OSError, ValueError, TypeError) as e:
        logger.warning("Could not load config from %s: %s", path, e)
        return ParserConfig()


def save_config(config: ParserConfig, project_root: Path | str = ".") -> Path:
    """Write config to .sqlblocks/config.yaml.

    Returns:
        Path of the written file.
    """
    path = config_path(project_root)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.dump({"parser": config.to_dict()}, default_flow_style=False, sort_keys=False))
    return path
