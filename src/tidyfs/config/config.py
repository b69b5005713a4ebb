"""Configuration management for tidyfs."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from tidyfs.config.file_ops import write_text_file
from tidyfs.config.paths import default_config_path
from tidyfs.features.naming.domain.strategies import DEFAULT_NAMING_PATTERN
from tidyfs.features.tree.domain.hidden import DEFAULT_IGNORED_NAMES

logger = logging.getLogger(__name__)


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion."""
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path
    log_file: Path | None = _path_field()

    # Skip dotfiles and ignored names when deciding whether a directory is empty
    ignore_hidden: bool = True
    ignored_names: list[str] = field(default_factory=lambda: list(DEFAULT_IGNORED_NAMES))

    # Collision-safe renaming
    naming_pattern: str = DEFAULT_NAMING_PATTERN
    max_rename_attempts: int = 0

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def save(self, target: Path | None = None) -> Path:
        """Save configuration to ``target`` (the default config path if omitted)."""

        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        destination = target or default_config_path()
        try:
            write_text_file(destination, self._render_toml(config_dict))
            logger.info("Configuration saved to %s", destination)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return destination

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# tidyfs Configuration File")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/tidyfs.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Treat hidden entries as absent when looking for empty directories")
        lines.append(f"ignore_hidden = {self._format_toml_value(config['ignore_hidden'])}")
        lines.append("")

        lines.append("# Extra file names treated as hidden (matched case-insensitively)")
        lines.append(f"ignored_names = {self._format_toml_value(config['ignored_names'])}")
        lines.append("")

        lines.append("# Pattern used to rename colliding files; needs {stem} and {attempt}")
        lines.append('# Example: naming_pattern = "{stem} ({attempt})"')
        lines.append(f"naming_pattern = {self._format_toml_value(config['naming_pattern'])}")
        lines.append("")

        lines.append("# Give up after this many rename attempts (0 = never give up)")
        lines.append(
            f"max_rename_attempts = {self._format_toml_value(config['max_rename_attempts'])}"
        )
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        if isinstance(value, list):
            return "[" + ", ".join(self._format_toml_value(item) for item in value) + "]"
        return str(value)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file, falling back to defaults when missing.

        The result is cached; later calls return the same instance until
        ``reset`` is called.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = config_file or default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
                instance = cls(**{k: v for k, v in config_dict.items() if k in known})
                logger.debug("Configuration loaded from %s", config_file)
            else:
                instance = cls()
                logger.debug("No configuration at %s; using defaults", config_file)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        cls._instance = instance
        cls._loaded_from = config_file
        return instance

    @classmethod
    def reset(cls) -> None:
        """Drop the cached instance so the next ``load`` re-reads the file."""

        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config"]
