"""Configuration management for navlist.

Supports TOML configuration format with auto-discovery.
"""

import logging
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path

from navlist.core.types import DEFAULT_STATE, Role

CONFIG_FILENAME = "navlist.toml"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class NavigationConfig:
    """Navigation data configuration."""

    data_file: Path | None = None
    default_state: str = DEFAULT_STATE


@dataclass
class AccessConfig:
    """Access control configuration."""

    default_role: Role = Role.NONE


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"

    def apply(self) -> None:
        """Configure root logging at this level."""
        logging.basicConfig(
            level=getattr(logging, self.level),
            format="%(levelname)s %(name)s: %(message)s",
        )


@dataclass
class Config:
    """Application configuration."""

    navigation: NavigationConfig
    access: AccessConfig
    logging: LoggingConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for navlist.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents."""
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> "Config":
        return cls(
            navigation=NavigationConfig(),
            access=AccessConfig(),
            logging=LoggingConfig(),
        )

    @classmethod
    def _load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        config_dir = path.parent

        return cls(
            navigation=cls._parse_navigation(data.get("navigation"), config_dir),
            access=cls._parse_access(data.get("access")),
            logging=cls._parse_logging(data.get("logging")),
            config_path=path,
        )

    @classmethod
    def _parse_navigation(cls, data: object, config_dir: Path) -> NavigationConfig:
        """Parse navigation configuration section.

        Args:
            data: Raw navigation section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            NavigationConfig instance
        """
        if data is None:
            return NavigationConfig()

        if not isinstance(data, dict):
            raise ValueError("navigation section must be a dictionary")

        data_file = data.get("data_file")
        if data_file is not None and not isinstance(data_file, str):
            raise ValueError("navigation.data_file must be a string")

        default_state = data.get("default_state", DEFAULT_STATE)
        if not isinstance(default_state, str) or not default_state:
            raise ValueError("navigation.default_state must be a non-empty string")

        return NavigationConfig(
            data_file=config_dir / data_file if data_file is not None else None,
            default_state=default_state,
        )

    @classmethod
    def _parse_access(cls, data: object) -> AccessConfig:
        if data is None:
            return AccessConfig()

        if not isinstance(data, dict):
            raise ValueError("access section must be a dictionary")

        default_role = data.get("default_role", Role.NONE.value)
        try:
            role = Role(default_role)
        except ValueError:
            choices = ", ".join(member.value for member in Role)
            raise ValueError(f"access.default_role must be one of {choices}") from None

        return AccessConfig(default_role=role)

    @classmethod
    def _parse_logging(cls, data: object) -> LoggingConfig:
        if data is None:
            return LoggingConfig()

        if not isinstance(data, dict):
            raise ValueError("logging section must be a dictionary")

        level = data.get("level", "WARNING")
        if not isinstance(level, str) or level.upper() not in _LOG_LEVELS:
            raise ValueError(f"logging.level must be one of {', '.join(_LOG_LEVELS)}")

        return LoggingConfig(level=level.upper())

    def with_overrides(
        self,
        *,
        data_file: Path | None = None,
        default_state: str | None = None,
        default_role: Role | None = None,
        verbose: bool = False,
    ) -> "Config":
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            data_file: Override navigation.data_file
            default_state: Override navigation.default_state
            default_role: Override access.default_role
            verbose: Force logging.level to DEBUG

        Returns:
            New Config instance with overrides applied
        """
        navigation = self.navigation
        if data_file is not None or default_state is not None:
            navigation = replace(
                self.navigation,
                data_file=data_file if data_file is not None else self.navigation.data_file,
                default_state=(
                    default_state
                    if default_state is not None
                    else self.navigation.default_state
                ),
            )

        access = self.access
        if default_role is not None:
            access = replace(self.access, default_role=default_role)

        logging_config = self.logging
        if verbose:
            logging_config = replace(self.logging, level="DEBUG")

        return replace(
            self,
            navigation=navigation,
            access=access,
            logging=logging_config,
        )
