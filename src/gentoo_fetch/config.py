"""
Configuration management for Gentoo Fetch.

Supports configuration via YAML files, environment variables, and programmatic access.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG_PATHS = [
    Path("/etc/gentoo-fetch/config.yaml"),
    Path.home() / ".config" / "gentoo-fetch" / "config.yaml",
    Path("gentoo-fetch.yaml"),
]

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

CONFIG_HEADER = """# Gentoo Fetch Configuration
#
# Every key is optional. GENTOO_FETCH_* environment variables override
# values from this file. command_timeout is in seconds, 0 waits forever.
# package_db_path is a VDB database with one directory per installed
# package version. log_level is one of DEBUG, INFO, WARNING, ERROR, CRITICAL.

"""


class ConfigError(ValueError):
    """Raised when a configuration value is invalid."""


@dataclass
class Config:
    """
    Configuration container for Gentoo Fetch.

    Priority (highest to lowest):
    1. Environment variables (prefixed with GENTOO_FETCH_)
    2. Config file values
    3. Default values
    """

    # Sources
    os_release_path: str = "/etc/os-release"
    uptime_path: str = "/proc/uptime"
    cpuinfo_path: str = "/proc/cpuinfo"
    meminfo_path: str = "/proc/meminfo"
    package_db_path: str = "/var/db/pkg"
    profile_link: str = "/etc/portage/make.profile"

    # Commands
    command_timeout: float = 30.0

    # Display
    show_gcc: bool = False
    color: bool = True

    # Logging
    log_level: str = "WARNING"

    @classmethod
    def from_file(cls, path: str | Path) -> Config:
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ConfigError(f"{path}: expected a mapping at the top level")

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Create config from a dictionary."""
        # Sections are only for readability; flatten them
        flat = {}
        for key, value in data.items():
            if isinstance(value, dict):
                for subkey, subvalue in value.items():
                    flat[subkey] = subvalue
            else:
                flat[key] = value

        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in flat.items() if k in known_fields}

        return cls(**filtered)

    @classmethod
    def load(cls, config_path: str | Path | None = None) -> Config:
        """
        Load configuration with full resolution order.

        Args:
            config_path: Explicit path to config file. If None, searches
                        default locations.

        Returns:
            Fully resolved and validated Config instance.

        Raises:
            ConfigError: If a value is invalid.
            yaml.YAMLError: If the config file is not valid YAML.
        """
        if config_path:
            candidates = [Path(config_path)]
        else:
            candidates = DEFAULT_CONFIG_PATHS

        config = cls()
        for path in candidates:
            if path.exists():
                config = cls.from_file(path)
                break

        config._apply_env_overrides()
        config.validate()

        return config

    def _apply_env_overrides(self) -> None:
        """Apply environment variable overrides."""
        env_mappings = {
            "GENTOO_FETCH_OS_RELEASE": "os_release_path",
            "GENTOO_FETCH_UPTIME": "uptime_path",
            "GENTOO_FETCH_CPUINFO": "cpuinfo_path",
            "GENTOO_FETCH_MEMINFO": "meminfo_path",
            "GENTOO_FETCH_PACKAGE_DB": "package_db_path",
            "GENTOO_FETCH_PROFILE_LINK": "profile_link",
            "GENTOO_FETCH_COMMAND_TIMEOUT": "command_timeout",
            "GENTOO_FETCH_SHOW_GCC": "show_gcc",
            "GENTOO_FETCH_COLOR": "color",
            "GENTOO_FETCH_LOG_LEVEL": "log_level",
        }

        for env_var, attr in env_mappings.items():
            value = os.environ.get(env_var)
            if value is not None:
                current = getattr(self, attr)
                if isinstance(current, bool):
                    setattr(self, attr, value.lower() in ("true", "1", "yes"))
                elif isinstance(current, (int, float)):
                    try:
                        setattr(self, attr, float(value))
                    except ValueError:
                        raise ConfigError(f"{env_var} must be a number, got {value!r}") from None
                else:
                    setattr(self, attr, value)

    def validate(self) -> None:
        """
        Check value types and ranges.

        Raises:
            ConfigError: On the first invalid value.
        """
        timeout = self.command_timeout
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout < 0:
            raise ConfigError(
                f"command_timeout must be a non-negative number, got {timeout!r}"
            )

        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            )

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "sources": {
                "os_release_path": self.os_release_path,
                "uptime_path": self.uptime_path,
                "cpuinfo_path": self.cpuinfo_path,
                "meminfo_path": self.meminfo_path,
                "package_db_path": self.package_db_path,
                "profile_link": self.profile_link,
            },
            "commands": {
                "command_timeout": self.command_timeout,
            },
            "display": {
                "show_gcc": self.show_gcc,
                "color": self.color,
            },
            "logging": {
                "log_level": self.log_level,
            },
        }

    def save(self, path: str | Path) -> None:
        """Save configuration to a commented YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            f.write(CONFIG_HEADER)
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)
