"""
Base collector class that all collectors inherit from.
"""

from __future__ import annotations

import logging
import re
import subprocess
from abc import ABC, abstractmethod

from gentoo_fetch.config import Config

logger = logging.getLogger(__name__)


class CollectionError(RuntimeError):
    """Raised when collection cannot continue, e.g. a command cannot be spawned."""


class BaseCollector(ABC):
    """
    Abstract base class for all data collectors.

    Subclasses must implement the `collect` method and list the record
    fields they populate in `fields`.
    """

    name: str = "base"
    description: str = "Base collector"
    fields: tuple[str, ...] = ()

    def __init__(self, config: Config | None = None):
        self.config = config or Config()
        self.logger = logging.getLogger(f"{__name__}.{self.name}")

    @abstractmethod
    def collect(self) -> dict[str, str]:
        """
        Collect and return data.

        Returns:
            Mapping of record field name to display string.
        """
        pass

    def run_command(
        self,
        cmd: list[str],
        timeout: float | None = None,
    ) -> tuple[str, str, int]:
        """
        Run a command and return its output.

        Args:
            cmd: Command and arguments as list.
            timeout: Timeout in seconds. Defaults to the configured
                command timeout; 0 or None disables it.

        Returns:
            Tuple of (stdout, stderr, returncode).

        Raises:
            CollectionError: If the command could not be started.
        """
        if timeout is None:
            timeout = self.config.command_timeout
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                errors="replace",
                timeout=timeout or None,
                check=False,
            )
            return result.stdout, result.stderr, result.returncode
        except subprocess.TimeoutExpired:
            self.logger.warning(f"Command timed out: {' '.join(cmd)}")
            return "", "Command timed out", -1
        except OSError as e:
            raise CollectionError(f"failed to run: {' '.join(cmd)}") from e

    def read_file(self, path: str, default: str = "") -> str:
        """
        Read a file and return its contents.

        Args:
            path: Path to the file.
            default: Default value if file cannot be read.

        Returns:
            File contents or default value. Undecodable bytes are
            replaced with U+FFFD.
        """
        try:
            with open(path, encoding="utf-8", errors="replace") as f:
                return f.read()
        except OSError as e:
            self.logger.debug(f"Could not read {path}: {e}")
            return default

    def search_file(self, path: str, pattern: str) -> str | None:
        """Return the first capture group of `pattern` in a file, or None."""
        content = self.read_file(path)
        match = re.search(pattern, content)
        if match:
            return match.group(1)
        return None

    def parse_key_value_file(
        self,
        path: str,
        separator: str = "=",
        strip_quotes: bool = True,
    ) -> dict[str, str]:
        """
        Parse a key=value style file.

        Args:
            path: Path to the file.
            separator: Key-value separator character.
            strip_quotes: Whether to strip surrounding quotes from values.

        Returns:
            Dictionary of key-value pairs. The first occurrence of a key wins.
        """
        result: dict[str, str] = {}
        for line in self.read_file(path).splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if separator in line:
                key, _, value = line.partition(separator)
                key = key.strip()
                value = value.strip()
                if strip_quotes and len(value) >= 2:
                    if (value.startswith('"') and value.endswith('"')) or (
                        value.startswith("'") and value.endswith("'")
                    ):
                        value = value[1:-1]
                result.setdefault(key, value)
        return result
