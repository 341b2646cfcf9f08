"""
System information collector.

Collects OS identity, hostname, kernel release, uptime, shell, and terminal.
"""

from __future__ import annotations

import os
import platform
import sys
import time

import psutil

from gentoo_fetch.collectors.base import BaseCollector

FALLBACK_OS_NAME = "Gentoo"
PRETTY_NAME_PATTERN = r'PRETTY_NAME="(.+?)"'


def format_uptime(seconds: int) -> str:
    """
    Format an uptime in seconds as "Xd Yh Zm".

    Days are shown only when non-zero, hours when days or hours are
    non-zero, minutes always.
    """
    days, seconds = divmod(seconds, 86400)
    hours, seconds = divmod(seconds, 3600)
    minutes = seconds // 60

    parts = []
    if days > 0:
        parts.append(f"{days}d")
    if days > 0 or hours > 0:
        parts.append(f"{hours}h")
    parts.append(f"{minutes}m")
    return " ".join(parts)


class SystemCollector(BaseCollector):
    """Collects general system and OS information."""

    name = "system"
    description = "Operating system, host, kernel, uptime, shell and terminal"
    fields = ("os", "host", "kernel", "uptime", "shell", "terminal")

    def collect(self) -> dict[str, str]:
        """Collect system information."""
        host, kernel = self._get_uname_info()
        return {
            "os": self._get_os_name(),
            "host": host,
            "kernel": kernel,
            "uptime": self._get_uptime(),
            "shell": self._get_shell(),
            "terminal": self._get_terminal(),
        }

    def _get_os_name(self) -> str:
        """Get the distribution's pretty name."""
        name = self.search_file(self.config.os_release_path, PRETTY_NAME_PATTERN)
        return name or FALLBACK_OS_NAME

    def _get_uname_info(self) -> tuple[str, str]:
        """Get node name and kernel release."""
        try:
            uname = platform.uname()
        except OSError as e:
            self.logger.debug(f"uname failed: {e}")
            return "", ""
        return uname.node, uname.release

    def _get_uptime(self) -> str:
        """Get system uptime as a human-readable string."""
        uptime_seconds = self._read_uptime_seconds()
        if uptime_seconds is None:
            return "N/A"
        return format_uptime(uptime_seconds)

    def _read_uptime_seconds(self) -> int | None:
        """
        Get whole seconds since boot.

        Prefers the monotonic counter in /proc/uptime; falls back to the
        wall-clock difference from psutil's boot time.
        """
        content = self.read_file(self.config.uptime_path)
        try:
            return int(float(content.split()[0]))
        except (IndexError, ValueError):
            self.logger.debug(f"Could not parse {self.config.uptime_path}, using boot time")

        try:
            boot_time = psutil.boot_time()
        except (OSError, psutil.Error) as e:
            self.logger.debug(f"Could not determine boot time: {e}")
            return None
        return max(int(time.time() - boot_time), 0)

    def _get_shell(self) -> str:
        return os.environ.get("SHELL", "N/A")

    def _get_terminal(self) -> str:
        """Get the device path of the terminal attached to stdin."""
        try:
            fd = sys.stdin.fileno()
            if not os.isatty(fd):
                return "N/A"
            return os.ttyname(fd).rstrip()
        except (OSError, ValueError, AttributeError) as e:
            # stdin may be closed or replaced by an object without a descriptor
            self.logger.debug(f"Could not resolve terminal: {e}")
            return "N/A"
