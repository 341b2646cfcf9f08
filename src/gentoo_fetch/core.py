"""
Core orchestration module for Gentoo Fetch.

Runs the collectors and assembles their output into a single host record.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, fields

from gentoo_fetch.collectors import CollectionError, get_all_collectors
from gentoo_fetch.config import Config

logger = logging.getLogger(__name__)

# Record fields and their display labels, in display order
FIELD_LABELS: tuple[tuple[str, str], ...] = (
    ("os", "OS"),
    ("host", "Host"),
    ("kernel", "Kernel"),
    ("uptime", "Uptime"),
    ("packages", "Packages"),
    ("shell", "Shell"),
    ("terminal", "Terminal"),
    ("cpu", "CPU"),
    ("memory", "Memory"),
    ("portage", "Portage"),
    ("profile", "Profile"),
    ("gcc", "gcc"),
)


@dataclass(frozen=True)
class HostInfoRecord:
    """Collected host facts. Empty strings mean the value is unavailable."""

    os: str = ""
    host: str = ""
    kernel: str = ""
    uptime: str = ""
    packages: str = ""
    shell: str = ""
    terminal: str = ""
    cpu: str = ""
    memory: str = ""
    portage: str = ""
    profile: str = ""
    gcc: str = ""

    def items(self, include_gcc: bool = False) -> list[tuple[str, str]]:
        """Return (label, value) pairs in display order."""
        return [
            (label, getattr(self, name))
            for name, label in FIELD_LABELS
            if include_gcc or name != "gcc"
        ]

    def to_dict(self) -> dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


_RECORD_FIELDS = frozenset(f.name for f in fields(HostInfoRecord))


class FetchCore:
    """
    Main orchestrator for host information collection.

    Runs every registered collector once and builds the host record.
    """

    def __init__(self, config: Config | None = None):
        self.config = config or Config()
        self.collectors = get_all_collectors()

    def collect(self) -> HostInfoRecord:
        """
        Run all collectors and build the host record.

        Returns:
            Fully populated HostInfoRecord.

        Raises:
            CollectionError: If a collector hits a fatal error.
        """
        values: dict[str, str] = {}

        logger.debug(f"Running {len(self.collectors)} collectors")

        for name, collector_cls in self.collectors.items():
            start = time.perf_counter()
            try:
                data = collector_cls(self.config).collect()
            except CollectionError:
                raise
            except Exception as e:
                logger.error(f"Collector '{name}' failed: {e}")
                continue

            duration = (time.perf_counter() - start) * 1000
            logger.debug(f"Collector '{name}' completed in {duration:.2f}ms")
            values.update({k: str(v) for k, v in data.items() if k in _RECORD_FIELDS})

        return HostInfoRecord(**values)


def collect_host_info(config: Config | None = None) -> HostInfoRecord:
    """
    Convenience function to run a collection.

    Args:
        config: Optional configuration. Uses defaults if not provided.

    Returns:
        The collected host record.
    """
    return FetchCore(config).collect()
