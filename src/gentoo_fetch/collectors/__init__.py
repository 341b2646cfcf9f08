"""
System data collectors for Gentoo Fetch.

Each collector is responsible for a group of fields of the host record.
"""

from __future__ import annotations

from gentoo_fetch.collectors.base import BaseCollector, CollectionError
from gentoo_fetch.collectors.hardware import HardwareCollector
from gentoo_fetch.collectors.portage import PortageCollector
from gentoo_fetch.collectors.system import SystemCollector

# Registry of all available collectors, in collection order
COLLECTORS: dict[str, type[BaseCollector]] = {
    "system": SystemCollector,
    "hardware": HardwareCollector,
    "portage": PortageCollector,
}


def get_all_collectors() -> dict[str, type[BaseCollector]]:
    """Return all registered collectors."""
    return COLLECTORS.copy()


def get_collector(name: str) -> type[BaseCollector] | None:
    """Get a specific collector by name."""
    return COLLECTORS.get(name)


def list_collectors() -> list[str]:
    """List all available collector names."""
    return list(COLLECTORS.keys())


__all__ = [
    "BaseCollector",
    "CollectionError",
    "SystemCollector",
    "HardwareCollector",
    "PortageCollector",
    "get_all_collectors",
    "get_collector",
    "list_collectors",
    "COLLECTORS",
]
