"""
Gentoo Fetch - System information display for Gentoo Linux.

Collects host facts (OS, kernel, uptime, memory, Portage metadata) and
prints them next to a Gentoo ASCII-art logo.
"""

__version__ = "1.0.0"
__author__ = "Gentoo Fetch Developers"

__all__ = ["__version__"]
