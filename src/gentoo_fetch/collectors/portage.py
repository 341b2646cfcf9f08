"""
Portage information collector.

Collects the installed package count from the package database, the Portage
version, and the active profile.
"""

from __future__ import annotations

import os

from gentoo_fetch.collectors.base import BaseCollector, CollectionError


class PortageCollector(BaseCollector):
    """Collects package manager information."""

    name = "portage"
    description = "Installed packages, Portage version and active profile"
    fields = ("packages", "portage", "profile", "gcc")

    def collect(self) -> dict[str, str]:
        """Collect Portage information."""
        result = {
            "packages": self._get_package_count(),
            "portage": self._get_portage_version(),
            "profile": self._get_profile(),
        }
        if self.config.show_gcc:
            result["gcc"] = self._get_gcc_version()
        return result

    def count_packages(self, db_path: str) -> int:
        """
        Count installed package versions in a VDB-style package database.

        The database holds one directory per category, each containing one
        directory per installed package version.

        Raises:
            OSError: If the database root cannot be listed.
        """
        count = 0
        with os.scandir(db_path) as categories:
            for category in categories:
                if not category.is_dir(follow_symlinks=False):
                    continue
                try:
                    with os.scandir(category.path) as packages:
                        count += sum(1 for entry in packages if entry.is_dir(follow_symlinks=False))
                except OSError as e:
                    self.logger.debug(f"Skipping unreadable category {category.path}: {e}")
        return count

    def _get_package_count(self) -> str:
        try:
            return str(self.count_packages(self.config.package_db_path))
        except OSError as e:
            self.logger.debug(f"Could not read package database: {e}")
            return "N/A"

    def _get_portage_version(self) -> str:
        """Get the version reported by portageq."""
        stdout, _, _ = self.run_command(["portageq", "--version"])
        return stdout.rstrip()

    def _get_profile(self) -> str:
        """Get the target of the make.profile symlink."""
        try:
            return os.readlink(self.config.profile_link)
        except OSError as e:
            self.logger.debug(f"Could not resolve profile link: {e}")
            return "N/A"

    def _get_gcc_version(self) -> str:
        """Get the first gcc line of `gcc --version`, empty if unavailable."""
        try:
            stdout, _, _ = self.run_command(["gcc", "--version"])
        except CollectionError as e:
            self.logger.debug(f"gcc unavailable: {e}")
            return ""
        for line in stdout.splitlines():
            if "gcc" in line:
                return line.strip()
        return ""
