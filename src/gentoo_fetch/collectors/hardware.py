"""
Hardware information collector.

Collects CPU model and memory usage from /proc.
"""

from __future__ import annotations

from gentoo_fetch.collectors.base import BaseCollector

CPU_MODEL_PATTERN = r"model name\s+:\s+(.+)"


def format_memory(total_kb: int, available_kb: int) -> str:
    """Format memory usage as "{used}M / {total}M" from kilobyte counts."""
    used_mb = (total_kb - available_kb) // 1024
    total_mb = total_kb // 1024
    return f"{used_mb}M / {total_mb}M"


class HardwareCollector(BaseCollector):
    """Collects hardware information."""

    name = "hardware"
    description = "CPU model and memory usage"
    fields = ("cpu", "memory")

    def collect(self) -> dict[str, str]:
        """Collect hardware information."""
        return {
            "cpu": self._get_cpu_model(),
            "memory": self._get_memory_info(),
        }

    def _get_cpu_model(self) -> str:
        """Get the first CPU model name listed in cpuinfo."""
        model = self.search_file(self.config.cpuinfo_path, CPU_MODEL_PATTERN)
        if model:
            return model.strip()
        return "N/A"

    def _get_memory_info(self) -> str:
        """Get used and total memory in megabytes."""
        meminfo = self.parse_key_value_file(self.config.meminfo_path, separator=":")

        try:
            # Values look like "16318412 kB"
            total_kb = int(meminfo["MemTotal"].split()[0])
            available_kb = int(meminfo["MemAvailable"].split()[0])
        except (KeyError, IndexError, ValueError) as e:
            self.logger.debug(f"Could not parse {self.config.meminfo_path}: {e}")
            return "N/A"

        return format_memory(total_kb, available_kb)
