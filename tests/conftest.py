"""
Pytest fixtures and configuration for Gentoo Fetch tests.

Provides sample /proc and /etc contents and a Config that points every
source at a temporary directory.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from gentoo_fetch.config import Config


# Test Data Fixtures - File Contents
@pytest.fixture
def sample_os_release_content():
    """Sample content for /etc/os-release on Gentoo."""
    return """NAME=Gentoo
ID=gentoo
PRETTY_NAME="Gentoo Linux"
ANSI_COLOR="1;32"
HOME_URL="https://www.gentoo.org/"
SUPPORT_URL="https://www.gentoo.org/support/"
BUG_REPORT_URL="https://bugs.gentoo.org/"
VERSION_ID="2.15"
"""


@pytest.fixture
def sample_cpuinfo_content():
    """Sample content for /proc/cpuinfo with two logical CPUs."""
    return """processor	: 0
vendor_id	: AuthenticAMD
cpu family	: 25
model		: 33
model name	: AMD Ryzen 7 5800X 8-Core Processor
stepping	: 0
cpu MHz		: 3800.000
cache size	: 512 KB

processor	: 1
vendor_id	: AuthenticAMD
cpu family	: 25
model		: 33
model name	: Some Other Processor
stepping	: 0
"""


@pytest.fixture
def sample_meminfo_content():
    """Sample content for /proc/meminfo."""
    return """MemTotal:       16000000 kB
MemFree:         2000000 kB
MemAvailable:    8000000 kB
Buffers:          400000 kB
Cached:          5000000 kB
SwapCached:            0 kB
SwapTotal:       8388604 kB
SwapFree:        8388604 kB
"""


@pytest.fixture
def sample_packages():
    """Installed packages as (category, package-version) pairs."""
    return [
        ("sys-apps", "portage-3.0.63"),
        ("sys-apps", "coreutils-9.5"),
        ("sys-devel", "gcc-14.2.1_p20241221"),
        ("app-shells", "bash-5.2_p37"),
        ("dev-lang", "python-3.12.8_p1"),
    ]


@pytest.fixture
def package_db(tmp_path: Path, sample_packages) -> Path:
    """Create a VDB-style package database."""
    db = tmp_path / "pkg"
    for category, package in sample_packages:
        pkg_dir = db / category / package
        pkg_dir.mkdir(parents=True)
        (pkg_dir / "CONTENTS").write_text("obj /usr/bin/true 0 0\n")
        (pkg_dir / "SLOT").write_text("0\n")
    return db


@pytest.fixture
def host_files(
    tmp_path: Path,
    sample_os_release_content,
    sample_cpuinfo_content,
    sample_meminfo_content,
    package_db,
) -> dict[str, Path]:
    """Write sample host files and a profile symlink into tmp_path."""
    os_release = tmp_path / "os-release"
    os_release.write_text(sample_os_release_content)
    cpuinfo = tmp_path / "cpuinfo"
    cpuinfo.write_text(sample_cpuinfo_content)
    meminfo = tmp_path / "meminfo"
    meminfo.write_text(sample_meminfo_content)
    uptime = tmp_path / "uptime"
    uptime.write_text("90030.71 712345.20\n")

    profile_target = "../../var/db/repos/gentoo/profiles/default/linux/amd64/23.0"
    profile_link = tmp_path / "make.profile"
    profile_link.symlink_to(profile_target)

    return {
        "os_release": os_release,
        "cpuinfo": cpuinfo,
        "meminfo": meminfo,
        "uptime": uptime,
        "package_db": package_db,
        "profile_link": profile_link,
    }


@pytest.fixture
def sample_config(host_files) -> Config:
    """Configuration reading every source from the temporary host files."""
    return Config(
        os_release_path=str(host_files["os_release"]),
        cpuinfo_path=str(host_files["cpuinfo"]),
        meminfo_path=str(host_files["meminfo"]),
        uptime_path=str(host_files["uptime"]),
        package_db_path=str(host_files["package_db"]),
        profile_link=str(host_files["profile_link"]),
        command_timeout=5,
    )


@pytest.fixture
def missing_config(tmp_path: Path) -> Config:
    """Configuration whose sources all point at missing files."""
    missing = tmp_path / "missing"
    return Config(
        os_release_path=str(missing / "os-release"),
        cpuinfo_path=str(missing / "cpuinfo"),
        meminfo_path=str(missing / "meminfo"),
        uptime_path=str(missing / "uptime"),
        package_db_path=str(missing / "pkg"),
        profile_link=str(missing / "make.profile"),
    )


@pytest.fixture
def portageq_output():
    """Sample output from portageq --version."""
    return "Portage 3.0.63 (python 3.12.8-final-0, default/linux/amd64/23.0, gcc-14, glibc-2.40-r8, 6.12.8 x86_64)\n"


# Pytest Configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "cli: marks tests as CLI tests")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
