"""Host tool version checks run before any build."""

from __future__ import annotations

import logging
import re
import subprocess
import sys

from loom_tooling.errors import ToolVersionError
from loom_tooling.helpers import version_outdated
from loom_tooling.host import HostInfo, detect_host, installed

log = logging.getLogger(__name__)

PYTHON_REQUIRED_VERSION = "3.10.0"
CMAKE_REQUIRED_VERSION = "3.0.0"

PYTHON_HINT = "Please go to https://www.python.org/downloads/ and install the latest version."
CMAKE_HINT = "Please go to https://cmake.org/download/ and install the latest version."

_CMAKE_VERSION_RE = re.compile(r"cmake version (\d+\.\d+\.\d+(?:-[\w.]+)?)")


def parse_cmake_version(output: str) -> str:
    """Extract X.Y.Z from `cmake --version` output. Raises ToolVersionError if absent."""
    first = output.splitlines()[0] if output else ""
    m = _CMAKE_VERSION_RE.search(first)
    if not m:
        msg = f"Could not parse CMake version from: {first!r}"
        raise ToolVersionError(msg, hint=CMAKE_HINT)
    return m.group(1)


def cmake_version() -> str:
    try:
        r = subprocess.run(["cmake", "--version"], capture_output=True, text=True, check=False)
    except FileNotFoundError as e:
        msg = "CMake not found"
        raise ToolVersionError(msg, hint=CMAKE_HINT) from e
    if r.returncode != 0:
        msg = f"cmake --version failed: {r.stderr.strip()}"
        raise ToolVersionError(msg, hint=CMAKE_HINT)
    return parse_cmake_version(r.stdout)


def check_python(version: str | None = None) -> None:
    version = version or "{}.{}.{}".format(*sys.version_info[:3])
    if version_outdated(version, PYTHON_REQUIRED_VERSION):
        msg = f"LoomSDK requires Python version {PYTHON_REQUIRED_VERSION} or newer (found {version})."
        raise ToolVersionError(msg, hint=PYTHON_HINT)


def check_cmake(host: HostInfo | None = None) -> str:
    """Return the installed CMake version; raise ToolVersionError if missing or too old."""
    if not installed("cmake", host):
        msg = f"LoomSDK requires CMake version {CMAKE_REQUIRED_VERSION} or above (cmake not found)."
        raise ToolVersionError(msg, hint=CMAKE_HINT)
    version = cmake_version()
    if version_outdated(version, CMAKE_REQUIRED_VERSION):
        msg = f"LoomSDK requires CMake version {CMAKE_REQUIRED_VERSION} or above (found {version})."
        raise ToolVersionError(msg, hint=CMAKE_HINT)
    log.debug("cmake %s", version)
    return version


def check_versions(host: HostInfo | None = None) -> None:
    check_python()
    check_cmake(host or detect_host())


def run() -> int:
    """CLI helper: run all checks. Returns 0 or 1."""
    try:
        check_versions()
    except ToolVersionError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    print("✅ Host tools OK")
    return 0
