"""Host descriptor: OS family, core count, tool lookup dialect."""

from __future__ import annotations

import logging
import os
import platform
import subprocess
from dataclasses import dataclass

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class HostInfo:
    system: str
    num_cores: int

    @property
    def is_windows(self) -> bool:
        return self.system == "Windows"


def detect_host() -> HostInfo:
    """Describe the machine we are running on (platform.system(), os.cpu_count())."""
    return HostInfo(system=platform.system(), num_cores=os.cpu_count() or 1)


def tool_lookup_cmd(tool: str, host: HostInfo) -> list[str]:
    """Command whose exit status tells whether tool is on PATH (where on Windows, which elsewhere)."""
    if host.is_windows:
        return ["where", "/Q", tool]
    return ["which", tool]


def installed(tool: str, host: HostInfo | None = None) -> bool:
    """True if tool is found on PATH."""
    host = host or detect_host()
    cmd = tool_lookup_cmd(tool, host)
    try:
        r = subprocess.run(cmd, capture_output=True, check=False)
    except FileNotFoundError as e:
        log.debug("%s not available: %s", cmd[0], e)
        return False
    return r.returncode == 0
