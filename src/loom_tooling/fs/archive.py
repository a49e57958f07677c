"""Extract zip archives (SDK dependency bundles, prebuilt packages)."""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path

log = logging.getLogger(__name__)


def unzip_file(archive: Path, destination: Path) -> int:
    """Extract every entry of archive under destination, keeping relative paths. Returns entry count.

    Entries with absolute paths or '..' components are skipped.
    """
    destination = Path(destination)
    destination.mkdir(parents=True, exist_ok=True)
    count = 0
    with zipfile.ZipFile(archive, "r") as zh:
        for info in zh.infolist():
            name = info.filename
            if name.startswith("/") or ".." in Path(name).parts:
                log.warning("Skipping unsafe archive entry %s", name)
                continue
            target = destination / name
            if info.is_dir():
                target.mkdir(parents=True, exist_ok=True)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            zh.extract(info, destination)
            count += 1
    return count
