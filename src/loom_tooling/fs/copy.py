"""Copy files or trees only when the source exists."""

from __future__ import annotations

import shutil
from pathlib import Path


def cp_safe(src: Path, dst: Path) -> bool:
    """Copy file src to dst, creating dst's parent. Returns False if src is missing."""
    src, dst = Path(src), Path(dst)
    if not src.exists():
        return False
    dst.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy2(src, dst)
    return True


def cp_r_safe(src: Path, dst: Path) -> bool:
    """Copy src (file or directory) into directory dst. Returns False if src is missing."""
    src, dst = Path(src), Path(dst)
    if not src.exists():
        return False
    dst.mkdir(parents=True, exist_ok=True)
    if src.is_dir():
        shutil.copytree(src, dst / src.name, dirs_exist_ok=True)
    else:
        shutil.copy2(src, dst / src.name)
    return True
