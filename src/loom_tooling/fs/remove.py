"""Delete a tree whose files may be briefly locked (editors, indexers, AV scanners on Windows)."""

from __future__ import annotations

import logging
import math
import os
import shutil
import time
from collections.abc import Callable
from pathlib import Path

from loom_tooling.errors import RemoveTimeoutError

log = logging.getLogger(__name__)

REMOVE_TIME_LIMIT = 60
REMOVE_POLL_INTERVAL = 1


def _remove_file(
    f: Path,
    time_limit: float,
    poll_interval: float,
    sleep: Callable[[float], None],
    clock: Callable[[], float],
) -> None:
    start: float | None = None
    while True:
        try:
            os.remove(f)
        except FileNotFoundError:
            return
        except OSError as e:
            now = clock()
            if start is None:
                start = now
            time_left = time_limit - (now - start)
            if time_left < 0:
                msg = f"Timed out trying to remove {f}"
                raise RemoveTimeoutError(msg) from e
            log.warning(
                "Unable to remove %s (%s), retrying for another %ds", f, e, math.ceil(time_left)
            )
            sleep(poll_interval)
        else:
            if start is not None:
                log.info("Removed %s", f)
            return


def rm_rf_persistent(
    path: Path,
    *,
    time_limit: float = REMOVE_TIME_LIMIT,
    poll_interval: float = REMOVE_POLL_INTERVAL,
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], float] = time.monotonic,
) -> None:
    """Remove path recursively, retrying each locked file until time_limit seconds pass.

    Files that vanish on their own count as removed. Raises RemoveTimeoutError when a
    file stays locked past the limit.
    """
    path = Path(path)
    if not path.exists() and not path.is_symlink():
        return
    if path.is_file() or path.is_symlink():
        _remove_file(path, time_limit, poll_interval, sleep, clock)
        return
    for f in sorted(path.rglob("*")):
        if f.is_dir() and not f.is_symlink():
            continue
        _remove_file(f, time_limit, poll_interval, sleep, clock)
    shutil.rmtree(path)
