"""Filesystem helpers used while packaging: safe copy, persistent delete, unzip."""

from .archive import unzip_file
from .copy import cp_r_safe, cp_safe
from .remove import rm_rf_persistent

__all__ = [
    "cp_r_safe",
    "cp_safe",
    "rm_rf_persistent",
    "unzip_file",
]
