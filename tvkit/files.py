"""
files.py – defensive local file reads
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class FileProbeResult:
    exists: bool
    data: Optional[bytes] = None
    error: Optional[OSError] = None


def check_and_read_file(path: PathLike) -> FileProbeResult:
    """
    Read *path* fully into memory.

    A missing file is not an error: ``exists=False, error=None``.  Any
    other OS failure (permissions, path is a directory, I/O) comes back
    in ``error`` with ``exists=False``.  Not meant for large files.
    """
    try:
        data = Path(path).read_bytes()
    except FileNotFoundError:
        return FileProbeResult(exists=False)
    except OSError as exc:
        return FileProbeResult(exists=False, error=exc)
    return FileProbeResult(exists=True, data=data)


def file_exists(path: PathLike) -> bool:
    return Path(path).is_file()
