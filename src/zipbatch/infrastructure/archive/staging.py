"""Scoped temporary files for staged archives."""

import logging
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

logger = logging.getLogger(__name__)


def remove_quietly(path: Path) -> bool:
    """Delete path. Failures are logged as warnings and reported as False."""
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning("Could not cleanup temp file %s: %s", path, e)
        return False
    return True


@contextmanager
def staged_archive(prefix: str, suffix: str = ".zip") -> Iterator[Path]:
    """
    Yield a path to a fresh temporary file, removed on every exit path.

    The file handle is closed before yielding so the path can be reopened
    for writing and reading on any platform.
    """
    fd, name = tempfile.mkstemp(prefix=f"{prefix}_", suffix=suffix)
    os.close(fd)
    path = Path(name)
    try:
        yield path
    finally:
        remove_quietly(path)
