# topmark:header:start
#
#   project      : TypeMark
#   file         : locking.py
#   file_relpath : src/typemark/sigils/locking.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Single-file write lock used while a sigil is rewritten.

The lock is a sidecar file (``<name>.typemark-lock``) created exclusively next to
the target and removed on exit, whatever happens inside the ``with`` block. It
records the owning process id so a lock left behind by a crashed run is
recognized as stale and replaced.

The lock only covers one file. A set of files is never committed atomically:
after a crash, the next bump recomputes its selection from the sigils found on
disk, which is what keeps repeated runs convergent.
"""

from __future__ import annotations

import json
import os
import socket
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

from typemark.config.logging import get_logger
from typemark.constants import SIGIL_LOCK_SUFFIX
from typemark.core.errors import SigilLockError

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from typemark.config.logging import TypemarkLogger

logger: TypemarkLogger = get_logger(__name__)


@dataclass(frozen=True)
class LockPayload:
    """Owner of a sigil lock."""

    pid: int
    host: str

    def to_json(self) -> str:
        return json.dumps({"pid": self.pid, "host": self.host}, sort_keys=True)


def lock_path_for(path: Path) -> Path:
    """Return the sidecar lock path for ``path``."""
    return path.with_name(f"{path.name}{SIGIL_LOCK_SUFFIX}")


def _pid_active(pid: int) -> bool:
    if pid <= 0:
        return False
    try:
        os.kill(pid, 0)
        return True
    except ProcessLookupError:
        return False
    except PermissionError:
        return True


def _is_stale(lock_file: Path) -> bool:
    """Return True if ``lock_file`` belongs to a process that no longer runs on this host."""
    try:
        payload: object = json.loads(lock_file.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return False
    if not isinstance(payload, dict):
        return False
    pid: object = payload.get("pid")
    host: object = payload.get("host")
    if not isinstance(pid, int) or host != socket.gethostname():
        return False
    return not _pid_active(pid)


def _create_exclusive(lock_file: Path, payload: LockPayload) -> None:
    fd: int = os.open(lock_file, os.O_CREAT | os.O_EXCL | os.O_WRONLY, 0o644)
    with os.fdopen(fd, "w", encoding="utf-8") as handle:
        handle.write(payload.to_json() + "\n")


@contextmanager
def sigil_file_lock(path: Path) -> Iterator[Path]:
    """Hold the write lock of ``path`` for the duration of the ``with`` block.

    Args:
        path (Path): The file about to be rewritten.

    Yields:
        Path: The locked file.

    Raises:
        SigilLockError: If another live process holds the lock, or the lock file
            cannot be created.
    """
    lock_file: Path = lock_path_for(path)
    payload = LockPayload(pid=os.getpid(), host=socket.gethostname())
    try:
        _create_exclusive(lock_file, payload)
    except FileExistsError as exc:
        if not _is_stale(lock_file):
            raise SigilLockError(path, "locked by another process") from exc
        logger.warning("Replacing stale lock %s", lock_file)
        lock_file.unlink(missing_ok=True)
        try:
            _create_exclusive(lock_file, payload)
        except OSError as retry_exc:
            raise SigilLockError(path, str(retry_exc)) from retry_exc
    except OSError as exc:
        raise SigilLockError(path, str(exc)) from exc

    logger.trace("Lock acquired: %s", lock_file)
    try:
        yield path
    finally:
        lock_file.unlink(missing_ok=True)
        logger.trace("Lock released: %s", lock_file)
