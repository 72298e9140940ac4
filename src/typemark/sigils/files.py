# topmark:header:start
#
#   project      : TypeMark
#   file         : files.py
#   file_relpath : src/typemark/sigils/files.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File-scoped sigil helpers.

These helpers apply the content functions of `typemark.sigils.store` to files on
disk, one file at a time. Each rewrite reads, updates and writes a single file
while holding that file's lock (see `typemark.sigils.locking`). There is no
cross-file atomicity: a batch rewrite interrupted half-way leaves a mixed set of
levels on disk, which the next run simply picks up from the sigils it finds.

Files are read and written as UTF-8 with ``newline=""`` so that the original line
terminators survive a rewrite untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec

from typemark.config.logging import get_logger
from typemark.constants import DEFAULT_FILE_EXTENSIONS
from typemark.core.errors import MarkerNotFoundError, SigilLockError
from typemark.sigils.locking import sigil_file_lock
from typemark.sigils.store import strictness, update_sigil

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from typemark.config.logging import TypemarkLogger

logger: TypemarkLogger = get_logger(__name__)


@dataclass
class SigilChangeReport:
    """Outcome of rewriting the sigil of a batch of files.

    Attributes:
        changed (list[Path]): Files now carrying the requested level.
        skipped (list[Path]): Files left untouched because they have no sigil.
        failed (dict[Path, str]): Files that could not be rewritten, with the reason
            (I/O errors, lock contention).
    """

    changed: list[Path] = field(default_factory=lambda: [])
    skipped: list[Path] = field(default_factory=lambda: [])
    failed: dict[Path, str] = field(default_factory=lambda: {})

    @property
    def ok(self) -> bool:
        """Return True if no file failed."""
        return not self.failed


def read_text(path: Path) -> str:
    """Read ``path`` as UTF-8, preserving its line terminators."""
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def write_text(path: Path, text: str) -> None:
    """Write ``text`` to ``path`` as UTF-8, without translating line terminators."""
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)


def file_strictness(path: Path) -> str | None:
    """Return the raw sigil value of the file at ``path``.

    Returns:
        str | None: The raw level, or ``None`` if the file has no sigil, does not
        exist or cannot be decoded.
    """
    try:
        content: str = read_text(path)
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Cannot read %s: %s", path, exc)
        return None
    return strictness(content)


def iter_source_files(
    root: Path,
    *,
    extensions: Sequence[str] = DEFAULT_FILE_EXTENSIONS,
    exclude_patterns: Sequence[str] = (),
) -> list[Path]:
    """Return the source files under ``root``, sorted and absolute.

    Args:
        root (Path): Directory to walk (recursively).
        extensions (Sequence[str]): File suffixes to keep, e.g. ``(".rb",)``.
        exclude_patterns (Sequence[str]): Gitignore-style patterns, relative to ``root``.

    Returns:
        list[Path]: Matching files.
    """
    base: Path = root.resolve()
    spec: PathSpec | None = (
        PathSpec.from_lines("gitwildmatch", list(exclude_patterns)) if exclude_patterns else None
    )
    found: set[Path] = set()
    for p in base.rglob("*"):
        if p.suffix not in extensions or not p.is_file():
            continue
        if spec is not None and spec.match_file(p.relative_to(base).as_posix()):
            logger.trace("Excluded: %s", p)
            continue
        found.add(p)
    logger.debug("Found %d source file(s) under %s", len(found), base)
    return sorted(found)


def files_with_strictness(
    root: Path,
    level: str,
    *,
    extensions: Sequence[str] = DEFAULT_FILE_EXTENSIONS,
    exclude_patterns: Sequence[str] = (),
) -> list[Path]:
    """Return the files under ``root`` whose sigil value equals ``level``.

    The comparison is made on the raw (trimmed) value, so unrecognized levels can
    be selected too.
    """
    return [
        p
        for p in iter_source_files(root, extensions=extensions, exclude_patterns=exclude_patterns)
        if file_strictness(p) == level
    ]


def change_sigil_in_file(path: Path, level: str) -> bool:
    """Rewrite the sigil of the file at ``path`` to ``level``.

    The file is read, updated and written while holding its lock.

    Returns:
        bool: True if the file now carries ``level``.

    Raises:
        MarkerNotFoundError: If the file has no sigil (the file is left untouched).
        SigilLockError: If the file is locked by another process.
        OSError: If the file cannot be read or written.
    """
    with sigil_file_lock(path):
        content: str = read_text(path)
        try:
            updated: str = update_sigil(content, level)
        except MarkerNotFoundError as exc:
            raise MarkerNotFoundError(path) from exc
        if updated != content:
            write_text(path, updated)
    logger.debug("Sigil of %s set to %r", path, level)
    return file_strictness(path) == level


def change_sigil_in_files(paths: Iterable[Path], level: str) -> SigilChangeReport:
    """Rewrite the sigil of every file in ``paths`` to ``level``, one file at a time.

    A failure on one file never stops the batch; it is recorded in the report.

    Args:
        paths (Iterable[Path]): Files to rewrite.
        level (str): The new sigil value.

    Returns:
        SigilChangeReport: Changed, skipped and failed files.
    """
    report = SigilChangeReport()
    for path in paths:
        try:
            if change_sigil_in_file(path, level):
                report.changed.append(path)
            else:
                report.failed[path] = "sigil not updated"
        except MarkerNotFoundError:
            logger.warning("No sigil in %s: skipped", path)
            report.skipped.append(path)
        except (SigilLockError, OSError, UnicodeDecodeError) as exc:
            logger.error("Cannot change sigil of %s: %s", path, exc)
            report.failed[path] = str(exc)
    return report
