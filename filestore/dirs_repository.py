"""Directory operations confined to a local storage root."""

from __future__ import annotations

import os
import shutil
import stat
from collections.abc import Iterator

from .errors import (
    DirExistError,
    DirNotFoundError,
    InvalidPathError,
    NewDirExistError,
    OldDirNotFoundError,
    ServiceError,
)

MAX_DELETE_DEPTH = 5


def _clean(path: str) -> str:
    cleaned = os.path.normpath(path)
    if os.sep == "/" and cleaned.startswith("//"):
        cleaned = cleaned[1:]
    return cleaned


def _join(base: str, path: str) -> str:
    """Join like a lexical path join: an absolute ``path`` stays under ``base``."""
    if not path:
        return _clean(base)
    return _clean(base + os.sep + path)


def _relative(base: str, target: str) -> str | None:
    try:
        return os.path.relpath(target, base)
    except ValueError:
        return None


def _ancestors(base: str, start: str) -> Iterator[str]:
    """Yield ``start`` and its parents, stopping before ``base`` or the root."""
    current = start
    while current != base and current != os.sep:
        yield current
        parent = os.path.dirname(current)
        if parent == current:
            return
        current = parent


def _is_symlink_stat(path: str) -> bool:
    return stat.S_ISLNK(os.lstat(path).st_mode)


def _walk(directory: str) -> Iterator[os.DirEntry]:
    with os.scandir(directory) as it:
        entries = sorted(it, key=lambda entry: entry.name)
    for entry in entries:
        yield entry
        if entry.is_dir(follow_symlinks=False):
            yield from _walk(entry.path)


class DirsRepository:
    """Create, delete and rename directories inside a storage root."""

    def __init__(self, root: str | os.PathLike[str]) -> None:
        self.root = os.fspath(root)

    def _base(self) -> str:
        return os.path.abspath(self.root)

    def _target(self, base: str, path: str) -> str:
        if not path:
            raise InvalidPathError()
        cleaned = _clean(path)
        if cleaned in (".", os.sep) or cleaned.startswith(".."):
            raise InvalidPathError()
        target = os.path.abspath(_join(base, cleaned))
        rel = _relative(base, target)
        if rel is None or rel.startswith("..") or rel == ".":
            raise InvalidPathError()
        return target

    def create_dir(self, path: str) -> None:
        """Create ``path`` (owner-only permissions) under the root."""
        base = self._base()
        target = self._target(base, path)

        try:
            info = os.lstat(target)
        except FileNotFoundError:
            pass
        else:
            if stat.S_ISDIR(info.st_mode):
                raise DirExistError()
            raise InvalidPathError()

        for current in _ancestors(base, os.path.dirname(target)):
            if _is_symlink_stat(current):
                raise InvalidPathError()

        os.makedirs(target, mode=0o700, exist_ok=True)

    def delete_dir(self, path: str) -> None:
        """Delete the directory ``path`` and everything in it."""
        base = self._base()
        target = self._target(base, path)

        try:
            info = os.lstat(target)
        except FileNotFoundError:
            raise DirNotFoundError() from None
        if not stat.S_ISDIR(info.st_mode):
            raise InvalidPathError()

        for entry in _walk(target):
            rel = os.path.relpath(entry.path, target).replace(os.sep, "/")
            if rel.count("/") > MAX_DELETE_DEPTH:
                raise ServiceError(f"max directory depth exceeded at {entry.path!r}")
            if entry.is_symlink():
                try:
                    resolved = os.path.realpath(entry.path, strict=True)
                except OSError as exc:
                    raise ServiceError(f"failed to resolve symlink {entry.path!r}") from exc
                rel_to_base = _relative(base, os.path.abspath(resolved))
                if rel_to_base is None or rel_to_base.startswith(".."):
                    raise ServiceError(
                        f"symlink {entry.path!r} points outside base dir (target: {resolved!r})"
                    )

        shutil.rmtree(target)

    def rename_dir(self, old_path: str, new_path: str) -> None:
        """Rename the directory ``old_path`` to ``new_path``."""
        if not old_path or not new_path:
            raise InvalidPathError()
        old_clean = _clean(old_path)
        new_clean = _clean(new_path)
        if (
            old_clean == "."
            or old_clean.startswith("..")
            or new_clean == "."
            or new_clean.startswith("..")
        ):
            raise InvalidPathError()

        base = self._base()
        old_abs = os.path.abspath(_join(base, old_clean))
        new_abs = os.path.abspath(_join(base, new_clean))
        for candidate in (old_abs, new_abs):
            rel = _relative(base, candidate)
            if rel is None or rel.startswith(".."):
                raise InvalidPathError()

        try:
            info = os.lstat(old_abs)
        except FileNotFoundError:
            raise OldDirNotFoundError() from None
        if not stat.S_ISDIR(info.st_mode):
            raise InvalidPathError()

        if os.path.lexists(new_abs):
            raise NewDirExistError()

        for candidate in (old_abs, new_abs):
            for current in _ancestors(base, os.path.dirname(candidate)):
                try:
                    linked = _is_symlink_stat(current)
                except OSError:
                    raise InvalidPathError() from None
                if linked:
                    raise InvalidPathError()

        os.rename(old_abs, new_abs)