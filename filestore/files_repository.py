"""File operations confined to a local storage root."""

from __future__ import annotations

import os
import shutil
import stat
from dataclasses import dataclass
from typing import BinaryIO

from .dirs_repository import _ancestors, _clean, _is_symlink_stat, _join, _relative
from .errors import (
    DirNotFoundError,
    FileExistError,
    InvalidFileError,
    InvalidPathError,
    NewFileExistError,
    OldFileNotFoundError,
    ServiceError,
    StoredFileNotFoundError,
)
from .sniff import SNIFF_LEN, detect_content_type


@dataclass(frozen=True)
class FileEntry:
    """One entry of a directory listing."""

    name: str
    is_dir: bool
    size: int | None = None
    mime_type: str | None = None


def _base_name(name: str) -> str:
    stripped = name.rstrip(os.sep)
    if not stripped:
        return os.sep
    return stripped.rsplit(os.sep, 1)[-1]


def _sniff(path: str) -> str | None:
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError:
        return None
    try:
        head = os.read(fd, SNIFF_LEN)
    except OSError:
        head = b""
    finally:
        os.close(fd)
    return detect_content_type(head)


def _check_no_symlinks(base: str, start: str, *, wrap_errors: bool) -> None:
    for current in _ancestors(base, start):
        try:
            linked = _is_symlink_stat(current)
        except OSError as exc:
            if wrap_errors:
                raise ServiceError(f"failed to stat {current!r}: {exc.strerror}") from exc
            raise InvalidPathError() from None
        if linked:
            raise InvalidPathError()


class FilesRepository:
    """Create, list, delete and rename files inside a storage root."""

    def __init__(self, root: str | os.PathLike[str]) -> None:
        self.root = os.fspath(root)

    def _base(self) -> str:
        return os.path.abspath(self.root)

    @staticmethod
    def _inside(base: str, target: str) -> None:
        rel = _relative(base, target)
        if rel is None or rel.startswith(".."):
            raise InvalidPathError()

    def create_file(self, path: str, filename: str, stream: BinaryIO | None) -> None:
        """Store ``stream`` as ``filename`` in the existing directory ``path``."""
        if stream is None or not filename:
            raise InvalidFileError()

        cleaned = _clean(path)
        if cleaned == ".":
            cleaned = ""
        if cleaned.startswith(".."):
            raise InvalidPathError()

        base = self._base()
        target_dir = os.path.abspath(_join(base, cleaned))
        self._inside(base, target_dir)
        _check_no_symlinks(base, target_dir, wrap_errors=True)

        try:
            info = os.stat(target_dir)
        except FileNotFoundError:
            raise DirNotFoundError() from None
        if not stat.S_ISDIR(info.st_mode):
            raise InvalidPathError()

        destination = _join(target_dir, _base_name(filename))
        if os.path.exists(destination):
            raise FileExistError()

        with open(destination, "wb") as target:
            shutil.copyfileobj(stream, target)

    def list_files(self, path: str) -> list[FileEntry]:
        """List ``path``: directories first, then files, each by name."""
        cleaned = _clean(path)
        if cleaned.startswith(".."):
            raise InvalidPathError()

        base = self._base()
        target = os.path.abspath(_join(base, cleaned))
        self._inside(base, target)
        _check_no_symlinks(base, target, wrap_errors=False)

        try:
            info = os.stat(target)
        except FileNotFoundError:
            raise DirNotFoundError() from None
        if not stat.S_ISDIR(info.st_mode):
            raise InvalidPathError()

        entries = []
        with os.scandir(target) as it:
            for entry in it:
                is_dir = entry.is_dir(follow_symlinks=False)
                if is_dir:
                    entries.append(FileEntry(entry.name, True))
                    continue
                size = entry.stat(follow_symlinks=False).st_size
                entries.append(FileEntry(entry.name, False, size, _sniff(entry.path)))

        entries.sort(key=lambda item: (not item.is_dir, item.name))
        return entries

    def delete_file(self, path: str) -> None:
        """Delete the file ``path``."""
        if not path:
            raise InvalidPathError()
        cleaned = _clean(path)
        if cleaned == "." or cleaned.startswith(".."):
            raise InvalidPathError()

        base = self._base()
        target = os.path.abspath(_join(base, cleaned))
        self._inside(base, target)
        _check_no_symlinks(base, os.path.dirname(target), wrap_errors=True)

        try:
            info = os.stat(target)
        except FileNotFoundError:
            raise StoredFileNotFoundError() from None
        if stat.S_ISDIR(info.st_mode):
            raise InvalidPathError()

        os.remove(target)

    def rename_file(self, old_path: str, new_path: str) -> None:
        """Rename the file ``old_path`` to ``new_path``."""
        if not old_path or not new_path:
            raise InvalidPathError()
        old_clean = _clean(old_path)
        new_clean = _clean(new_path)
        for cleaned in (old_clean, new_clean):
            if cleaned == "." or cleaned.startswith(".."):
                raise InvalidPathError()

        base = self._base()
        old_abs = os.path.abspath(_join(base, old_clean))
        new_abs = os.path.abspath(_join(base, new_clean))
        self._inside(base, old_abs)
        self._inside(base, new_abs)

        for candidate in (old_abs, new_abs):
            _check_no_symlinks(base, os.path.dirname(candidate), wrap_errors=False)

        try:
            old_info = os.stat(old_abs)
        except FileNotFoundError:
            raise OldFileNotFoundError() from None
        if stat.S_ISDIR(old_info.st_mode):
            raise InvalidPathError()

        try:
            new_info = os.stat(new_abs)
        except FileNotFoundError:
            pass
        else:
            if stat.S_ISDIR(new_info.st_mode):
                raise InvalidPathError()
            raise NewFileExistError()

        os.rename(old_abs, new_abs)