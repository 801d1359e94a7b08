"""Application services over the directory and file repositories."""

from __future__ import annotations

from typing import BinaryIO

from .dirs_repository import DirsRepository
from .files_repository import FileEntry, FilesRepository


class DirsService:
    """Directory operations offered to the request handlers."""

    def __init__(self, repository: DirsRepository) -> None:
        self.repository = repository

    def create_dir(self, path: str) -> None:
        """Create the directory ``path``."""
        self.repository.create_dir(path)

    def delete_dir(self, path: str) -> None:
        """Delete the directory ``path`` recursively."""
        self.repository.delete_dir(path)

    def rename_dir(self, old_path: str, new_path: str) -> None:
        """Rename the directory ``old_path`` to ``new_path``."""
        self.repository.rename_dir(old_path, new_path)


class FilesService:
    """File operations offered to the request handlers."""

    def __init__(self, repository: FilesRepository) -> None:
        self.repository = repository

    def create_file(self, path: str, filename: str, stream: BinaryIO | None) -> None:
        """Store ``stream`` as ``filename`` in the directory ``path``."""
        self.repository.create_file(path, filename, stream)

    def get_files(self, path: str) -> list[FileEntry]:
        """Return the entries of the directory ``path``."""
        return list(self.repository.list_files(path))

    def delete_file(self, path: str) -> None:
        """Delete the file ``path``."""
        self.repository.delete_file(path)

    def rename_file(self, old_path: str, new_path: str) -> None:
        """Rename the file ``old_path`` to ``new_path``."""
        self.repository.rename_file(old_path, new_path)