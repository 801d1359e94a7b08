"""Error types raised by the file store and mapped to HTTP statuses."""

from __future__ import annotations


class ServiceError(Exception):
    """Base error of the service; unmapped errors answer with status 500."""

    default_code = "internal_error"
    status = 500

    def __init__(self, code: str | None = None) -> None:
        self.code = code if code is not None else self.default_code
        super().__init__(self.code)

    def __str__(self) -> str:
        return self.code


class BadRequestError(ServiceError):
    """The request is malformed or cannot be carried out."""

    default_code = "bad_request"
    status = 400


class UnauthorizedError(ServiceError):
    """The caller is not authenticated."""

    default_code = "unauthorized"
    status = 401


class ForbiddenError(ServiceError):
    """The caller may not perform the request."""

    default_code = "forbidden"
    status = 403


class NotFoundError(ServiceError):
    """The requested resource does not exist."""

    default_code = "not_found"
    status = 404


class InvalidPathError(BadRequestError):
    """A path is empty, escapes the store root or has the wrong type."""

    default_code = "bad_request:invalid_path"


class InvalidOldPathError(BadRequestError):
    """The source path of a rename is missing."""

    default_code = "bad_request:invalid_old_path"


class InvalidNewPathError(BadRequestError):
    """The destination path of a rename is missing."""

    default_code = "bad_request:invalid_new_path"


class InvalidFileError(BadRequestError):
    """No usable file was uploaded."""

    default_code = "bad_request:invalid_file"


class DirExistError(BadRequestError):
    """The directory to create already exists."""

    default_code = "bad_request:dir_exist"


class DirNotFoundError(BadRequestError):
    """The directory does not exist."""

    default_code = "bad_request:dir_not_found"


class OldDirNotFoundError(BadRequestError):
    """The directory to rename does not exist."""

    default_code = "bad_request:old_dir_not_found"


class NewDirExistError(BadRequestError):
    """The rename destination of a directory already exists."""

    default_code = "bad_request:new_dir_exist"


class FileExistError(BadRequestError):
    """The file to create already exists."""

    default_code = "bad_request:file_exist"


class StoredFileNotFoundError(BadRequestError):
    """The file does not exist in the store."""

    default_code = "bad_request:file_not_found"


class OldFileNotFoundError(BadRequestError):
    """The file to rename does not exist."""

    default_code = "bad_request:old_file_not_found"


class NewFileExistError(BadRequestError):
    """The rename destination of a file already exists."""

    default_code = "bad_request:new_file_exist"