"""Request bodies accepted by the admin endpoints and the listing response."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, TypeVar, Union

from .errors import BadRequestError, InvalidNewPathError, InvalidOldPathError, InvalidPathError

_Payload = Union[bytes, bytearray, str, Mapping[str, Any], None]
_RequestT = TypeVar("_RequestT")


def _require(value: str, error: type[BadRequestError]) -> None:
    if not value:
        raise error()


@dataclass
class AdminCreateDirRequest:
    """Body of a directory creation request."""

    path: str = ""

    def validate(self) -> None:
        """Raise ``InvalidPathError`` when the path is empty."""
        _require(self.path, InvalidPathError)


@dataclass
class AdminDeleteDirRequest:
    """Body of a directory deletion request."""

    path: str = ""

    def validate(self) -> None:
        """Raise ``InvalidPathError`` when the path is empty."""
        _require(self.path, InvalidPathError)


@dataclass
class AdminRenameDirRequest:
    """Body of a directory rename request."""

    old_path: str = ""
    new_path: str = ""

    def validate(self) -> None:
        """Raise when the old or the new path is empty, old path first."""
        _require(self.old_path, InvalidOldPathError)
        _require(self.new_path, InvalidNewPathError)


@dataclass
class AdminCreateFileRequest:
    """Metadata sent along with an uploaded file."""

    path: str = ""


@dataclass
class AdminListFilesRequest:
    """Body of a directory listing request."""

    path: str = ""


@dataclass
class AdminDeleteFileRequest:
    """Body of a file deletion request."""

    path: str = ""

    def validate(self) -> None:
        """Raise ``InvalidPathError`` when the path is empty."""
        _require(self.path, InvalidPathError)


@dataclass
class AdminRenameFileRequest:
    """Body of a file rename request."""

    old_path: str = ""
    new_path: str = ""

    def validate(self) -> None:
        """Raise when the old or the new path is empty, old path first."""
        _require(self.old_path, InvalidOldPathError)
        _require(self.new_path, InvalidNewPathError)


@dataclass(frozen=True)
class FileResponse:
    """One entry of a listing as sent to the client."""

    name: str
    is_dir: bool
    size: int | None = None
    mime_type: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form of the entry."""
        return {
            "name": self.name,
            "is_dir": self.is_dir,
            "size": self.size,
            "mime_type": self.mime_type,
        }


def _decode(payload: _Payload) -> Any:
    if payload is None or isinstance(payload, Mapping):
        return payload
    if isinstance(payload, (bytes, bytearray)):
        payload = bytes(payload).decode("utf-8", errors="replace")
    try:
        return json.loads(payload)
    except (json.JSONDecodeError, TypeError):
        raise BadRequestError() from None


def parse_request(cls: type[_RequestT], payload: _Payload) -> _RequestT:
    """Build a request of type ``cls`` from a JSON document or decoded object.

    Unknown keys are ignored, keys match field names case-insensitively,
    and ``null`` values leave a field at its default. Malformed JSON, a
    document that is not an object, or a non-string value raises
    ``BadRequestError``.
    """
    data = _decode(payload)
    if data is None:
        return cls()
    if not isinstance(data, Mapping):
        raise BadRequestError()

    names = [field.name for field in fields(cls)]
    values: dict[str, str] = {}
    for key, value in data.items():
        if not isinstance(key, str):
            continue
        name = key if key in names else next(
            (candidate for candidate in names if candidate.casefold() == key.casefold()),
            None,
        )
        if name is None or value is None:
            continue
        if not isinstance(value, str):
            raise BadRequestError()
        values[name] = value
    return cls(**values)