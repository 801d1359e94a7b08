import json

import pytest

from filestore.errors import (
    BadRequestError,
    InvalidNewPathError,
    InvalidOldPathError,
    InvalidPathError,
)
from filestore.requests import (
    AdminCreateDirRequest,
    AdminCreateFileRequest,
    AdminDeleteDirRequest,
    AdminDeleteFileRequest,
    AdminListFilesRequest,
    AdminRenameDirRequest,
    AdminRenameFileRequest,
    FileResponse,
    parse_request,
)


@pytest.mark.parametrize(
    "cls", [AdminCreateDirRequest, AdminDeleteDirRequest, AdminDeleteFileRequest]
)
def test_empty_path_is_invalid(cls):
    with pytest.raises(InvalidPathError) as info:
        cls(path="").validate()
    assert info.value.code == "bad_request:invalid_path"


@pytest.mark.parametrize(
    "cls", [AdminCreateDirRequest, AdminDeleteDirRequest, AdminDeleteFileRequest]
)
def test_non_empty_path_validates(cls):
    request = cls(path="docs")
    assert request.validate() is None
    assert request.path == "docs"


@pytest.mark.parametrize("cls", [AdminRenameDirRequest, AdminRenameFileRequest])
def test_rename_missing_old_path_reported_first(cls):
    with pytest.raises(InvalidOldPathError) as info:
        cls(old_path="", new_path="").validate()
    assert info.value.code == "bad_request:invalid_old_path"


@pytest.mark.parametrize("cls", [AdminRenameDirRequest, AdminRenameFileRequest])
def test_rename_missing_new_path(cls):
    with pytest.raises(InvalidNewPathError) as info:
        cls(old_path="a", new_path="").validate()
    assert info.value.code == "bad_request:invalid_new_path"


@pytest.mark.parametrize("cls", [AdminRenameDirRequest, AdminRenameFileRequest])
def test_rename_complete_validates(cls):
    request = cls(old_path="a", new_path="b")
    assert request.validate() is None
    assert (request.old_path, request.new_path) == ("a", "b")


def test_parse_from_bytes():
    request = parse_request(AdminCreateDirRequest, b'{"path": "images/2025"}')
    assert request == AdminCreateDirRequest(path="images/2025")


def test_parse_from_str_with_rename_keys():
    request = parse_request(
        AdminRenameFileRequest, json.dumps({"old_path": "x.txt", "new_path": "y.txt"})
    )
    assert request == AdminRenameFileRequest(old_path="x.txt", new_path="y.txt")


def test_parse_from_mapping():
    request = parse_request(AdminListFilesRequest, {"path": "uploads"})
    assert request.path == "uploads"


def test_parse_ignores_unknown_keys():
    request = parse_request(AdminDeleteDirRequest, '{"path": "a", "extra": 1}')
    assert request == AdminDeleteDirRequest(path="a")


def test_parse_keys_match_case_insensitively():
    request = parse_request(AdminRenameDirRequest, '{"OLD_PATH": "a", "New_Path": "b"}')
    assert request == AdminRenameDirRequest(old_path="a", new_path="b")


def test_parse_missing_and_null_fields_stay_empty():
    assert parse_request(AdminCreateFileRequest, "{}") == AdminCreateFileRequest()
    assert parse_request(AdminCreateFileRequest, '{"path": null}').path == ""
    assert parse_request(AdminCreateFileRequest, "null") == AdminCreateFileRequest()


@pytest.mark.parametrize("payload", [b"", b"{", "not json", "[1, 2]", '"text"', '{"path": 5}'])
def test_parse_rejects_bad_payloads(payload):
    with pytest.raises(BadRequestError) as info:
        parse_request(AdminCreateDirRequest, payload)
    assert info.value.code == "bad_request"
    assert type(info.value) is BadRequestError


def test_file_response_to_dict_for_file():
    response = FileResponse(name="a.txt", is_dir=False, size=3, mime_type="text/plain; charset=utf-8")
    assert response.to_dict() == {
        "name": "a.txt",
        "is_dir": False,
        "size": 3,
        "mime_type": "text/plain; charset=utf-8",
    }


def test_file_response_to_dict_for_dir_serialises_nulls():
    encoded = json.dumps(FileResponse(name="docs", is_dir=True).to_dict())
    assert json.loads(encoded) == {"name": "docs", "is_dir": True, "size": None, "mime_type": None}