import pytest

from filestore.errors import (
    BadRequestError,
    DirExistError,
    DirNotFoundError,
    FileExistError,
    ForbiddenError,
    InvalidFileError,
    InvalidNewPathError,
    InvalidOldPathError,
    InvalidPathError,
    NewDirExistError,
    NewFileExistError,
    NotFoundError,
    OldDirNotFoundError,
    OldFileNotFoundError,
    ServiceError,
    StoredFileNotFoundError,
    UnauthorizedError,
)


@pytest.mark.parametrize(
    "cls, code",
    [
        (InvalidPathError, "bad_request:invalid_path"),
        (InvalidOldPathError, "bad_request:invalid_old_path"),
        (InvalidNewPathError, "bad_request:invalid_new_path"),
        (DirExistError, "bad_request:dir_exist"),
        (DirNotFoundError, "bad_request:dir_not_found"),
        (OldDirNotFoundError, "bad_request:old_dir_not_found"),
        (NewDirExistError, "bad_request:new_dir_exist"),
        (FileExistError, "bad_request:file_exist"),
        (StoredFileNotFoundError, "bad_request:file_not_found"),
        (OldFileNotFoundError, "bad_request:old_file_not_found"),
        (NewFileExistError, "bad_request:new_file_exist"),
    ],
)
def test_bad_request_codes(cls, code):
    error = cls()
    assert str(error) == code
    assert error.code == code
    assert error.status == 400
    assert isinstance(error, BadRequestError)


def test_invalid_file_code_is_prefixed():
    error = InvalidFileError()
    assert str(error).startswith("bad_request:")
    assert str(error).endswith("invalid_file")


@pytest.mark.parametrize(
    "cls, status",
    [
        (BadRequestError, 400),
        (UnauthorizedError, 401),
        (ForbiddenError, 403),
        (NotFoundError, 404),
        (ServiceError, 500),
    ],
)
def test_category_statuses(cls, status):
    assert cls().status == status


def test_bad_request_default_code():
    assert str(BadRequestError()) == "bad_request"


def test_explicit_code_overrides_default():
    error = ServiceError("custom_failure")
    assert str(error) == "custom_failure"
    assert error.args == ("custom_failure",)


def test_errors_are_catchable_as_service_error():
    error = DirExistError()
    assert error.code == "bad_request:dir_exist"
    assert error.status == 400
    with pytest.raises(ServiceError) as info:
        raise error
    assert info.value.code == "bad_request:dir_exist"
    assert str(info.value) == "bad_request:dir_exist"