# filestore

A small HTTP service, built on Flask, for managing directories and files under
a single local storage root. Every operation resolves paths strictly inside
that root and refuses path traversal (`..`), the root itself, symlinked parent
directories and other attempts to reach outside it.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running the server

```
filestore --root /var/data --host 127.0.0.1 --port 8080
```

Each option falls back to an environment variable:

| Option   | Environment variable    | Fallback when neither is set |
|----------|-------------------------|------------------------------|
| `--root` | `STORE_LOCAL_ROOT_PATH` | empty (the current directory) |
| `--host` | `SERVER_HOST`           | `0.0.0.0`                    |
| `--port` | `SERVER_PORT`           | `0`                          |

`LOG_LEVEL` (an integer, `-1` to `5`, lower is more verbose) sets the logging
level. The values are read by `filestore.settings.Settings.from_env`. The
server uses Flask's built-in development server and accepts request bodies of
up to 8 GiB (`filestore.settings.MAX_REQUEST_BODY_SIZE`).

## HTTP API

All endpoints live under `/admin` and take JSON bodies, except the upload,
which is a multipart form.

| Method | Path                | Body                                               | Success |
|--------|---------------------|----------------------------------------------------|---------|
| POST   | `/admin/dirs`       | `{"path": "docs"}`                                 | 201     |
| DELETE | `/admin/dirs`       | `{"path": "docs"}`                                 | 200     |
| PATCH  | `/admin/dirs`       | `{"old_path": "a", "new_path": "b"}`               | 200     |
| POST   | `/admin/files`      | multipart: `file` and `meta` (`{"path": "docs"}`)  | 201     |
| POST   | `/admin/files/list` | `{"path": "docs"}` (empty path lists the root)     | 200     |
| DELETE | `/admin/files`      | `{"path": "docs/a.txt"}`                           | 200     |
| PATCH  | `/admin/files`      | `{"old_path": "a.txt", "new_path": "b.txt"}`       | 200     |

Behaviour worth knowing:

- Creating a directory creates missing parents, with owner-only permissions.
- Deleting a directory removes it recursively, but refuses trees nested more
  than five levels deep and trees holding symlinks that point outside the root.
- Uploads go into an existing directory; the stored name is the last component
  of the uploaded file name, and an existing file is never overwritten.
- Listing returns directories first, then files, each group sorted by name.
  Files carry their size and a MIME type guessed from their first 512 bytes
  (`filestore.sniff.detect_content_type`):

```json
[
  {"name": "images", "is_dir": true, "size": null, "mime_type": null},
  {"name": "a.txt", "is_dir": false, "size": 5, "mime_type": "text/plain; charset=utf-8"}
]
```

Errors are answered as plain text. Request errors use status 400 with a body
such as `bad_request` (malformed JSON, missing upload), `bad_request:invalid_path`,
`bad_request:invalid_old_path`, `bad_request:dir_exist`,
`bad_request:dir_not_found`, `bad_request:file_exist` or
`bad_request:new_file_exist`. Storage failures and refused deletions (depth
limit, outward symlinks) answer with status 500.

## Using it as a library

```python
from filestore.app import create_app
from filestore.dirs_repository import DirsRepository
from filestore.files_repository import FilesRepository
from filestore.services import DirsService, FilesService

dirs = DirsService(DirsRepository("/var/data"))
dirs.create_dir("uploads")

files = FilesService(FilesRepository("/var/data"))
with open("report.pdf", "rb") as stream:
    files.create_file("uploads", "report.pdf", stream)

for entry in files.get_files("uploads"):
    print(entry.name, entry.size, entry.mime_type)

app = create_app("/var/data")  # a Flask application serving the API above
```

Request bodies can be parsed and checked on their own with
`filestore.requests.parse_request` and the `validate()` methods of the request
classes. Failures raise subclasses of `filestore.errors.ServiceError`, such as
`InvalidPathError`, `DirNotFoundError` or `FileExistError`; each carries its
`code` and HTTP `status`.

## What it does not do

- There is no authentication or authorisation: every `/admin` endpoint is open
  to anyone who can reach the server. Put it behind a proxy that checks callers.
- It does not register itself with a service registry, export metrics or
  traces, or serve API documentation.
- It does not read settings from a remote configuration store, only from the
  environment and the command line.