"""HTTP application exposing the admin directory and file endpoints."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from flask import Flask, Response, jsonify, request

from .dirs_repository import DirsRepository
from .errors import BadRequestError, ServiceError
from .files_repository import FilesRepository
from .requests import (
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
from .services import DirsService, FilesService
from .settings import MAX_REQUEST_BODY_SIZE, Settings

logger = logging.getLogger(__name__)

_TEXT_PLAIN = "text/plain; charset=utf-8"

_LOG_LEVELS = {
    -1: logging.DEBUG,
    0: logging.DEBUG,
    1: logging.INFO,
    2: logging.WARNING,
    3: logging.ERROR,
    4: logging.CRITICAL,
    5: logging.CRITICAL,
}


def _empty(status: int) -> Response:
    return Response(b"", status=status, content_type=_TEXT_PLAIN)


def _error_response(error: ServiceError) -> Response:
    return Response(str(error), status=error.status, content_type=_TEXT_PLAIN)


def create_app(root: str) -> Flask:
    """Build the Flask application serving a store rooted at ``root``."""
    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = MAX_REQUEST_BODY_SIZE

    dirs = DirsService(DirsRepository(root))
    files = FilesService(FilesRepository(root))

    @app.errorhandler(ServiceError)
    def _handle_service_error(error: ServiceError) -> Response:
        return _error_response(error)

    @app.errorhandler(OSError)
    def _handle_os_error(error: OSError) -> Response:
        logger.error("storage failure: %s", error)
        return Response(str(error), status=500, content_type=_TEXT_PLAIN)

    @app.post("/admin/dirs")
    def admin_create_dir() -> Response:
        body = parse_request(AdminCreateDirRequest, request.get_data())
        body.validate()
        dirs.create_dir(body.path)
        return _empty(201)

    @app.delete("/admin/dirs")
    def admin_delete_dir() -> Response:
        body = parse_request(AdminDeleteDirRequest, request.get_data())
        body.validate()
        dirs.delete_dir(body.path)
        return _empty(200)

    @app.patch("/admin/dirs")
    def admin_rename_dir() -> Response:
        body = parse_request(AdminRenameDirRequest, request.get_data())
        body.validate()
        dirs.rename_dir(body.old_path, body.new_path)
        return _empty(200)

    @app.post("/admin/files")
    def admin_create_file() -> Response:
        upload = request.files.get("file")
        if upload is None:
            raise BadRequestError()
        meta = parse_request(AdminCreateFileRequest, request.form.get("meta", ""))
        files.create_file(meta.path, upload.filename or "", upload.stream)
        return _empty(201)

    @app.post("/admin/files/list")
    def admin_list_files() -> Response:
        body = parse_request(AdminListFilesRequest, request.get_data())
        entries = files.get_files(body.path)
        payload = [
            FileResponse(entry.name, entry.is_dir, entry.size, entry.mime_type).to_dict()
            for entry in entries
        ]
        response = jsonify(payload)
        response.status_code = 200
        return response

    @app.delete("/admin/files")
    def admin_delete_file() -> Response:
        body = parse_request(AdminDeleteFileRequest, request.get_data())
        body.validate()
        files.delete_file(body.path)
        return _empty(200)

    @app.patch("/admin/files")
    def admin_rename_file() -> Response:
        body = parse_request(AdminRenameFileRequest, request.get_data())
        body.validate()
        files.rename_file(body.old_path, body.new_path)
        return _empty(200)

    return app


def _parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filestore",
        description="Serve the admin file store over HTTP.",
    )
    parser.add_argument("--root", default=settings.store_local_root_path,
                        help="local storage root directory")
    parser.add_argument("--host", default=settings.server_host or "0.0.0.0",
                        help="address to listen on")
    parser.add_argument("--port", type=int, default=settings.server_port,
                        help="port to listen on")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the HTTP server; settings come from the environment and ``argv``."""
    settings = Settings.from_env()
    args = _parser(settings).parse_args(argv)
    logging.basicConfig(level=_LOG_LEVELS.get(settings.log_level, logging.INFO))

    app = create_app(args.root)
    try:
        app.run(host=args.host, port=args.port)
    except OSError as exc:
        logger.error("server failed: %s", exc)
        return 1
    return 0