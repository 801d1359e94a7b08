"""Runtime settings of the file store service."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

USERS_SERVICE_NAME_KEY = "/users/serviceName"
USERS_ADMIN_ROLE_KEY = "/users/adminRole"
STORE_LOCAL_ROOT_PATH_KEY = "/store/local/rootPath"

COLLECT_RUNTIME_METRICS_TIMEOUT = 10.0
MAX_REQUEST_BODY_SIZE = 1024 * 1024 * 1024 * 8
READ_TIMEOUT = 10 * 60.0


def _env_int(environ: Mapping[str, str], name: str) -> int:
    raw = environ.get(name, "").strip()
    if not raw:
        return 0
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"environment variable {name} is not an integer: {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    """Configuration values the server needs to run."""

    store_local_root_path: str = ""
    users_service_name: str = ""
    users_admin_role: str = ""
    service_name: str = ""
    server_host: str = ""
    server_port: int = 0
    log_level: int = 0
    max_request_body_size: int = MAX_REQUEST_BODY_SIZE
    read_timeout: float = READ_TIMEOUT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from environment variables (``os.environ`` by default)."""
        env = os.environ if environ is None else environ
        return cls(
            store_local_root_path=env.get("STORE_LOCAL_ROOT_PATH", ""),
            users_service_name=env.get("USERS_SERVICE_NAME", ""),
            users_admin_role=env.get("USERS_ADMIN_ROLE", ""),
            service_name=env.get("SERVICE_NAME", ""),
            server_host=env.get("SERVER_HOST", ""),
            server_port=_env_int(env, "SERVER_PORT"),
            log_level=_env_int(env, "LOG_LEVEL"),
        )